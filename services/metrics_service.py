# services/metrics_service.py

import logging
from numbers import Number
from services.coingecko_service import get_api_response
from services.coin_list_service import resolve_coin_id

COIN_DETAIL_QUERY = {
    "localization": "false",
    "tickers": "false",
    "market_data": "false",
}


def value_length(value):
    # Bare numbers count as a single element
    if isinstance(value, Number):
        return 1
    try:
        return len(value)
    except TypeError:
        return 0


def dict_to_table(data_dict):
    """Collect the key/value pairs whose value is a single number, hence suitable for plotting."""
    table = []

    for key, value in data_dict.items():
        if value is None or value_length(value) != 1:
            continue
        try:
            table.append({"metric": key, "value": float(value)})
        except (TypeError, ValueError):
            logging.debug(f"Skipping non-numeric metric {key}: {value!r}")

    return table


def get_section(coin_dict, section):
    data = coin_dict.get(section)
    if not isinstance(data, dict):
        logging.info(f"Could not find {section.replace('_', ' ')}!")
        return {}
    return data


def get_dev_comm_data(currency, coin_list):
    """Return (developer table, community table) for a lower-case ticker."""
    coin_id = resolve_coin_id(currency, coin_list)
    if not coin_id:
        logging.warning(f"No coin id for {currency}, skipping metrics fetch")
        return [], []

    coin_dict = {}
    try:
        logging.info("Fetching coin data from CoinGecko")
        coin_dict = get_api_response(f"/coins/{coin_id}", query=COIN_DETAIL_QUERY)
    except Exception as e:
        logging.error(f"Could not fetch data for {coin_id}, try again later! ({e})")

    if not isinstance(coin_dict, dict):
        coin_dict = {}

    dev_table = dict_to_table(get_section(coin_dict, "developer_data"))
    comm_table = dict_to_table(get_section(coin_dict, "community_data"))

    return dev_table, comm_table


def get_metric(table, metric):
    for row in table:
        if row["metric"] == metric:
            return row["value"]
    return None


def activity_ratio(dev_table):
    """closed_issues / total_issues, rounded to 2 decimals. None if not computable."""
    closed = get_metric(dev_table, "closed_issues")
    total = get_metric(dev_table, "total_issues")
    if closed is None or not total:
        return None
    return round(closed / total, 2)
