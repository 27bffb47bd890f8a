# services/coin_list_service.py

import csv
import logging
import os
import tempfile
from datetime import date
from config import DATA_DIR, COIN_LIST_PREFIX
from services.coingecko_service import get_api_response

COIN_LIST_FIELDS = ["id", "symbol", "name"]


def coin_list_path(data_dir=DATA_DIR, today=None):
    today = today or date.today()
    return os.path.join(data_dir, f"{COIN_LIST_PREFIX}{today.isoformat()}.csv")


def read_coin_list(filepath):
    with open(filepath, newline="", encoding="utf-8") as f:
        return [
            {field: row.get(field) or "" for field in COIN_LIST_FIELDS}
            for row in csv.DictReader(f)
        ]


def write_coin_list(filepath, coins):
    """Write the coin list next to filepath, then move it into place.

    A partial write never shows up under filepath.
    """
    fd, tmp_path = tempfile.mkstemp(
        dir=os.path.dirname(filepath) or ".",
        prefix=os.path.basename(filepath) + ".",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=COIN_LIST_FIELDS, extrasaction="ignore")
            writer.writeheader()
            writer.writerows(coins)
        os.replace(tmp_path, filepath)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def load_coin_list(data_dir=DATA_DIR, today=None):
    """Return today's list of all coins, reading the CSV cache when present.

    On a cache miss the full list is fetched from CoinGecko and written to
    data_dir/List_of_all_coins_<date>.csv. A failed fetch returns [].
    """
    if os.path.isdir(data_dir):
        logging.info(f"{data_dir} folder exists, cleanup action will be performed!")
    else:
        os.makedirs(data_dir, exist_ok=True)
        logging.info(f"New {data_dir} folder has been created")

    filepath = coin_list_path(data_dir, today)

    if os.path.isfile(filepath):
        logging.info("Reading list of coins from CSV file on disk")
        return read_coin_list(filepath)

    try:
        logging.info("Fetching list of coins from CoinGecko")
        raw = get_api_response("/coins/list")
        coins = [
            {field: str(entry.get(field) or "") for field in COIN_LIST_FIELDS}
            for entry in raw
        ]
    except Exception as e:
        logging.error(f"Could not fetch data, try again later! ({e})")
        return []

    if not coins:
        logging.warning("CoinGecko returned an empty list of coins, not caching it")
        return coins

    try:
        write_coin_list(filepath, coins)
    except OSError as e:
        logging.warning(f"Could not cache list of coins to {filepath}: {e}")

    return coins


def resolve_coin_id(symbol, coin_list):
    """Map a lower-case ticker symbol to a CoinGecko coin id.

    With several matches, ids without "-" are preferred, then names
    without "-"; when neither narrows the set the first match wins.
    Returns "" when the symbol is unknown.
    """
    matches = [coin for coin in coin_list if coin["symbol"] == symbol]

    if not matches:
        logging.info(f"Could not find an id for the given currency: {symbol}")
        return ""

    if len(matches) == 1:
        return matches[0]["id"]

    preferred = [coin for coin in matches if "-" not in coin["id"]]
    if not preferred:
        preferred = [coin for coin in matches if "-" not in coin["name"]]
    if not preferred:
        preferred = matches

    return preferred[0]["id"]
