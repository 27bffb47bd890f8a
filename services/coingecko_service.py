# services/coingecko_service.py
import logging
import time
import requests
from config import COINGECKO_URL, HEADERS, REQUEST_TIMEOUT, REQUEST_RETRIES, RETRY_DELAY


def get_api_response(params, url=COINGECKO_URL, query=None):
    """Return the parsed JSON body of GET url + params.

    Retries REQUEST_RETRIES times on connection errors and bad status codes,
    then re-raises the last error for the caller to handle.
    """
    attempts = REQUEST_RETRIES + 1

    for attempt in range(1, attempts + 1):
        try:
            response = requests.get(url + params, params=query, headers=HEADERS, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            if attempt == attempts:
                raise
            logging.warning(f"Request to {params} failed ({e}), retry {attempt}/{REQUEST_RETRIES}")
            time.sleep(RETRY_DELAY)


def ping():
    """Check the API is reachable. Returns the gecko_says message or None."""
    try:
        data = get_api_response("/ping")
        return data.get("gecko_says")
    except Exception as e:
        logging.error(f"CoinGecko ping failed: {e}")
        return None
