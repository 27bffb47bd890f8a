# config.py

from dotenv import load_dotenv
import os

load_dotenv()

# Telegram bot token
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")

# CoinGecko API
COINGECKO_URL = os.getenv("COINGECKO_URL", "https://api.coingecko.com/api/v3")
COINGECKO_API_KEY = os.getenv("COINGECKO_API_KEY")

# Headers for API requests
HEADERS = {
    "User-Agent": "DevPulseBot/1.0",
    "Accept": "application/json"
}
if COINGECKO_API_KEY:
    HEADERS["x-cg-demo-api-key"] = COINGECKO_API_KEY

REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "10"))
REQUEST_RETRIES = int(os.getenv("REQUEST_RETRIES", "2"))
RETRY_DELAY = float(os.getenv("RETRY_DELAY", "5"))

# Daily coin list cache
DATA_DIR = os.getenv("DATA_DIR", "data")
COIN_LIST_PREFIX = "List_of_all_coins_"
CLEANUP_INTERVAL_HOURS = int(os.getenv("CLEANUP_INTERVAL_HOURS", "24"))

# Ports
DASHBOARD_PORT = int(os.getenv("DASHBOARD_PORT", "5001"))
HEALTH_PORT = int(os.getenv("HEALTH_PORT", "8080"))

# Currencies offered in the selectors
CURRENCIES = sorted([
    "BTC", "LTC", "BCH", "ETH", "KNC", "LINK", "ETC", "BNB", "ADA", "XTZ",
    "EOS", "XRP", "XLM", "ZEC", "DASH", "XMR", "DOT", "UNI", "SOL", "MATIC",
    "THETA", "OMG", "ALGO", "GRT", "AAVE", "FIL", "BAT", "ZRX", "COMP"
])
DEFAULT_CURRENCY = "BTC"
