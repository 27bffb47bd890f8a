import argparse, logging, os, sys
from config import CURRENCIES, DEFAULT_CURRENCY, DATA_DIR
from services.coin_list_service import load_coin_list
from services.coingecko_service import ping
from utils.chart_utils import build_charts
from utils.file_utils import remove_old_files


def save_charts(currency, out_dir, coin_list):
    os.makedirs(out_dir, exist_ok=True)
    paths = []
    for kind, bio in build_charts(currency, coin_list).items():
        path = os.path.join(out_dir, f"{currency.upper()}_{kind}.png")
        with open(path, "wb") as f:
            f.write(bio.getvalue())
        paths.append(path)
    return paths


def main(argv=None):
    parser = argparse.ArgumentParser(description="Developer and community metrics charts")
    parser.add_argument("currency", nargs="?", help=f"ticker symbol (default: {DEFAULT_CURRENCY})")
    parser.add_argument("--out", default="charts", help="directory for the PNG charts")
    parser.add_argument("--data-dir", default=DATA_DIR)
    parser.add_argument("--list", action="store_true", help="print tracked currencies and exit")
    parser.add_argument("--cleanup", action="store_true", help="remove data files from previous days")
    parser.add_argument("--ping", action="store_true", help="check the CoinGecko API and exit")
    args = parser.parse_args(argv)

    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s', level=logging.INFO)

    if args.list:
        print("\n".join(CURRENCIES))
        return 0

    if args.ping:
        status = ping()
        print(status or "CoinGecko API is not reachable")
        return 0 if status else 1

    if args.cleanup:
        removed = remove_old_files(args.data_dir)
        print(f"Removed {len(removed)} old file(s)")
        if args.currency is None:
            return 0

    coin_list = load_coin_list(args.data_dir)
    if not coin_list:
        print("ERROR: could not load the list of coins", file=sys.stderr)
        return 1

    for path in save_charts(args.currency or DEFAULT_CURRENCY, args.out, coin_list):
        print(f"Chart saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
