# handlers/job_handlers.py

import asyncio
import logging
from services.coin_list_service import load_coin_list
from utils.file_utils import remove_old_files


async def daily_cleanup():
    """Drop stale data files and warm today's coin list cache."""
    logging.info("Running scheduled cache cleanup...")

    removed = await asyncio.to_thread(remove_old_files)
    coin_list = await asyncio.to_thread(load_coin_list)

    if coin_list:
        logging.info(f"Coin list ready: {len(coin_list)} coins, {len(removed)} old file(s) removed")
    else:
        logging.warning("Coin list could not be refreshed. Will retry on next run.")
