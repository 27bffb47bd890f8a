# handlers/graph_command.py
import asyncio
import logging
from telegram import Update
from telegram.ext import ContextTypes
from services.coin_list_service import load_coin_list
from services.metrics_service import get_dev_comm_data
from utils.chart_utils import build_chart

CAPTIONS = {
    "dev": "🛠 {symbol} Developer Metrics",
    "comm": "👥 {symbol} Community Metrics",
}


async def send_metric_charts(update: Update, context: ContextTypes.DEFAULT_TYPE, kinds, command):
    if len(context.args) != 1:
        await update.message.reply_text(f"Usage: /{command} <coin> (e.g., /{command} btc)")
        return

    coin_arg = context.args[0].lower()
    symbol = coin_arg.upper()

    # Network and matplotlib work runs off the event loop
    coin_list = await asyncio.to_thread(load_coin_list)
    if not coin_list:
        await update.message.reply_text("Could not load the list of coins. Try again later.")
        return

    dev_table, comm_table = await asyncio.to_thread(get_dev_comm_data, coin_arg, coin_list)
    tables = {"dev": dev_table, "comm": comm_table}

    if not dev_table and not comm_table:
        await update.message.reply_text(f"No developer or community data found for {symbol}")
        return

    for kind in kinds:
        if not tables[kind]:
            logging.info(f"No {kind} data for {symbol}, chart skipped")
            await update.message.reply_text(f"No {kind} data available for {symbol}")
            continue

        bio = await asyncio.to_thread(build_chart, symbol, kind, dev_table, comm_table)
        await update.message.reply_photo(photo=bio, caption=CAPTIONS[kind].format(symbol=symbol))


async def dev(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await send_metric_charts(update, context, ("dev",), "dev")


async def comm(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await send_metric_charts(update, context, ("comm",), "comm")


async def metrics(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await send_metric_charts(update, context, ("dev", "comm"), "metrics")
