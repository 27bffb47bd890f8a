# handlers/misc_handlers.py

import asyncio
from telegram._update import Update
from telegram.ext import ContextTypes
from config import CURRENCIES
from services.coingecko_service import ping


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text("Welcome to Dev Pulse Bot!\n\n"
                                    "Use /metrics <coin> to see developer and community charts.\n"
                                    "Examples:\n"
                                    "  /metrics btc\n"
                                    "  /dev eth\n"
                                    "  /comm sol\n\n"
                                    "Not sure what to pick?\n"
                                    "  /coins - list of tracked currencies")


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    msg = "*Available Commands*\n\n"
    msg += "/start \\- Start the bot\n"
    msg += "/metrics <coin\\> \\- Developer and community charts\n"
    msg += "/dev <coin\\> \\- Developer metrics chart\n"
    msg += "/comm <coin\\> \\- Community metrics chart\n"
    msg += "/coins \\- Tracked currencies\n"
    msg += "/ping \\- Check the CoinGecko API"

    await update.message.reply_text(msg, parse_mode="MarkdownV2")


async def coins(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text("📋 Tracked currencies:\n\n" + ", ".join(CURRENCIES))


async def ping_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    status = await asyncio.to_thread(ping)
    if status:
        await update.message.reply_text(f"✅ CoinGecko: {status}")
    else:
        await update.message.reply_text("❌ CoinGecko API is not reachable right now.")
