# handlers/error_handler.py

import logging
from telegram._update import Update
from telegram.ext import ContextTypes

async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log the error and tell the user the request failed."""
    logging.error(f"Update {update} caused error {context.error}", exc_info=context.error)

    if isinstance(update, Update) and update.effective_message:
        try:
            await update.effective_message.reply_text("⚠️ Something went wrong, try again later.")
        except Exception as e:
            logging.error(f"Failed to notify user about error: {e}")
