# handlers/command_handlers.py

from handlers.graph_command import comm, dev, metrics
from handlers.misc_handlers import coins, help_command, ping_command, start


def register_commands(app):
    from telegram.ext import CommandHandler

     # Misc

    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("coins", coins))
    app.add_handler(CommandHandler("ping", ping_command))

     # Metric charts

    app.add_handler(CommandHandler("metrics", metrics))
    app.add_handler(CommandHandler("dev", dev))
    app.add_handler(CommandHandler("comm", comm))
