import logging

from telegram.ext import Application, ApplicationBuilder
from http.server import BaseHTTPRequestHandler, HTTPServer
import threading

# Load config
from config import TELEGRAM_BOT_TOKEN, CLEANUP_INTERVAL_HOURS, DASHBOARD_PORT, HEALTH_PORT

# Load handlers
from handlers.command_handlers import register_commands
from handlers.job_handlers import daily_cleanup
from handlers.error_handler import error_handler
from utils.file_utils import remove_old_files

# Setup logging
logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s', level=logging.INFO)


async def start_scheduler(app: Application):
    # Start scheduler inside the bot's event loop
    from apscheduler.schedulers.asyncio import AsyncIOScheduler
    scheduler = AsyncIOScheduler()
    scheduler.add_job(daily_cleanup, 'interval', hours=CLEANUP_INTERVAL_HOURS)
    scheduler.start()
    app.bot_data["scheduler"] = scheduler


def main():
    # Initialize bot
    app = ApplicationBuilder().token(TELEGRAM_BOT_TOKEN).post_init(start_scheduler).build()
    app.add_error_handler(error_handler)

    # Register all command handlers
    register_commands(app)

    print("Bot started...")

    # Run the bot, blocks until Ctrl+C
    app.run_polling(drop_pending_updates=True, poll_interval=5)


class HealthCheckHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        self.send_response(200)
        self.end_headers()
        self.wfile.write(b"Dev Pulse Bot is running")

    def do_HEAD(self):
        self.send_response(200)
        self.end_headers()

    def log_message(self, format, *args):
        return  # Keep health probes out of the bot log


def start_health_server(port=HEALTH_PORT):
    """Serve 200 OK on port for the hosting platform's liveness checks."""
    server = HTTPServer(('0.0.0.0', port), HealthCheckHandler)
    threading.Thread(target=server.serve_forever, daemon=True).start()
    logging.info(f"Health check listening on port {port}")
    return server


def start_dashboard(port=DASHBOARD_PORT):
    try:
        from dashboard.app import dashboard_app
        threading.Thread(target=lambda: dashboard_app.run(port=port), daemon=True).start()
    except Exception as e:
        logging.warning(f"Dashboard failed to start: {e}")


if __name__ == "__main__":
    # Cleanup data files from previous days
    remove_old_files()

    server = start_health_server()
    start_dashboard()

    try:
        main()
    finally:
        print("Shutting down gracefully...")
        server.shutdown()
