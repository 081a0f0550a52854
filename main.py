"""
main.py
-------
Entry point for the portfolio bot.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Subscribe the page cache to post-commit revalidation.
    - Configure and start the Telegram bot with all handlers.
"""

from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import TELEGRAM_BOT_TOKEN
from db.connection import close_pool, init_pool
from db.init_db import create_tables
from handlers.admin_handler import (
    add_project_command,
    admin_command,
    delete_about_command,
    delete_contact_command,
    delete_project_command,
    edit_project_command,
    set_about_command,
    set_contact_command,
)
from handlers.page_handler import (
    about_command,
    contact_command,
    home_command,
    project_command,
    projects_command,
)
from handlers.start_handler import help_command, myid_command, start_command
from services import revalidation
from services.page_cache import page_cache
from utils.logger import get_logger

logger = get_logger(__name__)

COMMANDS = {
    "start": start_command,
    "help": help_command,
    "myid": myid_command,
    "home": home_command,
    "projects": projects_command,
    "project": project_command,
    "about": about_command,
    "contact": contact_command,
    "admin": admin_command,
    "add_project": add_project_command,
    "edit_project": edit_project_command,
    "delete_project": delete_project_command,
    "set_about": set_about_command,
    "delete_about": delete_about_command,
    "set_contact": set_contact_command,
    "delete_contact": delete_contact_command,
}


async def set_bot_commands(application: Application) -> None:
    """Register the public commands menu in Telegram on startup."""
    commands = [
        BotCommand("home", "🏠 Home and featured work"),
        BotCommand("projects", "🗂️ All projects"),
        BotCommand("project", "🔎 One project by slug"),
        BotCommand("about", "🙋 About me"),
        BotCommand("contact", "✉️ Contact"),
        BotCommand("help", "📖 Help"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered.")


def build_application() -> Application:
    """Create the Telegram application with every command handler attached."""
    app = Application.builder().token(TELEGRAM_BOT_TOKEN).post_init(set_bot_commands).build()
    for name, callback in COMMANDS.items():
        app.add_handler(CommandHandler(name, callback))
    return app


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()

    # ── 2. Cached pages follow committed writes ───────────
    revalidation.subscribe(page_cache.invalidate)

    # ── 3. Start polling ──────────────────────────────────
    logger.info("Starting Telegram bot...")
    app = build_application()
    logger.info("🚀 Portfolio bot is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message"])

    # ── 4. Cleanup on shutdown ────────────────────────────
    revalidation.unsubscribe(page_cache.invalidate)
    close_pool()
    logger.info("Portfolio bot stopped.")


if __name__ == "__main__":
    main()
