"""
handlers/start_handler.py
--------------------------
Handles /start, /help and /myid.
"""

from telegram import Update
from telegram.ext import ContextTypes

from config import SITE_NAME
from security.auth import is_admin
from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = """
*📖 Browse*
/home - landing page and featured work
/projects - all projects
/project <slug> - one project and related work
/about - bio, skills and experience
/contact - how to get in touch
/myid - your Telegram id

*🛠️ Edit (site owner only)*
/admin - ids of everything editable
/add\\_project <json> - create a project
/edit\\_project <id> <json> - change some fields of a project
/delete\\_project <id> - remove a project
/set\\_about <json> - create or update the about section
/delete\\_about - remove the about section
/set\\_contact <json> - create or update contact details
/delete\\_contact - remove contact details
"""


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start - greet the visitor and list the commands."""
    user = update.effective_user
    logger.info(f"User {user.id} ({user.first_name}) opened the bot.")
    greeting = f"👋 Welcome to {SITE_NAME}!\n"
    if is_admin(user.id):
        greeting += "You can edit this portfolio.\n"
    await update.message.reply_text(greeting + HELP_TEXT, parse_mode="Markdown")


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help - show all available commands."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")


async def myid_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /myid - show the user's Telegram ID for whitelisting."""
    user = update.effective_user
    await update.message.reply_text(
        f"🆔 Your id: `{user.id}`\n"
        f"Add it to `ADMIN_USER_IDS` in `.env` to allow editing.",
        parse_mode="Markdown",
    )
