"""
security/auth.py
-----------------
Whitelist guard for the bot's editing commands.
Read-only pages are public; anything that writes requires the sender
to be listed in ADMIN_USER_IDS.
"""

from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

import config
from utils.logger import get_logger

logger = get_logger(__name__)


def is_admin(user_id: int) -> bool:
    """True if the user may edit content. An empty whitelist allows everyone (dev mode)."""
    return not config.ADMIN_USER_IDS or user_id in config.ADMIN_USER_IDS


def admin_only(func: Callable):
    """
    Decorator that restricts a handler to whitelisted editors.

    Usage:
        @admin_only
        async def my_handler(update, context):
            ...
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if not is_admin(user.id):
            logger.warning(
                f"🚫 Blocked edit attempt: user_id={user.id}, "
                f"username={user.username}, command={update.message.text!r}"
            )
            await update.message.reply_text("⛔ Only the site owner can edit the portfolio.")
            return

        return await func(update, context, *args, **kwargs)

    return wrapper
