"""
handlers/admin_handler.py
--------------------------
Editing commands for the site owner.
Payloads are JSON written after the command, e.g.

    /edit_project 0b1c... {"featured": true}
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.page_handler import portfolio_service
from security.auth import admin_only
from services.payloads import parse_json_object
from utils.logger import get_logger

logger = get_logger(__name__)

_PROJECT_EXAMPLE = (
    '/add_project {"title": "Logo Set", "slug": "logo-set", "category": "branding", '
    '"tags": ["logo", "brand"], "thumbnail": {"url": "a.png"}, '
    '"images": [{"url": "a.png"}], "description": "..."}'
)


def _command_body(update: Update, skip: int = 1) -> list[str]:
    """Split the message into the command, `skip - 1` words, and the rest."""
    return (update.message.text or "").split(maxsplit=skip)


@admin_only
async def admin_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /admin - overview with ids for editing."""
    await update.message.reply_text(portfolio_service.admin_page(), parse_mode="Markdown")


@admin_only
async def add_project_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /add_project <json>."""
    parts = _command_body(update)
    if len(parts) < 2:
        await update.message.reply_text(f"➕ Usage:\n{_PROJECT_EXAMPLE}")
        return

    try:
        msg = portfolio_service.create_project(parse_json_object(parts[1]))
    except ValueError as e:
        msg = f"⚠️ {e}"
    await update.message.reply_text(msg)


@admin_only
async def edit_project_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /edit_project <id> <json> - only the given fields change.
    Usage: /edit_project <id> {"featured": true, "year": 2024}
    """
    parts = _command_body(update, skip=2)
    if len(parts) < 3:
        await update.message.reply_text(
            "✏️ Usage: /edit_project <id> <json>\n"
            'Example: /edit_project <id> {"featured": true}\n'
            "Ids are listed in /admin."
        )
        return

    try:
        msg = portfolio_service.edit_project(parts[1], parse_json_object(parts[2]))
    except ValueError as e:
        msg = f"⚠️ {e}"
    await update.message.reply_text(msg)


@admin_only
async def delete_project_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /delete_project <id>."""
    if not context.args:
        await update.message.reply_text("⚠️ Usage: /delete_project <id>\nIds are listed in /admin.")
        return
    await update.message.reply_text(portfolio_service.delete_project(context.args[0]))


@admin_only
async def set_about_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /set_about <json>.
    Example: /set_about {"bio": "Designer in Lisbon", "skills": ["Branding"]}
    """
    parts = _command_body(update)
    if len(parts) < 2:
        await update.message.reply_text(
            '📝 Usage: /set_about {"bio": "...", "skills": ["..."], '
            '"experience": [{"company": "...", "role": "...", "start": "2020"}], '
            '"hero": {"headline": "..."}}'
        )
        return

    try:
        msg = portfolio_service.save_about(parse_json_object(parts[1]))
    except ValueError as e:
        msg = f"⚠️ {e}"
    await update.message.reply_text(msg)


@admin_only
async def delete_about_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /delete_about."""
    await update.message.reply_text(portfolio_service.delete_about())


@admin_only
async def set_contact_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /set_contact <json>.
    Example: /set_contact {"email": "me@example.com", "socials": {"behance": "https://..."}}
    """
    parts = _command_body(update)
    if len(parts) < 2:
        await update.message.reply_text(
            '📇 Usage: /set_contact {"email": "...", "phone": "...", '
            '"socials": {"instagram": "https://..."}, "address": "..."}'
        )
        return

    try:
        msg = portfolio_service.save_contact(parse_json_object(parts[1]))
    except ValueError as e:
        msg = f"⚠️ {e}"
    await update.message.reply_text(msg)


@admin_only
async def delete_contact_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /delete_contact."""
    await update.message.reply_text(portfolio_service.delete_contact())
