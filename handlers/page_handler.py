"""
handlers/page_handler.py
-------------------------
Public, read-only portfolio pages.
Delegates rendering and caching to PortfolioService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from services.portfolio_service import PortfolioService
from utils.logger import get_logger

logger = get_logger(__name__)
portfolio_service = PortfolioService()


async def home_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /home - hero banner and featured projects."""
    await update.message.reply_text(portfolio_service.home_page(), parse_mode="Markdown")


async def projects_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /projects - list every project."""
    await update.message.reply_text(portfolio_service.projects_page(), parse_mode="Markdown")


async def project_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /project <slug> - show one project with related work.
    Usage: /project logo-set
    """
    if not context.args:
        await update.message.reply_text("⚠️ Usage: /project <slug>\nExample: /project logo-set")
        return

    slug = context.args[0]
    page = portfolio_service.project_page(slug)
    if page is None:
        await update.message.reply_text(f"🤔 No project called '{slug}'. Try /projects.")
        return
    await update.message.reply_text(page, parse_mode="Markdown")


async def about_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /about - bio, skills and experience timeline."""
    await update.message.reply_text(portfolio_service.about_page(), parse_mode="Markdown")


async def contact_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /contact - contact details and social links."""
    await update.message.reply_text(portfolio_service.contact_page(), parse_mode="Markdown")
