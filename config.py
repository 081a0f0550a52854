"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Site ──────────────────────────────────────────────────
SITE_NAME: str = os.getenv("SITE_NAME", "Portfolio")

# ── Telegram (admin bot) ──────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "portfolio")
DB_USER: str = os.getenv("DB_USER", "portfolio_user")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = os.getenv("DATABASE_URL") or (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "5"))

# ── Admin whitelist ───────────────────────────────────────
_raw_ids = os.getenv("ADMIN_USER_IDS", "")
ADMIN_USER_IDS: list[int] = (
    [int(uid.strip()) for uid in _raw_ids.split(",") if uid.strip()]
    if _raw_ids
    else []
)

# ── Listings ──────────────────────────────────────────────
RELATED_PROJECTS_LIMIT: int = int(os.getenv("RELATED_PROJECTS_LIMIT", "3"))
FEATURED_PROJECTS_LIMIT: int = int(os.getenv("FEATURED_PROJECTS_LIMIT", "3"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
