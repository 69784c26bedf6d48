"""
Centralized configuration: all env vars and constants.
"""
import os


# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FORMAT = os.getenv('LOG_FORMAT', 'text')

# ── Database ──────────────────────────────────────────────────────────────────
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///local.db')

# ── Auth ─────────────────────────────────────────────────────────────────────
SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')
DASHBOARD_PASSWORD = os.getenv('DASHBOARD_PASSWORD')

# ── Localization ─────────────────────────────────────────────────────────────
DEFAULT_LOCALE = os.getenv('DEFAULT_LOCALE', 'en')
SUPPORTED_LOCALES = [
    loc.strip() for loc in os.getenv('SUPPORTED_LOCALES', 'en,fr,de').split(',') if loc.strip()
]
LOCALE_DIR = os.getenv('LOCALE_DIR', os.path.join(os.path.dirname(__file__), 'locale'))
GETTEXT_DOMAIN = 'saved_filters'
