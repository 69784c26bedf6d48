"""
Message translation over the .po catalogs shipped in LOCALE_DIR.

Catalogs live in LOCALE_DIR/<locale>/LC_MESSAGES/saved_filters.po and are
parsed with Babel on first use. A missing catalog or an untranslated entry
falls back to the message key.
"""
import functools
import logging
import os

from babel.messages.pofile import read_po

from saved_filters.config import DEFAULT_LOCALE, GETTEXT_DOMAIN, LOCALE_DIR

logger = logging.getLogger('saved_filters.i18n')


def catalog_path(locale):
    return os.path.join(LOCALE_DIR, locale, 'LC_MESSAGES', f'{GETTEXT_DOMAIN}.po')


@functools.lru_cache(maxsize=None)
def _catalog(locale):
    path = catalog_path(locale)
    if not os.path.exists(path):
        logger.debug("No %s catalog for locale %r, using message keys", GETTEXT_DOMAIN, locale)
        return None
    with open(path, 'rb') as f:
        return read_po(f, locale=locale, domain=GETTEXT_DOMAIN)


def translate(key, locale=None):
    """Return key translated into locale (DEFAULT_LOCALE when None)."""
    catalog = _catalog(locale or DEFAULT_LOCALE)
    if catalog is None:
        return key
    message = catalog.get(key)
    if message is None or not message.string:
        return key
    return message.string
