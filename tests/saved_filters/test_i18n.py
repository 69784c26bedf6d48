"""Tests for saved_filters.i18n.translate against the shipped catalogs."""
from unittest.mock import patch

import pytest

from saved_filters import i18n
from saved_filters.i18n import translate, catalog_path
from saved_filters.services.filters import NOT_ALLOWED_TO_REMOVE


@pytest.fixture(autouse=True)
def _clear_catalog_cache():
    i18n._catalog.cache_clear()
    yield
    i18n._catalog.cache_clear()


class TestTranslate:
    """translate() reads LOCALE_DIR/<locale>/LC_MESSAGES/saved_filters.po."""

    def test_french_catalog(self):
        assert translate(NOT_ALLOWED_TO_REMOVE, 'fr') == "Vous n'êtes pas autorisé à supprimer ce filtre"

    def test_german_catalog(self):
        assert translate('Authentication required', 'de') == 'Anmeldung erforderlich'

    def test_missing_catalog_returns_key(self):
        assert translate(NOT_ALLOWED_TO_REMOVE, 'xx') == NOT_ALLOWED_TO_REMOVE

    def test_unknown_message_returns_key(self):
        assert translate('Not in any catalog', 'fr') == 'Not in any catalog'

    def test_none_locale_uses_default(self):
        with patch('saved_filters.i18n.DEFAULT_LOCALE', 'fr'):
            assert translate('Authentication required') == 'Authentification requise'

    def test_english_default_has_no_catalog(self):
        assert translate(NOT_ALLOWED_TO_REMOVE, 'en') == NOT_ALLOWED_TO_REMOVE

    def test_catalog_parsed_once_per_locale(self):
        with patch('saved_filters.i18n.read_po', wraps=i18n.read_po) as mock_read:
            translate('a', 'fr')
            translate('b', 'fr')
        assert mock_read.call_count == 1

    def test_catalog_path_layout(self):
        path = catalog_path('fr')
        assert path.endswith('fr/LC_MESSAGES/saved_filters.po') or \
            path.endswith('fr\\LC_MESSAGES\\saved_filters.po')
