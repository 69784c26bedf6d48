"""
Saved filters API: list, save and remove filter presets for a UI view.
"""
import logging
from flask import Blueprint, request, jsonify

from saved_filters.auth import current_user
from saved_filters.config import SUPPORTED_LOCALES
from saved_filters.database import get_session
from saved_filters.errors import AuthenticationError
from saved_filters.services.filters import (
    FilterCandidate,
    save_filter,
    remove_filter,
    get_filters,
)

logger = logging.getLogger('saved_filters.routes.filters')

bp = Blueprint('filters', __name__)


def _request_locale():
    return request.accept_languages.best_match(SUPPORTED_LOCALES)


def _json_payload():
    payload = request.get_json(silent=True)
    return {} if payload is None else payload


def _require_user(db_session):
    user = current_user(db_session)
    if user is None:
        raise AuthenticationError()
    return user


@bp.route('/api/filters')
def list_filters():
    """List filters visible to the current user for ?view=."""
    session = get_session()
    try:
        user = _require_user(session)
        filter_view = (request.args.get('view') or '').strip()
        if not filter_view:
            return jsonify({'error': 'view is required'}), 400

        return jsonify([f.to_dict() for f in get_filters(session, user, filter_view)])
    finally:
        session.close()


@bp.route('/api/filters', methods=['POST'])
def upsert_filter():
    """Create or update a filter by (name, filter_view)."""
    session = get_session()
    try:
        user = _require_user(session)
        try:
            candidate = FilterCandidate.from_dict(_json_payload())
        except ValueError as e:
            return jsonify({'error': str(e)}), 400

        saved = save_filter(session, user, candidate)
        return jsonify(saved.to_dict())
    finally:
        session.close()


@bp.route('/api/filters/remove', methods=['POST'])
def delete_filter():
    """Remove the caller's filter by (name, filter_view); echoes the request back."""
    session = get_session()
    try:
        user = _require_user(session)
        try:
            candidate = FilterCandidate.from_dict(_json_payload())
        except ValueError as e:
            return jsonify({'error': str(e)}), 400

        removed = remove_filter(session, user, candidate, locale=_request_locale())
        return jsonify(removed.to_dict())
    finally:
        session.close()
