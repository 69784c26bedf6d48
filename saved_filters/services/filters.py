"""
Saved filter service: save, remove and list filter presets per UI view.

Every operation takes the SQLAlchemy session and the acting User explicitly.
A filter is addressed by (name, filter_view) among the records the user can
see: their own and any shared ones. Only the owner may change the shared flag
or delete a filter.
"""
import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from saved_filters.database import transactional
from saved_filters.errors import AuthenticationError, AuthorizationError
from saved_filters.i18n import translate
from saved_filters.models.saved_filter import SavedFilter
from saved_filters.services.visibility import visible_to, owned_first, is_owner

logger = logging.getLogger('saved_filters.services.filters')

NOT_ALLOWED_TO_REMOVE = 'You are not allowed to remove this filter'


@dataclass
class FilterCandidate:
    """Client-supplied filter fields; never persisted itself."""
    name: str
    filter_view: str
    title: Optional[str] = None
    filter_expression: Any = None
    filter_custom_expression: Optional[str] = None
    shared: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FilterCandidate':
        """Build a candidate from a JSON payload; ValueError on bad input."""
        if not isinstance(data, dict):
            raise ValueError('Payload must be a JSON object')

        name = _optional_str(data, 'name') or ''
        filter_view = _optional_str(data, 'filter_view') or ''
        if not name.strip():
            raise ValueError('Name is required')
        if not filter_view.strip():
            raise ValueError('Filter view is required')

        shared = data.get('shared')
        if shared is None:
            shared = False
        elif not isinstance(shared, bool):
            raise ValueError('shared must be true or false')

        return cls(
            name=name.strip(),
            filter_view=filter_view.strip(),
            title=_optional_str(data, 'title'),
            filter_expression=data.get('filter_expression'),
            filter_custom_expression=_optional_str(data, 'filter_custom_expression'),
            shared=shared,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _optional_str(data, key):
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f'{key} must be a string')
    return value


def _require_user(user):
    if user is None:
        raise AuthenticationError()
    return user


def find_filter(session, user, name: str, filter_view: str) -> Optional[SavedFilter]:
    """
    First filter named `name` in `filter_view` that user can see.

    The user's own record wins over another user's shared one; ties fall
    back to the lowest id.
    """
    return (
        session.query(SavedFilter)
        .filter(
            SavedFilter.name == name,
            SavedFilter.filter_view == filter_view,
            visible_to(SavedFilter, user),
        )
        .order_by(owned_first(SavedFilter, user), SavedFilter.id)
        .first()
    )


@transactional
def save_filter(session, user, candidate: FilterCandidate) -> SavedFilter:
    """
    Create or update the filter matching candidate's (name, filter_view).

    Title and both expressions are always copied from the candidate. The
    shared flag is copied only when user owns the record, so saving over
    someone else's shared filter cannot unshare it.
    """
    user = _require_user(user)
    saved = find_filter(session, user, candidate.name, candidate.filter_view)

    if saved is None:
        saved = SavedFilter(
            name=candidate.name,
            filter_view=candidate.filter_view,
            user_id=user.id,
            owner=user,
        )
        session.add(saved)
        created = True
    else:
        created = False

    saved.title = candidate.title
    saved.filter_expression = candidate.filter_expression
    saved.filter_custom_expression = candidate.filter_custom_expression

    if is_owner(saved, user):
        saved.shared = bool(candidate.shared)

    session.flush()
    logger.info(
        "%s filter %r (id=%s) in view %r for %s",
        'Created' if created else 'Updated', saved.name, saved.id, saved.filter_view, user.code,
    )
    return saved


@transactional
def remove_filter(session, user, candidate: FilterCandidate, locale: Optional[str] = None) -> FilterCandidate:
    """
    Delete the filter matching candidate's (name, filter_view).

    No match is a no-op. A match owned by someone else (visible because it
    is shared) raises AuthorizationError and is left in place. The candidate
    is returned unchanged either way.
    """
    user = _require_user(user)
    saved = find_filter(session, user, candidate.name, candidate.filter_view)

    if saved is None:
        logger.debug("No filter %r in view %r for %s, nothing to remove",
                     candidate.name, candidate.filter_view, user.code)
        return candidate

    if not is_owner(saved, user):
        logger.info("Refused removal of filter id=%s by non-owner %s", saved.id, user.code)
        raise AuthorizationError(translate(NOT_ALLOWED_TO_REMOVE, locale))

    session.delete(saved)
    logger.info("Removed filter %r (id=%s) from view %r", saved.name, saved.id, saved.filter_view)
    return candidate


def get_filters(session, user, filter_view: str) -> List[SavedFilter]:
    """Filters in filter_view owned by user or shared, oldest first."""
    user = _require_user(user)
    return (
        session.query(SavedFilter)
        .filter(
            SavedFilter.filter_view == filter_view,
            visible_to(SavedFilter, user),
        )
        .order_by(SavedFilter.id)
        .all()
    )
