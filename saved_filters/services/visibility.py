"""
Query predicates for models using OwnedSharedMixin.

owned_by() and is_shared() are independent filters; visible_to() combines
them into "mine or shared". All take the model class so the same predicates
scope any owner/shared entity, not just SavedFilter.
"""
from sqlalchemy import or_, case


def owned_by(model, user):
    """Rows owned by user."""
    return model.user_id == user.id


def is_shared(model):
    """Rows flagged as shared with everyone."""
    return model.shared.is_(True)


def visible_to(model, user):
    """Rows user may see: their own plus anything shared."""
    return or_(owned_by(model, user), is_shared(model))


def owned_first(model, user):
    """Sort key putting the user's own rows ahead of other users' shared rows."""
    return case((owned_by(model, user), 0), else_=1)


def is_owner(record, user):
    """True when record belongs to user. Works before the record is flushed."""
    owner_id = record.user_id
    if owner_id is None and record.owner is not None:
        owner_id = record.owner.id
    return owner_id is not None and owner_id == user.id
