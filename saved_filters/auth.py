"""
Session-cookie identity: login provisioning and current-user lookup.
"""
import logging

from flask import session as cookie_session

from saved_filters.models.user import User

logger = logging.getLogger('saved_filters.auth')

SESSION_USER_KEY = 'user_code'


def get_or_create_user(db_session, code, name=None):
    """Return the User with this code, creating it on first login."""
    user = db_session.query(User).filter_by(code=code).first()
    if user is None:
        user = User(code=code, name=name or code)
        db_session.add(user)
        db_session.commit()
        logger.info("Provisioned user %s", code)
    return user


def login_user(user):
    cookie_session[SESSION_USER_KEY] = user.code


def logout_user():
    cookie_session.clear()


def current_user(db_session):
    """User for the request's session cookie, or None when not logged in."""
    code = cookie_session.get(SESSION_USER_KEY)
    if not code:
        return None
    return db_session.query(User).filter_by(code=code).first()
