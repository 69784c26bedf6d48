"""
Database engine + session factory.

Always initializes. Defaults to SQLite for local dev, Postgres in production.
get_session() always returns a real session; transactional() wraps a unit of
work that commits on return and rolls back on any error.
"""
import functools
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from saved_filters.config import DATABASE_URL

logger = logging.getLogger('saved_filters.database')


class Base(DeclarativeBase):
    pass


# Railway injects postgres:// but SQLAlchemy 2.x requires postgresql://
url = DATABASE_URL.replace('postgres://', 'postgresql://', 1)

# SQLite needs different engine kwargs than Postgres
if url.startswith('sqlite'):
    engine = create_engine(url, connect_args={'check_same_thread': False})
else:
    engine = create_engine(url, pool_pre_ping=True, pool_size=5, max_overflow=10)

SessionLocal = sessionmaker(bind=engine)


def get_session():
    """Return a new DB session."""
    return SessionLocal()


def transactional(func):
    """
    Run func(session, ...) as one unit of work.

    Commits when func returns, rolls back and re-raises when it raises.
    The session itself stays open; closing it is the caller's job.
    """
    @functools.wraps(func)
    def wrapper(session, *args, **kwargs):
        try:
            result = func(session, *args, **kwargs)
            session.commit()
            return result
        except Exception as e:
            session.rollback()
            logger.warning("Rolled back %s: %s", func.__name__, e)
            raise
    return wrapper
