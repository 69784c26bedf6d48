"""Shared test fixtures."""
import pytest
from unittest.mock import patch
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from saved_filters.database import Base


@pytest.fixture
def db_engine():
    """In-memory SQLite engine with schema created."""
    engine = create_engine('sqlite:///:memory:')
    import saved_filters.models.user
    import saved_filters.models.saved_filter
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """SQLAlchemy session bound to in-memory SQLite. Rolls back after each test."""
    Session = sessionmaker(bind=db_engine)
    session = Session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture(autouse=True)
def patch_get_session(db_session):
    """Route all get_session() calls to the test session.

    We disable close() so that route handlers calling session.close()
    in their finally blocks don't invalidate the shared test session.
    """
    _real_close = db_session.close
    db_session.close = lambda: None
    with patch('saved_filters.database.get_session', return_value=db_session), \
            patch('saved_filters.routes.filters.get_session', return_value=db_session):
        yield db_session
    db_session.close = _real_close


@pytest.fixture
def make_user(db_session):
    """Factory fixture: persists a User with the given code."""
    from saved_filters.models.user import User

    def _make(code='alice', **overrides):
        user = User(code=code, name=overrides.pop('name', code.title()), **overrides)
        db_session.add(user)
        db_session.commit()
        return user
    return _make


@pytest.fixture
def app():
    """Flask test app."""
    from saved_filters import create_app
    with patch('saved_filters.config.DASHBOARD_PASSWORD', None):
        app = create_app()
    app.config['TESTING'] = True
    yield app


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as c:
        yield c


@pytest.fixture
def login(client):
    """Log the test client in as the given username."""
    def _login(username='alice'):
        resp = client.post('/login', json={'username': username, 'password': ''})
        assert resp.status_code == 200
        return resp
    return _login
