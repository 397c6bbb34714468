"""Shared test fixtures."""
import pytest
from unittest.mock import patch
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base
from app.services.context import RequestContext


@pytest.fixture
def db_engine():
    """In-memory SQLite engine with schema created.

    StaticPool keeps one connection so every session sees the same database.
    """
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    import app.models.project
    import app.models.idea_validation
    import app.models.lead
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    """Session for inspecting rows directly from a test."""
    session = session_factory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture(autouse=True)
def patch_get_session(session_factory):
    """Route all get_session() calls to the in-memory engine.

    app.services.db binds get_session at import time, so it is patched too.
    Each call gets a fresh session, so close() in production code is harmless.
    """
    def _new_session():
        return session_factory()

    with patch('app.database.get_session', side_effect=_new_session), \
            patch('app.services.db.get_session', side_effect=_new_session):
        yield session_factory


@pytest.fixture
def ctx():
    return RequestContext(user_id='owner@example.com')


@pytest.fixture
def other_ctx():
    return RequestContext(user_id='someone-else@example.com')


@pytest.fixture
def app():
    """Flask test app with auth disabled."""
    with patch('app.config.DASHBOARD_PASSWORD', None):
        from app import create_app
        app = create_app()
        app.config['TESTING'] = True
        yield app


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as c:
        yield c


@pytest.fixture
def make_project(ctx):
    """Factory fixture — creates a project through the workflow layer."""
    from app.services import records

    def _make(owner=None, **overrides):
        payload = {'name': 'Harbor Coffee', 'industry': 'Food', 'stage': 'startup'}
        payload.update(overrides)
        return records.create_project(owner or ctx, payload)
    return _make


@pytest.fixture
def lead_payload():
    """Full lead form payload; every scored contact field present."""
    def _make(project_id, **overrides):
        payload = {
            'project_id': project_id,
            'name': 'Dana Whitfield',
            'company': 'Northpoint Labs',
            'role': 'Office Manager',
            'email': 'dana@northpoint.example',
            'phone': '+1 555 0101',
            'linkedin_url': 'https://linkedin.com/in/danaw',
            'industry': 'Biotech',
            'location': 'Boston',
            'source': 'Referral',
            'notes': 'Met at expo',
            'tags': 'office, subscription',
        }
        payload.update(overrides)
        return payload
    return _make
