"""
Shared fixtures.

Every test gets its own SQLite file database under tmp_path, so sessions
opened from worker threads (category writes, racing cart writers) see the
same data. Invalidation is replaced by a recorder; no Celery broker is needed.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from storefront.api.deps import get_invalidation_service
from storefront.data import models  # noqa: F401
from storefront.data.database import Base, make_engine, get_db, get_session_factory
from storefront.data.seed import seed
from storefront.main import app
from storefront.services.invalidation_service import InvalidationService


class RecordingInvalidationService(InvalidationService):
    """Collects (path, kind) pairs instead of dispatching Celery tasks"""

    def __init__(self):
        self.events = []

    def invalidate(self, path: str, kind: str = "layout"):
        self.events.append((path, kind))


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'storefront.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    seed(factory)
    return factory


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def invalidation():
    return RecordingInvalidationService()


@pytest.fixture
def test_client(session_factory, invalidation):
    """
    FastAPI TestClient wired to the per-test database and the recording
    invalidation service.
    """
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_invalidation_service] = lambda: invalidation

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
