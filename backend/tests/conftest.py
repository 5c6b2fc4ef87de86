import os

# Use in-memory sqlite for tests; must be set before the app modules are imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["TIMEZONE"] = "UTC"

import pytest  # noqa: E402


@pytest.fixture
def db():
    from recovery.db import Base, SessionLocal, engine
    import recovery.main  # noqa: F401  (registers every table)

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    from fastapi.testclient import TestClient
    from recovery.main import app

    c = TestClient(app)
    c.headers.update({"X-User-Id": "user-1"})
    return c


@pytest.fixture
def today():
    from recovery.core.time_utils import today_local
    return today_local("UTC")
