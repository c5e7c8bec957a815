import pytest
from fastapi.testclient import TestClient

from devicehub.db import build_engine, init_db, make_session_factory
from devicehub.main import create_app


@pytest.fixture
def engine():
    eng = build_engine("sqlite://")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    app = create_app("sqlite://")
    with TestClient(app) as c:
        yield c
