from fastapi.testclient import TestClient
import pytest

from biztime.core.config import Settings
from biztime.core.db import Database
from biztime.core.seed import seed_sample_data
from biztime.main import create_app


@pytest.fixture()
def db() -> Database:
    database = Database("sqlite://")
    database.create_all()
    with database.session() as session:
        seed_sample_data(session)
    yield database
    database.drop_all()
    database.dispose()


@pytest.fixture()
def session(db: Database):
    with db.session() as s:
        yield s


@pytest.fixture()
def client(db: Database) -> TestClient:
    app = create_app(Settings(DATABASE_URL="sqlite://", LOG_LEVEL="WARNING"), db=db)
    with TestClient(app) as c:
        yield c
