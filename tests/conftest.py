import pytest
from fastapi.testclient import TestClient

from biztime.core.config import settings
from biztime.main import app


@pytest.fixture(scope="session")
def client(tmp_path_factory):
    db_file = tmp_path_factory.mktemp("data") / "biztime_test.db"
    settings.DATABASE_URL = f"sqlite:///{db_file}"

    # 500s must come back as responses, not re-raised into the test
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def db(client):
    return client.app.state.db


@pytest.fixture(autouse=True)
def seed(db):
    """
    Before each test: one company "test" with invoices for 10 and 20.
    """
    db.execute("DELETE FROM invoices")
    db.execute("DELETE FROM companies")

    company = db.execute(
        """INSERT INTO companies (code, name, description)
           VALUES ('test', 'Test', 'company test')
           RETURNING code, name, description"""
    )[0]
    invoices = db.execute(
        """INSERT INTO invoices (comp_code, amt)
           VALUES ('test', '10'), ('test', '20')
           RETURNING id, add_date"""
    )
    return {"company": company, "invoices": invoices}


@pytest.fixture
def row_count(db):
    def _count(table: str) -> int:
        return db.execute(f"SELECT COUNT(*) AS n FROM {table}")[0]["n"]
    return _count
