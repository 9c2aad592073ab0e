import pytest

from biztime.core.db import open_gateway
from biztime.scripts.seed_db import SAMPLE_COMPANIES, SAMPLE_INVOICES, seed


@pytest.fixture
def gateway(tmp_path):
    gw = open_gateway(f"sqlite:///{tmp_path / 'seed.db'}")
    yield gw
    gw.close()


def test_loads_sample_data(gateway):
    seed(gateway)

    companies = gateway.execute("SELECT code FROM companies ORDER BY code")
    assert [c["code"] for c in companies] == ["apple", "ibm"]

    invoices = gateway.execute(
        "SELECT comp_code, paid, paid_date FROM invoices ORDER BY id"
    )
    assert len(invoices) == 4
    assert invoices[2] == {"comp_code": "apple", "paid": 1, "paid_date": "2018-01-01"}
    assert invoices[3]["comp_code"] == "ibm"


def test_reseeding_drops_existing_rows(gateway):
    seed(gateway)
    gateway.execute(
        "INSERT INTO companies (code, name, description) VALUES ('extra', 'Extra', '')"
    )

    seed(gateway)

    assert gateway.execute("SELECT COUNT(*) AS n FROM companies")[0]["n"] == len(SAMPLE_COMPANIES)
    assert gateway.execute("SELECT COUNT(*) AS n FROM invoices")[0]["n"] == len(SAMPLE_INVOICES)
