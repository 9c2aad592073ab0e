import pytest
from sqlalchemy.exc import IntegrityError

from biztime.core.db import open_gateway
from biztime.core.errors import NotFoundError, error_body


def test_root(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json()["status"] == "running"


def test_health(client):
    resp = client.get("/system/health")

    assert resp.json() == {"status": "ok", "database": "ok"}


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/nowhere")

    assert resp.status_code == 404
    assert resp.json() == {"error": {"message": "Not Found", "status": 404}}


def test_wrong_method_uses_error_envelope(client):
    resp = client.patch("/companies/test", json={})

    assert resp.status_code == 405
    assert resp.json()["error"]["status"] == 405


def test_malformed_body_uses_error_envelope(client):
    resp = client.post("/invoices", json={"comp_code": "test", "amt": "lots"})

    assert resp.status_code == 422
    assert resp.json() == {"error": {"message": "Invalid request", "status": 422}}


def test_not_found_error_message():
    err = NotFoundError("Invoice", 7)

    assert err.message == "Invoice 7 not found"
    assert err.status == 404
    assert error_body(err.message, err.status) == {
        "error": {"message": "Invoice 7 not found", "status": 404}
    }


class TestQueryGateway:
    @pytest.fixture
    def gateway(self, tmp_path):
        gw = open_gateway(f"sqlite:///{tmp_path / 'gw.db'}")
        gw.execute("CREATE TABLE parent (code TEXT PRIMARY KEY)")
        gw.execute(
            "CREATE TABLE child (id INTEGER PRIMARY KEY, code TEXT NOT NULL REFERENCES parent(code))"
        )
        yield gw
        gw.close()

    def test_rows_are_dicts(self, gateway):
        gateway.execute("INSERT INTO parent (code) VALUES (:code)", {"code": "a"})

        assert gateway.execute("SELECT code FROM parent") == [{"code": "a"}]

    def test_statement_without_rows_returns_empty_list(self, gateway):
        assert gateway.execute("DELETE FROM parent") == []

    def test_returning(self, gateway):
        rows = gateway.execute(
            "INSERT INTO parent (code) VALUES (:code) RETURNING code", {"code": "b"}
        )

        assert rows == [{"code": "b"}]

    def test_foreign_keys_enforced(self, gateway):
        with pytest.raises(IntegrityError):
            gateway.execute("INSERT INTO child (code) VALUES ('missing')")

        assert gateway.execute("SELECT id FROM child") == []

    def test_failed_statement_leaves_no_trace(self, gateway):
        gateway.execute("INSERT INTO parent (code) VALUES ('a')")

        with pytest.raises(IntegrityError):
            gateway.execute("INSERT INTO parent (code) VALUES ('a')")

        assert gateway.execute("SELECT code FROM parent") == [{"code": "a"}]
