"""Tests for the HTTP endpoints."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from sqlsight.main import app
from conftest import seed_orders


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def database_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'shop.db'}"
    engine = create_engine(url)
    with engine.connect() as conn:
        seed_orders(conn)
    engine.dispose()
    return url


class TestRoot:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"


class TestSQLEndpoints:

    def test_validate_ok(self, client):
        response = client.post("/sql/validate", json={"query": "select id from users"})

        assert response.status_code == 200
        assert response.json() == {
            "is_valid": True,
            "sanitized_query": "SELECT id FROM users",
            "error": None,
            "error_kind": None,
        }

    def test_validate_rejected(self, client):
        response = client.post("/sql/validate", json={"query": "DROP TABLE users"})

        body = response.json()
        assert response.status_code == 200
        assert body["is_valid"] is False
        assert body["error_kind"] == "forbidden_operation"

    def test_explain(self, client):
        response = client.post("/sql/explain", json={"query": "SELECT * FROM users LIMIT 3"})

        assert response.json() == {"explanation": "Selecting all columns, from users, limited to 3 rows."}

    def test_unknown_dialect_is_not_a_server_error(self, client):
        validate = client.post("/sql/validate", json={"query": "SELECT 1", "dialect": "nosuchdb"})
        explain = client.post("/sql/explain", json={"query": "SELECT 1", "dialect": "nosuchdb"})

        assert validate.status_code == 200
        assert validate.json()["is_valid"] is False
        assert validate.json()["error_kind"] == "syntax_error"
        assert explain.status_code == 200
        assert explain.json() == {"explanation": "Unable to parse query explanation."}

    def test_suggest_correction(self, client):
        response = client.post(
            "/sql/suggest-correction",
            json={"query": "SELECT nme FROM users", "error": "no such column: nme"},
        )

        assert response.json()["suggestion"].startswith("Check if the column name is spelled correctly")


class TestAnalysisEndpoints:

    ROWS = [{"region": "North", "sales": 10}, {"region": "South", "sales": 20}]

    def test_chart_empty(self, client):
        response = client.post("/analysis/chart", json={"rows": [], "columns": []})

        assert response.json()["type"] == "table"

    def test_chart_uses_ui_keys(self, client):
        body = client.post("/analysis/chart", json={"rows": self.ROWS, "columns": ["region", "sales"]}).json()

        assert body["type"] == "pie"
        assert body["xAxis"] == "region"
        assert body["yAxis"] == "sales"

    def test_insights(self, client):
        response = client.post(
            "/analysis/insights",
            json={"rows": [], "columns": ["region"], "question": "anything?"},
        )

        assert response.json() == {
            "insights": [{"type": "summary", "text": "No results found for this query.", "confidence": "high"}]
        }

    def test_follow_ups(self, client):
        body = client.post("/analysis/follow-ups", json={"rows": self.ROWS, "columns": ["region", "sales"]}).json()

        assert body["questions"][0] == "Can you break this down by category?"
        assert len(body["questions"]) == 4

    def test_full_analysis(self, client):
        body = client.post(
            "/analysis",
            json={"rows": self.ROWS, "columns": ["region", "sales"], "question": "sales by region"},
        ).json()

        assert body["column_types"] == [
            {"name": "region", "kind": "categorical"},
            {"name": "sales", "kind": "numeric"},
        ]
        assert body["chart"]["type"] == "pie"
        assert body["insights"][0]["text"] == "Found 2 results with 2 columns."
        assert body["follow_up_questions"]

    def test_huge_integer_cells(self, client):
        rows = [{"region": "North", "total_amount": 10 ** 400}, {"region": "South", "total_amount": 5}]

        response = client.post("/analysis", json={"rows": rows, "columns": ["region", "total_amount"]})

        assert response.status_code == 200
        assert response.json()["insights"][0]["text"] == "Found 2 results with 2 columns."


class TestQueryEndpoint:

    def test_execute(self, client, database_url):
        response = client.post("/query/execute", json={
            "database_url": database_url,
            "sql": "SELECT order_date, amount FROM orders ORDER BY order_date",
            "question": "Sales over time",
        })

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "success"
        assert body["row_count"] == 5
        assert body["chart"]["type"] == "line"
        assert body["chart"]["xAxis"] == "order_date"

    def test_rejected_is_400(self, client, database_url):
        response = client.post("/query/execute", json={
            "database_url": database_url,
            "sql": "DELETE FROM orders",
        })

        assert response.status_code == 400
        assert "DELETE" in response.json()["detail"]

    def test_execution_error_is_reported(self, client, database_url):
        body = client.post("/query/execute", json={
            "database_url": database_url,
            "sql": "SELECT nope FROM orders",
        }).json()

        assert body["status"] == "error"
        assert "no such column" in body["error"]
        assert body["suggestion"]

    def test_invalid_database_url(self, client):
        response = client.post("/query/execute", json={"database_url": "not a url", "sql": "SELECT 1"})

        assert response.status_code == 400
