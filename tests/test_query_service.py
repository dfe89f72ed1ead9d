"""Tests for the query orchestration service."""
from unittest.mock import Mock

from sqlalchemy import text

from sqlsight.dtos import ChartKind, InsightKind
from sqlsight.services import EnrichmentService, QueryService


def _service(records):
    return QueryService(audit_sink=records.append)


class TestRunSQL:

    def test_success(self, orders_conn):
        records = []

        ctx = _service(records).run_sql(
            orders_conn,
            "select region, sum(amount) as total_amount from orders group by region order by total_amount desc",
            question="Revenue by region",
        )

        assert ctx.status == "success"
        assert ctx.sql_executed == (
            "SELECT region, SUM(amount) AS total_amount FROM orders "
            "GROUP BY region ORDER BY total_amount DESC"
        )
        assert ctx.columns == ["region", "total_amount"]
        assert ctx.rows[0] == {"region": "North", "total_amount": 320.0}
        assert ctx.row_count == 3
        assert ctx.explanation.startswith("Selecting: region, SUM(amount) as total_amount, from orders")
        assert ctx.chart.type is ChartKind.PIE
        assert ctx.insights[0].type is InsightKind.SUMMARY
        assert len(ctx.follow_up_questions) == 4
        assert ctx.completed_at is not None

        assert len(records) == 1
        assert records[0].status == "success"
        assert records[0].prompt == "Revenue by region"
        assert records[0].sql_query == ctx.sql_executed
        assert records[0].result_count == 3

    def test_rejected_query_never_runs(self, orders_conn):
        records = []

        ctx = _service(records).run_sql(orders_conn, "DELETE FROM orders", question="clean up")

        assert ctx.status == "rejected"
        assert ctx.error_message == "Forbidden operation detected: DELETE. Only SELECT queries are allowed."
        assert ctx.sql_executed is None
        assert orders_conn.execute(text("SELECT COUNT(*) FROM orders")).scalar() == 5
        assert records[0].status == "rejected"
        assert records[0].sql_query == "DELETE FROM orders"

    def test_execution_error_gets_suggestion(self, orders_conn):
        records = []

        ctx = _service(records).run_sql(orders_conn, "SELECT * FROM customers")

        assert ctx.status == "error"
        assert "no such table" in ctx.error_message
        assert "Verify the table name exists in the schema" in ctx.suggestion
        assert ctx.rows is None
        assert records[0].status == "error"
        assert records[0].error_message == ctx.error_message

    def test_max_rows_caps_fetch(self, orders_conn):
        ctx = QueryService().run_sql(orders_conn, "SELECT id FROM orders ORDER BY id", max_rows=2)

        assert ctx.rows == [{"id": 1}, {"id": 2}]
        assert ctx.row_count == 2

    def test_multiple_selects_run_one_by_one(self, orders_conn):
        ctx = QueryService().run_sql(
            orders_conn,
            "SELECT COUNT(*) AS n FROM orders; SELECT id FROM orders WHERE region = 'East'",
        )

        assert ctx.status == "success"
        assert ctx.sql_executed == "SELECT COUNT(*) AS n FROM orders; SELECT id FROM orders WHERE region = 'East'"
        assert ctx.columns == ["id"]
        assert ctx.rows == [{"id": 4}]

    def test_colon_words_in_literals_are_not_bind_params(self, orders_conn):
        ctx = QueryService().run_sql(
            orders_conn,
            "SELECT region, 'x :y' AS note FROM orders WHERE region <> 'x :y' ORDER BY id LIMIT 1",
        )

        assert ctx.status == "success"
        assert ctx.rows == [{"region": "North", "note": "x :y"}]

    def test_audit_failure_does_not_break_flow(self, orders_conn):
        sink = Mock(side_effect=RuntimeError("audit store down"))

        ctx = QueryService(audit_sink=sink).run_sql(orders_conn, "SELECT id FROM orders")

        assert ctx.status == "success"
        sink.assert_called_once()


class TestEnrichmentService:

    def test_failing_branch_is_isolated(self, orders_conn, monkeypatch):
        def boom(*args, **kwargs):
            raise ValueError("bad chart")

        monkeypatch.setattr("sqlsight.services.enrichment_service.recommend_chart", boom)

        ctx = QueryService(enrichment_service=EnrichmentService()).run_sql(
            orders_conn, "SELECT region, amount FROM orders"
        )

        assert ctx.status == "success"
        assert ctx.chart is None
        assert ctx.insights
        assert ctx.column_types
