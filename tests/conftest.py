import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine, text

# Ensure project root is on sys.path so 'sqlsight' imports work under pytest
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

ORDERS = [
    (1, "North", 120.0, "2024-01-05"),
    (2, "South", 80.0, "2024-01-12"),
    (3, "North", 200.0, "2024-02-03"),
    (4, "East", 45.5, "2024-02-20"),
    (5, "South", 150.0, "2024-03-08"),
]


def seed_orders(conn):
    conn.execute(text(
        "CREATE TABLE orders (id INTEGER PRIMARY KEY, region TEXT, amount REAL, order_date TEXT)"
    ))
    for order_id, region, amount, order_date in ORDERS:
        conn.execute(
            text("INSERT INTO orders VALUES (:id, :region, :amount, :order_date)"),
            {"id": order_id, "region": region, "amount": amount, "order_date": order_date},
        )
    conn.commit()


@pytest.fixture
def orders_conn():
    """In-memory SQLite connection with a small orders table"""
    engine = create_engine("sqlite://")
    with engine.connect() as conn:
        seed_orders(conn)
        yield conn
    engine.dispose()
