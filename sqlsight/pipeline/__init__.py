"""
Pipeline (ordered execution flow)

1. sql.parser / sql.protector → parse, validate and sanitize SQL
2. sql.executor → run the sanitized query (external connection)
3. analysis → column types, chart recommendation, insights
"""
