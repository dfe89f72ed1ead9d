import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
import sqlglot

# Load environment variables
DOTENV_PATH = (Path(__file__).resolve().parent.parent.parent / ".env")
load_dotenv(dotenv_path=DOTENV_PATH)

# Connection product names / SQLAlchemy dialect names -> sqlglot dialect names
DIALECT_ALIASES = {
    "postgresql": "postgres",
    "turso": "sqlite",
    "mssql": "tsql",
    "mariadb": "mysql",
}


class Settings:
    # SQL Gateway Configuration
    SQL_DIALECT: str = os.getenv("SQL_DIALECT", "sqlite").strip().lower()

    # Execution Configuration
    MAX_RESULT_ROWS: int = int(os.getenv("MAX_RESULT_ROWS", "1000").strip())

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    # App Configuration
    APP_TITLE: str = "SQL Insight Gateway (read-only SQL + result analysis)"

    def validate(self):
        try:
            sqlglot.Dialect.get_or_raise(resolve_dialect(self.SQL_DIALECT))
        except ValueError as e:
            raise RuntimeError(
                f"Unknown SQL_DIALECT in .env: {self.SQL_DIALECT!r}"
            ) from e
        if self.MAX_RESULT_ROWS <= 0:
            raise RuntimeError("MAX_RESULT_ROWS must be greater than zero.")


def resolve_dialect(dialect: Optional[str] = None) -> str:
    """Map a configured/connection dialect name to the parser's dialect name"""
    name = (dialect or settings.SQL_DIALECT).strip().lower()
    return DIALECT_ALIASES.get(name, name)


settings = Settings()
settings.validate()
