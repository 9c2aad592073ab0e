import logging
from typing import Any, Dict, List, Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# ----------------------------------------------------
# 1. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 2. QUERY GATEWAY
# ----------------------------------------------------
class QueryGateway:
    """
    Runs parametrized text SQL against one shared engine.

    Each call is its own transaction: the statement commits when the rows
    have been read, or rolls back and re-raises on any error.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def execute(self, sql: str, params: Optional[Dict[str, Any]] = None) -> List[dict]:
        logger.debug("SQL %s params=%s", " ".join(sql.split()), params)
        with self.engine.begin() as conn:
            result = conn.execute(text(sql), params or {})
            if not result.returns_rows:
                return []
            return [dict(row._mapping) for row in result]

    def close(self):
        self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ----------------------------------------------------
# 3. CREATE ENGINE
# ----------------------------------------------------
def open_gateway(database_url: str, echo: bool = False) -> QueryGateway:
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )
        # SQLite ignores REFERENCES unless asked on every connection
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_engine(database_url, echo=echo, pool_pre_ping=True)

    logger.info("Opened database %s", engine.url.render_as_string(hide_password=True))
    return QueryGateway(engine)


# ----------------------------------------------------
# 4. TABLES
# ----------------------------------------------------
def _load_models():
    from biztime.models.company_model import Company  # noqa: F401
    from biztime.models.invoice_model import Invoice  # noqa: F401


def init_db(gateway: QueryGateway):
    """
    Creates any missing tables. Existing tables are left untouched.
    """
    _load_models()
    Base.metadata.create_all(bind=gateway.engine)
    logger.info("Tables ready: %s", ", ".join(Base.metadata.tables))


def reset_db(gateway: QueryGateway):
    _load_models()
    Base.metadata.drop_all(bind=gateway.engine)
    Base.metadata.create_all(bind=gateway.engine)
    logger.info("Tables dropped and recreated")


# ----------------------------------------------------
# 5. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db(request: Request) -> QueryGateway:
    """
    FastAPI dependency: the gateway opened at startup.
    """
    return request.app.state.db
