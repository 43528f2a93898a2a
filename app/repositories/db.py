"""DuckDB connection management for the local cache backend."""

import duckdb
from loguru import logger

from app.models import ALL_DDL


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def connect(path: str, read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Open a connection, creating tables when writable."""
    conn = duckdb.connect(path, read_only=read_only)
    if not read_only:
        init_tables(conn)
    logger.debug("DB connected: {} (read_only={})", path, read_only)
    return conn
