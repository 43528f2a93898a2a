"""Cache table - backs the DuckDB cache backend."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS cache_entry (
    key VARCHAR PRIMARY KEY,
    data VARCHAR NOT NULL,
    expires_at DOUBLE NOT NULL
)
"""
