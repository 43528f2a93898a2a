"""Application settings."""

import os
from pathlib import Path

# Spreadsheet source
SPREADSHEET_ID = os.getenv("SPREADSHEET_ID", "")
API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))

# Service account credential
CLIENT_EMAIL = os.getenv("CLIENT_EMAIL", "")
PRIVATE_KEY = os.getenv("PRIVATE_KEY", "").replace("\\n", "\n")
PRIVATE_KEY_ID = os.getenv("PRIVATE_KEY_ID")
PROJECT_ID = os.getenv("PROJECT_ID")
TOKEN_URI = os.getenv("TOKEN_URI", "https://oauth2.googleapis.com/token")

# Cache
CACHE_BACKEND = os.getenv("CACHE_BACKEND", "upstash")
UPSTASH_REDIS_REST_URL = os.getenv("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.getenv("UPSTASH_REDIS_REST_TOKEN", "")
CACHE_DB_PATH = os.getenv("CACHE_DB_PATH", "cache.duckdb")
CACHE_TTL = int(os.getenv("CACHE_TTL", "86400"))  # 24 hours

# Bulk fetch
SHEET_DELAY = float(os.getenv("SHEET_DELAY", "1.0"))

# Logging
LOG_DIR = Path("logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# HTTP server
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
