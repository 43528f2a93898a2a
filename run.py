#!/usr/bin/env python3
"""Run the metrics API server."""

import uvicorn

from settings import HOST, LOG_LEVEL, PORT
from settings.logging import setup_logging

if __name__ == "__main__":
    setup_logging(level=LOG_LEVEL, to_file=True)
    uvicorn.run("web.server:app", host=HOST, port=PORT, log_config=None)
