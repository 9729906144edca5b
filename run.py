#!/usr/bin/env python3
"""Run script for taskrank."""

import uvicorn

from taskrank.config import HOST, PORT, DEBUG, setup_logging

if __name__ == "__main__":
    setup_logging()
    uvicorn.run(
        "taskrank.api.app:app",
        host=HOST,
        port=PORT,
        reload=DEBUG
    )
