"""Runtime configuration for taskrank.

Values come from the environment, with a local `.env` file loaded first.
"""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("TASKRANK_HOST", "0.0.0.0")
PORT = int(os.getenv("TASKRANK_PORT", "8000"))
DEBUG = os.getenv("DEBUG", "False").lower() == "true"

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure application-wide logging."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger("taskrank")
