"""
main.py
========
Central entry point for the Vaani caption service.

Run with:
    uvicorn main:app --reload
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()  # Load .env before any module reads env vars

# Configure logging for the entire application
logging.basicConfig(
    level=os.getenv("VAANI_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Keep per-request access lines out of caption logs.
for _noisy_logger_name in (
    "uvicorn.access",
    "httpx",
    "httpcore",
):
    logging.getLogger(_noisy_logger_name).setLevel(logging.WARNING)

from src.api.captions import app  # noqa: F401, E402

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
