"""Entrypoint for HTTP/SSE deployments.

Exposes `app` for `uvicorn main:app` and starts the server on $PORT when
run as `python main.py`. Use `booking-mcp-stdio` for a local stdio session.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from booking_mcp.fastapi_server import APP as app, start_fastapi


if __name__ == "__main__":
    start_fastapi()
