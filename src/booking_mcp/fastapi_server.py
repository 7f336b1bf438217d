from __future__ import annotations

import json
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from . import rpc
from .mcp_server import MCP_APP
from .tools import setup_logger, get_logger
from .tools.widget_assets import assets_dir, content_type_for

load_dotenv()

setup_logger(level=os.getenv("LOG_LEVEL", "INFO"))

LOGGER = get_logger(__name__)

MCP_HTTP_APP = MCP_APP.http_app(transport="sse")

APP = FastAPI(
    title="booking-mcp",
    description="Booking.com accommodation search exposed as an MCP server with a results widget.",
    version="1.0.0",
    lifespan=MCP_HTTP_APP.lifespan,
)


def _allowed_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


APP.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["content-type", "authorization"],
)

ASSETS_ROOT = assets_dir()


def resolve_asset_path(relative_path: str) -> Path:
    candidate = (ASSETS_ROOT / relative_path).resolve()
    if not candidate.is_relative_to(ASSETS_ROOT):
        raise HTTPException(status_code=403, detail="Forbidden")
    if not candidate.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return candidate


@APP.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "healthy", "service": "booking-mcp"}


@APP.post("/mcp")
@APP.post("/mcp/rpc")
async def direct_json_rpc(request: Request) -> JSONResponse:
    body = await request.body()
    try:
        payload = json.loads(body)
    except ValueError:
        LOGGER.warning("Unparsable JSON-RPC body", path=request.url.path)
        return JSONResponse(
            status_code=400,
            content=rpc.failure(None, rpc.PARSE_ERROR, "Parse error"),
        )
    return JSONResponse(content=await rpc.dispatch(payload))


# SSE stream at /mcp/sse, follow-up messages at /mcp/messages/?session_id=...
APP.mount("/mcp", MCP_HTTP_APP)


@APP.get("/{asset_path:path}")
def widget_asset(asset_path: str) -> FileResponse:
    resolved = resolve_asset_path(asset_path)
    return FileResponse(
        resolved,
        media_type=content_type_for(resolved),
        headers={"Cache-Control": "public, max-age=3600"},
    )


def start_fastapi(host: str | None = None, port: int | None = None) -> None:
    host = host or os.getenv("HOST", "0.0.0.0")
    if port is None:
        try:
            port = int(os.getenv("PORT", "8000"))
        except ValueError:
            port = 8000
    LOGGER.info(f"Booking MCP server listening on http://{host}:{port}")
    LOGGER.info(f"  SSE stream: GET http://{host}:{port}/mcp/sse")
    LOGGER.info(f"  Message post endpoint: POST http://{host}:{port}/mcp/messages/?session_id=...")
    uvicorn.run("booking_mcp.fastapi_server:APP", host=host, port=port)
