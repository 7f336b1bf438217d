"""Direct JSON-RPC handling for hosts that POST without opening an SSE session."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from .models import AccommodationSearchRequest
from .search import AccommodationSearchService
from .tools import get_logger
from .tools.widget_assets import WidgetAssetError
from .widgets import (
    SEARCH_WIDGET,
    invocation_meta,
    read_resource,
    resource_descriptors,
    resource_template_descriptors,
    tool_descriptors,
)

logger = get_logger(__name__)

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class RpcError(Exception):
    """JSON-RPC error carrying the code that goes back to the client."""

    def __init__(self, code: int, message: str, data: Any | None = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"{message} (code={code})")


def success(request_id: Any, result: dict[str, Any]) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def failure(request_id: Any, code: int, message: str, data: Any | None = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": request_id, "error": error}


async def call_tool(params: dict[str, Any]) -> dict[str, Any]:
    name = params.get("name")
    if name != SEARCH_WIDGET.id:
        raise RpcError(INVALID_PARAMS, f"Unknown tool: {name}")

    try:
        request = AccommodationSearchRequest.model_validate(params.get("arguments") or {})
    except ValidationError as exc:
        raise RpcError(INVALID_PARAMS, "Invalid arguments", exc.errors(include_url=False, include_context=False)) from exc

    service = AccommodationSearchService()
    result = await service.search(request)
    return {
        "content": [{"type": "text", "text": service.summary_text(result)}],
        "structuredContent": result.to_wire(),
        "_meta": invocation_meta(SEARCH_WIDGET),
    }


def _read_resource(params: dict[str, Any]) -> dict[str, Any]:
    uri = params.get("uri")
    if not isinstance(uri, str):
        raise RpcError(INVALID_PARAMS, "Resource uri must be a string")
    try:
        return read_resource(uri)
    except KeyError as exc:
        raise RpcError(INVALID_PARAMS, f"Unknown resource: {uri}") from exc


async def handle(method: str, params: dict[str, Any]) -> dict[str, Any]:
    if method == "tools/list":
        return {"tools": tool_descriptors()}
    if method == "resources/list":
        return {"resources": resource_descriptors()}
    if method == "resources/templates/list":
        return {"resourceTemplates": resource_template_descriptors()}
    if method == "resources/read":
        return _read_resource(params)
    if method == "tools/call":
        return await call_tool(params)
    raise RpcError(METHOD_NOT_FOUND, f"Method not supported in direct mode: {method}")


async def dispatch(payload: Any) -> dict[str, Any]:
    """Run one JSON-RPC request object and return the response envelope."""

    if not isinstance(payload, dict) or not isinstance(payload.get("method"), str):
        return failure(None, INVALID_REQUEST, "Invalid Request")

    request_id = payload.get("id")
    method = payload["method"]
    params = payload.get("params") or {}
    if not isinstance(params, dict):
        return failure(request_id, INVALID_PARAMS, "Params must be an object")

    logger.info("Direct JSON-RPC request", method=method)
    try:
        return success(request_id, await handle(method, params))
    except RpcError as exc:
        logger.warning("JSON-RPC request rejected", method=method, error_details=exc.message)
        return failure(request_id, exc.code, exc.message, exc.data)
    except WidgetAssetError as exc:
        logger.error("Widget assets unavailable", method=method, error_details=str(exc))
        return failure(request_id, INTERNAL_ERROR, exc.message)
    except Exception:
        logger.exception("Direct JSON-RPC request failed", method=method)
        return failure(request_id, INTERNAL_ERROR, "Internal error")
