from __future__ import annotations

import os
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError, ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import ValidationError

from .models import AccommodationSearchRequest
from .search import AccommodationSearchService
from .tools import setup_logger, get_logger
from .tools.widget_assets import WidgetAssetError
from .widgets import (
    ACCOMMODATION_SEARCH_SCHEMA,
    SEARCH_WIDGET,
    TOOL_ANNOTATIONS,
    TOOL_DESCRIPTION,
    WIDGET_MIME_TYPE,
    invocation_meta,
    widget_meta,
)

setup_logger(level=os.getenv("LOG_LEVEL", "INFO"))
LOGGER = get_logger(__name__)

MCP_APP = FastMCP(name="booking-mcp", version="1.0.0")


async def accommodations_search(arguments: dict[str, Any]) -> ToolResult:
    try:
        request = AccommodationSearchRequest.model_validate(arguments or {})
    except ValidationError as exc:
        raise ToolError(f"Invalid accommodations_search arguments: {exc}") from exc

    LOGGER.info("accommodations_search called", tool=SEARCH_WIDGET.id, destination=request.destination)
    service = AccommodationSearchService()
    result = await service.search(request)
    return ToolResult(
        content=[TextContent(type="text", text=service.summary_text(result))],
        structured_content=result.to_wire(),
        meta=invocation_meta(SEARCH_WIDGET),
    )


class AccommodationSearchTool(Tool):
    """Tool with a hand-written camelCase input schema matching the widget contract."""

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        return await accommodations_search(arguments)


MCP_APP.add_tool(
    AccommodationSearchTool(
        name=SEARCH_WIDGET.id,
        title=SEARCH_WIDGET.title,
        description=TOOL_DESCRIPTION,
        parameters=ACCOMMODATION_SEARCH_SCHEMA,
        annotations=ToolAnnotations(**TOOL_ANNOTATIONS),
        meta=widget_meta(SEARCH_WIDGET),
    )
)


@MCP_APP.resource(
    SEARCH_WIDGET.template_uri,
    name=SEARCH_WIDGET.title,
    description=f"{SEARCH_WIDGET.title} widget markup",
    mime_type=WIDGET_MIME_TYPE,
    meta=widget_meta(SEARCH_WIDGET),
)
def booking_search_results_widget() -> str:
    try:
        return SEARCH_WIDGET.html
    except WidgetAssetError as exc:
        LOGGER.error("Widget assets unavailable", uri=SEARCH_WIDGET.template_uri, error_details=str(exc))
        raise ResourceError(exc.message) from exc


def main() -> None:
    LOGGER.info("Starting booking-mcp FastMCP server over stdio")
    MCP_APP.run()


if __name__ == "__main__":
    main()
