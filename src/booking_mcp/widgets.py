"""Widget registry and the MCP descriptors that point hosts at it."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .models import ACCOMMODATION_TYPES, FACILITY_FILTERS
from .tools.widget_assets import read_widget_html

WIDGET_MIME_TYPE = "text/html+skybridge"

TOOL_DESCRIPTION = (
    "Use this when the user wants to find, search, view or compare different accommodation types for their "
    "trip, for example, hotels, hostels, apartments, homes, guest houses, lodging, chalets, amongst many more. "
    "The user can find accommodations by destination, dates, number of nights, guests, budget, landmarks, "
    "and/or facilities (e.g., pool, parking, free breakfast, gym, all-inclusive, family-friendly). LLM must "
    "provide a city or, if a city is not available, resolve the destination to coordinates. Returns available "
    "accommodation options with price, photos, guest ratings, and facilities."
)

TOOL_ANNOTATIONS = {
    "destructiveHint": False,
    "openWorldHint": False,
    "readOnlyHint": True,
}


@dataclass
class BookingWidget:
    id: str
    title: str
    template_uri: str
    invoking: str
    invoked: str
    component: str
    assets_dir: Path | None = None
    _html: str | None = field(default=None, repr=False)

    @property
    def html(self) -> str:
        if self._html is None:
            self._html = read_widget_html(self.component, self.assets_dir)
        return self._html


WIDGETS = [
    BookingWidget(
        id="accommodations_search",
        title="Booking.com Accommodation Search",
        template_uri="ui://widget/booking-search-results.html",
        invoking="Searching for stays on Booking.com...",
        invoked="Results from Booking.com ready",
        component="booking-search-results",
    ),
]

WIDGETS_BY_ID = {widget.id: widget for widget in WIDGETS}
WIDGETS_BY_URI = {widget.template_uri: widget for widget in WIDGETS}

SEARCH_WIDGET = WIDGETS_BY_ID["accommodations_search"]


def widget_meta(widget: BookingWidget) -> dict[str, Any]:
    return {
        "openai/outputTemplate": widget.template_uri,
        "openai/toolInvocation/invoking": widget.invoking,
        "openai/toolInvocation/invoked": widget.invoked,
        "openai/widgetAccessible": True,
        "openai/resultCanProduceWidget": True,
    }


def invocation_meta(widget: BookingWidget) -> dict[str, Any]:
    return {
        "openai/toolInvocation/invoking": widget.invoking,
        "openai/toolInvocation/invoked": widget.invoked,
    }


def _accommodation_search_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "destination": {"type": "string", "description": "City name or destination"},
            "coordinates": {
                "type": "object",
                "description": "Geographic coordinates if city is not available",
                "properties": {
                    "latitude": {"type": "number"},
                    "longitude": {"type": "number"},
                },
            },
            "checkIn": {"type": "string", "description": "Check-in date (YYYY-MM-DD format)"},
            "checkOut": {"type": "string", "description": "Check-out date (YYYY-MM-DD format)"},
            "nights": {"type": "number", "description": "Number of nights", "minimum": 1},
            "adults": {"type": "number", "description": "Number of adults", "minimum": 1},
            "children": {"type": "number", "description": "Number of children", "minimum": 0},
            "rooms": {"type": "number", "description": "Number of rooms", "minimum": 1},
            "minPrice": {"type": "number", "description": "Minimum budget per night"},
            "maxPrice": {"type": "number", "description": "Maximum budget per night"},
            "accommodationType": {
                "type": "string",
                "description": "Type of accommodation",
                "enum": list(ACCOMMODATION_TYPES),
            },
            "facilities": {
                "type": "array",
                "description": "Required facilities/amenities",
                "items": {"type": "string", "enum": list(FACILITY_FILTERS)},
            },
            "landmark": {"type": "string", "description": "Nearby landmark or point of interest"},
            "rating": {
                "type": "number",
                "description": "Minimum guest rating (0-10)",
                "minimum": 0,
                "maximum": 10,
            },
        },
        "required": ["destination"],
        "additionalProperties": False,
    }


ACCOMMODATION_SEARCH_SCHEMA = _accommodation_search_schema()


def tool_descriptors() -> list[dict[str, Any]]:
    return [
        {
            "name": SEARCH_WIDGET.id,
            "description": TOOL_DESCRIPTION,
            "inputSchema": ACCOMMODATION_SEARCH_SCHEMA,
            "_meta": widget_meta(SEARCH_WIDGET),
            "annotations": dict(TOOL_ANNOTATIONS),
        }
    ]


def resource_descriptors() -> list[dict[str, Any]]:
    return [
        {
            "uri": widget.template_uri,
            "name": widget.title,
            "description": f"{widget.title} widget markup",
            "mimeType": WIDGET_MIME_TYPE,
            "_meta": widget_meta(widget),
        }
        for widget in WIDGETS
    ]


def resource_template_descriptors() -> list[dict[str, Any]]:
    return [
        {
            "uriTemplate": widget.template_uri,
            "name": widget.title,
            "description": f"{widget.title} widget markup",
            "mimeType": WIDGET_MIME_TYPE,
            "_meta": widget_meta(widget),
        }
        for widget in WIDGETS
    ]


def read_resource(uri: str) -> dict[str, Any]:
    """Return the ``resources/read`` result for a widget URI."""

    widget = WIDGETS_BY_URI.get(uri)
    if widget is None:
        raise KeyError(uri)
    return {
        "contents": [
            {
                "uri": widget.template_uri,
                "mimeType": WIDGET_MIME_TYPE,
                "text": widget.html,
                "_meta": widget_meta(widget),
            }
        ]
    }
