from pathlib import Path

import pytest

from booking_mcp import rpc
from booking_mcp.tools.widget_assets import WidgetAssetError


@pytest.mark.asyncio
async def test_tools_list():
    response = await rpc.dispatch({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
    assert response["id"] == 1
    tool = response["result"]["tools"][0]
    assert tool["name"] == "accommodations_search"
    assert tool["_meta"]["openai/outputTemplate"] == "ui://widget/booking-search-results.html"


@pytest.mark.asyncio
async def test_resource_listings():
    resources = await rpc.dispatch({"jsonrpc": "2.0", "id": 2, "method": "resources/list"})
    templates = await rpc.dispatch({"jsonrpc": "2.0", "id": 3, "method": "resources/templates/list"})
    assert resources["result"]["resources"][0]["mimeType"] == "text/html+skybridge"
    assert templates["result"]["resourceTemplates"][0]["uriTemplate"] == "ui://widget/booking-search-results.html"


@pytest.mark.asyncio
async def test_resources_read_known_uri():
    response = await rpc.dispatch(
        {
            "jsonrpc": "2.0",
            "id": "read-1",
            "method": "resources/read",
            "params": {"uri": "ui://widget/booking-search-results.html"},
        }
    )
    contents = response["result"]["contents"][0]
    assert contents["uri"] == "ui://widget/booking-search-results.html"
    assert "<html" in contents["text"]


@pytest.mark.asyncio
async def test_resources_read_unknown_uri():
    response = await rpc.dispatch(
        {"jsonrpc": "2.0", "id": 4, "method": "resources/read", "params": {"uri": "ui://widget/nope.html"}}
    )
    assert response["error"]["code"] == rpc.INVALID_PARAMS
    assert response["error"]["message"] == "Unknown resource: ui://widget/nope.html"


@pytest.mark.asyncio
async def test_resources_read_missing_assets(monkeypatch):
    def broken(uri):
        raise WidgetAssetError("Widget HTML not found", Path("/nowhere"), "booking-search-results")

    monkeypatch.setattr(rpc, "read_resource", broken)
    response = await rpc.dispatch(
        {"jsonrpc": "2.0", "id": 5, "method": "resources/read", "params": {"uri": "ui://widget/booking-search-results.html"}}
    )
    assert response["error"]["code"] == rpc.INTERNAL_ERROR


@pytest.mark.asyncio
async def test_tools_call_falls_back_to_mock_results():
    response = await rpc.dispatch(
        {
            "jsonrpc": "2.0",
            "id": 6,
            "method": "tools/call",
            "params": {"name": "accommodations_search", "arguments": {"destination": "Prague", "nights": 2}},
        }
    )
    result = response["result"]
    structured = result["structuredContent"]
    assert structured["totalResults"] == 5
    assert structured["usingMockData"] is True
    assert structured["accommodations"][0]["totalPrice"] == 440
    assert result["content"][0]["text"].startswith("Found 5 accommodation options in Prague.")
    assert "openai/toolInvocation/invoked" in result["_meta"]


@pytest.mark.asyncio
async def test_tools_call_rejects_invalid_arguments():
    response = await rpc.dispatch(
        {
            "jsonrpc": "2.0",
            "id": 7,
            "method": "tools/call",
            "params": {"name": "accommodations_search", "arguments": {"nights": 0}},
        }
    )
    assert response["error"]["code"] == rpc.INVALID_PARAMS
    assert {tuple(error["loc"]) for error in response["error"]["data"]} >= {("destination",), ("nights",)}


@pytest.mark.asyncio
async def test_tools_call_unknown_tool():
    response = await rpc.dispatch(
        {"jsonrpc": "2.0", "id": 8, "method": "tools/call", "params": {"name": "flights_search"}}
    )
    assert response["error"] == {"code": rpc.INVALID_PARAMS, "message": "Unknown tool: flights_search"}


@pytest.mark.asyncio
async def test_unknown_method():
    response = await rpc.dispatch({"jsonrpc": "2.0", "id": 9, "method": "prompts/list"})
    assert response["error"]["code"] == rpc.METHOD_NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [[], "tools/list", {"id": 1}])
async def test_invalid_request(payload):
    response = await rpc.dispatch(payload)
    assert response["error"]["code"] == rpc.INVALID_REQUEST
    assert response["id"] is None


@pytest.mark.asyncio
async def test_params_must_be_an_object():
    response = await rpc.dispatch({"jsonrpc": "2.0", "id": 10, "method": "resources/read", "params": ["uri"]})
    assert response["error"]["code"] == rpc.INVALID_PARAMS
    assert response["id"] == 10


@pytest.mark.asyncio
async def test_resources_read_requires_string_uri():
    response = await rpc.dispatch({"jsonrpc": "2.0", "id": 11, "method": "resources/read", "params": {"uri": ["x"]}})
    assert response["error"]["code"] == rpc.INVALID_PARAMS
    assert response["id"] == 11


@pytest.mark.asyncio
async def test_unexpected_errors_become_internal_error(monkeypatch):
    async def explode(self, request):
        raise RuntimeError("search backend exploded")

    monkeypatch.setattr(rpc.AccommodationSearchService, "search", explode)
    response = await rpc.dispatch(
        {
            "jsonrpc": "2.0",
            "id": 12,
            "method": "tools/call",
            "params": {"name": "accommodations_search", "arguments": {"destination": "Prague"}},
        }
    )
    assert response == {"jsonrpc": "2.0", "id": 12, "error": {"code": rpc.INTERNAL_ERROR, "message": "Internal error"}}
