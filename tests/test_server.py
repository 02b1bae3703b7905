"""Tests for the MCP tool surface, driven through an in-memory client."""

import asyncio

import httpx
from fastmcp import Client

from maestro_mcp import server
from maestro_mcp.api_client import ApiClient
from maestro_mcp.config import ApiConfig

FIXTURES_BODY = {
    "errors": [],
    "results": 2,
    "response": [
        {"fixture": {"id": 1}, "teams": {"home": {"id": 1}, "away": {"id": 2}},
         "goals": {"home": 2, "away": 0}},
        {"fixture": {"id": 2}, "teams": {"home": {"id": 3}, "away": {"id": 1}},
         "goals": {"home": 1, "away": 1}},
    ],
}


async def list_tool_names() -> list[str]:
    async with Client(server.mcp) as client:
        return sorted(tool.name for tool in await client.list_tools())


async def call(name: str, arguments: dict):
    async with Client(server.mcp) as client:
        return await client.call_tool(name, arguments, raise_on_error=False)


def mock_client(body: dict) -> ApiClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    return ApiClient(
        ApiConfig(api_key="test-key", base_url="https://api.test"),
        transport=httpx.MockTransport(handler),
    )


class TestRegistration:
    def test_tool_names(self):
        assert asyncio.run(list_tool_names()) == [
            "get-fixtures",
            "get-goal-stats",
            "get-odds",
            "get-predictions",
            "get-teams",
            "list-leagues",
        ]


class TestToolCalls:
    def test_unknown_league_rejected(self, monkeypatch):
        monkeypatch.setattr(server, "_client", mock_client(FIXTURES_BODY))
        result = asyncio.run(call("get-teams", {"league": "EPL", "season": 2024}))
        assert result.is_error

    def test_missing_api_key_is_error_result(self, monkeypatch):
        monkeypatch.delenv("API_SPORTS_KEY", raising=False)
        monkeypatch.setattr(server, "_client", None)
        result = asyncio.run(call("get-teams", {"league": "MLS", "season": 2024}))
        assert result.is_error
        assert server._client is None

    def test_goal_stats(self, monkeypatch):
        monkeypatch.setattr(server, "_client", mock_client(FIXTURES_BODY))
        result = asyncio.run(call("get-goal-stats", {"team": 1, "season": 2024}))
        assert not result.is_error
        text = result.content[0].text
        assert "scored 3 goals and conceded 1 goals in 2 games" in text
        assert "50.00%" in text


class TestGetClient:
    def test_built_once_from_env(self, monkeypatch):
        monkeypatch.setenv("API_SPORTS_KEY", "abc")
        monkeypatch.setattr(server, "_client", None)
        first = server.get_client()
        assert first.config.api_key == "abc"
        assert server.get_client() is first
