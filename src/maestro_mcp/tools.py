"""Tool bodies: build query params, call the API and render text.

Kept free of MCP so each tool can be exercised with a plain ``ApiClient``.
"""

from __future__ import annotations

import json
from typing import Any

from maestro_mcp.api_client import ApiClient
from maestro_mcp.result import Result
from maestro_mcp.stats import NoFixtureDataError, aggregate_goal_stats, format_goal_stats
from maestro_mcp.types import LEAGUES, FixturesResponse, LeagueName


def render(result: Result[Any, str], action: str) -> str:
    """JSON-encode a successful payload, or describe the failure."""
    if not result.is_success:
        return f"Failed to {action}: {result.error}"
    return json.dumps(result.value)


def league_id(league: LeagueName | None) -> int | None:
    return LEAGUES[league].id if league else None


def fixture_status(upcoming: bool | None, played: bool | None) -> str | None:
    """Map the upcoming/played flags to an API status code."""
    if upcoming:
        return "NS"
    if played:
        return "FT"
    return None


def list_leagues() -> list[dict]:
    return [{"name": lg.name, "id": lg.id} for lg in LEAGUES.values()]


async def get_teams(client: ApiClient, league: LeagueName, season: int) -> str:
    result = await client.fetch("/teams", {
        "league": league_id(league),
        "season": season,
    })
    return render(result, "fetch teams")


async def get_fixtures(
    client: ApiClient,
    season: int,
    league: LeagueName | None = None,
    team: int | None = None,
    upcoming: bool | None = None,
    played: bool | None = None,
) -> str:
    if league is None and team is None:
        return "Failed to fetch fixtures: at least a league or team must be provided."

    result = await client.fetch("/fixtures", {
        "season": season,
        "league": league_id(league),
        "team": team,
        "status": fixture_status(upcoming, played),
    })
    return render(result, "fetch fixtures")


async def get_goal_stats(client: ApiClient, team: int, season: int) -> str:
    result: Result[FixturesResponse, str] = await client.fetch("/fixtures", {
        "team": team,
        "season": season,
    })
    if not result.is_success:
        return f"Failed to fetch fixtures: {result.error}"

    payload = result.value
    try:
        stats = aggregate_goal_stats(payload["response"], team, payload["results"])
    except NoFixtureDataError:
        return f"No fixture data for team {team} in season {season}."
    return format_goal_stats(stats)


async def get_predictions(client: ApiClient, fixture: str) -> str:
    result = await client.fetch("/predictions", {"fixture": fixture})
    return render(result, "get predictions")


async def get_odds(
    client: ApiClient,
    fixture: str,
    league: LeagueName | None = None,
    season: int | None = None,
) -> str:
    result = await client.fetch("/odds", {
        "fixture": fixture,
        "league": league_id(league),
        "season": season,
    })
    return render(result, "get odds")
