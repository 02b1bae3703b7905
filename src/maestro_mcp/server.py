"""Maestro MCP Server — soccer statistics tools backed by API-Football.

Tools:
  - list-leagues: List supported leagues
  - get-teams: Teams in a league for a season
  - get-fixtures: Fixtures by league and/or team
  - get-goal-stats: Goals scored/conceded and clean sheets for a team
  - get-predictions: Upstream predictions for a fixture
  - get-odds: Bookmaker odds for a fixture
"""

from __future__ import annotations

import logging
import os

from fastmcp import FastMCP

from maestro_mcp import tools
from maestro_mcp.api_client import ApiClient
from maestro_mcp.config import ApiConfig
from maestro_mcp.types import LeagueName

logger = logging.getLogger(__name__)

mcp = FastMCP("maestro")

# Built on first use so the server can start without credentials
_client: ApiClient | None = None


def get_client() -> ApiClient:
    global _client
    if _client is None:
        _client = ApiClient(ApiConfig.from_env())
    return _client


PREDICTIONS_DESCRIPTION = """Get predictions about a fixture.

Predictions combine several algorithms (Poisson distribution, comparison
of team statistics, last matches, players). Bookmaker odds are not used.
Also provides comparative statistics between the two teams.

Available predictions:
  Match winner: id of the team that can potentially win the fixture
  Win or draw: if true, the designated team can win or draw
  Under / Over: -1.5 / -2.5 / -3.5 / -4.5 / +1.5 / +2.5 / +3.5 / +4.5
  Goals home / Goals away: -1.5 / -2.5 / -3.5 / -4.5
  Advice (e.g. "Deportivo Santani or draws and -3.5 goals")

-1.5 means a maximum of 1.5 goals in the fixture, i.e. 1 goal.
"""


@mcp.tool(name="list-leagues")
async def list_leagues() -> list[dict]:
    """List the leagues and competitions accepted by the other tools."""
    return tools.list_leagues()


@mcp.tool(name="get-teams")
async def get_teams(league: LeagueName, season: int) -> str:
    """Get a list of teams in a league or competition.

    Args:
        league: League name (MLS or Club World Cup)
        season: The season year (YYYY)
    """
    return await tools.get_teams(get_client(), league, season)


@mcp.tool(name="get-fixtures")
async def get_fixtures(
    season: int,
    league: LeagueName | None = None,
    team: int | None = None,
    upcoming: bool | None = None,
    played: bool | None = None,
) -> str:
    """Search for fixtures in a season. At least a league or team must be provided.

    Args:
        season: The season year (YYYY)
        league: League name (MLS or Club World Cup)
        team: The team id
        upcoming: Only fixtures not started yet
        played: Only finished fixtures
    """
    return await tools.get_fixtures(
        get_client(), season, league=league, team=team,
        upcoming=upcoming, played=played,
    )


@mcp.tool(name="get-goal-stats")
async def get_goal_stats(team: int, season: int) -> str:
    """Get goal statistics for a team in a season.

    Includes total goals scored and conceded, averages per game and
    the share of clean sheets as a percentage (e.g. "50.00%" for one
    clean sheet in two games).

    Args:
        team: The team id
        season: The season year (YYYY)
    """
    return await tools.get_goal_stats(get_client(), team, season)


@mcp.tool(name="get-predictions", description=PREDICTIONS_DESCRIPTION)
async def get_predictions(fixture: str) -> str:
    return await tools.get_predictions(get_client(), fixture)


@mcp.tool(name="get-odds")
async def get_odds(
    fixture: str,
    league: LeagueName | None = None,
    season: int | None = None,
) -> str:
    """Get pre-match bookmaker odds for a fixture.

    Args:
        fixture: The id of the fixture
        league: League name (MLS or Club World Cup)
        season: The season year (YYYY)
    """
    return await tools.get_odds(get_client(), fixture, league=league, season=season)


def main():
    """Entry point for the maestro-mcp CLI command."""
    logging.basicConfig(
        level=os.environ.get("MAESTRO_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("MCP Soccer Statistics Server running")
    mcp.run()


if __name__ == "__main__":
    main()
