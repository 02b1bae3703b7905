"""Shared types and constants for the Maestro MCP server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypedDict


class TeamRef(TypedDict):
    """One side of a fixture."""
    id: int
    name: str


class FixtureTeams(TypedDict):
    home: TeamRef
    away: TeamRef


class FixtureGoals(TypedDict):
    """Full-time goals. Both are null for fixtures not yet played."""
    home: int | None
    away: int | None


class FixtureRecord(TypedDict):
    """One entry of the ``response`` array returned by ``/fixtures``."""
    fixture: dict[str, Any]
    teams: FixtureTeams
    goals: FixtureGoals


class ApiResponse(TypedDict):
    """Envelope shared by every API-Football v3 endpoint."""
    errors: list | dict
    results: int
    response: list


class FixturesResponse(TypedDict):
    errors: list | dict
    results: int
    response: list[FixtureRecord]


@dataclass(frozen=True)
class LeagueInfo:
    """League metadata."""
    name: str
    id: int  # API-Football league id


LeagueName = Literal["MLS", "Club World Cup"]

# Closed set of leagues accepted by the tools
LEAGUES: dict[str, LeagueInfo] = {
    "MLS":            LeagueInfo(name="MLS",            id=253),
    "Club World Cup": LeagueInfo(name="Club World Cup", id=15),
}
