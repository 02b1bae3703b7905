"""Goal statistics derived from a team's fixture list.

Pure computation, no I/O.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from maestro_mcp.types import FixtureRecord

logger = logging.getLogger(__name__)


class NoFixtureDataError(ValueError):
    """Upstream reported zero results, so no per-game ratio exists."""


@dataclass(frozen=True)
class TeamGoalStats:
    """Goal totals for one team over one season.

    ``results`` is the count reported by the upstream query and is the
    denominator of every ratio; ``games_counted`` is how many fixtures
    actually involved the team.
    """
    goals_scored: int
    goals_conceded: int
    clean_sheets: int
    games_counted: int
    results: int

    @property
    def average_scored(self) -> float:
        return self.goals_scored / self.results

    @property
    def average_conceded(self) -> float:
        return self.goals_conceded / self.results

    @property
    def clean_sheet_rate(self) -> float:
        return self.clean_sheets / self.results


def aggregate_goal_stats(
    fixtures: list[FixtureRecord], team_id: int, results: int
) -> TeamGoalStats:
    """Fold fixtures into scored/conceded totals and clean sheets for ``team_id``.

    Fixtures the team did not take part in are skipped. Null goal counts
    (fixtures not yet played) add nothing and never count as a clean sheet.
    Raises NoFixtureDataError when ``results`` is zero.
    """
    if results <= 0:
        raise NoFixtureDataError(f"No data: upstream reported {results} results.")

    scored = 0
    conceded = 0
    clean_sheets = 0
    counted = 0

    for record in fixtures:
        teams = record["teams"]
        goals = record["goals"]

        if teams["home"]["id"] == team_id:
            own, against = goals["home"], goals["away"]
        elif teams["away"]["id"] == team_id:
            own, against = goals["away"], goals["home"]
        else:
            logger.debug(
                "Skipping fixture %s: team %d on neither side",
                record.get("fixture", {}).get("id"), team_id,
            )
            continue

        counted += 1
        scored += own or 0
        conceded += against or 0
        if against == 0:
            clean_sheets += 1

    if counted != results:
        logger.warning(
            "Team %d matched %d fixtures but upstream reported %d results",
            team_id, counted, results,
        )

    return TeamGoalStats(
        goals_scored=scored,
        goals_conceded=conceded,
        clean_sheets=clean_sheets,
        games_counted=counted,
        results=results,
    )


def format_goal_stats(stats: TeamGoalStats) -> str:
    """Render stats as a sentence, ratios to two decimals."""
    return (
        f"The team has scored {stats.goals_scored} goals and conceded "
        f"{stats.goals_conceded} goals in {stats.results} games. "
        f"Their average goals scored per game is {stats.average_scored:.2f} "
        f"and their average goals conceded per game is "
        f"{stats.average_conceded:.2f}. "
        f"Their percentage of clean sheets is "
        f"{stats.clean_sheet_rate * 100:.2f}%."
    )
