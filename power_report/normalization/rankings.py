# power_report/normalization/rankings.py
from typing import Iterable, List, Optional

from loguru import logger

from power_report.models.rankings import PowerRankingEntry, ResolvedRanking
from power_report.scrapers.base_scraper import PowerReportError


class NoRankedTeamsError(PowerReportError):
    """No article entry had a rank, a team id and a team name."""

    pass


def resolve_ranking(entry: PowerRankingEntry) -> Optional[ResolvedRanking]:
    """Returns the validated ranking, or None if any required field is absent."""
    team_name = entry.preferred_team_name
    if entry.current_week_rank is None or entry.team_id is None or team_name is None:
        return None
    return ResolvedRanking(
        team_id=entry.team_id, team_name=team_name, rank=entry.current_week_rank
    )


def resolve_rankings(entries: Iterable[PowerRankingEntry]) -> List[ResolvedRanking]:
    """Drops incomplete entries and orders the rest by rank.

    The sort is stable, so teams sharing a rank keep their article order.

    Raises:
        NoRankedTeamsError: if no entry survives.
    """
    entries = list(entries)
    resolved = [r for r in (resolve_ranking(e) for e in entries) if r is not None]
    skipped = len(entries) - len(resolved)
    if skipped:
        logger.debug(f"Skipped {skipped} incomplete ranking entries")

    if not resolved:
        raise NoRankedTeamsError(
            "no ranked teams found in the latest power rankings article"
        )

    return sorted(resolved, key=lambda r: r.rank)


def top_rankings(rankings: List[ResolvedRanking], count: int = 4) -> List[ResolvedRanking]:
    return rankings[:count]
