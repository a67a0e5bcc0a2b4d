# power_report/calculation/upcoming_games.py

import re
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Tuple

from loguru import logger

from power_report.models.schedule import GameListing, ScheduleResponse

# Team id -> that team's games in the window, earliest first
UpcomingGamesIndex = Dict[int, List[GameListing]]

RFC3339_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


def parse_rfc3339(value: str) -> Optional[datetime]:
    """Parses a strict RFC 3339 timestamp; returns None for anything else."""
    match = RFC3339_PATTERN.match(value)
    if not match:
        return None

    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    offset = match["offset"]
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        return datetime.fromisoformat(
            f"{match['date']}T{match['time']}.{fraction}{offset}"
        )
    except ValueError:
        # e.g. 2024-02-30 or 25:00:00
        return None


def upcoming_window(today: date, days: int = 7) -> Tuple[date, date]:
    """Half-open window [today, today + days)."""
    return today, today + timedelta(days=days)


def build_upcoming_games_index(
    schedule: ScheduleResponse, start: date, end: date
) -> UpcomingGamesIndex:
    """Buckets every game dated in [start, end) under both participants' ids.

    The calendar day is the one in the timestamp's own offset. Games with a
    missing or malformed date are skipped. Each bucket is sorted by date,
    ties keeping feed order.
    """
    index: UpcomingGamesIndex = defaultdict(list)
    skipped = 0

    for game_date in schedule.league_schedule.game_dates:
        for game in game_date.games:
            if game.game_date_utc is None:
                skipped += 1
                continue
            date_time = parse_rfc3339(game.game_date_utc)
            if date_time is None:
                skipped += 1
                continue

            game_day = date_time.date()
            if game_day < start or game_day >= end:
                continue

            if game.home_team.team_id is not None:
                index[game.home_team.team_id].append(
                    GameListing(
                        date=game_day,
                        opponent=game.away_team.display_name,
                        is_home=True,
                    )
                )
            if game.away_team.team_id is not None:
                index[game.away_team.team_id].append(
                    GameListing(
                        date=game_day,
                        opponent=game.home_team.display_name,
                        is_home=False,
                    )
                )

    if skipped:
        logger.debug(f"Skipped {skipped} games without a valid UTC date")
    logger.info(f"Indexed upcoming games for {len(index)} teams ({start} to {end})")

    return {
        team_id: sorted(games, key=lambda g: g.date)
        for team_id, games in index.items()
    }
