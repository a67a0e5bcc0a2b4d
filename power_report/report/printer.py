# power_report/report/printer.py
from typing import Iterable, Optional

from rich.console import Console

from power_report.calculation.upcoming_games import UpcomingGamesIndex
from power_report.models.rankings import ResolvedRanking
from power_report.models.schedule import GameListing


def plain_console(stderr: bool = False) -> Console:
    """Console that writes text verbatim: no markup, emoji, highlighting or wrapping."""
    return Console(
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def format_listing(listing: GameListing) -> str:
    location = "vs" if listing.is_home else "@"
    return f"  {listing.date:%Y-%m-%d} {location} {listing.opponent}"


def print_report(
    rankings: Iterable[ResolvedRanking],
    index: UpcomingGamesIndex,
    days: int = 7,
    console: Optional[Console] = None,
) -> None:
    """Prints one block per ranked team with its games in the window."""
    console = console or plain_console()

    for team in rankings:
        console.print(f"{team.team_name} (Rank {team.rank})")
        games = index.get(team.team_id)
        if games:
            for game in games:
                console.print(format_listing(game))
        else:
            console.print(f"  No games scheduled in the next {days} days.")
        console.print()
