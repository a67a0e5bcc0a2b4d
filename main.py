import sys
from datetime import date
from typing import Optional

import httpx
from loguru import logger
from rich.console import Console

from power_report.config.settings import settings
from power_report.logging.setup import setup_logging

from power_report.calculation.upcoming_games import (
    build_upcoming_games_index,
    upcoming_window,
)
from power_report.normalization.rankings import resolve_rankings, top_rankings
from power_report.report.printer import plain_console, print_report
from power_report.scrapers.base_scraper import PowerReportError, build_client
from power_report.scrapers.rankings_scraper import PowerRankingsScraper
from power_report.scrapers.schedule_scraper import ScheduleScraper
from power_report.utils.misc_utils import describe_error, utc_today


def run(
    client: Optional[httpx.Client] = None,
    today: Optional[date] = None,
    console: Optional[Console] = None,
) -> None:
    """Fetches rankings and schedule, then prints the top teams' upcoming games."""
    owns_client = client is None
    client = client or build_client()

    try:
        rankings_scraper = PowerRankingsScraper(client)
        latest_slug = rankings_scraper.fetch_latest_slug()
        entries = rankings_scraper.fetch_rankings(latest_slug)
        schedule = ScheduleScraper(client).fetch_schedule()
    finally:
        if owns_client:
            client.close()

    ranked = resolve_rankings(entries)
    top_teams = top_rankings(ranked, settings.top_teams)
    logger.info(
        f"Top {len(top_teams)}: {', '.join(t.team_name for t in top_teams)}"
    )

    start, end = upcoming_window(today or utc_today(), settings.days_ahead)
    upcoming_games_index = build_upcoming_games_index(schedule, start, end)

    print_report(top_teams, upcoming_games_index, settings.days_ahead, console)


def main() -> int:
    """Main entry point; returns the process exit code."""
    setup_logging()
    logger.info("Starting power rankings report")

    try:
        run()
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        return 130
    except PowerReportError as e:
        logger.opt(exception=e).debug("Report run failed")
        plain_console(stderr=True).print(f"error: {describe_error(e)}")
        return 1
    except Exception as e:
        logger.opt(exception=e).debug("Unhandled exception in main execution")
        plain_console(stderr=True).print(f"error: {describe_error(e)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
