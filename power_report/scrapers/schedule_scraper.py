# power_report/scrapers/schedule_scraper.py

from loguru import logger

from power_report.config.settings import settings
from power_report.models.schedule import ScheduleResponse
from .base_scraper import BaseScraper, PowerReportError
from .next_data import parse_json

JSON_HEADERS = {
    "Accept": "application/json",
    "Accept-Language": settings.accept_language,
}


class ScheduleScraper(BaseScraper):
    """Reads the league's static schedule feed."""

    def fetch_schedule(self) -> ScheduleResponse:
        try:
            body = self.fetch_text(settings.schedule_url, headers=JSON_HEADERS)
            schedule = parse_json(
                body, ScheduleResponse, "failed to parse league schedule JSON"
            )
        except PowerReportError as e:
            raise e.with_context("failed to fetch league schedule")

        logger.info(
            f"Loaded schedule with {len(schedule.league_schedule.game_dates)} game dates"
        )
        return schedule
