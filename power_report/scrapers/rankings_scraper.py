# power_report/scrapers/rankings_scraper.py

from typing import List

from loguru import logger

from power_report.config.settings import settings
from power_report.models.rankings import (
    ArticleResponse,
    CategoryResponse,
    PowerRankingEntry,
)
from .base_scraper import BaseScraper, PowerReportError
from .next_data import extract_next_data

HTML_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/json",
    "Accept-Language": settings.accept_language,
}


class NoArticlesFoundError(PowerReportError):
    """The category page lists no article with a usable slug."""

    pass


class PowerRankingsScraper(BaseScraper):
    """Finds the latest power rankings article and reads its ranking table."""

    def fetch_latest_slug(self) -> str:
        """Returns the first non-blank slug listed on the category page."""
        try:
            body = self.fetch_text(settings.category_url, headers=HTML_HEADERS)
            data = extract_next_data(body, CategoryResponse)
            slug = next((s.strip() for s in data.slugs if s.strip()), None)
            if slug is None:
                raise NoArticlesFoundError(
                    "no articles found in power rankings category"
                )
        except PowerReportError as e:
            raise e.with_context("failed to fetch power rankings category page")

        logger.info(f"Latest power rankings article: {slug}")
        return slug

    def fetch_rankings(self, slug: str) -> List[PowerRankingEntry]:
        """Returns the article's raw ranking entries, unfiltered."""
        url = settings.article_url_template.format(slug=slug)
        try:
            body = self.fetch_text(url, headers=HTML_HEADERS)
            data = extract_next_data(body, ArticleResponse)
        except PowerReportError as e:
            raise e.with_context(f"failed to fetch power rankings article at {url}")

        entries = data.power_rankings
        logger.info(f"Found {len(entries)} ranking entries in {slug}")
        return entries
