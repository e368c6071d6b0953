import structlog

from music_scraper.browser import Browser
from music_scraper.config import (
    COUNTRY_HEADER_SELECTOR,
    VENUE_TABLE_SELECTOR,
    VENUES_FILE,
    VENUES_KEY,
    VENUES_URL,
)
from music_scraper.models import VenueParseResult, VenuesDict
from music_scraper.sources.base_source import BaseSource
from music_scraper.sources.venue_parser import parse_venue_tables, summarize_skips
from music_scraper.utils.html import extract_venue_tables

logger = structlog.get_logger(__name__)


class WikipediaVenueSource(BaseSource):
    """Venues by country from the Wikipedia list of music venues."""

    dataset = VENUES_KEY
    file_name = VENUES_FILE

    def __init__(self, url: str = VENUES_URL) -> None:
        self.url = url
        self.result: VenueParseResult | None = None

    def fetch_venues(self, browser: Browser) -> VenueParseResult:
        """Renders the list page and parses every country table.

        Args:
            browser: A started Browser.

        Returns:
            The parsed venues and the skipped rows.
        """
        browser.goto(self.url)

        logger.info("retrieving_tables", url=self.url)
        tables, country_names = extract_venue_tables(
            browser.content(), VENUE_TABLE_SELECTOR, COUNTRY_HEADER_SELECTOR
        )
        if not tables:
            logger.error(
                "no_tables_found",
                url=self.url,
                selector=VENUE_TABLE_SELECTOR,
                suggestion="Is the URL still okay? The page layout may have changed.",
            )
            return VenueParseResult()

        logger.info("tables_retrieved", tables=len(tables), headers=len(country_names))
        result = parse_venue_tables(tables, country_names)

        if result.skipped:
            logger.info("skipped_summary", **summarize_skips(result.skipped))
        return result

    def scrape(self, browser: Browser) -> VenuesDict:
        self.result = self.fetch_venues(browser)
        return self.result.to_dict()
