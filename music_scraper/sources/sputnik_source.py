import structlog

from music_scraper.browser import Browser
from music_scraper.config import (
    BROWSE_GENRE_SELECTOR,
    DEFAULT_GENRE_TAG_KEY,
    GENRE_TAG_KEYS,
    GENRES_FILE,
    GENRES_KEY,
    SPUTNIK_URL,
)
from music_scraper.exceptions import ConfigurationError
from music_scraper.models import Genre, ScrapedGenre
from music_scraper.sources.base_source import BaseSource
from music_scraper.sources.genre_parser import parse_genre_list, parse_genre_tags

logger = structlog.get_logger(__name__)


class SputnikGenreSource(BaseSource):
    """Genres and their related tags from Sputnik Music."""

    dataset = GENRES_KEY

    def __init__(
        self,
        url: str = SPUTNIK_URL,
        tags_key: str = DEFAULT_GENRE_TAG_KEY,
        file_name: str = GENRES_FILE,
    ) -> None:
        """Initializes the SputnikGenreSource.

        Args:
            url: Sputnik Music landing page.
            tags_key: Key holding the tag list in each output entry,
                "compatible" or "related".
            file_name: Output file name.

        Raises:
            ConfigurationError: If tags_key is not a supported key.
        """
        if tags_key not in GENRE_TAG_KEYS:
            raise ConfigurationError(
                f"Unsupported tags key: {tags_key}",
                parameter="tags_key",
                suggestion=f"Use one of: {', '.join(GENRE_TAG_KEYS)}",
            )
        self.url = url
        self.tags_key = tags_key
        self.file_name = file_name

    def fetch_genre_list(self, browser: Browser) -> list[Genre]:
        """Opens the "browse genres" pop-up and lists the genres in it."""
        browser.goto(self.url)
        browser.click(BROWSE_GENRE_SELECTOR)

        logger.info("retrieving_genres", url=browser.url)
        genres = parse_genre_list(browser.content(), browser.url)
        logger.info("genres_retrieved", count=len(genres))
        return genres

    def fetch_genre_details(self, browser: Browser, genre: Genre) -> ScrapedGenre:
        """Collects the tags listed on a genre's detail page."""
        browser.goto(genre.url)

        tags = parse_genre_tags(browser.content())
        logger.info("tags_processed", genre=genre.name, count=len(tags))
        return ScrapedGenre(name=genre.name, tags=tuple(tags))

    def scrape(self, browser: Browser) -> list[dict[str, str | list[str]]]:
        genres = self.fetch_genre_list(browser)

        logger.info("processing_subgenres", count=len(genres))
        scraped = [self.fetch_genre_details(browser, g) for g in genres]
        logger.info("subgenres_processed", count=len(scraped))

        return [g.to_dict(self.tags_key) for g in scraped]
