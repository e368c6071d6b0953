import logging
import sys
import time
from dataclasses import dataclass
from typing import Any

import click
import structlog

from music_scraper import config
from music_scraper.browser import Browser
from music_scraper.countries import generate_countries_and_cities
from music_scraper.exceptions import BrowserError, StorageError
from music_scraper.last_update import LastUpdateLedger
from music_scraper.sources.base_source import BaseSource
from music_scraper.sources.sputnik_source import SputnikGenreSource
from music_scraper.sources.wikipedia_source import WikipediaVenueSource
from music_scraper.storage import Storage

logger = structlog.get_logger(__name__)


@dataclass
class RunContext:
    storage: Storage
    ledger: LastUpdateLedger
    headless: bool = True


def configure_logging(log_file: str | None) -> None:
    """Sends structlog events through stdlib logging to stdout and a log file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
    structlog.configure(
        processors=[structlog.dev.ConsoleRenderer(colors=False)],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def run_source(source: BaseSource, ctx: RunContext) -> Any | None:
    """Scrapes one dataset, saves it and records the update time.

    Returns:
        The saved data, or None if it could not be saved.

    Raises:
        BrowserError: If the browser fails; the browser is closed first.
    """
    start = time.perf_counter()
    ctx.storage.remove_if_exists(source.file_name)

    with Browser(headless=ctx.headless) as browser:
        data = source.scrape(browser)

    try:
        path = ctx.storage.save(data, source.file_name)
    except StorageError as e:
        logger.error("save_failed", dataset=source.dataset, **e.to_dict())
        return None

    logger.info("saved_successfully", dataset=source.dataset, path=str(path))
    ctx.ledger.update(source.dataset)

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info("execution_finished", dataset=source.dataset, duration_ms=duration_ms)
    return data


def run_or_exit(source: BaseSource, ctx: RunContext) -> Any | None:
    try:
        return run_source(source, ctx)
    except BrowserError as e:
        logger.error("browser_failed", dataset=source.dataset, **e.to_dict())
        sys.exit(1)


@click.group()
@click.option(
    "--output-dir",
    default=config.DEFAULT_OUTPUT_DIR,
    show_default=True,
    help="Directory the JSON files are written to",
)
@click.option(
    "--log-file",
    default=config.DEFAULT_LOG_FILE,
    show_default=True,
    help="Log file (empty to log to stdout only)",
)
@click.option("--headed", is_flag=True, help="Show the browser window")
@click.pass_context
def main(ctx: click.Context, output_dir: str, log_file: str, headed: bool) -> None:
    """Music genre and venue scraper"""
    configure_logging(log_file or None)

    storage = Storage(output_dir)
    ctx.obj = RunContext(
        storage=storage, ledger=LastUpdateLedger(storage), headless=not headed
    )


@main.command()
@click.pass_obj
def venues(ctx: RunContext) -> None:
    """Scrape venues by country from Wikipedia, then derive countries."""
    logger.info("starting_venue_scraper")
    ctx.storage.remove_if_exists(config.COUNTRIES_FILE)

    data = run_or_exit(WikipediaVenueSource(), ctx)
    if data is None:
        return

    generate_countries_and_cities(data, ctx.storage, ctx.ledger)


@main.command()
@click.option(
    "--tags-key",
    type=click.Choice(config.GENRE_TAG_KEYS),
    default=config.DEFAULT_GENRE_TAG_KEY,
    show_default=True,
    help="Key holding each genre's tags",
)
@click.option(
    "--file-name", default=config.GENRES_FILE, show_default=True, help="Output file"
)
@click.pass_obj
def genres(ctx: RunContext, tags_key: str, file_name: str) -> None:
    """Scrape genres and their related tags from Sputnik Music."""
    logger.info("starting_genre_scraper")
    run_or_exit(SputnikGenreSource(tags_key=tags_key, file_name=file_name), ctx)


@main.command()
@click.pass_obj
def countries(ctx: RunContext) -> None:
    """Regenerate countries.json from an existing venues.json."""
    try:
        venue_data = ctx.storage.load(config.VENUES_FILE)
    except StorageError as e:
        logger.error("venues_load_failed", **e.to_dict())
        raise click.ClickException(e.message) from e

    generate_countries_and_cities(venue_data, ctx.storage, ctx.ledger)


if __name__ == "__main__":
    main()
