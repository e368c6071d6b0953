"""Countries and their cities, derived from the scraped venues."""

from collections.abc import Mapping, Sequence

import structlog

from .config import COUNTRIES_FILE, COUNTRIES_KEY
from .exceptions import StorageError
from .last_update import LastUpdateLedger
from .models import CountriesDict, VenueDict
from .storage import Storage

logger = structlog.get_logger(__name__)


def parse_countries(
    venues: Mapping[str, Sequence[VenueDict]],
) -> dict[str, set[str]]:
    """Maps each country to the distinct cities of its venues."""
    countries: dict[str, set[str]] = {}
    for country_name, country_venues in venues.items():
        logger.debug("adding_country", country=country_name)
        countries[country_name] = {v["city"] for v in country_venues}
    return countries


def serialize_countries(countries: Mapping[str, set[str]]) -> CountriesDict:
    # Sets are not JSON serializable; sort for stable output.
    return {name: sorted(cities) for name, cities in countries.items()}


def generate_countries_and_cities(
    venues: Mapping[str, Sequence[VenueDict]],
    storage: Storage,
    ledger: LastUpdateLedger,
) -> bool:
    """Writes countries.json and records its update time.

    Returns:
        True if the file was written, False if saving failed.
    """
    logger.info("generating_countries", count=len(venues))
    countries = serialize_countries(parse_countries(venues))

    try:
        path = storage.save(countries, COUNTRIES_FILE)
    except StorageError as e:
        logger.error("countries_save_failed", **e.to_dict())
        return False

    logger.info("countries_saved", path=str(path), count=len(countries))
    ledger.update(COUNTRIES_KEY)
    return True
