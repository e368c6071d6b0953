from unittest.mock import patch

from music_scraper.countries import (
    generate_countries_and_cities,
    parse_countries,
    serialize_countries,
)
from music_scraper.exceptions import StorageError
from music_scraper.last_update import LastUpdateLedger
from music_scraper.storage import Storage

VENUES = {
    "Testland": [
        {"venue": "Alpha Arena", "city": "Springfield", "capacity": "80,000"},
        {"venue": "Beta Hall", "city": "Springfield", "capacity": "10,000"},
        {"venue": "Epsilon Theatre", "city": "Capital City", "capacity": "9,000"},
    ],
    "Secondland": [
        {"venue": "Eta Hall", "city": "Ogdenville", "capacity": "2,500"},
    ],
}


def test_parse_countries_deduplicates_cities() -> None:
    assert parse_countries(VENUES) == {
        "Testland": {"Springfield", "Capital City"},
        "Secondland": {"Ogdenville"},
    }


def test_parse_countries_is_idempotent() -> None:
    assert parse_countries(VENUES) == parse_countries(VENUES)


def test_parse_countries_empty() -> None:
    assert parse_countries({}) == {}


def test_serialize_countries_sorts_cities() -> None:
    assert serialize_countries({"Testland": {"Springfield", "Capital City"}}) == {
        "Testland": ["Capital City", "Springfield"]
    }


def test_generate_countries_and_cities(
    storage: Storage, ledger: LastUpdateLedger
) -> None:
    assert generate_countries_and_cities(VENUES, storage, ledger) is True

    assert storage.load("countries.json") == {
        "Testland": ["Capital City", "Springfield"],
        "Secondland": ["Ogdenville"],
    }
    assert "countries" in ledger.read()


def test_generate_save_failure_skips_ledger(
    storage: Storage, ledger: LastUpdateLedger
) -> None:
    with patch.object(storage, "save", side_effect=StorageError("read-only")):
        assert generate_countries_and_cities(VENUES, storage, ledger) is False

    assert ledger.read() == {}
