"""Shared pytest fixtures for music scraper tests."""

from pathlib import Path

import pytest

from music_scraper.last_update import LastUpdateLedger
from music_scraper.storage import Storage


@pytest.fixture
def test_data_dir() -> Path:
    """Returns the path to the test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def venues_html(test_data_dir: Path) -> str:
    """A trimmed copy of the Wikipedia list of music venues."""
    return (test_data_dir / "list_of_music_venues.html").read_text(encoding="utf-8")


@pytest.fixture
def sputnik_home_html(test_data_dir: Path) -> str:
    return (test_data_dir / "sputnik_home.html").read_text(encoding="utf-8")


@pytest.fixture
def sputnik_genre_html(test_data_dir: Path) -> str:
    return (test_data_dir / "sputnik_genre.html").read_text(encoding="utf-8")


@pytest.fixture
def storage(tmp_path: Path) -> Storage:
    """Storage writing into a temporary output directory."""
    return Storage(str(tmp_path / "output"))


@pytest.fixture
def ledger(storage: Storage) -> LastUpdateLedger:
    return LastUpdateLedger(storage)
