from abc import ABC, abstractmethod
from typing import Any

from music_scraper.browser import Browser


class BaseSource(ABC):
    """Abstract base class for scraped datasets.

    Attributes:
        dataset: Key of the dataset in the last-update ledger.
        file_name: Output file the dataset is written to.
    """

    dataset: str
    file_name: str

    @abstractmethod
    def scrape(self, browser: Browser) -> Any:
        """Scrapes the dataset.

        Args:
            browser: A started Browser.

        Returns:
            JSON-serializable data, ready to be written to file_name.
        """
        pass
