"""Keeps track of the last time each dataset was written.

The game client reads last-update-time.json to decide whether any of its local
databases need refreshing.
"""

from datetime import UTC, datetime

import structlog

from .config import LAST_UPDATE_FILE
from .exceptions import StorageError
from .models import LedgerDict
from .storage import Storage

logger = structlog.get_logger(__name__)


class LastUpdateLedger:
    """Dataset key -> ISO 8601 timestamp, persisted as a single JSON file."""

    def __init__(self, storage: Storage, file_name: str = LAST_UPDATE_FILE) -> None:
        self.storage = storage
        self.file_name = file_name

    def read(self) -> LedgerDict:
        """Loads the ledger, treating a missing or broken file as empty."""
        path = self.storage.full_path(self.file_name)
        logger.debug("ledger_reading", path=str(path))

        try:
            data = self.storage.load(self.file_name)
        except StorageError:
            logger.info("ledger_not_found", path=str(path))
            return {}

        if not isinstance(data, dict):
            logger.warning("ledger_invalid", path=str(path), type=type(data).__name__)
            return {}
        return data

    def update(self, key: str, time: datetime | None = None) -> bool:
        """Records the update time of a dataset.

        Args:
            key: Dataset key (e.g. "countries").
            time: Update time; defaults to now (UTC).

        Returns:
            True if the ledger was written, False otherwise.
        """
        logger.info("ledger_updating", key=key)
        ledger = self.read()

        if key in ledger:
            logger.debug("ledger_key_exists", key=key)
        else:
            logger.debug("ledger_key_created", key=key)

        ledger[key] = (time or datetime.now(UTC)).isoformat()

        try:
            self.storage.save(ledger, self.file_name)
        except StorageError as e:
            logger.error("ledger_update_failed", key=key, **e.to_dict())
            return False

        logger.info("ledger_updated", key=key, timestamp=ledger[key])
        return True
