import json
from pathlib import Path
from typing import Any

import structlog

from .config import DEFAULT_OUTPUT_DIR
from .exceptions import StorageError

logger = structlog.get_logger(__name__)


class Storage:
    """Reads and writes the JSON output files.

    Files are written compactly (no indentation) in UTF-8, one file per
    dataset, all under a single output directory.
    """

    def __init__(self, base_dir: str = DEFAULT_OUTPUT_DIR) -> None:
        """Initializes the Storage instance.

        Args:
            base_dir: Directory holding the output files. Relative paths are
                resolved against the current working directory.
        """
        self.base_dir = Path(base_dir)

    def full_path(self, file_name: str) -> Path:
        """Returns the absolute path of an output file."""
        return (Path.cwd() / self.base_dir / file_name).resolve()

    def remove_if_exists(self, file_name: str) -> bool:
        """Deletes a stale output file before a run.

        Args:
            file_name: Name of the file inside the output directory.

        Returns:
            False if the file existed but could not be removed, True otherwise.
        """
        path = self.full_path(file_name)
        if not path.exists():
            return True

        logger.info("file_exists_removing", path=str(path))
        try:
            path.unlink()
        except OSError as e:
            logger.error(
                "file_remove_failed",
                path=str(path),
                error=str(e),
                suggestion="Please delete it manually and re-run the script.",
            )
            return False
        return True

    def save(self, obj: Any, file_name: str) -> Path:
        """Serializes an object to a JSON file, overwriting it.

        Args:
            obj: JSON-serializable data.
            file_name: Name of the file inside the output directory.

        Returns:
            The path written to.

        Raises:
            StorageError: If the data cannot be serialized or written.
        """
        path = self.full_path(file_name)
        try:
            content = json.dumps(obj, ensure_ascii=False, separators=(",", ":"))
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(
                f"Could not save {file_name}: {e}", path=str(path), operation="write"
            ) from e

        logger.debug("file_saved", path=str(path), bytes=len(content))
        return path

    def load(self, file_name: str) -> Any:
        """Loads a JSON output file.

        Raises:
            StorageError: If the file is missing or not valid JSON.
        """
        path = self.full_path(file_name)
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(
                f"Could not read {file_name}: {e}", path=str(path), operation="read"
            ) from e
