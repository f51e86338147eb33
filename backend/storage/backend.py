"""Key-value storage backends for locally persisted state.

Follows the browser ``localStorage`` contract: string keys mapped to string
blobs that are always read and written whole.

- ``JsonFileStorage`` keeps one file per key under the storage directory
- ``InMemoryStorage`` backs tests and throwaway sessions
"""

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class StorageError(Exception):
    """Raised when the storage medium cannot be read or written."""


class KeyValueStorage(ABC):
    """Abstract string-keyed blob storage."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the blob stored under key, or None when absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Overwrite the blob stored under key."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete the blob stored under key. Absent keys are ignored."""


class InMemoryStorage(KeyValueStorage):
    """Dictionary-backed storage. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """One file per key inside a directory.

    Writes go to a sibling temp file that is then renamed over the target, so a
    reader never sees a half-written blob.
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory).expanduser()

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / key

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Failed to read storage key %s: %s", key, e)
            raise StorageError(f"Failed to read '{key}': {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            logger.error("Failed to write storage key %s: %s", key, e)
            raise StorageError(f"Failed to write '{key}': {e}") from e

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("Failed to remove storage key %s: %s", key, e)
            raise StorageError(f"Failed to remove '{key}': {e}") from e
