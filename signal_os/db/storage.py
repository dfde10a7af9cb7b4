"""Key/value storage slots backing the persistence gateway."""

from functools import lru_cache
from pathlib import Path

from signal_os.core.config import get_settings


class MemoryStorage:
    """In-process storage (tests and embedded use)."""

    def __init__(self) -> None:
        self.items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class FileStorage:
    """One file per key under a directory.

    Raises OSError on unreadable or unwritable locations; callers decide
    whether that matters.
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


Storage = MemoryStorage | FileStorage


@lru_cache(maxsize=1)
def get_storage() -> FileStorage:
    """
    Get the configured file storage (cached singleton).

    Returns:
        FileStorage rooted at STORAGE_DIR
    """
    settings = get_settings()
    return FileStorage(settings.STORAGE_DIR)
