import os
import tempfile
from pathlib import Path
from typing import Optional

from exceptions import StorageError
from storage.base import PresetStorage
from utils.logging import get_logger

logger = get_logger("storage.filesystem")


class FilesystemStorage(PresetStorage):
    """One JSON file per key under a directory.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, so readers see either the old or the new value.
    """

    backend = "filesystem"

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise StorageError(f"Invalid storage key: '{key}'", key=key)
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}", key=key)

    def write(self, key: str, text: str) -> None:
        path = self._path(key)
        tmp_name = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{key}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed to write {path}: {e}", key=key)
        logger.debug("Wrote %d bytes to %s", len(text), path)

    def ping(self) -> bool:
        return self.directory.is_dir() or not self.directory.exists()
