from abc import ABC, abstractmethod
from typing import Optional


class PresetStorage(ABC):
    """Abstract durable storage slot for serialized user presets.

    A slot is addressed by a string key and holds one text value. ``write``
    replaces the whole value; backends must never leave a partial value behind.
    """

    backend: str

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the stored text for ``key``, or None if the slot is empty.

        Raises:
            StorageError: If the backend cannot be read.
        """

    @abstractmethod
    def write(self, key: str, text: str) -> None:
        """Replace the value stored under ``key``.

        Raises:
            StorageQuotaExceededError: If the value does not fit.
            StorageError: If the backend cannot be written.
        """

    def ping(self) -> bool:
        """Check backend reachability (used by /health)."""
        return True
