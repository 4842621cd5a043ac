from typing import Optional

from exceptions import StorageQuotaExceededError
from storage.base import PresetStorage


class MemoryStorage(PresetStorage):
    """Process-local storage slot.

    ``quota_bytes`` caps the UTF-8 size of all stored values combined, the way
    a browser caps localStorage. 0 or None means unlimited.
    """

    backend = "memory"

    def __init__(self, quota_bytes: Optional[int] = None):
        self._slots: dict[str, str] = {}
        self.quota_bytes = quota_bytes or None

    def read(self, key: str) -> Optional[str]:
        return self._slots.get(key)

    def write(self, key: str, text: str) -> None:
        if self.quota_bytes is not None:
            used = sum(
                len(value.encode("utf-8"))
                for slot, value in self._slots.items()
                if slot != key
            )
            needed = used + len(text.encode("utf-8"))
            if needed > self.quota_bytes:
                raise StorageQuotaExceededError(
                    f"Storage quota exceeded writing '{key}'",
                    key=key,
                    needed=needed,
                    quota=self.quota_bytes,
                )
        self._slots[key] = text
