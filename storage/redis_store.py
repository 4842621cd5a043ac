from typing import Optional

import redis

from exceptions import StorageError, StorageQuotaExceededError
from storage.base import PresetStorage
from utils.logging import get_logger

logger = get_logger("storage.redis")


class RedisStorage(PresetStorage):
    """Storage slot held in a single Redis string key.

    The client is created lazily so that importing the module never opens a
    connection. A malformed URL or a stored value that is not UTF-8 surfaces
    as ``StorageError`` like any other backend failure.
    """

    backend = "redis"

    def __init__(self, url: str, key_prefix: str = "palette:"):
        self.url = url
        self.key_prefix = key_prefix
        self._client = None

    @property
    def client(self):
        """Lazy-initialized Redis client."""
        if self._client is None:
            self._client = redis.Redis.from_url(self.url, decode_responses=True)
        return self._client

    def read(self, key: str) -> Optional[str]:
        try:
            return self.client.get(self.key_prefix + key)
        except (redis.RedisError, ValueError) as e:
            raise StorageError(f"Redis read failed: {e}", key=key)

    def write(self, key: str, text: str) -> None:
        try:
            self.client.set(self.key_prefix + key, text)
        except redis.ResponseError as e:
            # maxmemory reached with a noeviction policy
            if str(e).startswith("OOM"):
                raise StorageQuotaExceededError(
                    f"Redis out of memory: {e}", key=key
                )
            raise StorageError(f"Redis write failed: {e}", key=key)
        except (redis.RedisError, ValueError) as e:
            raise StorageError(f"Redis write failed: {e}", key=key)

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except (redis.RedisError, ValueError):
            logger.warning("Redis unavailable", extra={"context": {"url": self.url}})
            return False
