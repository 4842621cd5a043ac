from config import settings
from storage.base import PresetStorage


def create_storage() -> PresetStorage:
    """Build the storage backend named by PRESET_STORAGE_BACKEND.

    Backend modules are imported on demand so that redis and
    google-cloud-storage are only loaded when selected.
    """
    backend = settings.preset_storage_backend

    if backend == "memory":
        from storage.memory import MemoryStorage

        return MemoryStorage(quota_bytes=settings.preset_storage_quota_bytes)

    if backend == "redis":
        from storage.redis_store import RedisStorage

        if not settings.redis_url:
            raise ValueError("REDIS_URL is required for the redis storage backend")
        return RedisStorage(settings.redis_url)

    if backend == "gcs":
        from storage.gcs import GCSStorage

        if not settings.gcs_bucket:
            raise ValueError("GCS_BUCKET is required for the gcs storage backend")
        return GCSStorage(
            settings.gcs_bucket,
            prefix=settings.gcs_prefix,
            project=settings.gcs_project,
        )

    from storage.filesystem import FilesystemStorage

    return FilesystemStorage(settings.preset_storage_dir)
