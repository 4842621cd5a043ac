from typing import Optional

from google.api_core import exceptions as gcs_errors
from google.cloud import storage as gcs_lib

from exceptions import StorageError
from storage.base import PresetStorage
from utils.logging import get_logger

logger = get_logger("storage.gcs")


class GCSStorage(PresetStorage):
    """Google Cloud Storage slot: one JSON blob per key.

    Authentication:
    - Cloud Run (production): Workload identity (automatic)
    - Local development: GOOGLE_APPLICATION_CREDENTIALS env var
    - CI/CD: Service account key or workload identity federation

    A blob upload is a single object write, so a slot is never partially
    written.
    """

    backend = "gcs"

    def __init__(self, bucket: str, prefix: str = "", project: Optional[str] = None):
        self.bucket_name = bucket
        self.prefix = prefix
        self.project = project or None
        self._client = None

    @property
    def client(self):
        """Lazy-initialized GCS client."""
        if self._client is None:
            self._client = gcs_lib.Client()
        return self._client

    def _blob(self, key: str):
        bucket = self.client.bucket(self.bucket_name, user_project=self.project)
        return bucket.blob(f"{self.prefix}{key}.json")

    def read(self, key: str) -> Optional[str]:
        try:
            return self._blob(key).download_as_text(encoding="utf-8")
        except gcs_errors.NotFound:
            return None
        except Exception as e:
            raise StorageError(
                f"GCS read failed: {e}",
                bucket=self.bucket_name,
                key=key,
            )

    def write(self, key: str, text: str) -> None:
        try:
            self._blob(key).upload_from_string(text, content_type="application/json")
        except Exception as e:
            raise StorageError(
                f"GCS upload failed: {e}",
                bucket=self.bucket_name,
                key=key,
            )

    def ping(self) -> bool:
        try:
            self.client.bucket(self.bucket_name, user_project=self.project).reload()
            return True
        except Exception as e:
            logger.warning(f"GCS bucket unreachable: {e}")
            return False
