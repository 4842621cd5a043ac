from pydantic_settings import BaseSettings

STORAGE_BACKENDS = ("memory", "filesystem", "redis", "gcs")


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # --- Preset Storage ---
    preset_storage_backend: str = "filesystem"
    preset_storage_key: str = "imgpro_user_presets"
    preset_storage_dir: str = ".palette"
    preset_storage_quota_bytes: int = 0  # memory backend only, 0 = unlimited

    # --- Redis ---
    redis_url: str = ""

    # --- Google Cloud Storage ---
    gcs_bucket: str = ""
    gcs_prefix: str = "presets/"
    gcs_project: str = ""

    # --- Security ---
    api_key: str = ""
    allowed_origins: str = "*"

    # --- Logging ---
    log_level: str = "ERROR"

    model_config = {"env_prefix": "", "case_sensitive": False}

    def model_post_init(self, __context) -> None:
        self.preset_storage_backend = self.preset_storage_backend.lower()
        if self.preset_storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Invalid PRESET_STORAGE_BACKEND: '{self.preset_storage_backend}'. "
                f"Must be one of {', '.join(STORAGE_BACKENDS)}."
            )
        if self.gcs_prefix and not self.gcs_prefix.endswith("/"):
            self.gcs_prefix += "/"


settings = Settings()
