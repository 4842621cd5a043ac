class PaletteError(Exception):
    """Base exception for all Palette errors."""

    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, **kwargs):
        self.message = message
        self.details = kwargs
        super().__init__(message)


class AuthenticationError(PaletteError):
    """Invalid or missing API key."""

    status_code = 401
    error_code = "unauthorized"


class PresetReadOnlyError(PaletteError):
    """Attempt to modify or delete a built-in preset."""

    status_code = 403
    error_code = "preset_read_only"


class PresetNotFoundError(PaletteError):
    """No preset with the requested id."""

    status_code = 404
    error_code = "preset_not_found"


class StorageError(PaletteError):
    """Preset storage backend unavailable or failed."""

    status_code = 503
    error_code = "storage_unavailable"


class StorageQuotaExceededError(StorageError):
    """Write rejected because the storage slot is full."""

    status_code = 507
    error_code = "storage_quota_exceeded"
