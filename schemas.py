from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

ImageFormatName = Literal["webp", "jpeg", "png", "avif"]


class OptimizationOptions(BaseModel):
    """Sparse optimization overrides carried by a preset.

    Every field is optional; an absent field means "use the caller's default".
    The key set is closed: unknown keys are rejected rather than passed through.
    JSON uses the camelCase keys of the browser client.
    """

    format: Optional[ImageFormatName] = None
    quality: Optional[float] = Field(default=None, ge=0, le=1)
    max_width_or_height: Optional[int] = Field(
        default=None, gt=0, alias="maxWidthOrHeight"
    )
    max_size_kb: Optional[float] = Field(default=None, gt=0, alias="maxSizeKB")
    max_size_mb: Optional[float] = Field(default=None, gt=0, alias="maxSizeMB")
    preserve_exif: Optional[bool] = Field(default=None, alias="preserveExif")
    preserve_quality: Optional[bool] = Field(default=None, alias="preserveQuality")

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}


class OptimizationDefaults(OptimizationOptions):
    """Complete option record a preset is applied on top of."""

    format: ImageFormatName = "webp"
    quality: float = Field(default=0.8, ge=0, le=1)


class OptimizationPreset(BaseModel):
    """A named optimization profile, built-in or user-defined."""

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    icon: Optional[str] = None
    is_built_in: bool = Field(default=False, alias="isBuiltIn")
    options: OptimizationOptions = Field(default_factory=OptimizationOptions)

    model_config = {"frozen": True, "populate_by_name": True}


class PresetDraft(BaseModel):
    """Payload for creating a user preset (id and isBuiltIn are assigned)."""

    name: str = Field(min_length=1)
    description: str = ""
    icon: Optional[str] = None
    options: OptimizationOptions = Field(default_factory=OptimizationOptions)

    model_config = {"extra": "forbid", "populate_by_name": True}


class PresetPatch(BaseModel):
    """Partial update for a user preset.

    Only fields explicitly present are applied. A patched ``options`` replaces
    the preset's whole options record; it is not merged key by key.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    options: Optional[OptimizationOptions] = None

    model_config = {"extra": "forbid", "populate_by_name": True}

    @field_validator("name", "description", "options", mode="before")
    @classmethod
    def _reject_null(cls, value):
        if value is None:
            raise ValueError("field may be omitted but not set to null")
        return value


class ErrorResponse(BaseModel):
    """Standard error response."""

    success: bool = False
    error: str
    message: str


class HealthResponse(BaseModel):
    """GET /health response."""

    status: str = "ok"
    checks: dict
    version: str
