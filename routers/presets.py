from typing import Literal, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import Response

from exceptions import PresetNotFoundError, PresetReadOnlyError
from presets.builtin import is_built_in_id
from presets.registry import PresetRegistry, get_registry
from schemas import (
    ErrorResponse,
    OptimizationDefaults,
    OptimizationPreset,
    PresetDraft,
    PresetPatch,
)

router = APIRouter(
    prefix="/presets",
    tags=["presets"],
    responses={401: {"model": ErrorResponse}},
)

NOT_FOUND = {404: {"model": ErrorResponse}}
READ_ONLY = {403: {"model": ErrorResponse}}


def _not_found(preset_id: str) -> PresetNotFoundError:
    return PresetNotFoundError(f"Preset '{preset_id}' not found", preset_id=preset_id)


def _ensure_user_preset(preset_id: str) -> None:
    if is_built_in_id(preset_id):
        raise PresetReadOnlyError(
            f"Preset '{preset_id}' is built-in and cannot be modified",
            preset_id=preset_id,
        )


@router.get("", response_model=list[OptimizationPreset], response_model_exclude_none=True)
def list_presets(
    source: Optional[Literal["builtin", "user"]] = Query(None),
    registry: PresetRegistry = Depends(get_registry),
):
    """List presets in catalog order: built-ins first, then user presets."""
    if source == "builtin":
        return list(registry.built_in_presets)
    if source == "user":
        return registry.list_user_presets()
    return registry.list_all_presets()


@router.get(
    "/{preset_id}",
    response_model=OptimizationPreset,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def get_preset(preset_id: str, registry: PresetRegistry = Depends(get_registry)):
    preset = registry.find_preset_by_id(preset_id)
    if preset is None:
        raise _not_found(preset_id)
    return preset


@router.post(
    "", response_model=OptimizationPreset, response_model_exclude_none=True, status_code=201
)
def create_preset(draft: PresetDraft, registry: PresetRegistry = Depends(get_registry)):
    """Create a user preset.

    Persisting is best-effort: the created preset is returned even when the
    storage backend rejected the write.
    """
    return registry.add_user_preset(draft)


@router.patch(
    "/{preset_id}",
    response_model=OptimizationPreset,
    response_model_exclude_none=True,
    responses={**NOT_FOUND, **READ_ONLY},
)
def update_preset(
    preset_id: str,
    patch: PresetPatch,
    registry: PresetRegistry = Depends(get_registry),
):
    _ensure_user_preset(preset_id)
    updated = registry.update_user_preset(preset_id, patch)
    if updated is None:
        raise _not_found(preset_id)
    return updated


@router.delete("/{preset_id}", status_code=204, responses={**NOT_FOUND, **READ_ONLY})
def delete_preset(preset_id: str, registry: PresetRegistry = Depends(get_registry)):
    _ensure_user_preset(preset_id)
    if not registry.delete_user_preset(preset_id):
        raise _not_found(preset_id)
    return Response(status_code=204)


@router.post(
    "/{preset_id}/resolve",
    response_model=OptimizationDefaults,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def resolve_preset(
    preset_id: str,
    defaults: Optional[OptimizationDefaults] = Body(None),
    registry: PresetRegistry = Depends(get_registry),
):
    """Apply a preset on top of the caller's defaults.

    Fields the preset leaves unset keep the value from ``defaults``.
    """
    resolved = registry.resolve_options(preset_id, defaults)
    if resolved is None:
        raise _not_found(preset_id)
    return resolved
