"""Preset catalog: built-in presets layered with persisted user presets."""

import json
import time
import uuid
from collections.abc import Callable, Mapping, Sequence
from typing import Optional, Union

from pydantic import ValidationError

from config import settings
from exceptions import StorageError
from presets.builtin import BUILT_IN_PRESETS
from schemas import OptimizationDefaults, OptimizationPreset, PresetDraft, PresetPatch
from storage.base import PresetStorage
from utils.logging import get_logger

logger = get_logger("presets.registry")


def generate_user_preset_id() -> str:
    """Timestamp-derived id with a random suffix so same-millisecond adds differ."""
    return f"user_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


class PresetRegistry:
    """Catalog of optimization presets.

    Built-ins come from code and are never persisted. User presets live in a
    single storage slot as one JSON array; every mutation reads the slot,
    changes the list and writes the whole list back.

    Reads never raise: a missing, unreadable or corrupt slot is treated as
    "no user presets". Writes never raise either: a failed persist is logged
    and the mutation's return value is still handed to the caller, so
    durability is best-effort. Concurrent writers to the same slot from other
    processes are last-writer-wins.
    """

    def __init__(
        self,
        storage: PresetStorage,
        key: Optional[str] = None,
        id_factory: Callable[[], str] = generate_user_preset_id,
    ):
        self.storage = storage
        self.key = key or settings.preset_storage_key
        self._id_factory = id_factory

    @property
    def built_in_presets(self) -> tuple[OptimizationPreset, ...]:
        return BUILT_IN_PRESETS

    def list_user_presets(self) -> list[OptimizationPreset]:
        """Load the persisted user presets, or [] if unavailable."""
        try:
            raw = self.storage.read(self.key)
        except StorageError as e:
            self._warn("Failed to load user presets", e)
            return []

        if raw is None:
            return []

        try:
            entries = json.loads(raw)
        except (ValueError, RecursionError) as e:
            self._warn("Failed to load user presets: invalid JSON", e)
            return []

        if not isinstance(entries, list):
            self._warn(
                "Failed to load user presets: expected a JSON array",
                type(entries).__name__,
            )
            return []

        presets = []
        seen = set()
        for index, entry in enumerate(entries):
            try:
                preset = OptimizationPreset.model_validate(entry)
            except ValidationError as e:
                self._warn(f"Skipping invalid user preset at index {index}", e)
                continue
            if preset.id in seen:
                self._warn(f"Skipping duplicate user preset at index {index}", preset.id)
                continue
            seen.add(preset.id)
            if preset.is_built_in:
                preset = preset.model_copy(update={"is_built_in": False})
            presets.append(preset)
        return presets

    def persist_user_presets(self, presets: Sequence[OptimizationPreset]) -> bool:
        """Replace the stored user presets with ``presets``.

        Returns:
            True if the slot was written, False if the backend refused it.
        """
        payload = json.dumps(
            [
                p.model_dump(mode="json", by_alias=True, exclude_none=True)
                for p in presets
            ],
            ensure_ascii=False,
        )
        try:
            self.storage.write(self.key, payload)
        except StorageError as e:
            self._warn("Failed to save user presets", e)
            return False
        return True

    def add_user_preset(self, draft: Union[PresetDraft, Mapping]) -> OptimizationPreset:
        """Create, persist and return a new user preset.

        The preset is returned even if persisting it failed.
        """
        if not isinstance(draft, PresetDraft):
            draft = PresetDraft.model_validate(draft)

        user_presets = self.list_user_presets()
        taken = {p.id for p in BUILT_IN_PRESETS} | {p.id for p in user_presets}

        preset = OptimizationPreset(
            id=self._new_id(taken),
            name=draft.name,
            description=draft.description,
            icon=draft.icon,
            is_built_in=False,
            options=draft.options,
        )
        user_presets.append(preset)
        self.persist_user_presets(user_presets)
        logger.info(
            f"Added user preset {preset.id}",
            extra={"context": {"preset_id": preset.id}},
        )
        return preset

    def update_user_preset(
        self, preset_id: str, patch: Union[PresetPatch, Mapping]
    ) -> Optional[OptimizationPreset]:
        """Shallow-merge ``patch`` into the user preset ``preset_id``.

        Built-in ids are not addressable here. A patched ``options`` replaces
        the previous options record wholesale.

        Returns:
            The updated preset, or None if ``preset_id`` is not a user
            preset (nothing is created or persisted).
        """
        if not isinstance(patch, PresetPatch):
            patch = PresetPatch.model_validate(patch)

        user_presets = self.list_user_presets()
        for index, existing in enumerate(user_presets):
            if existing.id == preset_id:
                break
        else:
            return None

        changes = {field: getattr(patch, field) for field in patch.model_fields_set}
        updated = existing.model_copy(update=changes)
        user_presets[index] = updated
        self.persist_user_presets(user_presets)
        return updated

    def delete_user_preset(self, preset_id: str) -> bool:
        """Remove the user preset ``preset_id`` and persist the rest.

        Returns:
            True if a preset was removed. Missing and built-in ids are no-ops.
        """
        user_presets = self.list_user_presets()
        remaining = [p for p in user_presets if p.id != preset_id]
        self.persist_user_presets(remaining)
        return len(remaining) != len(user_presets)

    def list_all_presets(self) -> list[OptimizationPreset]:
        """Built-in presets followed by user presets."""
        return [*BUILT_IN_PRESETS, *self.list_user_presets()]

    def find_preset_by_id(self, preset_id: str) -> Optional[OptimizationPreset]:
        """First preset in catalog order with a matching id.

        Built-ins are matched first, so a user preset can never shadow one.
        """
        for preset in self.list_all_presets():
            if preset.id == preset_id:
                return preset
        return None

    def resolve_options(
        self,
        preset_id: str,
        defaults: Optional[OptimizationDefaults] = None,
    ) -> Optional[OptimizationDefaults]:
        """Apply a preset's overrides on top of the caller's defaults.

        Returns:
            The complete option record, or None if the preset does not exist.
        """
        preset = self.find_preset_by_id(preset_id)
        if preset is None:
            return None
        defaults = defaults or OptimizationDefaults()
        overrides = preset.options.model_dump(exclude_none=True)
        return defaults.model_copy(update=overrides)

    def _new_id(self, taken: set[str]) -> str:
        base = candidate = self._id_factory()
        attempt = 1
        while candidate in taken:
            attempt += 1
            candidate = f"{base}_{attempt}"
        return candidate

    def _warn(self, message: str, error) -> None:
        logger.warning(
            f"{message}: {error}",
            extra={
                "context": {
                    "key": self.key,
                    "backend": getattr(self.storage, "backend", "unknown"),
                }
            },
        )


_registry: Optional[PresetRegistry] = None


def get_registry() -> PresetRegistry:
    """Module-level registry bound to the configured storage backend."""
    global _registry
    if _registry is None:
        from storage.factory import create_storage

        _registry = PresetRegistry(create_storage())
    return _registry
