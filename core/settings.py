"""
Environment-backed configuration for the Kolour Groups runtime.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from core.keybindings import ACTION_NAMES, DEFAULT_ACCELERATORS, accelerator_env_key
from core.selector_overlay import DEFAULT_UNTITLED_LABEL
from kolour_groups import logger as app_logger
from shared.effect_catalog import EffectBackend, EffectCatalog, EffectLevel

_LOGGER = app_logger.get_logger()

_MIN_OVERLAY_SIZE = 200
_MAX_OVERLAY_SIZE = 2000


@dataclass(eq=True)
class ExtensionSettings:
    effect_backend: EffectBackend = EffectBackend.SHADER
    global_level: EffectLevel = EffectLevel.FULL
    untitled_label: str = DEFAULT_UNTITLED_LABEL
    overlay_width: int = 450
    overlay_height: int = 600
    accelerators: Dict[str, Tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_ACCELERATORS))

    def accelerators_for(self, action: str) -> Tuple[str, ...]:
        return self.accelerators.get(action, DEFAULT_ACCELERATORS.get(action, ()))


class ExtensionSettingsManager:
    """Reads settings from a string mapping and falls back on invalid data."""

    def __init__(self, source: Optional[Mapping[str, str]] = None) -> None:
        self._source = source if source is not None else os.environ

    def read_settings(self) -> ExtensionSettings:
        return ExtensionSettings(
            effect_backend=self._read_backend(),
            global_level=self._read_level("KOLOUR_GLOBAL_LEVEL", EffectLevel.FULL),
            untitled_label=self._read_label("KOLOUR_UNTITLED_LABEL", DEFAULT_UNTITLED_LABEL),
            overlay_width=self._read_size("KOLOUR_OVERLAY_WIDTH", 450),
            overlay_height=self._read_size("KOLOUR_OVERLAY_HEIGHT", 600),
            accelerators=self._read_accelerators(),
        )

    def _raw(self, name: str) -> Optional[str]:
        value = self._source.get(name)
        if value is None or not value.strip():
            return None
        return value.strip()

    def _read_backend(self) -> EffectBackend:
        raw = self._raw("KOLOUR_EFFECT_BACKEND")
        if raw is None:
            return EffectBackend.SHADER
        try:
            return EffectBackend(raw.lower())
        except ValueError:
            _LOGGER.warning("Unknown effect backend {!r}; using shader.", raw)
            return EffectBackend.SHADER

    def _read_level(self, name: str, default: EffectLevel) -> EffectLevel:
        raw = self._raw(name)
        if raw is None:
            return default
        level = EffectCatalog.try_parse(raw)
        if level is None:
            _LOGGER.warning("Setting {} has unknown level {!r}; using {}.", name, raw, default.value)
            return default
        return level

    def _read_label(self, name: str, default: str) -> str:
        return self._raw(name) or default

    def _read_size(self, name: str, default: int) -> int:
        raw = self._raw(name)
        if raw is None:
            return default
        try:
            value = int(raw)
        except ValueError:
            _LOGGER.warning("Setting {} is not an integer ({!r}); using {}.", name, raw, default)
            return default
        if value < _MIN_OVERLAY_SIZE or value > _MAX_OVERLAY_SIZE:
            _LOGGER.warning("Setting {}={} out of range. Clamping to safe bounds.", name, value)
        return max(_MIN_OVERLAY_SIZE, min(_MAX_OVERLAY_SIZE, value))

    def _read_accelerators(self) -> Dict[str, Tuple[str, ...]]:
        accelerators = dict(DEFAULT_ACCELERATORS)
        for action in ACTION_NAMES:
            raw = self._raw(accelerator_env_key(action))
            if raw is None:
                continue
            parts = tuple(part.strip() for part in raw.split(",") if part.strip())
            if parts:
                accelerators[action] = parts
        return accelerators
