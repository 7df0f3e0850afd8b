"""
Desktop-wide grayscale toggle bound to the host's root surface.
"""

from __future__ import annotations

from typing import Optional

from core.host import ActorGoneError, EffectHost, HostError
from kolour_groups import logger as app_logger
from shared.effect_catalog import GLOBAL_EFFECT_NAME, EffectCatalog, EffectHandle, EffectLevel


class GlobalEffectToggle:
    """
    Attaches or detaches a single effect on the root surface.

    The host is asked whether the reserved name is attached on every toggle,
    so an effect removed behind our back is simply re-attached next time.
    """

    def __init__(
        self,
        effects: EffectHost,
        *,
        catalog: Optional[EffectCatalog] = None,
        level: EffectLevel = EffectLevel.FULL,
        effect_name: str = GLOBAL_EFFECT_NAME,
    ) -> None:
        self._effects = effects
        self._catalog = catalog or EffectCatalog()
        self._level = level
        self._effect_name = effect_name
        self._handle: Optional[EffectHandle] = None
        self._logger = app_logger.get_logger()

    @property
    def active(self) -> bool:
        return self._handle is not None

    @property
    def level(self) -> EffectLevel:
        return self._level

    @property
    def handle(self) -> Optional[EffectHandle]:
        return self._handle

    def toggle(self) -> bool:
        """Flip the global effect and return whether it is now on."""
        root = self._effects.get_root_surface()
        if self._effects.has_effect(root, self._effect_name):
            self._detach(root)
        else:
            self._attach(root)
        self._logger.info("Global grayscale {}.", "enabled" if self.active else "disabled")
        return self.active

    def set_level(self, level: EffectLevel) -> None:
        """Change the intensity used by the toggle, re-attaching if currently on."""
        if level is self._level:
            return
        self._level = level
        if not self.active:
            return
        root = self._effects.get_root_surface()
        self._detach(root)
        self._attach(root)

    def teardown(self) -> None:
        root = self._effects.get_root_surface()
        try:
            if self._effects.has_effect(root, self._effect_name):
                self._effects.detach_effect(root, self._effect_name)
        except HostError as exc:
            self._logger.warning("Failed to detach global grayscale: {}", exc)
        self._handle = None

    def _attach(self, root) -> None:
        try:
            self._effects.attach_effect(root, self._effect_name, self._catalog.descriptor(self._level))
        except ActorGoneError:
            self._handle = None
            return
        self._handle = self._catalog.handle(root, self._level)

    def _detach(self, root) -> None:
        try:
            self._effects.detach_effect(root, self._effect_name)
        except ActorGoneError:
            pass
        self._handle = None
