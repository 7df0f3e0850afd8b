"""
Extension controller wiring shortcuts to the effect registry, the global
toggle and the window selector.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from core.effect_registry import WindowEffectRegistry
from core.global_effect import GlobalEffectToggle
from core.host import ActionScope, BindingError, HostError, HostServices
from core.keybindings import (
    GLOBAL_GRAYSCALE,
    LEVEL_ACTIONS,
    REMOVE_EFFECTS,
    WINDOW_GROUP,
)
from core.selector_overlay import SelectorOverlay
from core.settings import ExtensionSettings, ExtensionSettingsManager
from kolour_groups import logger as app_logger
from shared.effect_catalog import EffectCatalog, EffectLevel

APP_NAME = "Kolour Groups"
APP_VERSION = "1.0.0"
ACTION_SCOPE = ActionScope.NORMAL | ActionScope.OVERVIEW


class ExtensionController:
    """
    Owns every piece of runtime state for one enable()..disable() cycle.

    Construct it on enable, call ``start()``, and discard it after
    ``shutdown()``.
    """

    def __init__(self, host: HostServices, settings: Optional[ExtensionSettings] = None) -> None:
        self._logger = app_logger.get_logger()
        self._host = host
        self.settings = settings or ExtensionSettings()

        catalog = EffectCatalog(self.settings.effect_backend)
        self.registry = WindowEffectRegistry(host.windows, host.effects, host.scratch, catalog=catalog)
        self.global_toggle = GlobalEffectToggle(host.effects, catalog=catalog, level=self.settings.global_level)
        self.selector = SelectorOverlay(
            host.windows,
            host.chrome,
            untitled_label=self.settings.untitled_label,
            width=self.settings.overlay_width,
            height=self.settings.overlay_height,
        )
        self._active_bindings: List[str] = []

    @property
    def active_bindings(self) -> List[str]:
        return list(self._active_bindings)

    def start(self) -> None:
        self._logger.info("Starting {} v{}.", APP_NAME, APP_VERSION)
        self._register_bindings()
        self.registry.restore_all()

    def shutdown(self) -> None:
        self._logger.info("Shutting down {}.", APP_NAME)
        for name in self._active_bindings:
            try:
                self._host.keybindings.unregister_action(name)
            except HostError as exc:
                self._logger.warning("Failed to unregister shortcut {}: {}", name, exc)
        self._active_bindings = []

        self.selector.hide()
        self.registry.teardown_all()
        self.global_toggle.teardown()

    def apply_to_focused(self, level: EffectLevel) -> None:
        focused = self._host.windows.get_focused_window()
        self.registry.apply(focused, level)

    def remove_all(self) -> None:
        self.registry.remove_all()

    def toggle_selector(self) -> None:
        self.selector.show()

    def toggle_global(self) -> None:
        self.global_toggle.toggle()

    def _bindings(self) -> Dict[str, Callable[[], None]]:
        bindings: Dict[str, Callable[[], None]] = {
            name: self._level_callback(level) for name, level in LEVEL_ACTIONS.items()
        }
        bindings[REMOVE_EFFECTS] = self.remove_all
        bindings[WINDOW_GROUP] = self.toggle_selector
        bindings[GLOBAL_GRAYSCALE] = self.toggle_global
        return bindings

    def _level_callback(self, level: EffectLevel) -> Callable[[], None]:
        def _apply() -> None:
            self.apply_to_focused(level)

        return _apply

    def _register_bindings(self) -> None:
        for name, callback in self._bindings().items():
            accelerators = self.settings.accelerators_for(name)
            try:
                self._host.keybindings.register_action(name, accelerators, ACTION_SCOPE, callback)
            except (BindingError, ValueError) as exc:
                self._logger.error("Could not register shortcut {} ({}): {}", name, ", ".join(accelerators), exc)
                continue
            self._active_bindings.append(name)
        self._logger.debug("Registered shortcuts: {}", ", ".join(self._active_bindings))


class KolourGroupsExtension:
    """Host-facing object exposing the enable()/disable() lifecycle."""

    def __init__(
        self,
        host: HostServices,
        *,
        settings_manager: Optional[ExtensionSettingsManager] = None,
    ) -> None:
        self._host = host
        self._settings_manager = settings_manager or ExtensionSettingsManager()
        self._controller: Optional[ExtensionController] = None

    @property
    def controller(self) -> Optional[ExtensionController]:
        return self._controller

    @property
    def enabled(self) -> bool:
        return self._controller is not None

    def enable(self) -> None:
        if self._controller is not None:
            return
        controller = ExtensionController(self._host, self._settings_manager.read_settings())
        self._controller = controller
        controller.start()

    def disable(self) -> None:
        controller = self._controller
        if controller is None:
            return
        self._controller = None
        controller.shutdown()
