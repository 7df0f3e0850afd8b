"""
Per-window effect bookkeeping.

The registry is the single authority for which desaturation level is
rendered on which window. The level the user picked is also written to the
host's per-window scratch slot so a disable/enable cycle can restore it.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from core.host import ActorGoneError, EffectHost, HostError, ScratchStore, WindowHost, WindowRef
from kolour_groups import logger as app_logger
from shared.effect_catalog import WINDOW_EFFECT_NAME, EffectCatalog, EffectHandle, EffectLevel

SCRATCH_KEY = "kolour_grayscale_level"


class WindowEffectRegistry:
    """Tracks at most one ``EffectHandle`` per window and keeps the host in sync."""

    def __init__(
        self,
        windows: WindowHost,
        effects: EffectHost,
        scratch: ScratchStore,
        *,
        catalog: Optional[EffectCatalog] = None,
        effect_name: str = WINDOW_EFFECT_NAME,
    ) -> None:
        self._windows = windows
        self._effects = effects
        self._scratch = scratch
        self._catalog = catalog or EffectCatalog()
        self._effect_name = effect_name
        self._handles: Dict[WindowRef, EffectHandle] = {}
        self._logger = app_logger.get_logger()

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[EffectHandle]:
        return iter(self.handles())

    def __contains__(self, window: WindowRef) -> bool:
        return window in self._handles

    def get(self, window: WindowRef) -> Optional[EffectHandle]:
        return self._handles.get(window)

    def handles(self) -> List[EffectHandle]:
        return list(self._handles.values())

    def apply(self, window: Optional[WindowRef], level: EffectLevel) -> Optional[EffectHandle]:
        """
        Render ``level`` on ``window``, replacing any level it already has.

        Returns the new handle, or ``None`` when there is no window or the
        window disappeared while the effect was being attached.
        """
        if window is None:
            self._logger.debug("No window to apply {} to.", level.value)
            return None

        self._handles.pop(window, None)
        self._safe_detach(window)

        handle = self._catalog.handle(window, level)
        try:
            self._effects.attach_effect(window, self._effect_name, self._catalog.descriptor(level))
            self._scratch.set_window_scratch(window, SCRATCH_KEY, level.value)
        except ActorGoneError:
            self._logger.debug("Window vanished while applying {}; ignoring.", level.value)
            return None

        self._handles[window] = handle
        self._logger.debug("Applied {} ({:.2f}) to {!r}", level.value, handle.intensity, window)
        return handle

    def remove(self, window: Optional[WindowRef]) -> None:
        """Detach the effect and forget the stored level. No-op when nothing is applied."""
        if window is None:
            return
        handle = self._handles.pop(window, None)
        if handle is None and self._read_scratch(window) is None:
            return
        self._safe_detach(window)
        try:
            self._scratch.clear_window_scratch(window, SCRATCH_KEY)
        except ActorGoneError:
            pass

    def remove_all(self) -> None:
        live = self._live_windows()
        for window in live:
            self.remove(window)
        self._drop_dead(live)

    def restore_all(self) -> int:
        """Re-attach every level persisted on a live window. Returns the count restored."""
        restored = 0
        for window in self._live_windows():
            raw = self._read_scratch(window)
            if raw is None:
                continue
            level = EffectCatalog.try_parse(raw)
            if level is None:
                self._logger.warning("Discarding unknown stored level {!r} on {!r}", raw, window)
                try:
                    self._scratch.clear_window_scratch(window, SCRATCH_KEY)
                except ActorGoneError:
                    pass
                continue
            if self.apply(window, level) is not None:
                restored += 1
        if restored:
            self._logger.info("Restored grayscale on {} window(s).", restored)
        return restored

    def teardown_all(self) -> None:
        """
        Detach every effect this registry attached and clear the in-memory
        table. Scratch slots are left untouched so ``restore_all`` can
        recover the user's choice later.
        """
        for window in self._live_windows():
            try:
                if self._effects.has_effect(window, self._effect_name):
                    self._effects.detach_effect(window, self._effect_name)
            except HostError as exc:
                self._logger.warning("Failed to detach grayscale from {!r}: {}", window, exc)
        self._handles.clear()

    def _live_windows(self) -> List[WindowRef]:
        return [info.ref for info in self._windows.list_window_actors()]

    def _drop_dead(self, live: Iterable[WindowRef]) -> None:
        alive = set(live)
        for window in [w for w in self._handles if w not in alive]:
            del self._handles[window]

    def _read_scratch(self, window: WindowRef):
        try:
            return self._scratch.get_window_scratch(window, SCRATCH_KEY)
        except ActorGoneError:
            return None

    def _safe_detach(self, window: WindowRef) -> None:
        try:
            if self._effects.has_effect(window, self._effect_name):
                self._effects.detach_effect(window, self._effect_name)
        except ActorGoneError:
            pass
