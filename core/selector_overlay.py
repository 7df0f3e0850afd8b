"""
Transient window picker.

Lists the eligible windows of the active workspace, lets the user pick one by
digit key or pointer, and asks the host to focus it. Nothing survives a hide.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from core.host import (
    ActorGoneError,
    ChromeHost,
    HostError,
    SurfaceDescriptor,
    SurfaceHandle,
    WindowHost,
    WindowInfo,
    WindowType,
)
from kolour_groups import logger as app_logger

ESCAPE_KEY = "Escape"
DIGIT_KEYS = tuple(str(n) for n in range(1, 10))
DEFAULT_UNTITLED_LABEL = "Untitled"


def collect_eligible_windows(windows: WindowHost) -> List[WindowInfo]:
    """Normal, non-minimized windows on the active workspace, in host order."""
    workspace = windows.get_active_workspace()
    return [
        info
        for info in windows.list_window_actors()
        if info.window_type is WindowType.NORMAL
        and not info.minimized
        and info.workspace == workspace
    ]


@dataclass
class SelectorSession:
    surface: SurfaceHandle
    windows: Tuple[WindowInfo, ...]
    handler_ids: List[int] = field(default_factory=list)


class SelectorOverlay:
    def __init__(
        self,
        windows: WindowHost,
        chrome: ChromeHost,
        *,
        untitled_label: str = DEFAULT_UNTITLED_LABEL,
        width: int = 450,
        height: int = 600,
    ) -> None:
        self._windows = windows
        self._chrome = chrome
        self._untitled_label = untitled_label
        self._width = width
        self._height = height
        self._session: Optional[SelectorSession] = None
        self._logger = app_logger.get_logger()

    @property
    def is_open(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[SelectorSession]:
        return self._session

    def show(self) -> None:
        """Open the picker, or close it when it is already open."""
        if self._session is not None:
            self.hide()
            return

        snapshot = tuple(collect_eligible_windows(self._windows))
        if not snapshot:
            self._logger.debug("No eligible windows; selector stays closed.")
            return

        descriptor = self.describe(snapshot)
        surface = self._chrome.add_overlay_surface(descriptor)
        session = SelectorSession(surface=surface, windows=snapshot)
        self._session = session
        session.handler_ids.append(self._chrome.connect(surface, "key-press", self.handle_key))
        session.handler_ids.append(self._chrome.connect(surface, "entry-activated", self.activate_index))
        session.handler_ids.append(self._chrome.connect(surface, "close-requested", self.hide))
        self._chrome.set_input_focus(surface)
        self._logger.debug("Selector opened with {} window(s).", len(snapshot))

    def hide(self) -> None:
        session = self._session
        if session is None:
            return
        self._session = None
        for handler_id in session.handler_ids:
            try:
                self._chrome.disconnect(session.surface, handler_id)
            except HostError as exc:
                self._logger.debug("Selector handler {} already gone: {}", handler_id, exc)
        try:
            self._chrome.destroy_overlay_surface(session.surface)
        except HostError as exc:
            self._logger.warning("Failed to destroy selector surface: {}", exc)

    def describe(self, snapshot: Tuple[WindowInfo, ...]) -> SurfaceDescriptor:
        entries = tuple(
            f" {index}. {info.title or self._untitled_label}" for index, info in enumerate(snapshot, start=1)
        )
        return SurfaceDescriptor(
            header=f"Windows ({len(snapshot)})",
            entries=entries,
            close_label="Close",
            width=self._width,
            height=self._height,
        )

    def handle_key(self, key: str) -> bool:
        """Return True when the key was consumed by the picker."""
        if self._session is None:
            return False
        if key == ESCAPE_KEY:
            self.hide()
            return True
        if key in DIGIT_KEYS:
            self.activate_index(int(key) - 1)
            return True
        return False

    def activate_index(self, index: int) -> None:
        session = self._session
        if session is None or not 0 <= index < len(session.windows):
            return
        target = session.windows[index]
        try:
            self._windows.activate(target.ref, self._windows.get_current_time())
        except ActorGoneError:
            self._logger.debug("Selected window {!r} closed before activation.", target.title)
        except HostError as exc:
            self._logger.warning("Failed to activate {!r}: {}", target.title, exc)
        finally:
            self.hide()
