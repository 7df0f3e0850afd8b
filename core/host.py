"""
Interfaces of the desktop host collaborators consumed by the runtime.

The host owns window enumeration, focus, effect rendering, chrome placement
and shortcut dispatch. Everything here is a structural protocol so any
object providing the methods can be passed in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Any, Callable, Optional, Protocol, Sequence, Tuple

from shared.effect_catalog import EffectDescriptor

WindowRef = Any
SurfaceHandle = Any
KeyHandler = Callable[[str], bool]


class HostError(Exception):
    """Base class for failures reported by a host collaborator."""


class ActorGoneError(HostError):
    """Raised when a window or actor was destroyed between lookup and use."""


class BindingError(HostError):
    """Raised when a shortcut cannot be registered (name clash, bad accelerator)."""


class WindowType(Enum):
    NORMAL = "normal"
    DIALOG = "dialog"
    MODAL_DIALOG = "modal-dialog"
    UTILITY = "utility"
    DOCK = "dock"
    DESKTOP = "desktop"
    SPLASHSCREEN = "splashscreen"


class ActionScope(Flag):
    NORMAL = auto()
    OVERVIEW = auto()


@dataclass(frozen=True)
class WindowInfo:
    """Point-in-time view of one window as listed by the host."""

    ref: WindowRef
    title: str
    window_type: WindowType
    minimized: bool
    workspace: Any


@dataclass(frozen=True)
class SurfaceDescriptor:
    """What the chrome host should render for the window selector."""

    header: str
    entries: Tuple[str, ...]
    close_label: str
    width: int
    height: int


class WindowHost(Protocol):
    def list_window_actors(self) -> Sequence[WindowInfo]: ...

    def get_focused_window(self) -> Optional[WindowRef]: ...

    def get_active_workspace(self) -> Any: ...

    def get_current_time(self) -> int: ...

    def activate(self, window: WindowRef, timestamp: int) -> None: ...


class EffectHost(Protocol):
    def get_root_surface(self) -> Any: ...

    def attach_effect(self, actor: Any, name: str, descriptor: EffectDescriptor) -> None: ...

    def detach_effect(self, actor: Any, name: str) -> None: ...

    def has_effect(self, actor: Any, name: str) -> bool: ...


class ScratchStore(Protocol):
    def get_window_scratch(self, window: WindowRef, key: str) -> Any: ...

    def set_window_scratch(self, window: WindowRef, key: str, value: Any) -> None: ...

    def clear_window_scratch(self, window: WindowRef, key: str) -> None: ...


class ChromeHost(Protocol):
    def add_overlay_surface(self, descriptor: SurfaceDescriptor) -> SurfaceHandle: ...

    def destroy_overlay_surface(self, handle: SurfaceHandle) -> None: ...

    def set_input_focus(self, handle: SurfaceHandle) -> None: ...

    def connect(self, handle: SurfaceHandle, signal: str, callback: Callable[..., Any]) -> int:
        """
        Subscribe ``callback`` to ``signal`` on the surface.

        Signals: ``key-press`` (callback(key) -> bool, True when handled),
        ``entry-activated`` (callback(index)) and ``close-requested``
        (callback()).
        """
        ...

    def disconnect(self, handle: SurfaceHandle, handler_id: int) -> None: ...


class KeybindingHost(Protocol):
    def register_action(
        self,
        name: str,
        accelerators: Sequence[str],
        scope: ActionScope,
        callback: Callable[[], None],
    ) -> None: ...

    def unregister_action(self, name: str) -> None: ...


@dataclass
class HostServices:
    """Bundle of the collaborators handed to the extension by the host."""

    windows: WindowHost
    effects: EffectHost
    scratch: ScratchStore
    chrome: ChromeHost
    keybindings: KeybindingHost

    @classmethod
    def from_single(cls, host: Any) -> "HostServices":
        """Use one object implementing every protocol."""
        return cls(windows=host, effects=host, scratch=host, chrome=host, keybindings=host)
