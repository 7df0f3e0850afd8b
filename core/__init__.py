"""
Runtime for Kolour Groups: per-window grayscale, global toggle and window selector.
"""

from .app import ExtensionController, KolourGroupsExtension  # noqa: F401
from .effect_registry import WindowEffectRegistry  # noqa: F401
from .global_effect import GlobalEffectToggle  # noqa: F401
from .selector_overlay import SelectorOverlay  # noqa: F401
from .qt_effects import QtEffectHost  # noqa: F401
from .window_list_overlay import QtChromeHost, WindowListOverlay  # noqa: F401
