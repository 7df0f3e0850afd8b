"""
Shortcut action names and their default accelerators.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from shared.effect_catalog import EffectLevel

GRAYSCALE_25 = "grayscale-25"
GRAYSCALE_50 = "grayscale-50"
GRAYSCALE_75 = "grayscale-75"
GRAYSCALE_100 = "grayscale-100"
REMOVE_EFFECTS = "remove-effects"
WINDOW_GROUP = "window-group"
GLOBAL_GRAYSCALE = "global-grayscale"

LEVEL_ACTIONS: Mapping[str, EffectLevel] = MappingProxyType(
    {
        GRAYSCALE_25: EffectLevel.QUARTER,
        GRAYSCALE_50: EffectLevel.HALF,
        GRAYSCALE_75: EffectLevel.THREE_QUARTER,
        GRAYSCALE_100: EffectLevel.FULL,
    }
)

ACTION_NAMES: Tuple[str, ...] = (
    GRAYSCALE_25,
    GRAYSCALE_50,
    GRAYSCALE_75,
    GRAYSCALE_100,
    REMOVE_EFFECTS,
    WINDOW_GROUP,
    GLOBAL_GRAYSCALE,
)

DEFAULT_ACCELERATORS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        GRAYSCALE_25: ("<Primary><Alt>1",),
        GRAYSCALE_50: ("<Primary><Alt>2",),
        GRAYSCALE_75: ("<Primary><Alt>3",),
        GRAYSCALE_100: ("<Primary><Alt>4",),
        REMOVE_EFFECTS: ("<Primary><Alt>0",),
        WINDOW_GROUP: ("<Primary><Alt>g",),
        GLOBAL_GRAYSCALE: ("<Primary><Alt>q",),
    }
)


def accelerator_env_key(action: str) -> str:
    """Environment key overriding the accelerators of ``action``."""
    return "KOLOUR_ACCEL_" + action.upper().replace("-", "_")
