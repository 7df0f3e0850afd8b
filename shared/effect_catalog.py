"""
Effect levels, handles and descriptors shared by the runtime and the Qt adapters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

WINDOW_EFFECT_NAME = "custom-grayscale-effect"
GLOBAL_EFFECT_NAME = "global-grayscale-effect"
SHADER_UNIFORM_NAME = "grayscale_factor"

DESATURATE_SHADER_SOURCE = """
uniform sampler2D tex;
uniform float grayscale_factor;

void main() {
    vec4 color = texture2D(tex, cogl_tex_coord_in[0].st);
    float intensity = dot(color.rgb, vec3(0.299, 0.587, 0.114));
    vec3 grayscale = vec3(intensity);
    vec3 final_color = mix(color.rgb, grayscale, grayscale_factor);
    cogl_color_out = vec4(final_color, color.a);
}
"""


class UnknownEffectLevelError(ValueError):
    """Raised when a value does not name any known effect level."""


class EffectLevel(Enum):
    QUARTER = "quarter"
    HALF = "half"
    THREE_QUARTER = "three-quarter"
    FULL = "full"


class EffectBackend(Enum):
    SHADER = "shader"
    BUILTIN = "builtin"


@dataclass(frozen=True)
class BuiltinDesaturate:
    intensity: float


@dataclass(frozen=True)
class CustomShader:
    source: str
    uniform_value: float
    uniform_name: str = SHADER_UNIFORM_NAME


EffectDescriptor = Union[BuiltinDesaturate, CustomShader]


def descriptor_strength(descriptor: EffectDescriptor) -> float:
    """Return the desaturation amount carried by either descriptor variant."""
    if isinstance(descriptor, CustomShader):
        return descriptor.uniform_value
    return descriptor.intensity


@dataclass(frozen=True)
class EffectHandle:
    """Records that ``window_ref`` currently renders ``level`` at ``intensity``."""

    window_ref: Any
    level: EffectLevel
    intensity: float


_INTENSITIES: Mapping[EffectLevel, float] = MappingProxyType(
    {
        EffectLevel.QUARTER: 0.25,
        EffectLevel.HALF: 0.5,
        EffectLevel.THREE_QUARTER: 0.75,
        EffectLevel.FULL: 1.0,
    }
)


class EffectCatalog:
    """
    Maps effect levels to intensities and builds the descriptor handed to
    the host for attachment. The backend selects between the custom shader
    program and the host's built-in desaturation.
    """

    def __init__(self, backend: EffectBackend = EffectBackend.SHADER) -> None:
        self.backend = backend

    @staticmethod
    def intensity(level: EffectLevel) -> float:
        return _INTENSITIES[level]

    @staticmethod
    def levels() -> tuple[EffectLevel, ...]:
        return tuple(_INTENSITIES)

    @staticmethod
    def parse(value: Any) -> EffectLevel:
        """
        Resolve a level from its enum value, its name, or its exact intensity.

        Raises ``UnknownEffectLevelError`` for anything else.
        """
        if isinstance(value, EffectLevel):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for level in EffectLevel:
                if text in (level.value, level.name.lower()):
                    return level
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            for level, intensity in _INTENSITIES.items():
                if abs(float(value) - intensity) < 1e-9:
                    return level
        raise UnknownEffectLevelError(f"Unknown effect level: {value!r}")

    @classmethod
    def try_parse(cls, value: Any) -> Optional[EffectLevel]:
        try:
            return cls.parse(value)
        except UnknownEffectLevelError:
            return None

    def descriptor(self, level: EffectLevel) -> EffectDescriptor:
        intensity = self.intensity(level)
        if self.backend is EffectBackend.BUILTIN:
            return BuiltinDesaturate(intensity=intensity)
        return CustomShader(source=DESATURATE_SHADER_SOURCE, uniform_value=intensity)

    def handle(self, window_ref: Any, level: EffectLevel) -> EffectHandle:
        return EffectHandle(window_ref=window_ref, level=level, intensity=self.intensity(level))
