"""
Host-independent effect data shared across the runtime.
"""

from .effect_catalog import (  # noqa: F401
    EffectBackend,
    EffectCatalog,
    EffectHandle,
    EffectLevel,
)
