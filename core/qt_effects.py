"""
Effect host rendering desaturation on QWidgets.
"""

from __future__ import annotations

from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsColorizeEffect, QWidget

from core.host import ActorGoneError
from shared.effect_catalog import EffectDescriptor, descriptor_strength

_GRAY = QColor(128, 128, 128)


class QtEffectHost:
    """
    Approximates both descriptor variants with ``QGraphicsColorizeEffect``.

    A widget carries a single graphics effect, so the effect's object name
    doubles as the reserved effect name.
    """

    def __init__(self, root: QWidget) -> None:
        self._root = root

    def get_root_surface(self) -> QWidget:
        return self._root

    def attach_effect(self, widget: QWidget, name: str, descriptor: EffectDescriptor) -> None:
        try:
            effect = QGraphicsColorizeEffect(widget)
            effect.setObjectName(name)
            effect.setColor(_GRAY)
            effect.setStrength(descriptor_strength(descriptor))
            widget.setGraphicsEffect(effect)
        except RuntimeError as exc:
            raise ActorGoneError(str(exc)) from exc

    def detach_effect(self, widget: QWidget, name: str) -> None:
        if self.has_effect(widget, name):
            widget.setGraphicsEffect(None)

    def has_effect(self, widget: QWidget, name: str) -> bool:
        try:
            effect = widget.graphicsEffect()
        except RuntimeError as exc:
            raise ActorGoneError(str(exc)) from exc
        return effect is not None and effect.objectName() == name
