"""
Qt rendering of the window selector surface and the chrome host that owns it.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable, Dict, List, Optional, Tuple

from PySide6.QtCore import QPoint, Qt, Signal
from PySide6.QtGui import QColor, QKeyEvent
from PySide6.QtWidgets import (
    QApplication,
    QGraphicsDropShadowEffect,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from core.host import ActorGoneError, KeyHandler, SurfaceDescriptor


def _as_int(value: Any) -> int:
    return int(getattr(value, "value", value))


_KEY_NAMES: Dict[int, str] = {_as_int(Qt.Key.Key_Escape): "Escape"}
_KEY_NAMES.update({_as_int(Qt.Key.Key_1) + offset: str(offset + 1) for offset in range(9)})


def key_name(key: Any) -> Optional[str]:
    """Map a Qt key code to the names understood by the selector."""
    return _KEY_NAMES.get(_as_int(key))


class WindowListOverlay(QWidget):
    entryActivated = Signal(int)
    closeRequested = Signal()

    def __init__(self, descriptor: SurfaceDescriptor, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        flags = (
            Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.Tool
            | Qt.WindowType.WindowStaysOnTopHint
        )
        self.setWindowFlags(flags)
        self.setObjectName("WindowGroupContainer")
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setWindowOpacity(0.95)
        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(24)
        shadow.setColor(QColor(0, 0, 0, 160))
        shadow.setOffset(0, 12)
        self.setGraphicsEffect(shadow)

        self._descriptor = descriptor
        self._key_handlers: Dict[int, KeyHandler] = {}

        self._title_label = QLabel(descriptor.header)
        self._title_label.setObjectName("WindowGroupTitle")
        self._title_label.setStyleSheet("font-weight: bold; font-size: 16px;")

        list_body = QWidget()
        list_layout = QVBoxLayout(list_body)
        list_layout.setContentsMargins(0, 0, 0, 0)
        list_layout.setSpacing(6)
        self._entry_buttons: List[QPushButton] = []
        for index, label in enumerate(descriptor.entries):
            button = QPushButton(label)
            button.setObjectName("WindowGroupButton")
            button.setMinimumHeight(34)
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.clicked.connect(lambda _checked=False, i=index: self.entryActivated.emit(i))  # type: ignore[arg-type]
            list_layout.addWidget(button)
            self._entry_buttons.append(button)
        list_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(list_body)

        self._close_button = QPushButton(descriptor.close_label)
        self._close_button.setObjectName("WindowGroupCloseButton")
        self._close_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._close_button.clicked.connect(lambda _checked=False: self.closeRequested.emit())  # type: ignore[arg-type]

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)
        layout.addWidget(self._title_label)
        layout.addWidget(scroll)
        layout.addWidget(self._close_button)

        self.setStyleSheet(
            """
            QWidget#WindowGroupContainer {
                background-color: #111827;
                color: white;
                border-radius: 12px;
                border: 1px solid rgba(255, 255, 255, 0.08);
            }
            QLabel {
                color: white;
            }
            QPushButton#WindowGroupButton {
                text-align: left;
                padding: 0 14px;
                border-radius: 10px;
                background-color: rgba(255, 255, 255, 0.08);
                color: white;
            }
            QPushButton#WindowGroupButton:hover {
                background-color: #2563eb;
            }
            QPushButton#WindowGroupCloseButton {
                padding: 6px 14px;
                border-radius: 10px;
                background-color: #374151;
                color: white;
            }
            """
        )
        self.resize(descriptor.width, descriptor.height)

    @property
    def descriptor(self) -> SurfaceDescriptor:
        return self._descriptor

    @property
    def entry_buttons(self) -> List[QPushButton]:
        return list(self._entry_buttons)

    @property
    def close_button(self) -> QPushButton:
        return self._close_button

    def add_key_handler(self, handler_id: int, handler: KeyHandler) -> None:
        self._key_handlers[handler_id] = handler

    def remove_key_handler(self, handler_id: int) -> None:
        self._key_handlers.pop(handler_id, None)

    def present(self) -> None:
        self._position_center()
        self.show()

    def _position_center(self) -> None:
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        geometry = screen.availableGeometry()
        x = geometry.center().x() - self.width() // 2
        y = geometry.center().y() - self.height() // 2
        self.move(QPoint(x, y))

    def closeEvent(self, event) -> None:  # noqa: N802
        self.closeRequested.emit()
        super().closeEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        name = key_name(event.key())
        if name is not None:
            for handler in list(self._key_handlers.values()):
                if handler(name):
                    event.accept()
                    return
        super().keyPressEvent(event)


class QtChromeHost:
    """Chrome host placing selector surfaces as top-level Qt tool windows."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent
        self._ids = itertools.count(1)
        self._connections: Dict[int, Tuple[str, Any, Callable[..., Any]]] = {}

    def add_overlay_surface(self, descriptor: SurfaceDescriptor) -> WindowListOverlay:
        overlay = WindowListOverlay(descriptor, self._parent)
        overlay.present()
        return overlay

    def destroy_overlay_surface(self, overlay: WindowListOverlay) -> None:
        try:
            overlay.hide()
            overlay.deleteLater()
        except RuntimeError as exc:
            raise ActorGoneError(str(exc)) from exc

    def set_input_focus(self, overlay: WindowListOverlay) -> None:
        try:
            overlay.activateWindow()
            overlay.setFocus(Qt.FocusReason.OtherFocusReason)
        except RuntimeError as exc:
            raise ActorGoneError(str(exc)) from exc

    def connect(self, overlay: WindowListOverlay, signal: str, callback: Callable[..., Any]) -> int:
        handler_id = next(self._ids)
        if signal == "key-press":
            overlay.add_key_handler(handler_id, callback)
        elif signal == "entry-activated":
            overlay.entryActivated.connect(callback)
        elif signal == "close-requested":
            overlay.closeRequested.connect(callback)
        else:
            raise ValueError(f"Unknown selector signal: {signal}")
        self._connections[handler_id] = (signal, overlay, callback)
        return handler_id

    def disconnect(self, overlay: WindowListOverlay, handler_id: int) -> None:
        entry = self._connections.pop(handler_id, None)
        if entry is None:
            return
        signal, _, callback = entry
        try:
            if signal == "key-press":
                overlay.remove_key_handler(handler_id)
            elif signal == "entry-activated":
                overlay.entryActivated.disconnect(callback)
            else:
                overlay.closeRequested.disconnect(callback)
        except RuntimeError as exc:
            raise ActorGoneError(str(exc)) from exc
