from __future__ import annotations

import os

import pytest

from core.host import HostServices
from fakes import FakeHost


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def services(host: FakeHost) -> HostServices:
    return HostServices.from_single(host)


@pytest.fixture
def qt_app(monkeypatch):
    pytest.importorskip("PySide6")
    from PySide6.QtWidgets import QApplication

    monkeypatch.setenv("QT_QPA_PLATFORM", os.getenv("QT_QPA_PLATFORM", "offscreen"))
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
