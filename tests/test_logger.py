from __future__ import annotations

from kolour_groups import logger as app_logger


def test_get_logger_returns_shared_instance():
    assert app_logger.get_logger() is app_logger.get_logger()


def test_configure_is_idempotent(tmp_path, monkeypatch):
    monkeypatch.setattr(app_logger, "_LOG_INITIALISED", True)
    app_logger.configure(tmp_path / "logs" / "kolour.log")
    assert not (tmp_path / "logs").exists()
