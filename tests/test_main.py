import logging

from staffhire import main as app_main


def test_headless_start_skips_gui(monkeypatch):
    monkeypatch.setenv("SH_HEADLESS", "1")
    monkeypatch.setattr(app_main, "run_gui", lambda: 99)
    assert app_main.main() == 0


def test_gui_start_returns_exit_code(monkeypatch):
    monkeypatch.delenv("SH_HEADLESS", raising=False)
    monkeypatch.setattr(app_main, "run_gui", lambda: 3)
    assert app_main.main() == 3


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("SH_LOG_LEVEL", "warning")
    assert app_main.configure_logging() == logging.WARNING
    assert logging.getLogger("staffhire").level == logging.WARNING
    logging.getLogger("staffhire").setLevel(logging.NOTSET)
