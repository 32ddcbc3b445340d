"""
GUI-Starter für StaffHire (PySide6).

- Baut das Hauptfenster aus gui.main_window.
- Konfiguriert das Logging (Stufe über SH_LOG_LEVEL, Standard INFO).
- Mit SH_HEADLESS=1 wird keine GUI gestartet (z. B. für CI).

Start:
    python -m staffhire.main
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

logger = logging.getLogger("staffhire")

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level_name: Optional[str] = None) -> int:
    """Root-Logging einmalig einrichten; liefert die verwendete Stufe.

    Unbekannte Stufennamen fallen auf INFO zurück.

    Examples:
        >>> configure_logging("debug") == logging.DEBUG
        True
        >>> configure_logging("chatty") == logging.INFO
        True
    """
    name = (level_name or os.environ.get("SH_LOG_LEVEL", "INFO")).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    return level


def run_gui() -> int:
    """Starte die Qt-GUI (PySide6) mit leerem Roster."""
    from PySide6.QtWidgets import QApplication, QMessageBox

    from staffhire.gui.main_window import RecruitmentWindow

    app = QApplication.instance() or QApplication(sys.argv)

    try:
        win = RecruitmentWindow()
    except Exception as e:
        logger.exception("Could not build the main window")
        QMessageBox.critical(None, "Error loading the window", str(e))
        return 1

    win.show()
    return app.exec()


def main() -> int:
    """Startpunkt: Logging einrichten und (falls nicht headless) die GUI starten."""
    configure_logging()
    if os.environ.get("SH_HEADLESS", "0") == "1":
        logger.info("SH_HEADLESS=1, not starting the GUI")
        return 0
    return run_gui()


if __name__ == "__main__":
    sys.exit(main())
