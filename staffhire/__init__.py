"""StaffHire: Erfassung von Voll- und Teilzeit-Einstellungen (PySide6)."""

__version__ = "1.0.0"
