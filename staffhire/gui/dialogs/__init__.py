"""Dialog-Sammlung für StaffHire (lazy exports, damit keine Kreisimporte knallen)."""

__all__ = ["StaffInfoDialog"]

def __getattr__(name: str):
    if name == "StaffInfoDialog":
        from .staff_info import StaffInfoDialog
        return StaffInfoDialog
    raise AttributeError(name)
