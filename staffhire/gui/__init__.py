"""Qt-Oberfläche für StaffHire."""
