"""Severity levels used for console styling."""

from __future__ import annotations

from enum import Enum


class Level(Enum):
    """Console severity levels, in ascending order of urgency."""

    VERBOSE = "verbose"
    SECRET = "secret"
    INFO = "info"
    DATA = "data"
    SUCC = "succ"
    WARN = "warn"
    FAIL = "fail"

    @classmethod
    def from_name(cls, name) -> "Level | None":
        """Look up a level by its configuration name, returning None if unknown."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return None


# Message prefixes written before leveled log lines
PREFIXES = {
    Level.INFO: "[+] ",
    Level.SUCC: "[+] ",
    Level.WARN: "[-] ",
    Level.FAIL: "[!] ",
}
