"""Robber custom exceptions."""

from __future__ import annotations


class RobberConfigError(Exception):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, config_path: str = None, section: str = None):
        self.config_path = config_path
        self.section = section
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.config_path:
            msg += f" (config: {self.config_path})"
        if self.section:
            msg += f" (section: {self.section})"
        return msg


class ClassificationError(ValueError):
    """Raised when secret offsets do not describe a valid range of the diff."""

    def __init__(self, message: str, offsets=None):
        self.offsets = offsets
        super().__init__(message)


class ExportError(Exception):
    """Raised when the findings artifact cannot be written."""

    def __init__(self, message: str, output_path: str = None):
        self.output_path = output_path
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.output_path:
            msg += f" (output: {self.output_path})"
        return msg
