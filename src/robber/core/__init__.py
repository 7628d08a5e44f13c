"""Finding lifecycle and console reporting for Robber."""

from robber.core.colors import ColorConfig, Style
from robber.core.exceptions import ClassificationError, ExportError, RobberConfigError
from robber.core.findings import Finding, new_finding
from robber.core.levels import Level
from robber.core.logger import Logger
from robber.core.settings import ReportSettings
from robber.core.store import FindingStore

__all__ = [
    "ClassificationError",
    "ColorConfig",
    "ExportError",
    "Finding",
    "FindingStore",
    "Level",
    "Logger",
    "ReportSettings",
    "RobberConfigError",
    "Style",
    "new_finding",
]
