"""Persisted findings artifact and source references."""

from robber.export.json_export import (
    PersistedFinding,
    build_persisted_findings,
    dump_findings,
    load_findings,
    save_findings,
)
from robber.export.source import resolve_source_reference, strip_vcs_suffix, view_command

__all__ = [
    "PersistedFinding",
    "build_persisted_findings",
    "dump_findings",
    "load_findings",
    "resolve_source_reference",
    "save_findings",
    "strip_vcs_suffix",
    "view_command",
]
