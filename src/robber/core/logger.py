# SPDX-License-Identifier: MIT
"""
Console logger for Robber.

A single ``Logger`` is shared by every scan worker in a process. Each call
holds the logger's lock for its whole write, so lines from concurrent workers
never interleave and a finding is printed and recorded as one step.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Optional

from robber.core.colors import ColorConfig
from robber.core.findings import Finding
from robber.core.levels import PREFIXES, Level
from robber.core.redaction import split_secret
from robber.core.settings import ReportSettings
from robber.export.source import strip_vcs_suffix, view_command

SEPARATOR = "-" * 56


def _color_enabled(stream) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Logger:
    """Leveled, colored console output plus finding reports."""

    def __init__(
        self,
        verbose: bool = False,
        colors: Optional[ColorConfig] = None,
        stream=None,
        use_color: Optional[bool] = None,
    ):
        self.verbose = verbose
        self.colors = colors or ColorConfig.default()
        self.stream = stream or sys.stdout
        self.use_color = _color_enabled(self.stream) if use_color is None else use_color
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: ReportSettings, stream=None, use_color=None) -> "Logger":
        """Resolve colors from the settings and build a logger."""
        return cls(
            verbose=settings.verbose,
            colors=ColorConfig.resolve(settings.colors),
            stream=stream,
            use_color=use_color,
        )

    def _paint(self, level: Level, text: str) -> str:
        if not self.use_color:
            return text
        return self.colors.paint(level, text)

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def log(self, level: Level, fmt: str, *args) -> None:
        """Write a message in the style of the given level."""
        with self._lock:
            self._emit(level, fmt, *args)

    def _emit(self, level: Level, fmt: str, *args) -> None:
        # caller holds self._lock
        if level is Level.VERBOSE and not self.verbose:
            return
        message = fmt % args if args else fmt
        self._write(self._paint(level, PREFIXES.get(level, "") + message) + "\n")

    def log_verbose(self, fmt: str, *args) -> None:
        self.log(Level.VERBOSE, fmt, *args)

    def log_secret(self, fmt: str, *args) -> None:
        self.log(Level.SECRET, fmt, *args)

    def log_info(self, fmt: str, *args) -> None:
        self.log(Level.INFO, fmt, *args)

    def log_data(self, fmt: str, *args) -> None:
        self.log(Level.DATA, fmt, *args)

    def log_succ(self, fmt: str, *args) -> None:
        self.log(Level.SUCC, fmt, *args)

    def log_warn(self, fmt: str, *args) -> None:
        self.log(Level.WARN, fmt, *args)

    def report_fail(self, fmt: str, *args) -> None:
        """Print a failure message without terminating."""
        self.log(Level.FAIL, fmt, *args)

    def log_fail(self, fmt: str, *args) -> None:
        """
        Print a failure message and terminate the process with status 1.

        Never returns. The lock is held until the process exits, so no other
        thread can print after the failure message. Exit bypasses ``finally``
        blocks and does not wait for worker threads.
        """
        with self._lock:
            self._emit(Level.FAIL, fmt, *args)
            for stream in (self.stream, sys.stdout, sys.stderr):
                stream.flush()
            os._exit(1)

    def _field(self, label: str, value: str) -> str:
        return self._paint(Level.INFO, f"{label}: ") + self._paint(Level.DATA, value) + "\n"

    def format_finding(self, finding: Finding, settings: Optional[ReportSettings] = None) -> str:
        """Render the console report for a finding whose diff has been set."""
        settings = settings or ReportSettings()
        runs = split_secret(finding.diff, finding.secret)
        repo_dir = settings.resolve_repo_dir(finding.repo_name)

        parts = [self._paint(Level.INFO, SEPARATOR) + "\n"]
        parts.append(self._field("Reason", finding.reason))
        if finding.filepath:
            parts.append(self._field("Filepath", finding.filepath))
        parts.append(self._field("Repo name", strip_vcs_suffix(finding.repo_name)))
        parts.append(self._field("Committer", f"{finding.committer} ({finding.email})"))
        parts.append(self._field("Commit hash", finding.commit_hash))
        parts.append(self._field("View commit", view_command(repo_dir, finding.commit_hash, finding.filepath)))
        parts.append(self._field("Date of commit", finding.date_of_commit))
        parts.append(self._field("Commit message", finding.commit_message.strip("\n")) + "\n")

        if settings.no_context:
            parts.append(self._paint(Level.SECRET, runs.secret) + "\n\n")
        else:
            parts.append(self._paint(Level.DATA, runs.pre))
            parts.append(self._paint(Level.SECRET, runs.secret))
            parts.append(self._paint(Level.DATA, runs.post) + "\n\n")
        return "".join(parts)

    def log_finding(self, finding: Finding, store, context_diff: str,
                    settings: Optional[ReportSettings] = None) -> None:
        """
        Attach the diff to a finding, record it and print its report.

        Recording and printing happen under the logger's lock, so concurrent
        reports appear whole and in the same order as in the store.

        Raises:
            ClassificationError: If the finding's offsets cannot be sliced from the diff
        """
        with self._lock:
            finding.diff = context_diff
            report = self.format_finding(finding, settings)
            store.append(finding)
            self._write(report)

    def format_persisted(self, finding, no_context: bool = False) -> str:
        """Render a finding loaded from a saved findings file."""
        if no_context:
            return self._paint(Level.SECRET, finding.secret) + "\n\n"

        parts = [self._paint(Level.INFO, SEPARATOR) + "\n"]
        parts.append(self._field("Reason", finding.reason))
        if finding.filepath:
            parts.append(self._field("Filepath", finding.filepath))
        parts.append(self._field("Repo name", finding.repo_name))
        parts.append(self._field("Committer", finding.committer))
        parts.append(self._field("Commit hash", finding.commit_hash))
        parts.append(self._field("Source", finding.source))
        parts.append(self._field("Date of commit", finding.date_of_commit))
        parts.append(self._field("Commit message", finding.commit_message.strip("\n")) + "\n")
        parts.append(self._paint(Level.SECRET, finding.secret) + "\n\n")
        return "".join(parts)

    def log_persisted(self, finding, no_context: bool = False) -> None:
        """Print a saved finding as one block."""
        report = self.format_persisted(finding, no_context)
        with self._lock:
            self._write(report)
