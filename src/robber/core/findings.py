"""Finding data structures for Robber."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from robber.core.redaction import validate_offsets

# Go-style RFC1123 layout: "Mon, 02 Jan 2006 15:04:05 MST"
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_commit_time(when: datetime) -> str:
    """Format a commit timestamp as RFC1123 with a zone abbreviation."""
    zone = when.tzname() if when.tzinfo else None
    if not zone or (zone.startswith("UTC") and zone != "UTC"):
        offset = when.strftime("%z")
        zone = offset or "UTC"
    return "%s, %02d %s %04d %02d:%02d:%02d %s" % (
        _WEEKDAYS[when.weekday()],
        when.day,
        _MONTHS[when.month - 1],
        when.year,
        when.hour,
        when.minute,
        when.second,
        zone,
    )


@dataclass(frozen=True)
class Signature:
    """Author or committer identity of a commit."""

    name: str
    email: str
    when: datetime


@dataclass(frozen=True)
class Commit:
    """Commit metadata as supplied by the diff provider."""

    hash: str
    message: str
    committer: Signature


@dataclass(frozen=True)
class DiffObject:
    """Detection context: the commit, repository and file a secret was found in."""

    commit: Commit
    repo_name: str
    filepath: Optional[str] = ""


@dataclass
class Finding:
    """One secret detection tied to a commit, a file and a byte range of its diff."""

    commit_hash: str
    repo_name: str
    commit_message: str = ""
    committer: str = ""
    email: str = ""
    date_of_commit: str = ""
    reason: str = ""
    filepath: str = ""
    secret: Tuple[int, int] = (0, 0)
    diff: str = field(default="", repr=False)  # set once, at report time


def new_finding(reason: str, secret, diff_object) -> Finding:
    """
    Create a Finding from a detection event.

    Args:
        reason: Detector name or description
        secret: ``(start, end)`` byte offsets of the match within the diff
        diff_object: Detection context exposing ``commit``, ``repo_name`` and ``filepath``

    Raises:
        ClassificationError: If the offsets are not a non-negative, ordered pair
    """
    start, end = validate_offsets(secret)
    commit = diff_object.commit
    committer = commit.committer
    return Finding(
        commit_hash=str(commit.hash),
        commit_message=commit.message or "",
        committer=committer.name or "",
        email=committer.email or "",
        date_of_commit=format_commit_time(committer.when),
        reason=reason,
        secret=(start, end),
        repo_name=diff_object.repo_name,
        filepath=diff_object.filepath or "",
    )
