"""In-memory aggregation of reported findings."""

from __future__ import annotations

import threading
from typing import Iterator, List

from robber.core.findings import Finding


class FindingStore:
    """Append-only, ordered collection of findings reported during a run."""

    def __init__(self):
        self._lock = threading.Lock()
        self._findings: List[Finding] = []

    def append(self, finding: Finding) -> None:
        with self._lock:
            self._findings.append(finding)

    def snapshot(self) -> List[Finding]:
        """Return a copy of the findings in report order."""
        with self._lock:
            return list(self._findings)

    def __len__(self) -> int:
        with self._lock:
            return len(self._findings)

    def __iter__(self) -> Iterator[Finding]:
        return iter(self.snapshot())
