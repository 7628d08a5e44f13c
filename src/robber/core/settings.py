"""Per-run reporting settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional


@dataclass
class ReportSettings:
    """Options controlling how findings are reported and saved."""

    verbose: bool = False
    no_context: bool = False
    context: int = 3  # lines of context requested from the diff provider
    save: Optional[str] = None  # passed by the scan driver to save_findings at end of run
    colors: Dict[str, str] = field(default_factory=dict)
    repo_dir: Optional[Callable[[str], str]] = None

    def resolve_repo_dir(self, repo_name: str) -> str:
        """Location of the repository's git dir, used in ``View commit`` lines."""
        if self.repo_dir is None:
            return repo_name
        return self.repo_dir(repo_name)
