# SPDX-License-Identifier: MIT
"""
JSON export of findings.

At the end of a run the accumulated findings are projected into
``PersistedFinding`` records: the surrounding diff is dropped and only the
matched secret plus identifying metadata are kept.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from robber.core.exceptions import ClassificationError, ExportError
from robber.core.findings import Finding
from robber.core.redaction import extract_secret
from robber.export.source import resolve_source_reference, strip_vcs_suffix

log = logging.getLogger(__name__)


class PersistedFinding(BaseModel):
    """One entry of the findings JSON artifact."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    reason: str = Field(alias="Reason")
    filepath: str = Field(alias="Filepath")
    repo_name: str = Field(alias="RepoName")
    committer: str = Field(alias="Commiter")
    commit_hash: str = Field(alias="CommitHash")
    date_of_commit: str = Field(alias="DateOfCommit")
    commit_message: str = Field(alias="CommitMessage")
    source: str = Field(alias="Source")
    secret: str = Field(alias="Secret")


def to_persisted(finding: Finding) -> PersistedFinding:
    """
    Project a reported finding into its persisted form.

    Raises:
        ClassificationError: If the finding's offsets cannot be sliced from its diff
    """
    return PersistedFinding(
        reason=finding.reason,
        filepath=finding.filepath,
        repo_name=strip_vcs_suffix(finding.repo_name),
        committer=finding.committer,
        commit_hash=finding.commit_hash,
        date_of_commit=finding.date_of_commit,
        commit_message=finding.commit_message,
        source=resolve_source_reference(finding.repo_name, finding.commit_hash, finding.filepath),
        secret=extract_secret(finding.diff, finding.secret),
    )


def build_persisted_findings(findings: Iterable[Finding], logger=None) -> List[PersistedFinding]:
    """Project findings in order, skipping any whose offsets cannot be sliced."""
    persisted = []
    for finding in findings:
        try:
            persisted.append(to_persisted(finding))
        except ClassificationError as e:
            log.warning("Skipping finding %s in %s: %s", finding.commit_hash, finding.repo_name, e)
            if logger is not None:
                logger.log_warn("Skipping finding %s: %s", finding.commit_hash, e)
    return persisted


def dump_findings(persisted: Iterable[PersistedFinding]) -> str:
    """Serialize persisted findings as a two-space indented JSON array."""
    payload = [p.model_dump(by_alias=True) for p in persisted]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def write_findings(content: str, output_path) -> Path:
    """
    Write serialized findings to disk.

    Raises:
        ExportError: If the file cannot be written
    """
    path = Path(output_path)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Failed to write findings: {e}", output_path=str(path))
    return path


def save_findings(findings: Iterable[Finding], output_path=None, logger=None) -> Optional[Path]:
    """
    Save all findings to a JSON file.

    Must only be called once every scan worker has finished reporting.

    Args:
        findings: Reported findings, e.g. a ``FindingStore``
        output_path: Destination file, normally ``ReportSettings.save``; nothing
            is written when empty
        logger: Optional console ``Logger`` used to warn about failures

    Returns:
        Path written, or None when there was no output path or the write failed
    """
    if not output_path:
        log.debug("No output path configured, findings not saved")
        return None

    content = dump_findings(build_persisted_findings(findings, logger=logger))
    try:
        path = write_findings(content, output_path)
    except ExportError as e:
        log.warning("%s", e)
        if logger is not None:
            logger.log_warn("%s", e)
        return None

    log.info("Saved findings to %s", path)
    return path


def load_findings(input_path) -> List[PersistedFinding]:
    """
    Read a findings JSON artifact.

    Raises:
        ExportError: If the file cannot be read or does not match the artifact schema
    """
    path = Path(input_path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ExportError(f"Failed to read findings: {e}", output_path=str(path))
    except json.JSONDecodeError as e:
        raise ExportError(f"Findings file is not valid JSON: {e}", output_path=str(path))

    if data is None:
        return []
    if not isinstance(data, list):
        raise ExportError("Findings file must contain a JSON array", output_path=str(path))

    try:
        return [PersistedFinding.model_validate(entry) for entry in data]
    except ValidationError as e:
        raise ExportError(f"Findings file has invalid entries: {e}", output_path=str(path))
