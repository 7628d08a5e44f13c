# SPDX-License-Identifier: MIT
"""
Tests for the findings JSON artifact.
"""
import json

import pytest

from robber.core.exceptions import ExportError
from robber.core.findings import Finding
from robber.core.store import FindingStore
from robber.export.json_export import (
    PersistedFinding,
    build_persisted_findings,
    dump_findings,
    load_findings,
    save_findings,
)


def local_finding():
    return Finding(
        commit_hash="deadbeef99",
        repo_name="/tmp/abc123.git",
        committer="Jane Doe",
        email="jane@example.com",
        date_of_commit="Mon, 04 Mar 2019 15:04:05 UTC",
        commit_message="Add config",
        reason="Password",
        filepath="config.yml",
        diff="PASSWORD=supersecret123",
        secret=(9, 24),
    )


def remote_finding():
    return Finding(
        commit_hash="abc123",
        repo_name="github.com/org/repo.git",
        reason="AWS key",
        filepath="deploy.sh",
        diff="key=AKIAEXAMPLE\n",
        secret=(4, 15),
    )


class TestSaveFindings:
    """Test save_findings."""

    def test_local_clone_entry(self, tmp_path):
        out = tmp_path / "findings.json"
        assert save_findings([local_finding()], out) == out

        entries = json.loads(out.read_text())
        assert entries == [{
            "Reason": "Password",
            "Filepath": "config.yml",
            "RepoName": "/tmp/abc123",
            "Commiter": "Jane Doe",
            "CommitHash": "deadbeef99",
            "DateOfCommit": "Mon, 04 Mar 2019 15:04:05 UTC",
            "CommitMessage": "Add config",
            "Source": "git --git-dir=/tmp/abc123.git show deadbe:config.yml",
            "Secret": "supersecret123",
        }]

    def test_remote_entry(self, tmp_path):
        out = tmp_path / "findings.json"
        save_findings([remote_finding()], out)

        entry = json.loads(out.read_text())[0]
        assert entry["Source"] == "github.com/org/repo/commit/abc123"
        assert entry["RepoName"] == "github.com/org/repo"
        assert entry["Secret"] == "AKIAEXAMPLE"
        assert "Diff" not in entry

    def test_two_space_indent_and_key_order(self, tmp_path):
        out = tmp_path / "findings.json"
        save_findings([local_finding()], out)

        lines = out.read_text().splitlines()
        assert lines[0] == "["
        assert lines[1] == "  {"
        assert lines[2] == '    "Reason": "Password",'
        assert [line.split('"')[1] for line in lines[2:11]] == [
            "Reason", "Filepath", "RepoName", "Commiter", "CommitHash",
            "DateOfCommit", "CommitMessage", "Source", "Secret",
        ]

    def test_preserves_store_order(self, tmp_path):
        store = FindingStore()
        store.append(remote_finding())
        store.append(local_finding())
        out = tmp_path / "findings.json"
        save_findings(store, out)

        assert [e["CommitHash"] for e in json.loads(out.read_text())] == ["abc123", "deadbeef99"]

    def test_empty_collection(self, tmp_path):
        out = tmp_path / "findings.json"
        save_findings([], out)
        assert json.loads(out.read_text()) == []

    @pytest.mark.parametrize("path", [None, ""])
    def test_no_output_path_writes_nothing(self, path):
        assert save_findings([local_finding()], path) is None

    def test_write_failure_is_reported_not_raised(self, tmp_path, plain_logger):
        out = tmp_path / "missing" / "findings.json"
        assert save_findings([local_finding()], out, logger=plain_logger) is None
        assert plain_logger.stream.getvalue().startswith("[-] Failed to write findings")

    def test_unsliceable_finding_is_skipped(self, plain_logger):
        bad = local_finding()
        bad.diff = "é"
        bad.secret = (1, 2)

        persisted = build_persisted_findings([bad, remote_finding()], logger=plain_logger)

        assert [p.commit_hash for p in persisted] == ["abc123"]
        assert "Skipping finding deadbeef99" in plain_logger.stream.getvalue()

    def test_non_ascii_kept_verbatim(self):
        finding = remote_finding()
        finding.commit_message = "Ajout de clé"
        assert "Ajout de clé" in dump_findings(build_persisted_findings([finding]))


class TestLoadFindings:
    """Test reading an artifact back."""

    def test_round_trip_fields(self, tmp_path):
        out = tmp_path / "findings.json"
        save_findings([local_finding()], out)

        [loaded] = load_findings(out)
        assert isinstance(loaded, PersistedFinding)
        assert loaded.committer == "Jane Doe"
        assert loaded.secret == "supersecret123"

    def test_null_document(self, tmp_path):
        out = tmp_path / "findings.json"
        out.write_text("null")
        assert load_findings(out) == []

    @pytest.mark.parametrize("content", ["{not json", '{"Reason": "x"}', '[{"Reason": "x"}]'])
    def test_invalid_documents(self, tmp_path, content):
        out = tmp_path / "findings.json"
        out.write_text(content)
        with pytest.raises(ExportError):
            load_findings(out)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ExportError) as exc:
            load_findings(tmp_path / "nope.json")
        assert "nope.json" in str(exc.value)
