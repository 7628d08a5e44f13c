"""Shared fixtures for Robber tests."""

import io
from datetime import datetime, timezone

import pytest

from robber.core.findings import Commit, DiffObject, Signature, new_finding
from robber.core.logger import Logger


@pytest.fixture
def diff_object():
    """A detection context for a commit in a local temporary clone."""
    committer = Signature(
        name="Jane Doe",
        email="jane@example.com",
        when=datetime(2019, 3, 4, 15, 4, 5, tzinfo=timezone.utc),
    )
    commit = Commit(
        hash="deadbeef99c0ffee",
        message="\nAdd config\n",
        committer=committer,
    )
    return DiffObject(commit=commit, repo_name="/tmp/abc123.git", filepath="config.yml")


@pytest.fixture
def make_finding(diff_object):
    def _make(reason="Password assignment", secret=(9, 23)):
        return new_finding(reason, secret, diff_object)
    return _make


@pytest.fixture
def plain_logger():
    """Logger writing uncolored output to an in-memory stream."""
    return Logger(verbose=False, stream=io.StringIO(), use_color=False)


@pytest.fixture
def exit_raises(monkeypatch):
    """Turn the logger's hard process exit into a catchable SystemExit."""
    def _exit(code):
        raise SystemExit(code)

    monkeypatch.setattr("robber.core.logger.os._exit", _exit)
