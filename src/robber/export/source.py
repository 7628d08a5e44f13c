"""Source references telling an operator how to view a finding's commit."""

from __future__ import annotations

import tempfile

VCS_SUFFIX = ".git"
HASH_PREFIX_LEN = 6


def strip_vcs_suffix(repo_name: str) -> str:
    """Drop a trailing ``.git`` from a repository name."""
    if repo_name.endswith(VCS_SUFFIX):
        return repo_name[: -len(VCS_SUFFIX)]
    return repo_name


def _temp_roots():
    roots = {root.rstrip("/\\") for root in ("/tmp", tempfile.gettempdir())}
    return tuple(sorted(root for root in roots if root))


def is_local_clone(repo_name: str) -> bool:
    """Whether the repository lives in a temporary clone directory."""
    return repo_name.startswith(_temp_roots())


def view_command(repo_dir: str, commit_hash: str, filepath: str) -> str:
    """Build the git command that shows a file at a commit."""
    return f"git --git-dir={repo_dir} show {commit_hash[:HASH_PREFIX_LEN]}:{filepath}"


def resolve_source_reference(repo_name: str, commit_hash: str, filepath: str) -> str:
    """
    Derive a human-actionable reference to the commit a secret was found in.

    Local temporary clones get a ``git --git-dir=... show`` command; any other
    repository gets a ``<repo>/commit/<hash>`` path for a hosted web view,
    with the ``.git`` suffix removed.
    """
    if is_local_clone(repo_name):
        return view_command(repo_name, commit_hash, filepath)
    return "/".join([strip_vcs_suffix(repo_name), "commit", commit_hash])
