# SPDX-License-Identifier: MIT
"""
Secret slicing utilities for Robber.

Secret offsets are byte positions in the UTF-8 encoding of a diff. These
helpers validate offsets and cut a diff into the text before the secret, the
secret itself and the text after it, for both console and JSON output.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

from robber.core.exceptions import ClassificationError


class SecretRuns(NamedTuple):
    """A diff split around a secret. ``pre + secret + post`` is the diff."""

    pre: str
    secret: str
    post: str


def validate_offsets(offsets) -> Tuple[int, int]:
    """
    Check that offsets form a ``(start, end)`` pair with ``0 <= start <= end``.

    Args:
        offsets: Any two-item sequence of integers

    Returns:
        The offsets as a tuple

    Raises:
        ClassificationError: If the pair is malformed
    """
    try:
        start, end = offsets
    except (TypeError, ValueError):
        raise ClassificationError(f"Secret offsets must be a (start, end) pair, got {offsets!r}", offsets)

    for value in (start, end):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ClassificationError(f"Secret offsets must be integers, got {offsets!r}", offsets)

    if start < 0 or end < start:
        raise ClassificationError(f"Secret offsets out of order: {offsets!r}", offsets)

    return start, end


def _decode(chunk: bytes, offsets) -> str:
    try:
        return chunk.decode("utf-8")
    except UnicodeDecodeError:
        raise ClassificationError(f"Secret offsets {offsets!r} split a multi-byte character", offsets)


def split_secret(diff: str, offsets) -> SecretRuns:
    """
    Split a diff into pre-secret, secret and post-secret runs.

    Offsets past the end of the diff are clamped to its length, so an offset
    at either edge yields an empty run rather than an error.

    Raises:
        ClassificationError: If the offsets are malformed or cut a code point
    """
    start, end = validate_offsets(offsets)
    raw = diff.encode("utf-8")
    end = min(end, len(raw))
    start = min(start, end)
    return SecretRuns(
        pre=_decode(raw[:start], offsets),
        secret=_decode(raw[start:end], offsets),
        post=_decode(raw[end:], offsets),
    )


def extract_secret(diff: str, offsets) -> str:
    """Return only the matched secret substring of a diff."""
    return split_secret(diff, offsets).secret
