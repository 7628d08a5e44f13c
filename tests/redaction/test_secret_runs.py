# SPDX-License-Identifier: MIT
"""
Tests for splitting a diff around its secret.
"""
import pytest

from robber.core.exceptions import ClassificationError
from robber.core.redaction import extract_secret, split_secret, validate_offsets


DIFF = "+password = hunter2hunter2\n+user = admin\n"


class TestSplitSecret:
    """Test pre/secret/post runs."""

    def test_runs_reconstruct_diff_for_every_valid_range(self):
        for start in range(len(DIFF) + 1):
            for end in range(start, len(DIFF) + 1):
                runs = split_secret(DIFF, (start, end))
                assert runs.pre + runs.secret + runs.post == DIFF
                assert runs.secret == DIFF[start:end]

    def test_secret_at_start(self):
        runs = split_secret("token123 rest", (0, 8))
        assert runs.pre == ""
        assert runs.secret == "token123"
        assert runs.post == " rest"

    def test_secret_at_end(self):
        runs = split_secret("key=abc", (4, 7))
        assert runs.pre == "key="
        assert runs.secret == "abc"
        assert runs.post == ""

    def test_end_past_diff_is_clamped(self):
        assert extract_secret("PASSWORD=supersecret123", (9, 24)) == "supersecret123"

    def test_start_past_diff_gives_empty_secret(self):
        runs = split_secret("abc", (10, 12))
        assert runs == ("abc", "", "")

    def test_offsets_are_utf8_byte_positions(self):
        diff = "é=s3cr3t"
        # "é" is two bytes in UTF-8
        assert extract_secret(diff, (3, 9)) == "s3cr3t"

    def test_offset_inside_code_point_is_rejected(self):
        with pytest.raises(ClassificationError):
            split_secret("é=s3cr3t", (1, 4))


class TestValidateOffsets:
    """Test offset validation."""

    def test_valid_pair(self):
        assert validate_offsets([2, 5]) == (2, 5)
        assert validate_offsets((0, 0)) == (0, 0)

    @pytest.mark.parametrize("offsets", [(5, 2), (-1, 3), (1,), (1, 2, 3), None, ("1", "2"), (1.0, 2), (True, 2)])
    def test_invalid_pairs(self, offsets):
        with pytest.raises(ClassificationError):
            validate_offsets(offsets)

    def test_error_carries_offsets(self):
        with pytest.raises(ClassificationError) as exc:
            validate_offsets((4, 1))
        assert exc.value.offsets == (4, 1)
        assert isinstance(exc.value, ValueError)
