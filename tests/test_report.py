"""Tests for report rows and summary counts."""

from __future__ import annotations

import pytest

from reqdiff.differ import diff
from reqdiff.exceptions import InvalidFilterError, ReqDiffError
from reqdiff.models import DiffStatus
from reqdiff.parser import parse
from reqdiff.report import DiffRow, summarize, to_rows


@pytest.fixture
def result():
    a = parse("requests==2.28.0\nflask>=2.0\n# comment\nnumpy")
    b = parse("requests==2.31.0\nnumpy\npandas")
    return diff(a, b)


class TestToRows:
    def test_all_rows_sorted_with_placeholders(self, result):
        assert to_rows(result) == [
            DiffRow(DiffStatus.REMOVED, "flask", ">=2.0", "—"),
            DiffRow(DiffStatus.UNCHANGED, "numpy", "any", "any"),
            DiffRow(DiffStatus.ADDED, "pandas", "—", "any"),
            DiffRow(DiffStatus.CHANGED, "requests", "==2.28.0", "==2.31.0"),
        ]

    @pytest.mark.parametrize(
        "status,expected",
        [
            ("added", ["pandas"]),
            ("removed", ["flask"]),
            ("changed", ["requests"]),
            ("same", ["numpy"]),
            (DiffStatus.CHANGED, ["requests"]),
        ],
    )
    def test_filter(self, result, status, expected):
        assert [r.name for r in to_rows(result, status)] == expected

    def test_changed_to_absent_shows_any(self):
        rows = to_rows(diff(parse("numpy==1.0"), parse("numpy")))
        assert rows == [DiffRow(DiffStatus.CHANGED, "numpy", "==1.0", "any")]

    def test_unknown_filter_raises(self, result):
        with pytest.raises(InvalidFilterError) as exc_info:
            to_rows(result, "bogus")
        assert exc_info.value.status == "bogus"
        assert isinstance(exc_info.value, ReqDiffError)
        assert isinstance(exc_info.value, ValueError)

    def test_to_dict(self):
        row = DiffRow(DiffStatus.UNCHANGED, "numpy", "any", "any")
        assert row.to_dict() == {"name": "numpy", "status": "same", "from": "any", "to": "any"}


class TestSummarize:
    def test_counts(self, result):
        assert summarize(result) == {
            "all": 4,
            "added": 1,
            "removed": 1,
            "changed": 1,
            "same": 1,
        }

    def test_counts_sum_to_total(self, result):
        counts = summarize(result)
        assert sum(v for k, v in counts.items() if k != "all") == counts["all"]
