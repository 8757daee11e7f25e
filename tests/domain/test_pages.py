"""Tests for the page-count resolution policy."""

from __future__ import annotations

import pytest

from pdfmult.domain.pages import FALLBACK_PAGE_COUNT, resolve_page_count


class RecordingLookup:
    def __init__(self, answer: int | None) -> None:
        self.answer = answer
        self.calls: list[str] = []

    def __call__(self, source_file: str) -> int | None:
        self.calls.append(source_file)
        return self.answer


class TestResolvePageCount:
    @pytest.mark.parametrize("answer", [None, 7])
    def test_explicit_wins_without_lookup(self, answer: int | None) -> None:
        lookup = RecordingLookup(answer)
        assert resolve_page_count(4, "sample.pdf", lookup=lookup) == 4
        assert lookup.calls == []

    def test_lookup_result_used(self) -> None:
        lookup = RecordingLookup(5)
        assert resolve_page_count(None, "sample.pdf", lookup=lookup) == 5
        assert lookup.calls == ["sample.pdf"]

    def test_unknown_falls_back_to_one(self) -> None:
        lookup = RecordingLookup(None)
        assert resolve_page_count(None, "sample.pdf", lookup=lookup) == 1
        assert FALLBACK_PAGE_COUNT == 1
