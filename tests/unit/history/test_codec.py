"""Unit tests for the search history JSON codec."""

from __future__ import annotations

import json

import pytest

from storefront_discovery.history import decode_history, encode_history
from storefront_discovery.history.entry import SearchHistoryEntry
from storefront_discovery.kernel.errors import SerializationError


class TestEncode:
    def test_wire_shape(self) -> None:
        blob = encode_history([SearchHistoryEntry("a1", "Sheet mask", 1700000000000, 3)])
        assert json.loads(blob) == [
            {"id": "a1", "query": "Sheet mask", "timestamp": 1700000000000, "resultCount": 3}
        ]

    def test_non_ascii_is_kept(self) -> None:
        blob = encode_history([SearchHistoryEntry("k", "마스크", 1, 0)])
        assert "마스크" in blob

    def test_empty(self) -> None:
        assert encode_history([]) == "[]"


class TestDecode:
    def test_preserves_order(self) -> None:
        blob = json.dumps([
            {"id": "2", "query": "bags", "timestamp": 2, "resultCount": 2},
            {"id": "1", "query": "shoes", "timestamp": 1, "resultCount": 5},
        ])
        assert [e.query for e in decode_history(blob)] == ["bags", "shoes"]

    def test_defaults_for_optional_fields(self) -> None:
        (entry,) = decode_history('[{"query": "shoes", "timestamp": 1700000000000}]')
        assert entry.result_count == 0
        assert entry.id == "1700000000000"

    def test_accepts_bytes(self) -> None:
        assert decode_history(b'[{"query": "x", "timestamp": 1}]')[0].query == "x"

    @pytest.mark.parametrize(
        "blob",
        [
            "not json",
            '{"query": "x"}',
            "[1, 2]",
            '[{"timestamp": 1}]',
            '[{"query": "x"}]',
            '[{"query": 3, "timestamp": 1}]',
            '[{"query": "x", "timestamp": "yesterday"}]',
            '[{"query": "x", "timestamp": true}]',
            '[{"query": "x", "timestamp": 1, "resultCount": "many"}]',
            '[{"query": "x", "timestamp": Infinity}]',
            '[{"query": "x", "timestamp": 1, "resultCount": 1e400}]',
        ],
    )
    def test_malformed_blobs_raise(self, blob: str) -> None:
        with pytest.raises(SerializationError) as exc_info:
            decode_history(blob)
        assert exc_info.value.payload_type == "search_history"
        assert exc_info.value.code == "serialization_error"
