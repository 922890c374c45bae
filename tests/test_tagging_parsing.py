# tests/test_tagging_parsing.py
"""
parsing tests
=============

Does: Check the tolerant decoders for upload acks, tag lists and color lists,
      including malformed shapes and per-item skipping.
"""

from __future__ import annotations

import pytest

from photo_tagger.color import PhotoColor
from photo_tagger.tagging import decode_colors, decode_tags, decode_upload_ack


# ──────────────────────────────────────────────────────────────────────────────
# Upload acknowledgment
# ──────────────────────────────────────────────────────────────────────────────
def test_upload_ack_returns_first_id():
    assert decode_upload_ack({"uploaded": [{"id": "abc123"}, {"id": "other"}]}) == "abc123"


def test_upload_ack_ignores_extra_fields():
    assert decode_upload_ack({"status": "success", "uploaded": [{"id": "a", "filename": "image.jpg"}]}) == "a"


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        "uploaded",
        {},
        {"uploaded": None},
        {"uploaded": []},
        {"uploaded": {"id": "abc"}},
        {"uploaded": ["abc"]},
        {"uploaded": [{}]},
        {"uploaded": [{"id": 123}]},
        {"uploaded": [{"id": None}]},
    ],
)
def test_upload_ack_invalid_shapes(payload):
    assert decode_upload_ack(payload) is None


# ──────────────────────────────────────────────────────────────────────────────
# Tags
# ──────────────────────────────────────────────────────────────────────────────
def test_tags_preserve_order_and_skip_malformed():
    payload = {"results": [{"tags": [
        {"tag": "cat", "confidence": 99.1},
        {"bogus": 1},
        {"tag": 5},
        "loose string",
        {"tag": "grass"},
    ]}]}
    assert decode_tags(payload) == ["cat", "grass"]


def test_tags_only_first_result_is_read():
    payload = {"results": [{"tags": [{"tag": "a"}]}, {"tags": [{"tag": "b"}]}]}
    assert decode_tags(payload) == ["a"]


@pytest.mark.parametrize(
    "payload",
    [None, {}, {"results": []}, {"results": [{}]}, {"results": [{"tags": {"tag": "x"}}]}, {"results": ["x"]}],
)
def test_tags_missing_shape_gives_empty(payload):
    assert decode_tags(payload) == []


# ──────────────────────────────────────────────────────────────────────────────
# Colors
# ──────────────────────────────────────────────────────────────────────────────
def _colors_payload(*entries):
    return {"results": [{"info": {"image_colors": list(entries)}}]}


def test_colors_decode_and_drop_non_numeric():
    payload = _colors_payload(
        {"r": "10", "g": "20", "b": "30", "closest_palette_color": "forest"},
        {"r": "x", "g": "1", "b": "2", "closest_palette_color": "bad"},
    )
    assert decode_colors(payload) == [PhotoColor(10, 20, 30, "forest")]


def test_colors_skip_entries_missing_any_field():
    payload = _colors_payload(
        {"g": "1", "b": "2", "closest_palette_color": "no red"},
        {"r": "1", "g": "2", "b": "3"},
        {"r": "1", "g": "2", "b": "3", "closest_palette_color": None},
        {"r": "255", "g": "0", "b": "0", "closest_palette_color": "red"},
        {"r": "1", "g": "999", "b": "3", "closest_palette_color": "out of range"},
        ["not", "a", "dict"],
        {"r": "0", "g": "128", "b": "0", "closest_palette_color": "green"},
    )
    assert decode_colors(payload) == [PhotoColor(255, 0, 0, "red"), PhotoColor(0, 128, 0, "green")]


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {"results": []},
        {"results": [{}]},
        {"results": [{"info": []}]},
        {"results": [{"info": {}}]},
        {"results": [{"info": {"image_colors": "red"}}]},
    ],
)
def test_colors_missing_shape_gives_empty(payload):
    assert decode_colors(payload) == []


def test_colors_require_string_channels():
    payload = _colors_payload(
        {"r": 10, "g": "20", "b": "30", "closest_palette_color": "int red"},
        {"r": "10", "g": "20", "b": 30.0, "closest_palette_color": "float blue"},
        {"r": "1", "g": "2", "b": "3", "closest_palette_color": "kept"},
    )
    assert decode_colors(payload) == [PhotoColor(1, 2, 3, "kept")]


# ──────────────────────────────────────────────────────────────────────────────
# Diagnostics
# ──────────────────────────────────────────────────────────────────────────────
def test_invalid_shapes_log_warnings(caplog):
    with caplog.at_level("WARNING", logger="photo_tagger.tagging.parsing"):
        assert decode_tags({"status": "error"}) == []
        assert decode_colors({"results": [{"info": None}]}) == []
    messages = [r.getMessage() for r in caplog.records if r.levelname == "WARNING"]
    assert any(m.startswith("[TAGS INVALID]") for m in messages)
    assert any(m.startswith("[COLORS INVALID]") for m in messages)


def test_valid_empty_lists_do_not_warn(caplog):
    with caplog.at_level("WARNING", logger="photo_tagger.tagging.parsing"):
        assert decode_tags({"results": [{"tags": []}]}) == []
        assert decode_colors(_colors_payload()) == []
    assert not [r for r in caplog.records if r.levelname == "WARNING"]
