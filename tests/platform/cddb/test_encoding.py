"""Tests for encoding resolution."""

from __future__ import annotations

import pytest

from cddbtool.platform.cddb.encoding import resolve_encoding


@pytest.mark.parametrize(
    ("name", "expected"),
    [("euc-jp", "euc_jp"), ("Shift_JIS", "shift_jis"), ("UTF-8", "utf-8"), ("latin-1", "iso8859-1")],
)
def test_known_encodings_resolve(name: str, expected: str) -> None:
    resolution = resolve_encoding(name)

    assert resolution.name == expected
    assert resolution.requested == name
    assert not resolution.fell_back


@pytest.mark.parametrize("name", ["no-such-codec", "", "   ", None, "base64", "rot13", "hex"])
def test_unknown_encodings_fall_back_to_utf8(name: str | None) -> None:
    resolution = resolve_encoding(name)

    assert resolution.name == "utf-8"
    assert resolution.fell_back
