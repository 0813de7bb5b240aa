from ..samples import samples_hex_rgb, invalid_hex
from palettejuicer.conversions import parse_hex, format_hex, rgb_to_int
import pytest


def test_parse_hex():
    for text, expected in samples_hex_rgb.items():
        result = parse_hex(text)
        assert result is not None, text
        assert result == pytest.approx(expected)


def test_parse_hex_rejects():
    for text in invalid_hex:
        assert parse_hex(text) is None, text


def test_parse_hex_rejects_non_strings():
    assert parse_hex(None) is None  # type: ignore[arg-type]
    assert parse_hex(0xff0000) is None  # type: ignore[arg-type]


def test_format_hex():
    assert format_hex((1.0, 0.0, 0.0)) == "#ff0000"
    assert format_hex((106 / 255, 64 / 255, 191 / 255)) == "#6a40bf"


def test_format_hex_clamps():
    assert format_hex((1.2, -0.1, 0.5)) == "#ff0080"


def test_rgb_to_int():
    assert rgb_to_int((0.25, 0.5, 1.0)) == (64, 128, 255)
    assert rgb_to_int((float("nan"), 2.0, -1.0)) == (0, 255, 0)


def test_hex_round_trip():
    for text in ["#000000", "#ffffff", "#6a40bf", "#123456"]:
        assert format_hex(parse_hex(text)) == text
