from palettejuicer.colors import Color, color_steps, ColorKind, RGB, HSL, HSV, LCh, OkLCh, Okhsl
from palettejuicer.conversions import GamutMapAlgorithm, HueMode
import math
import pytest


hue_kinds = [ColorKind.HSL, ColorKind.HSV, ColorKind.LCH, ColorKind.OKLCH, ColorKind.OKHSL, ColorKind.OKHSV]


def test_default_color_is_black():
    color = Color()
    assert color.kind == ColorKind.RGB
    assert color.hex == "#000000"


def test_constructors():
    assert Color.from_hex("#6a40bf").hex == "#6a40bf"
    assert Color.from_hex("#zzz") is None
    assert Color.from_rgb_int(255, 0, 0).hex == "#ff0000"
    assert Color.from_kind(ColorKind.HSL, (260, 50, 50)).hex == "#6a40bf"
    assert Color.from_value(HSL((260, 50, 50))).kind == ColorKind.HSL


def test_rejects_non_colorspace_values():
    with pytest.raises(TypeError):
        Color((1.0, 0.0, 0.0))  # type: ignore[arg-type]


def test_projections_agree():
    color = Color(HSL((260, 50, 50)))
    assert color.data == HSL((260, 50, 50))
    assert color.rgb.values == pytest.approx((106.25 / 255, 63.75 / 255, 191.25 / 255))
    assert color.hsv.hue == 260
    assert color[ColorKind.OKLCH] is color.oklch
    for kind in ColorKind:
        assert color.projection(kind).kind == kind


def test_no_projection_has_undefined_hue():
    for color in [Color(RGB((0.5, 0.5, 0.5))), Color(RGB((0, 0, 0))), Color(RGB((1, 1, 1)))]:
        for kind in hue_kinds:
            assert not math.isnan(color[kind].hue), (color, kind)


def test_gray_from_scratch_has_zero_hue():
    gray = Color(RGB((0.5, 0.5, 0.5)))
    for kind in hue_kinds:
        assert gray[kind].hue == 0.0


def test_hsl_saturation_round_trip_keeps_hue():
    color = Color(HSL((260, 50, 50)))
    gray = color.adjust_channel(ColorKind.HSL, "saturation", 0)

    assert gray.hsl.hue == 260
    assert gray.hsv.hue == 260
    assert gray.hsv.channel("saturation") == pytest.approx(0)

    restored = gray.adjust_channel(ColorKind.HSL, "saturation", 50)
    assert restored.hex == "#6a40bf"


def test_hsl_lightness_extremes_keep_hue():
    color = Color(HSL((260, 50, 50)))
    black = color.adjust_channel(ColorKind.HSL, "lightness", 0)
    white = color.adjust_channel(ColorKind.HSL, "lightness", 100)

    assert black.hex == "#000000"
    assert white.hex == "#ffffff"
    assert black.hsv.hue == 260
    assert white.hsv.hue == 260

    assert black.adjust_channel(ColorKind.HSL, "lightness", 50).hex == "#6a40bf"


def test_hsv_value_zero_keeps_hue():
    color = Color(HSV((45, 80, 90)))
    black = color.adjust_channel(ColorKind.HSV, "value", 0)
    assert black.hsv.hue == 45
    assert black.hsl.hue == 45


def test_oklch_chroma_round_trip_keeps_hue():
    color = Color(OkLCh((0.6, 0.1, 150)))
    gray = color.adjust_channel(ColorKind.OKLCH, "chroma", 0)

    assert gray.oklch.hue == 150
    assert gray.okhsl.hue == 150
    assert gray.okhsv.hue == 150

    restored = gray.adjust_channel(ColorKind.OKLCH, "chroma", 0.1)
    assert restored.oklch == color.oklch
    assert restored.hex == color.hex


def test_okhsl_saturation_round_trip_keeps_hue():
    color = Color(Okhsl((300, 0.7, 0.5)))
    gray = color.adjust_channel(ColorKind.OKHSL, "saturation", 0)

    assert gray.okhsl.hue == 300
    assert gray.oklch.hue == 300
    assert gray.adjust_channel(ColorKind.OKHSL, "saturation", 0.7).hex == color.hex


def test_lch_chroma_round_trip_keeps_hue():
    color = Color(LCh((50, 40, 75)))
    gray = color.adjust_channel(ColorKind.LCH, "chroma", 0)

    assert gray.lch.hue == 75
    assert gray.adjust_channel(ColorKind.LCH, "chroma", 40).lch == color.lch


def test_previous_color_hue_survives_gray_edit():
    color = Color(HSL((200, 60, 50)))
    gray = color.with_value(RGB((0.5, 0.5, 0.5)))

    assert gray.hsl.hue == pytest.approx(color.hsl.hue)
    assert gray.hsv.hue == pytest.approx(color.hsv.hue)
    assert gray.oklch.hue == pytest.approx(color.oklch.hue)
    assert gray.lch.hue == pytest.approx(color.lch.hue)


def test_with_kind():
    color = Color().with_kind(ColorKind.HSV, (120, 100, 100))
    assert color.kind == ColorKind.HSV
    assert color.hex == "#00ff00"


def test_converted_keeps_color():
    color = Color(HSL((260, 50, 50)))
    converted = color.converted(ColorKind.OKLCH)

    assert converted.kind == ColorKind.OKLCH
    assert converted.hex == color.hex
    assert converted.hsl.hue == pytest.approx(260)
    assert color.converted(ColorKind.HSL) is color


def test_channel_lookup():
    color = Color(HSL((260, 50, 50)))
    assert color.channel(ColorKind.HSL, "hue") == 260
    with pytest.raises(KeyError):
        color.channel(ColorKind.HSL, "chroma")


def test_color_is_immutable():
    color = Color()
    with pytest.raises(AttributeError):
        color._data = RGB((1, 1, 1))


def test_edits_leave_original_untouched():
    color = Color(HSL((260, 50, 50)))
    color.adjust_channel(ColorKind.HSL, "hue", 10)
    assert color.hsl.hue == 260


def test_describe():
    assert Color(HSL((260, 50, 50))).describe() == "hsl(260, 50, 50)"
    assert Color(RGB((1.0, 0.0, 0.0))).describe() == "rgb(255, 0, 0)"
    assert Color(OkLCh((0.5, 0.1, 120))).describe() == "oklch(50, 10, 120)"
    assert Color(HSV((12.34, 50, 50))).describe() == "hsv(12.3, 50, 50)"


def test_gamut():
    inside = Color(RGB((0.2, 0.4, 0.6)))
    outside = Color(OkLCh((0.7, 0.35, 150)))

    assert inside.in_gamut()
    assert inside.out_of_gamut_distance() == 0.0
    assert not outside.in_gamut()
    assert outside.out_of_gamut_distance() > 0

    assert inside.to_gamut() is inside
    for algorithm in GamutMapAlgorithm:
        mapped = outside.to_gamut(algorithm)
        assert mapped.kind == ColorKind.OKLCH
        assert mapped.in_gamut()
        assert mapped.to_gamut(algorithm) is mapped


def test_equality():
    assert Color(HSL((260, 50, 50))) == Color(HSL((260, 50, 50)))
    assert Color(HSL((260, 50, 50))) != Color(RGB((1, 0, 0)))
    assert len({Color(HSL((260, 50, 50))), Color(HSL((260, 50, 50)))}) == 1


def test_color_steps():
    red = Color.from_hex("#ff0000")
    blue = Color.from_hex("#0000ff")

    result = color_steps(red, blue, ColorKind.RGB, 3)
    assert [c.hex for c in result] == ["#ff0000", "#800080", "#0000ff"]

    result = color_steps(red, blue, ColorKind.HSL, 3, HueMode.SHORTEST)
    assert result[1].hsl.hue == pytest.approx(300)
    result = color_steps(red, blue, ColorKind.HSL, 3, HueMode.LONGEST)
    assert result[1].hsl.hue == pytest.approx(120)
    assert all(c.kind == ColorKind.HSL for c in result)


def test_hsl_through_black_and_white_keeps_hue():
    color = Color(HSL((260, 50, 50)))
    color = color.adjust_channel(ColorKind.HSL, "saturation", 0)
    color = color.adjust_channel(ColorKind.HSL, "saturation", 100)
    assert color.hsl.hue == 260

    for lightness in (0, 100, 50):
        color = color.adjust_channel(ColorKind.HSL, "lightness", lightness)
        assert color.hsl.hue == 260
        assert color.hsv.hue == 260
    assert color.hex == Color(HSL((260, 100, 50))).hex


def test_hsv_saturation_and_value_keep_hue():
    color = Color(HSV((260, 50, 50)))
    for name, value in [("saturation", 0), ("value", 0), ("value", 80), ("saturation", 60)]:
        color = color.adjust_channel(ColorKind.HSV, name, value)
        assert color.hsv.hue == 260
        assert color.hsl.hue == 260


def test_oklch_chroma_through_gray_keeps_hue():
    color = Color(OkLCh((0.6, 0.12, 150)))
    for chroma in (0, 0.08, 0):
        color = color.adjust_channel(ColorKind.OKLCH, "chroma", chroma)
        assert color.oklch.hue == 150
        assert color.okhsl.hue == pytest.approx(color.okhsv.hue)
    color = color.adjust_channel(ColorKind.OKLCH, "chroma", 0.12)
    assert color.hex == Color(OkLCh((0.6, 0.12, 150))).hex


def test_color_steps_from_gray_uses_other_hue():
    gray = Color(RGB((0.5, 0.5, 0.5)))
    blue = Color(RGB((0.0, 0.0, 1.0)))
    for kind in (ColorKind.OKLCH, ColorKind.LCH, ColorKind.HSL):
        steps = color_steps(gray, blue, kind, 5)
        for color in steps[1:-1]:
            assert color[kind].hue == pytest.approx(blue[kind].hue, abs=1e-6)


def test_color_steps_keeps_gray_own_hue():
    gray = Color(HSL((90, 0, 50)))
    blue = Color(HSL((240, 100, 50)))
    steps = color_steps(gray, blue, ColorKind.HSL, 3, HueMode.SHORTEST)
    assert steps[1].hsl.hue == pytest.approx(165)
