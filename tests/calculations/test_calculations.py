from palettejuicer.calculations import (
    CALCULATION_REGISTRY,
    EDITOR_REGISTRY,
    CopyColors,
    ExtrapolateColorspace,
    ExtrapolateStrip,
    GamutMap,
    InterpolateStrip,
    StripAdjustment,
    calculation_class,
    create_calculation,
    editor_for,
)
from palettejuicer.colors import Color, ColorKind, OkLCh, RGB
from palettejuicer.conversions import GamutMapAlgorithm, HueMode
from palettejuicer.defaults import MAX_COPIES
from palettejuicer.errors import CalculationInputError
from palettejuicer.types import CelIndex
import dataclasses
import pytest


RED = Color(RGB((1.0, 0.0, 0.0)))
BLUE = Color(RGB((0.0, 0.0, 1.0)))


# ---- Common behavior ----

def test_registry():
    assert set(CALCULATION_REGISTRY) == {"copy_colors", "interpolate_strip", "extrapolate_strip", "gamut_map"}
    assert calculation_class("gamut_map") is GamutMap
    assert editor_for("copy_colors") == "CopyColorsEditor"
    assert EDITOR_REGISTRY["interpolate_strip"] == "InterpolateStripEditor"
    with pytest.raises(KeyError):
        calculation_class("blur")


def test_create_calculation():
    calc = create_calculation("copy_colors", start_cel=CelIndex(1, 1), copies=3)
    assert isinstance(calc, CopyColors)
    assert calc.copies == 3
    assert calc.enabled


def test_uid():
    a = CopyColors()
    b = CopyColors()
    assert a.uid != b.uid
    assert len(a.uid) == 32
    assert a.with_new_uid().uid != a.uid
    assert a.with_custom_name("x").uid == a.uid


def test_frozen():
    calc = CopyColors()
    with pytest.raises(dataclasses.FrozenInstanceError):
        calc.copies = 5  # type: ignore[misc]


def test_display_name():
    calc = CopyColors(start_cel=CelIndex(1, 2), end_cel=CelIndex(3, 4), offset=CelIndex(0, 3), copies=2)
    assert calc.display_name() == "Copy Colors - [1, 2] [3, 4] offset [0, 3] x2"
    assert calc.with_custom_name("Shadows").display_name() == "Shadows"
    assert calc.with_enabled(False).enabled is False


def test_input_count_mismatch():
    calc = InterpolateStrip(start_cel=CelIndex(0, 0), end_cel=CelIndex(3, 0))
    with pytest.raises(CalculationInputError):
        calc.compute_colors([RED], 16, 16)
    with pytest.raises(ValueError):
        calc.compute_colors([RED, BLUE, RED], 16, 16)


# ---- CopyColors ----

def test_copy_colors_cels():
    calc = CopyColors(start_cel=CelIndex(0, 0), end_cel=CelIndex(1, 0), offset=CelIndex(0, 1), copies=2)
    assert calc.input_cels(16, 16) == [CelIndex(0, 0), CelIndex(1, 0)]
    assert calc.output_cels(16, 16) == [CelIndex(0, 1), CelIndex(1, 1), CelIndex(0, 2), CelIndex(1, 2)]


def test_copy_colors_compute():
    calc = CopyColors(start_cel=CelIndex(0, 0), end_cel=CelIndex(1, 0), offset=CelIndex(2, 0), copies=2)
    result = calc.compute_colors([RED, BLUE], 16, 16)
    assert [(tuple(cel.index), cel.color) for cel in result] == [
        ((2, 0), RED), ((3, 0), BLUE), ((4, 0), RED), ((5, 0), BLUE),
    ]


def test_copy_colors_copies_capped():
    assert CopyColors(copies=MAX_COPIES * 10).effective_copies == MAX_COPIES
    assert CopyColors(copies=0).output_cels(16, 16) == []


def test_copy_colors_nudge():
    calc = CopyColors(start_cel=CelIndex(1, 1), end_cel=CelIndex(2, 2), offset=CelIndex(3, 0))
    nudged = calc.nudge_cel_indexes(1, -1)
    assert nudged.start_cel == CelIndex(2, 0)
    assert nudged.end_cel == CelIndex(3, 1)
    assert nudged.offset == CelIndex(3, 0)
    assert nudged.uid == calc.uid


# ---- InterpolateStrip ----

def test_interpolate_strip_cels():
    calc = InterpolateStrip(start_cel=CelIndex(0, 1), end_cel=CelIndex(0, 4))
    assert calc.input_cels(16, 16) == [CelIndex(0, 1), CelIndex(0, 4)]
    assert calc.output_cels(16, 16) == [CelIndex(0, 1), CelIndex(0, 2), CelIndex(0, 3), CelIndex(0, 4)]


def test_interpolate_strip_compute():
    calc = InterpolateStrip(start_cel=CelIndex(0, 0), end_cel=CelIndex(2, 0), colorspace=ColorKind.RGB)
    result = calc.compute_colors([RED, BLUE], 16, 16)
    assert [cel.color.hex for cel in result] == ["#ff0000", "#800080", "#0000ff"]
    assert result[1].index == CelIndex(1, 0)


def test_interpolate_strip_hue_mode():
    calc = InterpolateStrip(
        start_cel=CelIndex(0, 0), end_cel=CelIndex(2, 0),
        colorspace=ColorKind.HSL, hue_mode=HueMode.LONGEST,
    )
    result = calc.compute_colors([RED, BLUE], 16, 16)
    assert result[1].color.hsl.hue == pytest.approx(120)


def test_interpolate_strip_power_curve():
    calc = InterpolateStrip(
        start_cel=CelIndex(0, 0), end_cel=CelIndex(2, 0),
        colorspace=ColorKind.RGB, power_curve=2.0,
    )
    result = calc.compute_colors([RED, BLUE], 16, 16)
    assert result[1].color.rgb.values == pytest.approx((0.75, 0.0, 0.25))


def test_interpolate_strip_diagonal_writes_nothing():
    calc = InterpolateStrip(start_cel=CelIndex(0, 0), end_cel=CelIndex(2, 2))
    assert calc.output_cels(16, 16) == []
    assert calc.compute_colors([RED, BLUE], 16, 16) == []


def test_interpolate_strip_description():
    calc = InterpolateStrip(start_cel=CelIndex(0, 0), end_cel=CelIndex(5, 0))
    assert calc.list_description() == "Interpolate Strip - [0, 0] to [5, 0] in oklch"


# ---- ExtrapolateStrip ----

def test_strip_adjustment():
    assert StripAdjustment().value_at_step(0.5) == 0
    assert StripAdjustment(delta=10).value_at_step(-1) == -10
    assert StripAdjustment(delta=10, curve=2).value_at_step(-0.5) == pytest.approx(-2.5)
    assert StripAdjustment(delta=10).value_at_step(0) == 0
    assert StripAdjustment(mid_boost=4).value_at_step(0) == 4
    assert StripAdjustment(mid_boost=4).value_at_step(1) == 0
    assert StripAdjustment(mid_boost=4, mid_curve=2).value_at_step(-0.5) == pytest.approx(3)


def test_extrapolate_colorspace():
    assert ExtrapolateColorspace.OKLCH.kind == ColorKind.OKLCH
    assert ExtrapolateColorspace("lch").kind == ColorKind.LCH


def test_extrapolate_strip_lightness():
    source = Color(OkLCh((0.5, 0.1, 100)))
    calc = ExtrapolateStrip(
        input_cel=CelIndex(0, 0), start_cel=CelIndex(1, 0), end_cel=CelIndex(5, 0),
        adjust_lightness=StripAdjustment(delta=20),
    )
    assert calc.input_cels(16, 16) == [CelIndex(0, 0)]

    result = calc.compute_colors([source], 16, 16)
    assert [cel.index.x for cel in result] == [1, 2, 3, 4, 5]
    lightness = [cel.color.oklch.values[0] for cel in result]
    assert lightness == pytest.approx([0.3, 0.4, 0.5, 0.6, 0.7])
    for cel in result:
        assert cel.color.kind == ColorKind.OKLCH
        assert cel.color.oklch.values[1] == pytest.approx(0.1)
        assert cel.color.oklch.values[2] == pytest.approx(100)


def test_extrapolate_strip_chroma_floor_and_hue_wrap():
    source = Color(OkLCh((0.5, 0.1, 100)))
    calc = ExtrapolateStrip(
        input_cel=CelIndex(0, 0), start_cel=CelIndex(0, 1), end_cel=CelIndex(0, 3),
        adjust_chroma=StripAdjustment(delta=-50),
        adjust_hue=StripAdjustment(delta=300),
    )
    first, middle, last = (cel.color.oklch.values for cel in calc.compute_colors([source], 16, 16))

    assert first[1] == pytest.approx(0.6)
    assert middle[1] == pytest.approx(0.1)
    assert last[1] == 0.0
    assert first[2] == pytest.approx(160)
    assert last[2] == pytest.approx(40)


def test_extrapolate_strip_in_lch():
    source = Color(RGB((0.8, 0.3, 0.2)))
    calc = ExtrapolateStrip(
        input_cel=CelIndex(0, 0), start_cel=CelIndex(0, 0), end_cel=CelIndex(2, 0),
        colorspace=ExtrapolateColorspace.LCH,
        adjust_lightness=StripAdjustment(delta=10),
    )
    result = calc.compute_colors([source], 16, 16)
    assert result[1].color.kind == ColorKind.LCH
    assert result[1].color.lch.values[0] == pytest.approx(source.lch.values[0])
    assert result[2].color.lch.values[0] == pytest.approx(source.lch.values[0] + 10)


def test_extrapolate_strip_nudge():
    calc = ExtrapolateStrip(input_cel=CelIndex(0, 0), start_cel=CelIndex(1, 0), end_cel=CelIndex(4, 0))
    nudged = calc.nudge_cel_indexes(2, 3)
    assert (nudged.input_cel, nudged.start_cel, nudged.end_cel) == (CelIndex(2, 3), CelIndex(3, 3), CelIndex(6, 3))


# ---- GamutMap ----

def test_gamut_map_skips_in_gamut_cels():
    outside = Color(OkLCh((0.7, 0.35, 150)))
    calc = GamutMap(start_cel=CelIndex(0, 0), end_cel=CelIndex(1, 0))
    inside_cel, outside_cel = calc.compute_colors([RED, outside], 16, 16)

    assert inside_cel.color is None
    assert outside_cel.index == CelIndex(1, 0)
    assert outside_cel.color.in_gamut()


def test_gamut_map_region_matches_single_colors():
    colors = [
        Color(OkLCh((0.7, 0.35, 150))),
        RED,
        Color(RGB((1.2, -0.1, 0.5))),
        Color(OkLCh((0.4, 0.3, 300))),
    ]
    calc = GamutMap(start_cel=CelIndex(0, 0), end_cel=CelIndex(3, 0), algorithm=GamutMapAlgorithm.OKLCH_CHROMA)
    cels = calc.compute_colors(colors, 16, 16)

    assert cels[1].color is None
    for cel, color in zip(cels, colors):
        if cel.color is None:
            continue
        expected = color.to_gamut(GamutMapAlgorithm.OKLCH_CHROMA)
        assert cel.color.kind == color.kind
        assert cel.color.data.values == pytest.approx(expected.data.values, abs=1e-6)


def test_gamut_map_entire_palette():
    calc = GamutMap(entire_palette=True)
    assert len(calc.input_cels(4, 3)) == 12
    assert calc.output_cels(4, 3) == calc.input_cels(4, 3)


def test_gamut_map_description():
    calc = GamutMap(start_cel=CelIndex(0, 0), end_cel=CelIndex(1, 0))
    assert calc.list_description() == "Gamut Map to sRGB - [0, 0] to [1, 0] (CSS 4)"
    calc = GamutMap(entire_palette=True, algorithm=GamutMapAlgorithm.CLIP)
    assert calc.list_description() == "Gamut Map to sRGB - entire palette (Clipping)"
