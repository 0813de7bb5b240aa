from palettejuicer.colors import (
    ColorKind,
    ChannelType,
    COLORSPACE_CLASSES,
    RGB,
    HSL,
    HSV,
    Lab,
    LCh,
    OkLab,
    OkLCh,
    Okhsl,
    Okhsv,
    colorspace_class,
)
import math
import pytest


def test_registry_covers_every_kind():
    assert set(COLORSPACE_CLASSES) == set(ColorKind)
    assert colorspace_class("okhsv") is Okhsv
    assert colorspace_class(ColorKind.LAB) is Lab


def test_default_value_is_null():
    assert RGB().values == (0.0, 0.0, 0.0)
    assert OkLCh().values == (0.0, 0.0, 0.0)


def test_wrong_channel_count():
    with pytest.raises(ValueError):
        HSL((1.0, 2.0))


def test_values_are_immutable():
    value = RGB((0.1, 0.2, 0.3))
    with pytest.raises(AttributeError):
        value._values = (0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        value.extra = 1


def test_equality_and_hash():
    assert HSL((10, 20, 30)) == HSL((10.0, 20.0, 30.0))
    assert HSL((10, 20, 30)) != HSV((10, 20, 30))
    assert HSL((math.nan, 0, 30)) == HSL((math.nan, 0, 30))
    assert len({HSL((10, 20, 30)), HSL((10, 20, 30))}) == 1


def test_channel_access():
    value = HSV((120, 50, 75))
    assert value.channel("hue") == 120
    assert value.channel("value") == 75
    assert value.with_channel("saturation", 10).values == (120, 10, 75)
    assert value.values == (120, 50, 75)


def test_channel_properties():
    hsl = HSL((260.0, 40.0, 55.0))
    assert (hsl.hue, hsl.saturation, hsl.lightness) == (260.0, 40.0, 55.0)
    hsv = HSV((10.0, 20.0, 30.0))
    assert (hsv.hue, hsv.saturation, hsv.value) == (10.0, 20.0, 30.0)
    lab = Lab((50.0, -20.0, 35.0))
    assert (lab.lightness, lab.a, lab.b) == (50.0, -20.0, 35.0)
    lch = LCh((60.0, 80.0, 40.0))
    assert (lch.lightness, lch.chroma, lch.hue) == (60.0, 80.0, 40.0)
    oklab = OkLab((0.6, 0.1, -0.05))
    assert (oklab.lightness, oklab.a, oklab.b) == (0.6, 0.1, -0.05)
    oklch = OkLCh((0.5, 0.1, 120.0))
    assert (oklch.lightness, oklch.chroma, oklch.hue) == (0.5, 0.1, 120.0)
    okhsl = Okhsl((200.0, 0.7, 0.4))
    assert (okhsl.hue, okhsl.saturation, okhsl.lightness) == (200.0, 0.7, 0.4)
    okhsv = Okhsv((200.0, 0.7, 0.9))
    assert (okhsv.hue, okhsv.saturation, okhsv.value) == (200.0, 0.7, 0.9)


def test_unknown_channel_raises_key_error():
    with pytest.raises(KeyError):
        HSL((0, 0, 0)).channel("chroma")
    with pytest.raises(KeyError):
        RGB().with_channel("hue", 10)


def test_hue_index():
    assert RGB.hue_index() is None
    assert Lab.hue_index() is None
    assert HSL.hue_index() == 0
    assert LCh.hue_index() == 2
    assert OkLCh.hue_index() == 2
    assert Okhsl.hue_index() == 0
    assert RGB((1, 0, 0)).hue is None
    assert OkLCh((0.5, 0.1, 200)).hue == 200


def test_channel_types():
    assert [c.channel_type for c in LCh.channels] == [
        ChannelType.LIGHTNESS, ChannelType.CHROMA, ChannelType.HUE,
    ]
    assert OkLab.channel_info("a").channel_type == ChannelType.NONE
    assert Okhsv.channel_info("hue").is_hue


def test_display_units():
    assert RGB((1.0, 0.5, 0.0)).transformed() == pytest.approx((255.0, 127.5, 0.0))
    assert OkLCh((0.5, 0.1, 120)).transformed() == pytest.approx((50.0, 10.0, 120.0))
    assert Okhsl((200, 0.25, 0.75)).transformed() == pytest.approx((200.0, 25.0, 75.0))
    assert HSL((200, 25, 75)).transformed() == pytest.approx((200.0, 25.0, 75.0))


def test_from_display_units():
    assert OkLab.transformed_to_raw((50.0, -10.0, 20.0)) == pytest.approx((0.5, -0.1, 0.2))
    assert RGB.from_transformed((255.0, 0.0, 51.0)).values == pytest.approx((1.0, 0.0, 0.2))


def test_rgb_helpers():
    red = RGB.from_hex("#ff0000")
    assert red == RGB((1.0, 0.0, 0.0))
    assert RGB.from_hex("nope") is None
    assert RGB.from_int(64, 64, 64).hex == "#404040"
    assert RGB((1.2, 0.5, -0.1)).int_normalized() == (255, 128, 0)
    assert RGB((1.2, 0.5, -0.1)).out_of_gamut_distance() == pytest.approx(0.2)
    assert not RGB((1.2, 0.5, -0.1)).in_gamut()
    assert RGB((1.0, 0.5, 0.0)).in_gamut()


def test_convert_method():
    hsl = RGB((1.0, 0.0, 0.0)).convert(ColorKind.HSL)
    assert isinstance(hsl, HSL)
    assert hsl.values == pytest.approx((0.0, 100.0, 50.0))

    gray = RGB((0.5, 0.5, 0.5)).convert(ColorKind.OKLCH, 42.0)
    assert gray.hue == 42.0

    value = HSV((10, 20, 30))
    assert value.convert(ColorKind.HSV) is value
