import copy
import math
import pickle

import pytest

from tincture.colors import CMYK, HSL, HSV, RGB, XYZ, from_dict, get_color_class
from tincture.errors import InvariantViolation, UnsupportedColorSpaceError
from tincture.types import ColorSpace
from tests.samples import samples_rgb_cmyk, samples_rgb_hsl, samples_rgb_hsv


def test_class_conversion_rgb_to_hsl():
    for rgb, hsl_expected in samples_rgb_hsl.items():
        hsl = RGB(*rgb).convert("hsl")
        assert isinstance(hsl, HSL)
        h, s, l = hsl.value
        h_exp, s_exp, l_exp = hsl_expected
        assert abs(h - h_exp) < 0.01
        assert abs(s - s_exp) < 1/255
        assert abs(l - l_exp) < 1/255


def test_class_conversion_rgb_to_hsv():
    for rgb, hsv_expected in samples_rgb_hsv.items():
        hsv = RGB(*rgb).convert(ColorSpace.HSV)
        assert isinstance(hsv, HSV)
        h, s, v = hsv.value
        h_exp, s_exp, v_exp = hsv_expected
        assert abs(h - h_exp) < 0.01
        assert abs(s - s_exp) < 1/255
        assert abs(v - v_exp) < 1/255


def test_class_conversion_rgb_to_cmyk():
    for rgb, cmyk_expected in samples_rgb_cmyk.items():
        cmyk = RGB(*rgb).convert("CMYK")
        assert cmyk == CMYK(*cmyk_expected)
        assert cmyk.to_rgb() == RGB(*rgb)


def test_hue_spaces_back_to_rgb():
    exact = {
        (255, 0, 0): (0.0, 1.0, 0.5),
        (0, 255, 0): (120.0, 1.0, 0.5),
        (255, 255, 0): (60.0, 1.0, 0.5),
        (128, 128, 128): (0.0, 0.0, 128 / 255),
        (128, 0, 0): (0.0, 1.0, 64 / 255),
        (255, 128, 0): (60 * 128 / 255, 1.0, 0.5),
    }
    for rgb, hsl in exact.items():
        assert HSL(*hsl).to_rgb() == RGB(*rgb)


def test_conversion_between_non_rgb_spaces():
    assert HSL(120.0, 1.0, 0.5).convert("cmyk") == CMYK(255, 0, 255, 0)
    assert CMYK(0, 255, 255, 0).convert("hsv") == HSV(0.0, 1.0, 1.0)
    assert HSV(240.0, 1.0, 1.0).convert("hsl") == HSL(240.0, 1.0, 0.5)


def test_convert_to_own_space_is_identity():
    color = HSL(200.0, 0.3, 0.7)
    assert color.convert("hsl") is color
    assert color.convert() is color


def test_unknown_space():
    with pytest.raises(UnsupportedColorSpaceError):
        RGB(1, 2, 3).convert("lab")
    with pytest.raises(UnsupportedColorSpaceError):
        get_color_class("rgba")


def test_named_colors():
    gray = RGB.from_hex_code("#808080")
    assert gray.convert("cmyk") == CMYK(0, 0, 0, 127)
    h, s, l = gray.convert("hsl").value
    assert (h, s) == (0.0, 0.0)
    assert abs(l - 0.5) < 1/255

    assert RGB(0, 0, 0).convert("cmyk") == CMYK(0, 0, 0, 255)
    assert RGB(255, 255, 255).convert("hsv") == HSV(0.0, 0.0, 1.0)


def test_normalization_on_construction():
    assert RGB(300, -5, 12).value == (255, 0, 12)
    assert CMYK(256, 0, -1, 128).value == (255, 0, 0, 128)
    assert HSL(370.0, 1.5, -0.2).value == pytest.approx((10.0, 1.0, 0.0))
    assert HSV(-30.0, 0.5, 0.5).hue == pytest.approx(330.0)
    assert XYZ(2.0, -1.0, 0.5).value == (1.0, 0.0, 0.5)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_hue_is_rejected(bad):
    with pytest.raises(InvariantViolation):
        HSL(bad, 0.5, 0.5)
    with pytest.raises(InvariantViolation):
        HSV(0.0, 0.5, 0.5).with_hue(bad)


def test_nan_components_are_rejected():
    with pytest.raises(InvariantViolation):
        HSL(10.0, math.nan, 0.5)
    with pytest.raises(InvariantViolation):
        HSL(10.0, 0.5, 0.5).with_saturation(math.nan)
    with pytest.raises(InvariantViolation):
        HSV(10.0, 0.5, math.nan)
    with pytest.raises(InvariantViolation):
        XYZ(math.nan, 0.5, 0.5)
    # infinities still clamp
    assert HSV(10.0, math.inf, -math.inf).value == (10.0, 1.0, 0.0)


def test_wrong_component_count():
    with pytest.raises(TypeError):
        RGB(1, 2)
    with pytest.raises(TypeError):
        RGB.from_octets((1, 2, 3, 4))


def test_immutability():
    red = RGB(255, 0, 0)
    with pytest.raises(AttributeError):
        red.r = 10
    with pytest.raises(AttributeError):
        red._value = (0, 0, 0)
    with pytest.raises(AttributeError):
        HSL(0.0, 1.0, 0.5).extra = 1


def test_with_setters():
    red = RGB(255, 0, 0)
    assert red.with_green(128) == RGB(255, 128, 0)
    assert red.with_blue(999) == RGB(255, 0, 255)
    assert red == RGB(255, 0, 0)

    hsl = HSL(10.0, 0.5, 0.5)
    assert hsl.with_hue(370.0).hue == pytest.approx(10.0)
    assert hsl.with_hue(-30.0).hue == pytest.approx(330.0)
    assert hsl.with_saturation(1.5).saturation == 1.0
    assert hsl.with_lightness(-0.2).lightness == 0.0

    assert HSV(0.0, 0.0, 0.0).with_value(0.25).v == 0.25
    assert CMYK(0, 0, 0, 0).with_key(300).key == 255
    assert XYZ(0.1, 0.2, 0.3).with_z(0.9).value == (0.1, 0.2, 0.9)


def test_with_setters_are_idempotent():
    hsl = HSL(10.0, 0.5, 0.5)
    assert hsl.with_saturation(0.5) == hsl
    assert hsl.with_saturation(0.8).with_saturation(0.8) == hsl.with_saturation(0.8)
    rgb = RGB(1, 2, 3)
    assert rgb.with_red(1) == rgb
    assert rgb.with_red(300).with_red(300) == rgb.with_red(300)


def test_component_aliases():
    rgb = RGB(1, 2, 3)
    assert (rgb.r, rgb.g, rgb.b) == (rgb.red, rgb.green, rgb.blue) == (1, 2, 3)
    cmyk = CMYK(4, 5, 6, 7)
    assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (4, 5, 6, 7)
    hsl = HSL(90.0, 0.25, 0.75)
    assert (hsl.h, hsl.s, hsl.l) == (90.0, 0.25, 0.75)
    assert hsl.has_hue
    assert HSV(0.0, 0.0, 0.0).has_hue
    assert not rgb.has_hue
    assert not cmyk.has_hue
    assert not XYZ(0.0, 0.0, 0.0).has_hue


def test_cmyk_is_not_bijective():
    # every CMYK with full key is black
    for cmyk in (CMYK(0, 0, 0, 255), CMYK(100, 0, 0, 255), CMYK(255, 255, 255, 255)):
        assert cmyk.to_rgb() == RGB(0, 0, 0)
        assert cmyk.to_rgb().convert("cmyk") == CMYK(0, 0, 0, 255)


def test_equality_and_hashing():
    assert RGB(1, 2, 3) == RGB(1, 2, 3)
    assert RGB(1, 2, 3) != RGB(1, 2, 4)
    assert RGB(0, 0, 0) != HSL(0.0, 0.0, 0.0)
    assert len({RGB(1, 2, 3), RGB(1, 2, 3), RGB(3, 2, 1)}) == 2
    assert hash(HSV(1.0, 0.5, 0.5)) == hash(HSV(361.0, 0.5, 0.5))


def test_ordering():
    assert RGB(0, 0, 1) < RGB(0, 1, 0) < RGB(1, 0, 0)
    assert sorted([RGB(2, 0, 0), RGB(1, 9, 9)]) == [RGB(1, 9, 9), RGB(2, 0, 0)]
    with pytest.raises(TypeError):
        RGB(0, 0, 0) < CMYK(0, 0, 0, 0)


def test_repr():
    assert repr(RGB(255, 0, 0)) == "RGB(r=255, g=0, b=0)"
    assert repr(HSL(120.0, 1.0, 0.5)) == "HSL(h=120.0, s=1.0, l=0.5)"


def test_hex_encodings():
    orange = RGB(255, 136, 0)
    assert orange.hex() == 0xFF8800
    assert orange.hex_code() == "#ff8800"
    assert orange.hex_code(upper=True) == "#FF8800"
    assert f"{orange:x}" == "#ff8800"
    assert f"{orange:X}" == "#FF8800"
    assert RGB.from_hex(0xFF8800) == orange
    assert RGB.from_hex(0x12FF8800) == orange
    assert RGB.from_hex_code("#f80") == orange

    cmyk = CMYK(1, 2, 3, 4)
    assert cmyk.hex() == 0x01020304
    assert cmyk.hex_code() == "#01020304"
    assert CMYK.from_hex(0x01020304) == cmyk


def test_ratio_accessors():
    rgb = RGB(255, 0, 51)
    assert rgb.ratios() == (1.0, 0.0, 0.2)
    assert rgb.to_floats() == (1.0, 0.0, 0.2)
    assert rgb.to_floats4() == (1.0, 0.0, 0.2, 0.0)
    assert RGB.from_ratios((1.0, 0.0, 0.2)) == rgb
    assert RGB.from_ratios((1.5, -0.5, 0.5)) == RGB(255, 0, 128)


def test_serialization():
    colors = [RGB(1, 2, 3), CMYK(4, 5, 6, 7), HSL(90.0, 0.25, 0.75), HSV(180.0, 0.5, 0.5), XYZ(0.1, 0.2, 0.3)]
    for color in colors:
        data = color.as_dict()
        assert data["space"] == color.mode.value
        assert from_dict(data) == color
        assert pickle.loads(pickle.dumps(color)) == color
        assert copy.deepcopy(color) == color

    assert RGB(1, 2, 3).as_dict() == {"space": "rgb", "r": 1, "g": 2, "b": 3}
    assert HSV(180.0, 0.5, 0.5).as_dict() == {"space": "hsv", "h": 180.0, "s": 0.5, "v": 0.5}


def test_xyz_of_white_is_clamped():
    xyz = XYZ.from_rgb(RGB(255, 255, 255))
    assert xyz.value == pytest.approx((0.95047, 1.0, 1.0), abs=1e-4)


def test_xyz_out_of_gamut_lands_on_boundary():
    assert XYZ(1.0, 0.0, 0.0).to_rgb() == RGB(255, 0, 14)
    assert XYZ(0.0, 1.0, 0.0).to_rgb() == RGB(0, 255, 0)
