from tincture.conversions import hsl_to_unit_rgb, unit_rgb_to_hsl
from tincture.conversions.to_hsl import min_max_index
from tests.samples import samples_rgb_hsl

TOL = 1 / 255


def test_unit_rgb_to_hsl_samples():
    for rgb, expected in samples_rgb_hsl.items():
        h, s, l = unit_rgb_to_hsl(*(v / 255 for v in rgb))
        eh, es, el = expected
        assert abs(h - eh) < 0.01, f"{rgb}: hue {h} != {eh}"
        assert abs(s - es) < TOL, f"{rgb}: saturation {s} != {es}"
        assert abs(l - el) < TOL, f"{rgb}: lightness {l} != {el}"


def test_grayscale_has_zero_hue_and_saturation():
    for v in (0.0, 0.25, 0.5, 1.0):
        h, s, l = unit_rgb_to_hsl(v, v, v)
        assert h == 0.0
        assert s == 0.0
        assert l == v


def test_hue_is_in_range():
    for rgb in [(1.0, 0.0, 0.01), (1.0, 0.01, 0.0), (0.2, 0.9, 0.9), (0.5, 0.1, 0.9)]:
        h, _, _ = unit_rgb_to_hsl(*rgb)
        assert 0.0 <= h < 360.0


def test_bright_saturation_uses_max_plus_min():
    # l > 0.5: delta / (2 - max - min)
    h, s, l = unit_rgb_to_hsl(1.0, 0.6, 0.6)
    assert abs(l - 0.8) < 1e-12
    assert abs(s - 1.0) < 1e-9


def test_min_max_index_first_max_wins():
    assert min_max_index(1.0, 1.0, 0.0) == (0.0, 1.0, 0)
    assert min_max_index(0.0, 1.0, 1.0) == (0.0, 1.0, 1)
    assert min_max_index(0.1, 0.2, 0.3) == (0.1, 0.3, 2)


def test_hsl_to_unit_rgb_samples():
    for rgb, hsl in samples_rgb_hsl.items():
        r, g, b = hsl_to_unit_rgb(*hsl)
        for got, want in zip((r, g, b), rgb):
            assert abs(got * 255 - want) <= 1.0, f"{hsl} -> {(r, g, b)} != {rgb}"


def test_hsl_to_unit_rgb_wraps_hue():
    assert hsl_to_unit_rgb(360.0, 1.0, 0.5) == hsl_to_unit_rgb(0.0, 1.0, 0.5)
    r, g, b = hsl_to_unit_rgb(-120.0, 1.0, 0.5)
    assert (round(r, 9), round(g, 9), round(b, 9)) == (0.0, 0.0, 1.0)
