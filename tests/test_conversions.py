"""conversions tests"""
import math

import pytest

from chroma_convert import RGBA, XYZ
from chroma_convert.conversions import (
    LAB_EPSILON,
    SRGB_LINEAR_THRESHOLD,
    _lab_f,
    _srgb_to_linear,
    hsl_to_rgb,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_lab,
)


def _rgb(c):
    return (c.r, c.g, c.b)


class TestHslToRgb:
    """hue-sector HSL -> RGB"""

    def test_black(self):
        assert hsl_to_rgb(0, 0, 0) == RGBA(r=0, g=0, b=0, alpha=None)

    def test_red(self):
        assert _rgb(hsl_to_rgb(0, 1, 0.5)) == (255, 0, 0)

    @pytest.mark.parametrize("h, expected", [
        (60, (255, 255, 0)),
        (120, (0, 255, 0)),
        (180, (0, 255, 255)),
        (240, (0, 0, 255)),
        (300, (255, 0, 255)),
    ])
    def test_sector_boundaries(self, h, expected):
        assert _rgb(hsl_to_rgb(h, 1, 0.5)) == expected

    def test_mid_sector(self):
        # h=30: r=c, g=c/2
        assert _rgb(hsl_to_rgb(30, 1, 0.5)) == (255, 128, 0)

    def test_white(self):
        assert _rgb(hsl_to_rgb(0, 0, 1)) == (255, 255, 255)

    def test_gray_rounds_half_up(self):
        assert _rgb(hsl_to_rgb(0, 0, 0.5)) == (128, 128, 128)

    def test_alpha_passes_through(self):
        assert hsl_to_rgb(0, 1, 0.5, 0.3).alpha == 0.3
        assert hsl_to_rgb(0, 1, 0.5).alpha is None

    def test_hue_360_is_not_wrapped(self):
        assert _rgb(hsl_to_rgb(360, 1, 0.5)) == (0, 0, 0)

    def test_out_of_range_hue_keeps_lightness_offset(self):
        # c = 0.5, m = 0.5: only the offset survives
        assert _rgb(hsl_to_rgb(400, 1, 0.75)) == (128, 128, 128)

    def test_negative_hue_is_not_wrapped(self):
        assert _rgb(hsl_to_rgb(-30, 1, 0.5)) == (0, 0, 0)

    def test_out_of_range_saturation_is_not_clamped(self):
        c = hsl_to_rgb(0, 2, 0.5)
        assert c.r > 255
        assert c.g < 0


class TestRgbToXyz:
    """sRGB -> XYZ (D65)"""

    def test_black_is_origin(self):
        assert rgb_to_xyz(0, 0, 0) == XYZ(x=0, y=0, z=0)

    def test_white_is_reference_white(self):
        xyz = rgb_to_xyz(255, 255, 255)
        assert xyz.x == pytest.approx(95.047, abs=1e-3)
        assert xyz.y == pytest.approx(100.0, abs=1e-3)
        assert xyz.z == pytest.approx(108.883, abs=1e-3)

    def test_red_is_first_matrix_column(self):
        xyz = rgb_to_xyz(255, 0, 0)
        assert xyz.x == pytest.approx(41.24564)
        assert xyz.y == pytest.approx(21.26729)
        assert xyz.z == pytest.approx(1.93339)

    def test_dark_channel_uses_linear_segment(self):
        # 10/255 is below 0.04045
        assert rgb_to_xyz(10, 10, 10).y == pytest.approx(10 / 255 / 12.92 * 100, rel=1e-6)

    def test_negative_input_does_not_raise(self):
        assert rgb_to_xyz(-10, 0, 0).x < 0

    def test_threshold_takes_gamma_branch(self):
        v = SRGB_LINEAR_THRESHOLD
        assert _srgb_to_linear(v) == ((v + 0.055) / 1.055) ** 2.4

    def test_just_below_threshold_is_linear(self):
        v = math.nextafter(SRGB_LINEAR_THRESHOLD, 0)
        assert _srgb_to_linear(v) == v / 12.92

    def test_channel_too_large_for_float_saturates(self):
        xyz = rgb_to_xyz(10 ** 400, 0, 0)
        assert math.isinf(xyz.x)
        assert math.isinf(xyz.y)

    def test_gamma_overflow_saturates(self):
        assert math.isinf(rgb_to_xyz(1e300, 0, 0).z)


class TestXyzToLab:
    """XYZ -> CIE Lab"""

    def test_white(self):
        lab = xyz_to_lab(**rgb_to_xyz(255, 255, 255).model_dump(exclude={"alpha"}))
        assert lab.l == pytest.approx(100, abs=1e-2)
        assert lab.a == pytest.approx(0, abs=1e-2)
        assert lab.b == pytest.approx(0, abs=1e-2)

    def test_black_uses_linear_segment(self):
        lab = xyz_to_lab(0, 0, 0)
        assert lab.l == pytest.approx(0)
        assert lab.a == pytest.approx(0)
        assert lab.b == pytest.approx(0)

    def test_red(self):
        lab = rgb_to_lab(255, 0, 0)
        assert lab.l == pytest.approx(53.24, abs=0.05)
        assert lab.a == pytest.approx(80.09, abs=0.05)
        assert lab.b == pytest.approx(67.20, abs=0.05)

    def test_threshold_takes_cube_root_branch(self):
        assert _lab_f(LAB_EPSILON) == LAB_EPSILON ** (1 / 3)
        assert _lab_f(LAB_EPSILON) != pytest.approx(7.787 * LAB_EPSILON + 16 / 116, abs=1e-6)

    def test_just_below_threshold_is_linear(self):
        t = math.nextafter(LAB_EPSILON, 0)
        assert _lab_f(t) == 7.787 * t + 16 / 116

    def test_input_too_large_for_float_does_not_raise(self):
        lab = xyz_to_lab(10 ** 400, 0, 0)
        assert math.isinf(lab.a)

    def test_rgb_to_lab_composes(self):
        xyz = rgb_to_xyz(30, 144, 255)
        assert rgb_to_lab(30, 144, 255) == xyz_to_lab(xyz.x, xyz.y, xyz.z)


class TestRgbToHsl:
    def test_primaries(self):
        assert rgb_to_hsl(255, 0, 0).model_dump() == {"h": 0, "s": 1, "l": 0.5, "alpha": None}
        assert rgb_to_hsl(0, 255, 0).h == pytest.approx(120)
        assert rgb_to_hsl(0, 0, 255).h == pytest.approx(240)

    def test_magenta_side_hue_is_positive(self):
        assert rgb_to_hsl(255, 0, 128).h == pytest.approx(329.88, abs=0.01)

    def test_achromatic(self):
        hsl = rgb_to_hsl(128, 128, 128)
        assert (hsl.h, hsl.s) == (0, 0)
        assert hsl.l == pytest.approx(128 / 255)

    def test_black_and_white_have_no_saturation(self):
        assert rgb_to_hsl(0, 0, 0).s == 0
        assert rgb_to_hsl(255, 255, 255).s == 0

    def test_inverts_hsl_to_rgb(self):
        hsl = rgb_to_hsl(30, 144, 255, 0.5)
        back = hsl_to_rgb(hsl.h, hsl.s, hsl.l, hsl.alpha)
        assert back == RGBA(r=30, g=144, b=255, alpha=0.5)


class TestRgbToHsv:
    def test_red(self):
        hsv = rgb_to_hsv(255, 0, 0)
        assert (hsv.h, hsv.s, hsv.v) == (0, 1, 1)

    def test_green(self):
        assert rgb_to_hsv(0, 255, 0).h == pytest.approx(120)

    def test_black(self):
        hsv = rgb_to_hsv(0, 0, 0)
        assert (hsv.s, hsv.v) == (0, 0)

    def test_alpha_passes_through(self):
        assert rgb_to_hsv(1, 2, 3, 0.25).alpha == 0.25

    def test_channel_too_large_for_float_does_not_raise(self):
        assert rgb_to_hsv(10 ** 400, 0, 0).v == math.inf
        assert rgb_to_hsl(10 ** 400, 0, 0).l == math.inf
