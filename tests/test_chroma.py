"""Chroma color object tests"""
import pytest
from pydantic import ValidationError

from chroma_convert import RGBA, Chroma, HexColor, InvalidHexColor


class TestConstruction:
    def test_from_string(self):
        assert Chroma("red").rgba == RGBA(r=255, g=0, b=0, alpha=1)

    def test_from_rgba(self):
        rgba = RGBA(r=1, g=2, b=3)
        assert Chroma(rgba).rgba is rgba

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            Chroma(42)

    def test_equality(self):
        assert Chroma("red") == Chroma("#ff0000")
        assert Chroma("red") != Chroma("blue")
        assert len({Chroma("red"), Chroma("#f00")}) == 1

    def test_repr(self):
        assert repr(Chroma("rgba(1, 2, 3, 0.5)")) == "Chroma(r=1, g=2, b=3, alpha=0.5)"

    def test_records_are_frozen(self):
        with pytest.raises(ValidationError):
            Chroma("red").rgba.r = 0


class TestViews:
    """derived representations"""

    def test_to_hex(self):
        h = Chroma("rgb(255, 0, 0)").to_hex()
        assert isinstance(h, HexColor)
        assert h == "#ff0000"

    def test_to_hex_keeps_alpha(self):
        assert Chroma("rgba(255, 0, 0, 0.5)").to_hex() == "#ff000080"

    def test_to_hsl(self):
        hsl = Chroma("hsl(120, 100%, 50%)").to_hsl()
        assert (hsl.h, hsl.s, hsl.l) == pytest.approx((120, 1, 0.5))
        assert hsl.alpha is None

    def test_to_hsv(self):
        hsv = Chroma("blue").to_hsv()
        assert (hsv.h, hsv.s, hsv.v) == pytest.approx((240, 1, 1))
        assert hsv.alpha == 1

    def test_to_xyz_black(self):
        xyz = Chroma("black").to_xyz()
        assert (xyz.x, xyz.y, xyz.z) == (0, 0, 0)

    def test_to_lab_white(self):
        lab = Chroma("#fff").to_lab()
        assert lab.l == pytest.approx(100, abs=1e-2)
        assert lab.a == pytest.approx(0, abs=1e-2)
        assert lab.b == pytest.approx(0, abs=1e-2)

    def test_views_carry_alpha(self):
        color = Chroma("rgba(10, 20, 30, 0.4)")
        assert color.to_xyz().alpha == 0.4
        assert color.to_lab().alpha == 0.4
        assert color.to_hsl().alpha == 0.4


class TestStaticHelpers:
    def test_is_valid_hex_color(self):
        assert Chroma.is_valid_hex_color("#fff")
        assert not Chroma.is_valid_hex_color("#ffff1")

    def test_as_hex_color(self):
        assert Chroma.as_hex_color("#fff") == "#fff"
        with pytest.raises(InvalidHexColor):
            Chroma.as_hex_color("fff")

    def test_parse_color(self):
        assert Chroma.parse_color("blue") == RGBA(r=0, g=0, b=255, alpha=1)
