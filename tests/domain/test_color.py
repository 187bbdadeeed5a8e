"""color.py のテスト。"""

import pytest

from blurhash_algebra.domain.color import (
    RGB,
    WHITE,
    ZERO,
    LinearRGB,
    brightness,
    brightness_exponent,
    chroma_uv,
    is_dark,
    linear_to_rgb,
    linear_to_srgb,
    linear_to_srgb8,
    luminance,
    rgb_to_linear,
    srgb_to_linear,
)


class TestRGB:
    def test_to_tuple(self) -> None:
        assert RGB(10, 20, 30).to_tuple() == (10, 20, 30)

    def test_to_hex(self) -> None:
        assert RGB(255, 0, 16).to_hex() == "#ff0010"


class TestLinearRGB:
    def test_add_sub(self) -> None:
        a = LinearRGB(0.5, 0.25, 1.0)
        b = LinearRGB(0.25, 0.5, -1.0)
        assert a + b == LinearRGB(0.75, 0.75, 0.0)
        assert a - b == LinearRGB(0.25, -0.25, 2.0)

    def test_scalar_mul_both_sides(self) -> None:
        c = LinearRGB(1.0, -2.0, 0.5)
        assert c * 2 == LinearRGB(2.0, -4.0, 1.0)
        assert 2 * c == c * 2

    def test_div_and_neg(self) -> None:
        c = LinearRGB(1.0, -2.0, 0.5)
        assert c / 2 == LinearRGB(0.5, -1.0, 0.25)
        assert -c == LinearRGB(-1.0, 2.0, -0.5)

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ZERO.r = 1.0  # type: ignore[misc]


class TestSrgbConversion:
    def test_roundtrip_dense(self) -> None:
        """[0,1] を細かく走査して sRGB→linear→sRGB が元に戻る。"""
        for k in range(1001):
            v = k / 1000
            assert linear_to_srgb(srgb_to_linear(v)) == pytest.approx(v, abs=1e-9)

    def test_linear_segment(self) -> None:
        # 0.04045 以下は線形区間
        assert srgb_to_linear(0.04) == pytest.approx(0.04 / 12.92)
        assert linear_to_srgb(0.003) == pytest.approx(0.003 * 12.92)

    def test_linear_to_srgb_clamps(self) -> None:
        assert linear_to_srgb(-0.5) == 0.0
        assert linear_to_srgb(1.5) == pytest.approx(1.0)

    def test_linear_to_srgb8(self) -> None:
        assert linear_to_srgb8(0.0) == 0
        assert linear_to_srgb8(1.0) == 255
        assert linear_to_srgb8(2.0) == 255
        assert linear_to_srgb8(-1.0) == 0

    def test_rgb_roundtrip(self) -> None:
        for color in [RGB(0, 0, 0), RGB(255, 255, 255), RGB(128, 64, 200), RGB(1, 254, 37)]:
            assert linear_to_rgb(rgb_to_linear(color)) == color

    def test_midgray(self) -> None:
        """sRGB 128 → リニア ≈ 0.216。"""
        assert rgb_to_linear(RGB(128, 128, 128)).r == pytest.approx(0.216, abs=0.002)


class TestLuminance:
    def test_pure_red(self) -> None:
        assert luminance(LinearRGB(1.0, 0.0, 0.0)) == pytest.approx(0.299)

    def test_white_is_one(self) -> None:
        assert luminance(WHITE) == pytest.approx(1.0)

    def test_is_dark_threshold(self) -> None:
        assert is_dark(LinearRGB(0.2, 0.2, 0.2))
        assert not is_dark(LinearRGB(0.4, 0.4, 0.4))
        assert not is_dark(LinearRGB(0.2, 0.2, 0.2), threshold=0.1)


class TestBrightness:
    def test_midpoint_maps_to_half(self) -> None:
        gray = LinearRGB(0.3, 0.3, 0.3)
        assert brightness(gray) == pytest.approx(0.5)

    def test_custom_midpoint(self) -> None:
        gray = LinearRGB(0.18, 0.18, 0.18)
        assert brightness(gray, midpoint=0.18) == pytest.approx(0.5)

    def test_extremes(self) -> None:
        assert brightness(ZERO) == 0.0
        assert brightness(WHITE) == pytest.approx(1.0)

    def test_negative_luminance_floors_at_zero(self) -> None:
        assert brightness(LinearRGB(-0.2, -0.1, 0.0)) == 0.0

    def test_exponent(self) -> None:
        assert brightness_exponent(0.5) == pytest.approx(1.0)
        assert brightness_exponent(0.25) == pytest.approx(2.0)

    @pytest.mark.parametrize("midpoint", [0.0, 1.0, -0.3, 1.5])
    def test_invalid_midpoint(self, midpoint: float) -> None:
        with pytest.raises(ValueError):
            brightness_exponent(midpoint)


class TestChromaUV:
    def test_gray_is_origin(self) -> None:
        u, v = chroma_uv(LinearRGB(0.4, 0.4, 0.4))
        assert u == pytest.approx(0.0)
        assert v == pytest.approx(0.0)

    def test_red(self) -> None:
        assert chroma_uv(LinearRGB(1.0, 0.0, 0.0)) == (1.0, 0.0)
