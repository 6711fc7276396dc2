# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for colorimetric primitives (gamma, luminance, XYZ/Lab, HSV/HSL)."""

import numpy as np
import pytest

from pigment.convert.colorspace import (
    CIE_EPSILON,
    CIE_KAPPA,
    gamma_compress,
    gamma_expand,
    hsl_to_hsv,
    hsl_to_rgb,
    hsv_to_hsl,
    hsv_to_rgb,
    lab_relative_luminance,
    lab_to_xyz,
    linear_rgb_to_xyz,
    luminance,
    quantize,
    rgb_to_hsl,
    rgb_to_hsv,
    to_unit,
    xyz_to_lab,
    xyz_to_linear_rgb,
)
from pigment.schema import D65_WHITE

D50_WHITE = (0.96422, 1.0, 0.82521)


class TestGammaRoundtrip:
    """expand(compress(x)) must recover x across both curve segments."""

    @pytest.mark.parametrize("x", [
        0.0,
        0.0031308 - 1e-9,
        0.0031308,
        0.0031308 + 1e-9,
        0.04045 - 1e-9,
        0.04045 + 1e-9,
        0.5,
        1.0,
    ])
    def test_roundtrip(self, x):
        assert float(gamma_expand(gamma_compress(x))) == pytest.approx(x, abs=1e-7)

    def test_compress_linear_segment(self):
        assert float(gamma_compress(0.002)) == pytest.approx(0.002 * 12.92, abs=1e-12)

    def test_expand_linear_segment(self):
        assert float(gamma_expand(0.03)) == pytest.approx(0.03 / 12.92, abs=1e-12)

    def test_extremes_fixed(self):
        assert float(gamma_compress(1.0)) == pytest.approx(1.0, abs=1e-12)
        assert float(gamma_expand(1.0)) == pytest.approx(1.0, abs=1e-12)
        assert float(gamma_compress(0.0)) == 0.0

    def test_mid_gray(self):
        assert float(gamma_expand(0.5)) == pytest.approx(0.21404, abs=1e-5)

    def test_out_of_range_not_clipped(self):
        assert float(gamma_compress(-0.1)) == pytest.approx(-1.292)
        assert float(gamma_expand(1.2)) > 1.0

    def test_batch(self):
        x = np.random.RandomState(42).random((100, 3))
        np.testing.assert_allclose(gamma_expand(gamma_compress(x)), x, atol=1e-10)


class TestSampleDomains:
    """Integer ↔ unit scaling."""

    def test_to_unit(self):
        np.testing.assert_allclose(to_unit([0, 51, 255], 255), [0.0, 0.2, 1.0])

    def test_quantize_rounds_half_up(self):
        assert quantize(0.5, 255) == 128
        assert quantize(0.25, 255) == 64

    def test_quantize_clamps(self):
        assert quantize([-0.5, 1.5, 1.0], 255) == [0, 255, 255]

    def test_quantize_just_below_one(self):
        assert quantize(1.0 - 1e-16, 255) == 255

    def test_quantize_returns_python_ints(self):
        assert isinstance(quantize(0.3, 65535), int)


class TestLuminance:
    """Rec. 709 weights in any sample domain."""

    def test_white_unit(self):
        assert float(luminance([1.0, 1.0, 1.0])) == pytest.approx(1.0)

    def test_white_8bit(self):
        assert float(luminance([255, 255, 255])) == pytest.approx(255.0)

    def test_weights(self):
        assert float(luminance([1.0, 0.0, 0.0])) == pytest.approx(0.2126)
        assert float(luminance([0.0, 1.0, 0.0])) == pytest.approx(0.7152)
        assert float(luminance([0.0, 0.0, 1.0])) == pytest.approx(0.0722)


class TestXYZ:
    """Linear RGB ↔ XYZ with the sRGB/D65 matrix."""

    def test_white_is_d65(self):
        np.testing.assert_allclose(linear_rgb_to_xyz([1.0, 1.0, 1.0]), D65_WHITE, atol=1e-6)

    def test_red_primary(self):
        np.testing.assert_allclose(
            linear_rgb_to_xyz([1.0, 0.0, 0.0]), [0.4124564, 0.2126729, 0.0193339], atol=1e-12
        )

    def test_roundtrip(self):
        rgb = np.random.RandomState(7).random((50, 3))
        np.testing.assert_allclose(xyz_to_linear_rgb(linear_rgb_to_xyz(rgb)), rgb, atol=1e-10)

    def test_out_of_gamut_not_clipped(self):
        rgb = xyz_to_linear_rgb([0.1, 0.5, 0.1])
        assert rgb.min() < 0.0


class TestLab:
    """XYZ ↔ L*a*b* relative to a reference white."""

    def test_white_is_l100(self):
        np.testing.assert_allclose(xyz_to_lab(D65_WHITE), [100.0, 0.0, 0.0], atol=1e-10)

    def test_white_relative_to_own_white(self):
        np.testing.assert_allclose(xyz_to_lab(D50_WHITE, D50_WHITE), [100.0, 0.0, 0.0], atol=1e-10)

    def test_black_is_l0(self):
        np.testing.assert_allclose(xyz_to_lab([0.0, 0.0, 0.0]), [0.0, 0.0, 0.0], atol=1e-10)

    def test_linear_segment(self):
        # Y below epsilon uses kappa * t instead of the cube root
        t = CIE_EPSILON / 2
        lab = xyz_to_lab([t * D65_WHITE[0], t, t * D65_WHITE[2]])
        assert lab[0] == pytest.approx(CIE_KAPPA * t, abs=1e-9)

    def test_roundtrip_above_and_below_epsilon(self):
        xyz = np.array([
            [0.4124564, 0.2126729, 0.0193339],
            [0.002, 0.003, 0.004],
            [0.5, 0.5, 0.5],
        ])
        np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz)), xyz, atol=1e-6)

    def test_roundtrip_other_white(self):
        xyz = np.array([0.3, 0.4, 0.2])
        np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz, D50_WHITE), D50_WHITE), xyz, atol=1e-6)

    def test_relative_luminance(self):
        assert float(lab_relative_luminance(100.0)) == pytest.approx(1.0)
        assert float(lab_relative_luminance(0.0)) == 0.0
        assert float(lab_relative_luminance(4.0)) == pytest.approx(4.0 / CIE_KAPPA)


class TestHSV:
    """Hue-sector decomposition over linear RGB."""

    def test_pure_red(self):
        np.testing.assert_allclose(rgb_to_hsv([1.0, 0.0, 0.0]), [0.0, 1.0, 1.0])

    @pytest.mark.parametrize("hue,rgb", [
        (0.0, [1.0, 0.0, 0.0]),
        (60.0, [1.0, 1.0, 0.0]),
        (120.0, [0.0, 1.0, 0.0]),
        (180.0, [0.0, 1.0, 1.0]),
        (240.0, [0.0, 0.0, 1.0]),
        (300.0, [1.0, 0.0, 1.0]),
    ])
    def test_sector_boundaries(self, hue, rgb):
        np.testing.assert_allclose(hsv_to_rgb([hue, 1.0, 1.0]), rgb, atol=1e-12)
        np.testing.assert_allclose(rgb_to_hsv(rgb), [hue, 1.0, 1.0], atol=1e-12)

    def test_hue_wrap(self):
        np.testing.assert_array_equal(hsv_to_rgb([360.0, 0.7, 0.6]), hsv_to_rgb([0.0, 0.7, 0.6]))

    def test_negative_hue_wraps(self):
        np.testing.assert_allclose(hsv_to_rgb([-60.0, 1.0, 1.0]), hsv_to_rgb([300.0, 1.0, 1.0]))

    def test_hue_in_range_when_blue_exceeds_green(self):
        hsv = rgb_to_hsv([1.0, 0.0, 0.5])
        assert hsv[0] == pytest.approx(330.0)

    def test_black_has_zero_saturation(self):
        np.testing.assert_array_equal(rgb_to_hsv([0.0, 0.0, 0.0]), [0.0, 0.0, 0.0])

    def test_gray_has_zero_saturation(self):
        h, s, v = rgb_to_hsv([0.4, 0.4, 0.4])
        assert (h, s) == (0.0, 0.0)
        assert v == pytest.approx(0.4)

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(3).random((100, 3))
        np.testing.assert_allclose(hsv_to_rgb(rgb_to_hsv(rgb)), rgb, atol=1e-10)


class TestHSL:
    """HSL decomposition and HSV ↔ HSL."""

    def test_pure_red(self):
        np.testing.assert_allclose(rgb_to_hsl([1.0, 0.0, 0.0]), [0.0, 1.0, 0.5])

    def test_hue_wrap(self):
        np.testing.assert_array_equal(hsl_to_rgb([360.0, 0.5, 0.4]), hsl_to_rgb([0.0, 0.5, 0.4]))

    @pytest.mark.parametrize("rgb", [[0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [0.3, 0.3, 0.3]])
    def test_extremes_have_zero_saturation(self, rgb):
        h, s, lightness = rgb_to_hsl(rgb)
        assert s == 0.0
        assert lightness == pytest.approx(rgb[0])

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(5).random((100, 3))
        np.testing.assert_allclose(hsl_to_rgb(rgb_to_hsl(rgb)), rgb, atol=1e-10)

    def test_hsv_to_hsl_red(self):
        np.testing.assert_allclose(hsv_to_hsl([0.0, 1.0, 1.0]), [0.0, 1.0, 0.5])

    def test_hsv_to_hsl_extremes(self):
        np.testing.assert_array_equal(hsv_to_hsl([10.0, 0.5, 0.0]), [10.0, 0.0, 0.0])
        np.testing.assert_array_equal(hsv_to_hsl([10.0, 0.0, 1.0]), [10.0, 0.0, 1.0])

    def test_hsl_to_hsv_extremes(self):
        np.testing.assert_array_equal(hsl_to_hsv([10.0, 0.5, 0.0]), [10.0, 0.0, 0.0])
        np.testing.assert_array_equal(hsl_to_hsv([10.0, 0.5, 1.0]), [10.0, 0.0, 1.0])

    def test_hsv_hsl_agree_with_rgb_path(self):
        rgb = np.random.RandomState(11).random((50, 3))
        np.testing.assert_allclose(hsv_to_hsl(rgb_to_hsv(rgb)), rgb_to_hsl(rgb), atol=1e-10)
        np.testing.assert_allclose(hsl_to_hsv(rgb_to_hsl(rgb)), rgb_to_hsv(rgb), atol=1e-10)
