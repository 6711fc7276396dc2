# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Tests for the conversion engine (routing, dispatch, any-to-any)."""

import itertools
import logging

import numpy as np
import pytest

from pigment import Color, convert
from pigment.convert import engine
from pigment.convert.engine import (
    CANONICAL_HUBS,
    DIRECT_CONVERSIONS,
    MAX_HOPS,
    conversion_path,
    convert_value,
    next_hop,
)
from pigment.schema import (
    FORMAT_CLASSES,
    CieLab,
    CieXyz,
    FormatName,
    Gray8,
    Gray16,
    GrayF,
    Hsl,
    Hsv,
    Rgb,
    Rgb48,
    Rgba,
    Rgba64,
    RgbaF,
    RgbF,
    Srgb,
    SrgbF,
)

F = FormatName

ALL_PAIRS = list(itertools.product(FormatName, FormatName))

SAMPLE_BY_FORMAT = {
    F.GRAY8: Gray8(90),
    F.GRAY16: Gray16(12345),
    F.GRAYF: GrayF(0.42),
    F.RGB: Rgb(200, 30, 90),
    F.SRGB: Srgb(10, 220, 130),
    F.RGB48: Rgb48(60000, 1000, 30000),
    F.RGBA: Rgba(5, 6, 7, 8),
    F.RGBA64: Rgba64(100, 20000, 65535, 32768),
    F.RGBF: RgbF(0.2, 0.7, 0.1),
    F.SRGBF: SrgbF(0.9, 0.5, 0.3),
    F.RGBAF: RgbaF(0.3, 0.3, 0.6, 0.5),
    F.HSV: Hsv(210.0, 0.6, 0.8),
    F.HSL: Hsl(45.0, 0.7, 0.4),
    F.CIEXYZ: CieXyz(0.3, 0.35, 0.2),
    F.CIELAB: CieLab(60.0, 20.0, -30.0),
}


def _channels(color):
    return np.asarray(color.value.channels, dtype=float)


class TestRoutingTables:
    """Shape of DIRECT_CONVERSIONS and CANONICAL_HUBS."""

    def test_every_format_is_a_source(self):
        assert set(DIRECT_CONVERSIONS) == set(FormatName)
        assert set(CANONICAL_HUBS) == set(FormatName)

    def test_no_self_conversions(self):
        for source, targets in DIRECT_CONVERSIONS.items():
            assert source not in targets

    @pytest.mark.parametrize("source", [F.RGB, F.RGBF, F.RGBAF])
    def test_universal_sources(self, source):
        assert set(DIRECT_CONVERSIONS[source]) == set(FormatName) - {source}
        assert CANONICAL_HUBS[source] is None

    def test_next_hop_direct(self):
        assert next_hop(F.CIELAB, F.CIEXYZ) is F.CIEXYZ

    def test_next_hop_canonical(self):
        assert next_hop(F.GRAY8, F.HSV) is F.GRAYF
        assert next_hop(F.HSV, F.GRAY8) is F.RGBF

    def test_next_hop_override(self):
        assert next_hop(F.SRGB, F.GRAY8) is F.GRAYF
        assert next_hop(F.RGB48, F.RGBA) is F.RGBA64


class TestPaths:
    """Every (source, target) pair has a short, acyclic route."""

    @pytest.mark.parametrize("source,target", ALL_PAIRS, ids=lambda f: f.value)
    def test_path_terminates(self, source, target):
        path = conversion_path(source, target)
        if source == target:
            assert path == ()
            return
        assert 1 <= len(path) <= MAX_HOPS
        assert path[-1] is target
        assert len(set((source, *path))) == len(path) + 1

    def test_known_three_step_route(self):
        assert conversion_path(F.GRAY8, F.CIELAB) == (F.GRAYF, F.RGBF, F.CIELAB)

    def test_lab_to_gray_avoids_rgb(self):
        assert conversion_path(F.CIELAB, F.GRAY8) == (F.GRAYF, F.GRAY8)

    def test_hsl_to_gray_goes_through_rgbf(self):
        assert conversion_path(F.HSL, F.GRAY8) == (F.RGBF, F.GRAY8)


class TestConvert:
    """Any-to-any conversion through the public entry point."""

    @pytest.mark.parametrize("source,target", ALL_PAIRS, ids=lambda f: f.value)
    def test_result_has_target_format(self, source, target):
        result = convert(Color(SAMPLE_BY_FORMAT[source]), target)
        assert result.format_name() is target
        assert isinstance(result.value, FORMAT_CLASSES[target])

    @pytest.mark.parametrize("name", list(FormatName))
    def test_same_format_returns_input(self, name):
        color = Color(SAMPLE_BY_FORMAT[name])
        assert convert(color, name) is color

    def test_convert_value_on_bare_format(self):
        assert convert_value(Rgb(255, 0, 0), F.HSV) == Hsv(0.0, 1.0, 1.0)

    def test_pure_red_to_hsv(self):
        assert convert(Color(Rgb(255, 0, 0)), F.HSV) == Color(Hsv(0.0, 1.0, 1.0))

    def test_white_hsl_to_gray8(self):
        assert convert(Color(Hsl(0.0, 0.0, 1.0)), F.GRAY8) == Color(Gray8(255))

    def test_gray8_to_hsv(self):
        result = convert(Color(Gray8(255)), F.HSV).value
        assert result.s == 0.0
        assert result.v == pytest.approx(1.0)

    def test_white_lab_to_srgb(self):
        assert convert(Color(CieLab(100.0, 0.0, 0.0)), F.SRGB) == Color(Srgb(255, 255, 255))

    def test_gray16_white_to_rgba(self):
        assert convert(Color(Gray16(65535)), F.RGBA) == Color(Rgba(255, 255, 255, 255))

    def test_alpha_survives_16bit_route(self):
        result = convert(Color(Rgba64(0, 0, 0, 32896)), F.RGBAF).value
        assert result.a == pytest.approx(32896 / 65535)

    def test_reference_white_kept_into_lab(self):
        white = (0.96422, 1.0, 0.82521)
        result = convert(Color(CieXyz(0.3, 0.35, 0.2, reference_white=white)), F.CIELAB)
        assert result.value.reference_white == pytest.approx(white, abs=1e-7)


class TestPathInvariance:
    """A direct route and a detour through an intermediate format agree."""

    @pytest.mark.parametrize("source,via,target,atol", [
        (Rgb(200, 30, 90), F.CIEXYZ, F.CIELAB, 1e-3),
        (RgbF(0.2, 0.7, 0.1), F.HSV, F.HSL, 1e-4),
        (Srgb(10, 220, 130), F.RGBF, F.CIEXYZ, 1e-6),
        (Hsv(210.0, 0.6, 0.8), F.RGBF, F.SRGBF, 1e-6),
        (SrgbF(0.9, 0.5, 0.3), F.CIEXYZ, F.CIELAB, 1e-3),
        (CieLab(60.0, 40.0, -50.0, reference_white=(0.96422, 1.0, 0.82521)), F.CIEXYZ, F.GRAYF, 1e-5),
    ], ids=lambda v: getattr(v, "value", type(v).__name__))
    def test_detour_matches_direct(self, source, via, target, atol):
        direct = convert(Color(source), target)
        detour = convert(convert(Color(source), via), target)
        np.testing.assert_allclose(_channels(direct), _channels(detour), atol=atol)


class TestLogging:
    """Conversions report their route at DEBUG level."""

    def test_route_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger=engine.__name__)
        convert(Color(Gray8(10)), F.HSV)
        messages = [record.getMessage() for record in caplog.records]
        assert "Converting Gray8 to Hsv" in messages
        assert "  -> RgbF" in messages

    def test_identity_not_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger=engine.__name__)
        convert(Color(Gray8(10)), F.GRAY8)
        assert caplog.records == []


class TestBrokenTables:
    """Table mistakes surface as RuntimeError, never as silent loops."""

    def test_cycle_detected(self, monkeypatch):
        monkeypatch.setitem(CANONICAL_HUBS, F.HSV, F.HSL)
        monkeypatch.setitem(CANONICAL_HUBS, F.HSL, F.HSV)
        with pytest.raises(RuntimeError, match="does not terminate"):
            conversion_path(F.HSV, F.GRAY8)

    def test_missing_edge_from_universal_source(self, monkeypatch):
        monkeypatch.delitem(DIRECT_CONVERSIONS[F.RGB], F.HSV)
        with pytest.raises(RuntimeError, match="no conversion"):
            next_hop(F.RGB, F.HSV)

    def test_too_many_hops(self, monkeypatch):
        monkeypatch.setattr(engine, "MAX_HOPS", 1)
        with pytest.raises(RuntimeError, match="does not terminate"):
            conversion_path(F.GRAY8, F.CIELAB)
