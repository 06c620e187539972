"""
Unit tests for dreadnought/hull/hull.py

Tests form coefficients, the exclusive length and displacement inputs,
freeboard geometry and the division guards.
"""

import pytest

from dreadnought.core.constants import FT3_PER_TON_SEA
from dreadnought.hull import Hull, SternType, BowType, LengthKind, FormKind


def _hull(lwl=None, cb=None, d=None, bb=0.0, t=0.0):
    hull = Hull()
    if lwl is not None:
        hull.set_lwl(lwl)
    if cb is not None:
        hull.set_cb(cb)
    if d is not None:
        hull.set_d(d)
    hull.b = bb
    hull.bb = bb
    hull.t = t
    return hull


def _stepped_hull(fc_len):
    hull = Hull()
    hull.fc_len = fc_len
    hull.fc_fwd = 10.0
    hull.fc_aft = 10.0
    hull.fd_len = (1.0 - fc_len) * 0.4
    hull.fd_fwd = 15.0
    hull.fd_aft = 10.0
    hull.ad_fwd = 20.0
    hull.ad_aft = 10.0
    hull.qd_len = (1.0 - fc_len) * 0.4
    hull.qd_fwd = 5.0
    hull.qd_aft = 10.0
    return hull


class TestCoefficients:
    """Test the block, midships, prismatic and waterplane coefficients."""

    def test_cm_zero_special_case(self):
        assert Hull.cm(0.0) == 1.006

    @pytest.mark.parametrize("cb,expected", [(1.0, 1.0004), (0.5, 0.93995)])
    def test_cm(self, cb, expected):
        assert Hull.cm(cb) == pytest.approx(expected, abs=5e-6)

    @pytest.mark.parametrize("cb,expected", [(0.0, 0.0), (1.0, 0.99960), (0.5, 0.53194)])
    def test_cp(self, cb, expected):
        assert Hull.cp(cb) == pytest.approx(expected, abs=5e-6)

    def test_cs(self):
        hull = _hull(lwl=100.0, cb=0.55, bb=10.0)
        assert hull.cs() == pytest.approx(0.34697, abs=5e-6)

    def test_cs_zero_length(self):
        hull = _hull(lwl=0.0, cb=0.55, bb=10.0)
        assert hull.cs() == 0.0

    @pytest.mark.parametrize("boxy,cb,expected", [
        (True, 0.5, 0.64045),
        (False, 0.75, 0.83761),
        (False, 0.5, 0.66628),
        (False, 0.35, 0.59708),
    ])
    def test_cwp(self, boxy, cb, expected):
        hull = _hull(cb=cb)
        hull.boxy = boxy
        assert hull.cwp() == pytest.approx(expected, abs=5e-6)

    def test_wp_calc_by_stern(self):
        assert SternType.TRANSOM_SM.wp_calc() == (0.262, 0.79)
        assert SternType.TRANSOM_LG.wp_calc() == (0.262, 0.81)
        assert SternType.CRUISER.wp_calc() == (0.262, 0.76)
        assert SternType.ROUND.wp_calc() == (0.262, 0.76)


class TestDisplacement:
    """Test the exclusive block coefficient / displacement input."""

    def test_cb_from_displacement(self):
        hull = _hull(lwl=800.0, d=8000.0, bb=50.0, t=10.0)
        assert hull.cb() == pytest.approx(0.7)

    @pytest.mark.parametrize("d,lwl,bb,t", [
        (1.0, 0.0, 1.0, 1.0),
        (1.0, 1.0, 0.0, 1.0),
        (1.0, 1.0, 1.0, 0.0),
    ])
    def test_cb_zero_volume(self, d, lwl, bb, t):
        assert _hull(lwl=lwl, d=d, bb=bb, t=t).cb() == 0.0

    def test_cb_clamped(self):
        assert _hull(lwl=1.0, d=-1.0, bb=1.0, t=1.0).cb() == 0.0
        assert _hull(lwl=1.0, d=100.0, bb=1.0, t=1.0).cb() == 1.0
        assert _hull(lwl=FT3_PER_TON_SEA, d=100.0, bb=1.0, t=1.0).cb() == 1.0

    def test_d_from_cb(self):
        hull = _hull(lwl=100.0, cb=0.5, bb=5.0, t=2.0)
        assert hull.d() == pytest.approx(14.29, abs=0.005)

    def test_d_equals_cb_for_unit_volume(self):
        hull = _hull(lwl=FT3_PER_TON_SEA, cb=0.5, bb=1.0, t=1.0)
        assert hull.d() == pytest.approx(0.5)

    def test_set_cb_then_set_d(self):
        hull = _hull(lwl=500.0, bb=50.0, t=10.0)

        hull.set_cb(0.6)
        assert hull.form.kind == FormKind.BLOCK
        assert hull.cb() == 0.6
        assert hull.d() == pytest.approx(0.6 * 500.0 * 50.0 * 10.0 / 35.0)

        hull.set_d(5000.0)
        assert hull.form.kind == FormKind.DISPLACEMENT
        assert hull.d() == 5000.0
        assert hull.cb() == pytest.approx(0.7)

    def test_unset_form(self):
        hull = Hull()
        assert hull.cb() == 0.0
        assert hull.d() == 0.0

    def test_ws(self):
        hull = _hull(lwl=100.0, d=1000.0, t=10.0)
        assert hull.ws() == pytest.approx(5200.0)

    def test_ws_zero_draft(self):
        assert _hull(lwl=100.0, d=1000.0, t=0.0).ws() == 0.0

    def test_t_calc(self, hull):
        assert hull.t_calc(hull.d() + 500.0) == pytest.approx(10.87, abs=0.005)

    def test_ts(self, hull):
        assert hull.ts() == pytest.approx(9.72, abs=0.005)
        hull.t = 0.0
        assert hull.ts() == 0.0


class TestLength:
    """Test the exclusive waterline / overall length input."""

    @pytest.mark.parametrize("angle,stern,ram,lwl,loa", [
        (0.0, 0.0, 0.0, 100.0, 100.0),
        (0.0, 10.0, 0.0, 90.0, 110.0),
        (0.0, 0.0, 10.0, 90.0, 110.0),
        (45.0, 0.0, 0.0, 90.0, 110.0),
        (45.0, 0.0, 5.0, 90.0, 110.0),
        (45.0, 0.0, 15.0, 85.0, 115.0),
        (0.0, 10.0, 10.0, 80.0, 120.0),
    ])
    def test_overhangs(self, angle, stern, ram, lwl, loa):
        hull = Hull()
        hull.fc_fwd = 10.0
        hull.bow_angle = angle
        hull.stern_overhang = stern
        if ram:
            hull.bow_type = BowType.RAM
            hull.ram_len = ram

        hull.set_loa(100.0)
        assert hull.length.kind == LengthKind.OVERALL
        assert hull.lwl() == pytest.approx(lwl)

        hull.set_lwl(100.0)
        assert hull.length.kind == LengthKind.WATERLINE
        assert hull.loa() == pytest.approx(loa)

    def test_ram_length_needs_ram_bow(self):
        hull = Hull(ram_len=12.0)
        assert hull.ram_length() == 0.0
        hull.bow_type = BowType.RAM
        assert hull.ram_length() == 12.0

    @pytest.mark.parametrize("angle,expected", [(-45.0, -10.0), (45.0, 10.0), (0.0, 0.0), (90.0, 0.0)])
    def test_stem_len(self, angle, expected):
        hull = Hull(fc_fwd=10.0, bow_angle=angle)
        assert hull.stem_len() == pytest.approx(expected)

    @pytest.mark.parametrize("stern,expected", [
        (SternType.TRANSOM_LG, 695.08),
        (SternType.TRANSOM_SM, 597.54),
        (SternType.CRUISER, 500.0),
        (SternType.ROUND, 500.0),
    ])
    def test_leff(self, stern, expected):
        assert stern.leff(500.0, 50.0, 0.2563) == pytest.approx(expected, abs=0.005)

    def test_leff_zero_sharpness(self):
        for stern in SternType:
            assert stern.leff(500.0, 50.0, 0.0) == 0.0

    @pytest.mark.parametrize("lwl,expected", [(100.0, 10.0), (200.0, 14.14)])
    def test_vn(self, lwl, expected):
        hull = _hull(lwl=lwl, cb=0.55, bb=10.0)
        assert hull.vn() == pytest.approx(expected, abs=0.005)

    def test_len2beam(self):
        assert _hull(lwl=100.0, bb=20.0).len2beam() == pytest.approx(5.0)
        assert _hull(lwl=100.0, bb=0.0).len2beam() == 0.0


class TestFreeboard:
    """Test deck segment geometry."""

    @pytest.mark.parametrize("fwd,aft,expected", [(10.0, 10.0, 10.0), (10.0, 0.0, 4.0), (0.0, 10.0, 6.0)])
    def test_fc_weighted_forward(self, fwd, aft, expected):
        assert Hull(fc_fwd=fwd, fc_aft=aft).fc() == pytest.approx(expected)

    @pytest.mark.parametrize("fwd,aft,expected", [(10.0, 10.0, 10.0), (10.0, 0.0, 5.0), (0.0, 10.0, 5.0)])
    def test_midpoint_segments(self, fwd, aft, expected):
        assert Hull(fd_fwd=fwd, fd_aft=aft).fd() == pytest.approx(expected)
        assert Hull(ad_fwd=fwd, ad_aft=aft).ad() == pytest.approx(expected)
        assert Hull(qd_fwd=fwd, qd_aft=aft).qd() == pytest.approx(expected)

    def test_ad_len_remainder(self):
        hull = Hull(fc_len=0.25, fd_len=0.25, qd_len=0.25)
        assert hull.ad_len() == pytest.approx(0.25)

    def test_ad_len_clamped(self):
        hull = Hull(fc_len=0.5, fd_len=0.4, qd_len=0.4)
        assert hull.ad_len() == 0.0

    def test_freeboard(self):
        assert _stepped_hull(0.25).freeboard() == pytest.approx(10.75)

    def test_freeboard_dist(self):
        # Foredeck 0.3 at 12.5 ft, afterdeck 0.15 at 15 ft
        hull = _stepped_hull(0.25)
        expected = (12.5 * 0.3 + 15.0 * 0.15) / 0.45
        assert hull.freeboard_dist() == pytest.approx(expected)

    def test_freeboard_dist_no_span(self):
        hull = Hull(fc_len=0.5, qd_len=0.5)
        assert hull.freeboard_dist() == 0.0

    @pytest.mark.parametrize("b,broadside,expected", [(3.0, True, 100.0), (70.0, True, 4.0), (70.0, False, 10.0)])
    def test_free_cap(self, b, broadside, expected):
        hull = Hull(b=b, fc_len=0.25, fd_len=0.25, qd_len=0.25)
        for name in ("fc", "fd", "ad", "qd"):
            setattr(hull, f"{name}_fwd", 10.0)
            setattr(hull, f"{name}_aft", 10.0)
        assert hull.free_cap(broadside) == pytest.approx(expected)

    @pytest.mark.parametrize("fc_fwd,expected", [(0.0, True), (20.0, False)])
    def test_is_wet_fwd(self, fc_fwd, expected):
        hull = Hull(fc_fwd=fc_fwd)
        hull.set_lwl(100.0)
        assert hull.is_wet_fwd() is expected

    def test_freeboard_desc_flush(self, hull):
        assert hull.freeboard_desc() == "flush deck"

    def test_freeboard_desc_steps(self):
        hull = Hull(fc_aft=30.0, fd_fwd=20.0, fd_aft=20.0, ad_fwd=20.0, ad_aft=20.0, qd_fwd=25.0)
        assert hull.freeboard_desc() == "raised forecastle, raised quarterdeck"


class TestHullSerialization:
    """Test to_dict/from_dict."""

    def test_roundtrip_keeps_exclusive_inputs(self, hull):
        hull.set_loa(520.0)
        hull.stern_type = SternType.TRANSOM_SM

        restored = Hull.from_dict(hull.to_dict())

        assert restored.length.kind == LengthKind.OVERALL
        assert restored.length.value == 520.0
        assert restored.form.kind == FormKind.DISPLACEMENT
        assert restored.form.value == 5000.0
        assert restored.stern_type == SternType.TRANSOM_SM

    def test_from_empty_dict(self):
        hull = Hull.from_dict({})
        assert hull.length is None
        assert hull.lwl() == 0.0
