"""
Unit tests for dreadnought/weapons

Tests gun groups, gun and mount types, torpedoes, mines, anti-submarine
weapons and miscellaneous weights.
"""

import math

import pytest

from dreadnought.core.constants import POUND2TON
from dreadnought.weapons import (
    ASW,
    ASWType,
    GunDistributionType,
    GunLayoutType,
    GunType,
    Mines,
    MineType,
    MountKind,
    MountType,
    SubBattery,
    Torpedoes,
    TorpedoType,
)
from dreadnought.weapons.mines import _Stowed
from dreadnought.weight import MiscWgts


D = GunDistributionType


class TestGunLayout:
    """Test GunLayoutType.across."""

    @pytest.mark.parametrize("layout,guns,expected", [
        (GunLayoutType.SIDE_BY_SIDE, 3, 3.0),
        (GunLayoutType.TWO_ROW, 3, 2.0),
        (GunLayoutType.TWO_ROW, 4, 2.0),
        (GunLayoutType.SUPERPOSED, 4, 1.0),
    ])
    def test_across(self, layout, guns, expected):
        assert layout.across(guns) == expected


class TestGunDistribution:
    """Test placement of mounts along the hull."""

    @pytest.mark.parametrize("dist,n,expected", [
        (D.CENTRE_EVEN, 3, 2),
        (D.SIDES_ENDS_EVEN, 4, 2),
        (D.CENTRE_ENDS_FWD, 3, 2),
        (D.CENTRE_ENDS_FWD, 1, 1),
        (D.SIDES_ENDS_AFT, 3, 1),
        (D.SIDES_ENDS_AFT, 1, 0),
        (D.CENTRE_FWD_EVEN, 3, 3),
        (D.SIDES_FDECK, 2, 2),
        (D.CENTRE_ALL_AFT, 3, 0),
        (D.SIDES_ADECK, 2, 0),
    ])
    def test_mounts_fwd(self, hull, dist, n, expected):
        assert dist.mounts_fwd(n, hull) == expected

    def test_even_split_favours_aft_on_short_foredeck(self, hull):
        hull.fd_len = 0.2
        assert D.CENTRE_EVEN.mounts_fwd(3, hull) == 1

    def test_mounts_fwd_within_bounds(self, hull):
        for dist in GunDistributionType:
            for n in range(0, 6):
                assert 0 <= dist.mounts_fwd(n, hull) <= n

    def test_free_ends(self, hull):
        hull.fc_fwd = hull.fc_aft = 30.0
        hull.qd_fwd = hull.qd_aft = 10.0
        # Forecastle and foredeck cover half the length: one of two mounts forward
        assert D.CENTRE_ENDS_EVEN.free(2, hull) == pytest.approx(20.0)

    def test_free_flush_deck(self, hull):
        for dist in GunDistributionType:
            for height in dist.heights(hull):
                assert height == 0.0 or height == pytest.approx(20.0)

    def test_free_no_mounts(self, hull):
        assert D.CENTRE_EVEN.free(0, hull) == 0.0

    def test_every_distribution_described(self):
        for dist in GunDistributionType:
            assert dist.description.startswith("on ")


class TestSubBattery:
    """Test SubBattery mount counts and superfiring."""

    def test_num_mounts(self):
        assert SubBattery(above=1, on=2, below=3).num_mounts() == 6

    def test_super_one_directional_flags(self):
        group = SubBattery(above=5, below=2, two_mounts_up=True, lower_deck=False)
        assert group.super_(3) == pytest.approx(8 * 3)

    def test_super_lower_deck(self):
        group = SubBattery(above=1, below=2, lower_deck=True)
        assert group.super_(2) == pytest.approx((1 - 4) * 2)

    def test_roundtrip(self):
        group = SubBattery(
            layout=GunLayoutType.TWO_ROW,
            distribution=D.SIDES_FWD_EVEN,
            above=1,
            on=2,
            two_mounts_up=True,
        )
        assert SubBattery.from_dict(group.to_dict()) == group


class TestGunAndMountTypes:
    """Test coefficient tables."""

    def test_gun_coefficients(self):
        assert GunType.MUZZLE_LOADING.wgt_lg == 0.85
        assert GunType.DUAL_PURPOSE.wgt_sm == 1.6
        assert GunType.ANTI_AIR.description == "Anti-air"

    def test_mount_coefficients(self):
        kind = MountKind.CLOSED_BARBETTE
        assert kind.wgt_adj == 3.0
        assert kind.face + kind.back == pytest.approx(1.0)
        assert kind.barb_cap == 5
        assert kind.description == "turrets"

    def test_mount_roundtrip(self):
        mount = MountType(num=3, kind=MountKind.CASEMATE, armor_face=6.0)
        assert MountType.from_dict(mount.to_dict()) == mount


def _torps(kind, num=4, mounts=2, year=1920):
    return Torpedoes(year=year, num=num, mounts=mounts, diam=21.0, len=20.0, kind=kind)


class TestTorpedoes:
    """Test torpedo weight and space."""

    def test_wgt(self):
        torps = Torpedoes(year=1900, num=4, mounts=2, diam=18.0, len=21.0, kind=TorpedoType.FIXED_TUBES)
        assert torps.wgt() == pytest.approx(0.7529, abs=1e-4)

    def test_wgt_weaps(self):
        torps = _torps(TorpedoType.CENTER_TUBES, year=1920)
        assert torps.wgt_weaps() == pytest.approx(math.pi * 21.0 ** 2 * 20.0 / (12 * 937.0))

    def test_later_torpedoes_lighter(self):
        early = _torps(TorpedoType.CENTER_TUBES, year=1900).wgt_weaps()
        late = _torps(TorpedoType.CENTER_TUBES, year=1920).wgt_weaps()
        assert late > early

    @pytest.mark.parametrize("year", [1932, 1945])
    def test_size_term_vanishes(self, year):
        torps = _torps(TorpedoType.BOW_TUBES, year=year)
        assert torps.wgt_weaps() == 0.0
        assert torps.wgt() == pytest.approx(0.004 * (year - 1890) * 4)

    @pytest.mark.parametrize("kind,factor", [
        (TorpedoType.FIXED_TUBES, 0.25),
        (TorpedoType.DECK_RELOADS, 0.25),
        (TorpedoType.SUBMERGED_RELOADS, 0.25),
        (TorpedoType.CENTER_TUBES, 1.0),
        (TorpedoType.BOW_AND_STERN_TUBES, 1.0),
    ])
    def test_wgt_mounts(self, kind, factor):
        torps = _torps(kind)
        assert torps.wgt_mounts() == pytest.approx(0.004 * 30 * 4 * factor)
        assert torps.wgt() == pytest.approx(torps.wgt_weaps() + torps.wgt_mounts())

    def test_no_torpedoes(self):
        assert Torpedoes().wgt() == 0.0

    def test_deck_space_fixed(self):
        assert _torps(TorpedoType.FIXED_TUBES).deck_space(50.0) == pytest.approx(140.0)

    def test_deck_space_reloads(self):
        assert _torps(TorpedoType.DECK_RELOADS).deck_space(50.0) == pytest.approx(270.0)

    def test_deck_space_side_tubes(self):
        sweep = math.sqrt(20.0 ** 2 + 4.0 ** 2)
        expected = (sweep * 0.5) ** 2 * math.pi + 4.0 * 0.5 * 20.0
        assert _torps(TorpedoType.DECK_SIDE_TUBES).deck_space(50.0) == pytest.approx(expected)

    def test_deck_space_centre_tubes(self):
        sweep = math.sqrt(20.0 ** 2 + 4.0 ** 2)
        assert _torps(TorpedoType.CENTER_TUBES).deck_space(50.0) == pytest.approx(sweep * 50.0 * 2)

    def test_deck_space_no_mounts(self):
        assert _torps(TorpedoType.DECK_SIDE_TUBES, mounts=0).deck_space(50.0) == 0.0

    @pytest.mark.parametrize("kind", [
        TorpedoType.BOW_TUBES,
        TorpedoType.STERN_TUBES,
        TorpedoType.BOW_AND_STERN_TUBES,
        TorpedoType.SUBMERGED_SIDE_TUBES,
        TorpedoType.SUBMERGED_RELOADS,
    ])
    def test_submerged_take_no_deck_space(self, kind):
        assert _torps(kind).deck_space(50.0) == 0.0

    def test_hull_space(self):
        assert _torps(TorpedoType.SUBMERGED_RELOADS).hull_space() == pytest.approx(
            20.0 * 1.5 * (21.0 * 1.5 / 12.0) ** 2 * 4
        )
        assert _torps(TorpedoType.BOW_TUBES).hull_space() == pytest.approx(
            20.0 * 2.5 * (21.0 * 2.75 / 12.0) ** 2 * 4
        )
        assert _torps(TorpedoType.FIXED_TUBES).hull_space() == 0.0

    def test_roundtrip(self):
        torps = _torps(TorpedoType.SUBMERGED_SIDE_TUBES)
        assert Torpedoes.from_dict(torps.to_dict()) == torps


class TestMinesAndASW:
    """Test stowed weapon weights."""

    WEAPS = 200 * 10.0 / POUND2TON

    def test_base_needs_launcher_factor(self):
        with pytest.raises(TypeError):
            _Stowed(num=1)

    @pytest.mark.parametrize("kind,factor", [
        (MineType.STERN_RAILS, 0.25),
        (MineType.BOW_TUBES, 1.0),
        (MineType.STERN_TUBES, 1.0),
        (MineType.SIDE_TUBES, 1.0),
    ])
    def test_mines(self, kind, factor):
        mines = Mines(num=100, reload=100, wgt=10.0, kind=kind)
        assert mines.wgt_weaps() == pytest.approx(self.WEAPS)
        assert mines.wgt_mounts() == pytest.approx(self.WEAPS * factor)
        assert mines.total_wgt() == pytest.approx(self.WEAPS * (1.0 + factor))

    @pytest.mark.parametrize("kind,factor", [
        (ASWType.STERN_RACKS, 0.25),
        (ASWType.THROWERS, 0.5),
        (ASWType.HEDGEHOGS, 0.5),
        (ASWType.SQUID_MORTARS, 10.0),
    ])
    def test_asw(self, kind, factor):
        asw = ASW(num=100, reload=100, wgt=10.0, kind=kind)
        assert asw.wgt_mounts() == pytest.approx(self.WEAPS * factor)
        assert asw.total_wgt() == pytest.approx(self.WEAPS * (1.0 + factor))

    def test_roundtrip(self):
        mines = Mines(year=1916, num=40, reload=20, wgt=1500.0, kind=MineType.SIDE_TUBES)
        asw = ASW(num=2, reload=30, wgt=300.0, kind=ASWType.THROWERS)
        assert Mines.from_dict(mines.to_dict()) == mines
        assert ASW.from_dict(asw.to_dict()) == asw


class TestMiscWgts:
    """Test MiscWgts."""

    def test_wgt_sum(self):
        wgts = MiscWgts(vital=1, hull=10, on=100, above=1000, void=10000)
        assert wgts.wgt() == 11111

    def test_roundtrip(self):
        wgts = MiscWgts(hull=25, above=5)
        assert MiscWgts.from_dict(wgts.to_dict()) == wgts
