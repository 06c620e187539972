"""
Unit tests for dreadnought/ship/ship.py

Tests the weight balance, displacement ordering, stability, strength,
seakeeping, crew and cost figures of a complete design.
"""

import math

import pytest

from dreadnought.core.units import Units
from dreadnought.ship import Ship
from dreadnought.weapons import Torpedoes, TorpedoType, ASW, ASWType


class TestWeights:
    """Test weight groups of the scenario design."""

    def test_block_coefficient(self, scenario_ship):
        assert scenario_ship.hull.cb() == pytest.approx(0.7)

    def test_guns_weigh_something(self, scenario_ship):
        assert scenario_ship.wgt_guns() > 0.0
        assert scenario_ship.wgt_gun_mounts() > 0.0
        assert scenario_ship.wgt_gun_armor() == 0.0

    def test_weaps_sum(self, scenario_ship):
        ship = scenario_ship
        ship.torps[0] = Torpedoes(num=4, mounts=2, diam=21.0, len=20.0, kind=TorpedoType.CENTER_TUBES)
        ship.mines.num = 20
        ship.mines.wgt = 1000.0
        ship.asw[0] = ASW(num=2, reload=20, wgt=300.0, kind=ASWType.THROWERS)

        expected = ship.wgt_borne() + ship.wgt_torps() + ship.wgt_mines() + ship.wgt_asw()
        assert ship.wgt_weaps() == pytest.approx(expected)
        assert ship.wgt_torps() > 0.0
        assert ship.wgt_mines() > 0.0
        assert ship.wgt_asw() > 0.0

    def test_hull_weight_balances_light_ship(self, scenario_ship):
        ship = scenario_ship
        ship.wgts.hull = 50
        parts = ship.wgt_hull() + ship.wgt_weaps() + ship.wgt_armor() + ship.wgt_engine() + ship.wgt_misc()
        assert parts == pytest.approx(ship.d_lite())

    def test_wgt_load(self, scenario_ship):
        ship = scenario_ship
        expected = ship.hull.d() * 0.02 + ship.bunker() + ship.wgt_mag()
        assert ship.wgt_load() == pytest.approx(expected)

    def test_zero_armor(self, scenario_ship):
        assert scenario_ship.wgt_armor() == 0.0


class TestDisplacement:
    """Test the loading conditions."""

    def test_ordering(self, scenario_ship):
        ship = scenario_ship
        assert ship.bunker() > 0.0
        assert ship.d_lite() <= ship.d_std() < ship.hull.d() < ship.d_max()

    def test_full_load(self, scenario_ship):
        ship = scenario_ship
        assert ship.d_max() == pytest.approx(ship.hull.d() + 0.8 * ship.bunker())
        assert ship.t_max() > ship.hull.t
        assert 0.0 < ship.cb_max() <= 1.0

    def test_resistance_args_follow_hull(self, scenario_ship):
        ship = scenario_ship
        hull = ship.hull
        assert ship.hp_max() == pytest.approx(
            ship.engine.hp_max(hull.d(), hull.lwl(), hull.leff(), hull.cs(), hull.ws())
        )
        assert 0.0 < ship.hp_cruise() < ship.hp_max()
        assert 0.0 < ship.pw_max() < 1.0


class TestConcentration:
    """Test the superfiring and end-concentration multipliers."""

    def test_no_superfiring(self, scenario_ship):
        assert scenario_ship.gun_super_factor() == pytest.approx(1.0)

    def test_superfiring(self, scenario_ship):
        group = scenario_ship.batteries[0].groups[0]
        group.on = 1
        group.above = 1
        # Two raised guns out of four
        assert scenario_ship.gun_super_factor() == pytest.approx(1.125)

    def test_balanced_ends(self, scenario_ship):
        assert scenario_ship.super_factor_long() == pytest.approx(1.0)

    def test_all_forward(self, scenario_ship):
        from dreadnought.weapons import GunDistributionType

        scenario_ship.batteries[0].groups[0].distribution = GunDistributionType.CENTRE_ALL_FWD
        assert scenario_ship.super_factor_long() == pytest.approx(1.3)

    def test_no_guns(self):
        ship = Ship()
        assert ship.gun_super_factor() == 1.0
        assert ship.super_factor_long() == 1.0


class TestStability:
    """Test stability, metacentric height and roll period."""

    def test_stability_positive(self, scenario_ship):
        assert scenario_ship.stability() > 0.0

    def test_trim_adjustment(self, scenario_ship):
        ship = scenario_ship
        base = ship.stability()

        ship.trim = 50
        assert ship.stability_adj() == pytest.approx(base)
        ship.trim = 0
        assert ship.stability_adj() == pytest.approx(base * 4.0 / 3.0)
        ship.trim = 100
        assert ship.stability_adj() == pytest.approx(base * 2.0 / 3.0)

    def test_is_unstable(self, scenario_ship):
        ship = scenario_ship
        assert ship.is_unstable() == (ship.stability_adj() < 1.0)

    def test_metacenter_and_roll(self, scenario_ship):
        ship = scenario_ship
        gm = ship.metacenter()
        assert gm == pytest.approx(50.0 * ship.stability_adj() / 20.0)
        assert ship.roll_period() == pytest.approx(0.42 * 50.0 / math.sqrt(gm))

    def test_high_weight_lowers_stability(self, scenario_ship):
        ship = scenario_ship
        before = ship.stability()
        ship.wgts.above = 200
        assert ship.stability() < before


class TestSpaceAndStrength:
    """Test space and hull strength."""

    def test_deck_space(self, scenario_ship):
        ship = scenario_ship
        assert ship.deck_space() == 0.0
        ship.torps[0] = Torpedoes(num=4, mounts=2, diam=21.0, len=20.0, kind=TorpedoType.FIXED_TUBES)
        assert ship.deck_space() == pytest.approx(140.0 / ship.hull.wp())

    def test_hull_space(self, scenario_ship):
        ship = scenario_ship
        ship.torps[0] = Torpedoes(num=4, mounts=2, diam=21.0, len=20.0, kind=TorpedoType.BOW_TUBES)
        expected = ship.torps[0].hull_space() / ship.hull.d() * 35.0
        assert ship.hull_space() == pytest.approx(expected)

    def test_room(self, scenario_ship):
        assert scenario_ship.room() > 0.0

    def test_strength(self, scenario_ship):
        ship = scenario_ship
        cross, long = ship.str_cross(), ship.str_long()
        assert cross > 0.0
        assert long > 0.0

        comp = ship.str_comp()
        assert min(cross, long) <= comp <= max(cross, long)


class TestSeakeeping:
    """Test flotation, seaboat and steadiness."""

    def test_flotation_non_negative(self, scenario_ship):
        assert scenario_ship.flotation() >= 0.0

    def test_flotation_out_of_era(self, scenario_ship):
        scenario_ship.year = 1960
        assert scenario_ship.flotation() == 0.0

    def test_seaboat(self, scenario_ship):
        assert scenario_ship.seaboat() > 0.0

    def test_steadiness_capped(self, scenario_ship):
        ship = scenario_ship
        ship.trim = 100
        assert ship.steadiness() <= 100.0
        ship.trim = 0
        assert ship.steadiness() == 0.0
        assert ship.seakeeping() == 0.0

    def test_wet_forward(self, scenario_ship):
        ship = scenario_ship
        # 20 ft bow on a 500 ft hull
        assert ship.is_wet_fwd()
        ship.hull.fc_fwd = 30.0
        assert not ship.is_wet_fwd()


class TestCrewAndCost:
    """Test complement and cost."""

    @pytest.mark.parametrize("d,crew_max,crew_min", [(0.0, 0, 0), (1000.0, 99, 76)])
    def test_crew(self, d, crew_max, crew_min):
        ship = Ship()
        ship.hull.set_d(d)
        assert ship.crew_max() == crew_max
        assert ship.crew_min() == crew_min

    def test_cost(self, scenario_ship):
        ship = scenario_ship
        tons = ship.hull.d() + ship.wgt_armor() + 2.0 * ship.wgt_borne() + ship.wgt_engine()
        assert ship.cost_lb() == pytest.approx(tons * 110.0 / 1_000_000.0)
        assert ship.cost_dollar() == pytest.approx(ship.cost_lb() * 4.0)


class TestDegenerateDesign:
    """A blank design evaluates to zeros rather than failing."""

    def test_blank_ship(self):
        ship = Ship()
        assert ship.d_lite() == 0.0
        assert ship.bunker() == 0.0
        assert ship.wgt_engine() == 0.0
        assert ship.stability() == 0.0
        assert ship.roll_period() == 0.0
        assert ship.room() == 0.0
        assert ship.str_comp() == 0.0
        assert ship.flotation() == 0.0
        assert ship.seaboat() == 0.0

    def test_determinism(self, scenario_ship):
        first = scenario_ship.internals()
        second = scenario_ship.internals()
        assert first == second


class TestInternals:
    """Test the intermediate value dump."""

    def test_keys(self, scenario_ship):
        values = scenario_ship.internals()
        for key in ("Cs", "Cm", "Cp", "Cwp", "WP", "WS", "Leff", "hp max", "num_engines", "room"):
            assert key in values
        assert "Ram length" not in values
        assert values["num_engines"] == 1
        assert values["boiler"] == ["TURBINE"]

    def test_ram_length_listed(self, scenario_ship):
        from dreadnought.hull import BowType

        scenario_ship.hull.bow_type = BowType.RAM
        scenario_ship.hull.ram_len = 8.0
        assert scenario_ship.internals()["Ram length"] == 8.0


class TestShipSerialization:
    """Test to_dict/from_dict."""

    def test_roundtrip(self, scenario_ship):
        scenario_ship.units = Units.METRIC
        restored = Ship.from_dict(scenario_ship.to_dict())
        assert restored == scenario_ship

    def test_defaults(self):
        ship = Ship.from_dict({})
        assert ship.name == "NAME"
        assert len(ship.batteries) == 5
        assert len(ship.torps) == 2
        assert len(ship.asw) == 2

    def test_legacy_units_index(self):
        assert Ship.from_dict({"units": "1"}).units == Units.METRIC
