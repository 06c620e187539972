"""
Integration tests for the design workflow.

Creates a design file, edits it, saves it again and reports on it.
"""

import json

import pytest

from dreadnought.cli import main
from dreadnought.reporting import build_report, render_text
from dreadnought.ship import Ship, load_ship, save_ship
from dreadnought.weapons import TorpedoType


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("DREADNOUGHT_UNITS", raising=False)


class TestDesignPipeline:
    """Test new -> edit -> save -> report."""

    def test_full_cycle(self, tmp_path, scenario_ship, capsys):
        path = tmp_path / "cruiser.ship.json"
        assert main(["new", str(path), "--name", "Cruiser"]) == 0
        capsys.readouterr()

        ship = load_ship(path)
        assert ship.hull.d() == 0.0

        ship.hull = scenario_ship.hull
        ship.engine = scenario_ship.engine
        ship.batteries = scenario_ship.batteries
        save_ship(ship, path)

        reloaded = load_ship(path)
        assert reloaded == ship

        assert main(["report", str(path), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)["data"]
        assert data["name"] == "Cruiser"
        assert data["displacement"]["normal"] == pytest.approx(5000.0)
        assert data["weights"]["hull"] == pytest.approx(reloaded.wgt_hull())

    def test_armour_comes_out_of_hull_weight(self, scenario_ship):
        before_armor = scenario_ship.wgt_armor()
        before_hull = scenario_ship.wgt_hull()

        scenario_ship.armor.main.thick = 6.0
        scenario_ship.armor.main.len = 300.0
        scenario_ship.armor.main.hgt = 10.0

        added = scenario_ship.wgt_armor() - before_armor
        assert added > 0.0
        assert scenario_ship.wgt_hull() == pytest.approx(before_hull - added)

    def test_torpedoes_reported_after_reload(self, tmp_path, scenario_ship):
        torps = scenario_ship.torps[0]
        torps.num = 4
        torps.mounts = 2
        torps.diam = 21.0
        torps.len = 20.0
        torps.kind = TorpedoType.DECK_SIDE_TUBES

        path = tmp_path / "torpedo.ship.json"
        scenario_ship.save(str(path))
        report = build_report(Ship.load(str(path)))

        assert len(report.armament.torpedoes) == 1
        assert report.armament.torpedoes[0].num == 4
        assert report.space.deck_space > 0.0
        assert "torpedoes" in render_text(report)
