"""
dreadnought Test Configuration and Fixtures

Shared designs used across the unit and integration tests.
"""

import logging

import pytest

from dreadnought.hull import Hull, SternType
from dreadnought.propulsion import Engine, FuelType, BoilerType, DriveType
from dreadnought.weapons import Battery, MountKind
from dreadnought.ship import Ship


def make_hull(d=5000.0, lwl=500.0, b=50.0, t=10.0, deck=20.0):
    """Flush-decked hull entered by displacement and waterline length."""
    hull = Hull()
    hull.set_d(d)
    hull.set_lwl(lwl)
    hull.b = b
    hull.bb = b
    hull.t = t
    hull.stern_type = SternType.CRUISER

    hull.fc_len = 0.2
    hull.fd_len = 0.3
    hull.qd_len = 0.15
    for name in ("fc", "fd", "ad", "qd"):
        setattr(hull, f"{name}_fwd", deck)
        setattr(hull, f"{name}_aft", deck)
    return hull


@pytest.fixture
def hull():
    """5000 t, 500 ft hull with a 20 ft flush deck."""
    return make_hull()


@pytest.fixture
def deck_hull():
    """Small hull with 10 ft decks, used for the deck armour figures."""
    return make_hull(d=1000.0, lwl=100.0, b=50.0, t=10.0, deck=10.0)


@pytest.fixture
def scenario_ship():
    """
    Turbine cruiser with one battery of four 10 in guns and no armour.
    """
    ship = Ship(name="Scenario", country="Testland", kind="Cruiser", year=1920)
    ship.hull = make_hull()

    ship.engine = Engine(
        year=1920,
        fuel=FuelType.OIL,
        boiler=BoilerType.TURBINE,
        drive=DriveType.GEARED,
        vmax=20.0,
        vcruise=10.0,
        range=1000,
        shafts=2,
    )

    battery = Battery(num=4, cal=10.0, len=45, year=1920, shells=100)
    battery.mount.kind = MountKind.CLOSED_BARBETTE
    battery.mount.num = 2
    battery.groups[0].on = 2
    ship.batteries[0] = battery

    return ship


@pytest.fixture
def design_file(tmp_path, scenario_ship):
    """Path of the scenario design saved to disk."""
    path = tmp_path / "scenario.ship.json"
    scenario_ship.save(str(path))
    return path


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop handlers installed by setup_logging during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
