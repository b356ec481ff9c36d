import random

import pytest

from src.starforge.bodies.planet import Planet
from src.starforge.bodies.solar_system import SolarSystem
from src.starforge.bodies.star import Star
from src.starforge.core.ids import SystemId
from src.starforge.core.state import UniverseState
from src.starforge.core import sim
from src.starforge.generation.system_gen import generate_universe
from src.starforge.physics.astrophysics import TWO_PI
from src.starforge.reports.gazette import generate_gazette
from src.starforge.reports.system_cards import generate_system_card_report


def fast_planet(name: str, orbit_radius: float, period: float) -> Planet:
    return Planet(
        name=name,
        mass=1e-5,
        radius=1.0,
        orbit_radius=orbit_radius,
        orbit_period=period,
        angular_speed=TWO_PI / period,
    )


@pytest.fixture
def small_universe() -> UniverseState:
    star = Star(name="Vega", mass=2.1, radius=2.4)
    busy = SolarSystem(
        star=star,
        planets=[fast_planet("Vega b", 0.1, 1.0), fast_planet("Vega c", 0.2, 10.0)],
        spacing_factor=1.0,
    )
    quiet = SolarSystem(star=Star(name="Lonely", mass=0.5, radius=0.5))
    return UniverseState(seed=1, systems={SystemId("sys-1"): busy, SystemId("sys-2"): quiet})


def test_generate_universe_ids(fixed_config, sol_names):
    state = generate_universe(random.Random(5), n_systems=3, config=fixed_config, names=sol_names)
    assert state.system_ids() == ["sys-1", "sys-2", "sys-3"]
    assert all(system.get_n_planets() == 3 for system in state.systems.values())


def test_generate_universe_keeps_existing_systems(fixed_config, sol_names, small_universe):
    original = small_universe.get_system(SystemId("sys-1"))
    state = generate_universe(random.Random(5), n_systems=3, config=fixed_config, names=sol_names, initial_state=small_universe)
    assert state.get_system(SystemId("sys-1")) is original
    assert len(state.systems) == 3


def test_generate_universe_rejects_negative_count():
    with pytest.raises(ValueError):
        generate_universe(random.Random(5), n_systems=-1)


def test_get_system_unknown_id(small_universe):
    with pytest.raises(KeyError):
        small_universe.get_system(SystemId("sys-99"))


def test_step_advances_clock(small_universe):
    report = sim.step(small_universe, 0.5)
    assert report.tick == 1
    assert small_universe.tick == 1
    assert small_universe.elapsed == 0.5
    sim.step(small_universe, 0.25)
    assert small_universe.elapsed == 0.75


def test_step_logs_one_update_per_system(small_universe):
    report = sim.step(small_universe)
    updates = report.log.of_type("orbits.update")
    assert [entry.system_id for entry in updates] == ["sys-1", "sys-2"]
    assert "No planets" in updates[1].reason


def test_step_reports_revolutions(small_universe):
    report = sim.step(small_universe, 1.5)
    laps = report.log.of_type("orbits.revolution")
    assert len(laps) == 1
    assert laps[0].body_name == "Vega b"
    assert laps[0].details == {"completed": 1, "total": 1}
    planet = small_universe.get_system(SystemId("sys-1")).get_planets()[0]
    assert planet.get_orbit_position() == pytest.approx(TWO_PI * 0.5)


def test_step_rejects_negative_dt(small_universe):
    with pytest.raises(ValueError):
        sim.step(small_universe, -1.0)
    assert small_universe.tick == 0


def test_gazette_lists_entries(small_universe):
    report = sim.step(small_universe, 1.5)
    gazette = generate_gazette(report.log, report.tick)
    lines = gazette.splitlines()
    assert lines[0] == "== Tick 1 Report =="
    assert any(line.startswith("[orbits.revolution] Vega b") for line in lines)
    assert sum(line.startswith("[orbits.update]") for line in lines) == 2


def test_system_card_report(small_universe):
    card = generate_system_card_report(small_universe.get_system(SystemId("sys-1")))
    assert card.startswith("--- System Report: Vega ---")
    assert "--- Star ---" in card
    assert "1. Vega b" in card
    assert "2. Vega c" in card
    assert card.rstrip().endswith("--- End Report ---")


def test_system_card_report_without_planets(small_universe):
    card = generate_system_card_report(small_universe.get_system(SystemId("sys-2")))
    assert "No planets." in card
    assert "n/a" in card
