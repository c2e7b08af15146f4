import pytest

from growcalc.core.psychrometrics import vapor_pressure_deficit, vpd_for_reading
from growcalc.core.solver import (MAX_ITERATIONS, search_temperature_for_target,
                                  solve_humidity_for_target,
                                  solve_temperature_for_target,
                                  temperature_band_reaches,
                                  unclamped_humidity_for_target)


@pytest.mark.parametrize("temperature_c,target", [(20, 0.8), (25, 1.0), (27, 1.4), (22, 0.6)])
def test_humidity_solution_reproduces_target(temperature_c, target):
    humidity = solve_humidity_for_target(temperature_c, target)
    assert 30 <= humidity <= 90
    assert vapor_pressure_deficit(temperature_c, humidity) == pytest.approx(target, abs=0.01)


def test_humidity_solution_clamped():
    assert unclamped_humidity_for_target(25, 0.01) > 90
    assert solve_humidity_for_target(25, 0.01) == 90
    assert unclamped_humidity_for_target(25, 2.5) < 30
    assert solve_humidity_for_target(25, 2.5) == 30


@pytest.mark.parametrize("unit,humidity,target", [("F", 60, 1.0), ("F", 50, 1.3), ("C", 65, 0.9)])
def test_temperature_solution_reproduces_target(unit, humidity, target):
    search = search_temperature_for_target(humidity, target, unit)
    assert search.converged
    assert search.iterations <= MAX_ITERATIONS
    assert vpd_for_reading(search.temperature, unit, humidity) == pytest.approx(target, abs=0.01)
    assert solve_temperature_for_target(humidity, target, unit) == search.temperature


def test_temperature_search_gives_up_after_twenty_iterations():
    # 60% RH never reaches 2.0 kPa below 85°F: the bracket walks to the top edge.
    search = search_temperature_for_target(60, 2.0, "F")
    assert not search.converged
    assert search.iterations == 20
    assert search.temperature == pytest.approx(85 - 20 / 2 ** 21)


def test_temperature_search_low_edge_celsius():
    search = search_temperature_for_target(80, 0.05, "C")
    assert not search.converged
    assert search.temperature == pytest.approx(18 + 11 / 2 ** 21)


def test_temperature_search_with_leaf_offset_returns_air_temperature():
    search = search_temperature_for_target(60, 1.0, "F", leaf_offset=3)
    assert search.converged
    assert vpd_for_reading(search.temperature, "F", 60, leaf_offset=3) == pytest.approx(1.0, abs=0.01)
    plain = search_temperature_for_target(60, 1.0, "F")
    assert search.temperature > plain.temperature


def test_band_reachability():
    assert temperature_band_reaches(60, 1.0, "F")
    assert not temperature_band_reaches(60, 2.0, "F")
    assert not temperature_band_reaches(80, 1.0, "F")
