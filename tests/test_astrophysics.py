import math

import numpy as np
import pytest

from src.starforge.physics.astrophysics import (
    AU_M,
    SOLAR_MASS_KG,
    SOLAR_RADIUS_M,
    TWO_PI,
    PhysicsError,
    angular_speed_from_period,
    density_from_mass_and_radius,
    inner_limit_au,
    normalize_angle,
    nth_orbit,
    orbit_period_days,
    orbit_period_from_radius_and_mass,
    star_density,
    system_inner_limit_from_star_radius_and_density,
)


def test_density_of_the_sun():
    density = density_from_mass_and_radius(SOLAR_MASS_KG, SOLAR_RADIUS_M)
    assert density == pytest.approx(1410.0, rel=1e-2)
    assert star_density(1.0, 1.0) == pytest.approx(density)


def test_density_of_unit_sphere():
    assert density_from_mass_and_radius(4.0 / 3.0 * math.pi, 1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("radius", [0.0, -1.0])
def test_density_rejects_non_positive_radius(radius):
    with pytest.raises(PhysicsError):
        density_from_mass_and_radius(1.0, radius)


def test_density_accepts_arrays():
    densities = density_from_mass_and_radius(np.array([1.0, 8.0]), np.array([1.0, 2.0]))
    assert densities[0] == pytest.approx(densities[1])


def test_inner_limit_scales_with_radius():
    small = system_inner_limit_from_star_radius_and_density(1.0e8, 1400.0)
    large = system_inner_limit_from_star_radius_and_density(2.0e8, 1400.0)
    assert large == pytest.approx(2 * small)


def test_inner_limit_for_the_sun():
    limit_m = system_inner_limit_from_star_radius_and_density(SOLAR_RADIUS_M, star_density(1.0, 1.0))
    assert limit_m > SOLAR_RADIUS_M
    assert inner_limit_au(1.0, 1.0) == pytest.approx(limit_m / AU_M)
    assert inner_limit_au(1.0, 1.0) == pytest.approx(0.0072, rel=1e-2)


def test_inner_limit_rejects_bad_input():
    with pytest.raises(PhysicsError):
        system_inner_limit_from_star_radius_and_density(0.0, 1400.0)
    with pytest.raises(PhysicsError):
        system_inner_limit_from_star_radius_and_density(1.0e8, -1.0)


@pytest.mark.parametrize("first_radius", [0.0072, 0.5, 1.0, 3.7])
@pytest.mark.parametrize("spacing", [0.05, 0.4, 1.0])
def test_nth_orbit_zero_is_first_orbit(first_radius, spacing):
    assert nth_orbit(first_radius, spacing, 0) == first_radius


@pytest.mark.parametrize("spacing", [0.01, 0.05, 0.4, 1.0, 2.5])
def test_nth_orbit_strictly_increasing(spacing):
    radii = [nth_orbit(0.1, spacing, n) for n in range(12)]
    assert all(outer > inner for inner, outer in zip(radii, radii[1:]))


def test_nth_orbit_is_geometric():
    assert nth_orbit(1.0, 0.5, 3) == pytest.approx(1.5 ** 3)
    assert nth_orbit(2.0, 0.4, 1) == pytest.approx(nth_orbit(1.0, 0.4, 1) * 2.0)


def test_nth_orbit_rejects_bad_input():
    with pytest.raises(PhysicsError):
        nth_orbit(1.0, 0.4, -1)
    with pytest.raises(PhysicsError):
        nth_orbit(1.0, -1.0, 2)


def test_earth_orbit_period():
    assert orbit_period_days(1.0, 1.0) == pytest.approx(365.25, rel=1e-3)


def test_period_grows_with_radius_and_shrinks_with_mass():
    assert orbit_period_days(2.0, 1.0) > orbit_period_days(1.0, 1.0)
    assert orbit_period_days(1.0, 2.0) < orbit_period_days(1.0, 1.0)
    # Kepler: T^2 proportional to a^3
    assert orbit_period_days(4.0, 1.0) == pytest.approx(8.0 * orbit_period_days(1.0, 1.0))


def test_period_rejects_non_positive_input():
    with pytest.raises(PhysicsError):
        orbit_period_from_radius_and_mass(0.0, SOLAR_MASS_KG)
    with pytest.raises(PhysicsError):
        orbit_period_from_radius_and_mass(AU_M, 0.0)


def test_angular_speed_is_two_pi_over_period():
    assert angular_speed_from_period(365.25) == pytest.approx(TWO_PI / 365.25)
    with pytest.raises(PhysicsError):
        angular_speed_from_period(0.0)


@pytest.mark.parametrize("theta, expected", [
    (0.0, 0.0),
    (1.0, 1.0),
    (TWO_PI, 0.0),
    (7.0, 7.0 - TWO_PI),
    (-1.0, TWO_PI - 1.0),
    (5 * TWO_PI + 0.25, 0.25),
])
def test_normalize_angle(theta, expected):
    assert normalize_angle(theta) == pytest.approx(expected, abs=1e-12)


def test_normalize_angle_never_returns_two_pi():
    wrapped = normalize_angle(-1e-20)
    assert 0.0 <= wrapped < TWO_PI


def test_normalize_angle_arrays():
    wrapped = normalize_angle(np.array([-1.0, 0.5, 13.0, -1e-20]))
    assert np.all(wrapped >= 0.0)
    assert np.all(wrapped < TWO_PI)
