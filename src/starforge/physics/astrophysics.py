"""
Numeric routines used when generating and advancing star systems.

All functions accept plain floats or numpy arrays. Inputs are SI unless the
function name says otherwise; the ``*_days`` / ``*_au`` helpers bridge to the
game units used by the body accessors (solar and Earth masses/radii, AU, days).
"""
import math

import numpy as np
from scipy import constants

G = constants.G  # m^3 kg^-1 s^-2
AU_M = constants.au
DAY_S = constants.day

SOLAR_MASS_KG = 1.98847e30
SOLAR_RADIUS_M = 6.957e8
EARTH_MASS_KG = 5.9722e24
EARTH_RADIUS_M = 6.371e6
EARTH_MASS_SOLAR = EARTH_MASS_KG / SOLAR_MASS_KG

# Bulk density of Earth, used as the satellite density in the Roche limit.
ROCKY_BODY_DENSITY = 5513.0  # kg/m^3
ROCHE_FLUID_COEFFICIENT = 2.44

TWO_PI = 2.0 * math.pi


class PhysicsError(Exception):
    """Raised when a routine is asked to work outside its physical domain."""
    pass


def _require_positive(name: str, value) -> None:
    if np.any(np.asarray(value) <= 0):
        raise PhysicsError(f"{name} must be positive, got {value}")


def density_from_mass_and_radius(mass, radius):
    """
    Mean density of a uniform sphere.

    Args:
        mass: Mass in kg.
        radius: Radius in m.

    Returns:
        Density in kg/m^3.

    Raises:
        PhysicsError: If the radius is zero or negative.
    """
    _require_positive("radius", radius)
    return mass / (4.0 / 3.0 * np.pi * np.power(radius, 3))


def system_inner_limit_from_star_radius_and_density(radius, density):
    """
    Minimum orbit radius around a star, below which a rocky planet would be
    torn apart by tides (fluid Roche limit).

    Args:
        radius: Star radius in m.
        density: Star density in kg/m^3.

    Returns:
        Inner limit in m.
    """
    _require_positive("radius", radius)
    _require_positive("density", density)
    return ROCHE_FLUID_COEFFICIENT * radius * np.cbrt(density / ROCKY_BODY_DENSITY)


def nth_orbit(first_orbit_radius, spacing_factor, n):
    """
    Radius of the nth orbit of a system whose orbits grow geometrically by
    ``1 + spacing_factor`` per step. ``n = 0`` is the first orbit itself.
    """
    if np.any(np.asarray(n) < 0):
        raise PhysicsError(f"Orbit index must be non-negative, got {n}")
    if np.any(np.asarray(spacing_factor) <= -1.0):
        raise PhysicsError(f"Spacing factor must be greater than -1, got {spacing_factor}")
    return first_orbit_radius * np.power(1.0 + spacing_factor, n)


def orbit_period_from_radius_and_mass(orbit_radius, host_mass):
    """
    Kepler's third law for a body of negligible mass.

    Args:
        orbit_radius: Semi-major axis in m.
        host_mass: Mass of the central body in kg.

    Returns:
        Orbital period in s.
    """
    _require_positive("orbit_radius", orbit_radius)
    _require_positive("host_mass", host_mass)
    return TWO_PI * np.sqrt(np.power(orbit_radius, 3) / (G * host_mass))


def angular_speed_from_period(orbit_period):
    """Mean angular speed in radians per unit of ``orbit_period``."""
    _require_positive("orbit_period", orbit_period)
    return TWO_PI / orbit_period


def orbit_period_days(orbit_radius_au, host_mass_solar):
    """Orbital period in days for an orbit radius in AU around a host in solar masses."""
    seconds = orbit_period_from_radius_and_mass(orbit_radius_au * AU_M, host_mass_solar * SOLAR_MASS_KG)
    return seconds / DAY_S


def star_density(mass_solar, radius_solar):
    """Density in kg/m^3 of a star given in solar units."""
    return density_from_mass_and_radius(mass_solar * SOLAR_MASS_KG, radius_solar * SOLAR_RADIUS_M)


def inner_limit_au(star_mass_solar, star_radius_solar):
    """Inner limit in AU for a star given in solar units."""
    radius_m = star_radius_solar * SOLAR_RADIUS_M
    limit_m = system_inner_limit_from_star_radius_and_density(
        radius_m,
        star_density(star_mass_solar, star_radius_solar),
    )
    return limit_m / AU_M


def normalize_angle(theta):
    """Wraps an angle (or array of angles) into [0, 2pi)."""
    wrapped = np.mod(theta, TWO_PI)
    if np.isscalar(wrapped):
        # np.mod can round up to exactly 2pi for tiny negative inputs
        return 0.0 if wrapped >= TWO_PI else float(wrapped)
    wrapped[wrapped >= TWO_PI] = 0.0
    return wrapped
