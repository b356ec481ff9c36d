from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING
import logging
import math
import random
import string

from ..physics.astrophysics import (
    EARTH_MASS_SOLAR,
    TWO_PI,
    angular_speed_from_period,
    normalize_angle,
    nth_orbit,
    orbit_period_days,
)
from ..generation.model import GenerationConfig
from .capabilities import CanOrbit, CelestialBody, CelestialBodyType, Displayable

if TYPE_CHECKING:
    from .solar_system import SolarSystem, SystemSnapshot

logger = logging.getLogger(__name__)

# Exoplanet convention: the star is "a", planets follow from "b"
PLANET_LETTERS = string.ascii_lowercase[1:]


def planet_designation(star_name: str, index: int) -> str:
    if index < len(PLANET_LETTERS):
        return f"{star_name} {PLANET_LETTERS[index]}"
    return f"{star_name} {index + 1}"


@dataclass
class Planet(CelestialBody["SystemSnapshot"], CanOrbit["SolarSystem"], Displayable):
    name: str
    mass: float # solar masses, so it sums with the star
    radius: float # Earth radii
    orbit_radius: float # AU
    orbit_period: float # days
    angular_speed: float # radians per day
    orbit_position: float = 0.0 # radians, [0, 2pi)
    revolutions: int = 0 # completed laps since generation

    def __post_init__(self):
        if self.mass <= 0 or self.radius <= 0:
            raise ValueError(f"Planet '{self.name}' needs positive mass and radius, got {self.mass}, {self.radius}")
        if self.orbit_radius <= 0 or self.orbit_period <= 0:
            raise ValueError(f"Planet '{self.name}' needs a positive orbit, got radius {self.orbit_radius}, period {self.orbit_period}")
        if not (0.0 <= self.orbit_position < TWO_PI):
            raise ValueError(f"Orbit position of '{self.name}' must lie in [0, 2pi), got {self.orbit_position}")

    @classmethod
    def generate(
        cls,
        host: "SystemSnapshot",
        rng: Optional[random.Random] = None,
        config: Optional[GenerationConfig] = None,
    ) -> "Planet":
        """
        Generates the next planet of a system from a snapshot of the planets
        already placed. The new planet takes orbit index ``host.get_n_planets()``.

        The first planet sits on the star's inner limit; later ones follow the
        geometric spacing from the first planet's orbit. Mass and radius do not
        depend on the orbit.
        """
        rng = rng or random.Random()
        config = config or GenerationConfig()

        index = host.get_n_planets()
        if index == 0:
            base_radius = host.get_inner_limit()
        else:
            base_radius = host.get_planets()[0].get_orbit_radius()
        orbit_radius = float(nth_orbit(base_radius, host.spacing_factor, index))

        mass = config.planet_mass.sample_positive(rng, "planet mass") * EARTH_MASS_SOLAR
        radius = config.planet_radius.sample_positive(rng, "planet radius")

        orbit_period = float(orbit_period_days(orbit_radius, host.get_star_mass()))
        angular_speed = float(angular_speed_from_period(orbit_period))

        orbit_position = 0.0
        if config.initial_phase == "random":
            orbit_position = normalize_angle(rng.uniform(0.0, TWO_PI))

        planet = cls(
            name=planet_designation(host.get_name(), index),
            mass=mass,
            radius=radius,
            orbit_radius=orbit_radius,
            orbit_period=orbit_period,
            angular_speed=angular_speed,
            orbit_position=orbit_position,
        )
        logger.debug(
            "Generated planet %s: orbit_radius=%.4f AU, period=%.2f days",
            planet.name, orbit_radius, orbit_period,
        )
        return planet

    def get_type(self) -> CelestialBodyType:
        return CelestialBodyType.PLANET

    def get_mass(self) -> float:
        return self.mass

    def get_radius(self) -> float:
        return self.radius

    def get_orbit_radius(self) -> float:
        return self.orbit_radius

    def get_orbit_period(self) -> float:
        return self.orbit_period

    def get_orbit_position(self) -> float:
        return self.orbit_position

    def get_angular_speed(self) -> float:
        return self.angular_speed

    def update_orbit_position(self, dt: float = 1.0) -> None:
        """Moves the planet along its orbit by ``angular_speed * dt`` radians."""
        if dt < 0:
            raise ValueError(f"Tick duration must be non-negative, got {dt}")
        advanced = self.orbit_position + self.angular_speed * dt
        self.revolutions += int(math.floor(advanced / TWO_PI))
        self.orbit_position = normalize_angle(advanced)

    def is_satellite_of(self, host: "SolarSystem") -> bool:
        """True if ``host`` has a planet with this name on this orbit."""
        return any(
            planet.name == self.name and planet.orbit_radius == self.orbit_radius
            for planet in host.get_satellites()
        )

    def get_name(self) -> str:
        return self.name

    def get_properties(self) -> List[List[str]]:
        return [
            ["Name", self.name],
            ["Mass", f"{self.mass / EARTH_MASS_SOLAR:.3f} Earth masses"],
            ["Radius", f"{self.radius:.3f} Earth radii"],
            ["Orbit radius", f"{self.orbit_radius:.4f} AU"],
            ["Orbit period", f"{self.orbit_period:.2f} days"],
            ["Orbit position", f"{math.degrees(self.orbit_position):.1f} deg"],
        ]
