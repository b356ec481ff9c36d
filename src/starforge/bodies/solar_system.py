from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import logging
import random

from ..physics.astrophysics import inner_limit_au, nth_orbit
from ..generation.model import GenerationConfig
from ..generation.names import NameTable
from .capabilities import CelestialBody, CelestialBodyType, Displayable, Orbitable
from .planet import Planet
from .star import Star

logger = logging.getLogger(__name__)


class EmptySystemError(ValueError):
    """Raised when a query needs at least one planet and the system has none."""
    pass


def _inner_limit(star: Star) -> float:
    return float(inner_limit_au(star.get_mass(), star.get_radius()))


def _nth_orbit_radius(planets: Sequence[Planet], spacing_factor: float, n: int) -> float:
    if not planets:
        return 0.0
    return float(nth_orbit(planets[0].get_orbit_radius(), spacing_factor, n))


def _check_orbit_order(planets: Sequence[Planet]):
    for inner, outer in zip(planets, planets[1:]):
        if not outer.orbit_radius > inner.orbit_radius:
            raise ValueError(
                f"Planet '{outer.name}' at {outer.orbit_radius} AU is not outside '{inner.name}' at {inner.orbit_radius} AU"
            )


@dataclass(frozen=True)
class SystemSnapshot:
    """
    Read-only copy of a system under construction, handed to Planet.generate.
    Holds its own planet copies, so nothing generated from it can reach back
    into the system being built.
    """
    star: Star
    planets: Tuple[Planet, ...]
    spacing_factor: float

    def get_name(self) -> str:
        return self.star.get_name()

    def get_star(self) -> Star:
        return self.star

    def get_star_mass(self) -> float:
        return self.star.get_mass()

    def get_n_planets(self) -> int:
        return len(self.planets)

    def get_planets(self) -> Tuple[Planet, ...]:
        return self.planets

    def get_inner_limit(self) -> float:
        return _inner_limit(self.star)

    def get_nth_orbit_radius(self, n: int) -> float:
        return _nth_orbit_radius(self.planets, self.spacing_factor, n)


class SolarSystemBuilder:
    """Accumulates planets one at a time, each generated from a fresh snapshot."""

    def __init__(self, star: Star, spacing_factor: float):
        if spacing_factor <= 0:
            raise ValueError(f"Spacing factor must be positive, got {spacing_factor}")
        self.star = star
        self.spacing_factor = spacing_factor
        self._planets: List[Planet] = []

    def snapshot(self) -> SystemSnapshot:
        return SystemSnapshot(
            star=self.star,
            planets=tuple(deepcopy(p) for p in self._planets),
            spacing_factor=self.spacing_factor,
        )

    def add_planet(self, planet: Planet) -> "SolarSystemBuilder":
        _check_orbit_order(self._planets[-1:] + [planet])
        self._planets.append(planet)
        return self

    def build(self) -> "SolarSystem":
        return SolarSystem(star=self.star, planets=list(self._planets), spacing_factor=self.spacing_factor)


@dataclass
class SolarSystem(CelestialBody[None], Orbitable[Planet], Displayable):
    star: Star
    planets: List[Planet] = field(default_factory=list) # ordered by increasing orbit radius
    spacing_factor: float = 0.4

    def __post_init__(self):
        if self.spacing_factor <= 0:
            raise ValueError(f"Spacing factor must be positive, got {self.spacing_factor}")
        _check_orbit_order(self.planets)

    @classmethod
    def generate(
        cls,
        host: None = None,
        rng: Optional[random.Random] = None,
        config: Optional[GenerationConfig] = None,
        names: Optional[NameTable] = None,
    ) -> "SolarSystem":
        """
        Generates a star and its planets.

        Planets are generated in order, each from a snapshot holding exactly
        the planets placed before it, so planet k sees planets 0..k-1.

        Args:
            host: Unused, systems do not depend on another body.
            rng: Source of randomness; seed it for reproducible systems.
            config: Sampling parameters; defaults if omitted.
            names: Star name table; the process-wide table if omitted.

        Returns:
            A fully generated SolarSystem, possibly with no planets.
        """
        rng = rng or random.Random()
        config = config or GenerationConfig()

        spacing_factor = config.spacing_factor.sample(rng)
        if spacing_factor < config.min_spacing_factor:
            logger.debug("Spacing factor %.3f raised to minimum %.3f", spacing_factor, config.min_spacing_factor)
            spacing_factor = config.min_spacing_factor

        builder = SolarSystemBuilder(
            star=Star.generate(None, rng=rng, config=config, names=names),
            spacing_factor=spacing_factor,
        )

        n_planets = config.sample_planet_count(rng)
        for _ in range(n_planets):
            builder.add_planet(Planet.generate(builder.snapshot(), rng=rng, config=config))

        system = builder.build()
        logger.debug(
            "Generated system %s with %d planets (spacing %.3f)",
            system.get_name(), system.get_n_planets(), spacing_factor,
        )
        return system

    def get_type(self) -> CelestialBodyType:
        return CelestialBodyType.SOLAR_SYSTEM

    def get_mass(self) -> float:
        """Star mass plus all planet masses, in solar masses."""
        return self.star.get_mass() + sum(planet.get_mass() for planet in self.planets)

    def get_radius(self) -> float:
        """Orbit radius of the outermost planet in AU."""
        if not self.planets:
            raise EmptySystemError(f"System '{self.get_name()}' has no planets, so it has no radius.")
        return self.planets[-1].get_orbit_radius()

    def get_n_planets(self) -> int:
        return len(self.planets)

    def get_star(self) -> Star:
        return self.star

    def get_star_mass(self) -> float:
        return self.star.get_mass()

    def get_planets(self) -> List[Planet]:
        return deepcopy(self.planets)

    def get_satellites(self) -> List[Planet]:
        return self.get_planets()

    def get_inner_limit(self) -> float:
        """Closest orbit a planet may take around the star, in AU."""
        return _inner_limit(self.star)

    def get_nth_orbit_radius(self, n: int) -> float:
        """Radius in AU of orbit ``n`` counted from the first planet; 0.0 when there are no planets."""
        return _nth_orbit_radius(self.planets, self.spacing_factor, n)

    def snapshot(self) -> SystemSnapshot:
        return SystemSnapshot(
            star=self.star,
            planets=tuple(deepcopy(p) for p in self.planets),
            spacing_factor=self.spacing_factor,
        )

    def update_orbits(self, dt: float = 1.0) -> None:
        if dt < 0:
            raise ValueError(f"Tick duration must be non-negative, got {dt}")
        for planet in self.planets:
            planet.update_orbit_position(dt)

    def get_name(self) -> str:
        return self.star.get_name()

    def get_properties(self) -> List[List[str]]:
        radius = f"{self.get_radius():.4f} AU" if self.planets else "n/a"
        return [
            ["Name", self.get_name()],
            ["Star", self.star.get_name()],
            ["Planets", str(self.get_n_planets())],
            ["Mass", f"{self.get_mass():.4f} solar masses"],
            ["Radius", radius],
            ["Inner limit", f"{self.get_inner_limit():.4f} AU"],
            ["Spacing factor", f"{self.spacing_factor:.3f}"],
        ]
