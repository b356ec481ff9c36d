from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging
import random

from ..physics.astrophysics import star_density
from ..generation.model import GenerationConfig
from ..generation.names import NameTable, default_name_table
from .capabilities import CelestialBody, CelestialBodyType, Displayable, MenuColor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Star(CelestialBody[None], Displayable):
    name: str
    mass: float # solar masses
    radius: float # solar radii

    def __post_init__(self):
        if self.mass <= 0 or self.radius <= 0:
            raise ValueError(f"Star '{self.name}' needs positive mass and radius, got {self.mass}, {self.radius}")

    @classmethod
    def generate(
        cls,
        host: None = None,
        rng: Optional[random.Random] = None,
        config: Optional[GenerationConfig] = None,
        names: Optional[NameTable] = None,
    ) -> "Star":
        """
        Generates a star. Stars have no host.

        Args:
            host: Unused, stars do not depend on another body.
            rng: Source of randomness; a fresh unseeded one if omitted.
            config: Sampling parameters; defaults if omitted.
            names: Table to draw the name from; the process-wide table if omitted.

        Raises:
            NameTableError: If the name table cannot be loaded or is empty.
        """
        rng = rng or random.Random()
        config = config or GenerationConfig()
        if names is None:
            names = default_name_table()

        name = names.choice(rng)
        mass = config.star_mass.sample_positive(rng, "star mass")
        radius = config.star_radius.sample_positive(rng, "star radius")
        logger.debug("Generated star %s: mass=%.3f radius=%.3f", name, mass, radius)
        return cls(name=name, mass=mass, radius=radius)

    def get_type(self) -> CelestialBodyType:
        return CelestialBodyType.STAR

    def get_mass(self) -> float:
        return self.mass

    def get_radius(self) -> float:
        return self.radius

    def get_density(self) -> float:
        """Mean density in kg/m^3."""
        return float(star_density(self.mass, self.radius))

    def get_name(self) -> str:
        return self.name

    def get_properties(self) -> List[List[str]]:
        return [
            ["Name", self.name],
            ["Mass", f"{self.mass:.3f} solar masses"],
            ["Radius", f"{self.radius:.3f} solar radii"],
            ["Density", f"{self.get_density():.1f} kg/m^3"],
        ]

    def get_menu_color(self) -> MenuColor:
        return MenuColor.YELLOW
