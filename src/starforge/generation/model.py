from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import math
import random


class GenerationSchemaError(Exception):
    """Raised when generation parameters are invalid. Always a configuration defect."""
    pass


INITIAL_PHASES = ("zero", "random")


@dataclass(frozen=True)
class NormalDistribution:
    mean: float
    std: float
    minimum: Optional[float] = None # Samples below are clamped up
    maximum: Optional[float] = None # Samples above are clamped down

    def __post_init__(self):
        if not (isinstance(self.mean, (int, float)) and math.isfinite(self.mean)):
            raise GenerationSchemaError(f"Invalid mean for normal distribution: {self.mean}")
        if not (isinstance(self.std, (int, float)) and math.isfinite(self.std) and self.std >= 0):
            raise GenerationSchemaError(f"Invalid standard deviation for normal distribution: {self.std}")
        for bound in (self.minimum, self.maximum):
            if bound is not None and not (isinstance(bound, (int, float)) and math.isfinite(bound)):
                raise GenerationSchemaError(f"Invalid bound for normal distribution: {bound}")
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise GenerationSchemaError(f"Distribution minimum {self.minimum} exceeds maximum {self.maximum}")

    def sample(self, rng: random.Random) -> float:
        value = rng.gauss(self.mean, self.std) if self.std > 0 else float(self.mean)
        if self.minimum is not None:
            value = max(self.minimum, value)
        if self.maximum is not None:
            value = min(self.maximum, value)
        return value

    def sample_positive(self, rng: random.Random, label: str) -> float:
        """Samples and rejects non-positive results, which mean the bounds are misconfigured."""
        value = self.sample(rng)
        if value <= 0:
            raise GenerationSchemaError(f"Distribution for {label} produced non-positive value {value}; set a positive 'min'.")
        return value


@dataclass(frozen=True)
class GenerationConfig:
    star_mass: NormalDistribution = field(default_factory=lambda: NormalDistribution(1.0, 0.3, minimum=0.08)) # solar masses
    star_radius: NormalDistribution = field(default_factory=lambda: NormalDistribution(1.0, 0.25, minimum=0.1)) # solar radii
    planet_mass: NormalDistribution = field(default_factory=lambda: NormalDistribution(1.0, 0.5, minimum=0.01)) # Earth masses
    planet_radius: NormalDistribution = field(default_factory=lambda: NormalDistribution(1.0, 0.3, minimum=0.1)) # Earth radii
    spacing_factor: NormalDistribution = field(default_factory=lambda: NormalDistribution(0.4, 0.2))
    planet_count: NormalDistribution = field(default_factory=lambda: NormalDistribution(5.0, 1.0))
    min_spacing_factor: float = 0.05
    initial_phase: str = "zero"

    def __post_init__(self):
        if not (isinstance(self.min_spacing_factor, (int, float)) and self.min_spacing_factor > 0):
            raise GenerationSchemaError(f"min_spacing_factor must be positive, got {self.min_spacing_factor}")
        if self.initial_phase not in INITIAL_PHASES:
            raise GenerationSchemaError(f"initial_phase must be one of {INITIAL_PHASES}, got '{self.initial_phase}'")

    def sample_planet_count(self, rng: random.Random) -> int:
        # Truncated toward zero, then floored at zero
        return max(0, int(self.planet_count.sample(rng)))
