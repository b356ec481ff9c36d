import random
from pathlib import Path

import pytest

from src.starforge.generation.model import GenerationConfig, NormalDistribution
from src.starforge.generation.names import NameTable

DATA_PATH = Path(__file__).parent.parent / "data"


def fixed(value: float) -> NormalDistribution:
    """A distribution that always returns ``value``."""
    return NormalDistribution(mean=value, std=0.0)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def sol_names() -> NameTable:
    return NameTable(names=["Sol"])


@pytest.fixture
def fixed_config() -> GenerationConfig:
    """Sun-like star with three identical Earth-like planets, spacing 0.5."""
    return GenerationConfig(
        star_mass=fixed(1.0),
        star_radius=fixed(1.0),
        planet_mass=fixed(1.0),
        planet_radius=fixed(1.0),
        spacing_factor=fixed(0.5),
        planet_count=fixed(3.0),
    )


@pytest.fixture
def empty_config() -> GenerationConfig:
    return GenerationConfig(planet_count=fixed(0.0))


@pytest.fixture
def distributions_yaml_path() -> Path:
    return DATA_PATH / "generation" / "distributions.yaml"
