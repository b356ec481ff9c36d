from __future__ import annotations
from typing import Optional
import logging
import random

from ..core.ids import SystemId
from ..core.state import UniverseState
from ..bodies.solar_system import SolarSystem
from .model import GenerationConfig
from .names import NameTable

logger = logging.getLogger(__name__)


def generate_system(system_id_str: str, rng: random.Random, config: GenerationConfig, names: Optional[NameTable] = None) -> SolarSystem:
    """Generates a single solar system. The id is only used for logging."""
    system = SolarSystem.generate(None, rng=rng, config=config, names=names)
    logger.debug("System %s: %s with %d planets", system_id_str, system.get_name(), system.get_n_planets())
    return system


def generate_universe(
    rng: random.Random,
    n_systems: int,
    config: Optional[GenerationConfig] = None,
    names: Optional[NameTable] = None,
    initial_state: Optional[UniverseState] = None,
) -> UniverseState:
    """
    Generates a UniverseState with N systems, potentially extending an initial state.
    Systems already present in the initial state are kept as they are.
    """
    if n_systems < 0:
        raise ValueError(f"n_systems must be non-negative, got {n_systems}")
    config = config or GenerationConfig()

    if initial_state:
        universe_state = initial_state
        universe_state.rng = rng # Ensure rng is updated if passed
    else:
        universe_state = UniverseState(seed=rng.randint(0, 2**32 - 1), rng=rng)

    existing_system_ids = set(universe_state.systems.keys())
    for i in range(n_systems):
        system_id = SystemId(f"sys-{i+1}")
        if system_id in existing_system_ids:
            continue # Skip if system already exists
        universe_state.systems[system_id] = generate_system(system_id, rng, config, names)

    logger.info("Generated universe with %d systems", len(universe_state.systems))
    return universe_state
