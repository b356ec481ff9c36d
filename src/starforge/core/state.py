import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .ids import SystemId
from .rng import get_seeded_rng
from ..bodies.solar_system import SolarSystem


@dataclass
class UniverseState:
    seed: int
    tick: int = 0
    elapsed: float = 0.0 # simulated days since generation
    rng: Optional[random.Random] = None
    systems: Dict[SystemId, SolarSystem] = field(default_factory=dict)

    def __post_init__(self):
        if self.rng is None:
            self.rng = get_seeded_rng(self.seed)

    def get_system(self, system_id: SystemId) -> SolarSystem:
        if system_id not in self.systems:
            raise KeyError(f"System with ID '{system_id}' not found.")
        return self.systems[system_id]

    def system_ids(self) -> List[SystemId]:
        return list(self.systems.keys())
