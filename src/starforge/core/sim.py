from dataclasses import dataclass

from .state import UniverseState
from .log import AuditLog

DEFAULT_TICK_DAYS = 1.0


@dataclass
class TickReport:
    tick: int
    dt: float
    log: AuditLog


def step(state: UniverseState, dt: float = DEFAULT_TICK_DAYS) -> TickReport:
    """
    Advances every system's orbits by one tick of ``dt`` simulated days.
    The caller owns the clock; the same ``dt`` should be used for every tick.
    """
    if dt < 0:
        raise ValueError(f"Tick duration must be non-negative, got {dt}")
    log = AuditLog()

    for system_id, system in state.systems.items():
        laps_before = {planet.name: planet.revolutions for planet in system.planets}
        system.update_orbits(dt)

        for planet in system.planets:
            completed = planet.revolutions - laps_before[planet.name]
            if completed > 0:
                log.add_entry(
                    "orbits.revolution",
                    state.tick,
                    system_id=system_id,
                    body_name=planet.name,
                    reason=f"{planet.name} completed {completed} orbit(s), {planet.revolutions} in total.",
                    details={"completed": completed, "total": planet.revolutions},
                )

        if system.planets:
            log.add_entry(
                "orbits.update",
                state.tick,
                system_id=system_id,
                body_name=system.get_name(),
                reason=f"Advanced {system.get_n_planets()} planets by {dt:g} days.",
                details={"positions": {p.name: p.orbit_position for p in system.planets}},
            )
        else:
            log.add_entry("orbits.update", state.tick, system_id=system_id, body_name=system.get_name(), reason="No planets, nothing to advance.")

    # --- End of Tick ---
    state.tick += 1
    state.elapsed += dt

    return TickReport(tick=state.tick, dt=dt, log=log)
