from __future__ import annotations
from enum import Enum
from typing import List, Protocol, Sequence, TypeVar, runtime_checkable


class CelestialBodyType(Enum):
    STAR = "star"
    PLANET = "planet"
    MOON = "moon" # Reserved, not generated yet
    ASTEROID = "asteroid" # Reserved
    COMET = "comet" # Reserved
    GAS_GIANT = "gas_giant" # Reserved
    NEBULA = "nebula" # Reserved
    SOLAR_SYSTEM = "solar_system"


class MenuColor(Enum):
    """Presentation hint for the display layer. Nothing in the simulation reads it."""
    NEUTRAL = "white"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"


HostT = TypeVar("HostT", contravariant=True)
SatelliteT = TypeVar("SatelliteT", bound="CanOrbit", covariant=True)
OrbitHostT = TypeVar("OrbitHostT", bound="Orbitable")


@runtime_checkable
class CelestialBody(Protocol[HostT]):
    """
    Anything with a mass and a radius that can be generated from a host.

    ``generate`` is a classmethod on implementers and is the only way to build
    a valid instance. Bodies with no dependency take ``None`` as host.
    """

    @classmethod
    def generate(cls, host: HostT, *args, **kwargs) -> "CelestialBody[HostT]":
        ...

    def get_type(self) -> CelestialBodyType:
        ...

    def get_mass(self) -> float:
        ...

    def get_radius(self) -> float:
        ...


@runtime_checkable
class Orbitable(Protocol[SatelliteT]):
    """A body that other bodies orbit."""

    def get_satellites(self) -> Sequence[SatelliteT]:
        """Returns a copy of the satellites, not a live view."""
        ...

    def update_orbits(self, dt: float = 1.0) -> None:
        """Advances every satellite by one tick of ``dt``. Never reorders or resizes."""
        ...


@runtime_checkable
class CanOrbit(Protocol[OrbitHostT]):
    """A body that travels a circular orbit around an ``Orbitable`` host."""

    def get_orbit_radius(self) -> float:
        ...

    def get_orbit_period(self) -> float:
        ...

    def get_orbit_position(self) -> float:
        """Position along the orbit in radians, [0, 2pi), from the rightmost point."""
        ...

    def get_angular_speed(self) -> float:
        ...

    def update_orbit_position(self, dt: float = 1.0) -> None:
        ...

    def is_satellite_of(self, host: OrbitHostT) -> bool:
        ...


@runtime_checkable
class Displayable(Protocol):
    """
    Something the display layer can list. The rows returned by
    ``get_properties`` are label/value pairs owned by the display layer.
    """

    def get_name(self) -> str:
        ...

    def get_properties(self) -> List[List[str]]:
        return []

    def get_menu_color(self) -> MenuColor:
        return MenuColor.NEUTRAL
