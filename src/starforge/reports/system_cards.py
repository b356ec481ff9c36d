from __future__ import annotations
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..bodies.capabilities import Displayable
    from ..bodies.solar_system import SolarSystem


def _format_rows(rows: List[List[str]], indent: str = "") -> str:
    if not rows:
        return ""
    width = max(len(row[0]) for row in rows if row)
    lines = []
    for row in rows:
        if not row:
            continue
        label, values = row[0], row[1:]
        lines.append(f"{indent}{label.ljust(width)} : {' '.join(values)}")
    return "\n".join(lines) + "\n"


def generate_body_card(body: "Displayable") -> str:
    """Renders any Displayable as a titled block of its property rows."""
    report = f"--- {body.get_name()} ---\n"
    report += _format_rows(body.get_properties())
    return report


def generate_system_card_report(system: "SolarSystem"):
    """
    Generates a summary card for a solar system: the system rows, the star
    rows and one block per planet in orbit order.

    Args:
        system: The SolarSystem to describe.

    Returns:
        A string containing the formatted report.
    """
    report = f"--- System Report: {system.get_name()} ---\n"
    report += _format_rows(system.get_properties())

    report += "\n--- Star ---\n"
    report += _format_rows(system.get_star().get_properties())

    report += "\n--- Planets ---\n"
    planets = system.get_planets()
    if not planets:
        report += "No planets.\n"
    for i, planet in enumerate(planets):
        report += f"{i+1}. {planet.get_name()}\n"
        report += _format_rows(planet.get_properties(), indent="   ")

    report += "--- End Report ---\n"
    return report
