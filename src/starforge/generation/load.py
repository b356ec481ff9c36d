from __future__ import annotations
from dataclasses import fields
from pathlib import Path
from typing import Dict, Any
import logging
import yaml

from .model import GenerationConfig, GenerationSchemaError, NormalDistribution, INITIAL_PHASES

logger = logging.getLogger(__name__)

DISTRIBUTION_NAMES = ("star_mass", "star_radius", "planet_mass", "planet_radius", "spacing_factor", "planet_count")
DISTRIBUTION_KEYS = {"mean", "std", "min", "max"}
SYSTEM_KEYS = {"min_spacing_factor", "initial_phase"}


def validate_distribution_definition(dist_data: Dict[str, Any], path: Path, name: str):
    """Validates a single normal distribution definition."""
    if not isinstance(dist_data, dict):
        raise GenerationSchemaError(f"Distribution '{name}' in {path} must be a mapping: {dist_data}")
    for key in ["mean", "std"]:
        if key not in dist_data:
            raise GenerationSchemaError(f"Missing key '{key}' in distribution '{name}' in {path}")
    unknown = set(dist_data) - DISTRIBUTION_KEYS
    if unknown:
        raise GenerationSchemaError(f"Unknown keys {sorted(unknown)} in distribution '{name}' in {path}")
    for key, value in dist_data.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise GenerationSchemaError(f"Invalid '{key}' in distribution '{name}' in {path}: {value}")


def validate_generation_schema(data: Dict[str, Any], path: Path):
    """Validates the schema for distributions.yaml."""
    if not isinstance(data, dict):
        raise GenerationSchemaError(f"Top level of {path} must be a mapping.")
    if "distributions" not in data:
        raise GenerationSchemaError(f"Missing 'distributions' key in {path}")

    distributions = data["distributions"]
    if not isinstance(distributions, dict):
        raise GenerationSchemaError(f"'distributions' in {path} must be a mapping.")
    for name, dist_data in distributions.items():
        if name not in DISTRIBUTION_NAMES:
            raise GenerationSchemaError(f"Unknown distribution '{name}' in {path}")
        validate_distribution_definition(dist_data, path, name)

    system_data = data.get("system", {}) or {}
    if not isinstance(system_data, dict):
        raise GenerationSchemaError(f"'system' in {path} must be a mapping.")
    unknown = set(system_data) - SYSTEM_KEYS
    if unknown:
        raise GenerationSchemaError(f"Unknown keys {sorted(unknown)} in 'system' in {path}")
    if "initial_phase" in system_data and system_data["initial_phase"] not in INITIAL_PHASES:
        raise GenerationSchemaError(f"Invalid 'initial_phase' in {path}: {system_data['initial_phase']}")


def _build_distribution(dist_data: Dict[str, Any]) -> NormalDistribution:
    return NormalDistribution(
        mean=dist_data["mean"],
        std=dist_data["std"],
        minimum=dist_data.get("min"),
        maximum=dist_data.get("max"),
    )


def generation_config_from_dict(data: Dict[str, Any], path: Path = Path("<memory>")) -> GenerationConfig:
    """Builds a GenerationConfig from already-parsed data. Missing entries keep their defaults."""
    validate_generation_schema(data, path)
    defaults = GenerationConfig()
    kwargs = {f.name: getattr(defaults, f.name) for f in fields(GenerationConfig)}

    for name, dist_data in data["distributions"].items():
        try:
            kwargs[name] = _build_distribution(dist_data)
        except GenerationSchemaError as e:
            raise GenerationSchemaError(f"Distribution '{name}' in {path}: {e}") from e

    kwargs.update(data.get("system", {}) or {})
    return GenerationConfig(**kwargs)


def load_generation_config(path: Path) -> GenerationConfig:
    """Loads and validates generation parameters from a YAML file."""
    with open(path, 'r') as f:
        data = yaml.safe_load(f)
    if data is None:
        raise GenerationSchemaError(f"YAML file '{path}' is empty or malformed.")
    config = generation_config_from_dict(data, path)
    logger.info("Loaded generation config from %s", path)
    return config
