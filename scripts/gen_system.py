import argparse
import logging
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.append(str(Path(__file__).parent.parent))

from src.starforge.core.rng import get_seeded_rng
from src.starforge.core.sim import step, DEFAULT_TICK_DAYS
from src.starforge.generation.load import load_generation_config, GenerationSchemaError
from src.starforge.generation.names import NameTable, NameTableError, DEFAULT_STAR_NAMES_PATH
from src.starforge.generation.system_gen import generate_universe
from src.starforge.reports.gazette import generate_gazette
from src.starforge.reports.system_cards import generate_system_card_report

logger = logging.getLogger("gen_system")


def main():
    parser = argparse.ArgumentParser(description="Generate star systems and advance their orbits.")
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for system generation.",
    )
    parser.add_argument(
        "--n-systems",
        type=int,
        default=1,
        help="Number of star systems to generate.",
    )
    parser.add_argument(
        "--ticks", type=int, default=0, help="Number of ticks to simulate after generation."
    )
    parser.add_argument(
        "--dt", type=float, default=DEFAULT_TICK_DAYS, help="Simulated days per tick."
    )
    parser.add_argument(
        "--config",
        type=str,
        default="data/generation/distributions.yaml",
        help="Path to the generation parameters YAML file.",
    )
    parser.add_argument(
        "--names",
        type=str,
        default=str(DEFAULT_STAR_NAMES_PATH),
        help="Path to the newline-separated star name list.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log generation details.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_generation_config(Path(args.config))
        names = NameTable(path=Path(args.names))
        len(names) # Fail at startup, not at the first star
    except (OSError, GenerationSchemaError, NameTableError) as e:
        logger.error("Startup failed: %s", e)
        sys.exit(1)

    rng = get_seeded_rng(args.seed)
    state = generate_universe(rng, args.n_systems, config=config, names=names)

    for system in state.systems.values():
        print(generate_system_card_report(system))

    for _ in range(args.ticks):
        initial_tick = state.tick
        report = step(state, args.dt)
        print(generate_gazette(report.log, tick=initial_tick))


if __name__ == "__main__":
    main()
