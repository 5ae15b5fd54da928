"""
Console entry point.

    python -m tournament_sim groups.json exhibitions.json --seed 42
"""

import argparse
import asyncio
import logging
import sys

from .core.config import SemifinalMode, load_settings
from .report import render_report
from .simulator import TournamentError, simulate_tournament
from .sources import JsonFileSource, SourceError


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a basketball tournament.")
    parser.add_argument("groups", help="Path to groups.json")
    parser.add_argument("exhibitions", help="Path to exhibitions.json")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    parser.add_argument(
        "--semifinal-mode",
        choices=[m.value for m in SemifinalMode],
        default=None,
        help="How quarterfinal winners are paired"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    settings = load_settings().with_overrides(
        seed=args.seed,
        semifinal_mode=SemifinalMode(args.semifinal_mode) if args.semifinal_mode else None
    )

    source = JsonFileSource(args.groups, args.exhibitions)
    try:
        groups, exhibitions = asyncio.run(source.fetch_all())
        result = simulate_tournament(groups, exhibitions, settings=settings)
    except (SourceError, TournamentError) as e:
        logging.getLogger("tournament_sim").error("Simulation failed: %s", e)
        return 1

    sys.stdout.write(render_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
