"""Command line entry point: python -m tripodplanner [options]."""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import orjson

from tripodplanner.checker import CatalogError
from tripodplanner.constants import CATEGORIES, DEFAULT_CAPACITY
from tripodplanner.data import SourceDataHandler
from tripodplanner.optimizer import LibraryOptimizer
from tripodplanner.report import format_solution


def _parse_capacity(text: str) -> dict[int, int]:
    values = [int(v) for v in text.split(",")]
    if len(values) == 1:
        values = values * len(CATEGORIES)
    if len(values) != len(CATEGORIES):
        raise argparse.ArgumentTypeError(
            f"expected 1 or {len(CATEGORIES)} comma-separated values ({', '.join(CATEGORIES)})")
    return dict(enumerate(values))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tripodplanner",
        description="Choose which items to store in the tripod library.",
    )
    parser.add_argument("--resources", type=Path, default=None,
                        help="directory holding the catalog CSV files (default: bundled sample)")
    parser.add_argument("--items", default=None, help="items CSV file name")
    parser.add_argument("--traits", default=None, help="tripods CSV file name")
    parser.add_argument("--priority", type=int, default=None,
                        help="number of high-priority tripods (default: from tripods CSV)")
    parser.add_argument("--capacity", type=_parse_capacity,
                        default=_parse_capacity(str(DEFAULT_CAPACITY)),
                        help="free slots per row, one value or one per row")
    parser.add_argument("--no-priority-prune", action="store_true",
                        help="keep searching branches that miss a priority tripod")
    parser.add_argument("--no-redundancy-prune", action="store_true",
                        help="also try items for tripods that are already obtained")
    parser.add_argument("--time-limit", type=float, default=None,
                        help="stop searching after this many seconds")
    parser.add_argument("--json", action="store_true",
                        help="print each improvement as one JSON line")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING - 10 * min(args.verbose, 2),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        ds = SourceDataHandler(args.resources, args.items, args.traits)
        plan = ds.get_plan(args.capacity)
        if args.priority is not None:
            plan.priority_count = args.priority
        plan.priority_prune = not args.no_priority_prune
        plan.redundancy_prune = not args.no_redundancy_prune
        plan.time_limit = args.time_limit
        optimizer = LibraryOptimizer.from_plan(plan)
    except CatalogError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    found = False
    for solution in optimizer.run():
        found = True
        if args.json:
            print(orjson.dumps(solution.model_dump()).decode(), flush=True)
        else:
            print(format_solution(solution, plan.items, plan.trait_names), flush=True)
    if not found:
        print("No assignment found. If a priority tripod cannot be obtained, "
              "try --no-priority-prune.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
