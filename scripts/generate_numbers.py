"""Generate combinations from the command line and flag past first-prize matches.

Usage:
  python scripts/generate_numbers.py --history data/lotto_full_history.csv --count 5
  python scripts/generate_numbers.py --min-sum 100 --max-sum 170 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence

from lotto_report.errors import GenerationInfeasibleError
from lotto_report.repositories.history_repository import HistoryState, HistoryStore
from lotto_report.services.combination_generator import CombinationGenerator
from lotto_report.services.generation_service import GenerationService

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate 6/45 combinations")
    parser.add_argument("--history", dest="history", type=str, default="data/lotto_full_history.csv")
    parser.add_argument("--mode", dest="mode", choices=["random", "ai", "sum"], default="random")
    parser.add_argument("--count", dest="count", type=int, default=3)
    parser.add_argument("--min-sum", dest="min_sum", type=int, default=None)
    parser.add_argument("--max-sum", dest="max_sum", type=int, default=None)
    parser.add_argument("--seed", dest="seed", type=int, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    if (args.min_sum is None) != (args.max_sum is None):
        raise SystemExit("--min-sum and --max-sum must be given together")

    store = HistoryStore(args.history)
    store.load()
    if store.state is HistoryState.FAILED:
        logger.warning("History unavailable (%s); past matches will not be shown", store.error)

    rng = random.Random(args.seed) if args.seed is not None else None
    service = GenerationService(CombinationGenerator(rng=rng))

    try:
        combinations = service.generate(
            store.matcher,
            mode=args.mode,
            count=args.count,
            min_sum=args.min_sum,
            max_sum=args.max_sum,
        )
    except GenerationInfeasibleError as exc:
        logger.error("%s", exc.message)
        return 2

    for combo in combinations:
        numbers = " ".join(f"{n:2d}" for n in combo.numbers)
        note = f"won round {combo.match_round}" if combo.match_round else "new"
        print(f"{numbers}  sum={combo.sum:3d}  [{combo.reason}] {note}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
