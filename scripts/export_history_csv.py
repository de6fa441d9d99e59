"""Download official draw results and write the history CSV the app loads.

Usage:
  python scripts/export_history_csv.py --output data/lotto_full_history.csv

Options:
  --min 1
  --max 1170   (default: auto-detect latest)
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from tqdm import tqdm

from lotto_report.records import DrawRecord
from lotto_report.repositories.history_repository import write_history_csv
from lotto_report.repositories.remote_draw_client import DEFAULT_BASE_URL, RemoteDrawClient
from lotto_report.utils.http import build_http_session

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch lotto draws and write the history CSV")
    parser.add_argument("--min", dest="min_round", type=int, default=1)
    parser.add_argument(
        "--max",
        dest="max_round",
        type=int,
        default=None,
        help="Max round (default: auto-detect latest)",
    )
    parser.add_argument("--output", dest="output", type=str, default="data/lotto_full_history.csv")
    parser.add_argument("--base-url", dest="base_url", type=str, default=DEFAULT_BASE_URL)
    parser.add_argument("--timeout", dest="timeout_seconds", type=float, default=10.0)
    parser.add_argument("--retries", dest="retries", type=int, default=3)
    parser.add_argument("--backoff", dest="backoff", type=float, default=0.3)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    if args.min_round < 1:
        raise SystemExit("--min must be >= 1")

    http = build_http_session(retries=args.retries, backoff_factor=args.backoff)
    client = RemoteDrawClient(http, base_url=args.base_url, timeout_seconds=float(args.timeout_seconds))

    max_round = int(args.max_round) if args.max_round is not None else client.find_latest_round()
    if max_round < args.min_round:
        raise SystemExit(f"--max ({max_round}) must be >= --min ({args.min_round})")

    logger.info("Export range: %s..%s", args.min_round, max_round)

    draws: list[DrawRecord] = []
    skipped = 0
    for round_no in tqdm(range(int(args.min_round), max_round + 1), unit="draw"):
        try:
            draws.append(client.fetch(round_no))
        except ValueError:
            skipped += 1
            logger.warning("Skipping round %s: invalid payload", round_no, exc_info=True)

    out = write_history_csv(draws, args.output)
    logger.info("Wrote %s draws to %s (skipped %s)", len(draws), out, skipped)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
