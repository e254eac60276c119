"""Utility script to fill the database with reproducible demo processes."""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from datetime import date

from offboarding.domain.exceptions import OffboardingError
from offboarding.infrastructure.database import SessionLocal, initialize_database
from offboarding.seeds import populate_demo_processes
from offboarding.utils import today_in_app_timezone


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for demo data generation."""

    parser = argparse.ArgumentParser(
        description="Create demo people with offboarding processes in varied statuses.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=50,
        help="Number of demo people to create (default: 50)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed; the same seed produces the same data (default: 42)",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference date in ISO format (default: today in the app timezone)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if args.count <= 0:
        raise SystemExit("--count must be positive")
    logging.basicConfig(level=logging.INFO)

    initialize_database()

    session = SessionLocal()
    try:
        processes = populate_demo_processes(
            session,
            count=args.count,
            today=args.today or today_in_app_timezone(),
            seed=args.seed,
        )
    except OffboardingError as exc:
        session.rollback()
        raise SystemExit(f"Could not create demo data: {exc}") from exc
    else:
        by_status = Counter(process.status for process in processes)
        print(f"Created {len(processes)} demo processes:")
        for status, amount in sorted(by_status.items()):
            print(f"  {status}: {amount}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
