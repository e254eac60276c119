"""Utility script to load the default offboarding template catalog."""

from __future__ import annotations

import argparse
import logging

from offboarding.domain.exceptions import OffboardingError
from offboarding.infrastructure.database import SessionLocal, initialize_database
from offboarding.seeds import seed_templates


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for template seeding."""

    parser = argparse.ArgumentParser(
        description="Create the default offboarding templates if they are missing.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every template that is created or skipped.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    initialize_database()

    session = SessionLocal()
    try:
        templates = seed_templates(session)
    except OffboardingError as exc:
        session.rollback()
        raise SystemExit(f"Could not seed the template catalog: {exc}") from exc
    else:
        print("Template catalog ready:")
        for template in templates:
            print(f"  [{template.id}] {template.name} ({len(template.tasks)} tasks)")
    finally:
        session.close()


if __name__ == "__main__":
    main()
