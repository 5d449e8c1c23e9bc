# src/stakeguard/scripts/clock.py
"""
Advance the block clock.

Deployments that do not follow an external chain run this on a schedule so
voting windows elapse. Each run moves the height forward by ``--blocks``.
"""

from __future__ import annotations

import argparse

from stakeguard.db.session import SessionLocal, create_tables
from stakeguard.services.clock import DatabaseClock


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Advance the Stakeguard block clock")
    parser.add_argument(
        "--blocks",
        type=int,
        default=1,
        help="Number of heights to advance (default: 1)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before advancing.",
    )
    args = parser.parse_args(argv)

    if args.create_tables:
        create_tables()

    db = SessionLocal()
    try:
        height = DatabaseClock(db).advance(args.blocks)
    finally:
        db.close()

    print(f"Block clock at height {height}")


if __name__ == "__main__":
    main()
