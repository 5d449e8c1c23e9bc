# src/stakeguard/scripts/tokens.py
"""
Mint bearer tokens and fund ledger accounts for local development.

Production principals get their tokens from the upstream identity provider;
this script signs tokens with the shared secret so the API can be exercised
by hand.
"""

from __future__ import annotations

import argparse

from stakeguard.core.security import create_access_token
from stakeguard.db.session import SessionLocal
from stakeguard.services.ledger import DatabaseLedger


def fund_account(principal: str, amount: int) -> int:
    """Deposit `amount` into the reference ledger for `principal`."""
    db = SessionLocal()
    try:
        balance = DatabaseLedger(db).deposit(principal, amount)
        db.commit()
    finally:
        db.close()
    return balance


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Mint a development bearer token")
    parser.add_argument("principal", help="Principal identifier placed in the sub claim")
    parser.add_argument(
        "--fund",
        type=int,
        default=0,
        help="Also deposit this amount into the principal's ledger account.",
    )
    args = parser.parse_args(argv)

    print(create_access_token(args.principal))
    if args.fund > 0:
        balance = fund_account(args.principal, args.fund)
        print(f"Funded {args.principal}: balance {balance}")


if __name__ == "__main__":
    main()
