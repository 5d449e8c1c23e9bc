"""Ledger adapter used for escrow and payouts.

The engine only needs one capability from the value-transfer ledger: move a
fungible amount between two principals, failing when the sender is short.
`DatabaseLedger` is the reference adapter; it keeps balances in the same
SQLAlchemy session as the engine so that transfers commit and roll back
together with engine state.
"""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.orm import Session

from stakeguard.models import LedgerAccount
from stakeguard.services.errors import InsufficientFundsError

logger = logging.getLogger(__name__)


class LedgerAdapter(Protocol):
    """Fungible-transfer capability consumed by the report engine."""

    def transfer(self, sender: str, recipient: str, amount: int) -> None:
        """Move `amount` from `sender` to `recipient`.

        Raises:
            InsufficientFundsError: If `sender` cannot cover `amount`.
        """


class DatabaseLedger:
    """Ledger adapter storing balances as `LedgerAccount` rows."""

    def __init__(self, db: Session) -> None:
        """Initialize the ledger with the session shared with the engine."""
        self.db = db

    def _account(self, principal: str) -> LedgerAccount:
        account = self.db.get(LedgerAccount, principal)
        if account is None:
            account = LedgerAccount(principal=principal, balance=0)
            self.db.add(account)
        return account

    def balance_of(self, principal: str) -> int:
        """Return the balance of `principal`, zero for unknown accounts."""
        account = self.db.get(LedgerAccount, principal)
        return account.balance if account else 0

    def deposit(self, principal: str, amount: int) -> int:
        """Credit `amount` to `principal` from outside the ledger.

        Used for operator funding and fixtures; the engine never deposits.

        Returns:
            The new balance.
        """
        if amount <= 0:
            raise ValueError("Deposit amount must be positive")
        account = self._account(principal)
        account.balance += amount
        self.db.flush()
        return account.balance

    def transfer(self, sender: str, recipient: str, amount: int) -> None:
        """Move `amount` between accounts, rejecting overdrafts.

        Raises:
            ValueError: If `amount` is not positive.
            InsufficientFundsError: If `sender` holds less than `amount`.
        """
        if amount <= 0:
            raise ValueError("Transfer amount must be positive")

        balance = self.balance_of(sender)
        if balance < amount:
            logger.warning(
                "Ledger rejected transfer of %d from %s (balance %d)", amount, sender, balance
            )
            raise InsufficientFundsError(sender, balance, amount)

        self._account(sender).balance -= amount
        self._account(recipient).balance += amount
        self.db.flush()
        logger.debug("Transferred %d from %s to %s", amount, sender, recipient)
