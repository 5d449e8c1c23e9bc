# src/stakeguard/models/ledger_account.py
"""SQLAlchemy model backing the reference ledger adapter."""

from sqlalchemy import BigInteger, CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from stakeguard.db.session import Base


class LedgerAccount(Base):
    """Fungible balance held by a principal."""

    __tablename__ = "ledger_account"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_ledger_account_balance_non_negative"),
    )

    principal: Mapped[str] = mapped_column(String(255), primary_key=True)
    balance: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
