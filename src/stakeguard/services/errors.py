"""Exceptions raised by the moderation engine.

Every failure is reported before any state is mutated, so callers can treat
these as plain rejections. Each class carries the HTTP status the API layer
should surface it with.
"""

from __future__ import annotations

HTTP_BAD_REQUEST = 400
HTTP_PAYMENT_REQUIRED = 402
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_CONFLICT = 409


class ModerationError(RuntimeError):
    """Base exception for all engine rejections."""

    status_code: int = HTTP_BAD_REQUEST


class NotFoundError(ModerationError):
    """Raised when a post or report id is unknown."""

    status_code = HTTP_NOT_FOUND


class PostNotFoundError(NotFoundError):
    """Raised when a post id is unknown."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


class ReportNotFoundError(NotFoundError):
    """Raised when a report id is unknown."""

    def __init__(self, report_id: int) -> None:
        super().__init__(f"Report {report_id} not found")
        self.report_id = report_id


class InsufficientStakeError(ModerationError):
    """Raised when a stake is below the configured minimum."""

    def __init__(self, stake: int, minimum: int) -> None:
        super().__init__(f"Stake {stake} is below the minimum of {minimum}")
        self.stake = stake
        self.minimum = minimum


class InvalidReasonError(ModerationError, ValueError):
    """Raised when a report reason exceeds its byte bound."""


class InvalidContentRefError(ModerationError, ValueError):
    """Raised when a content reference exceeds its byte bound."""


class DuplicateVoteError(ModerationError):
    """Raised when a voter already voted on a report."""

    status_code = HTTP_CONFLICT

    def __init__(self, report_id: int, voter: str) -> None:
        super().__init__(f"{voter} has already voted on report {report_id}")
        self.report_id = report_id
        self.voter = voter


class InsufficientFundsError(ModerationError):
    """Raised by a ledger adapter when the sender cannot cover a transfer."""

    status_code = HTTP_PAYMENT_REQUIRED

    def __init__(self, principal: str, balance: int, amount: int) -> None:
        super().__init__(
            f"{principal} holds {balance}, cannot transfer {amount}"
        )
        self.principal = principal
        self.balance = balance
        self.amount = amount


class TransferFailedError(ModerationError):
    """Raised when the ledger rejects an escrow or payout transfer."""

    status_code = HTTP_PAYMENT_REQUIRED


class VotingPeriodEndedError(ModerationError):
    """Raised when the voting window state forbids the operation.

    Covers votes after the deadline, votes or resolution on an already
    resolved report, and resolution before the deadline.
    """

    status_code = HTTP_CONFLICT


class InvalidVoteError(ModerationError):
    """Raised when resolution is attempted on a report without votes."""

    status_code = HTTP_CONFLICT


class UnauthorizedError(ModerationError):
    """Raised when a principal lacks the required role or reputation."""

    status_code = HTTP_FORBIDDEN


class NotModeratorError(UnauthorizedError):
    """Raised when a non-moderator attempts to vote."""

    def __init__(self, principal: str) -> None:
        super().__init__(f"{principal} is not a moderator")
        self.principal = principal
