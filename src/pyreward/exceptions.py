"""Custom exception hierarchy for pyreward."""

from __future__ import annotations


class RewardError(Exception):
    """Base exception for all pyreward errors."""


class RewardConfigError(RewardError):
    """Invalid or missing configuration."""


class InvalidArgumentError(RewardError, ValueError):
    """A malformed argument was passed to a store operation.

    Raised for owner identities that fail validation and for greeting
    values that are not strings.  No state is created or changed.
    """


class UnauthorizedError(RewardError):
    """A write was attempted by a caller other than the owner.

    Only raised when owner-gated writes are enabled
    (``RewardConfig.enforce_owner``).  The greeting is left unchanged.
    """

    def __init__(
        self,
        message: str,
        *,
        caller: str | None = None,
        owner: str = "",
    ) -> None:
        self.caller = caller
        self.owner = owner
        super().__init__(message)
