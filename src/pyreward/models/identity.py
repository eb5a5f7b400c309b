"""Owner identity value type."""

from __future__ import annotations

import re

from pydantic import field_validator

from pyreward.exceptions import InvalidArgumentError
from pyreward.models._base import RewardBaseModel

_HEX_ADDRESS_PREFIX = "0x"
_HEX_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")
_WHITESPACE_RE = re.compile(r"\s")


def normalize_identity(value: str) -> str:
    """Validate and normalise a raw identity string.

    ``0x``-prefixed identities are account addresses and must carry
    exactly 40 hex digits; they are lowercased so checksum casing does
    not affect equality.  Any other non-empty token without whitespace
    is accepted as an opaque principal.

    Raises
    ------
    InvalidArgumentError
        If *value* is empty, contains whitespace, or is a malformed address.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f"owner identity must be a string, got {type(value).__name__}")
    identity = value.strip()
    if not identity:
        raise InvalidArgumentError("owner identity must be non-empty")
    if _WHITESPACE_RE.search(identity):
        raise InvalidArgumentError("owner identity must not contain whitespace")
    if identity[:2].lower() == _HEX_ADDRESS_PREFIX:
        if not _HEX_ADDRESS_RE.fullmatch(_HEX_ADDRESS_PREFIX + identity[2:]):
            raise InvalidArgumentError(f"malformed account address: {identity!r}")
        return identity.lower()
    return identity


class OwnerIdentity(RewardBaseModel):
    """Opaque, comparable principal that owns a store.

    Construct through :meth:`parse` to get :class:`InvalidArgumentError`
    on bad input; direct construction raises pydantic's ``ValidationError``.
    """

    value: str

    @field_validator("value")
    @classmethod
    def _normalize_value(cls, value: str) -> str:
        return normalize_identity(value)

    @classmethod
    def parse(cls, identity: OwnerIdentity | str) -> OwnerIdentity:
        """Return *identity* as an :class:`OwnerIdentity`, validating raw strings."""
        if isinstance(identity, OwnerIdentity):
            return identity
        return cls(value=normalize_identity(identity))

    @property
    def is_address(self) -> bool:
        """``True`` for ``0x``-prefixed account addresses."""
        return self.value.startswith(_HEX_ADDRESS_PREFIX)

    def __str__(self) -> str:
        return self.value
