"""In-memory greeting store.

This is the only component allowed to change the greeting.
"""

from __future__ import annotations

import logging
import threading

from pyreward._redact import mask_identity, truncate_for_log
from pyreward.config import RewardConfig
from pyreward.exceptions import InvalidArgumentError, UnauthorizedError
from pyreward.models.identity import OwnerIdentity
from pyreward.models.snapshot import StoreSnapshot

_logger = logging.getLogger(__name__)


class GreetingStore:
    """Owner-provisioned store for a single mutable greeting.

    The owner is fixed at construction.  The greeting starts at
    ``config.default_greeting`` and is replaced wholesale by each
    :meth:`write`; the last completed write is what :meth:`read` returns.

    Usage::

        store = GreetingStore("0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed")
        store.read()                      # "Building Unstoppable Apps!!!"
        store.write("Learn Scaffold-ETH 2! :)")
    """

    def __init__(
        self,
        owner: OwnerIdentity | str,
        *,
        config: RewardConfig | None = None,
    ) -> None:
        self._config = config if config is not None else RewardConfig()
        self._owner = OwnerIdentity.parse(owner)
        self._lock = threading.Lock()
        self._value = self._config.default_greeting
        _logger.debug(
            "Greeting store created owner=%s enforce_owner=%s",
            mask_identity(self._owner),
            self._config.enforce_owner,
        )

    @property
    def owner(self) -> OwnerIdentity:
        """Identity captured at construction."""
        return self._owner

    @property
    def config(self) -> RewardConfig:
        return self._config

    def read(self) -> str:
        """Return the current greeting."""
        with self._lock:
            return self._value

    def write(self, new_value: str, *, caller: OwnerIdentity | str | None = None) -> None:
        """Replace the greeting with *new_value*.

        Parameters
        ----------
        new_value : str
            The new greeting.  Any string is accepted, including ``""``.
        caller : OwnerIdentity or str, optional
            Identity performing the write.  Validated whenever given;
            compared with the owner only when ``config.enforce_owner``
            is enabled.

        Raises
        ------
        InvalidArgumentError
            If *new_value* is not a string, or *caller* is malformed.
        UnauthorizedError
            If owner-gated writes are enabled and *caller* is not the owner.
        """
        if not isinstance(new_value, str):
            raise InvalidArgumentError(f"greeting must be a string, got {type(new_value).__name__}")

        identity = OwnerIdentity.parse(caller) if caller is not None else None

        if self._config.enforce_owner:
            self._authorize(identity)

        with self._lock:
            self._value = new_value

        _logger.debug(
            "Greeting updated caller=%s value=%r",
            mask_identity(identity),
            truncate_for_log(new_value, max_string=self._config.log_value_max_length),
        )

    def snapshot(self) -> StoreSnapshot:
        """Return owner and greeting as one consistent view."""
        with self._lock:
            value = self._value
        return StoreSnapshot(owner=self._owner, greeting=value)

    def _authorize(self, identity: OwnerIdentity | None) -> None:
        if identity is None:
            _logger.debug("Rejected anonymous write owner=%s", mask_identity(self._owner))
            raise UnauthorizedError(
                "caller identity is required to set the greeting",
                caller=None,
                owner=str(self._owner),
            )
        if identity != self._owner:
            _logger.debug(
                "Rejected write caller=%s owner=%s",
                mask_identity(identity),
                mask_identity(self._owner),
            )
            raise UnauthorizedError(
                "only the owner may set the greeting",
                caller=str(identity),
                owner=str(self._owner),
            )

    def __repr__(self) -> str:
        return f"GreetingStore(owner={self._owner.value!r})"
