"""Caller-facing facade mirroring the deployed ``RewardSystem`` surface."""

from __future__ import annotations

import logging

from pyreward.config import RewardConfig
from pyreward.models.identity import OwnerIdentity
from pyreward.state.store import GreetingStore

_logger = logging.getLogger(__name__)


class RewardSystem:
    """A deployed reward system exposing its greeting.

    Usage::

        system = RewardSystem.deploy(owner_address)
        system.greeting()
        system.set_greeting("Learn Scaffold-ETH 2! :)", sender=owner_address)
    """

    def __init__(self, store: GreetingStore) -> None:
        self._store = store

    @classmethod
    def deploy(
        cls,
        owner: OwnerIdentity | str,
        *,
        config: RewardConfig | None = None,
    ) -> RewardSystem:
        """Create a fresh store owned by *owner* and wrap it."""
        store = GreetingStore(owner, config=config)
        _logger.debug("RewardSystem deployed %r", store)
        return cls(store)

    @property
    def store(self) -> GreetingStore:
        """The injected greeting store."""
        return self._store

    @property
    def owner(self) -> OwnerIdentity:
        """Identity the system was deployed with."""
        return self._store.owner

    def greeting(self) -> str:
        """Return the current greeting."""
        return self._store.read()

    def set_greeting(self, new_greeting: str, *, sender: OwnerIdentity | str | None = None) -> None:
        """Overwrite the greeting on behalf of *sender*."""
        self._store.write(new_greeting, caller=sender)
