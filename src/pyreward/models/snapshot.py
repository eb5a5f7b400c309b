"""Point-in-time view of a greeting store."""

from __future__ import annotations

from pydantic import Field

from pyreward.models._base import RewardBaseModel
from pyreward.models.identity import OwnerIdentity


class StoreSnapshot(RewardBaseModel):
    """Owner and greeting captured under the same lock."""

    owner: OwnerIdentity
    greeting: str = Field(..., description="Greeting at the time of the snapshot")
