"""Base model for pyreward value types.

Every model inherits from :class:`RewardBaseModel`, which is frozen so
instances can be shared between threads and used as dict keys, and
rejects unknown fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RewardBaseModel(BaseModel):
    """Base for immutable pyreward models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )
