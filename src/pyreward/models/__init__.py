"""Value types for pyreward."""

from pyreward.models.identity import OwnerIdentity, normalize_identity
from pyreward.models.snapshot import StoreSnapshot

__all__ = [
    "OwnerIdentity",
    "StoreSnapshot",
    "normalize_identity",
]
