"""pyreward - Owner-provisioned greeting store for a RewardSystem deployment."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyreward")
except PackageNotFoundError:
    __version__ = "0+local"
from pyreward.config import DEFAULT_GREETING, RewardConfig
from pyreward.contract import RewardSystem
from pyreward.exceptions import (
    InvalidArgumentError,
    RewardConfigError,
    RewardError,
    UnauthorizedError,
)
from pyreward.models import OwnerIdentity, StoreSnapshot
from pyreward.state import GreetingStore

__all__ = [
    "__version__",
    "DEFAULT_GREETING",
    "GreetingStore",
    "InvalidArgumentError",
    "OwnerIdentity",
    "RewardConfig",
    "RewardConfigError",
    "RewardError",
    "RewardSystem",
    "StoreSnapshot",
    "UnauthorizedError",
]
