"""State/store layer.

Holds the single greeting owned by a deployment.  Everything that reads
or overwrites the greeting goes through :class:`GreetingStore`.
"""

from pyreward.state.store import GreetingStore

__all__ = ["GreetingStore"]
