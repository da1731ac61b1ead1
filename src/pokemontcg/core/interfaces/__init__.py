"""Core interfaces.

Why:
- Define contracts (Protocol) that concrete adapters implement.
- The client depends on these abstractions, not on a given resource.
"""

from pokemontcg.core.interfaces.resource import ResourceKind

__all__ = ["ResourceKind"]
