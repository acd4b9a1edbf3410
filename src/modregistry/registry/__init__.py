"""Stateful named store.

Architecture Note:
    registry/ owns mutable state for the life of the process. Construction
    and naming rules it relies on live in core/.
"""

from modregistry.registry.registry import Registry

__all__ = [
    "Registry",
]
