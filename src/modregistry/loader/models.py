"""Mod and content models.

A Mod is what load_mod() reads from disk. Its content only reaches a
registry when the mod is added to an Environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from modregistry.loader.environment import Environment


@dataclass
class Content:
    """One piece of mod content, waiting to be installed."""

    registry: str = "content"
    """Name of the moddable registry this content is added to."""

    name: str = "thing"
    """Registry name of this content."""

    constructible: dict[str, Any] = field(default_factory=dict)
    """JSON descriptor used to construct instances of this content."""

    json: str = "{}"
    """Serialized form of the constructible, as read from disk."""

    def implement(self, env: Environment) -> None:
        """Add the constructible to its target registry in env.

        Raises:
            NotFoundError: If env has no registry with this name.
            DuplicateNameError: If the name is already taken there.
        """
        env.registries.get(self.registry).add(self.name, self.constructible)

    def create(self, env: Environment) -> Any:
        """Construct a live instance using env's type registry."""
        return env.construct(self.constructible)


@dataclass(frozen=True, slots=True)
class ContentDefinition:
    """Entry of a mod's definitions file pointing at one content file."""

    path: str
    name: str
    registry: str


@dataclass
class Mod:
    """Metadata and content of a loaded mod."""

    display_name: str = "Mod"
    name: str = "mod"
    """Internal ID, used to prefix registry names."""
    version: str = "v0.0.0"
    author: str = "unknown"
    tagline: str = ""
    description: str = ""
    content: list[Content] = field(default_factory=list)
