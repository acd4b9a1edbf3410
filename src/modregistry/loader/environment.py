"""Environment: the moddable registries and the type registry they construct from.

Usage:
    env = Environment()
    env.types.add("block", Block)

    walls = Registry()
    env.add_moddable_registry(walls, "walls")

    env.registries.get("walls").add("brick", {"type": "block", "health": 50})
    brick = env.construct("brick")
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from modregistry.config import ModRegistrySettings
from modregistry.core.construction import construct
from modregistry.core.errors import NotFoundError
from modregistry.registry import Registry


class Environment:
    """Process state shared by the mod loader and construction callers.

    Args:
        settings: Construction settings. Defaults to ModRegistrySettings().
    """

    def __init__(self, settings: ModRegistrySettings | None = None):
        self._settings = settings or ModRegistrySettings()
        self.types = Registry()
        """Type registry used to resolve descriptor "type" fields."""
        self.registries = Registry()
        """Moddable registries, by the name mod content refers to them with."""
        self.registries.add(self._settings.default_registry, Registry())

    def add_moddable_registry(self, registry: Registry, name: str) -> None:
        """Allow mods to add content to registry under the given name.

        Raises:
            DuplicateNameError: If a moddable registry already uses name.
        """
        self.registries.add(name, registry)

    def get_from_any_registry(self, name: str) -> Any:
        """Find name in the moddable registries, searching the first-added first.

        Raises:
            NotFoundError: If no moddable registry contains name.
        """
        for registry in self.registries:
            if registry.has(name):
                return registry.get(name)
        raise NotFoundError(f"Item {name} does not exist in any moddable registry!")

    def construct(self, obj: Any, default_type: type = SimpleNamespace) -> Any:
        """Construct a descriptor, or the content stored under a registry name.

        Args:
            obj: Descriptor mapping, or the name of content in any moddable registry.
            default_type: Type used when the descriptor has no "type".
        """
        descriptor = self.get_from_any_registry(obj) if isinstance(obj, str) else obj
        return construct(
            descriptor, self.types, default_type, strict_clone=self._settings.strict_clone
        )
