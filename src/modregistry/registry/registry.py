"""Registry: unique, case-insensitive named store with alias indirection.

Usage:
    blocks = Registry()
    blocks.add("Stone", stone)
    blocks.alias("stone", "rock")

    assert blocks.get("ROCK") is stone
    assert blocks.dealias("rock") == "stone"

Aliases live in a second table, so size, iteration, at() and name_of()
only ever see concrete entries.
"""

from __future__ import annotations

import asyncio
import inspect
import warnings
from collections.abc import Callable, Iterator, Mapping
from types import SimpleNamespace
from typing import Any

from modregistry.core import construction as _construction
from modregistry.core.errors import (
    DuplicateNameError,
    IndexRangeError,
    NotFoundError,
    NullItemError,
    RegistryWarning,
)
from modregistry.core.naming import is_valid_name, normalize


def _not_found(name: str) -> NotFoundError:
    return NotFoundError(
        f"Item {name} does not exist in registry! Consider checking your spelling."
    )


class Registry:
    """Insertion-ordered mapping of canonical names to arbitrary values.

    Structure:
        _content[name] = item       concrete entries
        _aliases[alias] = name      alias -> concrete name, never alias -> alias
    """

    is_valid_name = staticmethod(is_valid_name)

    def __init__(self) -> None:
        self._content: dict[str, Any] = {}
        self._aliases: dict[str, str] = {}

    @property
    def size(self) -> int:
        """Number of concrete entries. Aliases are not counted."""
        return len(self._content)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        """Iterate concrete values in insertion order."""
        yield from self._content.values()

    def __contains__(self, name: object) -> bool:
        return self.has(name)

    def __repr__(self) -> str:
        return f"Registry({list(self._content)!r}, aliases={self._aliases!r})"

    def add(self, name: Any, item: Any) -> None:
        """Add an item to the registry.

        Args:
            name: Registry name of the item. Not case sensitive.
            item: Value to store.

        Raises:
            InvalidNameError: If name is empty or non-ASCII.
            NullItemError: If item is None.
            DuplicateNameError: If name already resolves to an entry or alias.
        """
        key = normalize(name)
        if item is None:
            raise NullItemError("Registries cannot contain None")
        if self.has(key):
            raise DuplicateNameError(
                f"Item {key} already exists in registry! Consider using a different name."
            )
        self._content[key] = item

    def has(self, name: Any, exclude_aliases: bool = False) -> bool:
        """Check whether name resolves to something.

        Args:
            name: Registry name to check. Not case sensitive.
            exclude_aliases: Only consider concrete entries.

        Returns:
            True if name is a concrete entry or (unless excluded) a live alias.
        """
        if not name:
            return False
        key = normalize(name)
        if key in self._content:
            return True
        return not exclude_aliases and bool(self._aliases.get(key))

    def get(self, name: Any) -> Any:
        """Get an item by name or alias.

        The canonical name is stamped onto the item as ``registry_name`` when
        the item accepts attributes. Mappings are returned untouched.

        Raises:
            NotFoundError: If name resolves to nothing.
        """
        if not name:
            raise NotFoundError("No registry contains an empty name")
        key = normalize(name)
        if key in self._content:
            item = self._content[key]
            if isinstance(item, Mapping):
                # Descriptors stay plain data; their name is the key they live under
                return item
            try:
                item.registry_name = key
            except (AttributeError, TypeError):
                warnings.warn(
                    f"Entry {key} ({type(item).__name__}) cannot carry its registry name.",
                    RegistryWarning,
                    stacklevel=2,
                )
            return item
        if self.has(key):
            # Alias targets are always concrete, so this recurses exactly once.
            return self.get(self._aliases[key])
        raise _not_found(key)

    def rename(self, name: Any, new_name: Any) -> None:
        """Move a concrete entry to a new name.

        Aliases pointing at the old name are left dangling. Renaming an entry to its
        own name moves it to the end of the insertion order.

        Raises:
            NotFoundError: If name is not a concrete entry.
            DuplicateNameError: If new_name is taken. The entry stays under name.
        """
        key = normalize(name)
        if not self.has(key, exclude_aliases=True):
            raise _not_found(key)
        item = self._content[key]
        if normalize(new_name) == key:
            del self._content[key]
            self._content[key] = item
            return
        self.add(new_name, item)
        del self._content[key]

    def alias(self, name: Any, as_: Any) -> None:
        """Make as_ resolve to the concrete entry name.

        Aliases of aliases are not allowed. An existing alias with the same
        name is replaced.

        Raises:
            NotFoundError: If name is not a concrete entry.
        """
        key = normalize(name)
        if not self.has(key, exclude_aliases=True):
            raise _not_found(key)
        self._aliases[normalize(as_)] = key

    def aliases_for(self, name: Any) -> list[str]:
        """Get every alias that points at name."""
        key = normalize(name)
        return [alias for alias, target in self._aliases.items() if target == key]

    def dealias(self, alias: Any) -> str:
        """Get the concrete name behind an alias. Concrete names map to themselves.

        Raises:
            NotFoundError: If alias resolves to nothing.
        """
        key = normalize(alias)
        if not self.has(key):
            raise _not_found(key)
        return self._aliases.get(key) or key

    def for_each(self, callback: Callable[[Any, str], Any]) -> None:
        """Call callback(item, name) for each concrete entry in insertion order."""
        for key, item in self._content.items():
            callback(item, key)

    async def for_each_async(self, callback: Callable[[str, Any], Any]) -> list[Any]:
        """Call callback(name, item) for each concrete entry concurrently.

        Awaitable results run together under asyncio.gather(). Returns once
        every invocation has finished, with results in insertion order.
        """
        pending = []
        try:
            for key, item in list(self._content.items()):
                result = callback(key, item)
                if inspect.isawaitable(result):
                    pending.append(result)
                else:
                    pending.append(asyncio.sleep(0, result))
        except BaseException:
            for awaitable in pending:
                if inspect.iscoroutine(awaitable):
                    awaitable.close()
            raise
        return list(await asyncio.gather(*pending))

    def map(self, callback: Callable[[Any, str], Any]) -> Registry:
        """Build a new registry with the same names and callback(item, name) values.

        Aliases are not copied.
        """
        projected = Registry()
        for key, item in self._content.items():
            projected.add(key, callback(item, key))
        return projected

    def at(self, index: int) -> str:
        """Get the name at a zero-based position in insertion order.

        Raises:
            IndexRangeError: If index is negative or not below size.
        """
        if index < 0 or index >= self.size:
            raise IndexRangeError(
                f"Index {index} out of bounds for registry length {self.size}"
            )
        return list(self._content)[index]

    def name_of(self, item: Any) -> str | None:
        """Find the name an item is stored under, by identity.

        Returns:
            The matching name (the last one if stored several times), or None.
        """
        found = None
        for key, value in self._content.items():
            if value is item:
                found = key
        return found

    def create(
        self, name: Any, types: _construction.TypeSource, default_type: type = SimpleNamespace
    ) -> Any:
        """Construct the descriptor stored under name, resolving its type in types."""
        return _construction.create(name, self, types, default_type)

    def construct(self, descriptor: Any, default_type: type = SimpleNamespace) -> Any:
        """Construct a descriptor using this registry as the type source."""
        return _construction.construct(descriptor, self, default_type)


