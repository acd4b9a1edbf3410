"""Construction engine: build live instances from declarative descriptors.

A descriptor is a plain mapping (usually loaded from JSON) with an optional
"type" field naming an entry in a type registry. Every other field becomes
initial state on the constructed instance.

Usage:
    types = Registry()
    types.add("block", Block)

    block = construct({"type": "block", "health": 200}, types)
    assert isinstance(block, Block) and block.health == 200
"""

from __future__ import annotations

import copy as cp
import inspect
import warnings
from collections.abc import Mapping
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from modregistry.core.errors import CloneError, PropertyClashError, RegistryWarning

if TYPE_CHECKING:
    from modregistry.registry import Registry


class TypeSource(Protocol):
    """Anything that resolves a type name to an instantiable type."""

    def get(self, name: str) -> Any:
        """Return the type registered under name, raising NotFoundError if absent."""
        ...

    def has(self, name: str) -> bool:
        """Check if a type is registered under name."""
        ...


@runtime_checkable
class Initializable(Protocol):
    """Constructed instance that finishes setup after its fields are merged."""

    def init(self) -> None: ...


def _descriptor_fields(descriptor: Any) -> dict[str, Any]:
    if isinstance(descriptor, Mapping):
        return dict(descriptor)
    return dict(vars(descriptor))


def _clone_fields(fields: dict[str, Any], strict: bool) -> dict[str, Any]:
    """Deep-copy descriptor fields, falling back to the originals on failure."""
    try:
        return cp.deepcopy(fields)
    except (TypeError, cp.Error) as e:
        if strict:
            raise CloneError(f"Could not clone descriptor: {e}") from e
        warnings.warn(
            f"Could not clone descriptor, merging shared references instead: {e}",
            RegistryWarning,
            stacklevel=3,
        )
        return fields


def _check_clashes(instance: Any, fields: Mapping[str, Any]) -> None:
    """Refuse data fields that would shadow behaviour on the instance."""
    for key in fields:
        if inspect.isroutine(getattr(instance, key, None)):
            raise PropertyClashError(
                f"Cannot replace method '{key}' of type {type(instance).__name__} "
                f"with descriptor data"
            )


def construct(
    descriptor: Any,
    types: TypeSource,
    default_type: type = SimpleNamespace,
    *,
    strict_clone: bool = False,
) -> Any:
    """Build an instance from a descriptor using a type registry.

    Args:
        descriptor: Mapping (or object with attributes) describing the instance.
            Falsy descriptors are ignored.
        types: Type source used to resolve descriptor["type"].
        default_type: Type instantiated when the descriptor has no type.
        strict_clone: Raise CloneError instead of warning when the descriptor
            cannot be deep-copied.

    Returns:
        The new instance, or None for a falsy descriptor.

    Raises:
        NotFoundError: If the descriptor names an unregistered type.
        PropertyClashError: If a descriptor field names a method of the type.
        CloneError: If cloning fails and strict_clone is set.
    """
    if not descriptor:
        return None

    fields = _descriptor_fields(descriptor)
    type_name = fields.get("type")
    resolved = types.get(type_name) if type_name else default_type
    instance = resolved()

    cloned = _clone_fields(fields, strict_clone)
    _check_clashes(instance, cloned)
    for key, value in cloned.items():
        setattr(instance, key, value)

    hook = getattr(instance, "init", None)
    if callable(hook):
        hook()
    return instance


def create(
    name: str,
    registry: Registry,
    types: TypeSource,
    default_type: type = SimpleNamespace,
    *,
    strict_clone: bool = False,
) -> Any:
    """Look up a descriptor by name and construct it.

    Raises:
        NotFoundError: If name is not in registry or its type is unregistered.
        PropertyClashError: If a descriptor field names a method of the type.
    """
    return construct(registry.get(name), types, default_type, strict_clone=strict_clone)
