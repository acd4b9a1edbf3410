"""modregistry: case-insensitive registries and descriptor-driven construction.

Usage:
    from dataclasses import dataclass
    from modregistry import Registry

    @dataclass
    class Block:
        width: int = 1
        height: int = 1
        health: int = 100

    types = Registry()
    types.add("block", Block)

    block = types.construct({"type": "block", "width": 20, "height": 20, "health": 200})
    assert isinstance(block, Block) and block.health == 200
"""

__version__ = "0.1.0"

# Core primitives
from modregistry.core import (
    CloneError,
    DuplicateNameError,
    IndexRangeError,
    Initializable,
    InvalidNameError,
    ModLoadError,
    NotFoundError,
    NullItemError,
    PropertyClashError,
    RegistryError,
    RegistryWarning,
    TypeSource,
    construct,
    create,
    is_valid_name,
    normalize,
)

# Registry
from modregistry.registry import Registry

# Configuration
from modregistry.config import ModRegistrySettings

# Mod loading
from modregistry.loader import (
    Content,
    Environment,
    Mod,
    ModLoader,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "normalize",
    "is_valid_name",
    "construct",
    "create",
    "TypeSource",
    "Initializable",
    # Errors
    "RegistryError",
    "InvalidNameError",
    "DuplicateNameError",
    "NullItemError",
    "NotFoundError",
    "IndexRangeError",
    "PropertyClashError",
    "CloneError",
    "ModLoadError",
    "RegistryWarning",
    # Registry
    "Registry",
    # Config
    "ModRegistrySettings",
    # Loading
    "Environment",
    "ModLoader",
    "Mod",
    "Content",
]
