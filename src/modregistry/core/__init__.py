"""Core functionalities: stateless naming, errors, and construction.

Architecture Note:
    core/ holds pure functions and protocols with no state of their own.
    The stateful store lives in registry/, mod loading in loader/.
"""

from modregistry.core.construction import Initializable, TypeSource, construct, create
from modregistry.core.errors import (
    CloneError,
    DuplicateNameError,
    IndexRangeError,
    InvalidNameError,
    ModLoadError,
    NotFoundError,
    NullItemError,
    PropertyClashError,
    RegistryError,
    RegistryWarning,
)
from modregistry.core.naming import is_valid_name, normalize

__all__ = [
    # Naming
    "normalize",
    "is_valid_name",
    # Construction
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
]
