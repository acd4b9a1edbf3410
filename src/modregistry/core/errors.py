"""Error taxonomy for registries, construction, and mod loading.

Every error derives from RegistryError and from the closest builtin, so
callers can catch either `RegistryError` or e.g. `LookupError`.
"""


class RegistryError(Exception):
    """Base class for all modregistry errors."""

    pass


class InvalidNameError(RegistryError, ValueError):
    """Raised when a registry name is empty or contains non-ASCII characters."""

    pass


class DuplicateNameError(RegistryError, ValueError):
    """Raised when adding a name that already resolves to an entry or alias."""

    pass


class NullItemError(RegistryError, TypeError):
    """Raised when adding None to a registry."""

    pass


class NotFoundError(RegistryError, LookupError):
    """Raised when a name, alias, or type cannot be resolved."""

    pass


class IndexRangeError(RegistryError, IndexError):
    """Raised when a positional lookup falls outside the registry."""

    pass


class PropertyClashError(RegistryError, AttributeError):
    """Raised when descriptor data would shadow a method of the constructed type."""

    pass


class CloneError(RegistryError, TypeError):
    """Raised when a descriptor cannot be deep-copied and clone failure is fatal."""

    pass


class ModLoadError(RegistryError):
    """Raised when a mod directory, manifest, definition, or content file is invalid."""

    pass


class RegistryWarning(UserWarning):
    """Non-fatal diagnostic: stamping failure or clone fallback."""

    pass
