"""Configuration module using Pydantic Settings.

Usage:
    from modregistry.config import ModRegistrySettings

    settings = ModRegistrySettings(prefix_content_names=True)
"""

from modregistry.config.settings import ModRegistrySettings

__all__ = [
    "ModRegistrySettings",
]
