"""Configuration settings using Pydantic Settings.

Usage:
    from modregistry.config import ModRegistrySettings

    # Load from environment variables (MODREGISTRY_*)
    settings = ModRegistrySettings()

    # Or override with explicit values
    settings = ModRegistrySettings(prefix_content_names=True)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ModRegistrySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for mod loading and construction.

    Attributes:
        prefix_content_names: Install content as "<mod name>:<content name>".
        manifest_filename: Manifest file expected at the root of a mod directory.
        default_registry: Registry used by definitions that don't name one.
        default_content_name: Name used by definitions that don't give one.
        required_content_properties: Keys every content file must define.
        strict_clone: Fail construction when a descriptor cannot be deep-copied.

    Environment Variables:
        MODREGISTRY_PREFIX_CONTENT_NAMES
        MODREGISTRY_MANIFEST_FILENAME
        MODREGISTRY_DEFAULT_REGISTRY
        MODREGISTRY_DEFAULT_CONTENT_NAME
        MODREGISTRY_REQUIRED_CONTENT_PROPERTIES (JSON list)
        MODREGISTRY_STRICT_CLONE
    """

    model_config = SettingsConfigDict(
        env_prefix="MODREGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prefix_content_names: bool = False
    manifest_filename: str = "mod.json"
    default_registry: str = "content"
    default_content_name: str = "item"
    required_content_properties: list[str] = ["type"]
    strict_clone: bool = False
