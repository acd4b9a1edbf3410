"""Filesystem mod loader.

A mod directory looks like:

    my_mod/
        mod.json            {"name": "my_mod", "definitions": "defs.json", ...}
        defs.json           [{"path": "content/brick.json", "name": "brick"}, ...]
        content/brick.json  {"type": "block", "health": 50}

Usage:
    env = Environment()
    loader = ModLoader(env)
    mod = loader.add("mods/my_mod")
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from modregistry.config import ModRegistrySettings
from modregistry.core.errors import ModLoadError
from modregistry.loader.environment import Environment
from modregistry.loader.models import Content, ContentDefinition, Mod

logger = logging.getLogger(__name__)

_MANIFEST_FIELDS = {
    "displayName": "display_name",
    "author": "author",
    "version": "version",
    "tagline": "tagline",
    "description": "description",
}


def _read_json(path: Path) -> Any:
    """Read a JSON file, returning None if it does not exist."""
    if not path.is_file():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ModLoadError(f"File [at {path}] is not valid JSON: {e}") from e


class ModLoader:
    """Loads mod directories and installs their content into an Environment.

    Args:
        environment: Registries that content is installed into.
        settings: Loader settings. Defaults to ModRegistrySettings().
    """

    def __init__(
        self,
        environment: Environment,
        settings: ModRegistrySettings | None = None,
    ):
        self._environment = environment
        self._settings = settings or ModRegistrySettings()
        self._prefix = self._settings.prefix_content_names
        self._info: Callable[[str], Any] = logger.info

    def set_prefix(self, value: bool) -> None:
        """Prefix new content names with "<mod name>:" when True. Off by default."""
        self._prefix = bool(value)

    def set_info_output(self, func: Callable[[str], Any]) -> None:
        """Set the callable that receives loader progress text.

        Raises:
            TypeError: If func is not callable.
        """
        if not callable(func):
            raise TypeError("Cannot set info output to a non-function!")
        self._info = func

    def load_content_file(self, path: Path, name: str, registry: str) -> Content:
        """Read one content file into a Content.

        Raises:
            ModLoadError: If the file is missing, empty, not an object, or lacks
                a required property.
        """
        self._info(f"Fetching content: {name} (at {path})")
        obj = _read_json(path)
        if not obj:
            raise ModLoadError(f"Mod content file [at {path}] empty or not found.")
        if not isinstance(obj, dict):
            raise ModLoadError(f"Mod content file [at {path}] must contain a single object.")
        for prop in self._settings.required_content_properties:
            if obj.get(prop) is None:
                raise ModLoadError(f"Mod content must define property: '{prop}'")
        content = Content(
            registry=registry,
            name=name,
            constructible=obj,
            json=json.dumps(obj),
        )
        self._info(f"Content fetched: {content.name}")
        return content

    def _read_definitions(self, path: Path) -> list[ContentDefinition]:
        definitions = _read_json(path)
        if not definitions:
            raise ModLoadError(f"Definition file [at {path}] empty or not found.")
        if not isinstance(definitions, list):
            raise ModLoadError("Definition file must contain only a single array.")

        entries = []
        for entry in definitions:
            if not isinstance(entry, dict):
                raise ModLoadError("Content definitions must be objects.")
            if not entry.get("path"):
                raise ModLoadError("Content definitions must contain a path to the content.")
            entries.append(
                ContentDefinition(
                    path=entry["path"],
                    name=entry.get("name") or self._settings.default_content_name,
                    registry=entry.get("registry") or self._settings.default_registry,
                )
            )
        return entries

    def load_mod(self, path: str | Path) -> Mod:
        """Load an entire mod from a directory without installing it.

        Args:
            path: Directory containing the mod's manifest.

        Returns:
            The mod, with its content read but not yet added to any registry.

        Raises:
            ModLoadError: If the manifest, definitions, or any content file is invalid.
        """
        root = Path(path)
        mod = Mod()

        self._info(f"|| LOADING MOD FROM {root} ||")
        try:
            manifest = _read_json(root / self._settings.manifest_filename)
            if not manifest:
                raise ModLoadError(f"Mod contains no {self._settings.manifest_filename}!")
            if not isinstance(manifest, dict):
                raise ModLoadError(f"{self._settings.manifest_filename} must contain an object.")
            self._info(f"| MOD IDENTIFIED: {manifest.get('displayName') or 'Mod'} |")

            self._info("| STAGE 1: DETAILS |")
            # Manifest fields are copied, never constructed
            if not manifest.get("name"):
                raise ModLoadError(
                    f'{self._settings.manifest_filename} must define mod ID! ("name")'
                )
            mod.name = manifest["name"]
            for key, attr in _MANIFEST_FIELDS.items():
                if manifest.get(key):
                    setattr(mod, attr, manifest[key])
            if not manifest.get("definitions"):
                raise ModLoadError(
                    f"{self._settings.manifest_filename} must define the path to the "
                    f"definition file!"
                )

            self._info("| STAGE 2: DEFINITIONS |")
            definitions_path = root / manifest["definitions"]
            entries = self._read_definitions(definitions_path)

            self._info("| STAGE 3: CONTENT |")
            for entry in entries:
                mod.content.append(
                    self.load_content_file(
                        definitions_path.parent / entry.path, entry.name, entry.registry
                    )
                )

            self._info("|| MOD LOADING SUCCESSFUL ||")
        except ModLoadError:
            self._info("|| MOD LOADING FAILED ||")
            raise
        return mod

    def add_mod(self, mod: Mod) -> None:
        """Install a loaded mod's content into the environment's registries.

        Raises:
            RegistryError: If any content cannot be added. Content installed
                before the failure stays installed.
        """
        self._info(f"|| POST-LOADING MOD: {mod.display_name} ||")
        if self._prefix:
            self._info("| POST-LOAD: PREFIXES |")
            for content in mod.content:
                content.name = f"{mod.name}:{content.name}"
        self._info("| POST-LOAD: REGISTRY |")
        for content in mod.content:
            content.implement(self._environment)
        self._info("|| POST-LOAD COMPLETE ||")
        self._info("|| MOD FULLY LOADED ||")

    def add(self, path: str | Path) -> Mod:
        """Load the mod at path and install its content."""
        mod = self.load_mod(path)
        self.add_mod(mod)
        return mod
