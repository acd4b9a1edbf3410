"""Mod loading: read mod directories and install their content.

Architecture Note:
    loader/ is plain file I/O layered on registry/ and core/. It only talks
    to registries through add() and get().
"""

from modregistry.loader.environment import Environment
from modregistry.loader.loader import ModLoader
from modregistry.loader.models import Content, ContentDefinition, Mod

__all__ = [
    "Environment",
    "ModLoader",
    "Mod",
    "Content",
    "ContentDefinition",
]
