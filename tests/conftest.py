"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from modregistry import Registry


class Block:
    """Type with behaviour but no width/height/health fields."""

    def describe(self) -> str:
        return f"block {self.width}x{self.height}"


class Turret:
    """Type with an init hook."""

    initialized = False
    range = 5

    def init(self) -> None:
        self.initialized = True
        self.range = self.range * 2


@pytest.fixture
def registry():
    """Fresh, empty Registry."""
    return Registry()


@pytest.fixture
def types():
    """Type registry with "block" and "turret" types."""
    reg = Registry()
    reg.add("block", Block)
    reg.add("turret", Turret)
    return reg


@pytest.fixture
def block_cls():
    return Block


@pytest.fixture
def turret_cls():
    return Turret
