"""Load the example walls mod and construct its content.

Run from the repository root:
    python examples/load_walls.py
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from modregistry import Environment, ModLoader, Registry


@dataclass
class Block:
    width: int = 1
    height: int = 1
    health: int = 100
    drops: list[str] = field(default_factory=list)

    def area(self) -> int:
        return self.width * self.height


@dataclass
class Door(Block):
    open: bool = False

    def init(self) -> None:
        # Doors spawn closed and slightly sturdier than the wall they sit in
        self.health += 50


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    env = Environment()
    env.types.add("block", Block)
    env.types.add("door", Door)
    env.add_moddable_registry(Registry(), "doors")

    loader = ModLoader(env)
    loader.set_prefix(True)
    loader.add(Path(__file__).parent / "walls_mod")

    for name in ("walls:brick", "walls:steel", "walls:gate"):
        instance = env.construct(name)
        print(f"{name}: {instance} (area {instance.area()})")


if __name__ == "__main__":
    main()
