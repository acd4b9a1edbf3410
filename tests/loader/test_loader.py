"""Tests for loading mods from disk and installing their content."""

import json
from pathlib import Path

import pytest

from modregistry import (
    DuplicateNameError,
    Environment,
    ModLoader,
    ModLoadError,
    ModRegistrySettings,
    NotFoundError,
    Registry,
)


def write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def mod_dir(tmp_path: Path) -> Path:
    """Mod with two walls and one turret, definitions in a subdirectory."""
    root = tmp_path / "walls"
    write_json(
        root / "mod.json",
        {
            "name": "walls",
            "displayName": "Better Walls",
            "author": "someone",
            "version": "v1.2.0",
            "definitions": "defs/definitions.json",
        },
    )
    write_json(
        root / "defs" / "definitions.json",
        [
            {"path": "content/brick.json", "name": "brick"},
            {"path": "content/steel.json", "name": "steel"},
            {"path": "content/gun.json", "name": "gun", "registry": "turrets"},
        ],
    )
    write_json(root / "defs" / "content" / "brick.json", {"type": "block", "health": 50})
    write_json(root / "defs" / "content" / "steel.json", {"type": "block", "health": 400})
    write_json(root / "defs" / "content" / "gun.json", {"type": "turret", "range": 3})
    return root


@pytest.fixture
def env(block_cls, turret_cls):
    environment = Environment()
    environment.types.add("block", block_cls)
    environment.types.add("turret", turret_cls)
    environment.add_moddable_registry(Registry(), "turrets")
    return environment


@pytest.fixture
def messages():
    return []


@pytest.fixture
def loader(env, messages):
    mod_loader = ModLoader(env)
    mod_loader.set_info_output(messages.append)
    return mod_loader


def test_load_mod_reads_manifest_and_content(loader, mod_dir):
    mod = loader.load_mod(mod_dir)

    assert mod.name == "walls"
    assert mod.display_name == "Better Walls"
    assert mod.author == "someone"
    assert mod.version == "v1.2.0"
    assert mod.tagline == ""
    assert [c.name for c in mod.content] == ["brick", "steel", "gun"]
    assert [c.registry for c in mod.content] == ["content", "content", "turrets"]
    assert mod.content[0].constructible == {"type": "block", "health": 50}
    assert json.loads(mod.content[0].json) == mod.content[0].constructible


def test_load_mod_does_not_install(loader, env, mod_dir):
    loader.load_mod(mod_dir)

    assert env.registries.get("content").size == 0


def test_add_installs_content_into_registries(loader, env, mod_dir, block_cls, turret_cls):
    loader.add(mod_dir)

    assert env.registries.get("content").has("brick")
    assert env.registries.get("turrets").has("gun")

    steel = env.construct("steel")
    assert isinstance(steel, block_cls)
    assert steel.health == 400

    gun = env.construct("GUN")
    assert isinstance(gun, turret_cls)
    assert gun.range == 6


def test_add_with_prefix(loader, env, mod_dir):
    loader.set_prefix(True)

    mod = loader.add(mod_dir)

    assert mod.content[0].name == "walls:brick"
    assert env.registries.get("content").has("walls:brick")
    assert not env.registries.get("content").has("brick")


def test_prefix_from_settings(env, mod_dir):
    loader = ModLoader(env, ModRegistrySettings(prefix_content_names=True))

    loader.add(mod_dir)

    assert env.registries.get("turrets").has("walls:gun")


def test_adding_same_mod_twice_fails(loader, mod_dir):
    """Duplicate content is fatal for the second mod."""
    loader.add(mod_dir)

    with pytest.raises(DuplicateNameError, match="brick"):
        loader.add(mod_dir)


def test_unknown_target_registry_fails(env, mod_dir):
    write_json(
        mod_dir / "defs" / "definitions.json",
        [{"path": "content/brick.json", "registry": "floors"}],
    )
    loader = ModLoader(env)

    with pytest.raises(NotFoundError, match="floors"):
        loader.add(mod_dir)


def test_definition_defaults(loader, mod_dir):
    write_json(mod_dir / "defs" / "definitions.json", [{"path": "content/brick.json"}])

    mod = loader.load_mod(mod_dir)

    assert mod.content[0].name == "item"
    assert mod.content[0].registry == "content"


def test_info_output_reports_stages(loader, messages, mod_dir):
    loader.add(mod_dir)

    assert messages[0] == f"|| LOADING MOD FROM {mod_dir} ||"
    assert "| MOD IDENTIFIED: Better Walls |" in messages
    assert "|| MOD LOADING SUCCESSFUL ||" in messages
    assert messages[-1] == "|| MOD FULLY LOADED ||"


def test_set_info_output_rejects_non_callable(loader):
    with pytest.raises(TypeError):
        loader.set_info_output("print")


def test_missing_manifest(loader, messages, tmp_path):
    with pytest.raises(ModLoadError, match="mod.json"):
        loader.load_mod(tmp_path)
    assert messages[-1] == "|| MOD LOADING FAILED ||"


@pytest.mark.parametrize(
    ("manifest", "message"),
    [
        ({"definitions": "defs/definitions.json"}, "mod ID"),
        ({"name": "walls"}, "definition file"),
        ({"name": "walls", "definitions": "nowhere.json"}, "empty or not found"),
    ],
)
def test_invalid_manifest(loader, mod_dir, manifest, message):
    write_json(mod_dir / "mod.json", manifest)

    with pytest.raises(ModLoadError, match=message):
        loader.load_mod(mod_dir)


@pytest.mark.parametrize(
    ("definitions", "message"),
    [
        ({"path": "content/brick.json"}, "single array"),
        (["content/brick.json"], "must be objects"),
        ([{"name": "brick"}], "path to the content"),
    ],
)
def test_invalid_definitions(loader, mod_dir, definitions, message):
    write_json(mod_dir / "defs" / "definitions.json", definitions)

    with pytest.raises(ModLoadError, match=message):
        loader.load_mod(mod_dir)


def test_content_missing_required_property(loader, mod_dir):
    write_json(mod_dir / "defs" / "content" / "brick.json", {"health": 50})

    with pytest.raises(ModLoadError, match="'type'"):
        loader.load_mod(mod_dir)


def test_content_file_missing(loader, mod_dir):
    (mod_dir / "defs" / "content" / "steel.json").unlink()

    with pytest.raises(ModLoadError, match="steel.json"):
        loader.load_mod(mod_dir)


def test_invalid_json(loader, mod_dir):
    (mod_dir / "mod.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ModLoadError, match="not valid JSON"):
        loader.load_mod(mod_dir)
