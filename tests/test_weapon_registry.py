"""Weapon registry loading and upgrade-path validation."""
from __future__ import annotations

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from dataclasses import FrozenInstanceError
import logging

import pytest

from horde.assets.content import default_content
from horde.assets.errors import ContentValidationError, UpgradePathError
from horde.combat.weapon_types import (
    ProjectilePattern,
    StatField,
    UpgradeOperation,
    UpgradeStep,
    WeaponArchetype,
    WeaponKind,
    WeaponRegistry,
    WeaponTypeDefinition,
)


def _weapon_dict(**overrides):
    data = {
        "id": "test_gun",
        "name": "Test Gun",
        "type": "projectile",
        "baseStats": {
            "damage": 10,
            "cooldown": 1.0,
            "area": 400,
            "size": 1.0,
            "speed": 300,
            "duration": 0,
            "amount": 1,
            "pierce": 0,
        },
        "affectedBy": {
            "damage": True,
            "area": True,
            "cooldown": True,
            "speed": True,
            "duration": True,
            "amount": True,
        },
        "maxLevel": 3,
        "upgrades": [],
    }
    data.update(overrides)
    return data


def test_bundled_registry_covers_every_archetype():
    registry = default_content().weapons
    archetypes = {definition.kind.archetype for definition in registry}
    assert archetypes == set(WeaponArchetype)
    patterns = {definition.kind.pattern for definition in registry if definition.kind.pattern}
    assert patterns == set(ProjectilePattern)


def test_lookup_by_id():
    registry = default_content().weapons
    wand = registry.get("magic_wand")
    assert wand is not None
    assert wand.name == "Magic Wand"
    assert wand.kind.type_name == "projectile"
    assert "magic_wand" in registry


def test_unknown_id_returns_none_and_logs(caplog):
    registry = default_content().weapons
    with caplog.at_level(logging.WARNING, logger="horde.weapons"):
        assert registry.get("plasma_cannon") is None
    assert "plasma_cannon" in caplog.text


def test_registry_is_read_only():
    registry = default_content().weapons
    wand = registry.get("magic_wand")
    with pytest.raises(FrozenInstanceError):
        wand.max_level = 99
    with pytest.raises(FrozenInstanceError):
        wand.base_stats.damage = 1000
    with pytest.raises(TypeError):
        registry.weapons["magic_wand"] = wand


def test_duplicate_ids_rejected():
    entry = _weapon_dict()
    with pytest.raises(ContentValidationError):
        WeaponRegistry.from_dicts([entry, entry])


@pytest.mark.parametrize(
    "name, archetype, pattern",
    [
        ("projectile", WeaponArchetype.PROJECTILE, ProjectilePattern.STANDARD),
        ("projectile_directional", WeaponArchetype.PROJECTILE, ProjectilePattern.DIRECTIONAL),
        ("projectile_spread", WeaponArchetype.PROJECTILE, ProjectilePattern.SPREAD),
        ("projectile_homing", WeaponArchetype.PROJECTILE, ProjectilePattern.HOMING),
        ("aura", WeaponArchetype.AURA, None),
        ("orbit", WeaponArchetype.ORBIT, None),
        ("deployable", WeaponArchetype.DEPLOYABLE, None),
    ],
)
def test_type_names_parse_to_kinds(name, archetype, pattern):
    kind = WeaponKind.from_type_name(name)
    assert kind.archetype is archetype
    assert kind.pattern is pattern
    assert kind.type_name == name


@pytest.mark.parametrize("name", ["laser", "aura_big", "projectile_standard", "projectile_", ""])
def test_unknown_type_names_rejected(name):
    with pytest.raises(ContentValidationError):
        WeaponKind.from_type_name(name)


def test_upgrade_step_parses_dotted_path():
    step = UpgradeStep.from_dict({"level": 2, "property": "baseStats.damage", "operation": "add", "value": 3})
    assert step.field is StatField.DAMAGE
    assert step.operation is UpgradeOperation.ADD
    assert step.property_path == "baseStats.damage"


@pytest.mark.parametrize("path", ["baseStats.mana", "damage", "stats.damage", "baseStats.damage.min", ""])
def test_unresolvable_upgrade_paths_fail_at_load(path):
    entry = _weapon_dict(upgrades=[{"level": 2, "property": path, "operation": "set", "value": 1}])
    with pytest.raises(UpgradePathError) as info:
        WeaponTypeDefinition.from_dict(entry)
    assert isinstance(info.value, LookupError)


@pytest.mark.parametrize("level", [1, 4])
def test_upgrade_levels_must_fit_level_range(level):
    entry = _weapon_dict(upgrades=[{"level": level, "property": "baseStats.damage", "operation": "add", "value": 1}])
    with pytest.raises(ContentValidationError):
        WeaponTypeDefinition.from_dict(entry)


def test_unknown_operation_rejected():
    entry = _weapon_dict(upgrades=[{"level": 2, "property": "baseStats.damage", "operation": "mul", "value": 2}])
    with pytest.raises(ContentValidationError):
        WeaponTypeDefinition.from_dict(entry)


def test_missing_base_stat_rejected():
    entry = _weapon_dict()
    stats = dict(entry["baseStats"])
    del stats["pierce"]
    entry["baseStats"] = stats
    with pytest.raises(ContentValidationError, match="pierce"):
        WeaponTypeDefinition.from_dict(entry)


def test_missing_affected_by_flag_rejected():
    entry = _weapon_dict()
    flags = dict(entry["affectedBy"])
    del flags["duration"]
    entry["affectedBy"] = flags
    with pytest.raises(ContentValidationError, match="duration"):
        WeaponTypeDefinition.from_dict(entry)


def test_steps_for_level_keeps_declared_order():
    entry = _weapon_dict(
        upgrades=[
            {"level": 2, "property": "baseStats.damage", "operation": "set", "value": 20},
            {"level": 3, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 2, "property": "baseStats.damage", "operation": "add", "value": 5},
        ]
    )
    definition = WeaponTypeDefinition.from_dict(entry)
    steps = definition.steps_for_level(2)
    assert [step.operation for step in steps] == [UpgradeOperation.SET, UpgradeOperation.ADD]
    assert definition.steps_for_level(5) == ()
