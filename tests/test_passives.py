"""Passive catalog loading and aggregation."""
from __future__ import annotations

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from math import isclose
import logging

import pytest

from horde.assets.content import default_content
from horde.assets.errors import ContentValidationError
from horde.combat.passives import (
    PassiveCatalog,
    PassiveDefinition,
    PassiveStats,
    aggregate_passives,
)


def test_bundled_passives_load():
    catalog = default_content().passives
    assert len(catalog) == 12
    assert "amp" in catalog
    assert catalog.get("multishot").max_level == 3


def test_ids_are_case_insensitive():
    catalog = default_content().passives
    assert catalog.get("AMP") is catalog.get("amp")
    assert "Wings" in catalog


def test_stacked_passives_add_up():
    totals = aggregate_passives(
        [("amp", 1), ("amp", 1), ("cooldown", 5), ("area", 1), ("multishot", 2)]
    )
    assert isclose(totals.damage_multiplier, 1.2)
    assert isclose(totals.cooldown_multiplier, -0.4)
    assert isclose(totals.area_multiplier, 1.1)
    assert totals.amount_bonus == 2


def test_player_side_totals():
    totals = aggregate_passives([("magnet", 2), ("vigor", 1), ("armor", 3), ("greed", 1)])
    assert isclose(totals.pickup_radius_bonus, 40)
    assert isclose(totals.max_health_bonus, 20)
    assert isclose(totals.damage_reduction, 3)
    assert isclose(totals.xp_multiplier, 1.1)


def test_weapon_passives_view():
    weapon_side = aggregate_passives([("amp", 2), ("wings", 1)]).weapon_passives()
    assert isinstance(weapon_side, PassiveStats)
    assert isclose(weapon_side.damage_multiplier, 1.2)
    assert isclose(weapon_side.speed_multiplier, 1.1)
    assert weapon_side.cooldown_multiplier == 0.0


def test_unknown_passive_is_skipped_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="horde.passives"):
        totals = aggregate_passives([("moon_boots", 1), ("amp", 9)])
    assert totals.damage_multiplier == 1.0
    assert "moon_boots" in caplog.text
    assert "amp" in caplog.text


def test_from_mapping_ignores_player_side_keys():
    stats = PassiveStats.from_mapping(
        {"damageMultiplier": 1.1, "area_multiplier": 1.3, "xpMultiplier": 2.0, "colour": "red"}
    )
    assert stats == PassiveStats(damage_multiplier=1.1, area_multiplier=1.3)
    assert PassiveStats.from_mapping(None) == PassiveStats()


def test_definition_rejects_unknown_effect():
    with pytest.raises(ContentValidationError):
        PassiveDefinition.from_dict(
            {"id": "odd", "maxLevel": 1, "effects": [{"level": 1, "critChance": 0.1}]}
        )


def test_definition_rejects_level_outside_range():
    with pytest.raises(ContentValidationError):
        PassiveDefinition.from_dict(
            {"id": "odd", "maxLevel": 2, "effects": [{"level": 3, "damageMultiplier": 0.1}]}
        )


def test_duplicate_ids_ignore_case():
    entry = {"id": "Amp", "maxLevel": 1, "effects": [{"level": 1, "damageMultiplier": 0.1}]}
    with pytest.raises(ContentValidationError):
        PassiveCatalog.from_dicts([entry, dict(entry, id="amp")])


def test_definition_rejects_non_numeric_effect():
    with pytest.raises(ContentValidationError):
        PassiveDefinition.from_dict(
            {"id": "odd", "maxLevel": 1, "effects": [{"level": 1, "damageMultiplier": "lots"}]}
        )
