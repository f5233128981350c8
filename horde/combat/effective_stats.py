"""Combine a weapon's current stats with player passives."""
from __future__ import annotations

from dataclasses import dataclass
from math import floor
from typing import Any, Dict, Mapping, Union

from horde.combat.passives import PassiveStats, PlayerPassiveTotals
from horde.combat.weapon_types import STAT_NAMES, WeaponArchetype, WeaponKind, WeaponStats
from horde.combat.weapons import WeaponInstance

MIN_COOLDOWN = 0.1
MIN_ATTACK_INTERVAL = 0.01


@dataclass(frozen=True)
class EffectiveStats:
    damage: float
    cooldown: float
    area: float
    size: float
    speed: float
    duration: float
    amount: float
    pierce: float
    # Derived conveniences for older consumers; never fed back as inputs.
    projectile_speed: float
    projectile_count: int
    range: float
    attack_speed: float

    def base_view(self) -> Dict[str, float]:
        """The scaled stats without the derived fields."""

        return {stat: getattr(self, stat) for stat in STAT_NAMES}


def _scale_area(kind: WeaponKind, stats: WeaponStats, multiplier: float) -> None:
    archetype = kind.archetype
    if archetype is WeaponArchetype.PROJECTILE:
        # Area is reach for projectiles; only the rendered size grows.
        stats.size *= multiplier
    elif archetype in (WeaponArchetype.AURA, WeaponArchetype.DEPLOYABLE):
        stats.area *= multiplier
    elif archetype is WeaponArchetype.ORBIT:
        stats.area *= multiplier
        stats.size *= multiplier


def get_effective_weapon_stats(
    instance: WeaponInstance,
    passives: Union[PassiveStats, PlayerPassiveTotals, Mapping[str, Any], None] = None,
) -> EffectiveStats:
    """Return combat-ready stats for ``instance`` under ``passives``.

    ``passives`` may be a ``PassiveStats``, the totals from
    ``aggregate_passives``, a mapping of passive fields, or ``None``.
    Pure: the instance is not touched and equal inputs give equal outputs.
    """

    if isinstance(passives, PlayerPassiveTotals):
        passives = passives.weapon_passives()
    elif not isinstance(passives, PassiveStats):
        passives = PassiveStats.from_mapping(passives)
    stats = instance.stats.copy()
    flags = instance.affected_by

    if flags.damage and passives.damage_multiplier:
        stats.damage *= passives.damage_multiplier
    if flags.cooldown and passives.cooldown_multiplier:
        stats.cooldown = max(MIN_COOLDOWN, stats.cooldown * (1 + passives.cooldown_multiplier))
    if flags.speed and passives.speed_multiplier:
        stats.speed *= passives.speed_multiplier
    if flags.amount and passives.amount_bonus:
        stats.amount += passives.amount_bonus
    if flags.duration and passives.duration_multiplier:
        stats.duration *= passives.duration_multiplier
    if flags.area and passives.area_multiplier:
        _scale_area(instance.kind, stats, passives.area_multiplier)

    return EffectiveStats(
        **stats.as_dict(),
        projectile_speed=stats.speed,
        projectile_count=floor(stats.amount),
        range=stats.area,
        attack_speed=1 / max(MIN_ATTACK_INTERVAL, stats.cooldown),
    )


__all__ = [
    "EffectiveStats",
    "MIN_ATTACK_INTERVAL",
    "MIN_COOLDOWN",
    "get_effective_weapon_stats",
]
