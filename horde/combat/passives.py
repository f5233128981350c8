"""Passive items and the stat totals they contribute."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from horde.assets.errors import ContentValidationError, require_number
from horde.engine.logger import channel

# Authored effect key -> PlayerPassiveTotals attribute.
EFFECT_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "damageMultiplier": "damage_multiplier",
        "areaMultiplier": "area_multiplier",
        "cooldownMultiplier": "cooldown_multiplier",
        "speedMultiplier": "speed_multiplier",
        "durationMultiplier": "duration_multiplier",
        "amountBonus": "amount_bonus",
        "xpMultiplier": "xp_multiplier",
        "pickupRadiusBonus": "pickup_radius_bonus",
        "maxHealthBonus": "max_health_bonus",
        "damageReduction": "damage_reduction",
        "healthRegen": "health_regen",
        "luckBonus": "luck_bonus",
    }
)

_WEAPON_FIELDS = (
    "damage_multiplier",
    "cooldown_multiplier",
    "speed_multiplier",
    "amount_bonus",
    "duration_multiplier",
    "area_multiplier",
)


@dataclass(frozen=True)
class PassiveStats:
    """Weapon-facing passive bonuses. ``None`` or zero means no effect."""

    damage_multiplier: Optional[float] = None
    cooldown_multiplier: Optional[float] = None
    speed_multiplier: Optional[float] = None
    amount_bonus: Optional[int] = None
    duration_multiplier: Optional[float] = None
    area_multiplier: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "PassiveStats":
        """Accept either authored camelCase keys or attribute names; ignore the rest."""

        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError(f"passives must be a mapping or PassiveStats, got {type(data).__name__}")
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = EFFECT_KEYS.get(key, key)
            if name in _WEAPON_FIELDS:
                values[name] = value
        return cls(**values)


@dataclass(frozen=True)
class PassiveDefinition:
    id: str
    name: str
    description: str
    rarity: str
    max_level: int
    effects: Mapping[int, Mapping[str, float]]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PassiveDefinition":
        passive_id = data.get("id")
        if not isinstance(passive_id, str) or not passive_id:
            raise ContentValidationError("Passive ids must be non-empty strings")
        context = f"passive '{passive_id}'"
        max_level = data.get("maxLevel")
        if not isinstance(max_level, int) or max_level < 1:
            raise ContentValidationError(f"{context} maxLevel must be a positive integer")
        effects: Dict[int, Mapping[str, float]] = {}
        for entry in data.get("effects", ()):
            level = entry.get("level")
            if not isinstance(level, int) or not 1 <= level <= max_level:
                raise ContentValidationError(f"{context} effect level {level!r} outside [1, {max_level}]")
            if level in effects:
                raise ContentValidationError(f"{context} declares level {level} twice")
            payload = {key: value for key, value in entry.items() if key != "level"}
            unknown = sorted(set(payload) - set(EFFECT_KEYS))
            if unknown:
                raise ContentValidationError(f"{context} level {level} has unknown effects: {unknown}")
            for key, value in payload.items():
                require_number(value, f"{context} level {level} {key}")
            effects[level] = MappingProxyType(payload)
        return cls(
            id=passive_id,
            name=str(data.get("name", passive_id)),
            description=str(data.get("description", "")),
            rarity=str(data.get("rarity", "common")),
            max_level=max_level,
            effects=MappingProxyType(effects),
        )

    def effect_at(self, level: int) -> Optional[Mapping[str, float]]:
        return self.effects.get(level)


class PassiveCatalog:
    """Read-only passive item definitions keyed by lower-case id."""

    def __init__(self, definitions: Iterable[PassiveDefinition]) -> None:
        table: Dict[str, PassiveDefinition] = {}
        for definition in definitions:
            key = definition.id.lower()
            if key in table:
                raise ContentValidationError(f"Duplicate passive id '{definition.id}'")
            table[key] = definition
        self._passives: Mapping[str, PassiveDefinition] = MappingProxyType(table)

    @classmethod
    def from_dicts(cls, entries: Iterable[Mapping[str, Any]]) -> "PassiveCatalog":
        return cls(PassiveDefinition.from_dict(entry) for entry in entries)

    def get(self, passive_id: str) -> Optional[PassiveDefinition]:
        definition = self._passives.get(passive_id.lower())
        if definition is None:
            channel("passives").warning("Unknown passive item: %s", passive_id)
        return definition

    def all(self) -> List[PassiveDefinition]:
        return list(self._passives.values())

    def __contains__(self, passive_id: object) -> bool:
        return isinstance(passive_id, str) and passive_id.lower() in self._passives

    def __len__(self) -> int:
        return len(self._passives)


@dataclass
class PlayerPassiveTotals:
    """Aggregated bonuses from every passive item a player owns."""

    damage_multiplier: float = 1.0
    area_multiplier: float = 1.0
    cooldown_multiplier: float = 0.0
    speed_multiplier: float = 1.0
    duration_multiplier: float = 1.0
    amount_bonus: int = 0
    xp_multiplier: float = 1.0
    pickup_radius_bonus: float = 0.0
    max_health_bonus: float = 0.0
    damage_reduction: float = 0.0
    health_regen: float = 0.0
    luck_bonus: float = 0.0

    def weapon_passives(self) -> PassiveStats:
        return PassiveStats(**{name: getattr(self, name) for name in _WEAPON_FIELDS})


def aggregate_passives(
    owned: Iterable[Tuple[str, int]],
    catalog: Optional[PassiveCatalog] = None,
) -> PlayerPassiveTotals:
    """Fold owned ``(passive_id, level)`` pairs into player totals.

    Every effect value stacks additively onto its total, so two +10% damage
    items give a 1.2 multiplier and cooldown reductions sum their negatives.
    """

    if catalog is None:
        from horde.assets.content import default_content

        catalog = default_content().passives
    totals = PlayerPassiveTotals()
    for passive_id, level in owned:
        definition = catalog.get(passive_id)
        if definition is None:
            continue
        effect = definition.effect_at(level)
        if effect is None:
            channel("passives").warning("%s has no effect for level %s", passive_id, level)
            continue
        for key, value in effect.items():
            name = EFFECT_KEYS[key]
            setattr(totals, name, getattr(totals, name) + value)
    return totals


__all__ = [
    "EFFECT_KEYS",
    "PassiveCatalog",
    "PassiveDefinition",
    "PassiveStats",
    "PlayerPassiveTotals",
    "aggregate_passives",
]
