"""Enemy type catalog and weighted spawn selection."""
from __future__ import annotations

import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from horde.assets.errors import ContentValidationError, require_bool, require_int, require_number

FALLBACK_ENEMY = "basic"


@dataclass(frozen=True)
class EnemyType:
    id: str
    name: str
    health: float
    speed: float
    damage: float
    xp_value: int
    radius: float
    spawn_weight: float
    enabled: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnemyType":
        enemy_id = data.get("id")
        if not isinstance(enemy_id, str) or not enemy_id:
            raise ContentValidationError("Enemy ids must be non-empty strings")
        context = f"enemy '{enemy_id}'"
        weight = require_number(data.get("spawnWeight", 0.0), f"{context} spawnWeight")
        if weight < 0.0:
            raise ContentValidationError(f"{context} spawnWeight must not be negative")
        return cls(
            id=enemy_id,
            name=str(data.get("name", enemy_id)),
            health=require_number(data.get("health", 10.0), f"{context} health"),
            speed=require_number(data.get("speed", 80.0), f"{context} speed"),
            damage=require_number(data.get("damage", 5.0), f"{context} damage"),
            xp_value=require_int(data.get("xpValue", 1), f"{context} xpValue"),
            radius=require_number(data.get("radius", 12.0), f"{context} radius"),
            spawn_weight=weight,
            enabled=require_bool(data.get("enabled", True), f"{context} enabled"),
        )


class EnemyCatalog:
    def __init__(self, enemies: Iterable[EnemyType]) -> None:
        table: Dict[str, EnemyType] = {}
        for enemy in enemies:
            if enemy.id in table:
                raise ContentValidationError(f"Duplicate enemy id '{enemy.id}'")
            table[enemy.id] = enemy
        self._enemies: Mapping[str, EnemyType] = MappingProxyType(table)

    @classmethod
    def from_dicts(cls, entries: Iterable[Mapping[str, Any]]) -> "EnemyCatalog":
        return cls(EnemyType.from_dict(entry) for entry in entries)

    def get(self, enemy_id: str) -> Optional[EnemyType]:
        return self._enemies.get(enemy_id)

    def ids(self) -> List[str]:
        return list(self._enemies.keys())

    def enabled(self, enemy_ids: Iterable[str]) -> List[str]:
        """Filter ``enemy_ids`` down to known, enabled types, keeping order."""

        result = []
        for enemy_id in enemy_ids:
            enemy = self._enemies.get(enemy_id)
            if enemy is not None and enemy.enabled:
                result.append(enemy_id)
        return result

    def total_weight(self, enemy_ids: Iterable[str]) -> float:
        return sum(self._enemies[enemy_id].spawn_weight for enemy_id in self.enabled(enemy_ids))

    def choose(self, enemy_ids: Iterable[str], rng: random.Random) -> EnemyType:
        """Weighted random pick among ``enemy_ids``; falls back to the basic enemy."""

        candidates = [self._enemies[enemy_id] for enemy_id in self.enabled(enemy_ids)]
        total = self.total_weight(enemy.id for enemy in candidates)
        if total > 0.0:
            roll = rng.random() * total
            for enemy in candidates:
                roll -= enemy.spawn_weight
                if roll <= 0.0:
                    return enemy
            return candidates[-1]
        fallback = self._enemies.get(FALLBACK_ENEMY)
        if fallback is None:
            raise ContentValidationError(f"Enemy catalog has no '{FALLBACK_ENEMY}' fallback")
        return fallback

    def __contains__(self, enemy_id: object) -> bool:
        return enemy_id in self._enemies

    def __len__(self) -> int:
        return len(self._enemies)


__all__ = ["EnemyCatalog", "EnemyType", "FALLBACK_ENEMY"]
