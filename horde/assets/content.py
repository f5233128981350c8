"""Content loading entry point."""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from horde.assets import enemy_data, passive_data, spawn_data, weapon_data
from horde.assets.errors import ContentError, ContentValidationError
from horde.combat.passives import PassiveCatalog
from horde.combat.weapon_types import WeaponRegistry
from horde.engine.logger import channel
from horde.world.enemies import EnemyCatalog
from horde.world.spawning import (
    ExtractionWave,
    SpawnGeneral,
    SpawnPhase,
    SpawnTable,
    parse_unlock_times,
    validate_phases,
)


class ContentManager:
    """Builds every tuning table once and hands out the frozen results."""

    def __init__(
        self,
        *,
        weapons: Optional[Iterable[Mapping[str, Any]]] = None,
        passives: Optional[Iterable[Mapping[str, Any]]] = None,
        enemies: Optional[Iterable[Mapping[str, Any]]] = None,
        phases: Optional[Iterable[Mapping[str, Any]]] = None,
        unlock_times: Optional[Mapping[str, float]] = None,
        general: Optional[Mapping[str, Any]] = None,
        extraction: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._raw_weapons = list(weapon_data.WEAPON_TYPES if weapons is None else weapons)
        self._raw_passives = list(passive_data.PASSIVE_ITEMS if passives is None else passives)
        self._raw_enemies = list(enemy_data.ENEMY_TYPES if enemies is None else enemies)
        self._raw_phases = list(spawn_data.PHASES if phases is None else phases)
        self._raw_unlocks = dict(spawn_data.ENEMY_UNLOCK_TIMES if unlock_times is None else unlock_times)
        self._raw_general = dict(spawn_data.GENERAL if general is None else general)
        self._raw_extraction = dict(spawn_data.EXTRACTION_WAVE if extraction is None else extraction)
        self._weapons: Optional[WeaponRegistry] = None
        self._passives: Optional[PassiveCatalog] = None
        self._enemies: Optional[EnemyCatalog] = None
        self._spawns: Optional[SpawnTable] = None

    def load(self) -> "ContentManager":
        """Build and cross-check every table; raises on the first broken table."""

        weapons = WeaponRegistry.from_dicts(self._raw_weapons)
        passives = PassiveCatalog.from_dicts(self._raw_passives)
        enemies = EnemyCatalog.from_dicts(self._raw_enemies)
        phases = [SpawnPhase.from_dict(entry) for entry in self._raw_phases]
        validate_phases(phases)
        spawns = SpawnTable(
            phases,
            parse_unlock_times(self._raw_unlocks),
            general=SpawnGeneral.from_dict(self._raw_general),
            extraction=ExtractionWave.from_dict(self._raw_extraction),
            enemies=enemies,
        )
        _check_enemy_references(spawns, enemies)
        self._weapons, self._passives, self._enemies, self._spawns = weapons, passives, enemies, spawns
        channel("content").info(
            "Loaded %d weapons, %d passives, %d enemies, %d spawn phases",
            len(weapons),
            len(passives),
            len(enemies),
            len(phases),
        )
        return self

    def validate(self) -> List[str]:
        """Collect every problem across all tables instead of stopping at the first."""

        problems: List[str] = []

        def attempt(label: str, build):
            try:
                return build()
            except ContentError as exc:
                problems.append(f"{label}: {exc}")
                return None

        attempt("weapons", lambda: WeaponRegistry.from_dicts(self._raw_weapons))
        attempt("passives", lambda: PassiveCatalog.from_dicts(self._raw_passives))
        enemies = attempt("enemies", lambda: EnemyCatalog.from_dicts(self._raw_enemies))
        unlocks = attempt("spawning", lambda: parse_unlock_times(self._raw_unlocks))
        attempt("spawning", lambda: SpawnGeneral.from_dict(self._raw_general))
        extraction = attempt("spawning", lambda: ExtractionWave.from_dict(self._raw_extraction))
        phases = attempt("spawning", lambda: [SpawnPhase.from_dict(entry) for entry in self._raw_phases])
        if phases is not None:
            attempt("spawning", lambda: validate_phases(phases))
            if phases and None not in (enemies, unlocks, extraction):
                attempt(
                    "references",
                    lambda: _check_enemy_references(
                        SpawnTable(phases, unlocks, extraction=extraction),
                        enemies,
                    ),
                )
        return problems

    def _require(self, table: Optional[Any]) -> Any:
        if table is None:
            raise ContentError("ContentManager.load() has not been called")
        return table

    @property
    def weapons(self) -> WeaponRegistry:
        return self._require(self._weapons)

    @property
    def passives(self) -> PassiveCatalog:
        return self._require(self._passives)

    @property
    def enemies(self) -> EnemyCatalog:
        return self._require(self._enemies)

    @property
    def spawns(self) -> SpawnTable:
        return self._require(self._spawns)


def _check_enemy_references(spawns: SpawnTable, enemies: EnemyCatalog) -> None:
    problems = []
    for enemy_id in spawns.unlock_times:
        if enemy_id not in enemies:
            problems.append(f"unlock time for unknown enemy '{enemy_id}'")
    for phase in spawns.phases:
        for enemy_id in phase.enemy_types:
            if enemy_id not in enemies:
                problems.append(f"phase '{phase.name}' lists unknown enemy '{enemy_id}'")
    for enemy_id in spawns.extraction.enemy_types:
        if enemy_id not in enemies:
            problems.append(f"extraction wave lists unknown enemy '{enemy_id}'")
    if problems:
        raise ContentValidationError("; ".join(problems))


_default: Optional[ContentManager] = None


def default_content() -> ContentManager:
    """Process-wide content, built from the bundled tables on first use."""

    global _default
    if _default is None:
        _default = ContentManager().load()
    return _default


__all__ = ["ContentManager", "default_content"]
