"""Weapon archetypes, stat records and the read-only weapon registry."""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from horde.assets.errors import ContentValidationError, UpgradePathError, require_bool, require_number
from horde.engine.logger import channel

STAT_ROOT = "baseStats"
PASSIVE_AXES = ("damage", "area", "cooldown", "speed", "duration", "amount")


class WeaponArchetype(Enum):
    PROJECTILE = "projectile"
    AURA = "aura"
    ORBIT = "orbit"
    DEPLOYABLE = "deployable"


class ProjectilePattern(Enum):
    STANDARD = "standard"
    DIRECTIONAL = "directional"
    SPREAD = "spread"
    HOMING = "homing"


@dataclass(frozen=True)
class WeaponKind:
    """Archetype plus the projectile firing pattern when there is one."""

    archetype: WeaponArchetype
    pattern: Optional[ProjectilePattern] = None

    def __post_init__(self) -> None:
        if self.archetype is WeaponArchetype.PROJECTILE:
            if self.pattern is None:
                object.__setattr__(self, "pattern", ProjectilePattern.STANDARD)
        elif self.pattern is not None:
            raise ContentValidationError(
                f"{self.archetype.value} weapons do not take a projectile pattern"
            )

    @classmethod
    def from_type_name(cls, name: str) -> "WeaponKind":
        """Parse authored names such as ``projectile_spread`` or ``orbit``."""

        if not isinstance(name, str):
            raise ContentValidationError(f"Weapon type must be a string, got {name!r}")
        head, separator, tail = name.partition("_")
        try:
            archetype = WeaponArchetype(head)
        except ValueError as exc:
            raise ContentValidationError(f"Unknown weapon type '{name}'") from exc
        if archetype is not WeaponArchetype.PROJECTILE:
            if separator:
                raise ContentValidationError(f"Unknown weapon type '{name}'")
            return cls(archetype)
        if not separator:
            return cls(archetype, ProjectilePattern.STANDARD)
        try:
            pattern = ProjectilePattern(tail)
        except ValueError as exc:
            raise ContentValidationError(f"Unknown projectile pattern in '{name}'") from exc
        if pattern is ProjectilePattern.STANDARD:
            raise ContentValidationError(f"Unknown weapon type '{name}'")
        return cls(archetype, pattern)

    @property
    def type_name(self) -> str:
        if self.archetype is WeaponArchetype.PROJECTILE and self.pattern is not ProjectilePattern.STANDARD:
            return f"{self.archetype.value}_{self.pattern.value}"
        return self.archetype.value


@dataclass(frozen=True)
class BaseStats:
    """Declared stats of a weapon type. Shared and never mutated."""

    damage: float
    cooldown: float
    area: float
    size: float
    speed: float
    duration: float
    amount: float
    pierce: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], context: str = "baseStats") -> "BaseStats":
        if not isinstance(data, Mapping):
            raise ContentValidationError(f"{context} must be a mapping")
        values: Dict[str, float] = {}
        missing: List[str] = []
        for stat in STAT_NAMES:
            if stat not in data:
                missing.append(stat)
                continue
            values[stat] = require_number(data[stat], f"{context}.{stat}")
        if missing:
            raise ContentValidationError(f"{context} missing fields: {missing}")
        unknown = sorted(set(data) - set(STAT_NAMES))
        if unknown:
            raise ContentValidationError(f"{context} has unknown fields: {unknown}")
        return cls(**values)


STAT_NAMES: Tuple[str, ...] = tuple(f.name for f in fields(BaseStats))


@dataclass
class WeaponStats:
    """Mutable per-instance copy of a weapon's base stats."""

    damage: float
    cooldown: float
    area: float
    size: float
    speed: float
    duration: float
    amount: float
    pierce: float

    @classmethod
    def from_base(cls, base: BaseStats) -> "WeaponStats":
        return cls(**{stat: getattr(base, stat) for stat in STAT_NAMES})

    def copy(self) -> "WeaponStats":
        return WeaponStats(**self.as_dict())

    def as_dict(self) -> Dict[str, float]:
        return {stat: getattr(self, stat) for stat in STAT_NAMES}


@dataclass(frozen=True)
class AffectedBy:
    """Per-axis switches deciding which player passives touch a weapon."""

    damage: bool = False
    area: bool = False
    cooldown: bool = False
    speed: bool = False
    duration: bool = False
    amount: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], context: str = "affectedBy") -> "AffectedBy":
        if not isinstance(data, Mapping):
            raise ContentValidationError(f"{context} must be a mapping")
        missing = [axis for axis in PASSIVE_AXES if axis not in data]
        if missing:
            raise ContentValidationError(f"{context} missing flags: {missing}")
        flags = {}
        for axis in PASSIVE_AXES:
            flags[axis] = require_bool(data[axis], f"{context}.{axis}")
        return cls(**flags)


class StatField(Enum):
    """Closed set of weapon stats an upgrade step may touch."""

    DAMAGE = "damage"
    COOLDOWN = "cooldown"
    AREA = "area"
    SIZE = "size"
    SPEED = "speed"
    DURATION = "duration"
    AMOUNT = "amount"
    PIERCE = "pierce"

    @classmethod
    def from_path(cls, path: str) -> "StatField":
        """Resolve an authored dotted path such as ``baseStats.damage``."""

        if not isinstance(path, str) or not path:
            raise UpgradePathError(f"Upgrade property must be a non-empty string, got {path!r}")
        segments = path.split(".")
        if len(segments) != 2 or segments[0] != STAT_ROOT:
            raise UpgradePathError(f"Upgrade property '{path}' does not resolve to a base stat")
        try:
            return cls(segments[1])
        except ValueError as exc:
            raise UpgradePathError(f"Upgrade property '{path}' names an unknown stat") from exc

    @property
    def path(self) -> str:
        return f"{STAT_ROOT}.{self.value}"

    def read(self, stats: WeaponStats) -> float:
        return getattr(stats, self.value)

    def write(self, stats: WeaponStats, value: float) -> None:
        setattr(stats, self.value, value)


class UpgradeOperation(Enum):
    SET = "set"
    ADD = "add"


@dataclass(frozen=True)
class UpgradeStep:
    """One atomic stat change applied when a weapon reaches ``level``."""

    level: int
    field: StatField
    operation: UpgradeOperation
    value: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], context: str = "upgrade") -> "UpgradeStep":
        if not isinstance(data, Mapping):
            raise ContentValidationError(f"{context} must be a mapping")
        level = data.get("level")
        if not isinstance(level, int) or isinstance(level, bool):
            raise ContentValidationError(f"{context}.level must be an integer")
        field = StatField.from_path(data.get("property"))
        try:
            operation = UpgradeOperation(data.get("operation"))
        except ValueError as exc:
            raise ContentValidationError(
                f"{context}.operation must be 'set' or 'add', got {data.get('operation')!r}"
            ) from exc
        value = require_number(data.get("value"), f"{context}.value")
        return cls(level=level, field=field, operation=operation, value=value)

    @property
    def property_path(self) -> str:
        return self.field.path


@dataclass(frozen=True)
class WeaponTypeDefinition:
    id: str
    name: str
    kind: WeaponKind
    base_stats: BaseStats
    affected_by: AffectedBy
    max_level: int
    upgrades: Tuple[UpgradeStep, ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        if self.max_level < 1:
            raise ContentValidationError(f"weapon '{self.id}' maxLevel must be positive")
        for step in self.upgrades:
            if not 2 <= step.level <= self.max_level:
                raise ContentValidationError(
                    f"weapon '{self.id}' upgrade level {step.level} outside [2, {self.max_level}]"
                )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WeaponTypeDefinition":
        weapon_id = data.get("id")
        if not isinstance(weapon_id, str) or not weapon_id:
            raise ContentValidationError("Weapon ids must be non-empty strings")
        context = f"weapon '{weapon_id}'"
        max_level = data.get("maxLevel")
        if not isinstance(max_level, int) or isinstance(max_level, bool):
            raise ContentValidationError(f"{context} maxLevel must be an integer")
        upgrades = tuple(
            UpgradeStep.from_dict(entry, f"{context} upgrades[{index}]")
            for index, entry in enumerate(data.get("upgrades", ()))
        )
        return cls(
            id=weapon_id,
            name=str(data.get("name", weapon_id)),
            description=str(data.get("description", "")),
            kind=WeaponKind.from_type_name(data.get("type")),
            base_stats=BaseStats.from_dict(data.get("baseStats"), f"{context} baseStats"),
            affected_by=AffectedBy.from_dict(data.get("affectedBy"), f"{context} affectedBy"),
            max_level=max_level,
            upgrades=upgrades,
        )

    def steps_for_level(self, level: int) -> Tuple[UpgradeStep, ...]:
        """Return the steps for ``level`` in declared order."""

        return tuple(step for step in self.upgrades if step.level == level)


class WeaponRegistry:
    """Read-only catalog of weapon types keyed by id."""

    def __init__(self, definitions: Iterable[WeaponTypeDefinition]) -> None:
        table: Dict[str, WeaponTypeDefinition] = {}
        for definition in definitions:
            if definition.id in table:
                raise ContentValidationError(f"Duplicate weapon id '{definition.id}'")
            table[definition.id] = definition
        self._weapons: Mapping[str, WeaponTypeDefinition] = MappingProxyType(table)

    @classmethod
    def from_dicts(cls, entries: Iterable[Mapping[str, Any]]) -> "WeaponRegistry":
        return cls(WeaponTypeDefinition.from_dict(entry) for entry in entries)

    @property
    def weapons(self) -> Mapping[str, WeaponTypeDefinition]:
        return self._weapons

    def get(self, type_id: str) -> Optional[WeaponTypeDefinition]:
        definition = self._weapons.get(type_id)
        if definition is None:
            channel("weapons").warning("Unknown weapon type: %s", type_id)
        return definition

    def ids(self) -> List[str]:
        return list(self._weapons.keys())

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._weapons

    def __iter__(self) -> Iterator[WeaponTypeDefinition]:
        return iter(self._weapons.values())

    def __len__(self) -> int:
        return len(self._weapons)


__all__ = [
    "AffectedBy",
    "BaseStats",
    "PASSIVE_AXES",
    "ProjectilePattern",
    "STAT_NAMES",
    "StatField",
    "UpgradeOperation",
    "UpgradeStep",
    "WeaponArchetype",
    "WeaponKind",
    "WeaponRegistry",
    "WeaponStats",
    "WeaponTypeDefinition",
]
