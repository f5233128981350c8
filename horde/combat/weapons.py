"""Runtime weapon instances, upgrade application and level-ups."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from horde.combat.weapon_types import (
    AffectedBy,
    UpgradeOperation,
    UpgradeStep,
    WeaponKind,
    WeaponRegistry,
    WeaponStats,
    WeaponTypeDefinition,
)
from horde.engine.logger import channel


@dataclass
class WeaponInstance:
    """A weapon held by one entity.

    ``stats`` is owned by the instance; everything else is read through the
    shared, frozen definition.
    """

    definition: WeaponTypeDefinition
    stats: WeaponStats
    level: int = 1
    cooldown: float = 0.0
    _upgrade_log: List[UpgradeStep] = field(default_factory=list, init=False, repr=False)

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def kind(self) -> WeaponKind:
        return self.definition.kind

    @property
    def affected_by(self) -> AffectedBy:
        return self.definition.affected_by

    @property
    def max_level(self) -> int:
        return self.definition.max_level

    @property
    def is_max_level(self) -> bool:
        return self.level >= self.definition.max_level

    @property
    def applied_upgrades(self) -> tuple[UpgradeStep, ...]:
        return tuple(self._upgrade_log)


def create_weapon(type_id: str, registry: Optional[WeaponRegistry] = None) -> Optional[WeaponInstance]:
    """Build a fresh level 1 instance, or ``None`` when ``type_id`` is unknown."""

    if registry is None:
        from horde.assets.content import default_content

        registry = default_content().weapons
    definition = registry.get(type_id)
    if definition is None:
        return None
    return WeaponInstance(definition=definition, stats=WeaponStats.from_base(definition.base_stats))


def apply_upgrade(instance: WeaponInstance, step: Union[UpgradeStep, Mapping[str, Any]]) -> None:
    """Apply one upgrade step to ``instance.stats`` in place.

    Raw mappings are parsed first, so an unresolvable property path raises
    ``UpgradePathError`` before anything is written.
    """

    if not isinstance(step, UpgradeStep):
        step = UpgradeStep.from_dict(step, f"weapon '{instance.id}' upgrade")
    if step.operation is UpgradeOperation.SET:
        step.field.write(instance.stats, step.value)
    else:
        step.field.write(instance.stats, step.field.read(instance.stats) + step.value)
    instance._upgrade_log.append(step)
    channel("weapons").debug(
        "%s L%d %s %s %s -> %s",
        instance.id,
        step.level,
        step.operation.value,
        step.property_path,
        step.value,
        step.field.read(instance.stats),
    )


def pending_upgrades(definition: WeaponTypeDefinition, from_level: int, to_level: int) -> List[UpgradeStep]:
    """Steps crossed when going from ``from_level`` to ``to_level``, in application order."""

    steps: List[UpgradeStep] = []
    for level in range(from_level + 1, min(to_level, definition.max_level) + 1):
        steps.extend(definition.steps_for_level(level))
    return steps


def level_up_weapon(instance: WeaponInstance, target_level: Optional[int] = None) -> int:
    """Raise ``instance`` to ``target_level`` (default: one level) and return levels gained."""

    if target_level is None:
        target_level = instance.level + 1
    target_level = min(target_level, instance.max_level)
    if target_level <= instance.level:
        return 0
    start = instance.level
    for level in range(start + 1, target_level + 1):
        for step in instance.definition.steps_for_level(level):
            apply_upgrade(instance, step)
        instance.level = level
    channel("weapons").info("%s levelled %d -> %d", instance.id, start, instance.level)
    return instance.level - start


__all__ = [
    "WeaponInstance",
    "apply_upgrade",
    "create_weapon",
    "level_up_weapon",
    "pending_upgrades",
]
