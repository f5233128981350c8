"""Time-phased spawn tuning: phase lookup, enemy unlocks and wave planning."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pygame.math import Vector2

from horde.assets.errors import ContentValidationError, require_bool, require_int, require_number
from horde.engine.logger import channel
from horde.world.enemies import EnemyCatalog

MAX_DIRECTIONS = 4
MOVEMENT_EDGE_BIAS = 0.7
STILL_SPEED = 1.0
WAVE_LINE_PADDING = 50.0
WAVE_LINE_JITTER = 10.0


class SpawnEdge(Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def normal(self) -> Vector2:
        """Outward unit vector of the edge in screen space (y grows downwards)."""

        return Vector2(_EDGE_NORMALS[self])


_EDGE_NORMALS: Dict[SpawnEdge, Tuple[float, float]] = {
    SpawnEdge.TOP: (0.0, -1.0),
    SpawnEdge.RIGHT: (1.0, 0.0),
    SpawnEdge.BOTTOM: (0.0, 1.0),
    SpawnEdge.LEFT: (-1.0, 0.0),
}


@dataclass(frozen=True)
class WaveParams:
    interval: float
    size: int
    min_directions: int
    max_directions: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], context: str = "wave") -> "WaveParams":
        if not isinstance(data, Mapping):
            raise ContentValidationError(f"{context} must be a mapping")
        missing = [key for key in ("interval", "size", "minDirections", "maxDirections") if key not in data]
        if missing:
            raise ContentValidationError(f"{context} missing fields: {missing}")
        return cls(
            interval=require_number(data["interval"], f"{context}.interval"),
            size=require_int(data["size"], f"{context}.size"),
            min_directions=require_int(data["minDirections"], f"{context}.minDirections"),
            max_directions=require_int(data["maxDirections"], f"{context}.maxDirections"),
        )


@dataclass(frozen=True)
class SpawnPhase:
    name: str
    start_time: float
    end_time: float
    wave: WaveParams
    enemy_types: Tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpawnPhase":
        name = data.get("name", "phase")
        context = f"phase '{name}'"
        end_time = data.get("endTime")
        return cls(
            name=name,
            start_time=require_number(data.get("startTime", 0.0), f"{context} startTime"),
            end_time=math.inf if end_time is None else require_number(end_time, f"{context} endTime"),
            wave=WaveParams.from_dict(data.get("wave", {}), f"{context} wave"),
            enemy_types=_enemy_ids(data.get("enemyTypes", ()), f"{context} enemyTypes"),
        )

    def contains(self, game_time: float) -> bool:
        return self.start_time <= game_time < self.end_time


@dataclass(frozen=True)
class SpawnGeneral:
    max_enemies: int = 150
    spawn_margin: float = 10.0
    continuous_interval: float = 1.5

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpawnGeneral":
        general = cls(
            max_enemies=require_int(data.get("maxEnemies", 150), "general maxEnemies"),
            spawn_margin=require_number(data.get("spawnMargin", 10.0), "general spawnMargin"),
            continuous_interval=require_number(
                data.get("continuousInterval", 1.5), "general continuousInterval"
            ),
        )
        if general.max_enemies < 0 or general.continuous_interval <= 0.0:
            raise ContentValidationError("general needs maxEnemies >= 0 and a positive continuousInterval")
        return general


@dataclass(frozen=True)
class ExtractionWave:
    enabled: bool = True
    enemy_count: int = 40
    directions: int = MAX_DIRECTIONS
    enemy_types: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExtractionWave":
        wave = cls(
            enabled=require_bool(data.get("enabled", True), "extraction enabled"),
            enemy_count=require_int(data.get("enemyCount", 40), "extraction enemyCount"),
            directions=require_int(data.get("directions", MAX_DIRECTIONS), "extraction directions"),
            enemy_types=_enemy_ids(data.get("enemyTypes", ()), "extraction enemyTypes"),
        )
        if not 1 <= wave.directions <= MAX_DIRECTIONS:
            raise ContentValidationError(f"extraction directions must be within [1, {MAX_DIRECTIONS}]")
        return wave


def _enemy_ids(value: Any, context: str) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ContentValidationError(f"{context} must be a list of enemy ids")
    return tuple(value)


def parse_unlock_times(data: Mapping[str, Any]) -> Dict[str, float]:
    if not isinstance(data, Mapping):
        raise ContentValidationError("enemy unlock times must be a mapping")
    return {
        str(enemy_id): require_number(unlock, f"unlock time for '{enemy_id}'")
        for enemy_id, unlock in data.items()
    }


@dataclass(frozen=True)
class WavePlan:
    phase: str
    groups: Tuple[Tuple[SpawnEdge, int], ...]

    @property
    def total(self) -> int:
        return sum(count for _, count in self.groups)

    @property
    def edges(self) -> Tuple[SpawnEdge, ...]:
        return tuple(edge for edge, _ in self.groups)


def validate_phases(phases: Sequence[SpawnPhase]) -> None:
    """Check that ``phases`` tile ``[0, inf)`` in order with sane wave settings."""

    if not phases:
        raise ContentValidationError("Spawn table needs at least one phase")
    problems: List[str] = []
    if phases[0].start_time != 0.0:
        problems.append(f"first phase '{phases[0].name}' starts at {phases[0].start_time}, not 0")
    for phase in phases:
        if not phase.start_time < phase.end_time:
            problems.append(f"phase '{phase.name}' has start >= end")
        wave = phase.wave
        if not 1 <= wave.min_directions <= wave.max_directions <= MAX_DIRECTIONS:
            problems.append(
                f"phase '{phase.name}' directions must satisfy 1 <= min <= max <= {MAX_DIRECTIONS}"
            )
        if wave.interval <= 0.0 or wave.size < 0:
            problems.append(f"phase '{phase.name}' needs a positive interval and non-negative size")
    for current, following in zip(phases, phases[1:]):
        if current.end_time != following.start_time:
            problems.append(
                f"phase '{current.name}' ends at {current.end_time} but "
                f"'{following.name}' starts at {following.start_time}"
            )
    if phases[-1].end_time != math.inf:
        problems.append(f"last phase '{phases[-1].name}' must be open-ended")
    if problems:
        raise ContentValidationError("; ".join(problems))


@dataclass(frozen=True)
class SpawnTable:
    """Frozen spawn tuning queried by the spawner with the game clock."""

    phases: Tuple[SpawnPhase, ...]
    unlock_times: Mapping[str, float]
    general: SpawnGeneral = field(default_factory=SpawnGeneral)
    extraction: ExtractionWave = field(default_factory=ExtractionWave)
    enemies: Optional[EnemyCatalog] = None

    def __post_init__(self) -> None:
        if not self.phases:
            raise ContentValidationError("Spawn table needs at least one phase")
        object.__setattr__(self, "phases", tuple(self.phases))
        object.__setattr__(self, "unlock_times", MappingProxyType(dict(self.unlock_times)))

    def current_phase(self, game_time: float) -> SpawnPhase:
        for phase in self.phases:
            if phase.contains(game_time):
                return phase
        return self.phases[-1]

    def wave_params(self, game_time: float) -> WaveParams:
        return replace(self.current_phase(game_time).wave)

    def available_enemies(self, game_time: float) -> List[str]:
        """Every enemy id unlocked by ``game_time``, in unlock table order."""

        return [enemy_id for enemy_id, unlock in self.unlock_times.items() if game_time >= unlock]

    def spawnable_enemies(self, game_time: float) -> List[str]:
        """Phase roster intersected with the unlocked ids and enabled catalog entries."""

        unlocked = set(self.available_enemies(game_time))
        roster = [enemy_id for enemy_id in self.current_phase(game_time).enemy_types if enemy_id in unlocked]
        if self.enemies is not None:
            roster = self.enemies.enabled(roster)
        return roster


def movement_edge(velocity: Optional[Vector2], rng: random.Random) -> SpawnEdge:
    """Edge the player is heading towards; random when nearly still."""

    if velocity is None or (abs(velocity.x) < STILL_SPEED and abs(velocity.y) < STILL_SPEED):
        return rng.choice(list(SpawnEdge))
    if abs(velocity.x) > abs(velocity.y):
        return SpawnEdge.RIGHT if velocity.x > 0 else SpawnEdge.LEFT
    return SpawnEdge.BOTTOM if velocity.y > 0 else SpawnEdge.TOP


def select_wave_edges(
    minimum: int,
    maximum: int,
    rng: random.Random,
    velocity: Optional[Vector2] = None,
) -> List[SpawnEdge]:
    """Pick between ``minimum`` and ``maximum`` distinct edges.

    With a velocity, the edge ahead of the player leads the list
    ``MOVEMENT_EDGE_BIAS`` of the time.
    """

    low = max(0, min(minimum, MAX_DIRECTIONS))
    high = max(low, min(maximum, MAX_DIRECTIONS))
    count = rng.randint(low, high)
    available = list(SpawnEdge)
    if velocity is not None:
        ahead = movement_edge(velocity, rng)
        if rng.random() < MOVEMENT_EDGE_BIAS:
            available.remove(ahead)
            rng.shuffle(available)
            return ([ahead] + available)[:count]
    rng.shuffle(available)
    return available[:count]


def split_wave(size: int, edges: Sequence[SpawnEdge]) -> List[Tuple[SpawnEdge, int]]:
    """Spread ``size`` enemies over ``edges``; the first edges absorb the remainder.

    Edges left with nobody to spawn are dropped.
    """

    if not edges or size <= 0:
        return []
    per_edge, remainder = divmod(size, len(edges))
    groups = []
    for index, edge in enumerate(edges):
        count = per_edge + (1 if index < remainder else 0)
        if count:
            groups.append((edge, count))
    return groups


def plan_wave(
    table: SpawnTable,
    game_time: float,
    rng: random.Random,
    *,
    alive: int = 0,
    velocity: Optional[Vector2] = None,
) -> WavePlan:
    """Plan the regular wave due at ``game_time`` without exceeding the enemy cap."""

    phase = table.current_phase(game_time)
    wave = phase.wave
    space = table.general.max_enemies - alive
    size = min(wave.size, space)
    if size <= 0:
        channel("spawning").debug("Wave skipped at %.1fs: enemy cap reached", game_time)
        return WavePlan(phase.name, ())
    edges = select_wave_edges(wave.min_directions, wave.max_directions, rng, velocity)
    plan = WavePlan(phase.name, tuple(split_wave(size, edges)))
    channel("spawning").info(
        "WAVE %s: %d enemies from %s",
        phase.name,
        plan.total,
        ", ".join(edge.name for edge in plan.edges),
    )
    return plan


def plan_continuous_spawn(
    table: SpawnTable,
    game_time: float,
    rng: random.Random,
    *,
    alive: int = 0,
    velocity: Optional[Vector2] = None,
) -> WavePlan:
    """Plan the single trickle enemy between waves; empty while the cap is reached."""

    phase = table.current_phase(game_time)
    if alive >= table.general.max_enemies:
        return WavePlan(phase.name, ())
    if velocity is not None and rng.random() < MOVEMENT_EDGE_BIAS:
        edge = movement_edge(velocity, rng)
    else:
        edge = rng.choice(list(SpawnEdge))
    return WavePlan(phase.name, ((edge, 1),))


@dataclass
class SpawnTimers:
    """Wave and trickle timers owned by the spawner.

    Both keep counting while the enemy cap is reached; the planners then
    hand back empty plans, so a due wave is consumed rather than queued.
    """

    wave: float = 0.0
    trickle: float = 0.0

    def advance(self, table: SpawnTable, game_time: float, dt: float) -> Tuple[bool, bool]:
        """Advance by ``dt`` and report ``(wave_due, trickle_due)``."""

        self.wave += dt
        self.trickle += dt
        wave_due = self.wave >= table.current_phase(game_time).wave.interval
        if wave_due:
            self.wave = 0.0
        trickle_due = self.trickle >= table.general.continuous_interval
        if trickle_due:
            self.trickle = 0.0
        return wave_due, trickle_due

    def reset(self) -> None:
        self.wave = 0.0
        self.trickle = 0.0


def _edge_length(edge: SpawnEdge, viewport: Vector2) -> float:
    return viewport.x if edge in (SpawnEdge.TOP, SpawnEdge.BOTTOM) else viewport.y


def _edge_point(edge: SpawnEdge, camera: Vector2, viewport: Vector2, margin: float, offset: float) -> Vector2:
    if edge is SpawnEdge.TOP:
        return Vector2(camera.x + offset, camera.y - margin)
    if edge is SpawnEdge.BOTTOM:
        return Vector2(camera.x + offset, camera.y + viewport.y + margin)
    if edge is SpawnEdge.LEFT:
        return Vector2(camera.x - margin, camera.y + offset)
    return Vector2(camera.x + viewport.x + margin, camera.y + offset)


def spawn_position(
    table: SpawnTable,
    edge: SpawnEdge,
    camera: Vector2,
    viewport: Vector2,
    rng: random.Random,
) -> Vector2:
    """Random point ``spawn_margin`` pixels outside ``edge`` of the view.

    ``camera`` is the top-left corner of the view and ``viewport`` its size.
    """

    offset = rng.random() * _edge_length(edge, viewport)
    return _edge_point(edge, camera, viewport, table.general.spawn_margin, offset)


def wave_line_positions(
    table: SpawnTable,
    edge: SpawnEdge,
    count: int,
    camera: Vector2,
    viewport: Vector2,
    rng: random.Random,
) -> List[Vector2]:
    """Spread ``count`` wave enemies evenly along ``edge``, clear of the corners."""

    length = _edge_length(edge, viewport)
    positions = []
    for index in range(count):
        t = (index + 0.5) / count
        point = _edge_point(
            edge,
            camera,
            viewport,
            table.general.spawn_margin,
            WAVE_LINE_PADDING + (length - 2 * WAVE_LINE_PADDING) * t,
        )
        point.x += (rng.random() - 0.5) * 2 * WAVE_LINE_JITTER
        point.y += (rng.random() - 0.5) * 2 * WAVE_LINE_JITTER
        positions.append(point)
    return positions


def plan_extraction_wave(
    table: SpawnTable,
    rng: random.Random,
    *,
    alive: int = 0,
) -> Optional[WavePlan]:
    """Plan the large wave fired when the extraction point opens, or ``None`` if disabled."""

    config = table.extraction
    if not config.enabled:
        return None
    size = min(config.enemy_count, table.general.max_enemies - alive)
    edges = select_wave_edges(config.directions, config.directions, rng)
    return WavePlan("Extraction", tuple(split_wave(size, edges)))


def extraction_enemy_types(table: SpawnTable, game_time: float) -> List[str]:
    """Configured extraction roster, or whatever is spawnable right now when it is empty."""

    if table.extraction.enemy_types:
        return list(table.extraction.enemy_types)
    return table.spawnable_enemies(game_time)


def _default_table() -> SpawnTable:
    from horde.assets.content import default_content

    return default_content().spawns


def get_current_phase(game_time: float) -> SpawnPhase:
    return _default_table().current_phase(game_time)


def get_wave_params(game_time: float) -> WaveParams:
    return _default_table().wave_params(game_time)


def get_available_enemies(game_time: float) -> List[str]:
    return _default_table().available_enemies(game_time)


def get_spawnable_enemies(game_time: float) -> List[str]:
    return _default_table().spawnable_enemies(game_time)


__all__ = [
    "ExtractionWave",
    "SpawnEdge",
    "SpawnGeneral",
    "SpawnPhase",
    "SpawnTable",
    "SpawnTimers",
    "WaveParams",
    "WavePlan",
    "extraction_enemy_types",
    "get_available_enemies",
    "get_current_phase",
    "get_spawnable_enemies",
    "get_wave_params",
    "movement_edge",
    "parse_unlock_times",
    "plan_continuous_spawn",
    "plan_extraction_wave",
    "plan_wave",
    "select_wave_edges",
    "spawn_position",
    "split_wave",
    "validate_phases",
    "wave_line_positions",
]
