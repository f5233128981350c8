"""Spawn phases, enemy unlocks and wave planning."""
from __future__ import annotations

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from dataclasses import FrozenInstanceError, replace
import math
import random

import pytest
from pygame.math import Vector2

from horde.assets.content import default_content
from horde.assets.errors import ContentValidationError
from horde.world.spawning import (
    ExtractionWave,
    SpawnEdge,
    SpawnPhase,
    SpawnTable,
    SpawnTimers,
    WaveParams,
    extraction_enemy_types,
    get_available_enemies,
    get_current_phase,
    get_wave_params,
    movement_edge,
    plan_continuous_spawn,
    plan_extraction_wave,
    plan_wave,
    select_wave_edges,
    spawn_position,
    split_wave,
    validate_phases,
    wave_line_positions,
)


class ScriptedRng:
    """Predictable stand-in for ``random.Random``."""

    def __init__(self, roll: float = 0.0) -> None:
        self.roll = roll

    def random(self) -> float:
        return self.roll

    def randint(self, low: int, high: int) -> int:
        return high

    def shuffle(self, items) -> None:
        items.reverse()

    def choice(self, items):
        return items[0]


def _phase(name, start, end, size=5, low=1, high=2, enemies=("basic",)):
    return SpawnPhase(
        name=name,
        start_time=start,
        end_time=end,
        wave=WaveParams(interval=5.0, size=size, min_directions=low, max_directions=high),
        enemy_types=tuple(enemies),
    )


@pytest.fixture
def table():
    return default_content().spawns


@pytest.mark.parametrize(
    "game_time, expected",
    [
        (0, "Early Game"),
        (149.9, "Early Game"),
        (150, "Mid Game"),
        (209.99, "Mid Game"),
        (210, "Late Game"),
        (1e6, "Late Game"),
    ],
)
def test_current_phase_boundaries(table, game_time, expected):
    assert table.current_phase(game_time).name == expected


def test_module_level_lookups_use_bundled_content():
    assert get_current_phase(0).name == "Early Game"
    assert get_wave_params(300).size == 25
    assert get_available_enemies(0) == ["basic"]


def test_time_before_every_phase_falls_back_to_last(table):
    assert table.current_phase(-1).name == "Late Game"


def test_gap_falls_back_to_last_phase():
    gappy = SpawnTable([_phase("a", 0, 10), _phase("b", 20, math.inf)], {"basic": 0})
    assert gappy.current_phase(15).name == "b"


def test_wave_params_is_a_copy(table):
    params = table.wave_params(0)
    assert params == table.current_phase(0).wave
    assert params is not table.current_phase(0).wave
    with pytest.raises(FrozenInstanceError):
        params.size = 999
    assert table.wave_params(0).size == 7


def test_available_enemies_follow_unlock_times(table):
    assert table.available_enemies(0) == ["basic"]
    assert table.available_enemies(89.9) == ["basic"]
    assert table.available_enemies(90) == ["basic", "fast"]
    assert table.available_enemies(400) == ["basic", "fast", "ranger"]


def test_available_enemies_ignore_phase_roster(table):
    # Early Game only lists basic, but fast unlocks at 90s.
    assert table.current_phase(100).enemy_types == ("basic",)
    assert table.available_enemies(100) == ["basic", "fast"]


def test_spawnable_enemies_respect_roster_and_unlocks(table):
    assert table.spawnable_enemies(100) == ["basic"]
    assert table.spawnable_enemies(160) == ["basic", "fast"]
    assert table.spawnable_enemies(300) == ["basic", "fast", "ranger"]


def test_spawnable_enemies_skip_disabled_types(table):
    custom = replace(
        table,
        phases=(_phase("only", 0, math.inf, enemies=("basic", "tank")),),
        unlock_times={"basic": 0, "tank": 0},
    )
    assert custom.available_enemies(10) == ["basic", "tank"]
    assert custom.spawnable_enemies(10) == ["basic"]


def test_table_is_read_only(table):
    with pytest.raises(FrozenInstanceError):
        table.phases = ()
    with pytest.raises(TypeError):
        table.unlock_times["basic"] = 99


def test_empty_table_is_rejected():
    with pytest.raises(ContentValidationError):
        SpawnTable([], {})


def test_open_ended_phase_parses_to_infinity():
    phase = SpawnPhase.from_dict(
        {
            "name": "Late",
            "startTime": 10,
            "endTime": None,
            "wave": {"interval": 4, "size": 9, "minDirections": 2, "maxDirections": 4},
            "enemyTypes": ["basic"],
        }
    )
    assert phase.end_time == math.inf
    assert phase.contains(1e9)
    assert not phase.contains(9.99)


def test_wave_params_require_every_field():
    with pytest.raises(ContentValidationError):
        WaveParams.from_dict({"interval": 5, "size": 3, "minDirections": 1})


def test_bundled_phases_are_valid(table):
    validate_phases(table.phases)


@pytest.mark.parametrize(
    "phases",
    [
        [],
        [_phase("late start", 5, math.inf)],
        [_phase("a", 0, 100), _phase("b", 120, math.inf)],
        [_phase("a", 0, 100), _phase("b", 90, math.inf)],
        [_phase("bounded", 0, 100)],
        [_phase("backwards", 0, 0), _phase("b", 0, math.inf)],
        [_phase("too many", 0, math.inf, low=2, high=5)],
        [_phase("inverted", 0, math.inf, low=3, high=2)],
        [_phase("none", 0, math.inf, low=0, high=1)],
    ],
)
def test_invalid_phase_tables_are_rejected(phases):
    with pytest.raises(ContentValidationError):
        validate_phases(phases)


def test_split_wave_gives_remainder_to_first_edges():
    edges = [SpawnEdge.TOP, SpawnEdge.LEFT, SpawnEdge.BOTTOM]
    assert split_wave(7, edges) == [(SpawnEdge.TOP, 3), (SpawnEdge.LEFT, 2), (SpawnEdge.BOTTOM, 2)]
    assert split_wave(2, edges) == [(SpawnEdge.TOP, 1), (SpawnEdge.LEFT, 1)]
    assert split_wave(0, edges) == []
    assert split_wave(5, []) == []


@pytest.mark.parametrize(
    "velocity, expected",
    [
        (Vector2(10, 2), SpawnEdge.RIGHT),
        (Vector2(-10, 2), SpawnEdge.LEFT),
        (Vector2(1, -5), SpawnEdge.TOP),
        (Vector2(0, 5), SpawnEdge.BOTTOM),
        (Vector2(3, 3), SpawnEdge.BOTTOM),
    ],
)
def test_movement_edge_follows_dominant_axis(velocity, expected):
    assert movement_edge(velocity, ScriptedRng()) is expected


def test_movement_edge_is_random_when_still():
    assert movement_edge(Vector2(0.5, -0.2), ScriptedRng()) is SpawnEdge.TOP
    assert movement_edge(None, ScriptedRng()) is SpawnEdge.TOP


def test_edge_normals_are_outward_unit_vectors():
    assert SpawnEdge.TOP.normal == Vector2(0, -1)
    assert SpawnEdge.RIGHT.normal == Vector2(1, 0)
    assert SpawnEdge.BOTTOM.normal == Vector2(0, 1)
    assert SpawnEdge.LEFT.normal == Vector2(-1, 0)
    normal = SpawnEdge.LEFT.normal
    normal.x = 42
    assert SpawnEdge.LEFT.normal == Vector2(-1, 0)


def test_movement_edge_leads_when_bias_roll_hits():
    edges = select_wave_edges(2, 3, ScriptedRng(0.0), Vector2(5, 0))
    assert edges == [SpawnEdge.RIGHT, SpawnEdge.LEFT, SpawnEdge.BOTTOM]


def test_movement_edge_not_forced_when_bias_roll_misses():
    edges = select_wave_edges(2, 3, ScriptedRng(0.9), Vector2(5, 0))
    assert edges == [SpawnEdge.LEFT, SpawnEdge.BOTTOM, SpawnEdge.RIGHT]


def test_selected_edges_are_distinct_and_within_range():
    rng = random.Random(1234)
    for _ in range(200):
        edges = select_wave_edges(2, 4, rng)
        assert 2 <= len(edges) <= 4
        assert len(set(edges)) == len(edges)


def test_movement_bias_is_visible_over_many_waves():
    rng = random.Random(99)
    velocity = Vector2(0, -40)
    leading = sum(
        1 for _ in range(2000) if select_wave_edges(1, 1, rng, velocity)[0] is SpawnEdge.TOP
    )
    # 0.7 forced plus a quarter of the unforced draws.
    assert 0.72 < leading / 2000 < 0.83


def test_plan_wave_splits_phase_size(table):
    plan = plan_wave(table, 0, random.Random(3))
    assert plan.phase == "Early Game"
    assert plan.total == 7
    assert 1 <= len(plan.edges) <= 3
    assert len(set(plan.edges)) == len(plan.edges)


def test_plan_wave_respects_enemy_cap(table):
    assert plan_wave(table, 300, random.Random(3), alive=148).total == 2
    full = plan_wave(table, 300, random.Random(3), alive=150)
    assert full.groups == ()
    assert full.total == 0


def test_extraction_wave_uses_every_direction(table):
    plan = plan_extraction_wave(table, random.Random(5))
    assert plan.total == 40
    assert sorted(edge.value for edge in plan.edges) == ["bottom", "left", "right", "top"]
    assert all(count == 10 for _, count in plan.groups)
    assert plan_extraction_wave(table, random.Random(5), alive=130).total == 20


def test_disabled_extraction_wave_plans_nothing(table):
    disabled = replace(table, extraction=ExtractionWave(enabled=False))
    assert plan_extraction_wave(disabled, random.Random(5)) is None


def test_extraction_roster(table):
    assert extraction_enemy_types(table, 300) == ["basic", "fast", "ranger"]
    custom = replace(table, extraction=ExtractionWave(enemy_types=("fast",)))
    assert extraction_enemy_types(custom, 0) == ["fast"]


def test_continuous_spawn_plans_one_enemy(table):
    plan = plan_continuous_spawn(table, 0, ScriptedRng(0.9))
    assert plan.phase == "Early Game"
    assert plan.groups == ((SpawnEdge.TOP, 1),)


def test_continuous_spawn_follows_movement_when_bias_hits(table):
    plan = plan_continuous_spawn(table, 0, ScriptedRng(0.0), velocity=Vector2(-30, 0))
    assert plan.groups == ((SpawnEdge.LEFT, 1),)


def test_continuous_spawn_skipped_at_cap(table):
    assert plan_continuous_spawn(table, 0, random.Random(1), alive=149).total == 1
    assert plan_continuous_spawn(table, 0, random.Random(1), alive=150).groups == ()


def test_timers_fire_on_their_own_intervals(table):
    timers = SpawnTimers()
    # Early Game waves every 5s, trickle every 1.5s.
    assert timers.advance(table, 0.0, 1.0) == (False, False)
    assert timers.advance(table, 1.0, 0.5) == (False, True)
    assert timers.trickle == 0.0
    fired = [timers.advance(table, 1.5 + step * 0.5, 0.5) for step in range(7)]
    assert [wave for wave, _ in fired].count(True) == 1
    assert timers.wave == 0.0
    timers.trickle = 1.0
    timers.reset()
    assert (timers.wave, timers.trickle) == (0.0, 0.0)


def test_timers_use_the_current_phase_interval(table):
    timers = SpawnTimers(wave=5.5)
    # Mid Game waves every 8s, so 6s is not due yet.
    assert timers.advance(table, 160.0, 0.5)[0] is False
    assert timers.advance(table, 160.5, 2.0)[0] is True


@pytest.mark.parametrize(
    "edge, check",
    [
        (SpawnEdge.TOP, lambda p: p.y == 90 and 200 <= p.x <= 1000),
        (SpawnEdge.BOTTOM, lambda p: p.y == 710 and 200 <= p.x <= 1000),
        (SpawnEdge.LEFT, lambda p: p.x == 190 and 100 <= p.y <= 700),
        (SpawnEdge.RIGHT, lambda p: p.x == 1010 and 100 <= p.y <= 700),
    ],
)
def test_spawn_position_sits_just_outside_the_view(table, edge, check):
    camera = Vector2(200, 100)
    viewport = Vector2(800, 600)
    rng = random.Random(11)
    for _ in range(20):
        assert check(spawn_position(table, edge, camera, viewport, rng))


def test_wave_line_spreads_clear_of_corners(table):
    camera = Vector2(0, 0)
    viewport = Vector2(800, 600)
    (single,) = wave_line_positions(table, SpawnEdge.TOP, 1, camera, viewport, ScriptedRng(0.5))
    assert single == Vector2(400, -10)
    line = wave_line_positions(table, SpawnEdge.LEFT, 4, camera, viewport, ScriptedRng(0.5))
    assert [point.y for point in line] == [112.5, 237.5, 362.5, 487.5]
    assert all(point.x == -10 for point in line)
    jittered = wave_line_positions(table, SpawnEdge.RIGHT, 5, camera, viewport, random.Random(4))
    assert all(800 <= point.x <= 820 for point in jittered)
