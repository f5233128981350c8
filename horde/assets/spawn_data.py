"""Spawn pacing tables. Times are seconds of game clock."""

GENERAL = {
    "maxEnemies": 150,
    "spawnMargin": 10,
    "continuousInterval": 1.5,
}

PHASES = [
    {
        "name": "Early Game",
        "startTime": 0,
        "endTime": 150,
        "wave": {"interval": 5, "size": 7, "minDirections": 1, "maxDirections": 3},
        "enemyTypes": ["basic"],
    },
    {
        "name": "Mid Game",
        "startTime": 150,
        "endTime": 210,
        "wave": {"interval": 8, "size": 20, "minDirections": 2, "maxDirections": 3},
        "enemyTypes": ["basic", "fast"],
    },
    {
        "name": "Late Game",
        "startTime": 210,
        "endTime": None,
        "wave": {"interval": 6, "size": 25, "minDirections": 3, "maxDirections": 4},
        "enemyTypes": ["basic", "fast", "ranger"],
    },
]

ENEMY_UNLOCK_TIMES = {
    "basic": 0,
    "fast": 90,
    "ranger": 180,
}

EXTRACTION_WAVE = {
    "enabled": True,
    "enemyCount": 40,
    "directions": 4,
    "enemyTypes": [],
}
