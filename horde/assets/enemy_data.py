"""Enemy type tables."""

ENEMY_TYPES = [
    {
        "id": "basic",
        "name": "Basic",
        "health": 10,
        "speed": 80,
        "damage": 5,
        "xpValue": 1,
        "radius": 12,
        "spawnWeight": 100,
    },
    {
        "id": "fast",
        "name": "Fast",
        "health": 5,
        "speed": 150,
        "damage": 3,
        "xpValue": 2,
        "radius": 10,
        "spawnWeight": 40,
    },
    {
        "id": "ranger",
        "name": "Ranger",
        "health": 8,
        "speed": 60,
        "damage": 4,
        "xpValue": 3,
        "radius": 12,
        "spawnWeight": 30,
    },
    {
        "id": "tank",
        "name": "Tank",
        "health": 50,
        "speed": 40,
        "damage": 15,
        "xpValue": 5,
        "radius": 18,
        "spawnWeight": 20,
        "enabled": False,
    },
]
