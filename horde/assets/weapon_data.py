"""Weapon type tables.

Stats use pixels and seconds. ``area`` is reach for projectile weapons and a
radius for auras, orbits and mines; ``size`` is the rendered hit size.
"""

WEAPON_TYPES = [
    {
        "id": "magic_wand",
        "name": "Magic Wand",
        "description": "Fires magic projectiles at the nearest enemy",
        "type": "projectile",
        "baseStats": {
            "damage": 5,
            "cooldown": 1.0,
            "area": 400,
            "size": 1.0,
            "speed": 300,
            "duration": 0,
            "amount": 1,
            "pierce": 0,
        },
        "affectedBy": {
            "damage": True,
            "area": True,
            "cooldown": True,
            "speed": True,
            "duration": False,
            "amount": True,
        },
        "maxLevel": 8,
        "upgrades": [
            {"level": 2, "property": "baseStats.damage", "operation": "add", "value": 3},
            {"level": 3, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 4, "property": "baseStats.cooldown", "operation": "set", "value": 0.85},
            {"level": 5, "property": "baseStats.damage", "operation": "add", "value": 3},
            {"level": 5, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 6, "property": "baseStats.pierce", "operation": "add", "value": 1},
            {"level": 7, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 8, "property": "baseStats.damage", "operation": "add", "value": 5},
            {"level": 8, "property": "baseStats.cooldown", "operation": "set", "value": 0.7},
        ],
    },
    {
        "id": "knife",
        "name": "Knife",
        "description": "Throws fast knives in the direction you are moving",
        "type": "projectile_directional",
        "baseStats": {
            "damage": 8,
            "cooldown": 0.67,
            "area": 300,
            "size": 1.0,
            "speed": 500,
            "duration": 0,
            "amount": 1,
            "pierce": 1,
        },
        "affectedBy": {
            "damage": True,
            "area": True,
            "cooldown": True,
            "speed": True,
            "duration": False,
            "amount": True,
        },
        "maxLevel": 8,
        "upgrades": [
            {"level": 2, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 3, "property": "baseStats.damage", "operation": "add", "value": 2},
            {"level": 4, "property": "baseStats.pierce", "operation": "add", "value": 1},
            {"level": 5, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 6, "property": "baseStats.damage", "operation": "add", "value": 3},
            {"level": 7, "property": "baseStats.cooldown", "operation": "set", "value": 0.5},
            {"level": 8, "property": "baseStats.amount", "operation": "add", "value": 2},
        ],
    },
    {
        "id": "scatter",
        "name": "Scatter Shot",
        "description": "Blasts a cone of short-range pellets",
        "type": "projectile_spread",
        "baseStats": {
            "damage": 4,
            "cooldown": 1.4,
            "area": 220,
            "size": 0.8,
            "speed": 380,
            "duration": 0,
            "amount": 5,
            "pierce": 0,
        },
        "affectedBy": {
            "damage": True,
            "area": True,
            "cooldown": True,
            "speed": True,
            "duration": False,
            "amount": True,
        },
        "maxLevel": 6,
        "upgrades": [
            {"level": 2, "property": "baseStats.amount", "operation": "add", "value": 2},
            {"level": 3, "property": "baseStats.damage", "operation": "add", "value": 2},
            {"level": 4, "property": "baseStats.area", "operation": "add", "value": 60},
            {"level": 5, "property": "baseStats.amount", "operation": "add", "value": 2},
            {"level": 6, "property": "baseStats.cooldown", "operation": "set", "value": 1.0},
            {"level": 6, "property": "baseStats.pierce", "operation": "set", "value": 1},
        ],
    },
    {
        "id": "seeker",
        "name": "Seeker Missiles",
        "description": "Launches missiles that home in on enemies",
        "type": "projectile_homing",
        "baseStats": {
            "damage": 12,
            "cooldown": 2.0,
            "area": 600,
            "size": 1.2,
            "speed": 220,
            "duration": 3.0,
            "amount": 1,
            "pierce": 0,
        },
        "affectedBy": {
            "damage": True,
            "area": True,
            "cooldown": True,
            "speed": True,
            "duration": True,
            "amount": True,
        },
        "maxLevel": 6,
        "upgrades": [
            {"level": 2, "property": "baseStats.damage", "operation": "add", "value": 4},
            {"level": 3, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 4, "property": "baseStats.speed", "operation": "add", "value": 60},
            {"level": 5, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 5, "property": "baseStats.duration", "operation": "add", "value": 1.0},
            {"level": 6, "property": "baseStats.damage", "operation": "add", "value": 8},
        ],
    },
    {
        "id": "garlic",
        "name": "Garlic",
        "description": "Creates a damaging aura around the player",
        "type": "aura",
        "baseStats": {
            "damage": 5,
            "cooldown": 0.5,
            "area": 60,
            "size": 1.0,
            "speed": 0,
            "duration": 0,
            "amount": 0,
            "pierce": 999,
        },
        "affectedBy": {
            "damage": True,
            "area": True,
            "cooldown": True,
            "speed": False,
            "duration": False,
            "amount": False,
        },
        "maxLevel": 8,
        "upgrades": [
            {"level": 2, "property": "baseStats.area", "operation": "add", "value": 5},
            {"level": 3, "property": "baseStats.damage", "operation": "add", "value": 2},
            {"level": 4, "property": "baseStats.area", "operation": "add", "value": 5},
            {"level": 5, "property": "baseStats.damage", "operation": "add", "value": 2},
            {"level": 6, "property": "baseStats.area", "operation": "add", "value": 10},
            {"level": 7, "property": "baseStats.cooldown", "operation": "set", "value": 0.4},
            {"level": 8, "property": "baseStats.damage", "operation": "add", "value": 4},
            {"level": 8, "property": "baseStats.area", "operation": "add", "value": 10},
        ],
    },
    {
        "id": "orbit_drones",
        "name": "Orbit Drones",
        "description": "Drones circle the player and strike anything they touch",
        "type": "orbit",
        "baseStats": {
            "damage": 6,
            "cooldown": 0.25,
            "area": 70,
            "size": 1.0,
            "speed": 180,
            "duration": 0,
            "amount": 2,
            "pierce": 999,
        },
        "affectedBy": {
            "damage": True,
            "area": True,
            "cooldown": False,
            "speed": True,
            "duration": False,
            "amount": True,
        },
        "maxLevel": 7,
        "upgrades": [
            {"level": 2, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 3, "property": "baseStats.damage", "operation": "add", "value": 3},
            {"level": 4, "property": "baseStats.area", "operation": "add", "value": 15},
            {"level": 5, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 6, "property": "baseStats.speed", "operation": "add", "value": 60},
            {"level": 7, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 7, "property": "baseStats.size", "operation": "set", "value": 1.5},
        ],
    },
    {
        "id": "mine_layer",
        "name": "Mine Layer",
        "description": "Drops mines that explode when enemies come close",
        "type": "deployable",
        "baseStats": {
            "damage": 40,
            "cooldown": 2.5,
            "area": 60,
            "size": 1.0,
            "speed": 0,
            "duration": 8.0,
            "amount": 1,
            "pierce": 999,
        },
        "affectedBy": {
            "damage": True,
            "area": True,
            "cooldown": True,
            "speed": False,
            "duration": True,
            "amount": True,
        },
        "maxLevel": 6,
        "upgrades": [
            {"level": 2, "property": "baseStats.damage", "operation": "add", "value": 10},
            {"level": 3, "property": "baseStats.area", "operation": "add", "value": 15},
            {"level": 4, "property": "baseStats.amount", "operation": "add", "value": 1},
            {"level": 5, "property": "baseStats.cooldown", "operation": "set", "value": 2.0},
            {"level": 6, "property": "baseStats.damage", "operation": "add", "value": 20},
            {"level": 6, "property": "baseStats.duration", "operation": "add", "value": 4.0},
        ],
    },
]
