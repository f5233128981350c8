"""Passive item tables. Effect values are per-level totals, not increments."""


def _levels(key, per_level, max_level=5):
    return [{"level": level, key: round(per_level * level, 4)} for level in range(1, max_level + 1)]


PASSIVE_ITEMS = [
    {
        "id": "amp",
        "name": "Damage Amp",
        "description": "Increases damage for all weapons",
        "rarity": "common",
        "maxLevel": 5,
        "effects": _levels("damageMultiplier", 0.10),
    },
    {
        "id": "wings",
        "name": "Wings",
        "description": "Increases movement and projectile speed",
        "rarity": "common",
        "maxLevel": 5,
        "effects": _levels("speedMultiplier", 0.10),
    },
    {
        "id": "magnet",
        "name": "Magnet",
        "description": "Increases pickup radius",
        "rarity": "common",
        "maxLevel": 5,
        "effects": _levels("pickupRadiusBonus", 20),
    },
    {
        "id": "vigor",
        "name": "Vigor",
        "description": "Increases max health",
        "rarity": "common",
        "maxLevel": 5,
        "effects": _levels("maxHealthBonus", 20),
    },
    {
        "id": "cooldown",
        "name": "Cooldown",
        "description": "Reduces weapon cooldowns",
        "rarity": "common",
        "maxLevel": 5,
        "effects": _levels("cooldownMultiplier", -0.08),
    },
    {
        "id": "armor",
        "name": "Armor",
        "description": "Reduces damage taken",
        "rarity": "uncommon",
        "maxLevel": 5,
        "effects": _levels("damageReduction", 1),
    },
    {
        "id": "greed",
        "name": "Greed",
        "description": "Increases XP gained",
        "rarity": "uncommon",
        "maxLevel": 5,
        "effects": _levels("xpMultiplier", 0.10),
    },
    {
        "id": "luck",
        "name": "Luck",
        "description": "Increases loot quality",
        "rarity": "rare",
        "maxLevel": 5,
        "effects": _levels("luckBonus", 10),
    },
    {
        "id": "regeneration",
        "name": "Regeneration",
        "description": "Slowly recover health",
        "rarity": "rare",
        "maxLevel": 5,
        "effects": _levels("healthRegen", 0.5),
    },
    {
        "id": "area",
        "name": "Area",
        "description": "Increases weapon area of effect",
        "rarity": "uncommon",
        "maxLevel": 5,
        "effects": _levels("areaMultiplier", 0.10),
    },
    {
        "id": "duration",
        "name": "Duration",
        "description": "Increases weapon effect duration",
        "rarity": "uncommon",
        "maxLevel": 5,
        "effects": _levels("durationMultiplier", 0.10),
    },
    {
        "id": "multishot",
        "name": "Multishot",
        "description": "Adds projectiles and drones to every weapon",
        "rarity": "rare",
        "maxLevel": 3,
        "effects": _levels("amountBonus", 1, max_level=3),
    },
]
