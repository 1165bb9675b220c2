"""Difficulty policy: level number to generation parameters."""
from ..models.level import (
    DifficultyDescriptor,
    DifficultyTier,
    LevelTheme,
    LEVEL_THEMES,
    TIER_CONFIGS,
)

LEVELS_PER_THEME = 5


def tier_for_level(level: int) -> DifficultyTier:
    """Return the tier a level belongs to. Levels below 1 count as level 1."""
    level = max(1, level)
    for tier, config in TIER_CONFIGS.items():
        if config.level_range[0] <= level <= config.level_range[1]:
            return tier
    return DifficultyTier.EXPERT


def difficulty_for_level(level: int) -> DifficultyDescriptor:
    """
    Map a level number to its difficulty descriptor.

    Args:
        level: 1-based level number.

    Returns:
        DifficultyDescriptor for the level's tier.
    """
    tier = tier_for_level(level)
    config = TIER_CONFIGS[tier]
    return DifficultyDescriptor(
        tier=tier,
        shelf_count=config.shelf_count,
        item_type_count=config.item_type_count,
        items_per_type=config.items_per_type,
    )


def level_theme(level: int) -> LevelTheme:
    """Theme for a level; changes every five levels."""
    index = (max(1, level) - 1) // LEVELS_PER_THEME
    return LEVEL_THEMES[min(index, len(LEVEL_THEMES) - 1)]
