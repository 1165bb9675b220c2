"""Level data models: difficulty tiers, descriptors and generation results."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple

from .board import Board, ItemType, MATCH_COUNT, SHELF_CAPACITY


class DifficultyTier(str, Enum):
    """Difficulty tier enumeration."""
    TUTORIAL = "tutorial"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


@dataclass(frozen=True)
class DifficultyDescriptor:
    """Generation parameters for one level."""
    tier: DifficultyTier
    shelf_count: int
    item_type_count: int
    items_per_type: int

    def __post_init__(self):
        """Reject parameter sets that cannot produce a clearable level."""
        if self.shelf_count < 1 or self.item_type_count < 1 or self.items_per_type < 1:
            raise ValueError("shelf_count, item_type_count and items_per_type must be positive")
        if self.item_type_count > len(ItemType):
            raise ValueError(
                f"item_type_count {self.item_type_count} exceeds the "
                f"{len(ItemType)} known item types"
            )
        if self.items_per_type % MATCH_COUNT != 0:
            raise ValueError(
                f"items_per_type {self.items_per_type} is not a multiple of {MATCH_COUNT}"
            )
        # At least one whole shelf must stay free or no move is ever possible
        if self.buffer_slots < SHELF_CAPACITY:
            raise ValueError(
                f"{self.total_items} items leave only {self.buffer_slots} free slots "
                f"on {self.shelf_count} shelves (need {SHELF_CAPACITY})"
            )

    @property
    def total_items(self) -> int:
        return self.item_type_count * self.items_per_type

    @property
    def total_slots(self) -> int:
        return self.shelf_count * SHELF_CAPACITY

    @property
    def buffer_slots(self) -> int:
        return self.total_slots - self.total_items

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "tier": self.tier.value,
            "shelf_count": self.shelf_count,
            "item_type_count": self.item_type_count,
            "items_per_type": self.items_per_type,
            "total_items": self.total_items,
            "total_slots": self.total_slots,
            "buffer_slots": self.buffer_slots,
        }


@dataclass(frozen=True)
class TierConfig:
    """Level range and descriptor values for one tier."""
    level_range: Tuple[int, int]
    shelf_count: int
    item_type_count: int
    items_per_type: int
    description: str


# Upper bound of the last tier is open-ended
TIER_CONFIGS: Dict[DifficultyTier, TierConfig] = {
    DifficultyTier.TUTORIAL: TierConfig(
        level_range=(1, 3),
        shelf_count=4,
        item_type_count=3,
        items_per_type=3,
        description="Tutorial",
    ),
    DifficultyTier.EASY: TierConfig(
        level_range=(4, 7),
        shelf_count=5,
        item_type_count=4,
        items_per_type=3,
        description="Easy",
    ),
    DifficultyTier.MEDIUM: TierConfig(
        level_range=(8, 12),
        shelf_count=6,
        item_type_count=5,
        items_per_type=3,
        description="Medium",
    ),
    DifficultyTier.HARD: TierConfig(
        level_range=(13, 20),
        shelf_count=7,
        item_type_count=6,
        items_per_type=3,
        description="Hard",
    ),
    DifficultyTier.EXPERT: TierConfig(
        level_range=(21, 10**9),
        shelf_count=9,
        item_type_count=8,
        items_per_type=3,
        description="Expert",
    ),
}


@dataclass(frozen=True)
class LevelTheme:
    """Background colours for a band of levels."""
    name: str
    background: str
    header: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary."""
        return {"name": self.name, "background": self.background, "header": self.header}


# One theme per 5 levels, the last one repeats
LEVEL_THEMES: List[LevelTheme] = [
    LevelTheme(name="Midnight", background="#1A1A2E", header="#16213E"),
    LevelTheme(name="Purple Haze", background="#2A1A4E", header="#3E1656"),
    LevelTheme(name="Forest", background="#1A3E2E", header="#16563E"),
    LevelTheme(name="Crimson", background="#3E1A1A", header="#561616"),
    LevelTheme(name="Ocean", background="#1A2E3E", header="#163E56"),
]


@dataclass
class GenerationResult:
    """Result of level generation."""
    board: Board
    descriptor: DifficultyDescriptor
    fallback_placements: int = 0
    generation_time_ms: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "board": self.board.to_dict(),
            "difficulty": self.descriptor.to_dict(),
            "fallback_placements": self.fallback_placements,
            "generation_time_ms": self.generation_time_ms,
        }
