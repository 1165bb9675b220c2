"""Level generator: item pool creation and shelf distribution."""
import logging
import random
import time
from typing import List, Optional, Tuple

from ..config import get_settings
from ..models.board import Board, Item, ItemType, Shelf, SHELF_CAPACITY, MATCH_COUNT
from ..models.level import DifficultyDescriptor, GenerationResult
from .difficulty import difficulty_for_level

logger = logging.getLogger(__name__)


class LevelGenerator:
    """Builds solvable shelf layouts for a level."""

    # Round-robin attempts per item, as a multiple of the shelf count
    ATTEMPTS_PER_SHELF = 2

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        """Reseed the generator for reproducible levels."""
        self._rng.seed(seed)

    def generate(self, level: int) -> GenerationResult:
        """
        Generate the board for a level.

        Args:
            level: 1-based level number.

        Returns:
            GenerationResult with the board and the descriptor used.
        """
        start_time = time.time()

        descriptor = difficulty_for_level(level)
        pool = self.generate_pool(descriptor)
        shelves, fallbacks = self._distribute(pool, descriptor.shelf_count)
        board = Board(shelves=shelves, level=max(1, level))

        generation_time_ms = int((time.time() - start_time) * 1000)
        logger.debug(
            "Generated level %d (%s): %d items on %d shelves, %d fallback placements",
            board.level,
            descriptor.tier.value,
            board.item_count,
            len(board.shelves),
            fallbacks,
        )

        return GenerationResult(
            board=board,
            descriptor=descriptor,
            fallback_placements=fallbacks,
            generation_time_ms=generation_time_ms,
        )

    def generate_pool(self, descriptor: DifficultyDescriptor) -> List[Item]:
        """
        Create every item for a level.

        The first ``item_type_count`` item types each get exactly
        ``items_per_type`` items, so every type can be cleared in full.
        """
        item_types = ItemType.ordered()[: descriptor.item_type_count]
        pool: List[Item] = []
        for item_type in item_types:
            for _ in range(descriptor.items_per_type):
                pool.append(Item.spawn(item_type))
        return pool

    def distribute(self, pool: List[Item], shelf_count: int) -> Board:
        """
        Place pooled items onto ``shelf_count`` empty shelves.

        Raises:
            ValueError: If the pool does not fit on the shelves.
        """
        shelves, _ = self._distribute(pool, shelf_count)
        return Board(shelves=shelves)

    def _distribute(self, pool: List[Item], shelf_count: int) -> Tuple[List[Shelf], int]:
        """Distribute items and report how many needed the fallback placement."""
        if shelf_count < 1:
            raise ValueError("shelf_count must be positive")
        if len(pool) > shelf_count * SHELF_CAPACITY:
            raise ValueError(
                f"{len(pool)} items do not fit on {shelf_count} shelves "
                f"of {SHELF_CAPACITY} slots"
            )

        shelves = [Shelf() for _ in range(shelf_count)]
        max_attempts = shelf_count * self.ATTEMPTS_PER_SHELF
        cursor = 0
        fallbacks = 0

        for item in self._shuffle(pool):
            target, cursor = self._find_constrained_shelf(shelves, item, cursor, max_attempts)
            if target is None:
                target = self._find_fallback_shelf(shelves, cursor)
                fallbacks += 1
                logger.warning(
                    "No shelf avoids an instant match for %s; forced onto shelf %d",
                    item.type.value,
                    target,
                )
            shelves[target].items.append(item)
            cursor = (cursor + 1) % shelf_count

        return shelves, fallbacks

    def _shuffle(self, pool: List[Item]) -> List[Item]:
        """Fisher-Yates shuffle into a new list."""
        shuffled = list(pool)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self._rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    def _find_constrained_shelf(
        self, shelves: List[Shelf], item: Item, cursor: int, max_attempts: int
    ) -> Tuple[Optional[int], int]:
        """
        Walk shelves round-robin from the cursor looking for a legal spot.

        Returns the chosen shelf index (or None) and the cursor position where
        the walk stopped.
        """
        for _ in range(max_attempts):
            if self._can_place(shelves[cursor], item):
                return cursor, cursor
            cursor = (cursor + 1) % len(shelves)
        return None, cursor

    def _find_fallback_shelf(self, shelves: List[Shelf], cursor: int) -> int:
        """First shelf with a free slot starting at the cursor."""
        for offset in range(len(shelves)):
            index = (cursor + offset) % len(shelves)
            if not shelves[index].is_full:
                return index
        # Unreachable while the pool fits, checked in _distribute
        raise ValueError("No shelf has a free slot")

    @staticmethod
    def _can_place(shelf: Shelf, item: Item) -> bool:
        """Free slot, and the item would not complete a match on arrival."""
        if shelf.is_full:
            return False
        would_match = (
            len(shelf.items) == MATCH_COUNT - 1
            and all(existing.type == item.type for existing in shelf.items)
        )
        return not would_match


# Singleton instance
_generator = None


def get_generator() -> LevelGenerator:
    """Get or create generator singleton instance."""
    global _generator
    if _generator is None:
        _generator = LevelGenerator(seed=get_settings().random_seed)
    return _generator


def generate_level(level: int) -> Board:
    """Generate a level's board with the shared generator."""
    return get_generator().generate(level).board
