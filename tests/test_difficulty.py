"""Tests for the difficulty policy."""
import pytest

from shelfsort.core.difficulty import difficulty_for_level, level_theme, tier_for_level
from shelfsort.models.board import ItemType, MATCH_COUNT, SHELF_CAPACITY
from shelfsort.models.level import DifficultyDescriptor, DifficultyTier


class TestDifficultyForLevel:
    """Test cases for difficulty_for_level."""

    def test_level_one_is_tutorial(self):
        """Level 1 uses the tutorial tier: 4 shelves, 3 types, 3 each."""
        descriptor = difficulty_for_level(1)

        assert descriptor.tier == DifficultyTier.TUTORIAL
        assert descriptor.shelf_count == 4
        assert descriptor.item_type_count == 3
        assert descriptor.items_per_type == 3
        assert descriptor.total_items == 9
        assert descriptor.total_slots == 12
        assert descriptor.buffer_slots == 3

    @pytest.mark.parametrize(
        "level,tier",
        [
            (1, DifficultyTier.TUTORIAL),
            (3, DifficultyTier.TUTORIAL),
            (4, DifficultyTier.EASY),
            (7, DifficultyTier.EASY),
            (8, DifficultyTier.MEDIUM),
            (12, DifficultyTier.MEDIUM),
            (13, DifficultyTier.HARD),
            (20, DifficultyTier.HARD),
            (21, DifficultyTier.EXPERT),
            (500, DifficultyTier.EXPERT),
        ],
    )
    def test_tier_boundaries(self, level, tier):
        """Test that tier boundaries fall on the configured levels."""
        assert tier_for_level(level) == tier
        assert difficulty_for_level(level).tier == tier

    def test_non_decreasing(self):
        """Every descriptor field is non-decreasing in level."""
        previous = difficulty_for_level(1)
        for level in range(2, 60):
            current = difficulty_for_level(level)
            assert current.shelf_count >= previous.shelf_count
            assert current.item_type_count >= previous.item_type_count
            assert current.items_per_type >= previous.items_per_type
            previous = current

    def test_every_tier_is_clearable(self):
        """Items per type is a multiple of the match count and a shelf stays free."""
        for level in range(1, 40):
            descriptor = difficulty_for_level(level)
            assert descriptor.items_per_type % MATCH_COUNT == 0
            assert descriptor.item_type_count <= len(ItemType)
            assert descriptor.buffer_slots >= SHELF_CAPACITY

    def test_deterministic(self):
        """Same level always gives the same descriptor."""
        assert difficulty_for_level(9) == difficulty_for_level(9)

    @pytest.mark.parametrize("level", [0, -5])
    def test_levels_below_one_are_clamped(self, level):
        """Out-of-contract levels behave like level 1."""
        assert difficulty_for_level(level) == difficulty_for_level(1)


class TestDifficultyDescriptor:
    """Test cases for descriptor validation."""

    def test_rejects_items_not_multiple_of_match_count(self):
        with pytest.raises(ValueError, match="multiple"):
            DifficultyDescriptor(DifficultyTier.HARD, shelf_count=6, item_type_count=2, items_per_type=4)

    def test_rejects_too_many_item_types(self):
        with pytest.raises(ValueError, match="known item types"):
            DifficultyDescriptor(DifficultyTier.EXPERT, shelf_count=20, item_type_count=9, items_per_type=3)

    def test_rejects_board_without_buffer(self):
        """A board with no free shelf would allow no moves."""
        with pytest.raises(ValueError, match="free slots"):
            DifficultyDescriptor(DifficultyTier.EASY, shelf_count=3, item_type_count=3, items_per_type=3)

    def test_rejects_non_positive_values(self):
        with pytest.raises(ValueError):
            DifficultyDescriptor(DifficultyTier.EASY, shelf_count=0, item_type_count=1, items_per_type=3)

    def test_to_dict(self):
        data = difficulty_for_level(1).to_dict()

        assert data["tier"] == "tutorial"
        assert data["total_items"] == 9
        assert data["buffer_slots"] == 3


class TestLevelTheme:
    """Test cases for level themes."""

    def test_theme_changes_every_five_levels(self):
        assert level_theme(1) == level_theme(5)
        assert level_theme(5) != level_theme(6)

    def test_last_theme_repeats(self):
        assert level_theme(21).name == "Ocean"
        assert level_theme(400).name == "Ocean"
