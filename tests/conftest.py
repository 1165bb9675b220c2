"""Shared test fixtures."""
import pytest

from shelfsort.models.board import Board, Item, ItemType, Shelf


@pytest.fixture
def make_board():
    """Factory building a board from per-shelf lists of item type names.

    Item ids are ``"<shelf>-<position>"`` so tests can address them directly.
    """
    def _make(*shelves, level=1):
        return Board(
            shelves=[
                Shelf(items=[
                    Item(id=f"{s}-{p}", type=ItemType(t), color=ItemType(t).color)
                    for p, t in enumerate(types)
                ])
                for s, types in enumerate(shelves)
            ],
            level=level,
        )
    return _make
