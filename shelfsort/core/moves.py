"""Move validation and application."""
from dataclasses import dataclass
from enum import Enum

from ..models.board import Board


class MoveOutcome(str, Enum):
    """Result of a move request."""
    APPLIED = "applied"
    INVALID_SHELF = "invalid_shelf"          # Index does not name a shelf
    ITEM_NOT_FOUND = "item_not_found"        # Item id is not on the source shelf
    SAME_SHELF = "same_shelf"                # Dropped back where it came from
    DESTINATION_FULL = "destination_full"    # Capacity rejection


@dataclass(frozen=True)
class MoveResult:
    """Board after a move request plus what happened."""
    board: Board
    outcome: MoveOutcome

    @property
    def applied(self) -> bool:
        return self.outcome == MoveOutcome.APPLIED


def _valid_index(board: Board, index: int) -> bool:
    return 0 <= index < len(board.shelves)


def apply_move(board: Board, from_index: int, item_id: str, to_index: int) -> MoveResult:
    """
    Move an item from one shelf to the end of another.

    Rejected moves return the input board object itself, untouched. The item
    is located by id rather than position since positions go stale while a
    drag is in flight.

    Args:
        board: Current board. Never mutated.
        from_index: Source shelf index.
        item_id: Id of the item being moved.
        to_index: Destination shelf index.

    Returns:
        MoveResult with the resulting board and the outcome.
    """
    if not _valid_index(board, from_index) or not _valid_index(board, to_index):
        return MoveResult(board, MoveOutcome.INVALID_SHELF)

    item_index = board.shelves[from_index].find_item(item_id)
    if item_index is None:
        return MoveResult(board, MoveOutcome.ITEM_NOT_FOUND)

    if from_index == to_index:
        return MoveResult(board, MoveOutcome.SAME_SHELF)

    if board.shelves[to_index].is_full:
        return MoveResult(board, MoveOutcome.DESTINATION_FULL)

    new_board = board.copy()
    item = new_board.shelves[from_index].items.pop(item_index)
    new_board.shelves[to_index].items.append(item)
    return MoveResult(new_board, MoveOutcome.APPLIED)
