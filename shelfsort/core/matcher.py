"""Match and win detection."""
from typing import NamedTuple, Tuple

from ..models.board import Board, Shelf, MATCH_COUNT


class MatchResult(NamedTuple):
    """Shelves cleared by one detection pass and the board afterwards."""
    cleared: Tuple[int, ...]
    board: Board

    @property
    def cleared_count(self) -> int:
        return len(self.cleared)


def is_match(shelf: Shelf) -> bool:
    """A shelf matches when it holds exactly MATCH_COUNT items of one type."""
    if len(shelf.items) != MATCH_COUNT:
        return False
    first_type = shelf.items[0].type
    return all(item.type == first_type for item in shelf.items)


def detect_matches(board: Board) -> MatchResult:
    """
    Clear every matching shelf in a single pass.

    Cleared shelves end up empty so they cannot match again within the same
    pass. When nothing matches the input board is returned as is.

    Returns:
        MatchResult of cleared shelf indices and the updated board.
    """
    cleared = tuple(index for index, shelf in enumerate(board.shelves) if is_match(shelf))
    if not cleared:
        return MatchResult(cleared, board)

    new_board = board.copy()
    for index in cleared:
        new_board.shelves[index].items = []
    return MatchResult(cleared, new_board)


def is_won(board: Board) -> bool:
    """Level is won when every shelf is empty."""
    return all(shelf.is_empty for shelf in board.shelves)


def match_reward(cleared_count: int, coins_per_match: int) -> int:
    """Coins for one detection pass, linear in cleared shelves."""
    return cleared_count * coins_per_match
