"""Stateless move and match API routes.

The caller owns the board and sends it with every request. Rejected moves
are regular responses carrying their outcome, not HTTP errors.
"""
from fastapi import APIRouter, HTTPException
from typing import Any, Dict

from ...config import get_settings
from ...models.schemas import MatchRequest, MatchResponse, MoveRequest, MoveResponse
from ...core.matcher import detect_matches, is_won, match_reward
from ...core.moves import apply_move
from ...utils.helpers import board_from_dict, extract_board_statistics

router = APIRouter(prefix="/api", tags=["play"])


@router.post("/moves", response_model=MoveResponse)
async def move_item(request: MoveRequest) -> MoveResponse:
    """
    Apply a single move to the supplied board.

    Args:
        request: MoveRequest with board, shelf indices and item id.

    Returns:
        MoveResponse with the outcome and resulting board.
    """
    try:
        board = board_from_dict(request.board.model_dump(mode="json"))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid board: {str(e)}")

    result = apply_move(board, request.from_shelf, request.item_id, request.to_shelf)
    return MoveResponse(
        outcome=result.outcome.value,
        applied=result.applied,
        board=result.board.to_dict(),
    )


@router.post("/matches", response_model=MatchResponse)
async def resolve_matches(request: MatchRequest) -> MatchResponse:
    """
    Run one match detection pass over the supplied board.

    Args:
        request: MatchRequest with the board.

    Returns:
        MatchResponse with cleared shelves, coins and win flag.
    """
    try:
        board = board_from_dict(request.board.model_dump(mode="json"))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid board: {str(e)}")

    cleared, board = detect_matches(board)
    return MatchResponse(
        cleared=list(cleared),
        coins=match_reward(len(cleared), get_settings().coins_per_match),
        won=is_won(board),
        board=board.to_dict(),
    )


@router.post("/boards/stats")
async def board_statistics(request: MatchRequest) -> Dict[str, Any]:
    """
    Summarize the supplied board.

    Args:
        request: MatchRequest with the board.

    Returns:
        Item counts per type, free slots and shelf fill state.
    """
    try:
        board = board_from_dict(request.board.model_dump(mode="json"))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid board: {str(e)}")

    return extract_board_statistics(board)
