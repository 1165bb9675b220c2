"""Game session API routes."""
from fastapi import APIRouter, Depends, HTTPException, status

from ...errors import (
    InsufficientCoinsError,
    LevelNotCompleteError,
    SessionNotFoundError,
    UnknownDecorationError,
)
from ...models.progress import list_decorations, purchase_decoration
from ...models.schemas import (
    CreateSessionRequest,
    ErrorResponse,
    SessionMoveRequest,
    SessionResponse,
    ShopResponse,
    TurnResponse,
)
from ...core.session import GameSession, SessionStore
from ..deps import get_sessions

router = APIRouter(prefix="/api/sessions", tags=["sessions"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Session not found"}}


def _load_session(session_id: str, store: SessionStore) -> GameSession:
    try:
        return store.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    request: CreateSessionRequest,
    store: SessionStore = Depends(get_sessions),
) -> SessionResponse:
    """Start a new session at level 1."""
    session = store.create(player_name=request.player_name)
    return SessionResponse(**session.to_dict())


@router.get("/{session_id}", response_model=SessionResponse, responses=NOT_FOUND)
async def get_session(
    session_id: str,
    store: SessionStore = Depends(get_sessions),
) -> SessionResponse:
    """Return the current board and progress of a session."""
    session = _load_session(session_id, store)
    return SessionResponse(**session.to_dict())


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_session(
    session_id: str,
    store: SessionStore = Depends(get_sessions),
) -> None:
    """End a session."""
    try:
        store.delete(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{session_id}/moves", response_model=TurnResponse, responses=NOT_FOUND)
async def session_move(
    session_id: str,
    request: SessionMoveRequest,
    store: SessionStore = Depends(get_sessions),
) -> TurnResponse:
    """
    Apply a move in a session and resolve matches, coins and win state.

    Args:
        session_id: Session id.
        request: SessionMoveRequest with shelf indices and item id.

    Returns:
        TurnResponse with the turn's outcome and the player's progress.
    """
    session = _load_session(session_id, store)
    turn = session.move(request.from_shelf, request.item_id, request.to_shelf)
    return TurnResponse(progress=session.progress.to_dict(), **turn.to_dict())


@router.post(
    "/{session_id}/next-level",
    response_model=SessionResponse,
    responses={**NOT_FOUND, 409: {"model": ErrorResponse, "description": "Level not won"}},
)
async def next_level(
    session_id: str,
    store: SessionStore = Depends(get_sessions),
) -> SessionResponse:
    """Advance a session whose level is won to the next level."""
    session = _load_session(session_id, store)
    try:
        session.next_level()
    except LevelNotCompleteError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return SessionResponse(**session.to_dict())


@router.get("/{session_id}/shop", response_model=ShopResponse, responses=NOT_FOUND)
async def get_shop(
    session_id: str,
    store: SessionStore = Depends(get_sessions),
) -> ShopResponse:
    """List decorations with the player's unlock status."""
    session = _load_session(session_id, store)
    return ShopResponse(
        coins=session.progress.coins,
        decorations=list_decorations(session.progress),
    )


@router.post(
    "/{session_id}/shop/{decoration_id}",
    response_model=ShopResponse,
    responses={**NOT_FOUND, 400: {"model": ErrorResponse, "description": "Purchase failed"}},
)
async def buy_decoration(
    session_id: str,
    decoration_id: str,
    store: SessionStore = Depends(get_sessions),
) -> ShopResponse:
    """Buy a decoration with the session's coins."""
    session = _load_session(session_id, store)
    try:
        purchase_decoration(session.progress, decoration_id)
    except UnknownDecorationError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InsufficientCoinsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ShopResponse(
        coins=session.progress.coins,
        decorations=list_decorations(session.progress),
    )
