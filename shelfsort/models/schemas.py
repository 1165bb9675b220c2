"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import Dict, List, Any, Optional

from .board import ItemType, SHELF_CAPACITY


class ItemSchema(BaseModel):
    """Single item on a shelf."""
    id: str = Field(..., min_length=1, description="Unique item id")
    type: ItemType = Field(..., description="Item type")
    color: Optional[str] = Field(default=None, description="Display colour (derived from type)")


class ShelfSchema(BaseModel):
    """Shelf contents."""
    items: List[ItemSchema] = Field(default=[], description="Items in display order")
    capacity: int = Field(default=SHELF_CAPACITY, description="Slot count")


class BoardSchema(BaseModel):
    """Full board state."""
    level: int = Field(default=1, ge=1, description="Level number")
    shelves: List[ShelfSchema] = Field(..., description="Shelves in display order")


class DifficultyResponse(BaseModel):
    """Response schema for a level's difficulty."""
    level: int = Field(..., description="Level number")
    tier: str = Field(..., description="Difficulty tier")
    shelf_count: int = Field(..., description="Number of shelves")
    item_type_count: int = Field(..., description="Distinct item types")
    items_per_type: int = Field(..., description="Items of each type")
    total_items: int = Field(..., description="Items on the board")
    total_slots: int = Field(..., description="Slots on the board")
    buffer_slots: int = Field(..., description="Slots left empty")
    theme: Dict[str, str] = Field(..., description="Cosmetic level theme")


class GenerateRequest(BaseModel):
    """Request schema for level generation."""
    level: int = Field(..., ge=1, description="Level number (1-based)")
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible layout")


class GenerateResponse(BaseModel):
    """Response schema for level generation."""
    board: Dict[str, Any] = Field(..., description="Generated board")
    difficulty: Dict[str, Any] = Field(..., description="Difficulty descriptor used")
    fallback_placements: int = Field(default=0, description="Items placed by the fallback pass")
    generation_time_ms: int = Field(default=0, description="Generation time in milliseconds")


class MoveRequest(BaseModel):
    """Request schema for a stateless move."""
    board: BoardSchema = Field(..., description="Board before the move")
    from_shelf: int = Field(..., description="Source shelf index")
    item_id: str = Field(..., description="Id of the item to move")
    to_shelf: int = Field(..., description="Destination shelf index")


class MoveResponse(BaseModel):
    """Response schema for a stateless move."""
    outcome: str = Field(..., description="Move outcome")
    applied: bool = Field(..., description="Whether the board changed")
    board: Dict[str, Any] = Field(..., description="Board after the move")


class MatchRequest(BaseModel):
    """Request schema for match detection."""
    board: BoardSchema = Field(..., description="Board to scan")


class MatchResponse(BaseModel):
    """Response schema for match detection."""
    cleared: List[int] = Field(default=[], description="Indices of cleared shelves")
    coins: int = Field(default=0, description="Coins earned by this pass")
    won: bool = Field(..., description="Whether every shelf is empty")
    board: Dict[str, Any] = Field(..., description="Board after clearing")


class CreateSessionRequest(BaseModel):
    """Request schema for starting a game session."""
    player_name: Optional[str] = Field(default=None, max_length=32, description="Player name")


class SessionMoveRequest(BaseModel):
    """Request schema for a move within a session."""
    from_shelf: int = Field(..., description="Source shelf index")
    item_id: str = Field(..., description="Id of the item to move")
    to_shelf: int = Field(..., description="Destination shelf index")


class TurnResponse(BaseModel):
    """Response schema for a resolved session move."""
    outcome: str = Field(..., description="Move outcome")
    board: Dict[str, Any] = Field(..., description="Board after the turn")
    cleared: List[int] = Field(default=[], description="Indices of cleared shelves")
    coins_awarded: int = Field(default=0, description="Coins earned this turn")
    level_complete: bool = Field(default=False, description="Whether this turn won the level")
    progress: Dict[str, Any] = Field(..., description="Player progress after the turn")


class SessionResponse(BaseModel):
    """Response schema for session state."""
    session_id: str = Field(..., description="Session id")
    level: int = Field(..., description="Current level")
    won: bool = Field(..., description="Whether the current level is won")
    difficulty: Optional[Dict[str, Any]] = Field(default=None, description="Current difficulty")
    board: Dict[str, Any] = Field(..., description="Current board")
    progress: Dict[str, Any] = Field(..., description="Player progress")


class DecorationItem(BaseModel):
    """Decoration in the shop listing."""
    id: str
    name: str
    price: int
    color: str
    is_unlocked: bool


class ShopResponse(BaseModel):
    """Response schema for the decoration shop."""
    coins: int = Field(..., description="Player's coins")
    decorations: List[DecorationItem] = Field(default=[], description="Catalogue")


class ErrorResponse(BaseModel):
    """Error response schema."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(default=None, description="Detailed error information")
