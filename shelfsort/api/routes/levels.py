"""Level generation and catalogue API routes."""
from fastapi import APIRouter, Depends, Path
from typing import Any, Dict, List

from ...models.board import ItemType
from ...models.schemas import DifficultyResponse, GenerateRequest, GenerateResponse
from ...core.difficulty import difficulty_for_level, level_theme
from ...core.generator import LevelGenerator
from ..deps import get_level_generator

router = APIRouter(prefix="/api", tags=["levels"])


@router.get("/difficulty/{level}", response_model=DifficultyResponse)
async def get_difficulty(level: int = Path(..., ge=1)) -> DifficultyResponse:
    """
    Return the generation parameters for a level.

    Args:
        level: Level number (1-based).

    Returns:
        DifficultyResponse with descriptor fields and theme.
    """
    descriptor = difficulty_for_level(level)
    return DifficultyResponse(
        level=level,
        theme=level_theme(level).to_dict(),
        **descriptor.to_dict(),
    )


@router.post("/levels/generate", response_model=GenerateResponse)
async def generate_level(
    request: GenerateRequest,
    generator: LevelGenerator = Depends(get_level_generator),
) -> GenerateResponse:
    """
    Generate a board for a level.

    A seed produces a reproducible layout from a dedicated generator, so
    seeded requests do not disturb the shared generator's sequence.
    """
    if request.seed is not None:
        generator = LevelGenerator(seed=request.seed)

    result = generator.generate(request.level)
    return GenerateResponse(**result.to_dict())


@router.get("/items")
async def list_item_types() -> List[Dict[str, Any]]:
    """List item types in unlock order with their display attributes."""
    return [
        {"type": item_type.value, "color": item_type.color, "label": item_type.label}
        for item_type in ItemType.ordered()
    ]
