"""Utility helper functions."""
from typing import Dict, Any, List, Optional, Set

from ..models.board import Board, Item, ItemType, Shelf, SHELF_CAPACITY


def validate_board_dict(board_json: Dict[str, Any]) -> tuple[bool, Optional[str]]:
    """
    Validate board JSON structure.

    Args:
        board_json: Board data to validate.

    Returns:
        Tuple of (is_valid, error_message).
    """
    shelves = board_json.get("shelves")
    if not isinstance(shelves, list):
        return False, "'shelves' must be a list"

    level = board_json.get("level", 1)
    if not isinstance(level, int) or level < 1:
        return False, "'level' must be a positive integer"

    known_types = {t.value for t in ItemType}
    seen_ids: Set[str] = set()

    for i, shelf in enumerate(shelves):
        if not isinstance(shelf, dict):
            return False, f"Shelf {i} must be an object"

        capacity = shelf.get("capacity", SHELF_CAPACITY)
        if capacity != SHELF_CAPACITY:
            return False, f"Shelf {i} capacity must be {SHELF_CAPACITY}"

        items = shelf.get("items", [])
        if not isinstance(items, list):
            return False, f"Shelf {i} 'items' must be a list"
        if len(items) > capacity:
            return False, f"Shelf {i} holds {len(items)} items (capacity {capacity})"

        for item in items:
            if not isinstance(item, dict) or "id" not in item or "type" not in item:
                return False, f"Items on shelf {i} need 'id' and 'type'"
            item_type = item["type"]
            if isinstance(item_type, ItemType):
                item_type = item_type.value
            if item_type not in known_types:
                return False, f"Unknown item type '{item_type}' on shelf {i}"
            if item["id"] in seen_ids:
                return False, f"Duplicate item id '{item['id']}'"
            seen_ids.add(item["id"])

    return True, None


def board_from_dict(board_json: Dict[str, Any]) -> Board:
    """
    Build a Board from its dictionary form.

    Item colours are derived from the item type, not read from the input.

    Raises:
        ValueError: If the data does not describe a valid board.
    """
    is_valid, error = validate_board_dict(board_json)
    if not is_valid:
        raise ValueError(error)

    shelves: List[Shelf] = []
    for shelf_data in board_json["shelves"]:
        items = []
        for item_data in shelf_data.get("items", []):
            item_type = ItemType(item_data["type"])
            items.append(Item(id=item_data["id"], type=item_type, color=item_type.color))
        shelves.append(Shelf(items=items))

    return Board(shelves=shelves, level=board_json.get("level", 1))


def format_board_for_display(board: Board) -> str:
    """
    Format a board for human-readable display.

    Args:
        board: Board to format.

    Returns:
        Formatted string representation, one shelf per line.
    """
    lines = [f"Level {board.level} ({board.item_count}/{board.total_slots} slots used):"]
    lines.append("-" * 40)

    for i, shelf in enumerate(board.shelves):
        slots = [item.type.value[:5].ljust(5) for item in shelf.items]
        slots.extend(["." * 5] * shelf.free_slots)
        lines.append(f"  [{i}] " + " | ".join(slots))

    return "\n".join(lines)


def extract_board_statistics(board: Board) -> Dict[str, Any]:
    """
    Extract summary statistics from a board.

    Args:
        board: Board to analyze.

    Returns:
        Dictionary with board statistics.
    """
    return {
        "level": board.level,
        "shelf_count": len(board.shelves),
        "total_items": board.item_count,
        "total_slots": board.total_slots,
        "free_slots": board.free_slots,
        "empty_shelves": sum(1 for shelf in board.shelves if shelf.is_empty),
        "full_shelves": sum(1 for shelf in board.shelves if shelf.is_full),
        "item_types": {t.value: count for t, count in board.type_counts().items()},
    }
