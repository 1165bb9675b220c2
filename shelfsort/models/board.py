"""Board data models: items, shelves and boards."""
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


SHELF_CAPACITY = 3  # Slots per shelf, identical for every shelf
MATCH_COUNT = 3     # Identical items needed to clear a shelf


class ItemType(str, Enum):
    """Item kinds, in the order levels unlock them."""
    SODA = "soda"
    MILK = "milk"
    CHIPS = "chips"
    WATER = "water"
    JUICE = "juice"
    BREAD = "bread"
    CEREAL = "cereal"
    CANDY = "candy"

    @classmethod
    def ordered(cls) -> List["ItemType"]:
        """Return all item types in unlock order."""
        return list(cls)

    @property
    def color(self) -> str:
        return ITEM_CONFIGS[self]["color"]

    @property
    def label(self) -> str:
        return ITEM_CONFIGS[self]["label"]


# Display attributes per item type
ITEM_CONFIGS: Dict[ItemType, Dict[str, str]] = {
    ItemType.SODA: {"color": "#FF6B6B", "label": "🥤"},
    ItemType.MILK: {"color": "#4ECDC4", "label": "🥛"},
    ItemType.CHIPS: {"color": "#FFE66D", "label": "🍟"},
    ItemType.WATER: {"color": "#95E1D3", "label": "💧"},
    ItemType.JUICE: {"color": "#F38181", "label": "🧃"},
    ItemType.BREAD: {"color": "#AA96DA", "label": "🍞"},
    ItemType.CEREAL: {"color": "#F9A826", "label": "🥣"},
    ItemType.CANDY: {"color": "#FF8FD8", "label": "🍬"},
}


def generate_item_id() -> str:
    """Generate an item id unique within the running process."""
    return f"item_{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class Item:
    """A single item instance. Moved between shelves, never mutated."""
    id: str
    type: ItemType
    color: str

    @classmethod
    def spawn(cls, item_type: ItemType) -> "Item":
        """Create a new item of the given type with a fresh id."""
        item_type = ItemType(item_type)
        return cls(id=generate_item_id(), type=item_type, color=item_type.color)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary."""
        return {"id": self.id, "type": self.type.value, "color": self.color}


@dataclass
class Shelf:
    """Fixed-capacity container of items. Order is display order only."""
    items: List[Item] = field(default_factory=list)
    capacity: int = SHELF_CAPACITY

    @property
    def is_full(self) -> bool:
        return len(self.items) >= self.capacity

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def free_slots(self) -> int:
        return self.capacity - len(self.items)

    def find_item(self, item_id: str) -> Optional[int]:
        """Return the position of the item with this id, or None."""
        for index, item in enumerate(self.items):
            if item.id == item_id:
                return index
        return None

    def copy(self) -> "Shelf":
        """Copy the shelf. Items are shared since they are immutable."""
        return Shelf(items=list(self.items), capacity=self.capacity)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "items": [item.to_dict() for item in self.items],
            "capacity": self.capacity,
        }


@dataclass
class Board:
    """All shelves of one level."""
    shelves: List[Shelf] = field(default_factory=list)
    level: int = 1

    @property
    def item_count(self) -> int:
        return sum(len(shelf.items) for shelf in self.shelves)

    @property
    def total_slots(self) -> int:
        return sum(shelf.capacity for shelf in self.shelves)

    @property
    def free_slots(self) -> int:
        return self.total_slots - self.item_count

    def type_counts(self) -> Dict[ItemType, int]:
        """Count items on the board per item type."""
        counts: Dict[ItemType, int] = {}
        for shelf in self.shelves:
            for item in shelf.items:
                counts[item.type] = counts.get(item.type, 0) + 1
        return counts

    def copy(self) -> "Board":
        """Copy the board with fresh shelf lists."""
        return Board(shelves=[shelf.copy() for shelf in self.shelves], level=self.level)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "shelves": [shelf.to_dict() for shelf in self.shelves],
        }
