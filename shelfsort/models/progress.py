"""Player progress and the cosmetic decoration catalogue."""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..errors import InsufficientCoinsError, UnknownDecorationError


DEFAULT_DECORATION_ID = "default"


@dataclass(frozen=True)
class Decoration:
    """A purchasable shelf skin."""
    id: str
    name: str
    price: int
    color: str  # Shelf background colour


DECORATIONS: Dict[str, Decoration] = {
    "default": Decoration(id="default", name="Classic Wood", price=0, color="#8B4513"),
    "neon": Decoration(id="neon", name="Cyberpunk Neon", price=100, color="#FF00FF"),
    "rustic": Decoration(id="rustic", name="Rustic Barn", price=150, color="#D2691E"),
    "modern": Decoration(id="modern", name="Modern Glass", price=200, color="#87CEEB"),
    "gold": Decoration(id="gold", name="Golden Luxury", price=300, color="#FFD700"),
}


@dataclass
class PlayerProgress:
    """Coins, level and unlock state for one player."""
    coins: int = 0
    current_level: int = 1
    unlocked_decorations: List[str] = field(default_factory=list)
    games_played: int = 0
    total_matches: int = 0
    player_name: str = "Player"

    def add_coins(self, amount: int) -> None:
        self.coins += amount

    def spend_coins(self, amount: int) -> bool:
        """Deduct coins if the player can afford it. Returns False otherwise."""
        if self.coins < amount:
            return False
        self.coins -= amount
        return True

    def unlock_decoration(self, decoration_id: str) -> None:
        if decoration_id not in self.unlocked_decorations:
            self.unlocked_decorations.append(decoration_id)

    def has_decoration(self, decoration_id: str) -> bool:
        return (
            decoration_id == DEFAULT_DECORATION_ID
            or decoration_id in self.unlocked_decorations
        )

    def increment_level(self) -> None:
        """Advance to the next level; finishing a level counts as a game played."""
        self.current_level += 1
        self.games_played += 1

    def increment_matches(self) -> None:
        self.total_matches += 1

    def reset(self) -> None:
        """Reset progress. The player name is kept."""
        self.coins = 0
        self.current_level = 1
        self.unlocked_decorations = []
        self.games_played = 0
        self.total_matches = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "coins": self.coins,
            "current_level": self.current_level,
            "unlocked_decorations": list(self.unlocked_decorations),
            "games_played": self.games_played,
            "total_matches": self.total_matches,
            "player_name": self.player_name,
        }


def list_decorations(progress: PlayerProgress) -> List[Dict[str, Any]]:
    """Return the catalogue with the player's unlock status."""
    return [
        {
            "id": decoration.id,
            "name": decoration.name,
            "price": decoration.price,
            "color": decoration.color,
            "is_unlocked": progress.has_decoration(decoration.id),
        }
        for decoration in DECORATIONS.values()
    ]


def purchase_decoration(progress: PlayerProgress, decoration_id: str) -> Decoration:
    """
    Buy a decoration with coins.

    Buying something already owned costs nothing and changes nothing.

    Raises:
        UnknownDecorationError: If the id is not in the catalogue.
        InsufficientCoinsError: If the player cannot afford it.
    """
    decoration = DECORATIONS.get(decoration_id)
    if decoration is None:
        raise UnknownDecorationError(decoration_id)

    if progress.has_decoration(decoration_id):
        return decoration

    if not progress.spend_coins(decoration.price):
        raise InsufficientCoinsError(decoration.price, progress.coins)

    progress.unlock_decoration(decoration_id)
    return decoration
