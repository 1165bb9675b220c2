"""Domain exceptions.

Invalid moves are not errors; they come back as a MoveOutcome. These
exceptions cover session and shop operations a caller asked for in a state
where they cannot happen.
"""


class GameError(Exception):
    """Base class for game domain errors."""


class SessionNotFoundError(GameError):
    """No session exists with the requested id."""

    def __init__(self, session_id: str):
        super().__init__(f"Session '{session_id}' not found")
        self.session_id = session_id


class LevelNotCompleteError(GameError):
    """The next level was requested before the current one was won."""


class UnknownDecorationError(GameError):
    """The decoration id is not in the catalogue."""

    def __init__(self, decoration_id: str):
        super().__init__(f"Unknown decoration '{decoration_id}'")
        self.decoration_id = decoration_id


class InsufficientCoinsError(GameError):
    """The player cannot afford a purchase."""

    def __init__(self, price: int, coins: int):
        super().__init__(f"Decoration costs {price} coins, player has {coins}")
        self.price = price
        self.coins = coins
