"""
Card game error definitions.

Everything the engine raises derives from CardGameError so callers can
separate game failures from programming errors.
"""


class CardGameError(Exception):
    """Base class for card game errors."""
    pass


class EmptyDeckError(CardGameError):
    """A card was drawn from an empty pile."""
    pass


class GameStateError(CardGameError):
    """The requested operation does not fit the current game state."""
    pass


class GameConfigError(CardGameError):
    """Invalid game configuration."""
    pass
