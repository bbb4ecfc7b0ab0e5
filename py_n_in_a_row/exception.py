class GameError(Exception):
    pass


class LogicError(GameError):
    """An internal invariant was broken, the game can't continue."""


class ConfigurationError(GameError):
    """Invalid board dimension or player symbol, the game can't start."""


class InvalidMoveError(GameError):
    pass


class CellTakenError(InvalidMoveError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__("Cell already taken.")
        self.x = x
        self.y = y
