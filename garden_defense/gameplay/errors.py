"""
Gameplay errors.
NO UI DEPENDENCIES.

Every error here is recoverable: the Game command layer turns them into
no-ops plus a PlacementRejectedEvent (or ignores them outright).
"""


class GameplayError(Exception):
    """Base class for rejected gameplay commands."""


class InsufficientResource(GameplayError):
    """Not enough sun to pay for a placement."""

    def __init__(self, cost: int, balance: int):
        super().__init__(f"need {cost} sun, have {balance}")
        self.cost = cost
        self.balance = balance


class InvalidCell(GameplayError):
    """Target cell cannot take a defender."""

    def __init__(self, row: int, col: int, message: str):
        super().__init__(f"({row}, {col}): {message}")
        self.row = row
        self.col = col


class OutOfBounds(InvalidCell):
    def __init__(self, row: int, col: int):
        super().__init__(row, col, "out of bounds")


class OccupiedCell(InvalidCell):
    def __init__(self, row: int, col: int):
        super().__init__(row, col, "tile occupied")


class UnknownDefender(GameplayError):
    """No defender goes by that name."""

    def __init__(self, kind):
        super().__init__(f"unknown defender {kind!r}")
        self.kind = kind


class AlreadyInProgress(GameplayError):
    """A wave was requested while another is still running."""

    def __init__(self, wave: int):
        super().__init__(f"wave {wave} already in progress")
        self.wave = wave
