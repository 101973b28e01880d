"""
Lawn grid: lane/column occupancy.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Optional, Dict, Tuple, Iterator, TYPE_CHECKING

from .errors import OutOfBounds, OccupiedCell

if TYPE_CHECKING:
    from .entities import Defender


@dataclass
class Cell:
    """A single tile of the lawn."""
    row: int
    col: int
    defender: Optional['Defender'] = None

    def is_empty(self) -> bool:
        return self.defender is None


class Grid:
    """
    The lawn where defenders are placed.

    Coordinate system:
    - (0, 0) is the top-left tile
    - row is the lane, increasing downward
    - col increases to the right, away from the house
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self._cells: Dict[Tuple[int, int], Cell] = {}

        for row in range(rows):
            for col in range(cols):
                self._cells[(row, col)] = Cell(row, col)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if coordinates are within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at coordinates, or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[(row, col)]

    def get_defender(self, row: int, col: int) -> Optional['Defender']:
        """Get defender at coordinates, or None if empty or out of bounds."""
        cell = self.get_cell(row, col)
        if cell is None:
            return None
        return cell.defender

    def can_place(self, row: int, col: int) -> bool:
        """True iff the cell exists and is empty."""
        cell = self.get_cell(row, col)
        return cell is not None and cell.is_empty()

    def check_placeable(self, row: int, col: int) -> None:
        """Raise OutOfBounds or OccupiedCell if nothing can go here."""
        cell = self.get_cell(row, col)
        if cell is None:
            raise OutOfBounds(row, col)
        if not cell.is_empty():
            raise OccupiedCell(row, col)

    def place_defender(self, defender: 'Defender') -> None:
        """
        Put defender into the cell named by its row/col.
        Raises InvalidCell if the cell is out of bounds or occupied.
        """
        self.check_placeable(defender.row, defender.col)
        self._cells[(defender.row, defender.col)].defender = defender

    def remove_defender(self, row: int, col: int) -> Optional['Defender']:
        """
        Clear a cell and return whatever was in it.
        Empty or out-of-bounds cells return None.
        """
        cell = self.get_cell(row, col)
        if cell is None or cell.is_empty():
            return None

        defender = cell.defender
        cell.defender = None
        return defender

    def iter_defenders(self) -> Iterator['Defender']:
        """Iterate over all defenders, row by row, left to right."""
        for row in range(self.rows):
            for col in range(self.cols):
                defender = self._cells[(row, col)].defender
                if defender is not None:
                    yield defender

    def occupied_count(self) -> int:
        return sum(1 for _ in self.iter_defenders())

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols})"
