"""
Pond grid with single occupancy per cell.
Cells hold fish ids (-1 when empty); fish objects live in an id-keyed arena.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from pond_sim.core.fish import Fish

logger = logging.getLogger(__name__)

EMPTY = -1

# Occupancy codes for plotting
CODE_EMPTY = 0
CODE_CARP = 1
CODE_PIKE = 2


class PondError(Exception):
    """Base class for pond grid failures."""


class OutOfBoundsError(PondError, IndexError):
    """Coordinate outside the pond."""


class GridFullError(PondError, RuntimeError):
    """No free cell left when one was required."""


class OccupiedDestinationError(PondError, ValueError):
    """Destination cell already holds another fish."""


class Pond:
    """Bounded W x H grid; the grid is the only record of occupancy."""

    def __init__(self, width: int, height: int,
                 rng: Optional[np.random.Generator] = None,
                 max_attempts: int = 1000) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"Pond size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max(1, int(max_attempts))
        self.grid = np.full((self.width, self.height), EMPTY, dtype=np.int64)
        self._fish: Dict[int, Fish] = {}

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"({x}, {y}) is outside the {self.width}x{self.height} pond")

    def get_fish_at(self, x: int, y: int) -> Optional[Fish]:
        self._check_bounds(x, y)
        fish_id = int(self.grid[x, y])
        if fish_id == EMPTY:
            return None
        return self._fish[fish_id]

    def is_free(self, x: int, y: int) -> bool:
        self._check_bounds(x, y)
        return bool(self.grid[x, y] == EMPTY)

    def place_fish(self, fish: Fish, x: int, y: int) -> None:
        """Put a fish into an empty cell and sync its position."""
        self._check_bounds(x, y)
        if fish.id in self._fish:
            raise ValueError(f"{fish!r} is already in the pond")
        occupant = self.get_fish_at(x, y)
        if occupant is not None:
            raise OccupiedDestinationError(f"({x}, {y}) is occupied by {occupant!r}")
        self.grid[x, y] = fish.id
        self._fish[fish.id] = fish
        fish.move((x, y))

    def move_fish(self, fish: Fish, new_x: int, new_y: int) -> None:
        """Move a fish to an empty cell. Occupied destinations are rejected."""
        self._check_bounds(new_x, new_y)
        old_x, old_y = fish.position
        if (self._fish.get(fish.id) is not fish or not self.in_bounds(old_x, old_y)
                or self.grid[old_x, old_y] != fish.id):
            raise ValueError(f"{fish!r} is not in the pond")
        if (new_x, new_y) == (old_x, old_y):
            return
        occupant = self.get_fish_at(new_x, new_y)
        if occupant is not None:
            raise OccupiedDestinationError(
                f"Cannot move {fish!r} to ({new_x}, {new_y}): occupied by {occupant!r}")
        self.grid[old_x, old_y] = EMPTY
        self.grid[new_x, new_y] = fish.id
        fish.move((new_x, new_y))

    def remove_fish(self, x: int, y: int) -> Optional[Fish]:
        """Clear a cell. The fish's own state is left untouched."""
        self._check_bounds(x, y)
        fish_id = int(self.grid[x, y])
        if fish_id == EMPTY:
            return None
        self.grid[x, y] = EMPTY
        return self._fish.pop(fish_id)

    def free_cell_count(self) -> int:
        return int(np.count_nonzero(self.grid == EMPTY))

    def fish_count(self) -> int:
        return len(self._fish)

    def get_random_free_position(self, rng: Optional[np.random.Generator] = None) -> Tuple[int, int]:
        """Uniformly sample an empty cell over the whole pond."""
        rng = rng if rng is not None else self.rng
        if self.free_cell_count() == 0:
            raise GridFullError(f"No free cell in the {self.width}x{self.height} pond")

        for _ in range(self.max_attempts):
            x = int(rng.integers(self.width))
            y = int(rng.integers(self.height))
            if self.grid[x, y] == EMPTY:
                return x, y

        # Crowded pond: pick directly among the free cells
        free = np.argwhere(self.grid == EMPTY)
        logger.debug("Rejection sampling gave up after %d draws; %d free cells",
                     self.max_attempts, len(free))
        x, y = free[int(rng.integers(len(free)))]
        return int(x), int(y)

    def get_adjacent_positions(self, x: int, y: int) -> List[Tuple[int, int]]:
        """Orthogonal neighbours inside the pond, ordered left, right, up, down."""
        positions = []
        if x > 0:
            positions.append((x - 1, y))
        if x < self.width - 1:
            positions.append((x + 1, y))
        if y > 0:
            positions.append((x, y - 1))
        if y < self.height - 1:
            positions.append((x, y + 1))
        return positions

    def iter_fish(self) -> Iterator[Tuple[Tuple[int, int], Fish]]:
        """Yield ((x, y), fish) for every occupied cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                fish_id = int(self.grid[x, y])
                if fish_id != EMPTY:
                    yield (x, y), self._fish[fish_id]

    def occupancy(self) -> np.ndarray:
        """Code array shaped (height, width): 0 empty, 1 carp, 2 pike."""
        codes = np.full((self.height, self.width), CODE_EMPTY, dtype=np.int8)
        for (x, y), fish in self.iter_fish():
            codes[y, x] = CODE_PIKE if fish.is_predator else CODE_CARP
        return codes

    def render(self) -> str:
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                fish = self.get_fish_at(x, y)
                row.append(". " if fish is None else f"{fish.symbol} ")
            lines.append("".join(row))
        return "\n".join(lines) + "\n"

    def display(self) -> None:
        print(self.render())
