"""Sliding-tile puzzle solver using A* search with a tile-distance estimate."""

from __future__ import annotations

import argparse
import enum
import heapq
import itertools
import sys
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

__all__ = [
    "Board",
    "Heuristic",
    "Solution",
    "parse_board",
    "solve",
    "format_solution",
    "main",
]

Grid = Tuple[Tuple[int, ...], ...]

_MOVES = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True)
class Board:
    """A square grid of tiles where 0 is the blank.

    ``parent`` is the board this one was reached from during a search; it
    takes no part in equality.
    """

    grid: Grid
    parent: Optional["Board"] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        rows = tuple(tuple(int(value) for value in row) for row in self.grid)
        if not rows or any(len(row) != len(rows) for row in rows):
            raise ValueError("board must be a non-empty square grid")
        object.__setattr__(self, "grid", rows)

    @property
    def dimension(self) -> int:
        """Number of rows (and columns)."""
        return len(self.grid)

    def _tiles(self) -> Iterator[int]:
        for row in self.grid:
            yield from row

    def inversions(self) -> int:
        """Pairs of non-blank tiles that appear in the wrong order."""
        tiles = [tile for tile in self._tiles() if tile > 0]
        return sum(
            1
            for i, first in enumerate(tiles)
            for second in tiles[i + 1:]
            if second < first
        )

    def blank_row_from_bottom(self) -> int:
        """Row of the blank counted from the bottom, starting at 1."""
        row, _ = self.blank_position()
        if row < 0:
            raise ValueError("board has no blank tile")
        return self.dimension - row

    def is_solvable(self) -> bool:
        """Whether the goal arrangement can be reached from this board."""
        inversions = self.inversions()
        if self.dimension % 2 == 1:
            return inversions % 2 == 0
        blank_row = self.blank_row_from_bottom()
        return (blank_row % 2 == 0) == (inversions % 2 == 1)

    def hamming(self) -> int:
        """Number of non-blank tiles out of place."""
        return sum(
            1
            for position, tile in enumerate(self._tiles(), 1)
            if tile > 0 and tile != position
        )

    def manhattan(self) -> int:
        """Sum of the row and column distances of tiles from their goal cells."""
        size = self.dimension
        total = 0
        for i, row in enumerate(self.grid):
            for j, tile in enumerate(row):
                if tile > 0:
                    goal_row, goal_col = divmod(tile - 1, size)
                    total += abs(goal_row - i) + abs(goal_col - j)
        return total

    def blank_position(self) -> Tuple[int, int]:
        """Row and column of the blank, or ``(-1, -1)`` if there is none."""
        position = (-1, -1)
        for i, row in enumerate(self.grid):
            for j, tile in enumerate(row):
                if tile == 0:
                    position = (i, j)
        return position

    def neighbors(self) -> List["Board"]:
        """Boards one blank move away, leaving out the board this came from."""
        blank_row, blank_col = self.blank_position()
        if blank_row < 0:
            return []
        size = self.dimension
        result = []
        for d_row, d_col in _MOVES:
            row, col = blank_row + d_row, blank_col + d_col
            if not (0 <= row < size and 0 <= col < size):
                continue
            cells = [list(r) for r in self.grid]
            cells[blank_row][blank_col], cells[row][col] = (
                cells[row][col],
                cells[blank_row][blank_col],
            )
            grid = tuple(tuple(r) for r in cells)
            if self.parent is not None and self.parent.grid == grid:
                continue
            result.append(Board(grid, self))
        return result

    def is_goal(self) -> bool:
        """Whether every tile sits in its goal cell."""
        size = self.dimension
        return all(
            tile <= 0 or tile == i * size + j + 1
            for i, row in enumerate(self.grid)
            for j, tile in enumerate(row)
        )

    def render(self) -> str:
        """A blank line followed by the rows, tiles separated by spaces."""
        return "\n" + "".join(" ".join(map(str, row)) + "\n" for row in self.grid)

    def __str__(self) -> str:
        return self.render()


class Heuristic(enum.Enum):
    """Estimate of the remaining moves used to order the search."""

    HAMMING = "hamming"
    MANHATTAN = "manhattan"

    def estimate(self, board: Board) -> int:
        """The estimate for ``board``."""
        if self is Heuristic.HAMMING:
            return board.hamming()
        return board.manhattan()


@dataclass(frozen=True)
class Solution:
    """Boards from the start to the goal, with search statistics."""

    path: Tuple[Board, ...]
    explored: int
    expanded: int

    @property
    def moves(self) -> int:
        """Number of moves from the start to the goal."""
        return len(self.path) - 1


def parse_board(text: str) -> Board:
    """Read a board: the dimension, then the tiles row by row."""
    tokens = text.split()
    if not tokens:
        raise ValueError("no board dimension given")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"invalid board text: {exc}") from None
    size = numbers[0]
    if size <= 0:
        raise ValueError(f"board dimension must be positive, got {size}")
    tiles = numbers[1:1 + size * size]
    if len(tiles) < size * size:
        raise ValueError(
            f"expected {size * size} tiles, got {len(tiles)}"
        )
    return Board(tuple(tuple(tiles[r * size:(r + 1) * size]) for r in range(size)))


def solve(
    board: Board, heuristic: Heuristic = Heuristic.MANHATTAN
) -> Optional[Solution]:
    """Search for the goal with A*; None if the puzzle cannot be solved."""
    if not board.is_solvable():
        return None
    tie = itertools.count()
    queue = [(heuristic.estimate(board), next(tie), 0, board)]
    explored = expanded = 0
    goal: Optional[Board] = None
    while queue:
        _, _, cost, current = heapq.heappop(queue)
        if current.is_goal():
            goal = current
            break
        expanded += 1
        for neighbor in current.neighbors():
            heapq.heappush(
                queue,
                (cost + 1 + heuristic.estimate(neighbor), next(tie), cost + 1, neighbor),
            )
            explored += 1
    if goal is None:
        raise RuntimeError("search ended without reaching the goal")
    path = []
    step: Optional[Board] = goal
    while step is not None:
        path.append(step)
        step = step.parent
    path.reverse()
    return Solution(tuple(path), explored, expanded)


def format_solution(solution: Optional[Solution]) -> str:
    """Text report of a solution, or the unsolvable notice for None."""
    if solution is None:
        return "Unsolvable puzzle\n"
    header = (
        f"\nMinimum number of moves: {solution.moves}"
        f"\nNumber of explored boards: {solution.explored}"
        f"\nNumber of expanded boards: {solution.expanded}\n"
    )
    return header + "".join(board.render() for board in solution.path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve the puzzle in a file and print the moves."""
    parser = argparse.ArgumentParser(
        prog="scopetab-npuzzle", description="Solve a sliding-tile puzzle."
    )
    parser.add_argument("input", nargs="?", default="input.txt", help="board file")
    parser.add_argument(
        "--heuristic",
        choices=[h.value for h in Heuristic],
        default=Heuristic.MANHATTAN.value,
    )
    args = parser.parse_args(argv)
    with open(args.input, encoding="utf-8") as source:
        board = parse_board(source.read())
    sys.stdout.write(format_solution(solve(board, Heuristic(args.heuristic))))
    return 0


if __name__ == "__main__":
    sys.exit(main())