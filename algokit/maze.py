"""Walking a grid maze of paths, walls, exits and treasure, depth- and breadth-first."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum


class Cell(IntEnum):
    """What occupies one square of the maze."""

    PATH = 0
    WALL = 1
    EXIT = 2
    TREASURE = 3


@dataclass(frozen=True)
class Event:
    """A visit to one square during a traversal."""

    row: int
    col: int
    cell: Cell

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)


MAZE_OF_MYSTERIES: tuple[tuple[int, ...], ...] = (
    (0, 1, 0, 0, 2),
    (0, 0, 0, 1, 0),
    (0, 3, 1, 0, 0),
    (0, 1, 0, 1, 0),
    (0, 0, 0, 0, 0),
)

# Right, left, down, up.
_MOVES = ((0, 1), (0, -1), (1, 0), (-1, 0))


class Maze:
    """A rectangular grid of cells."""

    def __init__(self, grid: Iterable[Iterable[int]] = MAZE_OF_MYSTERIES) -> None:
        rows = tuple(tuple(Cell(value) for value in row) for row in grid)
        if not rows or not rows[0]:
            raise ValueError("maze must have at least one cell")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("maze rows must all have the same length")
        self.grid = rows

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0])

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at ``row``, ``col``."""
        if not self._inside(row, col):
            raise IndexError(f"({row}, {col}) is outside the maze")
        return self.grid[row][col]

    def _open_neighbours(
        self, row: int, col: int, visited: set[tuple[int, int]]
    ) -> Iterator[tuple[int, int]]:
        for d_row, d_col in _MOVES:
            target = (row + d_row, col + d_col)
            if (
                self._inside(*target)
                and self.grid[target[0]][target[1]] is not Cell.WALL
                and target not in visited
            ):
                yield target

    def dfs(self, row: int, col: int) -> Iterator[Event]:
        """Yield a visit for every step of every simple path from the start."""
        if not self._inside(row, col):
            return iter(())
        return self._walk(row, col, set())

    def _walk(self, row: int, col: int, visited: set[tuple[int, int]]) -> Iterator[Event]:
        yield Event(row, col, self.grid[row][col])
        visited.add((row, col))
        for target in self._open_neighbours(row, col, visited):
            yield from self._walk(*target, visited)
        visited.discard((row, col))

    def bfs(self, row: int, col: int) -> tuple[list[Event], int]:
        """Visit squares breadth-first; return the visits and the number of moves queued.

        Exits are never marked visited, so they may be reached more than once.
        """
        queue = deque([(row, col)])
        visited: set[tuple[int, int]] = set()
        events: list[Event] = []
        moves = 0
        while queue:
            position = queue.popleft()
            if not self._inside(*position) or position in visited:
                continue
            cell = self.grid[position[0]][position[1]]
            events.append(Event(position[0], position[1], cell))
            if cell is not Cell.EXIT:
                visited.add(position)
            for target in self._open_neighbours(*position, visited):
                queue.append(target)
                moves += 1
        return events, moves


def main(argv: Sequence[str] | None = None) -> int:
    """Run both traversals over the built-in maze from its left edge."""
    parser = argparse.ArgumentParser(description="Explore the maze of mysteries.")
    parser.parse_args(argv)
    maze = Maze()

    print("DFS")
    for event in maze.dfs(1, 0):
        print(f"{event.row},{event.col}")
        if event.cell is Cell.EXIT:
            print("We are in the exit!")
        if event.cell is Cell.TREASURE:
            print("Found the Treasure!")
    print("\n=============================")

    print("BFS")
    events, moves = maze.bfs(1, 0)
    for event in events:
        print(f"{event.row} , {event.col}")
        if event.cell is Cell.TREASURE:
            print("found the Treasure!")
        if event.cell is Cell.EXIT:
            print("We are in the exit!")
    print(moves)
    return 0