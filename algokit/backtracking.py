"""Backtracking solvers: graph colouring, N-queens, rat in a maze and sudoku."""

from __future__ import annotations

from collections.abc import Sequence

Board = list[list[int]]

_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def _require_square(matrix: Sequence[Sequence[int]], what: str) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError(f"{what} must be a square matrix")
    return size


def color_graph(adjacency: Sequence[Sequence[int]], colors: int) -> list[int] | None:
    """Colour the graph's nodes with colours 1..colors so no edge joins equal colours.

    Returns the first assignment found (nodes in order, colours tried lowest
    first), or None when the graph cannot be coloured with that many colours.
    """
    size = _require_square(adjacency, "adjacency")
    neighbours = [[k for k, edge in enumerate(row) if edge == 1] for row in adjacency]
    assignment = [0] * size

    def place(node: int) -> bool:
        if node == size:
            return True
        for colour in range(1, colors + 1):
            if all(assignment[k] != colour for k in neighbours[node]):
                assignment[node] = colour
                if place(node + 1):
                    return True
                assignment[node] = 0
        return False

    return assignment if place(0) else None


def _board_from_columns(queen_rows: Sequence[int], n: int) -> Board:
    board = [[0] * n for _ in range(n)]
    for column, row in enumerate(queen_rows):
        board[row][column] = 1
    return board


def _check_board_size(n: int) -> None:
    if n < 0:
        raise ValueError("board size must not be negative")


def n_queens(n: int) -> list[Board]:
    """All placements of n non-attacking queens on an n x n board.

    Queens are placed column by column, rows tried top to bottom. Each
    solution is a list of rows holding 1 where a queen stands and 0 elsewhere.
    """
    _check_board_size(n)
    solutions: list[Board] = []
    queen_rows: list[int] = []

    def safe(row: int) -> bool:
        column = len(queen_rows)
        return all(
            placed != row and abs(placed - row) != column - placed_column
            for placed_column, placed in enumerate(queen_rows)
        )

    def place(column: int) -> None:
        if column == n:
            solutions.append(_board_from_columns(queen_rows, n))
            return
        for row in range(n):
            if safe(row):
                queen_rows.append(row)
                place(column + 1)
                queen_rows.pop()

    place(0)
    return solutions


def n_queens_optimized(n: int) -> list[Board]:
    """Same result as n_queens, tracking occupied rows and diagonals in sets."""
    _check_board_size(n)
    solutions: list[Board] = []
    queen_rows: list[int] = []
    used_rows: set[int] = set()
    left_diagonals: set[int] = set()
    right_diagonals: set[int] = set()

    def place(column: int) -> None:
        if column == n:
            solutions.append(_board_from_columns(queen_rows, n))
            return
        for row in range(n):
            left = row - column
            right = (n - 1) - (row + column)
            if row in used_rows or left in left_diagonals or right in right_diagonals:
                continue
            queen_rows.append(row)
            used_rows.add(row)
            left_diagonals.add(left)
            right_diagonals.add(right)
            place(column + 1)
            queen_rows.pop()
            used_rows.discard(row)
            left_diagonals.discard(left)
            right_diagonals.discard(right)

    place(0)
    return solutions


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Every simple path from the top-left to the bottom-right cell.

    Open cells hold 1. Paths are strings of moves D, L, R, U, listed in the
    order found when trying down, left, right and up at each step.
    """
    if not maze or not maze[0]:
        raise ValueError("maze must have at least one cell")
    rows, cols = len(maze), len(maze[0])
    if any(len(row) != cols for row in maze):
        raise ValueError("maze rows must all have the same length")

    target = (rows - 1, cols - 1)
    if maze[0][0] == 0 or maze[target[0]][target[1]] == 0:
        return []

    paths: list[str] = []
    visited = {(0, 0)}

    def walk(x: int, y: int, path: str) -> None:
        if (x, y) == target:
            paths.append(path)
            return
        visited.add((x, y))
        for step, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < rows
                and 0 <= ny < cols
                and maze[nx][ny] == 1
                and (nx, ny) not in visited
            ):
                walk(nx, ny, path + step)
        visited.discard((x, y))

    walk(0, 0, "")
    return paths


def solve_sudoku(board: Sequence[Sequence[int]]) -> Board | None:
    """Fill the empty (0) cells of a 9 x 9 sudoku.

    Returns a solved copy of the board, or None when no solution exists.
    The given board is left untouched.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("sudoku board must be 9 x 9")
    grid = [list(row) for row in board]
    empty_cells = [(r, c) for r in range(9) for c in range(9) if grid[r][c] == 0]

    def allowed(row: int, column: int, value: int) -> bool:
        if value in grid[row]:
            return False
        if any(grid[r][column] == value for r in range(9)):
            return False
        top, left = row - row % 3, column - column % 3
        return all(
            grid[r][c] != value
            for r in range(top, top + 3)
            for c in range(left, left + 3)
        )

    def fill(index: int) -> bool:
        if index == len(empty_cells):
            return True
        row, column = empty_cells[index]
        for value in range(1, 10):
            if allowed(row, column, value):
                grid[row][column] = value
                if fill(index + 1):
                    return True
                grid[row][column] = 0
        return False

    return grid if fill(0) else None