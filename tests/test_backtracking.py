import copy

import pytest

from algokit.backtracking import (
    color_graph,
    n_queens,
    n_queens_optimized,
    rat_in_maze,
    solve_sudoku,
)

EXAMPLE_GRAPH = [
    [0, 1, 1, 1],
    [1, 0, 1, 0],
    [1, 1, 0, 1],
    [1, 0, 1, 0],
]

EXAMPLE_MAZE = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
]

EXAMPLE_SUDOKU = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


def _is_proper_colouring(adjacency, assignment, colors):
    if len(assignment) != len(adjacency):
        return False
    if any(not 1 <= c <= colors for c in assignment):
        return False
    return all(
        assignment[i] != assignment[j]
        for i, row in enumerate(adjacency)
        for j, edge in enumerate(row)
        if edge == 1 and i != j
    )


def _is_valid_queens(board, n):
    if len(board) != n or any(len(row) != n for row in board):
        return False
    queens = [(r, c) for r in range(n) for c in range(n) if board[r][c] == 1]
    if len(queens) != n:
        return False
    rows = {r for r, _ in queens}
    cols = {c for _, c in queens}
    diag = {r - c for r, c in queens}
    anti = {r + c for r, c in queens}
    return len(rows) == len(cols) == len(diag) == len(anti) == n


def _path_is_valid(maze, path):
    moves = {"D": (1, 0), "L": (0, -1), "R": (0, 1), "U": (-1, 0)}
    x, y = 0, 0
    seen = {(0, 0)}
    for step in path:
        dx, dy = moves[step]
        x, y = x + dx, y + dy
        if not (0 <= x < len(maze) and 0 <= y < len(maze[0])):
            return False
        if maze[x][y] != 1 or (x, y) in seen:
            return False
        seen.add((x, y))
    return (x, y) == (len(maze) - 1, len(maze[0]) - 1)


def _sudoku_is_solved(grid):
    full = set(range(1, 10))
    rows_ok = all(set(row) == full for row in grid)
    cols_ok = all({grid[r][c] for r in range(9)} == full for c in range(9))
    boxes_ok = all(
        {grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)} == full
        for br in (0, 3, 6)
        for bc in (0, 3, 6)
    )
    return rows_ok and cols_ok and boxes_ok


def test_color_graph_example_is_proper():
    result = color_graph(EXAMPLE_GRAPH, 3)
    assert result == [1, 2, 3, 2]
    assert _is_proper_colouring(EXAMPLE_GRAPH, result, 3) is True


def test_color_graph_too_few_colours():
    assert color_graph(EXAMPLE_GRAPH, 2) is None


def test_color_graph_triangle_needs_three():
    triangle = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    assert color_graph(triangle, 2) is None
    result = color_graph(triangle, 3)
    assert sorted(result) == [1, 2, 3]


def test_color_graph_without_edges_uses_first_colour_only():
    empty = [[0] * 4 for _ in range(4)]
    result = color_graph(empty, 3)
    assert len(set(result)) == 1
    assert _is_proper_colouring(empty, result, 3)


def test_color_graph_rejects_non_square():
    with pytest.raises(ValueError):
        color_graph([[0, 1], [1]], 2)


def test_n_queens_four():
    solutions = n_queens(4)
    assert len(solutions) == 2
    assert all(_is_valid_queens(board, 4) for board in solutions)


def test_n_queens_eight_count():
    assert len(n_queens(8)) == 92


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_unsolvable(n):
    assert n_queens(n) == []
    assert n_queens_optimized(n) == []


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7])
def test_optimized_matches_plain(n):
    plain = n_queens(n)
    assert n_queens_optimized(n) == plain
    assert all(_is_valid_queens(board, n) for board in plain)


def test_n_queens_solutions_are_distinct():
    solutions = n_queens_optimized(6)
    as_tuples = {tuple(map(tuple, board)) for board in solutions}
    assert len(as_tuples) == len(solutions)


def test_n_queens_negative_size():
    with pytest.raises(ValueError):
        n_queens(-1)
    with pytest.raises(ValueError):
        n_queens_optimized(-1)


def test_rat_in_maze_example():
    assert rat_in_maze(EXAMPLE_MAZE) == ["DDRDRR", "DRDDRR"]


def test_rat_in_maze_paths_are_valid_walks():
    maze = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    paths = rat_in_maze(maze)
    assert paths
    assert len(set(paths)) == len(paths)
    assert all(_path_is_valid(maze, p) for p in paths)


def test_rat_in_maze_blocked_ends():
    assert rat_in_maze([[0, 1], [1, 1]]) == []
    assert rat_in_maze([[1, 1], [1, 0]]) == []


def test_rat_in_maze_no_route():
    assert rat_in_maze([[1, 0], [0, 1]]) == []


def test_rat_in_maze_rejects_empty():
    with pytest.raises(ValueError):
        rat_in_maze([])


def test_rat_in_maze_rejects_ragged():
    with pytest.raises(ValueError):
        rat_in_maze([[1, 1], [1]])


def test_solve_sudoku_example():
    original = copy.deepcopy(EXAMPLE_SUDOKU)
    solved = solve_sudoku(EXAMPLE_SUDOKU)
    assert _sudoku_is_solved(solved)
    assert all(
        solved[r][c] == EXAMPLE_SUDOKU[r][c]
        for r in range(9)
        for c in range(9)
        if EXAMPLE_SUDOKU[r][c]
    )
    assert EXAMPLE_SUDOKU == original


def test_solve_sudoku_solved_board_round_trips():
    solved = solve_sudoku(EXAMPLE_SUDOKU)
    assert solve_sudoku(solved) == solved


def test_solve_sudoku_unsolvable():
    board = [[0] * 9 for _ in range(9)]
    board[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    board[1][0] = 9
    assert solve_sudoku(board) is None


def test_solve_sudoku_rejects_wrong_size():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 4 for _ in range(4)])