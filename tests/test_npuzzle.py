import pytest

from scopetab.npuzzle import (
    Board,
    Heuristic,
    Solution,
    format_solution,
    main,
    parse_board,
    solve,
)

GOAL = ((1, 2, 3), (4, 5, 6), (7, 8, 0))
ONE_AWAY = ((1, 2, 3), (4, 5, 6), (7, 0, 8))
SCRAMBLED = ((1, 2, 3), (0, 4, 6), (7, 5, 8))
UNSOLVABLE = ((1, 2, 3), (4, 5, 6), (8, 7, 0))


def test_parse_board_reads_dimension_and_tiles():
    board = parse_board("3\n1 2 3\n4 5 6\n7 8 0\n")
    assert board.grid == GOAL
    assert board.dimension == 3


def test_parse_board_rejects_short_input():
    with pytest.raises(ValueError):
        parse_board("3\n1 2 3\n")


def test_parse_board_rejects_garbage():
    with pytest.raises(ValueError):
        parse_board("2\n1 x 3 0")


def test_board_must_be_square():
    with pytest.raises(ValueError):
        Board(((1, 2), (3,)))


def test_render_format():
    assert Board(GOAL).render() == "\n1 2 3\n4 5 6\n7 8 0\n"


def test_goal_board_measures():
    board = Board(GOAL)
    assert board.is_goal()
    assert board.hamming() == 0
    assert board.manhattan() == 0
    assert board.inversions() == 0
    assert board.blank_position() == (2, 2)


def test_one_away_measures():
    board = Board(ONE_AWAY)
    assert not board.is_goal()
    assert board.hamming() == 1
    assert board.manhattan() == 1


def test_hamming_never_exceeds_manhattan():
    for grid in (GOAL, ONE_AWAY, SCRAMBLED, UNSOLVABLE):
        board = Board(grid)
        assert board.hamming() <= board.manhattan()


def test_solvability_odd_dimension():
    assert Board(GOAL).is_solvable()
    assert Board(SCRAMBLED).is_solvable()
    assert not Board(UNSOLVABLE).is_solvable()


def test_solvability_even_dimension():
    assert Board(((1, 2), (3, 0))).is_solvable()
    assert not Board(((2, 1), (3, 0))).is_solvable()


def test_blank_row_from_bottom_without_blank():
    with pytest.raises(ValueError):
        Board(((1, 2), (3, 4))).blank_row_from_bottom()


def test_blank_row_from_bottom_for_goal():
    assert Board(GOAL).blank_row_from_bottom() == 1


def test_neighbors_count_depends_on_blank_position():
    centre = Board(((1, 2, 3), (4, 0, 5), (6, 7, 8)))
    assert len(centre.neighbors()) == 4
    assert len(Board(GOAL).neighbors()) == 2


def test_neighbors_skip_parent():
    start = Board(ONE_AWAY)
    for child in start.neighbors():
        assert child.parent is start
        assert all(grand != start for grand in child.neighbors())
        assert len(child.neighbors()) == len(Board(child.grid).neighbors()) - 1


def test_neighbors_differ_by_one_move():
    board = Board(SCRAMBLED)
    for child in board.neighbors():
        assert abs(child.manhattan() - board.manhattan()) == 1
        changed = sum(
            a != b
            for row_a, row_b in zip(board.grid, child.grid)
            for a, b in zip(row_a, row_b)
        )
        assert changed == 2


def test_solve_goal_board_needs_no_moves():
    solution = solve(Board(GOAL))
    assert solution.moves == 0
    assert solution.explored == 0
    assert solution.expanded == 0


@pytest.mark.parametrize("heuristic", list(Heuristic))
def test_solve_path_is_a_chain_of_moves(heuristic):
    start = Board(SCRAMBLED)
    solution = solve(start, heuristic)
    assert solution.path[0] == start
    assert solution.path[-1].is_goal()
    for before, after in zip(solution.path, solution.path[1:]):
        assert after in Board(before.grid).neighbors()
    assert solution.moves >= start.manhattan()


def test_heuristics_agree_on_move_count():
    start = Board(SCRAMBLED)
    assert (
        solve(start, Heuristic.HAMMING).moves
        == solve(start, Heuristic.MANHATTAN).moves
    )


def test_solve_unsolvable_returns_none():
    assert solve(Board(UNSOLVABLE)) is None
    assert format_solution(None) == "Unsolvable puzzle\n"


def test_format_solution_lists_statistics_and_boards():
    solution = solve(Board(ONE_AWAY))
    text = format_solution(solution)
    assert text.startswith(f"\nMinimum number of moves: {solution.moves}\n")
    assert f"Number of explored boards: {solution.explored}\n" in text
    assert f"Number of expanded boards: {solution.expanded}\n" in text
    assert text.endswith(Board(ONE_AWAY).render() + Board(GOAL).render())


def test_solution_moves_counts_path():
    path = (Board(ONE_AWAY), Board(GOAL))
    assert Solution(path, 2, 1).moves == len(path) - 1


def test_main_prints_solution(tmp_path, capsys):
    source = tmp_path / "board.txt"
    source.write_text("3\n1 2 3\n4 5 6\n7 0 8\n", encoding="utf-8")
    assert main([str(source), "--heuristic", "hamming"]) == 0
    expected = format_solution(solve(Board(ONE_AWAY), Heuristic.HAMMING))
    assert capsys.readouterr().out == expected


def test_main_reports_unsolvable(tmp_path, capsys):
    source = tmp_path / "board.txt"
    source.write_text("3\n1 2 3\n4 5 6\n8 7 0\n", encoding="utf-8")
    assert main([str(source)]) == 0
    assert capsys.readouterr().out == "Unsolvable puzzle\n"