"""
Tests unitaires pour le Solver (propagation + validation)
"""

import numpy as np
import pytest

from src.lib.s3_grid import CellValue, random_grid
from src.lib.s4_solver import (
    Solver,
    SolveStatus,
    count_adjacent_mines,
    solve,
    solve_with_report,
    try_to_solve,
)


# Grille 5x5 du payload d'exemple
BOARD_5X5 = [
    1, 2, 9, 1, 0,
    2, 10, 2, 1, 0,
    9, 2, 1, 0, 0,
    1, 1, 0, 0, 0,
    0, 0, 0, 0, 0,
]
SOLVED_5X5 = [
    1, 2, 10, 1, 0,
    2, 10, 2, 1, 0,
    10, 2, 1, 0, 0,
    1, 1, 0, 0, 0,
    0, 0, 0, 0, 0,
]


def assert_sound(grid, width, height):
    """Aucune case inconnue et chaque indice correspond à ses mines voisines."""
    assert CellValue.UNKNOWN not in grid
    for y in range(height):
        for x in range(width):
            value = grid[y * width + x]
            if value < CellValue.UNKNOWN:
                assert count_adjacent_mines(grid, x, y, width, height) == value


class TestScenarios:
    """Scénarios concrets (largeur x hauteur, grille row-major)"""

    def test_zero_clue_forces_neighbor_safe(self):
        assert solve([0, 9], 1, 2) == [0, 0]

    def test_one_clue_forces_neighbor_mine(self):
        assert solve([1, 9], 1, 2) == [1, 10]

    def test_lonely_clue_without_neighbors_is_unsolvable(self):
        assert solve([1], 1, 1) is None

    def test_no_clue_leaves_board_unresolved(self):
        assert solve([9, 9], 2, 1) is None

    def test_already_solved_board_is_returned(self):
        assert solve([0, 0], 1, 2) == [0, 0]

    def test_board_5x5(self):
        assert solve(BOARD_5X5, 5, 5) == SOLVED_5X5

    def test_board_5x5_report(self):
        report = solve_with_report(BOARD_5X5, 5, 5)
        assert report.status == SolveStatus.SOLVED
        assert report.rounds == 2
        assert report.flag_count == 2
        assert report.safe_count == 0
        assert report.total_marks == 2


class TestShapeGuard:
    """Tests du contrôle de forme width*height"""

    def test_length_mismatch_returns_none(self):
        assert solve([0, 9, 9], 1, 2) is None
        assert solve([0], 2, 2) is None

    def test_mismatch_report(self):
        report = solve_with_report([0, 0, 0], 2, 2)
        assert report.status == SolveStatus.SHAPE_MISMATCH
        assert report.solution is None
        assert report.rounds == 0
        assert report.failed_index is None

    @pytest.mark.parametrize("width, height", [(-1, -1), (-2, -3), (-1, 0), (2, -1)])
    def test_negative_dimensions_are_rejected(self, width, height):
        grid = [0] * max(0, width * height)
        assert solve(grid, width, height) is None
        assert solve_with_report(grid, width, height).status == SolveStatus.SHAPE_MISMATCH

    def test_contents_are_not_inspected(self):
        class Untouchable:
            def __len__(self):
                return 3

            def __getitem__(self, index):
                raise AssertionError("contenu lu malgré une forme invalide")

            def __iter__(self):
                raise AssertionError("contenu parcouru malgré une forme invalide")

        assert solve(Untouchable(), 2, 2) is None


class TestFailures:
    """Tests des différentes causes d'absence de solution"""

    def test_unresolved_report_points_to_first_unknown(self):
        report = solve_with_report([1, 9, 9], 3, 1)
        assert report.status == SolveStatus.UNRESOLVED
        assert report.failed_index == 2
        assert report.solution is None

    def test_inconsistent_clue(self):
        report = solve_with_report([1, 0], 1, 2)
        assert report.status == SolveStatus.INCONSISTENT
        assert report.failed_index == 0

    def test_clue_below_known_mines_blocks_both_rules(self):
        # 0 entouré d'une mine : ni la règle A ni la règle B ne s'applique
        report = solve_with_report([10, 0, 9], 3, 1)
        assert report.status == SolveStatus.INCONSISTENT
        assert report.failed_index == 1
        assert report.flag_count == 0
        assert report.safe_count == 0

    def test_solver_class_returns_none_on_failure(self):
        assert Solver().solve([9], 1, 1) is None


class TestPropagation:
    """Tests des règles de propagation"""

    def test_center_zero_reveals_all_neighbors(self):
        grid = [9, 9, 9,
                9, 0, 9,
                9, 9, 9]
        report = solve_with_report(grid, 3, 3)
        assert report.solution == [0] * 9
        assert report.safe_count == 8
        assert report.rounds == 2

    def test_center_eight_flags_all_neighbors(self):
        grid = [9, 9, 9,
                9, 8, 9,
                9, 9, 9]
        assert solve(grid, 3, 3) == [10, 10, 10,
                                     10, 8, 10,
                                     10, 10, 10]

    def test_chain_needs_one_round_per_step(self):
        report = solve_with_report([9, 9, 0], 3, 1)
        assert report.solution == [0, 0, 0]
        assert report.rounds == 3

    def test_cell_revealed_earlier_in_round_acts_as_clue(self):
        report = solve_with_report([0, 9, 9], 3, 1)
        assert report.solution == [0, 0, 0]
        assert report.rounds == 2

    def test_dimensions_above_payload_bound(self):
        assert solve([0] + [9] * 11, 12, 1) == [0] * 12


class TestInputs:
    """Types d'entrée acceptés"""

    @pytest.mark.parametrize("grid", [
        [1, 9],
        (1, 9),
        b"\x01\x09",
        bytearray([1, 9]),
        np.array([1, 9], dtype=np.uint8),
    ])
    def test_sequence_types(self, grid):
        assert try_to_solve(grid, 1, 2) == [1, 10]

    def test_input_is_not_mutated(self):
        grid = list(BOARD_5X5)
        solve(grid, 5, 5)
        assert grid == BOARD_5X5

    def test_result_is_plain_int_list(self):
        result = solve(np.array([0, 9], dtype=np.uint8), 1, 2)
        assert all(type(v) is int for v in result)


def test_soundness_on_random_boards():
    rng = np.random.default_rng(1234)
    for n in range(1, 11):
        for _ in range(32):
            grid = random_grid(n, n, rng=rng)
            result = solve(grid, n, n)
            if result is not None:
                assert_sound(result, n, n)


def test_rounds_bounded_by_cell_count():
    rng = np.random.default_rng(99)
    for width, height in [(1, 1), (2, 3), (4, 4), (7, 5), (10, 10)]:
        for _ in range(32):
            report = solve_with_report(random_grid(width, height, rng=rng), width, height)
            assert 1 <= report.rounds <= width * height


def test_determinism():
    rng = np.random.default_rng(7)
    for _ in range(50):
        grid = random_grid(6, 4, rng=rng)
        assert solve(grid, 6, 4) == solve(grid, 6, 4)
        assert solve_with_report(grid, 6, 4) == solve_with_report(grid, 6, 4)


def test_idempotence_on_solved_board():
    assert solve(SOLVED_5X5, 5, 5) == SOLVED_5X5
    report = solve_with_report(SOLVED_5X5, 5, 5)
    assert report.rounds == 1
    assert report.total_marks == 0


def test_idempotence_on_random_solutions():
    rng = np.random.default_rng(2024)
    for n in range(2, 8):
        for _ in range(32):
            result = solve(random_grid(n, n, rng=rng), n, n)
            if result is not None:
                assert solve(result, n, n) == result
