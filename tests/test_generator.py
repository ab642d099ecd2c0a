import random
import unittest
from collections import deque

import numpy as np

from mazesearch import (
    Algorithm,
    FREE,
    InvalidArgumentError,
    InvalidDimensionsError,
    Position,
    WALL,
    generate,
    solve,
)

# Recorded output of generate(5, 5, seed=42): the carve snakes right, down,
# left, down, right through the lattice.
SEED_42_FIVE_BY_FIVE = [
    [0, 0, 0, 0, 0],
    [1, 1, 1, 1, 0],
    [0, 0, 0, 0, 0],
    [0, 1, 1, 1, 1],
    [0, 0, 0, 0, 0],
]
SIZES = [(2, 2), (2, 3), (3, 2), (2, 9), (5, 5), (6, 7), (7, 4), (10, 10), (30, 45)]


def tree_distance(maze, source, target) -> int:
    """Edge count between two cells, computed by a plain flood fill."""

    distance = {source: 0}
    queue = deque([source])
    while queue:
        cell = queue.popleft()
        for neighbor in maze.open_neighbors(cell):
            if neighbor not in distance:
                distance[neighbor] = distance[cell] + 1
                queue.append(neighbor)
    return distance[target]


class GenerateTests(unittest.TestCase):
    def test_rejects_dimensions_below_two(self) -> None:
        for rows, cols in [(1, 5), (5, 1), (0, 0), (1, 1), (-3, 4)]:
            with self.subTest(rows=rows, cols=cols):
                with self.assertRaises(InvalidDimensionsError):
                    generate(rows, cols, seed=1)

    def test_generated_mazes_are_perfect_and_fully_connected(self) -> None:
        for rows, cols in SIZES:
            for seed in range(5):
                with self.subTest(rows=rows, cols=cols, seed=seed):
                    maze = generate(rows, cols, seed=seed)
                    self.assertEqual(maze.shape, (rows, cols))
                    self.assertEqual(maze.start, Position(0, 0))
                    self.assertEqual(maze.goal, Position(rows - 1, cols - 1))
                    self.assertTrue(maze.is_free(maze.start))
                    self.assertTrue(maze.is_free(maze.goal))
                    free_count = int(np.count_nonzero(maze.cells == FREE))
                    self.assertEqual(len(maze.reachable_from(maze.start)), free_count)
                    self.assertEqual(maze.count_free_edges(), free_count - 1)
                    self.assertTrue(maze.is_perfect())

    def test_all_algorithms_agree_on_the_unique_path(self) -> None:
        for rows, cols in SIZES:
            with self.subTest(rows=rows, cols=cols):
                maze = generate(rows, cols, seed=11)
                paths = [solve(maze, algorithm).positions for algorithm in Algorithm]
                self.assertEqual(paths[0], paths[1])
                self.assertEqual(paths[0], paths[2])
                self.assertEqual(len(paths[0]) - 1, tree_distance(maze, maze.start, maze.goal))

    def test_same_seed_gives_identical_maze(self) -> None:
        first = generate(12, 9, seed=7)
        second = generate(12, 9, seed=7)
        self.assertEqual(first.tobytes(), second.tobytes())
        self.assertEqual(first, second)
        others = {generate(12, 9, seed=seed).tobytes() for seed in range(8)}
        self.assertGreater(len(others), 1)

    def test_injected_rng_matches_seed(self) -> None:
        self.assertEqual(generate(8, 8, rng=random.Random(3)), generate(8, 8, seed=3))

    def test_two_by_two_has_a_single_three_cell_path(self) -> None:
        for seed in range(10):
            with self.subTest(seed=seed):
                maze = generate(2, 2, seed=seed)
                self.assertIn(maze.to_list(), ([[0, 0], [1, 0]], [[0, 1], [0, 0]]))
                for algorithm in Algorithm:
                    solution = solve(maze, algorithm)
                    self.assertEqual(solution.length, 3)
                    self.assertEqual(solution.cost, 2.0)

    def test_seed_42_five_by_five_bitmap(self) -> None:
        maze = generate(5, 5, seed=42)

        # Lattice cells (even, even) are always carved, (odd, odd) never are,
        # and a 3x3 lattice spanning tree opens exactly 8 of 12 passages.
        for row in range(5):
            for col in range(5):
                if row % 2 == 0 and col % 2 == 0:
                    self.assertEqual(maze[(row, col)], FREE)
                if row % 2 == 1 and col % 2 == 1:
                    self.assertEqual(maze[(row, col)], WALL)
        self.assertEqual(int(np.count_nonzero(maze.cells == FREE)), 17)

        self.assertEqual(maze.to_list(), SEED_42_FIVE_BY_FIVE)
        self.assertEqual(maze, generate(5, 5, seed=42))

        solution = solve(maze, Algorithm.BFS)
        self.assertEqual(solution.positions[0], Position(0, 0))
        self.assertEqual(solution.positions[-1], Position(4, 4))
        self.assertEqual(solution.length, 17)
        self.assertEqual(solution.cost, 16.0)
        self.assertEqual(solution.length - 1, tree_distance(maze, Position(0, 0), Position(4, 4)))

    def test_start_override_anchors_the_carve(self) -> None:
        for start in [(3, 3), (1, 2), (4, 0), (0, 5)]:
            for seed in range(4):
                with self.subTest(start=start, seed=seed):
                    maze = generate(6, 7, seed=seed, start=start)
                    self.assertEqual(maze.start, Position(*start))
                    self.assertEqual(maze.goal, Position(5, 6))
                    self.assertTrue(maze.is_perfect())

    def test_goal_override_is_attached_or_rejected(self) -> None:
        for seed in range(20):
            with self.subTest(seed=seed):
                try:
                    maze = generate(5, 5, seed=seed, goal=(1, 1))
                except InvalidArgumentError:
                    continue
                self.assertEqual(maze.goal, Position(1, 1))
                self.assertTrue(maze.is_perfect())
        self.assertEqual(generate(5, 5, seed=0, goal=(2, 4)).goal, Position(2, 4))

    def test_endpoints_outside_the_grid_are_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            generate(4, 4, seed=0, goal=(4, 4))
        with self.assertRaises(InvalidArgumentError):
            generate(4, 4, seed=0, start=(-1, 0))


if __name__ == "__main__":
    unittest.main()
