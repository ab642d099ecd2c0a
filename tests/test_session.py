import io
import json
import random
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from mazesearch import (
    Algorithm,
    GridMaze,
    InvalidArgumentError,
    MazeSession,
    Position,
    UnreachableGoalError,
    save_maze,
)
from mazesearch import solver as solver_cli
from mazesearch.settings import DEFAULT_SETTINGS, load_settings, save_settings

STEP_NAMES = {
    (-1, 0): "UP",
    (1, 0): "DOWN",
    (0, -1): "LEFT",
    (0, 1): "RIGHT",
    (-1, -1): "UP-LEFT",
    (-1, 1): "UP-RIGHT",
    (1, -1): "DOWN-LEFT",
    (1, 1): "DOWN-RIGHT",
}


class MazeSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        self.session = MazeSession()

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_requires_a_maze(self) -> None:
        self.assertIsNone(self.session.maze)
        self.assertFalse(self.session.is_solved)
        with self.assertRaises(InvalidArgumentError):
            self.session.solve_maze()
        with self.assertRaises(InvalidArgumentError):
            self.session.move_character("UP")
        with self.assertRaises(InvalidArgumentError):
            self.session.save_maze(self.root / "maze.json")

    def test_walk_the_solution_to_the_goal(self) -> None:
        maze = self.session.generate_maze(11, 13, seed=4)
        self.assertEqual(self.session.character_position, maze.start)
        solution = self.session.solve_maze(Algorithm.BFS)
        self.assertIs(self.session.solution, solution)

        positions = solution.positions
        for current, following in zip(positions, positions[1:]):
            step = (following.row - current.row, following.col - current.col)
            self.assertTrue(self.session.move_character(STEP_NAMES[step]))
        self.assertEqual(self.session.character_position, maze.goal)
        self.assertTrue(self.session.is_solved)

    def test_blocked_and_unknown_moves(self) -> None:
        path = self.root / "corner.json"
        save_maze(GridMaze([[0, 1], [1, 0]], (0, 0), (1, 1)), path)
        self.session.load_maze(path)
        self.assertFalse(self.session.move_character("UP"))
        self.assertFalse(self.session.move_character("right"))
        self.assertFalse(self.session.move_character("DOWN-RIGHT"))
        self.assertEqual(self.session.character_position, Position(0, 0))
        with self.assertRaises(InvalidArgumentError):
            self.session.move_character("SIDEWAYS")
        with self.assertRaises(InvalidArgumentError):
            self.session.move_character("DOWN-RIGHT", diagonals=False)

    def test_diagonal_move_with_open_corner(self) -> None:
        path = self.root / "open.json"
        save_maze(GridMaze([[0, 0], [1, 0]], (0, 0), (1, 1)), path)
        self.session.load_maze(path)
        self.assertTrue(self.session.move_character("down_right"))
        self.assertTrue(self.session.is_solved)

    def test_save_and_load_reset_the_session(self) -> None:
        maze = self.session.generate_maze(6, 6, seed=8)
        self.session.solve_maze()
        self.session.move_character("DOWN")
        self.session.move_character("RIGHT")
        target = self.root / "saved.json"
        self.session.save_maze(target)

        other = MazeSession()
        loaded = other.load_maze(target)
        self.assertEqual(loaded, maze)
        self.assertEqual(other.character_position, maze.start)
        self.assertIsNone(other.solution)

        self.session.load_maze(target)
        self.assertIsNone(self.session.solution)
        self.assertEqual(self.session.character_position, maze.start)

    def test_unreachable_goal(self) -> None:
        path = self.root / "sealed.json"
        save_maze(GridMaze([[0, 1, 0], [1, 1, 0], [0, 0, 0]], (0, 0), (2, 2)), path)
        self.session.load_maze(path)
        self.assertFalse(self.session.solve_maze().found)
        with self.assertRaises(UnreachableGoalError):
            self.session.solve_maze(Algorithm.DFS, require_path=True)

    def test_injected_rng_drives_generation(self) -> None:
        first = MazeSession(rng=random.Random(30)).generate_maze(8, 9)
        second = MazeSession(rng=random.Random(30)).generate_maze(8, 9)
        self.assertEqual(first, second)


class SettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "mazesearch.json"

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_missing_file_gives_defaults(self) -> None:
        self.assertEqual(load_settings(self.path), DEFAULT_SETTINGS)

    def test_round_trip_merges_defaults(self) -> None:
        save_settings({"rows": 21, "diagonals": True}, self.path)
        settings = load_settings(self.path)
        self.assertEqual(settings["rows"], 21)
        self.assertTrue(settings["diagonals"])
        self.assertEqual(settings["cols"], DEFAULT_SETTINGS["cols"])

    def test_invalid_file_falls_back_to_defaults(self) -> None:
        self.path.write_text("[1, 2", encoding="utf-8")
        with self.assertLogs("mazesearch.settings", level="WARNING"):
            settings = load_settings(self.path)
        self.assertEqual(settings, DEFAULT_SETTINGS)


class SolverCliTests(unittest.TestCase):
    def test_prints_solution_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "maze.json"
            save_maze(GridMaze([[0, 0, 0], [1, 1, 0], [0, 0, 0]], (0, 0), (2, 0)), path)
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                solver_cli.main([str(path), "--algorithm", "bfs"])
        payload = json.loads(buffer.getvalue())
        self.assertTrue(payload["found"])
        self.assertEqual(payload["cost"], 6.0)
        self.assertEqual(payload["path"][0], [0, 0])
        self.assertEqual(payload["path"][-1], [2, 0])

    def test_corrupt_maze_exits_non_zero(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "maze.json"
            path.write_text(json.dumps({"rows": 2}), encoding="utf-8")
            with self.assertRaises(SystemExit) as caught:
                solver_cli.main([str(path)])
        self.assertEqual(caught.exception.code, 1)

    def test_undecodable_maze_exits_non_zero(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "maze.json"
            path.write_bytes(b'{"rows": 2, "cols": 2, "cells": "\xff\xfe"}')
            with self.assertRaises(SystemExit) as caught:
                solver_cli.main([str(path)])
        self.assertEqual(caught.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
