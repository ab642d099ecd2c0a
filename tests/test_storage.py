import json
import tempfile
import unittest
from pathlib import Path

from mazesearch import CorruptMazeError, GridMaze, generate, load_maze, save_maze
from mazesearch.maze.storage import maze_from_dict, maze_to_dict


class MazeStorageTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        self.maze = generate(7, 10, seed=21)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def _write(self, payload) -> Path:
        path = self.root / "maze.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def test_round_trip_is_exact(self) -> None:
        path = save_maze(self.maze, self.root / "nested" / "maze.json")
        loaded = load_maze(path)
        self.assertEqual(loaded, self.maze)
        self.assertEqual(loaded.tobytes(), self.maze.tobytes())
        self.assertEqual(loaded.start, self.maze.start)
        self.assertEqual(loaded.goal, self.maze.goal)

    def test_stored_format(self) -> None:
        payload = maze_to_dict(self.maze)
        self.assertEqual(payload["rows"], 7)
        self.assertEqual(payload["cols"], 10)
        self.assertEqual(payload["start"], [0, 0])
        self.assertEqual(payload["goal"], [6, 9])
        self.assertEqual(len(payload["cells"]), 7)
        self.assertTrue(all(len(row) == 10 for row in payload["cells"]))
        self.assertEqual(maze_from_dict(json.loads(json.dumps(payload))), self.maze)

    def test_corrupt_payloads_are_rejected(self) -> None:
        good = maze_to_dict(GridMaze([[0, 0], [1, 0]], (0, 0), (1, 1)))
        cases = {
            "missing key": {key: value for key, value in good.items() if key != "goal"},
            "row count mismatch": dict(good, rows=3),
            "column count mismatch": dict(good, cols=3),
            "ragged row": dict(good, cells=[[0, 0], [1]]),
            "bad cell value": dict(good, cells=[[0, 0], [7, 0]]),
            "start out of bounds": dict(good, start=[2, 0]),
            "goal on wall": dict(good, goal=[1, 0]),
            "goal not a pair": dict(good, goal=[1]),
            "rows not an integer": dict(good, rows="2"),
            "not an object": [good],
        }
        for label, payload in cases.items():
            with self.subTest(label=label):
                with self.assertRaises(CorruptMazeError):
                    load_maze(self._write(payload))

    def test_invalid_json_is_rejected(self) -> None:
        path = self.root / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(CorruptMazeError):
            load_maze(path)

    def test_undecodable_bytes_are_rejected(self) -> None:
        path = self.root / "binary.json"
        path.write_bytes(b'{"rows": 2, "cols": 2, "cells": "\xff\xfe"}')
        with self.assertRaises(CorruptMazeError):
            load_maze(path)


if __name__ == "__main__":
    unittest.main()
