import contextlib
import io
import json
import unittest

from maze_puzzle.generator import MazeGenerator


def run_cli(*argv: str):
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        status = MazeGenerator.main(list(argv))
    return status, buffer.getvalue().splitlines()


class CommandLineTests(unittest.TestCase):
    def test_text_output_prints_maze_then_solution(self) -> None:
        status, lines = run_cli("--width", "4", "--height", "3", "--seed", "1")
        self.assertEqual(status, 0)
        self.assertEqual([len(line) for line in lines[:3]], [8, 8, 8])
        self.assertEqual(lines[3], "")
        self.assertEqual(lines[4], "Solution found:")
        self.assertEqual(lines[5], "Step 1: (0,0)")
        self.assertEqual(lines[-1], f"Step {len(lines) - 5}: (3,2)")

    def test_same_seed_prints_same_maze(self) -> None:
        _, first = run_cli("--seed", "5", "--no-solve")
        _, second = run_cli("--seed", "5", "--no-solve")
        self.assertEqual(first, second)
        self.assertEqual(len(first), MazeGenerator.DEFAULT_HEIGHT)

    def test_json_output(self) -> None:
        status, lines = run_cli("--width", "5", "--height", "4", "--seed", "3", "--format", "json")
        self.assertEqual(status, 0)
        payload = json.loads("\n".join(lines))
        self.assertEqual(payload["grid_size"], [5, 4])
        self.assertEqual(payload["seed"], 3)
        self.assertEqual(len(payload["rows"]), 4)
        self.assertEqual(payload["solution"][0], [0, 0])
        self.assertEqual(payload["solution"][-1], [4, 3])
        self.assertEqual(payload["passages"], 19)
        self.assertEqual(payload["cost"], len(payload["solution"]) - 1)
        self.assertTrue(payload["solved"])

    def test_json_output_without_search_is_marked_unsolved(self) -> None:
        status, lines = run_cli("--width", "3", "--height", "3", "--seed", "3", "--format", "json", "--no-solve")
        self.assertEqual(status, 0)
        payload = json.loads("\n".join(lines))
        self.assertFalse(payload["solved"])
        self.assertIsNone(payload["solution"])
        self.assertNotIn("cost", payload)
        self.assertEqual(payload["passages"], 8)

    def test_custom_goal(self) -> None:
        status, lines = run_cli("--width", "6", "--height", "6", "--seed", "2", "--goal", "3", "2")
        self.assertEqual(status, 0)
        self.assertTrue(lines[-1].endswith(": (3,2)"))

    def test_invalid_arguments_fail_with_status_two(self) -> None:
        self.assertEqual(run_cli("--width", "0")[0], 2)
        self.assertEqual(run_cli("--width", "3", "--height", "3", "--goal", "3", "3")[0], 2)
        self.assertEqual(run_cli("--start", "-1", "0")[0], 2)


if __name__ == "__main__":
    unittest.main()
