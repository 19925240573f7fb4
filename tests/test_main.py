import io
import unittest
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from calc import ExpressionEvaluator
from config.config import validate_config
from main import run_repl, build_parser, main


class TestRepl(unittest.TestCase):
    def test_loop_until_eof(self):
        stdin = io.StringIO("3 + 4 * 2\n(1 + 2\n")
        stdout = io.StringIO()
        count = run_repl(ExpressionEvaluator(), stdin, stdout, prompt="> ")
        self.assertEqual(count, 2)
        self.assertEqual(
            stdout.getvalue(),
            "> Result: 11\n\n> Error: Mismatched parentheses\n\n> "
        )

    def test_error_does_not_stop_loop(self):
        stdin = io.StringIO("abc\n1..2\n2 * 3\n")
        stdout = io.StringIO()
        run_repl(ExpressionEvaluator(), stdin, stdout, prompt="")
        lines = [line for line in stdout.getvalue().splitlines() if line]
        self.assertEqual(lines[0], "Error: No tokens found.")
        self.assertTrue(lines[1].startswith("Error: Invalid number entered"))
        self.assertEqual(lines[2], "Result: 6")


class TestCli(unittest.TestCase):
    def run_main(self, argv):
        args = build_parser().parse_args(argv)
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = main(args)
        return code, buf.getvalue()

    def test_single_expression(self):
        code, out = self.run_main(["--expression", "(3 + 4) * 2"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "Result: 14\n")

    def test_single_expression_error(self):
        code, out = self.run_main(["--expression", "1 + 2) * 3", "--strict_parentheses"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "Error: Mismatched parentheses\n")

    def test_batch_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "exprs.txt"
            path.write_text("1 + 1\n10 / 4\n", encoding="utf-8")
            code, out = self.run_main(["--batch_file", str(path)])
        self.assertEqual(code, 0)
        self.assertIn("1 + 1\tResult: 2", out)
        self.assertIn("10 / 4\tResult: 2.5", out)

    def test_batch_file_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = str(Path(tmp) / "nope.txt")
            with self.assertLogs('main', level='ERROR'):
                code, out = self.run_main(["--batch_file", missing])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_batch_csv_missing_column(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "exprs.csv"
            path.write_text("formula\n1 + 1\n", encoding="utf-8")
            with self.assertLogs('main', level='ERROR') as logs:
                code, _ = self.run_main(["--batch_file", str(path)])
        self.assertEqual(code, 1)
        self.assertIn("Column 'expression' not found", logs.output[0])

    def test_config_is_valid(self):
        self.assertTrue(validate_config())


if __name__ == "__main__":
    unittest.main()
