import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from calc import EvaluationResult, ExpressionEvaluator
from utils.formatting import format_number, format_result


class TestFormatting(unittest.TestCase):
    def test_format_number(self):
        self.assertEqual(format_number(11.0), "11")
        self.assertEqual(format_number(-3.0), "-3")
        self.assertEqual(format_number(2.5), "2.5")
        self.assertEqual(format_number(0.1 + 0.2), "0.30000000000000004")
        self.assertEqual(format_number(math.inf), "inf")
        self.assertEqual(format_number(-math.inf), "-inf")
        self.assertEqual(format_number(math.nan), "NaN")

    def test_format_number_negative_zero(self):
        self.assertEqual(format_number(-0.0), "-0")
        self.assertEqual(format_number(0.0), "0")
        result = ExpressionEvaluator().calculate("0 * (0 - 1)")
        self.assertEqual(format_result(result), "Result: -0")

    def test_format_number_without_exponent(self):
        self.assertEqual(format_number(1e-7), "0.0000001")
        self.assertEqual(format_number(1.5e-10), "0.00000000015")
        self.assertEqual(format_number(1e20), "100000000000000000000")
        self.assertEqual(format_number(-2.5e16), "-25000000000000000")

    def test_format_result(self):
        self.assertEqual(format_result(EvaluationResult("1+1", value=2.0)), "Result: 2")
        failed = EvaluationResult("", error="EmptyInput", message="No tokens found.")
        self.assertEqual(format_result(failed), "Error: No tokens found.")


if __name__ == "__main__":
    unittest.main()
