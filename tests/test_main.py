import io
import math
import unittest
from contextlib import redirect_stdout
import main

def run_main(*args):
    out = io.StringIO()
    code = 0
    with redirect_stdout(out):
        try:
            main.main(["main.py", *args])
        except SystemExit as e:
            code = e.code
    return code, out.getvalue()

class TestParseRadius(unittest.TestCase):
    def test_formats(self):
        self.assertEqual(main.parse_radius("1000"), 1000)
        self.assertEqual(main.parse_radius("1_000_000"), 1_000_000)
        self.assertEqual(main.parse_radius("1e9"), 10**9)
        self.assertEqual(main.parse_radius("3E4"), 30_000)
        self.assertEqual(main.parse_radius("10^10"), 10**10)
        self.assertEqual(main.parse_radius(" 42 "), 42)

    def test_invalid(self):
        for text in ["", "abc", "1.5", "1e", "^3", "1e-3", "10^-2", "2E-1"]:
            with self.assertRaises(ValueError):
                main.parse_radius(text)

class TestMain(unittest.TestCase):
    def test_reports_estimate(self):
        code, output = run_main("1000", "3")
        self.assertEqual(code, 0)
        self.assertIn("Radius: 1000", output)
        self.assertIn("Workers: 3", output)
        self.assertIn(f"Actual value of pi: {math.pi}", output)
        self.assertIn("Lattice counting took", output)

    def test_small_radius_counts(self):
        code, output = run_main("2", "2")
        self.assertEqual(code, 0)
        self.assertIn("Quarter-disc lattice points: 6", output)
        self.assertIn("Disc lattice points: 13", output)
        self.assertIn("Approximated pi: 6.0", output)

    def test_usage(self):
        code, output = run_main()
        self.assertEqual(code, 1)
        self.assertIn("Usage:", output)

    def test_bad_arguments(self):
        code, output = run_main("abc", "2")
        self.assertEqual(code, 1)
        self.assertIn("Invalid arguments", output)
        code, output = run_main("1e-3", "2")
        self.assertEqual(code, 1)
        self.assertIn("Invalid arguments", output)

    def test_invalid_configuration(self):
        code, output = run_main("100", "0")
        self.assertEqual(code, 1)
        self.assertIn("Invalid configuration", output)
        code, output = run_main("0")
        self.assertEqual(code, 1)
        self.assertIn("radius of 0", output)

if __name__ == '__main__':
    unittest.main()
