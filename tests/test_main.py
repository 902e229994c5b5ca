"""
Unit tests for the command-line interface.
"""

import contextlib
import io
import json
import unittest

from main import build_parser, main, params_from_args


class TestParser(unittest.TestCase):
    """Test argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args(["--gpm", "100", "--diameter", "4"])
        params = params_from_args(args)
        self.assertEqual(params.gpm, 100.0)
        self.assertEqual(params.diameter, 4.0)
        self.assertEqual(params.length, 0.0)
        self.assertEqual(params.viscosity, 1.0)
        self.assertEqual(params.specific_gravity, 1.0)
        self.assertEqual(params.tee_branch, 0.0)

    def test_nominal_size_and_fittings(self):
        args = build_parser().parse_args([
            "--gpm", "100", "--nominal", '4"', "--tee-branch", "2", "--swing", "1",
        ])
        params = params_from_args(args)
        self.assertEqual(params.diameter, 4.026)
        self.assertEqual(params.tee_branch, 2.0)
        self.assertEqual(params.swing, 1.0)

    def test_diameter_and_nominal_are_exclusive(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                build_parser().parse_args(["--gpm", "1", "--diameter", "4", "--nominal", '4"'])


class TestMain(unittest.TestCase):
    """Test running the CLI end to end."""

    def run_main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_json_output(self):
        code, out, _ = self.run_main([
            "--gpm", "100", "--diameter", "4", "--length", "100", "--json",
        ])
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data['friction_factor'], 0.0192)
        self.assertEqual(data['head_loss'], 0.59)
        self.assertEqual(data['pressure_drop'], 0.26)
        self.assertNotIn('darcy_chart', data)

    def test_json_with_chart(self):
        code, out, _ = self.run_main([
            "--gpm", "100", "--diameter", "4", "--length", "100", "--json", "--chart",
        ])
        self.assertEqual(code, 0)
        self.assertIn('0.0192', json.loads(out)['darcy_chart'])

    def test_table_output(self):
        code, out, _ = self.run_main([
            "--gpm", "100", "--diameter", "4", "--length", "100", "--nineties", "4",
        ])
        self.assertEqual(code, 0)
        self.assertIn("HEAD LOSS RESULTS", out)
        self.assertIn("90° Elbow", out)
        self.assertNotIn("Globe Valve", out)

    def test_invalid_inputs(self):
        code, out, err = self.run_main(["--gpm", "0", "--diameter", "4"])
        self.assertEqual(code, 1)
        self.assertIn("Flow rate", err)
        self.assertEqual(out, "")

    def test_missing_required(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_main(["--length", "100"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
