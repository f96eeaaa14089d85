import io
import os
import sys
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).parent.parent.parent

# Scripts are not part of the installed package
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))

import check_equivalence


class TestCheckEquivalenceCli(unittest.TestCase):
    """Command-line runs of the equivalence check."""

    def run_cli(self, *argv):
        out = io.StringIO()
        with mock.patch.dict(os.environ, {"MAC_SEED": "", "MAC_TESTS": ""}):
            with redirect_stdout(out):
                status = check_equivalence.main(list(argv))
        return status, out.getvalue()

    def test_passing_run(self):
        status, output = self.run_cli("--cycles", "20", "--tests", "5", "--seed", "1")
        self.assertEqual(status, 0)
        self.assertIn("[model] circuit == spec (20 cycles): OK: passed 5 tests", output)

    def test_repeated_cycle_counts(self):
        status, output = self.run_cli(
            "--cycles", "10", "--cycles", "30", "--tests", "3", "--seed", "2"
        )
        self.assertEqual(status, 0)
        self.assertIn("(10 cycles)", output)
        self.assertIn("(30 cycles)", output)

    def test_zero_tests_is_not_replaced_by_config(self):
        status, output = self.run_cli("--cycles", "10", "--tests", "0")
        self.assertEqual(status, 0)
        self.assertNotIn("[model]", output)

    def test_negative_tests_rejected(self):
        status, _ = self.run_cli("--tests", "-1")
        self.assertEqual(status, 2)

    def test_testbench(self):
        status, output = self.run_cli("--testbench", "--tests", "0")
        self.assertEqual(status, 0)
        self.assertIn("Test bench OK (4 cycles)", output)

    def test_config_file(self):
        config = PROJECT_ROOT / "configs" / "verification.yaml"
        status, output = self.run_cli(
            "--config", str(config), "--cycles", "15", "--tests", "2", "--seed", "3"
        )
        self.assertEqual(status, 0)
        self.assertIn("(15 cycles)", output)

    def test_missing_config(self):
        status, _ = self.run_cli("--config", str(PROJECT_ROOT / "configs" / "nope.yaml"))
        self.assertEqual(status, 2)


if __name__ == "__main__":
    unittest.main(verbosity=2)
