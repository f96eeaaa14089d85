import unittest
from myhdl import *
import sys
import os
import tempfile

# Import your module and utilities
sys.path.append(os.path.join(os.path.dirname(__file__), "../../"))
from moore_mac.hdl.components.mac import mac
from moore_mac.hdl.sim import convert_mac
from moore_mac.utils.int_defs import SIGNED9
from tests.utils.hdl_test_utils import test_runner


class TestMacUnit(unittest.TestCase):
    """Test case for the Moore-style MAC circuit."""

    def setUp(self):
        """Setup common signals for all tests."""
        self.clk = Signal(bool(0))
        self.reset = ResetSignal(0, active=1, isasync=False)
        self.in1 = SIGNED9.signal()
        self.in2 = SIGNED9.signal()
        self.out = SIGNED9.signal()

    def create_mac(self):
        """Helper to create MAC instance with current signals."""
        return mac(self.clk, self.reset, self.in1, self.in2, self.out)

    def settle(self):
        """Let combinational logic settle without waiting for an edge."""
        yield delay(1)

    def next_cycle(self):
        """Wait for the rising edge, then for the outputs to settle."""
        yield self.clk.posedge
        yield delay(1)

    def testOutputLagsOneCycle(self):
        """The output reports the accumulator before this cycle's product."""

        @instance
        def test_sequence():
            self.in1.next = 2
            self.in2.next = 3
            yield from self.settle()
            assert self.out == 0, f"Expected 0 before the first edge, got {self.out}"

            yield from self.next_cycle()
            assert self.out == 6, f"Expected 6, got {self.out}"

            self.in1.next = 4
            self.in2.next = 5
            yield from self.settle()
            # Combinational input change does not reach the output
            assert self.out == 6, f"Expected 6, got {self.out}"

            yield from self.next_cycle()
            assert self.out == 26, f"Expected 26, got {self.out}"
            raise StopSimulation

        test_runner(self.create_mac, lambda: test_sequence, clk=self.clk, period=10)

    def testWrapsOnOverflow(self):
        """Accumulation wraps like a 9-bit register instead of saturating."""
        expected = [0]

        @instance
        def test_sequence():
            self.in1.next = SIGNED9.max_value
            self.in2.next = SIGNED9.max_value
            for _ in range(4):
                yield from self.next_cycle()
                expected.append(SIGNED9.wrap(expected[-1] + SIGNED9.max_value**2))
                assert self.out == expected[-1], f"Expected {expected[-1]}, got {self.out}"

            self.in1.next = SIGNED9.min_value
            self.in2.next = SIGNED9.max_value
            yield from self.next_cycle()
            value = SIGNED9.wrap(expected[-1] + SIGNED9.min_value * SIGNED9.max_value)
            assert self.out == value, f"Expected {value}, got {self.out}"
            raise StopSimulation

        test_runner(self.create_mac, lambda: test_sequence, clk=self.clk, period=10)

    def testResetFunctionality(self):
        """Synchronous reset clears the accumulator."""

        @instance
        def test_sequence():
            self.in1.next = 2
            self.in2.next = 3
            for _ in range(20):
                yield from self.next_cycle()

            self.assertEqual(int(self.out), SIGNED9.wrap(6 * 20))

            self.reset.next = 1
            yield from self.next_cycle()
            self.assertEqual(int(self.out), 0)

            self.reset.next = 0
            yield from self.next_cycle()
            self.assertEqual(int(self.out), 6)
            raise StopSimulation

        test_runner(self.create_mac, lambda: test_sequence, clk=self.clk, period=10)

    def testConvertToVerilog(self):
        """The circuit converts with the original top-level port names."""
        with tempfile.TemporaryDirectory() as path:
            generated = convert_mac(path)
            with open(generated) as f:
                verilog = f.read()

        self.assertIn("module mac", verilog)
        for port in ("clk", "rst", "in1", "in2", "out"):
            self.assertIn(port, verilog)

    def testPlainBoolReset(self):
        """A plain bool reset is adapted by the accumulator register."""
        reset = Signal(bool(0))

        def create_mac():
            return mac(self.clk, reset, self.in1, self.in2, self.out)

        @instance
        def test_sequence():
            self.in1.next = 3
            self.in2.next = 4
            yield from self.next_cycle()
            yield from self.next_cycle()
            self.assertEqual(int(self.out), 24)

            reset.next = 1
            yield from self.next_cycle()
            self.assertEqual(int(self.out), 0)

            reset.next = 0
            yield from self.next_cycle()
            self.assertEqual(int(self.out), 12)
            raise StopSimulation

        test_runner(create_mac, lambda: test_sequence, clk=self.clk, period=10)

    def testRejectsNonWrappingOutput(self):
        out = Signal(intbv(0, min=-256, max=256))
        with self.assertRaises(ValueError):
            mac(self.clk, self.reset, self.in1, self.in2, out)


if __name__ == "__main__":
    unittest.main(verbosity=2)
