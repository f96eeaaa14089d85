"""
Cycle-based simulation helpers for the MyHDL circuits.

Each run builds a fresh design, clocks it for a fixed number of cycles and
samples a probe signal once per cycle, just before the rising edge that ends
the cycle.
"""

import logging
import os

from myhdl import *

from moore_mac.hdl.components.mac import mac
from moore_mac.hdl.components.stimuli import stimuli_generator
from moore_mac.hdl.testbench import IN1_VECTOR, IN2_VECTOR, OUT_VECTOR, mac_testbench
from moore_mac.utils.int_defs import SIGNED9

logger = logging.getLogger(__name__)


@block
def clock_gen(clk, period=10):
    """
    Clock generator for MyHDL simulations.

    Args:
        clk: The clock signal to toggle.
        period: The period of the clock in time units (default is 10).
    """

    @always(delay(period // 2))
    def _clk_gen():
        clk.next = not clk

    return _clk_gen


@block
def cycle_sampler(clk, probe, samples, cycles):
    """Append int(probe) to samples once per cycle, then stop the simulation."""

    @instance
    def sampler():
        # Let the combinational logic settle before the first sample
        yield delay(1)
        for _ in range(cycles):
            samples.append(int(probe))
            yield clk.posedge
            yield delay(1)
        raise StopSimulation()

    return sampler


@block
def rtl_bench(xs, ys, samples, fmt=SIGNED9, period=10):
    """MAC circuit fed from two stimulus generators, with its output sampled."""
    cycles = min(len(xs), len(ys))

    clk = Signal(bool(0))
    rst = ResetSignal(0, active=1, isasync=False)
    in1 = fmt.signal()
    in2 = fmt.signal()
    out = fmt.signal()

    gen_in1 = stimuli_generator(clk, rst, xs[:cycles], in1)
    gen_in2 = stimuli_generator(clk, rst, ys[:cycles], in2)
    dut = mac(clk, rst, in1, in2, out)
    clkgen = clock_gen(clk, period)
    probe = cycle_sampler(clk, out, samples, cycles)

    return gen_in1, gen_in2, dut, clkgen, probe


@block
def testbench_bench(samples, cycles, in1_values, in2_values, expected, fmt, period=10):
    """Self-checking test bench with its failure flag sampled."""
    clk = Signal(bool(0))
    rst = ResetSignal(0, active=1, isasync=False)
    fail = Signal(bool(0))

    tb = mac_testbench(clk, rst, fail, in1_values, in2_values, expected, fmt)
    clkgen = clock_gen(clk, period)
    probe = cycle_sampler(clk, fail, samples, cycles)

    return tb, clkgen, probe


def _run(bench):
    try:
        bench.run_sim(quiet=1)
    finally:
        bench.quit_sim()


def simulate_rtl(xs, ys, fmt=SIGNED9):
    """
    Drive the MyHDL MAC circuit with two input channels and return one
    output per cycle. Trims to the shorter channel like the pure driver.
    """
    samples = []
    cycles = min(len(xs), len(ys))
    if cycles == 0:
        return samples

    _run(rtl_bench(list(xs), list(ys), samples, fmt))
    logger.debug("Simulated %d cycles of the MAC circuit", cycles)
    return samples


def sample_testbench(
    cycles=4,
    in1_values=IN1_VECTOR,
    in2_values=IN2_VECTOR,
    expected=OUT_VECTOR,
    fmt=SIGNED9,
):
    """Run the self-checking test bench and return its failure flag per cycle."""
    samples = []
    if cycles <= 0:
        return []

    _run(testbench_bench(samples, cycles, in1_values, in2_values, expected, fmt))
    return [bool(v) for v in samples]


def convert_mac(path="gen/verilog", fmt=SIGNED9, hdl="Verilog"):
    """Convert the MAC to HDL with the top-level ports clk, rst, in1, in2, out."""
    clk = Signal(bool(0))
    rst = ResetSignal(0, active=1, isasync=False)
    in1 = fmt.signal()
    in2 = fmt.signal()
    out = fmt.signal()

    os.makedirs(path, exist_ok=True)
    dut = mac(clk, rst, in1, in2, out)
    dut.convert(hdl=hdl, path=path, name="mac")

    suffix = ".v" if hdl == "Verilog" else ".vhd"
    generated = os.path.join(path, "mac" + suffix)
    logger.info("Generated %s", generated)
    return generated
