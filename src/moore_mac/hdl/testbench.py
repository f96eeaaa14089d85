from myhdl import *

from moore_mac.hdl.components.mac import mac
from moore_mac.hdl.components.stimuli import output_verifier, stimuli_generator
from moore_mac.utils.int_defs import SIGNED9

# Fixed smoke-test vectors: outputs are the sums before each product lands
IN1_VECTOR = (1, 2, 3, 4)
IN2_VECTOR = (1, 2, 3, 4)
OUT_VECTOR = (0, 1, 5, 14)


@block
def mac_testbench(
    clk,
    rst,
    fail,
    in1_values=IN1_VECTOR,
    in2_values=IN2_VECTOR,
    expected=OUT_VECTOR,
    fmt=SIGNED9,
):
    """Synthesizable self-checking test bench; fail goes high on a mismatched cycle."""
    in1 = fmt.signal()
    in2 = fmt.signal()
    out = fmt.signal()

    gen_in1 = stimuli_generator(clk, rst, in1_values, in1)
    gen_in2 = stimuli_generator(clk, rst, in2_values, in2)
    dut = mac(clk, rst, in1, in2, out)
    check = output_verifier(clk, rst, expected, out, fail)

    return instances()
