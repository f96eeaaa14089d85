from myhdl import *

from moore_mac.hdl.components.reg import accumulator_register


@block
def mac(clk, rst, in1, in2, out):
    """
    Multiply-accumulate unit as a Moore machine: a combinational transfer
    block feeding a single accumulator register. The output is the register
    itself, so each cycle reports the sum *before* that cycle's product is
    added. All arithmetic wraps to the width of out, like the hardware.

    Parameters:
    - clk: Clock signal
    - rst: Synchronous active-high reset (clears the accumulator); a ResetSignal
      or a plain bool signal, which the register adapts
    - in1, in2: Signed operands, one pair per cycle
    - out: Accumulator value, a signed modbv signal
    """
    if not isinstance(out.val, modbv):
        raise ValueError("Output must be a modbv signal so accumulation wraps")

    # Current state and next state of the accumulator
    acc = Signal(modbv(0, min=out.min, max=out.max))
    acc_next = Signal(modbv(0, min=out.min, max=out.max))

    @always_comb
    def transfer():
        acc_next.next = acc + in1 * in2

    state = accumulator_register(clk, rst, acc_next, acc)

    # Moore output: identity on the state
    @always_comb
    def output_logic():
        out.next = acc

    return instances()
