from myhdl import *


@block
def stimuli_generator(clk, rst, values, sig):
    """
    Plays a fixed sequence onto sig, one value per clock cycle. Once the
    sequence is exhausted sig is held at zero.
    """
    rom = tuple(int(v) for v in values)
    depth = len(rom)
    idx = Signal(intbv(0, min=0, max=depth + 1))

    @always_seq(clk.posedge, reset=rst)
    def advance():
        if idx < depth:
            idx.next = idx + 1

    @always_comb
    def drive():
        if idx < depth:
            sig.next = rom[int(idx)]
        else:
            sig.next = 0

    return advance, drive


@block
def output_verifier(clk, rst, expected, sig, fail):
    """
    Compares sig against an expected sequence, one value per clock cycle.
    fail is asserted during exactly the cycles where the two disagree and
    stays low once the expected sequence runs out.
    """
    rom = tuple(int(v) for v in expected)
    depth = len(rom)
    idx = Signal(intbv(0, min=0, max=depth + 1))

    @always_seq(clk.posedge, reset=rst)
    def advance():
        if idx < depth:
            idx.next = idx + 1

    @always_comb
    def compare():
        if idx < depth:
            fail.next = sig != rom[int(idx)]
        else:
            fail.next = False

    return advance, compare
