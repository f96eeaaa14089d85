"""
Combinational MAC transfer: one cycle of computation, with no state of its own.
"""

from typing import NamedTuple

from moore_mac.utils.int_defs import SIGNED9, SignedFormat


class MacInput(NamedTuple):
    """Operands presented to the MAC in one cycle."""

    x: int
    y: int


class Accumulator(NamedTuple):
    """The accumulator register, the only state carried between cycles."""

    acc: int = 0


def update(acc: int, x: int, y: int, fmt: SignedFormat = SIGNED9) -> int:
    """Return ``acc + x * y`` wrapped to the width of ``fmt``."""
    return fmt.wrap(acc + x * y)


def mac_update(
    state: Accumulator, inp: MacInput, fmt: SignedFormat = SIGNED9
) -> Accumulator:
    """
    Moore transfer function for the MAC.

    Parameters:
    - state: current accumulator
    - inp: operands for this cycle
    - fmt: numeric format the register wraps to
    """
    return Accumulator(update(state.acc, inp.x, inp.y, fmt))
