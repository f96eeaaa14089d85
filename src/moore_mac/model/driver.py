from typing import List, Sequence

from moore_mac.model.moore import mac_machine
from moore_mac.model.update import MacInput
from moore_mac.utils.int_defs import SIGNED9, SignedFormat


def simulate(
    xs: Sequence[int], ys: Sequence[int], fmt: SignedFormat = SIGNED9
) -> List[int]:
    """
    Drive the MAC machine with two input channels, one pair per cycle.

    The channels are zipped, so the shorter one decides how many cycles run.
    Every call starts from a fresh, zeroed accumulator.
    """
    machine = mac_machine(fmt)
    return machine.run(MacInput(x, y) for x, y in zip(xs, ys))
