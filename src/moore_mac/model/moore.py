from functools import partial
from operator import attrgetter
from typing import Callable, Generic, Iterable, List, TypeVar

from moore_mac.model.update import Accumulator, mac_update
from moore_mac.utils.int_defs import SIGNED9, SignedFormat

S = TypeVar("S")
I = TypeVar("I")
O = TypeVar("O")


class MooreMachine(Generic[S, I, O]):
    """
    A Moore machine built from a transfer function and an output function.

    The output of a cycle is computed from the state *before* that cycle's
    transition, so outputs lag inputs by one cycle.
    """

    def __init__(
        self,
        transfer: Callable[[S, I], S],
        output: Callable[[S], O],
        initial: S,
    ):
        self._transfer = transfer
        self._output = output
        self._initial = initial
        self._state = initial

    @property
    def state(self) -> S:
        return self._state

    def reset(self):
        self._state = self._initial

    def step(self, inp: I) -> O:
        """Clock the machine once and return this cycle's output."""
        out = self._output(self._state)
        self._state = self._transfer(self._state, inp)
        return out

    def run(self, inputs: Iterable[I]) -> List[O]:
        """Fold over a whole input sequence from the initial state.

        The live state used by ``step`` is left untouched.
        """
        state = self._initial
        outputs = []
        for inp in inputs:
            outputs.append(self._output(state))
            state = self._transfer(state, inp)
        return outputs


def moore(transfer, output, initial):
    """Lift a transfer function into a function over whole input sequences."""
    return MooreMachine(transfer, output, initial).run


def mac_machine(fmt: SignedFormat = SIGNED9) -> MooreMachine:
    return MooreMachine(partial(mac_update, fmt=fmt), attrgetter("acc"), Accumulator(0))
