"""
Equivalence property between the MAC circuit and its reference model.

Random input traces are run through both; on the first mismatch the trace
is shrunk so the reported counterexample diverges as early as possible.
Accumulator errors compound cycle after cycle, so only the first divergent
cycle says anything useful about the fault.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from moore_mac.model.driver import simulate
from moore_mac.model.reference import reference_model
from moore_mac.utils.int_defs import SIGNED9, SignedFormat
from moore_mac.verify.generators import MAX_SIZE, input_trace
from moore_mac.verify.shrink import DEFAULT_SHRINK_LIMIT, shrink_pair

logger = logging.getLogger(__name__)

Model = Callable[[Sequence[int], Sequence[int], SignedFormat], List[int]]


@dataclass
class Counterexample:
    """Smallest failing trace found, with both output streams."""

    xs: List[int]
    ys: List[int]
    expected: List[int]
    actual: List[int]
    divergence: Optional[int]
    shrinks: int = 0
    test_number: int = 0

    def describe(self) -> str:
        lines = [
            f"  xs = {self.xs}",
            f"  ys = {self.ys}",
            f"  expected = {self.expected}",
            f"  actual   = {self.actual}",
        ]
        if self.divergence is not None:
            lines.append(f"  first divergence at cycle {self.divergence}")
        return "\n".join(lines)


@dataclass
class PropertyResult:
    ok: bool
    cycles: int
    tests_run: int
    seed: int
    counterexample: Optional[Counterexample] = None

    def summary(self) -> str:
        if self.ok:
            return f"OK: passed {self.tests_run} tests (cycles={self.cycles}, seed={self.seed})"
        cex = self.counterexample
        return (
            f"FAILED after {self.tests_run} tests and {cex.shrinks} shrinks "
            f"(cycles={self.cycles}, seed={self.seed}):\n{cex.describe()}"
        )


class PropertyFailure(AssertionError):
    """The circuit and the reference model disagree."""

    def __init__(self, result: PropertyResult):
        super().__init__(result.summary())
        self.result = result

    @property
    def counterexample(self) -> Counterexample:
        return self.result.counterexample


def trim(values: Sequence[int], xs: Sequence[int], ys: Sequence[int]) -> List[int]:
    return list(values[: min(len(xs), len(ys))])


def first_divergence(expected: Sequence[int], actual: Sequence[int]) -> Optional[int]:
    """Index of the first cycle where the streams differ, or None if they agree."""
    for i, (e, a) in enumerate(zip(expected, actual)):
        if e != a:
            return i
    if len(expected) != len(actual):
        return min(len(expected), len(actual))
    return None


def compare(
    xs: Sequence[int],
    ys: Sequence[int],
    fmt: SignedFormat = SIGNED9,
    model: Model = reference_model,
    circuit: Model = simulate,
):
    """Run both implementations on one trace; returns (expected, actual, divergence)."""
    expected = trim(model(xs, ys, fmt), xs, ys)
    actual = trim(circuit(xs, ys, fmt), xs, ys)
    return expected, actual, first_divergence(expected, actual)


def _new_seed() -> int:
    return int(np.random.SeedSequence().entropy)


def check_property(
    cycles: int,
    tests: int = 100,
    seed: Optional[int] = None,
    fmt: SignedFormat = SIGNED9,
    model: Model = reference_model,
    circuit: Model = simulate,
    shrink_limit: int = DEFAULT_SHRINK_LIMIT,
) -> PropertyResult:
    """
    Check circuit against model on random traces of up to cycles inputs.

    Both channels are drawn independently, so their lengths differ; the
    comparison covers the cycles both channels supply. Deterministic for a
    given seed. Returns a PropertyResult and never raises on a mismatch.
    """
    if cycles < 0:
        raise ValueError(f"cycles must be non-negative, got {cycles}")
    if tests < 1:
        raise ValueError(f"tests must be positive, got {tests}")

    if seed is None:
        seed = _new_seed()
    rng = np.random.default_rng(seed)
    gen_x = input_trace(fmt, cycles)
    gen_y = input_trace(fmt, cycles)

    def fails(xs, ys):
        return compare(xs, ys, fmt, model, circuit)[2] is not None

    logger.info("Checking equivalence: cycles=%d tests=%d seed=%d", cycles, tests, seed)

    for test_number in range(1, tests + 1):
        size = (test_number - 1) % (MAX_SIZE + 1)
        xs = gen_x.draw(rng, size)
        ys = gen_y.draw(rng, size)

        if not fails(xs, ys):
            continue

        logger.warning(
            "Mismatch on test %d (len(xs)=%d, len(ys)=%d), shrinking",
            test_number,
            len(xs),
            len(ys),
        )
        shrunk = shrink_pair(gen_x, gen_y, xs, ys, fails, shrink_limit)
        expected, actual, divergence = compare(shrunk.xs, shrunk.ys, fmt, model, circuit)
        cex = Counterexample(
            xs=shrunk.xs,
            ys=shrunk.ys,
            expected=expected,
            actual=actual,
            divergence=divergence,
            shrinks=shrunk.shrinks,
            test_number=test_number,
        )
        return PropertyResult(False, cycles, test_number, seed, cex)

    logger.info("Passed %d tests (cycles=%d)", tests, cycles)
    return PropertyResult(True, cycles, tests, seed)


def assert_equivalent(cycles: int, **kwargs) -> PropertyResult:
    """check_property, raising PropertyFailure with the shrunk counterexample."""
    result = check_property(cycles, **kwargs)
    if not result.ok:
        raise PropertyFailure(result)
    return result
