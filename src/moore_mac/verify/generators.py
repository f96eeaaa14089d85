"""
Random data generators with shrink candidates.

Generators draw from a seeded ``numpy.random.Generator`` and a *size* in
``[0, MAX_SIZE]`` that grows as a property run progresses, so early tests
are small and later ones approach the configured bounds.
"""

from typing import Iterator, List

import numpy as np

from moore_mac.utils.int_defs import SignedFormat

MAX_SIZE = 99


def _quot(n: int, d: int) -> int:
    # integer division truncating towards zero
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


def halves(n: int) -> List[int]:
    """n, n/2, n/4, ... down to (but excluding) zero."""
    out = []
    while n != 0:
        out.append(n)
        n = _quot(n, 2)
    return out


def towards(destination: int, value: int) -> List[int]:
    """
    Shrink candidates moving value towards destination, closest to the
    destination first: towards(0, 100) == [0, 50, 75, 88, 94, 97, 99].
    """
    if destination == value:
        return []
    out = []
    for step in halves(value - destination):
        candidate = value - step
        if candidate not in out:
            out.append(candidate)
    return out


class Integral:
    """Uniform integers in [lo, hi] that shrink towards origin."""

    def __init__(self, lo: int, hi: int, origin: int = 0):
        if lo > hi:
            raise ValueError(f"Empty range [{lo}, {hi}]")
        if not lo <= origin <= hi:
            raise ValueError(f"Origin {origin} outside [{lo}, {hi}]")
        self.lo = lo
        self.hi = hi
        self.origin = origin

    def draw(self, rng: np.random.Generator, size: int) -> int:
        return int(rng.integers(self.lo, self.hi, endpoint=True))

    def shrink(self, value: int) -> List[int]:
        return towards(self.origin, value)


class ListOf:
    """Lists of elements whose length bound scales linearly with size."""

    def __init__(self, element: Integral, max_length: int, min_length: int = 0):
        if min_length < 0 or max_length < min_length:
            raise ValueError(f"Invalid length range [{min_length}, {max_length}]")
        self.element = element
        self.min_length = min_length
        self.max_length = max_length

    def length_bound(self, size: int) -> int:
        size = max(0, min(size, MAX_SIZE))
        return self.min_length + (self.max_length - self.min_length) * size // MAX_SIZE

    def draw(self, rng: np.random.Generator, size: int) -> List[int]:
        length = int(rng.integers(self.min_length, self.length_bound(size), endpoint=True))
        return [self.element.draw(rng, size) for _ in range(length)]

    def shrink_length(self, xs: List[int]) -> Iterator[List[int]]:
        """Shorter prefixes first, then removal of interior chunks."""
        n = len(xs)
        for keep in towards(self.min_length, n):
            yield xs[:keep]

        for chunk in halves(n):
            if n - chunk < self.min_length:
                continue
            # removing the tail chunk is a prefix, already offered above
            for start in range(0, n - chunk, chunk):
                yield xs[:start] + xs[start + chunk :]

    def shrink_elements(self, xs: List[int]) -> Iterator[List[int]]:
        for i, value in enumerate(xs):
            for smaller in self.element.shrink(value):
                yield xs[:i] + [smaller] + xs[i + 1 :]

    def shrink(self, xs: List[int]) -> Iterator[List[int]]:
        yield from self.shrink_length(xs)
        yield from self.shrink_elements(xs)


def signed_values(fmt: SignedFormat) -> Integral:
    """Any value of the format, shrinking towards zero."""
    return Integral(fmt.min_value, fmt.max_value, origin=0)


def input_trace(fmt: SignedFormat, cycles: int) -> ListOf:
    """One input channel: up to cycles values of the format."""
    return ListOf(signed_values(fmt), max_length=cycles)
