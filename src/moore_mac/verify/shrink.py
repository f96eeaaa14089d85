import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Tuple

from moore_mac.verify.generators import ListOf, halves, towards

logger = logging.getLogger(__name__)

DEFAULT_SHRINK_LIMIT = 1000


@dataclass
class ShrinkResult:
    xs: List[int]
    ys: List[int]
    shrinks: int


def joint_candidates(xs: List[int], ys: List[int]) -> Iterator[Tuple[List[int], List[int]]]:
    """
    Remove the same cycles from both channels at once, keeping the inputs
    aligned. Shorter common prefixes come first, then interior chunks.
    """
    n = min(len(xs), len(ys))
    for keep in towards(0, n):
        yield xs[:keep], ys[:keep]

    for chunk in halves(n):
        for start in range(0, n - chunk, chunk):
            yield (
                xs[:start] + xs[start + chunk :],
                ys[:start] + ys[start + chunk :],
            )


def pair_candidates(
    gen_x: ListOf, gen_y: ListOf, xs: List[int], ys: List[int]
) -> Iterator[Tuple[List[int], List[int]]]:
    """Every shrink candidate of (xs, ys); shorter traces before smaller values."""
    yield from joint_candidates(xs, ys)
    for smaller in gen_x.shrink_length(xs):
        yield smaller, ys
    for smaller in gen_y.shrink_length(ys):
        yield xs, smaller
    for smaller in gen_x.shrink_elements(xs):
        yield smaller, ys
    for smaller in gen_y.shrink_elements(ys):
        yield xs, smaller


def shrink_pair(
    gen_x: ListOf,
    gen_y: ListOf,
    xs: List[int],
    ys: List[int],
    fails: Callable[[List[int], List[int]], bool],
    limit: int = DEFAULT_SHRINK_LIMIT,
) -> ShrinkResult:
    """
    Greedily minimise a failing (xs, ys).

    The first candidate that still fails replaces the current case and the
    search restarts from it. Stops when no candidate fails or after limit
    accepted shrinks.
    """
    shrinks = 0
    while shrinks < limit:
        for cand_xs, cand_ys in pair_candidates(gen_x, gen_y, xs, ys):
            if fails(cand_xs, cand_ys):
                xs, ys = cand_xs, cand_ys
                shrinks += 1
                logger.debug(
                    "Shrink %d: len(xs)=%d len(ys)=%d", shrinks, len(xs), len(ys)
                )
                break
        else:
            break

    return ShrinkResult(xs, ys, shrinks)
