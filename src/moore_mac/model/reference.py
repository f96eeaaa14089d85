"""
Reference model of the MAC: running sums of pairwise products.

Written independently of the transfer function so the two can be checked
against each other. Sums are taken over unbounded integers and wrapped once
at the end, which agrees with per-cycle wrapping since wrapping is modular.
"""

from itertools import accumulate
from typing import List, Sequence

from moore_mac.utils.int_defs import SIGNED9, SignedFormat


def running_sums(
    xs: Sequence[int], ys: Sequence[int], fmt: SignedFormat = SIGNED9
) -> List[int]:
    """All prefix sums including the final one: ``min(len(xs), len(ys)) + 1`` values."""
    products = (x * y for x, y in zip(xs, ys))
    return [fmt.wrap(total) for total in accumulate(products, initial=0)]


def reference_model(
    xs: Sequence[int], ys: Sequence[int], fmt: SignedFormat = SIGNED9
) -> List[int]:
    """Expected circuit output, one value per consumed input pair."""
    cycles = min(len(xs), len(ys))
    return running_sums(xs, ys, fmt)[:cycles]
