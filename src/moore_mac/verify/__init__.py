from moore_mac.verify.property import (
    Counterexample,
    PropertyFailure,
    PropertyResult,
    assert_equivalent,
    check_property,
    compare,
    first_divergence,
)

__all__ = [
    "Counterexample",
    "PropertyFailure",
    "PropertyResult",
    "assert_equivalent",
    "check_property",
    "compare",
    "first_divergence",
]
