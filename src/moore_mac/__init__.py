"""Multiply-accumulate unit modelled as a Moore machine, with equivalence checking."""

from moore_mac.model import MacInput, Accumulator, mac_update, reference_model, simulate
from moore_mac.utils.int_defs import SIGNED9, SignedFormat

__version__ = "0.1.0"
