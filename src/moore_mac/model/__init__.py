from moore_mac.model.update import Accumulator, MacInput, mac_update, update
from moore_mac.model.moore import MooreMachine, mac_machine, moore
from moore_mac.model.reference import reference_model, running_sums
from moore_mac.model.driver import simulate

__all__ = [
    "Accumulator",
    "MacInput",
    "MooreMachine",
    "mac_machine",
    "mac_update",
    "moore",
    "reference_model",
    "running_sums",
    "simulate",
    "update",
]
