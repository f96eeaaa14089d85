from myhdl import *


@block
def accumulator_register(clk, reset, d, q):
    """
    Accumulator state register. Loads d on every rising clock edge and clears
    to zero on a synchronous, active-high reset.

    Parameters:
    - clk: Clock signal
    - reset: ResetSignal, or a plain bool signal that is adapted to one
    - d: Next-state value
    - q: Registered (current) state
    """

    # Storage for the register, same range as q, wrapping on overflow
    _reg = Signal(modbv(0, min=q.min, max=q.max))

    # Check if reset is already a ResetSignal, if not, create one
    if not isinstance(reset, ResetSignal):
        reset_sig = ResetSignal(0, active=1, isasync=False)

        # Connect the reset input to our ResetSignal
        @always_comb
        def reset_connect():
            reset_sig.next = reset

    else:
        reset_sig = reset

    @always_seq(clk.posedge, reset=reset_sig)
    def reg_logic():
        _reg.next = d

    @always_comb
    def output_logic():
        q.next = _reg

    if not isinstance(reset, ResetSignal):
        return reset_connect, reg_logic, output_logic
    else:
        return reg_logic, output_logic
