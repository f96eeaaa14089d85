from dataclasses import dataclass

from myhdl import Signal, modbv


@dataclass(frozen=True)
class SignedFormat:
    """Two's-complement signed integer of a fixed bit width."""

    width: int = 9

    def __post_init__(self):
        if not isinstance(self.width, int) or self.width < 1:
            raise ValueError(f"Width must be a positive integer, got {self.width!r}")

    @property
    def min_value(self):
        return -(1 << (self.width - 1))

    @property
    def max_value(self):
        return (1 << (self.width - 1)) - 1

    @property
    def span(self):
        return 1 << self.width

    def contains(self, value):
        return self.min_value <= value <= self.max_value

    def wrap(self, value):
        """Reduce an arbitrary integer into range, as a fixed-width register would."""
        return (int(value) - self.min_value) % self.span + self.min_value

    def signal(self, value=0):
        # MyHDL max is exclusive
        return Signal(modbv(self.wrap(value), min=self.min_value, max=self.max_value + 1))


SIGNED9 = SignedFormat(9)
