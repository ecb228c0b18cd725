"""An unsigned 8-bit value with equality, ordering and hashing."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Byte:
    """A value from 0 to 255."""

    value: int = 0

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"byte value must be an integer, got {type(self.value).__name__}")
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"byte value out of range: {self.value}")

    def compare_to(self, other):
        """Negative, zero or positive as this byte sorts before, with or after ``other``."""
        return self.value - other.value

    def __hash__(self):
        return self.value

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value