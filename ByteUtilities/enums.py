from enum import Enum


class intTypes(Enum):
    """Fixed-width integer kinds. Value is (bit width, signed)."""

    # fmt: off
    INT8   = (8, True)
    UINT8  = (8, False)
    INT16  = (16, True)
    UINT16 = (16, False)
    INT32  = (32, True)
    UINT32 = (32, False)
    INT64  = (64, True)
    UINT64 = (64, False)
    # fmt: on

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def size(self) -> int:
        """Width in bytes."""
        return self.bits // 8

    @property
    def all_ones(self) -> int:
        return (1 << self.bits) - 1

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else self.all_ones

    def wrap(self, value: int) -> int:
        """Truncates value to this width, two's complement for signed kinds."""
        value &= self.all_ones
        if self.signed and value >> (self.bits - 1):
            value -= 1 << self.bits
        return value

    @classmethod
    def from_name(cls, name: str) -> "intTypes":
        """Looks up a kind by name, case-insensitive (e.g. "uint16")."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown integer type: {name}") from None
