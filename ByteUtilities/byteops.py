#!/usr/bin/env python3

import logging
import operator
from dataclasses import dataclass, field
from functools import lru_cache

from .enums import intTypes
from .helpers import get_bits, set_bits
from .masks import BitMask, check_bit_range, create_bit_mask, resolve_int_type

logger = logging.getLogger(__name__)

# Byte positions are little-endian and refer to the numeric value, not memory:
#
# +--------+-----+--------+--------+
# | byte N | ... | byte 1 | byte 0 |
# +--------+-----+--------+--------+
#  MSB                         LSB
#
# byte k is always bits [8k, 8k + 8), whatever the host byte order.

BYTE_BITS = 8
BYTE_MASK = 0xFF


def get_byte(
    field: int, byte_pos: int, int_type: intTypes = intTypes.UINT64, checked: bool = False
) -> int:
    """
    Returns the byte at byte_pos of field as an unsigned value (0-255).

    Usage example: get_byte(0xAB01CD, 1)  # returns 0x01
    """
    int_type = resolve_int_type(int_type)
    if checked:
        check_bit_range(byte_pos * BYTE_BITS, BYTE_BITS, int_type)
    field = int_type.wrap(operator.index(field))
    if not 0 <= byte_pos < int_type.size:
        return 0
    return (field >> (byte_pos * BYTE_BITS)) & BYTE_MASK


def set_byte(
    field: int,
    byte_pos: int,
    byte_value: int,
    int_type: intTypes = intTypes.UINT64,
    checked: bool = False,
) -> int:
    """
    Returns field with the byte at byte_pos replaced by byte_value.

    The old byte is cleared first, so this always overwrites. Only the low 8 bits
    of byte_value are used.

    Usage example: set_byte(0xAB01CD, 1, 0xFF)  # returns 0xABFFCD
    """
    shift = byte_pos * BYTE_BITS
    mask = create_bit_mask(shift, BYTE_BITS, int_type, checked)
    return set_bits(field, operator.index(byte_value) & BYTE_MASK, mask, shift, int_type)


def to_bytes(field: int, int_type: intTypes = intTypes.UINT64) -> bytes:
    """Returns the little-endian bytes of field, int_type.size of them."""
    int_type = resolve_int_type(int_type)
    return bytes(get_byte(field, k, int_type) for k in range(int_type.size))


def from_bytes(data, int_type: intTypes = intTypes.UINT64) -> int:
    """
    Builds a value of int_type from little-endian bytes.

    Shorter data is zero-extended. Longer data raises ValueError.
    """
    int_type = resolve_int_type(int_type)
    if len(data) > int_type.size:
        raise ValueError(
            f"{len(data)} bytes do not fit in {int_type.name} ({int_type.size} bytes)"
        )
    value = 0
    for k, byte_value in enumerate(data):
        value = set_byte(value, k, byte_value, int_type)
    return value


@dataclass(frozen=True)
class ByteAt:
    """
    Accessor for one byte position, fixed and validated when it is defined.

        LOW = ByteAt[0, intTypes.UINT16]
        HIGH = ByteAt[1, intTypes.UINT16]
        HIGH.get(0xAB01)           # 0xAB
        LOW.set(0xAB01, 0xFF)      # 0xABFF
        ByteAt[2, intTypes.UINT16] # raises BitRangeError

    On a Register subclass it also works as a descriptor for that byte.
    """

    byte_pos: int
    int_type: intTypes = intTypes.UINT64
    bit_mask: BitMask = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self, "bit_mask", BitMask[self.byte_pos * BYTE_BITS, BYTE_BITS, self.int_type]
        )

    def __class_getitem__(cls, key):
        if isinstance(key, tuple):
            return _byte_at(cls, *key)
        return _byte_at(cls, key)

    @property
    def shift(self) -> int:
        return self.byte_pos * BYTE_BITS

    @property
    def mask(self) -> int:
        return self.bit_mask.mask

    def get(self, field: int) -> int:
        """Returns this byte of field as an unsigned value (0-255)."""
        return get_bits(field, self.mask, self.shift, self.int_type) & BYTE_MASK

    def set(self, field: int, byte_value: int) -> int:
        """Returns field with this byte replaced by byte_value."""
        return set_bits(
            field, operator.index(byte_value) & BYTE_MASK, self.mask, self.shift, self.int_type
        )

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.get_byte(self)

    def __set__(self, instance, byte_value):
        instance.set_byte(self, byte_value)


@lru_cache(maxsize=None)
def _byte_at(cls, byte_pos, int_type=intTypes.UINT64):
    at = cls(byte_pos, int_type)
    logger.debug("ByteAt[%s, %s] mask=0x%X", byte_pos, int_type.name, at.mask & int_type.all_ones)
    return at
