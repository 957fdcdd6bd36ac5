#!/usr/bin/env python3

import logging
import operator
from dataclasses import dataclass, field
from functools import lru_cache

from .enums import intTypes
from .errors import BitRangeError, IntTypeError

logger = logging.getLogger(__name__)

# Bit layout of a mask:
#
#  bits-1          pos+len   pos          0
# +---------------+---------+------------+
# | 0 ... 0       | 1 ... 1 | 0 ... 0    |
# +---------------+---------+------------+
#                  <- len ->


def resolve_int_type(int_type) -> intTypes:
    """Returns int_type if it is an intTypes kind, raises IntTypeError otherwise."""
    if not isinstance(int_type, intTypes):
        raise IntTypeError(f"Expected an intTypes member, got: {int_type!r}")
    return int_type


def check_bit_range(pos: int, length: int, int_type: intTypes) -> None:
    """
    Validates that the bit range [pos, pos + length) fits in int_type.

    Raises:
        IntTypeError: int_type is not an intTypes member.
        BitRangeError: pos or length is negative, or the range runs past the top bit.
    """
    int_type = resolve_int_type(int_type)
    pos = operator.index(pos)
    length = operator.index(length)
    if pos < 0 or length < 0 or pos + length > int_type.bits:
        raise BitRangeError(
            f"Bit range [{pos}, {pos + length}) out of bounds for "
            f"{int_type.name} ({int_type.bits} bits)"
        )


def create_bit_mask(
    pos: int, length: int, int_type: intTypes = intTypes.UINT64, checked: bool = False
) -> int:
    """
    Creates a mask with bits [pos, pos + length) set.

    Usage example: field & create_bit_mask(0, 10)  # masks the first 10 bits

    Args:
        pos: Position of the first bit of the mask.
        length: Number of bits in the mask. 0 gives an empty mask.
        int_type: Integer kind the mask is a value of.
        checked: Raise BitRangeError for ranges that do not fit int_type. When False,
            bits past the top of int_type are dropped, and a negative pos or length
            gives an empty mask.

    Returns:
        The mask as a value of int_type (negative for signed kinds if the top bit is set).
    """
    int_type = resolve_int_type(int_type)
    if checked:
        check_bit_range(pos, length, int_type)
    pos = operator.index(pos)
    length = operator.index(length)
    if not in_type(pos, int_type) or length <= 0:
        return 0
    length = min(length, int_type.bits - pos)
    return int_type.wrap(((1 << length) - 1) << pos)


def in_type(pos: int, int_type: intTypes) -> bool:
    """True if bit pos exists in int_type. Unchecked accessors ignore other positions."""
    return 0 <= pos < int_type.bits


@dataclass(frozen=True)
class BitMask:
    """
    A bit mask fixed when it is defined.

    Built with subscript syntax, normally at module or class level:

        STATUS_MODE = BitMask[9, 5, intTypes.UINT16]
        STATUS_MODE.mask           # 0x3E00
        value & STATUS_MODE        # same as value & 0x3E00

    The range is always validated, so a bad definition fails on import. Identical
    subscripts return the same instance.
    """

    pos: int
    length: int
    int_type: intTypes = intTypes.UINT64
    mask: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        check_bit_range(self.pos, self.length, self.int_type)
        object.__setattr__(
            self, "mask", create_bit_mask(self.pos, self.length, self.int_type)
        )
        logger.debug(
            "BitMask[%s, %s, %s] = 0x%X",
            self.pos,
            self.length,
            self.int_type.name,
            self.mask & self.int_type.all_ones,
        )

    def __class_getitem__(cls, key):
        if not isinstance(key, tuple):
            raise TypeError("BitMask is subscripted as BitMask[pos, length, int_type]")
        return _bit_mask(cls, *key)

    def __index__(self) -> int:
        return self.mask

    def __int__(self) -> int:
        return self.mask

    def __and__(self, other):
        try:
            return self.mask & operator.index(other)
        except TypeError:
            return NotImplemented

    __rand__ = __and__


@lru_cache(maxsize=None)
def _bit_mask(cls, pos, length, int_type=intTypes.UINT64):
    return cls(pos, length, int_type)
