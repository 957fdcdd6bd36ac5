#!/usr/bin/env python3

import operator

from .enums import intTypes
from .masks import check_bit_range, create_bit_mask, in_type, resolve_int_type

# Fields are read as values of int_type: inputs are wrapped into its range and
# results come back in it, so signed kinds yield negative numbers when the top
# bit is set. Positions are unchecked unless checked=True is passed: bits
# outside the type read as 0 and writes to them leave the field unchanged.


# --- Mask & Shift Primitives --- #
def get_bits(field: int, mask: int, shift: int, int_type: intTypes = intTypes.UINT64) -> int:
    """Gets the value of a range of bits using a mask and shift."""
    int_type = resolve_int_type(int_type)
    field = int_type.wrap(operator.index(field))
    if not mask:
        return 0
    return int_type.wrap((field & mask) >> shift)


def set_bits(
    field: int, value: int, mask: int, shift: int, int_type: intTypes = intTypes.UINT64
) -> int:
    """Sets a range of bits in a field to a given value."""
    int_type = resolve_int_type(int_type)
    field = int_type.wrap(operator.index(field))
    if not mask:
        return field
    return int_type.wrap((field & ~mask) | ((operator.index(value) << shift) & mask))


# --- Bit Helpers --- #
def get_bit_slice(
    field: int,
    pos: int,
    length: int,
    int_type: intTypes = intTypes.UINT64,
    checked: bool = False,
) -> int:
    """
    Returns bits [pos, pos + length) of field shifted down to bit 0.

    Usage example: get_bit_slice(0x37AB, 9, 5) returns 0x001B.
        0011 0111 1010 1011 -> 0000 0000 0001 1011

    A slice of a signed kind that includes the sign bit is sign-extended, the
    same as an arithmetic right shift would do.
    """
    mask = create_bit_mask(pos, length, int_type, checked)
    return get_bits(field, mask, pos, int_type)


def get_bit(
    field: int, bit_position: int, int_type: intTypes = intTypes.UINT64, checked: bool = False
) -> bool:
    """Gets the value of a single bit at a given position."""
    int_type = resolve_int_type(int_type)
    if checked:
        check_bit_range(bit_position, 1, int_type)
    field = int_type.wrap(operator.index(field))
    if not in_type(bit_position, int_type):
        return False
    return bool((field >> bit_position) & 0x1)


def set_bit(
    field: int,
    bit_position: int,
    bit_value: bool = True,
    int_type: intTypes = intTypes.UINT64,
    checked: bool = False,
) -> int:
    """
    Sets a specific bit in a field to bit_value (1 by default).

    Every other bit is left as it was.
    """
    int_type = resolve_int_type(int_type)
    if checked:
        check_bit_range(bit_position, 1, int_type)
    field = int_type.wrap(operator.index(field))
    if not in_type(bit_position, int_type):
        return field
    # -1 is all ones, so XOR keeps only the bits that differ from bit_value
    return int_type.wrap(field ^ ((-int(bool(bit_value)) ^ field) & (1 << bit_position)))


def clear_bit(
    field: int, bit_position: int, int_type: intTypes = intTypes.UINT64, checked: bool = False
) -> int:
    """Clears a specific bit in a field to 0."""
    return set_bit(field, bit_position, False, int_type, checked)


def flip_bit(
    field: int, bit_position: int, int_type: intTypes = intTypes.UINT64, checked: bool = False
) -> int:
    """Complements a specific bit in a field."""
    int_type = resolve_int_type(int_type)
    if checked:
        check_bit_range(bit_position, 1, int_type)
    field = int_type.wrap(operator.index(field))
    if not in_type(bit_position, int_type):
        return field
    return int_type.wrap(field ^ (1 << bit_position))
