"""
ByteUtilities Package
=====================

Bit and byte accessors for fixed-width integers, for use by codec, protocol
and register code. Byte positions are little-endian: byte 0 is the least
significant byte of the value, whatever the host byte order.

Example Usage:
-------------
from ByteUtilities import intTypes, get_bit_slice, set_bit, get_byte, ByteAt, Register

get_bit_slice(0x37AB, 9, 5)                       # 0x1B
set_bit(0xB7AB, 15, False, intTypes.UINT16)       # 0x37AB
get_byte(0xABCDEF0123456789, 4)                   # 0x01

# Accessors fixed at definition time, validated on import
HIGH = ByteAt[1, intTypes.UINT16]
HIGH.set(0x00CD, 0xAB)                            # 0xABCD

# In-place changes
reg = Register(0, intTypes.UINT32)
reg.set_byte(3, 0x80)                             # reg.value == 0x80000000

Runtime entry points do not bounds-check unless called with checked=True.
"""

# --- Integer types & errors ---
from .enums import intTypes
from .errors import BitRangeError, ByteUtilitiesError, IntTypeError

# --- Mask facility ---
from .masks import BitMask, check_bit_range, create_bit_mask

# --- Bit accessors ---
from .helpers import (
    clear_bit,
    flip_bit,
    get_bit,
    get_bit_slice,
    get_bits,
    set_bit,
    set_bits,
)

# --- Byte accessors ---
from .byteops import ByteAt, from_bytes, get_byte, set_byte, to_bytes

# --- In-place holder ---
from .register import Register, named

# --- python-can adapters ---
from .frames import (
    arbitration_field,
    message_from_int,
    message_to_int,
    with_arbitration_field,
)

# --- Expose a version number ---
__version__ = "1.0.0"
