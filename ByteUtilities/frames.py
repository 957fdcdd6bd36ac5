#!/usr/bin/env python3

import copy
import logging
import operator

from can import Message

from .byteops import from_bytes, to_bytes
from .enums import intTypes
from .errors import BitRangeError
from .helpers import get_bit_slice, set_bits
from .masks import create_bit_mask

logger = logging.getLogger(__name__)

# --- Arbitration ID Constants --- #
STANDARD_ID_BITS = 11
EXTENDED_ID_BITS = 29
STANDARD_ID_MAX = (1 << STANDARD_ID_BITS) - 1


def message_from_int(
    value: int, arbitration_id: int, int_type: intTypes = intTypes.UINT64, **kwargs
) -> Message:
    """
    Constructs a python-can Message carrying value as its payload.

    Args:
        value: Integer to send, read as int_type.
        arbitration_id: CAN ID of the frame.
        int_type: Width of the payload, int_type.size bytes little-endian.
        **kwargs: Passed on to can.Message. is_extended_id defaults to True for
            IDs that do not fit in 11 bits.

    Returns:
        A python-can Message object ready to be sent.
    """
    value = operator.index(value)
    kwargs.setdefault("is_extended_id", arbitration_id > STANDARD_ID_MAX)
    data = to_bytes(value, int_type)
    logger.debug("Packing 0x%X as %s into ID 0x%X", value, int_type.name, arbitration_id)
    return Message(arbitration_id=arbitration_id, data=data, **kwargs)


def message_to_int(msg: Message, int_type: intTypes = intTypes.UINT64) -> int:
    """Returns the payload of msg read as a little-endian int_type."""
    value = from_bytes(msg.data, int_type)
    logger.debug("Unpacked %s from ID 0x%X: 0x%X", int_type.name, msg.arbitration_id, value)
    return value


def _check_id_range(msg: Message, pos: int, length: int) -> None:
    id_bits = EXTENDED_ID_BITS if msg.is_extended_id else STANDARD_ID_BITS
    if pos < 0 or length < 0 or pos + length > id_bits:
        raise BitRangeError(
            f"Bit range [{pos}, {pos + length}) out of bounds for a {id_bits}-bit CAN ID"
        )


def arbitration_field(msg: Message, pos: int, length: int) -> int:
    """
    Returns bits [pos, pos + length) of the arbitration ID of msg.

    Usage example, for an ID laid out as group(5) | type(8) | device(8) | node(8):
        arbitration_field(msg, 16, 8)  # message type
    """
    _check_id_range(msg, pos, length)
    return get_bit_slice(msg.arbitration_id, pos, length, intTypes.UINT32)


def with_arbitration_field(msg: Message, pos: int, length: int, field_value: int) -> Message:
    """Returns a copy of msg with bits [pos, pos + length) of its ID replaced."""
    _check_id_range(msg, pos, length)
    mask = create_bit_mask(pos, length, intTypes.UINT32)
    new_msg = copy.copy(msg)
    new_msg.arbitration_id = set_bits(
        msg.arbitration_id, field_value, mask, pos, intTypes.UINT32
    )
    return new_msg
