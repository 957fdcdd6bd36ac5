#!/usr/bin/env python3

import logging
import operator
from dataclasses import dataclass
from typing import Optional

from . import byteops, helpers
from .byteops import ByteAt
from .enums import intTypes
from .masks import check_bit_range, create_bit_mask, resolve_int_type

logger = logging.getLogger(__name__)


@dataclass
class Register:
    """
    Caller-owned integer of a fixed width, changed in place by its methods.

    Plain ints are immutable, so this is the stand-in for passing an integer by
    reference. Subclasses pick their width with INT_TYPE and may declare named
    bit ranges and bytes:

        class StatusWord(Register):
            INT_TYPE = intTypes.UINT16
            enabled = named[15, 1]
            mode = named[9, 5]
            low = ByteAt[0, intTypes.UINT16]

        status = StatusWord(0xB7AB)
        status.enabled          # 1
        status.enabled = 0      # status.value == 0x37AB
    """

    # fmt: off
    value    : int = 0
    int_type : Optional[intTypes] = None

    INT_TYPE = intTypes.UINT64
    # fmt: on

    def __post_init__(self):
        if self.int_type is None:
            self.int_type = type(self).INT_TYPE
        self.int_type = resolve_int_type(self.int_type)
        self.value = self.int_type.wrap(operator.index(self.value))

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def copy(self):
        return type(self)(self.value, self.int_type)

    # -- Bits
    def get_bit(self, pos: int, checked: bool = False) -> bool:
        return helpers.get_bit(self.value, pos, self.int_type, checked)

    def set_bit(self, pos: int, bit_value: bool = True, checked: bool = False) -> None:
        self.value = helpers.set_bit(self.value, pos, bit_value, self.int_type, checked)
        logger.debug("set_bit(%s, %s) -> 0x%X", pos, bit_value, self._unsigned())

    def clear_bit(self, pos: int, checked: bool = False) -> None:
        self.set_bit(pos, False, checked)

    def flip_bit(self, pos: int, checked: bool = False) -> None:
        self.value = helpers.flip_bit(self.value, pos, self.int_type, checked)
        logger.debug("flip_bit(%s) -> 0x%X", pos, self._unsigned())

    def get_bit_slice(self, pos: int, length: int, checked: bool = False) -> int:
        return helpers.get_bit_slice(self.value, pos, length, self.int_type, checked)

    def set_slice(self, pos: int, length: int, field_value: int, checked: bool = False) -> None:
        """Replaces bits [pos, pos + length) with the low bits of field_value."""
        mask = create_bit_mask(pos, length, self.int_type, checked)
        self.value = helpers.set_bits(self.value, field_value, mask, pos, self.int_type)
        logger.debug("set_slice(%s, %s, %s) -> 0x%X", pos, length, field_value, self._unsigned())

    # -- Bytes
    def get_byte(self, byte_pos, checked: bool = False) -> int:
        """byte_pos is an int or a ByteAt accessor."""
        if isinstance(byte_pos, ByteAt):
            byte_pos, checked = byte_pos.byte_pos, True
        return byteops.get_byte(self.value, byte_pos, self.int_type, checked)

    def set_byte(self, byte_pos, byte_value: int, checked: bool = False) -> None:
        """byte_pos is an int or a ByteAt accessor. The old byte is overwritten."""
        if isinstance(byte_pos, ByteAt):
            byte_pos, checked = byte_pos.byte_pos, True
        self.value = byteops.set_byte(self.value, byte_pos, byte_value, self.int_type, checked)
        logger.debug("set_byte(%s, 0x%02X) -> 0x%X", byte_pos, byte_value, self._unsigned())

    def to_bytes(self) -> bytes:
        return byteops.to_bytes(self.value, self.int_type)

    def _unsigned(self) -> int:
        return self.value & self.int_type.all_ones


class named:
    """
    Named bit range on a Register subclass, declared as named[pos, length].

    The range is checked against the owner's INT_TYPE when the class is created.
    Reads return the unsigned field value; writes replace only those bits.
    """

    def __init__(self, pos: int, length: int, /):
        self.pos = pos
        self.length = length
        self.name = None

    def __class_getitem__(cls, key):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("named is subscripted as named[pos, length]")
        return cls(*key)

    def __set_name__(self, owner, name):
        check_bit_range(self.pos, self.length, owner.INT_TYPE)
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        raw = instance.value & instance.int_type.all_ones
        return (raw >> self.pos) & ((1 << self.length) - 1)

    def __set__(self, instance, value):
        instance.set_slice(self.pos, self.length, value, checked=True)

    def __repr__(self):
        return f"named[{self.pos}, {self.length}]"
