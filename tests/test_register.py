#!/usr/bin/env python3

import unittest

from ByteUtilities import BitRangeError, ByteAt, Register, intTypes, named


class StatusWord(Register):
    INT_TYPE = intTypes.UINT16

    enabled = named[15, 1]
    mode = named[9, 5]
    valid = named[0, 1]
    low = ByteAt[0, intTypes.UINT16]
    high = ByteAt[1, intTypes.UINT16]


class TestRegister(unittest.TestCase):

    def test_set_bit_in_place(self):
        # 1011 0111 1010 1011
        reg = Register(0xB7AB, intTypes.UINT16)

        reg.set_bit(15, False)
        self.assertEqual(reg.value, 0x37AB)

        reg.set_bit(15, True)
        self.assertEqual(reg.value, 0xB7AB)

        reg.clear_bit(0)
        self.assertEqual(reg.value, 0xB7AA)

    def test_set_msb_from_zero(self):
        for int_type, expected in (
            (intTypes.UINT16, 0x8000),
            (intTypes.UINT32, 0x80000000),
            (intTypes.UINT64, 0x8000000000000000),
            (intTypes.INT16, -0x8000),
        ):
            reg = Register(0, int_type)
            reg.set_bit(int_type.bits - 1, True)
            self.assertEqual(reg.value, expected)

    def test_flip_twice(self):
        reg = Register(0x37AB, intTypes.INT32)
        reg.flip_bit(31)
        self.assertLess(reg.value, 0)
        reg.flip_bit(31)
        self.assertEqual(reg.value, 0x37AB)

    def test_slices(self):
        reg = Register(0x37AB, intTypes.UINT16)
        self.assertEqual(reg.get_bit_slice(9, 5), 0x1B)

        reg.set_slice(9, 5, 0x00)
        self.assertEqual(reg.value, 0x01AB)
        reg.set_slice(9, 5, 0x1B)
        self.assertEqual(reg.value, 0x37AB)

        with self.assertRaises(BitRangeError):
            reg.set_slice(12, 5, 0, checked=True)

    def test_byte_round_trip(self):
        known = [0x89, 0x67, 0x45, 0x23, 0x01, 0xEF, 0xCD, 0xAB]
        reg = Register()
        for pos, byte_value in enumerate(known):
            reg.set_byte(ByteAt[pos], byte_value)
        self.assertEqual(reg.value, 0xABCDEF0123456789)
        self.assertEqual(reg.get_byte(4), 0x01)
        self.assertEqual(reg.get_byte(ByteAt[7]), 0xAB)
        self.assertEqual(reg.to_bytes(), bytes(known))

    def test_byte_accessor_checked_against_register(self):
        reg = Register(0, intTypes.UINT16)
        with self.assertRaises(BitRangeError):
            reg.set_byte(ByteAt[2, intTypes.UINT32], 0xFF)

    def test_wraps_initial_value(self):
        self.assertEqual(Register(-1, intTypes.UINT16).value, 0xFFFF)
        self.assertEqual(Register(0x1FFFF, intTypes.UINT16).value, 0xFFFF)
        self.assertEqual(Register(0xFFFF, intTypes.INT16).value, -1)
        self.assertIs(Register().int_type, intTypes.UINT64)

    def test_int_conversion_and_copy(self):
        reg = Register(0x1234, intTypes.UINT16)
        self.assertEqual(int(reg), 0x1234)
        self.assertEqual(hex(reg), "0x1234")

        other = reg.copy()
        other.set_byte(0, 0x00)
        self.assertEqual(reg.value, 0x1234)
        self.assertEqual(other.value, 0x1200)
        self.assertNotEqual(reg, other)
        self.assertEqual(reg, Register(0x1234, intTypes.UINT16))


class TestNamedFields(unittest.TestCase):

    def test_named_reads(self):
        # 1011 0111 1010 1011
        status = StatusWord(0xB7AB)
        self.assertIs(status.int_type, intTypes.UINT16)
        self.assertEqual(status.enabled, 1)
        self.assertEqual(status.mode, 0x1B)
        self.assertEqual(status.valid, 1)
        self.assertEqual(status.high, 0xB7)
        self.assertEqual(status.low, 0xAB)

    def test_named_writes(self):
        status = StatusWord(0xB7AB)
        status.enabled = 0
        self.assertEqual(status.value, 0x37AB)

        status.mode = 0
        self.assertEqual(status.value, 0x01AB)

        status.high = 0xB7
        self.assertEqual(status.value, 0xB7AB)

        status.low = 0x00
        self.assertEqual(status.value, 0xB700)

    def test_named_on_class(self):
        self.assertIsInstance(StatusWord.mode, named)
        self.assertIsInstance(StatusWord.low, ByteAt)

    def test_named_out_of_range(self):
        # Python < 3.12 wraps errors raised from __set_name__ in RuntimeError
        with self.assertRaises((BitRangeError, RuntimeError)):

            class BadWord(Register):
                INT_TYPE = intTypes.UINT16
                field = named[12, 8]


if __name__ == "__main__":
    unittest.main()
