#!/usr/bin/env python3

import contextlib
import io
import unittest

from ByteUtilities import intTypes
from cli import bits_cli as cli


def run_cli(*argv):
    out = io.StringIO()
    err = io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = cli.main(list(argv))
    return code, out.getvalue().splitlines()


class TestParseCli(unittest.TestCase):

    def test_defaults(self):
        args = cli.parse_cli().parse_args(["0x10"])
        self.assertEqual(args.value, 16)
        self.assertEqual(args.type, "uint64")
        self.assertEqual(args.bit, [])
        self.assertFalse(args.checked)

    def test_repeated_options(self):
        args = cli.parse_cli().parse_args(
            ["0b101", "-b", "0", "-b", "2", "-s", "9", "5", "-B", "1", "--checked"]
        )
        self.assertEqual(args.value, 5)
        self.assertEqual(args.bit, [0, 2])
        self.assertEqual(args.slice, [[9, 5]])
        self.assertEqual(args.byte, [1])
        self.assertTrue(args.checked)

    def test_invalid_value(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.parse_cli().parse_args(["zz"])
        self.assertEqual(ctx.exception.code, 2)


class TestMain(unittest.TestCase):

    def test_report(self):
        code, lines = run_cli("0xB7AB", "-t", "uint16", "-b", "15", "-s", "9", "5", "-B", "1")

        self.assertEqual(code, 0)
        self.assertEqual(
            lines,
            [
                "uint16: 47019 = 0xB7AB = 0b1011011110101011",
                "bytes (little-endian): AB B7",
                "bit[15] = 1",
                "slice(9, 5) = 0x1B (27)",
                "byte[1] = 0xB7",
            ],
        )

    def test_signed_report(self):
        _, lines = run_cli("0xFFFE", "-t", "int16")
        self.assertEqual(lines[0], "int16: -2 = 0xFFFE = 0b1111111111111110")
        self.assertEqual(lines[1], "bytes (little-endian): FE FF")

    def test_unchecked_out_of_range(self):
        _, lines = run_cli("0xFF", "-t", "uint8", "-b", "8", "-B", "1")
        self.assertEqual(lines[2:], ["bit[8] = 0", "byte[1] = 0x00"])

    def test_unchecked_huge_positions(self):
        _, lines = run_cli(
            "0xB7AB", "-t", "uint16", "-s", "0", "1099511627776", "-b", "1099511627776", "-B", "-1"
        )
        self.assertEqual(
            lines[2:],
            ["bit[1099511627776] = 0", "slice(0, 1099511627776) = 0xB7AB (47019)", "byte[-1] = 0x00"],
        )

    def test_checked_out_of_range(self):
        with self.assertRaises(SystemExit) as ctx:
            run_cli("0xFF", "-t", "uint8", "-b", "8", "--checked")
        self.assertEqual(ctx.exception.code, 2)

    def test_report_lines(self):
        lines = cli.report(0x37AB, intTypes.UINT32, slices=[(9, 5)])
        self.assertEqual(lines[0], "uint32: 14251 = 0x000037AB = 0b" + format(0x37AB, "032b"))
        self.assertEqual(lines[-1], "slice(9, 5) = 0x1B (27)")


if __name__ == "__main__":
    unittest.main()
