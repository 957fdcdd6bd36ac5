#!/usr/bin/env python3
import argparse
import logging

from ByteUtilities import (
    BitRangeError,
    get_bit,
    get_bit_slice,
    get_byte,
    intTypes,
    to_bytes,
)

# This file provides a _basic_ command-line inspector for the ByteUtilities package

logger = logging.getLogger(__name__)


def valid_int(value):
    """
    Parses an integer literal, accepting 0x/0o/0b prefixes.
    """
    try:
        return int(value, 0)  # Automatically detects base (e.g., hex)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}")


def parse_cli():
    """Parses commandline args (using argparse) for the ByteUtilities inspector."""

    parser = argparse.ArgumentParser(
        description="Inspect the bits and bytes of a fixed-width integer\n"
    )

    parser.add_argument(
        "value",
        type=valid_int,
        help="Integer to inspect. Hex (0x), octal (0o) and binary (0b) are accepted.",
    )

    parser.add_argument(
        "-t",
        "--type",
        default="uint64",
        choices=[t.name.lower() for t in intTypes],
        help="Integer type the value is read as, default=uint64",
    )

    # Repeat the flag for more positions: -b 0 -b 15
    parser.add_argument(
        "-b",
        "--bit",
        action="append",
        type=int,
        default=[],
        metavar="POS",
        help="Bit position to report. May be repeated.",
    )

    parser.add_argument(
        "-s",
        "--slice",
        action="append",
        nargs=2,
        type=int,
        default=[],
        metavar=("POS", "LEN"),
        help="Bit slice to report. May be repeated.",
    )

    parser.add_argument(
        "-B",
        "--byte",
        action="append",
        type=int,
        default=[],
        metavar="BYTEPOS",
        help="Little-endian byte position to report. May be repeated.",
    )

    parser.add_argument(
        "--checked",
        action="store_true",
        help="Reject positions that do not fit the type instead of truncating.",
    )

    parser.add_argument(
        "-log",
        "--loglevel",
        default="warning",
        choices=["notset", "debug", "info", "warning", "error", "critical"],
        help="Provide logging level. Example --loglevel debug, default=warning",
    )
    return parser


def report(value, int_type, bits=(), slices=(), byte_positions=(), checked=False):
    """Returns the inspector output for value as a list of lines."""
    value = int_type.wrap(value)
    raw = value & int_type.all_ones
    lines = [
        f"{int_type.name.lower()}: {value} = 0x{raw:0{int_type.size * 2}X}"
        f" = 0b{raw:0{int_type.bits}b}",
        "bytes (little-endian): " + " ".join(f"{b:02X}" for b in to_bytes(value, int_type)),
    ]
    for pos in bits:
        lines.append(f"bit[{pos}] = {int(get_bit(value, pos, int_type, checked))}")
    for pos, length in slices:
        part = get_bit_slice(value, pos, length, int_type, checked)
        lines.append(f"slice({pos}, {length}) = 0x{part & int_type.all_ones:X} ({part})")
    for byte_pos in byte_positions:
        lines.append(f"byte[{byte_pos}] = 0x{get_byte(value, byte_pos, int_type, checked):02X}")
    return lines


def main(argv=None):
    parser = parse_cli()
    args = parser.parse_args(argv)

    # ---- Configure Stdout Logging ---- #
    logging.basicConfig(
        level=args.loglevel.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    int_type = intTypes.from_name(args.type)
    logger.info("Inspecting %s as %s", args.value, int_type.name)
    try:
        lines = report(
            args.value, int_type, args.bit, args.slice, args.byte, checked=args.checked
        )
    except (BitRangeError, ValueError) as e:
        parser.error(str(e))

    for line in lines:
        print(line)
    return 0


# This allows the cli to be called independently for testing purposes.
if __name__ == "__main__":
    raise SystemExit(main())
