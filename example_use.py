#!/usr/bin/env python3

import logging

import can

from ByteUtilities import (
    ByteAt,
    Register,
    arbitration_field,
    intTypes,
    message_from_int,
    message_to_int,
    named,
    with_arbitration_field,
)

# ---- Configure Stdout Logging ---- #

logging.basicConfig(
    level="DEBUG",
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)

# ---- Register Layout ---- #
#
# +---------+----------+-----------+----------+
# | 15      | 14..9    | 8..1      | 0        |
# | enabled | mode     | reserved  | valid    |
# +---------+----------+-----------+----------+


class StatusWord(Register):
    INT_TYPE = intTypes.UINT16

    enabled = named[15, 1]
    mode = named[9, 6]
    valid = named[0, 1]
    low = ByteAt[0, intTypes.UINT16]
    high = ByteAt[1, intTypes.UINT16]


# CAN ID layout: group(5) | message type(8) | device type(8) | node(8)
MESSAGE_TYPE_POS = 16
NODE_POS = 0

status = StatusWord()
status.enabled = 1
status.mode = 0x1B
status.valid = 1
logger.info("Status word: 0x%04X (high=0x%02X low=0x%02X)", status.value, status.high, status.low)

# ---- Bus Setup ---- #
# The virtual interface needs no hardware
with can.Bus(interface="virtual", channel="vcan0", receive_own_messages=True) as bus:

    msg = message_from_int(status, 0x07600A01, intTypes.UINT16)
    msg = with_arbitration_field(msg, NODE_POS, 8, 0x30)
    logger.info("Sending: %s", msg)
    bus.send(msg)

    rx_msg = bus.recv(timeout=1.0)
    if rx_msg is None:
        logger.error("Nothing received on the virtual bus")
    else:
        received = StatusWord(message_to_int(rx_msg, intTypes.UINT16))
        print(f"Message type: 0x{arbitration_field(rx_msg, MESSAGE_TYPE_POS, 8):02X}")
        print(f"Node:         0x{arbitration_field(rx_msg, NODE_POS, 8):02X}")
        print(f"Enabled:      {received.enabled}")
        print(f"Mode:         0x{received.mode:02X}")
        print(f"Valid:        {received.valid}")
