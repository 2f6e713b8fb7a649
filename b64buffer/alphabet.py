"""
<Program Name>
  alphabet.py

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Map 6-bit values to the RFC4648 standard base64 alphabet and back.

  The alphabet is kept as five contiguous ASCII ranges.  A 6-bit value is
  located by the cumulative length of the ranges preceding it, so the order
  of BYTE_RANGES is significant and must not change.
"""

from __future__ import annotations

from typing import NamedTuple, Union

from b64buffer import exceptions

BYTE_RANGES: tuple[range, ...] = (
    range(65, 91),  # A-Z
    range(97, 123),  # a-z
    range(48, 58),  # 0-9
    range(43, 44),  # +
    range(47, 48),  # /
)

# Padding character used when the number of bytes to encode is not divisible
# by 3.
PADDING = 61  # =

SYMBOL_COUNT = 64

assert sum(len(r) for r in BYTE_RANGES) == SYMBOL_COUNT


class Valid(NamedTuple):
    """A base64 symbol together with the 6-bit value it stands for."""

    value: int


class _Marker:
    """A named singleton for the non-symbol results of decode_byte()."""

    def __init__(self, name: str):
        self._name = name

    def __repr__(self):
        return self._name


INVALID = _Marker("INVALID")
PADDING_SYMBOL = _Marker("PADDING_SYMBOL")

DecodedByte = Union[Valid, _Marker]


def encode_symbol(value: int) -> int:
    """Return the ASCII byte for the 6-bit 'value'.

    Arguments:
        value: An integer in range 0..63.

    Raises:
        b64buffer.exceptions.FormatError: If 'value' is not a 6-bit value.

    Returns:
        The alphabet byte, as an integer.
    """

    if isinstance(value, bool) or not isinstance(value, int):
        raise exceptions.FormatError(f"Expected an int, got {value!r}")

    start = 0
    for byte_range in BYTE_RANGES:
        if start <= value < start + len(byte_range):
            return byte_range.start + (value - start)
        start += len(byte_range)

    raise exceptions.FormatError(
        f"Cannot encode {value!r} as a base64 symbol, expected 0..63"
    )


def decode_byte(byte: int) -> DecodedByte:
    """Classify 'byte' as an alphabet symbol, the padding symbol or neither.

    Arguments:
        byte: An integer byte value.

    Returns:
        'Valid(value)' carrying the 6-bit value for alphabet bytes,
        PADDING_SYMBOL for '=', INVALID for everything else.
    """

    if byte == PADDING:
        return PADDING_SYMBOL

    start = 0
    for byte_range in BYTE_RANGES:
        if byte in byte_range:
            return Valid(start + (byte - byte_range.start))
        start += len(byte_range)

    return INVALID


def is_symbol(byte: int) -> bool:
    """Return True if 'byte' is one of the 64 alphabet bytes or padding."""
    return decode_byte(byte) is not INVALID
