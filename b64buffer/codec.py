"""
<Program Name>
  codec.py

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Encode bytes to RFC4648 base64 text and decode such text back to bytes,
  appending the result to a caller-owned BufferInterface.

  Input is consumed in a single forward pass, so any finite iterable of byte
  values works, e.g. bytes, bytearray, memoryview or a generator.  Output uses
  the standard alphabet with '=' padding and no line breaks; decoding rejects
  anything else, whitespace included.

  A failed decode leaves the buffer exactly as it was before the call.
"""

from __future__ import annotations

import enum
import logging
import operator
from typing import Iterable

from b64buffer import exceptions, settings
from b64buffer.alphabet import (
    INVALID,
    PADDING,
    PADDING_SYMBOL,
    decode_byte,
    encode_symbol,
)
from b64buffer.buffer import BufferInterface

logger = logging.getLogger(__name__)


class _EncodePhase(enum.Enum):
    """Position of the next input byte within its 3-byte group."""

    FIRST = 0
    SECOND = 1
    THIRD = 2


class _DecodePhase(enum.Enum):
    """Position of the next symbol within its 4-symbol group."""

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3


_NEXT_ENCODE_PHASE = {
    _EncodePhase.FIRST: _EncodePhase.SECOND,
    _EncodePhase.SECOND: _EncodePhase.THIRD,
    _EncodePhase.THIRD: _EncodePhase.FIRST,
}

_NEXT_DECODE_PHASE = {
    _DecodePhase.FIRST: _DecodePhase.SECOND,
    _DecodePhase.SECOND: _DecodePhase.THIRD,
    _DecodePhase.THIRD: _DecodePhase.FOURTH,
    _DecodePhase.FOURTH: _DecodePhase.FIRST,
}

# Number of '=' appended when input ends in a given phase.  A group that
# stopped after one byte still owes 2 symbols, after two bytes 1 symbol.
_PADDING_LENGTH = {
    _EncodePhase.FIRST: 0,
    _EncodePhase.SECOND: 2,
    _EncodePhase.THIRD: 1,
}


def _check_input(data: Iterable[int]) -> None:
    # Iterating a str yields characters, not byte values.
    if isinstance(data, str):
        raise exceptions.FormatError(
            "Expected an iterable of byte values, got str; encode it first"
        )


def _check_byte(byte: int) -> None:
    # bool is an int subclass but never a byte value.
    if (
        isinstance(byte, bool)
        or not isinstance(byte, int)
        or not 0 <= byte <= 0xFF
    ):
        raise exceptions.FormatError(f"Expected a byte value, got {byte!r}")


def _rollback(buffer: BufferInterface, mark: int, error: Exception) -> None:
    discarded = buffer.writer_index - mark
    buffer.move_writer_index(mark)
    logger.debug("Discarded %d bytes written before error: %s", discarded, error)


def encode(data: Iterable[int], buffer: BufferInterface) -> int:
    """Encode 'data' as base64 and append the text to 'buffer'.

      buf = b64buffer.buffer.ByteBuffer()
      encode(b"Man", buf)  # 4
      buf.getvalue()  # b"TWFu"

    Arguments:
        data: Finite iterable of integers in range 0..255.
        buffer: The BufferInterface to append to.

    Raises:
        b64buffer.exceptions.FormatError: If 'data' is a str or yields
            something other than a byte value.  Nothing is left in 'buffer'.

        Any exception raised while iterating 'data' propagates after the
        same rollback.

    Returns:
        The number of bytes appended to 'buffer'.
    """

    _check_input(data)

    if settings.RESERVE_CAPACITY:
        buffer.reserve_capacity((operator.length_hint(data) + 2) // 3 * 4)

    start = buffer.writer_index
    phase = _EncodePhase.FIRST
    pending = 0

    try:
        for byte in data:
            _check_byte(byte)

            if phase is _EncodePhase.FIRST:
                buffer.write_byte(encode_symbol(byte >> 2))
                pending = (byte & 0x03) << 4

            elif phase is _EncodePhase.SECOND:
                buffer.write_byte(encode_symbol(pending | byte >> 4))
                pending = (byte & 0x0F) << 2

            else:
                buffer.write_byte(encode_symbol(pending | byte >> 6))
                buffer.write_byte(encode_symbol(byte & 0x3F))

            phase = _NEXT_ENCODE_PHASE[phase]

    except Exception as e:
        _rollback(buffer, start, e)
        raise

    padding = _PADDING_LENGTH[phase]
    if padding:
        buffer.write_byte(encode_symbol(pending))
        for _ in range(padding):
            buffer.write_byte(PADDING)

    return buffer.writer_index - start


def _decode(data: Iterable[int], buffer: BufferInterface) -> None:
    phase = _DecodePhase.FIRST
    pending = 0
    valid_count = 0
    padding_count = 0

    for offset, byte in enumerate(data):
        _check_byte(byte)
        decoded = decode_byte(byte)

        if decoded is INVALID:
            raise exceptions.InvalidCharacterError(byte, offset)

        if decoded is PADDING_SYMBOL:
            padding_count += 1
            continue

        # Padding may only ever be a suffix.
        if padding_count:
            raise exceptions.MisplacedPaddingError(offset)

        value = decoded.value
        valid_count += 1

        if phase is _DecodePhase.FIRST:
            pending = (value << 2) & 0xFF

        elif phase is _DecodePhase.SECOND:
            buffer.write_byte(pending | value >> 4)
            pending = (value << 4) & 0xFF

        elif phase is _DecodePhase.THIRD:
            buffer.write_byte(pending | value >> 2)
            pending = (value << 6) & 0xFF

        else:
            buffer.write_byte(pending | value)

        phase = _NEXT_DECODE_PHASE[phase]

    if (valid_count + padding_count) % 4:
        raise exceptions.IncompleteGroupError(valid_count + padding_count)


def decode(data: Iterable[int], buffer: BufferInterface) -> int:
    """Decode base64 text 'data' and append the resulting bytes to 'buffer'.

    On failure the writer index of 'buffer' is reset to its value on entry,
    so nothing written during the call remains visible.

    Arguments:
        data: Finite iterable of integers in range 0..255, i.e. ASCII bytes.
        buffer: The BufferInterface to append to.

    Raises:
        b64buffer.exceptions.InvalidCharacterError: If 'data' contains a byte
            that is neither in the alphabet nor padding.

        b64buffer.exceptions.MisplacedPaddingError: If an alphabet symbol
            follows a padding symbol.

        b64buffer.exceptions.IncompleteGroupError: If the number of symbols,
            padding included, is not a multiple of 4.

        b64buffer.exceptions.FormatError: If 'data' is a str or yields
            something other than a byte value.

        Any exception raised while iterating 'data' propagates after the
        rollback.

    Returns:
        The number of bytes appended to 'buffer'.  Empty input returns 0.
    """

    _check_input(data)

    if settings.RESERVE_CAPACITY:
        buffer.reserve_capacity(operator.length_hint(data) // 4 * 3)

    start = buffer.writer_index
    try:
        _decode(data, buffer)

    except Exception as e:
        _rollback(buffer, start, e)
        raise

    return buffer.writer_index - start
