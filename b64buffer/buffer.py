"""
<Program Name>
  buffer.py

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Provides an interface for the growable byte stores the codec writes into,
  BufferInterface, and a bytearray-backed implementation, ByteBuffer.
"""

from __future__ import annotations

import logging
from abc import ABCMeta, abstractmethod

from b64buffer import exceptions, settings

logger = logging.getLogger(__name__)


class BufferInterface(metaclass=ABCMeta):
    """
    <Purpose>
    Defines an interface for an append-only byte store with a write cursor
    that can be recorded and later reset, discarding anything written since.
    """

    @abstractmethod
    def write_byte(self, value: int) -> None:
        """
        <Purpose>
          Append a single byte at the current writer index and advance it.

        <Arguments>
          value:
            An integer in range 0..255.

        <Exceptions>
          b64buffer.exceptions.FormatError, if 'value' is not a byte.

        <Returns>
          None
        """
        raise NotImplementedError  # pragma: no cover

    @abstractmethod
    def reserve_capacity(self, additional: int) -> None:
        """
        <Purpose>
          Hint that about 'additional' more bytes are going to be written.
          Implementations are free to ignore the hint.

        <Arguments>
          additional:
            Expected number of bytes to be written after the writer index.

        <Returns>
          None
        """
        raise NotImplementedError  # pragma: no cover

    @property
    @abstractmethod
    def writer_index(self) -> int:
        """
        <Purpose>
          The current write position.  Callers only ever pass it back to
          move_writer_index().
        """
        raise NotImplementedError  # pragma: no cover

    @abstractmethod
    def move_writer_index(self, mark: int) -> None:
        """
        <Purpose>
          Reset the writer index to 'mark', a value previously read from
          'writer_index'.  Bytes written after 'mark' are discarded.

        <Arguments>
          mark:
            A previously obtained writer index.

        <Exceptions>
          b64buffer.exceptions.FormatError, if 'mark' lies outside the
          written region.

        <Returns>
          None
        """
        raise NotImplementedError  # pragma: no cover


class ByteBuffer(BufferInterface):
    """
    <Purpose>
    A BufferInterface backed by a bytearray.  The backing store may be larger
    than the visible content; only bytes before the writer index are
    readable.

    >>> buf = ByteBuffer(b"ab")
    >>> buf.write_byte(0x63)
    >>> buf.getvalue()
    b'abc'
    """

    def __init__(self, initial: bytes = b"", capacity: int | None = None):
        if capacity is None:
            capacity = settings.DEFAULT_BUFFER_CAPACITY

        self._storage = bytearray(initial)
        self._writer_index = len(self._storage)
        self.reserve_capacity(capacity - self._writer_index)

    @property
    def writer_index(self) -> int:
        return self._writer_index

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def readable_bytes(self) -> int:
        return self._writer_index

    def write_byte(self, value: int) -> None:
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not 0 <= value <= 0xFF
        ):
            raise exceptions.FormatError(f"Cannot write {value!r}, expected a byte")

        if self._writer_index < len(self._storage):
            self._storage[self._writer_index] = value
        else:
            self._storage.append(value)

        self._writer_index += 1

    def reserve_capacity(self, additional: int) -> None:
        missing = self._writer_index + additional - len(self._storage)
        if missing > 0:
            logger.debug("Growing buffer by %d bytes", missing)
            self._storage.extend(bytes(missing))

    def move_writer_index(self, mark: int) -> None:
        if not 0 <= mark <= self._writer_index:
            raise exceptions.FormatError(
                f"Cannot move writer index to {mark}, expected 0..{self._writer_index}"
            )

        self._writer_index = mark

    def getvalue(self) -> bytes:
        """Return the readable content as bytes."""
        return bytes(self._storage[: self._writer_index])

    def __len__(self) -> int:
        return self._writer_index

    def __bytes__(self) -> bytes:
        return self.getvalue()

    def __repr__(self):
        return f"ByteBuffer({self.getvalue()!r})"
