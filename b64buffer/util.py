"""
<Program Name>
  util.py

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Provides convenience wrappers around 'codec' for callers that work with
  whole bytes and str objects rather than buffers.
"""

from b64buffer import codec
from b64buffer.buffer import ByteBuffer


def b64enc(data: bytes) -> str:
    """To encode byte sequence into base64 string

    Arguments:
        data: Byte sequence to encode

    Raises:
        b64buffer.exceptions.FormatError: If "data" is not a byte sequence

    Returns:
        base64 string
    """

    buffer = ByteBuffer(capacity=0)
    codec.encode(data, buffer)
    return buffer.getvalue().decode("ascii")


def b64dec(string: str) -> bytes:
    """To decode byte sequence from base64 string

    Arguments:
        string: base64 string to decode

    Raises:
        b64buffer.exceptions.DecodeError: If invalid base64-encoded string

    Returns:
        A byte sequence
    """

    buffer = ByteBuffer(capacity=0)
    codec.decode(string.encode("utf-8"), buffer)
    return buffer.getvalue()
