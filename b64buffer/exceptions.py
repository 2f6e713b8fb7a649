"""
<Program Name>
  exceptions.py

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Define exceptions.  The names chosen for exception classes should end in
  'Error' (except where there is a good reason not to).
"""


class Error(Exception):
    """Indicate a generic error."""


class FormatError(Error):
    """Indicate an error while validating an argument's type or range."""


class DecodeError(Error):
    """Indicate that base64 text could not be decoded. The target buffer is
    left as it was before the failed call."""


class InvalidCharacterError(DecodeError):
    """A byte outside the base64 alphabet (and not padding) was found."""

    def __init__(self, byte: int, offset: int):
        super().__init__()
        self.byte = byte
        self.offset = offset

    def __str__(self):
        return f"Invalid base64 character {self.byte:#04x} at offset {self.offset}"


class MisplacedPaddingError(DecodeError):
    """A base64 symbol followed a padding symbol."""

    def __init__(self, offset: int):
        super().__init__()
        self.offset = offset

    def __str__(self):
        return f"Base64 symbol after padding at offset {self.offset}"


class IncompleteGroupError(DecodeError):
    """The number of symbols (including padding) is not a multiple of 4."""

    def __init__(self, symbol_count: int):
        super().__init__()
        self.symbol_count = symbol_count

    def __str__(self):
        return (
            f"Incomplete base64 group: {self.symbol_count} symbols is not a "
            "multiple of 4"
        )
