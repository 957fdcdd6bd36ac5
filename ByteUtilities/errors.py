class ByteUtilitiesError(Exception):
    """Base class for ByteUtilities errors"""


class IntTypeError(ByteUtilitiesError, TypeError):
    """Raised when an integer type is not one of the intTypes kinds."""


class BitRangeError(ByteUtilitiesError, IndexError):
    """Raised when a bit or byte range does not fit the integer type."""
