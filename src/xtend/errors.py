"""Error definitions shared by every helper group.

Every error derives from :class:`XtendError` and from the builtin a caller
would naturally expect (``TypeError`` for missing or mistyped arguments,
``ValueError`` for out-of-range ones), so ``except ValueError`` keeps working.
"""

from typing import TypeVar

T = TypeVar("T")

# ============================================================================
#                               Messages
# ============================================================================

COUNT_MUST_BE_NON_NEGATIVE = "count must be greater than or equal to 0."
LENGTH_MUST_BE_NON_NEGATIVE = "Length must be greater than or equal to 0."
VALUE_CANNOT_BE_NEGATIVE = "Value cannot be negative."
DESTINATION_TOO_SHORT = "The destination is too short to contain the data."
SOURCE_CONTAINS_NO_ELEMENTS = "The source contains no elements."
OBJECT_IS_NOT_A_VALID_TYPE = "The specified object is not a valid type."
YEAR_CANNOT_BE_ZERO = "Year cannot be zero."
LOWER_CANNOT_BE_GREATER_THAN_UPPER = "{0} cannot be greater than {1}"
STREAM_DOES_NOT_SUPPORT_READING = "The stream does not support reading."
STREAM_DOES_NOT_SUPPORT_WRITING = "The stream does not support writing."
COLLECTION_IS_READ_ONLY = "Collection is read-only. Try using {0} instead."

# ============================================================================
#                           General errors
# ============================================================================


class XtendError(Exception):
    """Base class for errors raised by xtend helpers."""


class ArgumentNoneError(XtendError, TypeError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Argument '{argument}' cannot be None.")
        self.argument = argument


class ArgumentOutOfRangeError(XtendError, ValueError):
    """Raised when an argument falls outside its valid range."""

    def __init__(
        self, argument: str, value: object, message: str | None = None
    ) -> None:
        super().__init__(
            message or f"Argument '{argument}' is out of range (got {value!r})."
        )
        self.argument = argument
        self.value = value


class DestinationTooShortError(XtendError, ValueError):
    """Raised when a caller-supplied buffer cannot hold the result."""

    def __init__(self, argument: str, required: int, actual: int) -> None:
        super().__init__(
            f"{DESTINATION_TOO_SHORT} '{argument}' needs {required} "
            f"element(s) but has {actual}."
        )
        self.argument = argument
        self.required = required
        self.actual = actual


class EmptySourceError(XtendError, ValueError):
    """Raised when a sequence that must contain elements is empty."""

    def __init__(self) -> None:
        super().__init__(SOURCE_CONTAINS_NO_ELEMENTS)


class InvalidTypeError(XtendError, TypeError):
    """Raised when comparing a value type against an unrelated object."""

    def __init__(self, obj: object) -> None:
        super().__init__(f"{OBJECT_IS_NOT_A_VALID_TYPE} ({type(obj).__name__})")
        self.obj = obj


class ReadOnlyCollectionError(XtendError, TypeError):
    """Raised when a mutating helper is handed an immutable collection."""

    def __init__(self, alternative: str) -> None:
        super().__init__(COLLECTION_IS_READ_ONLY.format(alternative))
        self.alternative = alternative


# ============================================================================
#                           Stream errors
# ============================================================================


class StreamNotReadableError(XtendError, ValueError):
    """Raised when reading from a stream that does not support reading."""

    def __init__(self) -> None:
        super().__init__(STREAM_DOES_NOT_SUPPORT_READING)


class StreamNotWritableError(XtendError, ValueError):
    """Raised when writing to a stream that does not support writing."""

    def __init__(self) -> None:
        super().__init__(STREAM_DOES_NOT_SUPPORT_WRITING)


# ============================================================================
#                           Time errors
# ============================================================================


class YearZeroError(ArgumentOutOfRangeError):
    """Raised for year ``0``, which does not exist in the Gregorian calendar."""

    def __init__(self) -> None:
        super().__init__("year", 0, YEAR_CANNOT_BE_ZERO)


# ============================================================================
#                           Validation helpers
# ============================================================================


def require_not_none(value: T | None, argument: str) -> T:
    """Return *value* unchanged, or raise if it is ``None``.

    Args:
        value: The argument value to check.
        argument: The argument name reported in the error.

    Returns:
        The unchanged value.

    Raises:
        ArgumentNoneError: If *value* is ``None``.
    """
    if value is None:
        raise ArgumentNoneError(argument)
    return value


def require_non_negative(
    value: int, argument: str, message: str | None = None
) -> int:
    """Return *value* unchanged, or raise if it is negative.

    Raises:
        ArgumentOutOfRangeError: If *value* is less than zero.
    """
    if value < 0:
        raise ArgumentOutOfRangeError(
            argument, value, message or VALUE_CANNOT_BE_NEGATIVE
        )
    return value
