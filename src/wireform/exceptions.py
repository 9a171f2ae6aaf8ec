"""src/wireform/exceptions.py

Wireform Exceptions hierarchy.
"""

from typing import Any, Optional

__all__ = ["WireformError", "SerializationError", "DeserializationError"]


class WireformError(Exception):
    """Base exception for all Wireform errors."""


class SerializationError(WireformError):
    """
    Raised when a value cannot be converted to its wire representation.

    Attributes:
        cause: The lower-level failure (also chained as ``__cause__``).
        data: Reference to the input that triggered the failure.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.data = data


class DeserializationError(WireformError):
    """
    Raised when wire text cannot be converted back to a value.

    Attributes:
        cause: The lower-level failure (also chained as ``__cause__``).
        data: The raw text that failed to parse.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.data = data
