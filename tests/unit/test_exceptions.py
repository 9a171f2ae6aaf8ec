"""tests/unit/test_exceptions.py"""

import pytest

from wireform.exceptions import (
    DeserializationError,
    SerializationError,
    WireformError,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of Wireform exceptions."""
    assert issubclass(WireformError, Exception)
    assert issubclass(SerializationError, WireformError)
    assert issubclass(DeserializationError, WireformError)
    assert not issubclass(SerializationError, DeserializationError)


@pytest.mark.parametrize("exception_class", [SerializationError, DeserializationError])
def test_carries_cause_and_data(exception_class):
    """Verify that errors keep the original failure and input."""
    cause = ValueError("boom")
    data = {"hello": "world"}
    error = exception_class("boom", cause=cause, data=data)
    assert str(error) == "boom"
    assert error.cause is cause
    assert error.data is data


@pytest.mark.parametrize("exception_class", [SerializationError, DeserializationError])
def test_defaults(exception_class):
    """Verify that cause and data default to None."""
    error = exception_class("message")
    assert error.cause is None
    assert error.data is None


def test_base_accepts_message():
    """Verify that the base exception can be raised with a message."""
    with pytest.raises(WireformError) as exc_info:
        raise WireformError("Testing WireformError")
    assert "Testing WireformError" in str(exc_info.value)
