"""Tests for custom exception hierarchy."""

import pytest

from simple_uploader.exceptions import (
    ConfigurationError,
    StorageError,
    UnsupportedOperation,
    UploaderError,
    ValidationError,
)


def test_uploader_error_base():
    """Test base UploaderError."""
    error = UploaderError("Test error", {"key": "value"})
    assert str(error) == "Test error"
    assert error.message == "Test error"
    assert error.details == {"key": "value"}


def test_details_default_to_empty_dict():
    assert UploaderError("boom").details == {}


def test_validation_error():
    """Test ValidationError."""
    error = ValidationError("Given file [a.png] is not valid.", {"file": "a.png"})
    assert isinstance(error, UploaderError)
    assert error.details == {"file": "a.png"}


def test_unsupported_operation_is_attribute_error():
    error = UnsupportedOperation("Call to undefined method Uploader.frobnicate()", {"method": "frobnicate"})
    assert isinstance(error, UploaderError)
    assert isinstance(error, AttributeError)
    assert error.message == "Call to undefined method Uploader.frobnicate()"


@pytest.mark.parametrize("exc_type", [ConfigurationError, ValidationError, UnsupportedOperation, StorageError])
def test_exception_inheritance(exc_type):
    """Test that specific errors inherit from base."""
    assert issubclass(exc_type, UploaderError)
