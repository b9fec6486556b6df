"""Tests for lookup error messages."""

import unittest

from domain.model.errors import (
    DecodeError,
    DictionaryLookupError,
    DomainError,
    NotFoundError,
    ServiceError,
    TransportError,
)


class TestLookupErrors(unittest.TestCase):

    def test_not_found_message(self):
        self.assertEqual(NotFoundError().message, "Couldn't find word.")
        self.assertEqual(str(NotFoundError()), "Couldn't find word.")

    def test_service_message(self):
        self.assertEqual(ServiceError().message, "Something went wrong.")

    def test_transport_wraps_cause(self):
        cause = ConnectionError("connection refused")
        error = TransportError(cause)

        self.assertIs(error.cause, cause)
        self.assertEqual(error.message, "connection refused")

    def test_transport_falls_back_to_type_name(self):
        """Test causes with an empty message still produce text."""
        self.assertEqual(TransportError(TimeoutError()).message, "TimeoutError")

    def test_decode_wraps_cause(self):
        cause = ValueError("Expecting value")
        error = DecodeError(cause)

        self.assertIs(error.cause, cause)
        self.assertEqual(error.message, "Expecting value")

    def test_hierarchy(self):
        for error_type in (TransportError, NotFoundError, ServiceError, DecodeError):
            self.assertTrue(issubclass(error_type, DictionaryLookupError))
        self.assertTrue(issubclass(DictionaryLookupError, DomainError))
