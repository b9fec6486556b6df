"""Domain-level exceptions.

Adapters raise these errors to express lookup failures.
The CLI catches them and maps them to a message and exit code.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class DictionaryLookupError(DomainError):
    """A dictionary lookup failed.

    Attributes:
        message: Human-readable text shown to the user.
        cause: Underlying library exception, if any.
    """

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)


class TransportError(DictionaryLookupError):
    """Connection, DNS or timeout failure before a response arrived."""

    def __init__(self, cause: BaseException):
        super().__init__(str(cause) or type(cause).__name__, cause)


class NotFoundError(DictionaryLookupError):
    """The service has no entry for the phrase (HTTP 404)."""

    default_message = "Couldn't find word."


class ServiceError(DictionaryLookupError):
    """The service answered with an unexpected non-200 status."""


class DecodeError(DictionaryLookupError):
    """The response body is not a valid list of word entries."""

    def __init__(self, cause: BaseException):
        super().__init__(str(cause), cause)
