"""User-facing exceptions for failed requests."""

REQUEST_FAILED_MESSAGE = "Het ophalen van gegevens is misgegaan."
REQUEST_TIMEOUT_MESSAGE = "Het ophalen van gegevens duurt te lang."


class APIError(Exception):
    """Base exception for API errors."""

    pass


class RequestFailedError(APIError):
    """Generic request failure.

    The message is fixed regardless of the underlying cause so callers get a
    stable error contract. The cause is logged, not attached.
    """

    def __init__(self, message: str = REQUEST_FAILED_MESSAGE):
        super().__init__(message)


class RequestTimeoutError(RequestFailedError):
    """The client gave up waiting for a response."""

    def __init__(self, message: str = REQUEST_TIMEOUT_MESSAGE):
        super().__init__(message)
