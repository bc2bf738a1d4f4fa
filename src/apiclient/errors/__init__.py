"""Error handling for API clients."""

from apiclient.errors.exceptions import (
    REQUEST_FAILED_MESSAGE,
    REQUEST_TIMEOUT_MESSAGE,
    APIError,
    RequestFailedError,
    RequestTimeoutError,
)
from apiclient.errors.handler import classify_failure, log_failure
from apiclient.errors.models import FailureKind, TransportFailure

__all__ = [
    "REQUEST_FAILED_MESSAGE",
    "REQUEST_TIMEOUT_MESSAGE",
    "APIError",
    "FailureKind",
    "RequestFailedError",
    "RequestTimeoutError",
    "TransportFailure",
    "classify_failure",
    "log_failure",
]
