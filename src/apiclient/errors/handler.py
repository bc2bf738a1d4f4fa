"""Error classification utilities for failed requests."""

import logging
import ssl

import httpx

from apiclient.errors.models import FailureKind, TransportFailure

logger = logging.getLogger(__name__)

# Timeouts raised after the connection was established; the client aborted
# while sending or waiting. ConnectTimeout is a connection failure instead.
CLIENT_ABORT_TIMEOUTS: tuple[type[httpx.TimeoutException], ...] = (
    httpx.ReadTimeout,
    httpx.WriteTimeout,
    httpx.PoolTimeout,
)

# Exceptions that count as transport failures when raised while sending.
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (httpx.HTTPError, httpx.InvalidURL, ssl.SSLError)


def classify_failure(error: Exception) -> TransportFailure:
    """Classify a transport exception for diagnostics.

    Args:
        error: Exception raised while building or sending a request

    Returns:
        TransportFailure describing the failure
    """
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        return TransportFailure(
            kind=FailureKind.STATUS,
            message=str(error),
            status_code=response.status_code,
            response_text=response.text[:200] or None,
        )

    if isinstance(error, CLIENT_ABORT_TIMEOUTS):
        return TransportFailure(
            kind=FailureKind.TIMEOUT,
            message=str(error),
            connection_error_code=type(error).__name__,
        )

    if isinstance(error, httpx.TransportError) and not isinstance(error, httpx.UnsupportedProtocol):
        return TransportFailure(
            kind=FailureKind.CONNECTION,
            message=str(error),
            connection_error_code=type(error).__name__,
        )

    return TransportFailure(kind=FailureKind.SETUP, message=str(error) or type(error).__name__)


def log_failure(failure: TransportFailure, url: str | None) -> None:
    """Log a classified failure at error level."""
    logger.error(failure.to_log_message(url))
