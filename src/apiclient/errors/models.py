"""Classification records for transport failures."""

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """Where a request failed."""

    STATUS = "status"  # server responded outside 2xx
    TIMEOUT = "timeout"  # client aborted while waiting for the response
    CONNECTION = "connection"  # no response (DNS, refused, connect timeout, ...)
    SETUP = "setup"  # request could not be built (bad URL, TLS material)


@dataclass(frozen=True)
class TransportFailure:
    """Diagnostic description of a failed request.

    Only used for logging; callers receive a generic error instead.
    """

    kind: FailureKind
    message: str
    status_code: int | None = None
    connection_error_code: str | None = None
    response_text: str | None = None

    @property
    def has_response(self) -> bool:
        return self.status_code is not None

    def to_log_message(self, url: str | None) -> str:
        """Convert the failure to a single log line."""
        target = url or "<unknown url>"
        if self.kind is FailureKind.STATUS:
            line = f"http status for {target}: {self.status_code}"
            if self.response_text:
                line += f" ({self.response_text})"
            return line
        if self.kind in (FailureKind.TIMEOUT, FailureKind.CONNECTION):
            return f"{self.kind.value} error for {target}: {self.connection_error_code}: {self.message}"
        return f"setup error for {target}: {self.message}"
