"""Request options passed through the authenticator fold."""

import ssl
from dataclasses import dataclass, field, fields, replace
from typing import Any


@dataclass(frozen=True)
class RequestOptions:
    """Everything needed to send one request.

    Options are treated as values: authenticators return updated copies
    (``dataclasses.replace``) and never mutate the instance they receive.

    Attributes:
        method: HTTP method. Defaults to GET when unset at send time.
        url: Absolute URL, or a path relative to ``base_url``.
        base_url: Optional base URL for the client.
        body: Request body. ``str``/``bytes`` are sent as-is, anything else as JSON.
        headers: Request headers. Merged additively across defaults and overrides.
        params: Query parameters.
        timeout: Timeout in seconds for the whole request.
        ssl_context: TLS configuration (client certificate, trusted CA) for the client.
    """

    method: str | None = None
    url: str | None = None
    base_url: str | None = None
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] | None = None
    timeout: float | None = None
    ssl_context: ssl.SSLContext | None = None

    def with_header(self, name: str, value: str) -> "RequestOptions":
        """Return a copy with one header set (overriding any existing value)."""
        return replace(self, headers={**self.headers, name: value})


def merge_request_options(defaults: RequestOptions | None, overrides: RequestOptions) -> RequestOptions:
    """Merge default options with per-call options.

    Per-call values win for every field that is set (not None). Header maps
    merge additively, with per-call headers winning on collision.
    """
    if defaults is None:
        return replace(overrides, headers=dict(overrides.headers))

    merged = {}
    for f in fields(RequestOptions):
        if f.name == "headers":
            continue
        value = getattr(overrides, f.name)
        merged[f.name] = value if value is not None else getattr(defaults, f.name)

    return RequestOptions(headers={**defaults.headers, **overrides.headers}, **merged)
