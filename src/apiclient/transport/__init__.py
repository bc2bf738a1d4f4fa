"""Transport layer components.

Modules:
    options: Request options and merge rules
    factory: httpx client construction and request execution
    tls: SSL contexts from in-memory PEM material
    sigv4: AWS SigV4 request-signing hook

Example:
    ```python
    from apiclient.transport import RequestOptions, build_http_client, send_request

    options = RequestOptions(method="GET", url="https://api.example.com/items")
    async with build_http_client(options) as client:
        response = await send_request(client, options)
    ```
"""

from apiclient.transport.factory import build_http_client, parse_response_body, send_request
from apiclient.transport.options import RequestOptions, merge_request_options

__all__ = [
    "RequestOptions",
    "build_http_client",
    "merge_request_options",
    "parse_response_body",
    "send_request",
]
