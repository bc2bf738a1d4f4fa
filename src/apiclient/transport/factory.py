"""httpx client construction and request execution.

A fresh ``httpx.AsyncClient`` is built for every request. TLS settings are
fixed when an httpx client is created, so the client is built from the
already-configured request options.
"""

import logging
from typing import Any

import httpx

from apiclient.transport.options import RequestOptions

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "GET"


def build_http_client(
    options: RequestOptions,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an AsyncClient for the given request options.

    Args:
        options: Final request options. ``ssl_context`` and ``base_url`` are
            applied at client level.
        transport: Optional transport to use instead of httpx's default
            (e.g. ``httpx.MockTransport`` in tests).

    Returns:
        A new, unopened AsyncClient.
    """
    kwargs: dict[str, Any] = {}
    if options.base_url:
        kwargs["base_url"] = options.base_url
    if options.ssl_context is not None:
        kwargs["verify"] = options.ssl_context
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)


def _body_kwargs(body: Any) -> dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, (str, bytes)):
        return {"content": body}
    return {"json": body}


async def send_request(client: httpx.AsyncClient, options: RequestOptions) -> httpx.Response:
    """Send the request described by options and raise for non-2xx responses.

    Raises:
        httpx.HTTPStatusError: For non-2xx responses.
        httpx.HTTPError: For any other transport failure.
    """
    timeout = options.timeout if options.timeout is not None else httpx.USE_CLIENT_DEFAULT
    response = await client.request(
        options.method or DEFAULT_METHOD,
        options.url or "",
        headers=options.headers or None,
        params=options.params,
        timeout=timeout,
        **_body_kwargs(options.body),
    )
    response.raise_for_status()
    return response


def parse_response_body(response: httpx.Response) -> Any:
    """Return the decoded JSON body, or the text body when it is not JSON.

    The content-type header is not consulted; upstreams that send JSON as
    ``text/plain`` still yield decoded data.
    """
    if not response.content:
        return response.text
    try:
        return response.json()
    except ValueError:
        logger.debug("Response body is not JSON, returning text")
        return response.text
