"""Testing utilities for API clients.

This module provides an in-memory credential store and a mock transport
factory, so clients can be exercised without AWS or network access.

Example:
    ```python
    import httpx

    from apiclient import ApiKeyAuthenticator, ConfigurableClient, CredentialResolver
    from apiclient.testing import InMemoryCredentialStore, create_mock_transport

    store = InMemoryCredentialStore(secrets={"key-arn": "s3cr3t"}, parameters={"header-name": "x-api-key"})
    transport = create_mock_transport({("GET", "/items"): httpx.Response(200, json=[])})

    client = ConfigurableClient(
        "TEST_CLIENT",
        ApiKeyAuthenticator(resolver=CredentialResolver(store)),
        environ={"TEST_CLIENT_API_KEY": "key-arn", "TEST_CLIENT_API_KEY_HEADER": "header-name"},
        transport=transport,
    )
    ```
"""

from collections.abc import Callable, Mapping

import httpx


class InMemoryCredentialStore:
    """Credential store backed by dictionaries.

    Every lookup is recorded in ``calls`` as ``(kind, identifier)`` with kind
    ``"secret"`` or ``"parameter"``.
    """

    def __init__(
        self,
        secrets: Mapping[str, str | None] | None = None,
        parameters: Mapping[str, str | None] | None = None,
    ):
        self.secrets = dict(secrets or {})
        self.parameters = dict(parameters or {})
        self.calls: list[tuple[str, str]] = []

    async def get_secret(self, identifier: str) -> str | None:
        self.calls.append(("secret", identifier))
        return self.secrets.get(identifier)

    async def get_parameter(self, name: str) -> str | None:
        self.calls.append(("parameter", name))
        return self.parameters.get(name)


MockReply = httpx.Response | Exception | Callable[[httpx.Request], httpx.Response]


def create_mock_transport(routes: Mapping[tuple[str, str], MockReply]) -> httpx.MockTransport:
    """Create a MockTransport answering by ``(method, path)``.

    Each reply is a response, an exception to raise (with the request
    attached for httpx errors), or a callable taking the request. Unknown
    routes answer 404.

    Every handled request is appended to ``transport.requests``.
    """
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        reply = routes.get((request.method, request.url.path))
        if reply is None:
            return httpx.Response(404, json={"error": "Not Found"})
        if isinstance(reply, httpx.RequestError):
            reply.request = request
            raise reply
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, httpx.Response):
            # fresh copy; a response object can only be consumed once
            return httpx.Response(reply.status_code, headers=reply.headers, content=reply.content)
        return reply(request)

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport


__all__ = ["InMemoryCredentialStore", "create_mock_transport"]
