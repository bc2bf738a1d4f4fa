"""Configurable API client composed from authenticators."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from apiclient.auth.base import Authenticator
from apiclient.config import load_environment
from apiclient.errors.exceptions import RequestFailedError
from apiclient.errors.handler import TRANSPORT_ERRORS, classify_failure, log_failure
from apiclient.errors.models import TransportFailure
from apiclient.telemetry import log_duration
from apiclient.transport.factory import build_http_client, parse_response_body, send_request
from apiclient.transport.options import RequestOptions, merge_request_options

logger = logging.getLogger(__name__)


class ConfigurableClient:
    """HTTP client for one upstream API, authenticated by a list of authenticators.

    Authenticators are initialized, and applied to clients and requests, in
    the order they were passed in. When two authenticators write the same
    header, the later one wins.

    Args:
        env_prefix: Namespace prefix for the environment variables holding
            credential identifiers (``FOO`` -> ``FOO_API_KEY``, ...).
        *authenticators: Authentication strategies, applied in order.
        default_request_options: Options merged under every request.
        environ: Mapping to read identifiers from. Defaults to the process
            environment (after loading a .env file) at ``init()`` time.
        transport: Optional httpx transport for every request, e.g.
            ``httpx.MockTransport`` in tests.

    Example:
        ```python
        client = ConfigurableClient(
            "BRP",
            MutualTLSAuthenticator(),
            ApiKeyAuthenticator(),
            default_request_options=RequestOptions(base_url="https://brp.example.nl"),
        )
        await client.init()
        data = await client.request_data(RequestOptions(method="POST", url="/personen", body={...}))
        ```
    """

    def __init__(
        self,
        env_prefix: str,
        *authenticators: Authenticator,
        default_request_options: RequestOptions | None = None,
        environ: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._env_prefix = env_prefix
        self._authenticators = tuple(authenticators)
        self.default_request_options = default_request_options
        self._environ = environ
        self._transport = transport

    @property
    def env_prefix(self) -> str:
        return self._env_prefix

    @property
    def authenticators(self) -> tuple[Authenticator, ...]:
        return self._authenticators

    @property
    def initialized(self) -> bool:
        return all(a.initialized for a in self._authenticators)

    async def init(self) -> None:
        """Initialize all authenticators, one after the other.

        The first failure propagates; later authenticators are not touched.
        """
        environ = self._environ if self._environ is not None else load_environment()
        for authenticator in self._authenticators:
            await authenticator.initialize(self._env_prefix, environ)
        logger.debug(f"Initialized {len(self._authenticators)} authenticator(s) for {self._env_prefix}")

    def _configure_request(self, options: RequestOptions) -> RequestOptions:
        """Let every authenticator configure the merged request options."""
        configured = merge_request_options(self.default_request_options, options)
        for authenticator in self._authenticators:
            configured = authenticator.configure_request(configured)
        return configured

    def _create_client(self, options: RequestOptions) -> httpx.AsyncClient:
        """Build a fresh client and let every authenticator configure it."""
        client = build_http_client(options, transport=self._transport)
        for authenticator in self._authenticators:
            client = authenticator.configure_client(client)
        return client

    def _request_failed(self, failure: TransportFailure) -> RequestFailedError:
        return RequestFailedError()

    async def request_data(self, options: RequestOptions) -> Any:
        """Send an authenticated request and return the parsed response body.

        Args:
            options: Per-call request options, merged over the defaults.

        Returns:
            Decoded JSON body, or the text body for non-JSON responses.

        Raises:
            NotInitializedError: An authenticator has no credentials yet.
            RequestFailedError: The request failed for any transport reason.
        """
        url = options.url
        with log_duration(f"request to {url}"):
            try:
                request = self._configure_request(options)
                async with self._create_client(request) as client:
                    response = await send_request(client, request)
                return parse_response_body(response)
            except TRANSPORT_ERRORS as error:
                failure = classify_failure(error)
                log_failure(failure, url)
                raise self._request_failed(failure) from None
