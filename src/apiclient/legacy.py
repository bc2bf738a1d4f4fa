"""Mutual-TLS API client with a fixed environment contract.

``ApiClient`` predates ``ConfigurableClient`` and is kept for existing
integrations. It wraps a ``ConfigurableClient`` wired to exactly one
``MutualTLSAuthenticator`` and reads its identifiers from fixed, unprefixed
environment variables:

    MTLS_PRIVATE_KEY_ARN   secret id of the client private key
    MTLS_CLIENT_CERT_NAME  parameter name of the client certificate
    MTLS_ROOT_CA_NAME      parameter name of the CA bundle

New code should use ``ConfigurableClient`` directly.
"""

import logging
import warnings
from collections.abc import Mapping
from typing import Any

import httpx

from apiclient.auth.credentials import CredentialResolver
from apiclient.auth.exceptions import CredentialConfigurationError
from apiclient.auth.mtls import MutualTLSAuthenticator
from apiclient.client import ConfigurableClient
from apiclient.config import load_environment
from apiclient.errors.exceptions import RequestFailedError, RequestTimeoutError
from apiclient.errors.models import FailureKind, TransportFailure
from apiclient.transport.options import RequestOptions

logger = logging.getLogger(__name__)

ENV_PREFIX = "MTLS"
CERT_NAME_ENV_VAR = "MTLS_CLIENT_CERT_NAME"
CA_NAME_ENV_VAR = "MTLS_ROOT_CA_NAME"

DEFAULT_TIMEOUT = 2.0  # seconds


class _TimeoutAwareClient(ConfigurableClient):
    """ConfigurableClient that reports client-side timeouts separately."""

    def _request_failed(self, failure: TransportFailure) -> RequestFailedError:
        if failure.kind is FailureKind.TIMEOUT:
            return RequestTimeoutError()
        return super()._request_failed(failure)


class ApiClient:
    """Mutual-TLS client for a single API.

    Certificate, key and CA can be passed in directly; anything missing is
    resolved on ``init()``, or lazily on the first request.

    Args:
        certificate: PEM client certificate. Default: parameter named in MTLS_CLIENT_CERT_NAME.
        private_key: PEM private key. Default: secret whose id is in MTLS_PRIVATE_KEY_ARN.
        certificate_authority: PEM CA bundle. Default: parameter named in MTLS_ROOT_CA_NAME.
        transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
        environ: Mapping to read identifiers from. Defaults to the process
            environment, after loading a .env file.
        resolver: Credential resolver for store lookups.
        timeout: Timeout in seconds applied to every request (default: 2.0).

    Example:
        ```python
        client = ApiClient()
        data = await client.post_data("https://api.example.com/endpoint", {"bsn": "999999999"})
        ```
    """

    def __init__(
        self,
        certificate: str | None = None,
        private_key: str | None = None,
        certificate_authority: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        environ: Mapping[str, str] | None = None,
        resolver: CredentialResolver | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        environ = environ if environ is not None else load_environment()
        self._authenticator = MutualTLSAuthenticator(
            certificate,
            private_key,
            certificate_authority,
            certificate_parameter_name=environ.get(CERT_NAME_ENV_VAR) or None,
            ca_parameter_name=environ.get(CA_NAME_ENV_VAR) or None,
            resolver=resolver,
        )
        self._client = _TimeoutAwareClient(ENV_PREFIX, self._authenticator, environ=environ, transport=transport)
        self._timeout = timeout

    @classmethod
    async def from_parameter_store(
        cls,
        certificate_parameter_name: str,
        ca_parameter_name: str,
        private_key_secret_id: str,
        *,
        resolver: CredentialResolver | None = None,
        **kwargs: Any,
    ) -> "ApiClient":
        """Create a client with certificate, CA and key fetched up front.

        Args:
            certificate_parameter_name: Parameter name of the client certificate
            ca_parameter_name: Parameter name of the CA bundle
            private_key_secret_id: Secret id of the private key
            resolver: Credential resolver for the lookups
            **kwargs: Passed on to the constructor

        Returns:
            A fully initialized ApiClient
        """
        resolver = resolver if resolver is not None else CredentialResolver()
        certificate = await resolver.resolve_parameter(certificate_parameter_name)
        certificate_authority = await resolver.resolve_parameter(ca_parameter_name)
        private_key = await resolver.resolve_secret(private_key_secret_id)
        return cls(certificate, private_key, certificate_authority, resolver=resolver, **kwargs)

    @property
    def timeout(self) -> float:
        return self._timeout

    def set_timeout(self, timeout: float) -> None:
        """Set the per-request timeout in seconds."""
        self._timeout = timeout

    @property
    def initialized(self) -> bool:
        return self._client.initialized

    async def init(self) -> None:
        """Resolve key, certificate and CA.

        Calling this is optional: credentials are resolved on the first
        request otherwise.

        Raises:
            CredentialConfigurationError: Neither certificate and CA values nor
                both parameter names are available.
            MissingIdentifierError: MTLS_PRIVATE_KEY_ARN is not set.
            SecretNotFoundError: The private key secret has no value.
        """
        authenticator = self._authenticator
        credentials = authenticator.credentials
        has_names = authenticator.certificate_parameter_name and authenticator.ca_parameter_name
        has_values = credentials.certificate and credentials.certificate_authority
        if not has_names and not has_values:
            raise CredentialConfigurationError(
                "client certificate and CA, or parameter names for both, must be provided"
            )
        await self._client.init()

    async def _ensure_initialized(self) -> None:
        if not self._client.initialized:
            logger.debug("ApiClient not initialized, resolving credentials before first request")
            await self.init()

    async def post_data(self, endpoint: str, body: Any, headers: dict[str, str] | None = None) -> Any:
        """POST body to endpoint and return the parsed response body."""
        await self._ensure_initialized()
        return await self._client.request_data(
            RequestOptions(method="POST", url=endpoint, body=body, headers=headers or {}, timeout=self._timeout)
        )

    async def get_data(self, endpoint: str, headers: dict[str, str] | None = None) -> Any:
        """GET endpoint and return the parsed response body."""
        await self._ensure_initialized()
        return await self._client.request_data(
            RequestOptions(method="GET", url=endpoint, headers=headers or {}, timeout=self._timeout)
        )

    async def request_data(self, endpoint: str, body: Any, headers: dict[str, str] | None = None) -> Any:
        """POST body to endpoint.

        .. deprecated::
            Always performs a POST. Use ``post_data()`` (drop-in replacement)
            or ``get_data()``.
        """
        warnings.warn(
            "ApiClient.request_data() is deprecated; use post_data() or get_data()",
            DeprecationWarning,
            stacklevel=2,
        )
        return await self.post_data(endpoint, body, headers)
