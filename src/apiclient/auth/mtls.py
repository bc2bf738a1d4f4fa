"""Mutual-TLS client certificate authentication."""

import logging
import ssl
from collections.abc import Mapping
from dataclasses import dataclass, replace

from apiclient.auth.base import Authenticator
from apiclient.auth.credentials import CredentialResolver
from apiclient.config import lookup_identifier
from apiclient.transport.options import RequestOptions
from apiclient.transport.tls import create_ssl_context

logger = logging.getLogger(__name__)

PRIVATE_KEY_SUFFIX = "_PRIVATE_KEY_ARN"
CERT_PARAMETER_SUFFIX = "_CERT_SSM_NAME"
CA_PARAMETER_SUFFIX = "_ROOT_CERT_SSM_NAME"


@dataclass(frozen=True)
class MutualTLSCredentials:
    certificate: str | None = None
    private_key: str | None = None
    certificate_authority: str | None = None

    @property
    def complete(self) -> bool:
        return bool(self.certificate and self.private_key and self.certificate_authority)


class MutualTLSAuthenticator(Authenticator):
    """Present a client certificate on every request.

    Credentials not passed explicitly are resolved by ``initialize``:

    - private key: secret whose id is in ``{prefix}_PRIVATE_KEY_ARN``
    - certificate: parameter named ``certificate_parameter_name``, or the name
      in ``{prefix}_CERT_SSM_NAME``
    - CA bundle: parameter named ``ca_parameter_name``, or the name in
      ``{prefix}_ROOT_CERT_SSM_NAME``

    Example:
        ```python
        client = ConfigurableClient("MY_API", MutualTLSAuthenticator())
        await client.init()
        ```
    """

    def __init__(
        self,
        certificate: str | None = None,
        private_key: str | None = None,
        certificate_authority: str | None = None,
        *,
        certificate_parameter_name: str | None = None,
        ca_parameter_name: str | None = None,
        resolver: CredentialResolver | None = None,
    ):
        super().__init__(resolver)
        self.credentials = MutualTLSCredentials(certificate, private_key, certificate_authority)
        self.certificate_parameter_name = certificate_parameter_name
        self.ca_parameter_name = ca_parameter_name
        self._ssl_context: ssl.SSLContext | None = None
        self._ssl_context_credentials: MutualTLSCredentials | None = None

    @property
    def initialized(self) -> bool:
        return self.credentials.complete

    async def _resolve(self, env_prefix: str, environ: Mapping[str, str]) -> None:
        credentials = self.credentials

        if not credentials.private_key:
            private_key = await self._secret_from_env(environ, env_prefix, PRIVATE_KEY_SUFFIX)
            credentials = replace(credentials, private_key=private_key)

        if not credentials.certificate:
            name = self.certificate_parameter_name or lookup_identifier(environ, env_prefix, CERT_PARAMETER_SUFFIX)
            credentials = replace(credentials, certificate=await self._parameter(name))

        if not credentials.certificate_authority:
            name = self.ca_parameter_name or lookup_identifier(environ, env_prefix, CA_PARAMETER_SUFFIX)
            credentials = replace(credentials, certificate_authority=await self._parameter(name))

        self.credentials = credentials
        logger.debug(f"MutualTLSAuthenticator resolved for {env_prefix} (complete: {credentials.complete})")

    def configure_request(self, options: RequestOptions) -> RequestOptions:
        credentials = self.credentials
        if not credentials.complete:
            raise self._not_initialized()
        return replace(options, ssl_context=self._ssl_context_for(credentials))

    def _ssl_context_for(self, credentials: MutualTLSCredentials) -> ssl.SSLContext:
        """Return the SSL context for these credentials, building it on first use."""
        if self._ssl_context is None or self._ssl_context_credentials != credentials:
            self._ssl_context = create_ssl_context(
                certificate=credentials.certificate,
                private_key=credentials.private_key,
                certificate_authority=credentials.certificate_authority,
            )
            self._ssl_context_credentials = credentials
        return self._ssl_context
