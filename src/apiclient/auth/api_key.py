"""Static API key authentication."""

from collections.abc import Mapping
from dataclasses import dataclass, replace

from apiclient.auth.base import Authenticator
from apiclient.auth.credentials import CredentialResolver
from apiclient.config import lookup_identifier
from apiclient.transport.options import RequestOptions

API_KEY_SUFFIX = "_API_KEY"
API_KEY_HEADER_SUFFIX = "_API_KEY_HEADER"


@dataclass(frozen=True)
class ApiKeyCredentials:
    api_key: str | None = None
    header_name: str | None = None

    @property
    def complete(self) -> bool:
        return bool(self.api_key and self.header_name)


class ApiKeyAuthenticator(Authenticator):
    """Send a static API key in a request header.

    The key is a secret whose id is in ``{prefix}_API_KEY``; the header name
    is a parameter whose name is in ``{prefix}_API_KEY_HEADER``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        header_name: str | None = None,
        *,
        resolver: CredentialResolver | None = None,
    ):
        super().__init__(resolver)
        self.credentials = ApiKeyCredentials(api_key, header_name)

    @property
    def initialized(self) -> bool:
        return self.credentials.complete

    async def _resolve(self, env_prefix: str, environ: Mapping[str, str]) -> None:
        credentials = self.credentials

        if not credentials.api_key:
            api_key = await self._secret_from_env(environ, env_prefix, API_KEY_SUFFIX)
            credentials = replace(credentials, api_key=api_key)

        if not credentials.header_name:
            header_name = await self._parameter(lookup_identifier(environ, env_prefix, API_KEY_HEADER_SUFFIX))
            credentials = replace(credentials, header_name=header_name)

        self.credentials = credentials

    def configure_request(self, options: RequestOptions) -> RequestOptions:
        credentials = self.credentials
        if not credentials.complete:
            raise self._not_initialized()
        return options.with_header(credentials.header_name, credentials.api_key)
