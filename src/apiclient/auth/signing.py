"""AWS Signature Version 4 request signing."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace

import httpx

from apiclient.auth.base import Authenticator
from apiclient.auth.credentials import CredentialResolver
from apiclient.transport.options import RequestOptions
from apiclient.transport.sigv4 import SigV4Signer

logger = logging.getLogger(__name__)

ACCESS_KEY_ID_SUFFIX = "_ACCESS_KEY_ID"
SECRET_KEY_SUFFIX = "_SECRET_KEY"

DEFAULT_REGION = "eu-west-1"
DEFAULT_SERVICE = "execute-api"


@dataclass(frozen=True)
class SigningCredentials:
    access_key_id: str | None = None
    secret_key: str | None = None

    @property
    def complete(self) -> bool:
        return bool(self.access_key_id and self.secret_key)


class RequestSigningAuthenticator(Authenticator):
    """Sign requests with AWS SigV4 (e.g. for IAM-protected API Gateway endpoints).

    Both keys are secrets whose ids are in ``{prefix}_ACCESS_KEY_ID`` and
    ``{prefix}_SECRET_KEY``. All work happens in ``configure_client``, which
    registers a signing hook on the client; requests themselves are not changed.
    """

    def __init__(
        self,
        access_key_id: str | None = None,
        secret_key: str | None = None,
        region: str = DEFAULT_REGION,
        service: str = DEFAULT_SERVICE,
        *,
        resolver: CredentialResolver | None = None,
    ):
        super().__init__(resolver)
        self.credentials = SigningCredentials(access_key_id, secret_key)
        self.region = region
        self.service = service

    @property
    def initialized(self) -> bool:
        return self.credentials.complete

    async def _resolve(self, env_prefix: str, environ: Mapping[str, str]) -> None:
        credentials = self.credentials

        if not credentials.access_key_id:
            access_key_id = await self._secret_from_env(environ, env_prefix, ACCESS_KEY_ID_SUFFIX)
            credentials = replace(credentials, access_key_id=access_key_id)

        if not credentials.secret_key:
            secret_key = await self._secret_from_env(environ, env_prefix, SECRET_KEY_SUFFIX)
            credentials = replace(credentials, secret_key=secret_key)

        self.credentials = credentials

    def configure_client(self, client: httpx.AsyncClient) -> httpx.AsyncClient:
        credentials = self.credentials
        if not credentials.complete:
            raise self._not_initialized()

        signer = SigV4Signer(
            access_key_id=credentials.access_key_id,
            secret_key=credentials.secret_key,
            region=self.region,
            service=self.service,
        )
        hooks = client.event_hooks
        hooks["request"] = [*hooks.get("request", []), signer]
        client.event_hooks = hooks
        logger.debug(f"Registered SigV4 signing hook ({self.service}, {self.region})")
        return client

    def configure_request(self, options: RequestOptions) -> RequestOptions:
        return options
