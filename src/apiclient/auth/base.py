"""Authenticator interface.

An authenticator contributes one way of authenticating outbound requests.
It has three steps:

1. ``initialize`` resolves missing credentials once, from store identifiers
   found in the environment.
2. ``configure_client`` adjusts the per-request ``httpx.AsyncClient``
   (e.g. registers a signing hook).
3. ``configure_request`` returns updated request options (e.g. adds a header).

``ConfigurableClient`` applies each step for every authenticator in list
order and never needs to know which variant it is talking to.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping

import httpx

from apiclient.auth.credentials import CredentialResolver
from apiclient.auth.exceptions import NotInitializedError
from apiclient.config import env_var_name, load_environment, lookup_identifier
from apiclient.transport.options import RequestOptions

logger = logging.getLogger(__name__)


class Authenticator(ABC):
    """Base class for authentication strategies.

    Subclasses keep their credentials in an immutable record and replace it
    during ``initialize``. Once ``initialized`` is True, ``initialize`` is a
    no-op.

    Args:
        resolver: Credential resolver used for store lookups. Defaults to a
            resolver backed by AWS Secrets Manager and Parameter Store.
    """

    def __init__(self, resolver: CredentialResolver | None = None):
        self._resolver = resolver

    @property
    def resolver(self) -> CredentialResolver:
        if self._resolver is None:
            self._resolver = CredentialResolver()
        return self._resolver

    @property
    @abstractmethod
    def initialized(self) -> bool:
        """Whether every required credential is available."""

    async def initialize(self, env_prefix: str, environ: Mapping[str, str] | None = None) -> None:
        """Resolve credentials that were not supplied explicitly.

        Args:
            env_prefix: Namespace prefix for environment variable names.
            environ: Mapping to read identifiers from. Defaults to the process
                environment, after loading a .env file.

        Raises:
            MissingIdentifierError: A required identifier is not configured.
            SecretNotFoundError: The store returned no value for a secret.
        """
        if self.initialized:
            logger.debug(f"{type(self).__name__} already initialized, skipping")
            return
        await self._resolve(env_prefix, load_environment() if environ is None else environ)

    @abstractmethod
    async def _resolve(self, env_prefix: str, environ: Mapping[str, str]) -> None:
        """Populate missing credentials."""

    def configure_client(self, client: httpx.AsyncClient) -> httpx.AsyncClient:
        """Adjust the HTTP client. The default leaves it untouched."""
        return client

    @abstractmethod
    def configure_request(self, options: RequestOptions) -> RequestOptions:
        """Return request options updated with this authenticator's contribution."""

    async def _secret_from_env(self, environ: Mapping[str, str], env_prefix: str, suffix: str) -> str:
        """Resolve a required secret whose id is stored in ``{env_prefix}{suffix}``."""
        return await self.resolver.resolve_secret(
            lookup_identifier(environ, env_prefix, suffix),
            env_var_name=env_var_name(env_prefix, suffix),
        )

    async def _parameter(self, name: str | None) -> str | None:
        """Resolve an optional parameter; an unknown name leaves it unset."""
        if not name:
            return None
        return await self.resolver.resolve_parameter(name)

    def _not_initialized(self) -> NotInitializedError:
        name = type(self).__name__
        return NotInitializedError(f"{name} is not initialized", authenticator=name)
