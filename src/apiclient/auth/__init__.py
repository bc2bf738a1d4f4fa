"""Authentication components for API clients.

This module provides:
- Credential resolution against a secret/parameter store
- Authenticators for mutual TLS, static API keys and AWS SigV4 signing

Example:
    ```python
    from apiclient.auth import ApiKeyAuthenticator, MutualTLSAuthenticator

    authenticators = [MutualTLSAuthenticator(), ApiKeyAuthenticator(header_name="x-api-key")]
    ```
"""

from apiclient.auth.api_key import ApiKeyAuthenticator
from apiclient.auth.base import Authenticator
from apiclient.auth.credentials import CredentialResolver
from apiclient.auth.exceptions import (
    CredentialConfigurationError,
    CredentialError,
    MissingIdentifierError,
    NotInitializedError,
    SecretNotFoundError,
)
from apiclient.auth.mtls import MutualTLSAuthenticator
from apiclient.auth.signing import RequestSigningAuthenticator
from apiclient.auth.store import AwsCredentialStore, CredentialStore

__all__ = [
    "ApiKeyAuthenticator",
    "Authenticator",
    "AwsCredentialStore",
    "CredentialConfigurationError",
    "CredentialError",
    "CredentialResolver",
    "CredentialStore",
    "MissingIdentifierError",
    "MutualTLSAuthenticator",
    "NotInitializedError",
    "RequestSigningAuthenticator",
    "SecretNotFoundError",
]
