"""apiclient - Authenticated HTTP API clients.

This library assembles authenticated httpx requests from pluggable strategies:
- Mutual TLS client certificates
- Static API keys in a header
- AWS Signature Version 4 request signing
- Lazy credential resolution from AWS Secrets Manager / SSM Parameter Store

Example:
    ```python
    from apiclient import ApiKeyAuthenticator, ConfigurableClient, MutualTLSAuthenticator, RequestOptions

    # FOO_PRIVATE_KEY_ARN, FOO_CERT_SSM_NAME, FOO_ROOT_CERT_SSM_NAME,
    # FOO_API_KEY and FOO_API_KEY_HEADER hold store identifiers
    client = ConfigurableClient("FOO", MutualTLSAuthenticator(), ApiKeyAuthenticator())
    await client.init()

    data = await client.request_data(RequestOptions(method="GET", url="https://api.example.com/items"))
    ```
"""

from apiclient.auth import (
    ApiKeyAuthenticator,
    Authenticator,
    AwsCredentialStore,
    CredentialResolver,
    MutualTLSAuthenticator,
    RequestSigningAuthenticator,
)
from apiclient.client import ConfigurableClient
from apiclient.errors import RequestFailedError, RequestTimeoutError
from apiclient.legacy import ApiClient
from apiclient.transport import RequestOptions

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ApiKeyAuthenticator",
    "Authenticator",
    "AwsCredentialStore",
    "ConfigurableClient",
    "CredentialResolver",
    "MutualTLSAuthenticator",
    "RequestFailedError",
    "RequestOptions",
    "RequestSigningAuthenticator",
    "RequestTimeoutError",
    "__version__",
]
