"""Custom exceptions for credential resolution and authentication.

This module defines exceptions raised while authenticators resolve their
credentials and while they configure clients and requests.

Example:
    ```python
    from apiclient.auth.exceptions import MissingIdentifierError

    if not secret_arn:
        raise MissingIdentifierError("No secret identifier provided", env_var_name="FOO_API_KEY")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class MissingIdentifierError(CredentialError):
    """Raised when a store identifier is required but absent.

    Identifiers usually come from environment variables whose value is the
    secret id or parameter name, so the variable name is kept for reference.

    Attributes:
        env_var_name: The environment variable that should hold the identifier (if known).

    Example:
        ```python
        try:
            await client.init()
        except MissingIdentifierError as e:
            print(f"Set {e.env_var_name} to the secret ARN")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        """Initialize MissingIdentifierError.

        Args:
            message: Error message describing which identifier is missing.
            env_var_name: Optional environment variable name for reference.
        """
        super().__init__(message)
        self.env_var_name = env_var_name


class SecretNotFoundError(CredentialError):
    """Raised when the credential store returns no usable secret value.

    Attributes:
        identifier: The secret identifier that was looked up.
    """

    def __init__(self, message: str, identifier: str | None = None):
        super().__init__(message)
        self.identifier = identifier


class NotInitializedError(CredentialError):
    """Raised when an authenticator is used before its credentials are resolved.

    Attributes:
        authenticator: Name of the authenticator class that is not ready.
    """

    def __init__(self, message: str, authenticator: str | None = None):
        super().__init__(message)
        self.authenticator = authenticator


class CredentialConfigurationError(CredentialError):
    """Raised when the credential sources configured for a client are inconsistent."""

    pass
