"""Credential resolution against an external secret/parameter store.

This module wraps a credential store with the validation rules authenticators
rely on: an identifier must be present, and a secret must have a value.

Example:
    ```python
    from apiclient.auth import CredentialResolver

    resolver = CredentialResolver()

    # Secret value by ARN (raises if missing)
    api_key = await resolver.resolve_secret("arn:aws:secretsmanager:...:secret:api-key")

    # Parameter by name (may legitimately be None)
    header = await resolver.resolve_parameter("/my-api/api-key-header")
    ```

Security Considerations:
    - Credential values are never logged (masked with ***)
    - Only identifiers are logged
    - Every call hits the store; nothing is cached here
"""

import logging

from apiclient.auth.exceptions import MissingIdentifierError, SecretNotFoundError
from apiclient.auth.store import AwsCredentialStore, CredentialStore

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve secrets and parameters from a credential store.

    Attributes:
        store: The backing credential store.

    Example:
        ```python
        resolver = CredentialResolver(store=AwsCredentialStore(region_name="eu-west-1"))
        private_key = await resolver.resolve_secret(os.environ.get("FOO_PRIVATE_KEY_ARN"))
        ```
    """

    def __init__(self, store: CredentialStore | None = None):
        """Initialize credential resolver.

        Args:
            store: Credential store to query. Defaults to an AwsCredentialStore
                using the ambient AWS configuration.
        """
        self.store = store if store is not None else AwsCredentialStore()

    def _mask_credential(self, value: str | None) -> str:
        """Mask a credential value for safe logging.

        Args:
            value: The credential value to mask.

        Returns:
            Masked string ("***") if value exists, "None" otherwise.
        """
        if value is None:
            return "None"
        return "***"

    async def resolve_secret(self, identifier: str | None, env_var_name: str | None = None) -> str:
        """Resolve a secret value by identifier.

        Args:
            identifier: Secret id (e.g. a Secrets Manager ARN).
            env_var_name: Environment variable the identifier came from, used
                in error messages only.

        Returns:
            The secret's string content.

        Raises:
            MissingIdentifierError: If identifier is absent.
            SecretNotFoundError: If the store returns no usable value.
        """
        if not identifier:
            error_msg = "No secret identifier provided"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise MissingIdentifierError(error_msg, env_var_name=env_var_name)

        value = await self.store.get_secret(identifier)
        if not value:
            raise SecretNotFoundError(f"No secret value found for {identifier}", identifier=identifier)

        logger.debug(f"Resolved secret {identifier}: {self._mask_credential(value)}")
        return value

    async def resolve_parameter(self, identifier: str | None, env_var_name: str | None = None) -> str | None:
        """Resolve a parameter value by name.

        A missing value is returned as None rather than raised, so optional
        parameters can be modelled.

        Raises:
            MissingIdentifierError: If identifier is absent.
        """
        if not identifier:
            error_msg = "No parameter name provided"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise MissingIdentifierError(error_msg, env_var_name=env_var_name)

        value = await self.store.get_parameter(identifier)
        logger.debug(f"Resolved parameter {identifier}: {self._mask_credential(value)}")
        return value
