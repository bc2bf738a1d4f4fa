"""Credential store backends.

A credential store exposes two capabilities: fetch a secret by id and fetch a
parameter by name. The default backend talks to AWS Secrets Manager and SSM
Parameter Store.
"""

import asyncio
import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class CredentialStore(Protocol):
    """Capability interface for an external secret/parameter store."""

    async def get_secret(self, identifier: str) -> str | None: ...

    async def get_parameter(self, name: str) -> str | None: ...


class AwsCredentialStore:
    """Secrets Manager + SSM Parameter Store backed credential store.

    boto3 clients are created lazily on first use so that constructing an
    authenticator never touches the network or requires AWS configuration.
    Blocking boto3 calls run in a worker thread.
    """

    def __init__(self, region_name: str | None = None):
        self._region_name = region_name
        self._secrets_client = None
        self._ssm_client = None

    def _get_secrets_client(self):
        """Lazy-init boto3 Secrets Manager client."""
        if self._secrets_client is None:
            import boto3

            self._secrets_client = boto3.client("secretsmanager", region_name=self._region_name)
        return self._secrets_client

    def _get_ssm_client(self):
        """Lazy-init boto3 SSM client."""
        if self._ssm_client is None:
            import boto3

            self._ssm_client = boto3.client("ssm", region_name=self._region_name)
        return self._ssm_client

    async def get_secret(self, identifier: str) -> str | None:
        return await asyncio.to_thread(self._get_secret_value, identifier)

    async def get_parameter(self, name: str) -> str | None:
        return await asyncio.to_thread(self._get_parameter_value, name)

    def _get_secret_value(self, identifier: str) -> str | None:
        resp = self._get_secrets_client().get_secret_value(SecretId=identifier)
        logger.debug(f"Fetched secret {identifier} from Secrets Manager")
        return resp.get("SecretString")

    def _get_parameter_value(self, name: str) -> str | None:
        resp = self._get_ssm_client().get_parameter(Name=name)
        logger.debug(f"Fetched parameter {name} from Parameter Store")
        return resp.get("Parameter", {}).get("Value")
