"""AWS Signature Version 4 signing for httpx requests.

Signing is registered as an httpx ``request`` event hook so that it runs
after every other header has been set, right before the request reaches the
transport. Signatures are computed by botocore.

Example:
    ```python
    import httpx

    from apiclient.transport.sigv4 import SigV4Signer

    signer = SigV4Signer(access_key_id="AKIA...", secret_key="...", region="eu-west-1")
    async with httpx.AsyncClient(event_hooks={"request": [signer]}) as client:
        response = await client.get("https://abc123.execute-api.eu-west-1.amazonaws.com/prod/items")
    ```
"""

import logging

import httpx
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

logger = logging.getLogger(__name__)


class SigV4Signer:
    """Async httpx request hook that adds SigV4 ``Authorization`` headers.

    Args:
        access_key_id: AWS access key id
        secret_key: AWS secret access key
        region: Region of the signed service (default: eu-west-1)
        service: Signing name of the service (default: execute-api)
        session_token: Optional session token for temporary credentials
    """

    def __init__(
        self,
        *,
        access_key_id: str,
        secret_key: str,
        region: str = "eu-west-1",
        service: str = "execute-api",
        session_token: str | None = None,
    ) -> None:
        self._credentials = Credentials(access_key_id, secret_key, session_token)
        self.region = region
        self.service = service

    async def __call__(self, request: httpx.Request) -> None:
        await request.aread()
        self.sign(request)

    def sign(self, request: httpx.Request) -> None:
        """Sign the request in place."""
        aws_request = AWSRequest(
            method=request.method,
            url=str(request.url),
            data=request.content,
            headers=dict(request.headers),
        )
        SigV4Auth(self._credentials, self.service, self.region).add_auth(aws_request)

        for name, value in aws_request.headers.items():
            request.headers[name] = value

        logger.debug(f"Signed {request.method} {request.url} for {self.service} in {self.region}")
