"""TLS helpers for mutual-TLS clients.

Certificates and keys arrive as PEM strings from the credential store.
``ssl`` can trust a CA bundle from memory but only loads a client certificate
chain from files, so the certificate and key are written to a private
temporary directory for the duration of ``load_cert_chain``.
"""

import logging
import os
import ssl
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def create_ssl_context(certificate: str, private_key: str, certificate_authority: str) -> ssl.SSLContext:
    """Build a client SSL context from in-memory PEM material.

    Args:
        certificate: PEM-encoded client certificate (chain).
        private_key: PEM-encoded private key for the certificate.
        certificate_authority: PEM-encoded CA bundle to trust. Replaces the
            system trust store.

    Returns:
        SSL context presenting the client certificate and trusting only the CA bundle.

    Raises:
        ssl.SSLError: If any of the PEM inputs cannot be loaded.
    """
    context = ssl.create_default_context(cadata=certificate_authority)

    with tempfile.TemporaryDirectory(prefix="apiclient-tls-") as tmp_dir:
        cert_path = Path(tmp_dir) / "client.crt"
        key_path = Path(tmp_dir) / "client.key"
        cert_path.write_text(certificate)
        key_path.touch(mode=0o600)
        os.chmod(key_path, 0o600)
        key_path.write_text(private_key)
        context.load_cert_chain(certfile=cert_path, keyfile=key_path)

    logger.debug("Created mutual-TLS SSL context")
    return context
