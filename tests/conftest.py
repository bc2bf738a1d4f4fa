"""Pytest configuration and shared fixtures for apiclient tests."""

import ssl
from pathlib import Path

import pytest

from apiclient.auth import CredentialResolver
from apiclient.testing import InMemoryCredentialStore


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    # Store keys that look like test-related env vars
    test_prefixes = ("TEST_", "MTLS_", "API_", "CLIENT_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def store():
    """In-memory credential store with the identifiers used across tests."""
    return InMemoryCredentialStore(
        secrets={
            "testarn": "test-private-key",
            "api-key-arn": "test-api-key",
            "access-key-arn": "AKIDEXAMPLE",
            "secret-key-arn": "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY",
            "empty-arn": "",
        },
        parameters={
            "testcert": "test-cert",
            "testca": "test-ca",
            "api-key-header": "x-api-key",
        },
    )


@pytest.fixture
def resolver(store):
    """Credential resolver backed by the in-memory store."""
    return CredentialResolver(store=store)


@pytest.fixture
def fake_ssl_context(monkeypatch):
    """Replace PEM loading; test credentials are not real certificates."""
    created = []

    def create(certificate, private_key, certificate_authority):
        context = ssl.create_default_context()
        created.append((certificate, private_key, certificate_authority))
        return context

    monkeypatch.setattr("apiclient.auth.mtls.create_ssl_context", create)
    return created


FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def pem_material():
    """Self-signed certificate and key; the certificate doubles as its own CA."""
    certificate = (FIXTURES / "client.crt").read_text()
    private_key = (FIXTURES / "client.key").read_text()
    return certificate, private_key, certificate
