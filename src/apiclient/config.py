"""Environment configuration for authenticator credential identifiers.

Authenticators never read secrets from the environment directly. Instead,
environment variables hold *identifiers* (secret ARNs, parameter names) that
are looked up in the credential store. The variables are namespaced by a
caller-chosen prefix, so several independently configured clients can live in
one process:

    FOO_API_KEY=arn:aws:secretsmanager:eu-west-1:123456789012:secret:foo-key
    FOO_API_KEY_HEADER=/foo/api-key-header

Example:
    ```python
    from apiclient.config import load_environment, lookup_identifier

    environ = load_environment()
    secret_arn = lookup_identifier(environ, "FOO", "_API_KEY")
    ```
"""

import logging
import os
from collections.abc import Mapping
from threading import Lock

from dotenv import load_dotenv as _load_dotenv

logger = logging.getLogger(__name__)

_dotenv_loaded = False
_dotenv_lock = Lock()


def _ensure_dotenv_loaded(dotenv_path: str | None = None) -> None:
    """Ensure the .env file is loaded into os.environ (thread-safe, once per process)."""
    global _dotenv_loaded

    if _dotenv_loaded:
        return

    with _dotenv_lock:
        # Double-check pattern for thread safety
        if _dotenv_loaded:
            return

        try:
            _load_dotenv(dotenv_path=dotenv_path)
            logger.debug("Loaded .env file for credential identifiers")
        except Exception as e:
            logger.warning(f"Failed to load .env file: {e}")
        _dotenv_loaded = True


def load_environment(dotenv_path: str | None = None, load_dotenv: bool = True) -> dict[str, str]:
    """Return a snapshot of the process environment.

    Args:
        dotenv_path: Path to .env file. If None, python-dotenv searches
            parent directories for one.
        load_dotenv: Whether to load the .env file first. Existing
            environment variables are never overridden by .env values.

    Returns:
        A copy of os.environ after the optional .env load.
    """
    if load_dotenv:
        _ensure_dotenv_loaded(dotenv_path)
    return dict(os.environ)


def env_var_name(prefix: str, suffix: str) -> str:
    """Build a namespaced environment variable name (``FOO`` + ``_API_KEY``)."""
    return f"{prefix}{suffix}"


def lookup_identifier(environ: Mapping[str, str], prefix: str, suffix: str) -> str | None:
    """Look up a store identifier in the environment mapping.

    Absence is not an error here; the resolver decides whether a missing
    identifier is fatal.
    """
    name = env_var_name(prefix, suffix)
    value = environ.get(name)
    if value:
        logger.debug(f"Found credential identifier in environment variable '{name}'")
    else:
        logger.debug(f"Environment variable '{name}' is not set")
    return value or None
