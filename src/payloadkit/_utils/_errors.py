from contextlib import contextmanager
from logging import getLogger
from typing import Generator

import httpx

from ..models.errors import PayloadKitError, TransportError

logger = getLogger("payloadkit")


@contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Context manager for handling errors raised by the HTTP client.

    This context manager wraps calls into ``httpx`` and converts any
    ``httpx.HTTPError`` into a :class:`TransportError`, keeping the original
    exception as its cause.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        TransportError: For any failure reported by the HTTP client.
    """
    try:
        yield
    except httpx.HTTPError as e:
        raise TransportError(e) from e


@contextmanager
def abort_on_error() -> Generator[None, None, None]:
    """Turn a payloadkit error into a process exit.

    This is the fail-loud calling convention used by the ``must_*`` helpers.
    The error is logged and ``SystemExit(1)`` is raised from it.
    """
    try:
        yield
    except PayloadKitError as e:
        logger.error(f"Aborting: {type(e).__name__}: {e}")
        raise SystemExit(1) from e
