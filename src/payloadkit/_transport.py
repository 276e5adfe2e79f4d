"""Thin pass-throughs to an ``httpx.Client`` for sending built requests.

No retry, timeout or backoff logic lives here; configure those on the client.
"""

from logging import getLogger

import httpx

from ._utils._errors import abort_on_error, handle_errors

logger = getLogger("payloadkit")


def send(client: httpx.Client, request: httpx.Request) -> httpx.Response:
    """Send ``request`` with ``client``.

    Raises:
        TransportError: If the client fails to send the request.
    """
    with handle_errors():
        response = client.send(request)
    logger.debug(f"Response: {request.method} {request.url} -> {response.status_code}")
    return response


def read_body(response: httpx.Response) -> bytes:
    """Read the whole response body.

    Raises:
        TransportError: If the body cannot be read.
    """
    with handle_errors():
        return response.read()


def read_string(response: httpx.Response) -> str:
    read_body(response)
    return response.text


def send_read_body(
    client: httpx.Client, request: httpx.Request
) -> tuple[bytes, httpx.Response]:
    response = send(client, request)
    return read_body(response), response


def send_read_string(
    client: httpx.Client, request: httpx.Request
) -> tuple[str, httpx.Response]:
    response = send(client, request)
    return read_string(response), response


def must_send(client: httpx.Client, request: httpx.Request) -> httpx.Response:
    with abort_on_error():
        return send(client, request)


def must_send_read_body(
    client: httpx.Client, request: httpx.Request
) -> tuple[bytes, httpx.Response]:
    with abort_on_error():
        return send_read_body(client, request)


def must_send_read_string(
    client: httpx.Client, request: httpx.Request
) -> tuple[str, httpx.Response]:
    with abort_on_error():
        return send_read_string(client, request)


def must_read_body(response: httpx.Response) -> bytes:
    with abort_on_error():
        return read_body(response)


def must_read_string(response: httpx.Response) -> str:
    with abort_on_error():
        return read_string(response)
