"""Builds ``httpx.Request`` objects from request specs."""

from functools import partial
from logging import getLogger
from typing import Callable, Mapping, Optional

import httpx

from ._encoder import encode
from ._utils._errors import abort_on_error
from ._utils._request_spec import RequestSpec
from .models.multipart import HeaderValues

logger = getLogger("payloadkit")

HTTP_METHODS = (
    "GET",
    "POST",
    "PUT",
    "PATCH",
    "HEAD",
    "OPTIONS",
    "DELETE",
    "TRACE",
    "CONNECT",
)


def header_items(
    headers: Optional[Mapping[str, HeaderValues]],
) -> list[tuple[str, str]]:
    """Flatten a header mapping, keeping every value of multi-valued headers."""
    items: list[tuple[str, str]] = []
    for name, values in (headers or {}).items():
        if isinstance(values, str):
            items.append((name, values))
        else:
            items.extend((name, value) for value in values)
    return items


def build_request(method: str, spec: RequestSpec) -> httpx.Request:
    """Build a request for ``spec`` using the given HTTP method.

    When the payload resolves to a content type, caller headers are applied
    first and ``Content-Type`` is only set from the payload when the caller did
    not supply one. A request without payload carries no caller headers.

    Raises:
        ConfigurationError: If more than one payload variant is set.
        EncodingError: If the payload cannot be encoded.
    """
    content_type, body = encode(spec)

    headers = httpx.Headers()
    if content_type:
        headers = httpx.Headers(header_items(spec.headers))
        if "content-type" not in headers:
            headers["Content-Type"] = content_type

    logger.debug(f"Request: {method} {spec.url}")
    return httpx.Request(method.upper(), spec.url, headers=headers, content=body)


def must_build_request(method: str, spec: RequestSpec) -> httpx.Request:
    """Like :func:`build_request`, but exits the process on failure."""
    with abort_on_error():
        return build_request(method, spec)


RequestBuilder = Callable[[RequestSpec], httpx.Request]

get: RequestBuilder = partial(build_request, "GET")
post: RequestBuilder = partial(build_request, "POST")
put: RequestBuilder = partial(build_request, "PUT")
patch: RequestBuilder = partial(build_request, "PATCH")
head: RequestBuilder = partial(build_request, "HEAD")
options: RequestBuilder = partial(build_request, "OPTIONS")
delete: RequestBuilder = partial(build_request, "DELETE")
trace: RequestBuilder = partial(build_request, "TRACE")
connect: RequestBuilder = partial(build_request, "CONNECT")

must_get: RequestBuilder = partial(must_build_request, "GET")
must_post: RequestBuilder = partial(must_build_request, "POST")
must_put: RequestBuilder = partial(must_build_request, "PUT")
must_patch: RequestBuilder = partial(must_build_request, "PATCH")
must_head: RequestBuilder = partial(must_build_request, "HEAD")
must_options: RequestBuilder = partial(must_build_request, "OPTIONS")
must_delete: RequestBuilder = partial(must_build_request, "DELETE")
must_trace: RequestBuilder = partial(must_build_request, "TRACE")
must_connect: RequestBuilder = partial(must_build_request, "CONNECT")
