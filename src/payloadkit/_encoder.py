"""Encodes the payload of a :class:`RequestSpec` into a request body."""

import json
from logging import getLogger
from typing import IO, Any, Mapping, NamedTuple, Optional, Union
from urllib.parse import urlencode

from ._utils._multipart import MultipartWriter
from ._utils._request_spec import (
    BinaryPayload,
    FormPayload,
    JsonPayload,
    MultipartPayload,
    RequestSpec,
    TextPayload,
)
from .models.content_types import ContentTypeKind
from .models.errors import ConfigurationError, EncodingError
from .models.multipart import MultipartSpec

logger = getLogger("payloadkit")

Body = Union[bytes, IO[bytes]]


class EncodedBody(NamedTuple):
    content_type: str
    body: Optional[Body]


def encode(spec: RequestSpec) -> EncodedBody:
    """Encode the single payload variant of ``spec``.

    Buffered variants (JSON, form, multipart and text) are returned as
    ``bytes``; a binary payload is passed through as the caller's stream.
    A spec without payload yields an empty content type and no body.

    Args:
        spec: The request spec to encode.

    Returns:
        EncodedBody: The resolved content type and body.

    Raises:
        ConfigurationError: If more than one payload variant is set, or the
            multipart spec was already encoded.
        EncodingError: If the payload cannot be serialized.

    Examples:
        >>> encode(RequestSpec(url="https://example.com", json={"content": "hello"}))
        EncodedBody(content_type='application/json', body=b'{"content":"hello"}')
    """
    payload = spec.payload

    if payload is None:
        return EncodedBody(ContentTypeKind.NONE.mime_type, None)

    logger.debug(f"Encoding {payload.kind.value} payload for {spec.url}")

    if isinstance(payload, JsonPayload):
        return EncodedBody(payload.kind.mime_type, encode_json(payload.data))
    if isinstance(payload, FormPayload):
        return EncodedBody(payload.kind.mime_type, encode_form(payload.data))
    if isinstance(payload, MultipartPayload):
        content_type, body = encode_multipart(payload.data)
        return EncodedBody(content_type, body)
    if isinstance(payload, TextPayload):
        return EncodedBody(payload.kind.mime_type, payload.data.encode("utf-8"))
    if isinstance(payload, BinaryPayload):
        return EncodedBody(payload.kind.mime_type, payload.data)

    raise ConfigurationError(f"Unsupported payload: {type(payload).__name__}")


def encode_json(data: Mapping[str, Any]) -> bytes:
    try:
        return json.dumps(
            data,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Payload is not JSON serializable: {e}") from e


def encode_form(data: Mapping[str, str]) -> bytes:
    return urlencode(sorted(data.items())).encode("ascii")


def encode_multipart(spec: MultipartSpec) -> tuple[str, bytes]:
    """Assemble a multipart/form-data body from ``spec``.

    Files are written first, then raw parts, then plain fields. On success the
    content type and finished buffer are stored back on ``spec``. On failure
    nothing is stored and the partial buffer is dropped, but the spec is still
    marked consumed.
    """
    if spec.consumed:
        raise ConfigurationError("Multipart spec was already encoded.")

    writer = MultipartWriter(boundary=spec.boundary)
    spec.consumed = True

    for filename, stream in spec.files.items():
        writer.write_file("file", filename, stream)

    for part in spec.parts:
        writer.write_part(part.headers, part.body)

    for field_name, value in spec.fields.items():
        writer.write_field(field_name, value)

    body = writer.close()

    spec.content_type = writer.content_type
    spec.buffer = body
    logger.debug(
        f"Encoded multipart body: {len(body)} bytes, boundary={writer.boundary}"
    )
    return spec.content_type, body


def content_type_header(value: str) -> dict[str, list[str]]:
    """A part header set carrying only ``Content-Type``."""
    return {"Content-Type": [value]}
