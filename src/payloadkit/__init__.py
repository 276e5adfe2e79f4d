"""Build HTTP requests whose body is one of several mutually exclusive payloads."""

from ._config import ClientConfig
from ._encoder import EncodedBody, content_type_header, encode
from ._request import (
    HTTP_METHODS,
    build_request,
    connect,
    delete,
    get,
    head,
    must_build_request,
    must_connect,
    must_delete,
    must_get,
    must_head,
    must_options,
    must_patch,
    must_post,
    must_put,
    must_trace,
    options,
    patch,
    post,
    put,
    trace,
)
from ._services import RequestService
from ._transport import (
    must_read_body,
    must_read_string,
    must_send,
    must_send_read_body,
    must_send_read_string,
    read_body,
    read_string,
    send,
    send_read_body,
    send_read_string,
)
from ._utils import (
    BinaryPayload,
    FormPayload,
    JsonPayload,
    MultipartPayload,
    Payload,
    RequestSpec,
    TextPayload,
)
from .models import (
    ConfigurationError,
    ContentTypeKind,
    EncodingError,
    MultipartSpec,
    Part,
    PayloadKitError,
    TransportError,
)

__all__ = [
    "BinaryPayload",
    "ClientConfig",
    "ConfigurationError",
    "ContentTypeKind",
    "EncodedBody",
    "EncodingError",
    "FormPayload",
    "HTTP_METHODS",
    "JsonPayload",
    "MultipartPayload",
    "MultipartSpec",
    "Part",
    "Payload",
    "PayloadKitError",
    "RequestService",
    "RequestSpec",
    "TextPayload",
    "TransportError",
    "build_request",
    "connect",
    "content_type_header",
    "delete",
    "encode",
    "get",
    "head",
    "must_build_request",
    "must_connect",
    "must_delete",
    "must_get",
    "must_head",
    "must_options",
    "must_patch",
    "must_post",
    "must_put",
    "must_read_body",
    "must_read_string",
    "must_send",
    "must_send_read_body",
    "must_send_read_string",
    "must_trace",
    "options",
    "patch",
    "post",
    "put",
    "read_body",
    "read_string",
    "send",
    "send_read_body",
    "send_read_string",
    "trace",
]
