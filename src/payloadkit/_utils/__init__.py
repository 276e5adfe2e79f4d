from ._errors import abort_on_error, handle_errors
from ._multipart import MultipartWriter
from ._request_spec import (
    BinaryPayload,
    FormPayload,
    JsonPayload,
    MultipartPayload,
    Payload,
    RequestSpec,
    TextPayload,
)

__all__ = [
    "BinaryPayload",
    "FormPayload",
    "JsonPayload",
    "MultipartPayload",
    "MultipartWriter",
    "Payload",
    "RequestSpec",
    "TextPayload",
    "abort_on_error",
    "handle_errors",
]
