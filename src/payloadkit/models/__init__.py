from .content_types import ContentTypeKind
from .errors import ConfigurationError, EncodingError, PayloadKitError, TransportError
from .multipart import MultipartSpec, Part

__all__ = [
    "ConfigurationError",
    "ContentTypeKind",
    "EncodingError",
    "MultipartSpec",
    "Part",
    "PayloadKitError",
    "TransportError",
]
