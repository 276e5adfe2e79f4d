"""Content types a request body can be encoded as."""

from enum import Enum


class ContentTypeKind(str, Enum):
    """Payload kinds supported by the body encoder."""

    NONE = "none"
    JSON = "json"
    FORM = "form"
    MULTIPART = "multipart"
    TEXT = "text"
    BINARY = "binary"

    @property
    def mime_type(self) -> str:
        """Canonical MIME string for this kind (empty for ``NONE``)."""
        return _MIME_TYPES[self]


_MIME_TYPES = {
    ContentTypeKind.NONE: "",
    ContentTypeKind.JSON: "application/json",
    ContentTypeKind.FORM: "application/x-www-form-urlencoded",
    ContentTypeKind.MULTIPART: "multipart/form-data",
    ContentTypeKind.TEXT: "text/plain",
    ContentTypeKind.BINARY: "application/octet-stream",
}
