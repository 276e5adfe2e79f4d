from dataclasses import dataclass, field
from typing import IO, Any, Mapping, Optional, Union

from ..models.content_types import ContentTypeKind
from ..models.errors import ConfigurationError
from ..models.multipart import HeaderValues, MultipartSpec


@dataclass(frozen=True)
class JsonPayload:
    data: Mapping[str, Any]
    kind = ContentTypeKind.JSON


@dataclass(frozen=True)
class FormPayload:
    data: Mapping[str, str]
    kind = ContentTypeKind.FORM


@dataclass(frozen=True)
class MultipartPayload:
    data: MultipartSpec
    kind = ContentTypeKind.MULTIPART


@dataclass(frozen=True)
class TextPayload:
    data: str
    kind = ContentTypeKind.TEXT


@dataclass(frozen=True)
class BinaryPayload:
    data: IO[bytes]
    kind = ContentTypeKind.BINARY


Payload = Union[JsonPayload, FormPayload, MultipartPayload, TextPayload, BinaryPayload]

_VARIANTS = (
    ("json", JsonPayload),
    ("form", FormPayload),
    ("multipart", MultipartPayload),
    ("text", TextPayload),
    ("binary", BinaryPayload),
)


def _is_set(value: Any) -> bool:
    # An empty string carries no text body; empty mappings and streams still count.
    if isinstance(value, str):
        return value != ""
    return value is not None


@dataclass
class RequestSpec:
    """Encapsulates the configuration for building an HTTP request.

    At most one of ``json``, ``form``, ``multipart``, ``text`` and ``binary``
    may be set; a variant counts as set when it is not ``None`` (and, for
    ``text``, not empty). Use :meth:`of` to build a spec from a single tagged
    payload instead.
    """

    url: str
    headers: Optional[Mapping[str, HeaderValues]] = None
    json: Optional[Mapping[str, Any]] = None
    form: Optional[Mapping[str, str]] = None
    multipart: Optional[MultipartSpec] = None
    text: Optional[str] = None
    binary: Optional[IO[bytes]] = field(default=None, repr=False)

    @classmethod
    def of(
        cls,
        url: str,
        payload: Optional[Payload] = None,
        *,
        headers: Optional[Mapping[str, HeaderValues]] = None,
    ) -> "RequestSpec":
        spec = cls(url=url, headers=headers)
        if payload is not None:
            name = next(name for name, variant in _VARIANTS if variant is type(payload))
            setattr(spec, name, payload.data)
        return spec

    @property
    def payload(self) -> Optional[Payload]:
        """The single populated payload variant, or ``None``.

        Raises:
            ConfigurationError: If more than one variant is populated.
        """
        populated = [
            variant(value)
            for name, variant in _VARIANTS
            if _is_set(value := getattr(self, name))
        ]
        if len(populated) > 1:
            kinds = ", ".join(p.kind.value for p in populated)
            raise ConfigurationError(
                f"Request spec cannot contain more than one payload (got {kinds})."
            )
        return populated[0] if populated else None
