from dataclasses import dataclass, field
from typing import IO, Mapping, Optional, Sequence, Union

Readable = Union[bytes, str, IO[bytes]]
HeaderValues = Union[str, Sequence[str]]


@dataclass
class Part:
    """A raw MIME part, written into a multipart body exactly as given."""

    headers: Mapping[str, HeaderValues]
    body: Readable


@dataclass
class MultipartSpec:
    """Describes a multipart/form-data body.

    The spec is consumed by a single encode call: every stream it holds is read
    to the end, after which ``content_type`` and ``buffer`` carry the result.
    ``consumed`` is set as soon as encoding starts, even if it later fails.

    Attributes:
        files: Mapping of filename to an open binary stream. Each entry becomes
            a part with form field name ``"file"``.
        parts: Raw parts written with their own headers.
        fields: Mapping of form field name to its value.
        boundary: Boundary to use verbatim. A random one is generated when
            unset. Callers choosing a boundary must make sure it does not occur
            inside any part.
    """

    files: Mapping[str, IO[bytes]] = field(default_factory=dict)
    parts: Sequence[Part] = field(default_factory=list)
    fields: Mapping[str, Readable] = field(default_factory=dict)
    boundary: Optional[str] = None
    content_type: Optional[str] = field(default=None, init=False)
    buffer: Optional[bytes] = field(default=None, init=False, repr=False)
    consumed: bool = field(default=False, init=False)
