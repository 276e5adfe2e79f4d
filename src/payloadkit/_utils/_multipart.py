import io
import re
import secrets
from typing import Mapping, Optional

from ..models.errors import EncodingError
from ..models.multipart import HeaderValues, Readable

CRLF = b"\r\n"
CHUNK_SIZE = 64 * 1024

# RFC 2046 bchars; a space is allowed anywhere but at the end.
_BOUNDARY_RE = re.compile(r"[A-Za-z0-9'()+_,\-./:=? ]{0,69}[A-Za-z0-9'()+_,\-./:=?]")


def random_boundary() -> str:
    return secrets.token_hex(30)


def validate_boundary(boundary: str) -> str:
    if not _BOUNDARY_RE.fullmatch(boundary):
        raise EncodingError(f"Invalid multipart boundary: {boundary!r}")
    return boundary


def escape_quotes(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def copy_into(out: io.BytesIO, source: Readable) -> None:
    """Copy ``source`` into ``out``, reading streams to the end.

    Raises:
        EncodingError: If reading the source fails.
    """
    if isinstance(source, str):
        out.write(source.encode("utf-8"))
        return
    if isinstance(source, (bytes, bytearray)):
        out.write(source)
        return

    try:
        while chunk := source.read(CHUNK_SIZE):
            out.write(chunk.encode("utf-8") if isinstance(chunk, str) else chunk)
    except (OSError, ValueError) as e:
        raise EncodingError(f"Failed to read multipart part body: {e}") from e


class MultipartWriter:
    """Writes a multipart/form-data body into an in-memory buffer.

    Parts are appended in call order; :meth:`close` must be called once all
    parts are written to emit the closing delimiter.

    Examples:
        >>> writer = MultipartWriter(boundary="END_OF_PART")
        >>> writer.write_field("content", b"hello")
        >>> body = writer.close()
        >>> writer.content_type
        'multipart/form-data; boundary=END_OF_PART'
    """

    def __init__(self, boundary: Optional[str] = None) -> None:
        self.boundary = (
            validate_boundary(boundary) if boundary else random_boundary()
        )
        self._buffer = io.BytesIO()
        self._has_parts = False
        self._closed = False

    @property
    def content_type(self) -> str:
        boundary = self.boundary
        # Boundaries with RFC 2045 tspecials must be quoted.
        if re.search(r"[()<>@,;:\\\"/\[\]?= ]", boundary):
            boundary = f'"{boundary}"'
        return f"multipart/form-data; boundary={boundary}"

    def write_part(self, headers: Mapping[str, HeaderValues], body: Readable) -> None:
        if self._closed:
            raise EncodingError("Multipart writer is already closed.")

        delimiter = f"--{self.boundary}".encode("ascii")
        if self._has_parts:
            self._buffer.write(CRLF)
        self._buffer.write(delimiter + CRLF)
        self._has_parts = True

        for name in sorted(headers):
            values = headers[name]
            if isinstance(values, str):
                values = [values]
            for value in values:
                self._buffer.write(f"{name}: {value}".encode("utf-8") + CRLF)
        self._buffer.write(CRLF)

        copy_into(self._buffer, body)

    def write_file(self, field_name: str, filename: str, body: Readable) -> None:
        self.write_part(
            {
                "Content-Disposition": (
                    f'form-data; name="{escape_quotes(field_name)}"; '
                    f'filename="{escape_quotes(filename)}"'
                ),
                "Content-Type": "application/octet-stream",
            },
            body,
        )

    def write_field(self, field_name: str, body: Readable) -> None:
        self.write_part(
            {"Content-Disposition": f'form-data; name="{escape_quotes(field_name)}"'},
            body,
        )

    def close(self) -> bytes:
        """Write the closing delimiter and return the finished body."""
        if not self._closed:
            if self._has_parts:
                self._buffer.write(CRLF)
            self._buffer.write(f"--{self.boundary}--".encode("ascii") + CRLF)
            self._closed = True
        return self._buffer.getvalue()
