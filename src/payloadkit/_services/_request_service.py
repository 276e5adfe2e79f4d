from dataclasses import replace
from logging import getLogger
from typing import Any, Optional

from httpx import URL, Client, Headers, Request, Response

from .._config import ClientConfig
from .._request import build_request
from .._transport import read_body, read_string, send
from .._utils._request_spec import RequestSpec
from .._utils._ssl_context import get_httpx_client_kwargs


class RequestService:
    """Builds requests from specs and sends them with a shared ``httpx.Client``.

    Headers from :class:`ClientConfig` are sent with every request unless the
    spec supplies the same header.
    """

    def __init__(
        self, config: Optional[ClientConfig] = None, client: Optional[Client] = None
    ) -> None:
        self._logger = getLogger("payloadkit")
        self._config = config or ClientConfig()
        self._client = client or Client(**get_httpx_client_kwargs(self._config))

        self._logger.debug(f"HEADERS: {sorted(self._client.headers.keys())}")

    def __enter__(self) -> "RequestService":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def build(self, method: str, spec: RequestSpec) -> Request:
        url = self._resolve_url(URL(spec.url))
        request = build_request(method, replace(spec, url=str(url)))
        defaults = [
            (name, value)
            for name, value in self._client.headers.multi_items()
            if name not in request.headers
        ]
        request.headers = Headers(request.headers.multi_items() + defaults)
        return request

    def request(self, method: str, spec: RequestSpec) -> Response:
        """Build and send a request for ``spec``.

        Raises:
            ConfigurationError: If more than one payload variant is set.
            EncodingError: If the payload cannot be encoded.
            TransportError: If the HTTP client fails.
        """
        request = self.build(method, spec)
        self._logger.debug(f"Request: {request.method} {request.url}")
        return send(self._client, request)

    def request_body(self, method: str, spec: RequestSpec) -> tuple[bytes, Response]:
        response = self.request(method, spec)
        return read_body(response), response

    def request_string(self, method: str, spec: RequestSpec) -> tuple[str, Response]:
        response = self.request(method, spec)
        return read_string(response), response

    def get(self, spec: RequestSpec) -> Response:
        return self.request("GET", spec)

    def post(self, spec: RequestSpec) -> Response:
        return self.request("POST", spec)

    def put(self, spec: RequestSpec) -> Response:
        return self.request("PUT", spec)

    def patch(self, spec: RequestSpec) -> Response:
        return self.request("PATCH", spec)

    def head(self, spec: RequestSpec) -> Response:
        return self.request("HEAD", spec)

    def options(self, spec: RequestSpec) -> Response:
        return self.request("OPTIONS", spec)

    def delete(self, spec: RequestSpec) -> Response:
        return self.request("DELETE", spec)

    def trace(self, spec: RequestSpec) -> Response:
        return self.request("TRACE", spec)

    def connect(self, spec: RequestSpec) -> Response:
        return self.request("CONNECT", spec)

    def _resolve_url(self, url: URL) -> URL:
        base_url = self._client.base_url
        if not url.is_relative_url or not str(base_url):
            return url
        return URL(str(base_url).rstrip("/") + "/" + str(url).lstrip("/"))
