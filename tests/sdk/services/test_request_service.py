import io
import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from payloadkit import (
    ClientConfig,
    ConfigurationError,
    MultipartSpec,
    RequestService,
    RequestSpec,
    TransportError,
)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com/v1"


@pytest.fixture
def secret() -> str:
    return "secret"


@pytest.fixture
def service(base_url: str, secret: str):
    config = ClientConfig(
        base_url=base_url, headers={"Authorization": f"Bearer {secret}"}
    )
    with RequestService(config) as service:
        yield service


class TestRequestService:
    def test_default_config(self) -> None:
        with RequestService() as service:
            request = service.build("GET", RequestSpec(url="https://example.com/"))

        assert request.url == "https://example.com/"

    def test_uses_given_client(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url="https://example.com/ping", text="pong")
        client = httpx.Client(headers={"X-Client": "custom"})

        with RequestService(client=client) as service:
            text, _ = service.request_string(
                "GET", RequestSpec(url="https://example.com/ping")
            )

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["X-Client"] == "custom"
        assert text == "pong"

    class TestRequest:
        def test_relative_url_joins_base_url(
            self,
            httpx_mock: HTTPXMock,
            service: RequestService,
            base_url: str,
            secret: str,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/items", method="POST", status_code=201, json={"id": 7}
            )

            response = service.post(RequestSpec(url="/items", json={"name": "x"}))

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "POST"
            assert sent_request.url == f"{base_url}/items"
            assert sent_request.headers["Authorization"] == f"Bearer {secret}"
            assert sent_request.headers["Content-Type"] == "application/json"
            assert json.loads(sent_request.content) == {"name": "x"}
            assert response.json() == {"id": 7}

        def test_absolute_url_is_kept(
            self, httpx_mock: HTTPXMock, service: RequestService
        ) -> None:
            httpx_mock.add_response(url="https://other.example.com/x")

            response = service.get(RequestSpec(url="https://other.example.com/x"))

            assert response.status_code == 200

        def test_spec_headers_override_defaults(
            self, httpx_mock: HTTPXMock, service: RequestService, base_url: str
        ) -> None:
            httpx_mock.add_response(url=f"{base_url}/items", method="DELETE")

            service.delete(
                RequestSpec(
                    url="items",
                    headers={"Authorization": "Bearer other"},
                    json={"id": 7},
                )
            )

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.headers.get_list("Authorization") == ["Bearer other"]

        def test_multipart_upload(
            self, httpx_mock: HTTPXMock, service: RequestService, base_url: str
        ) -> None:
            httpx_mock.add_response(url=f"{base_url}/upload", method="PUT")
            multipart = MultipartSpec(
                files={"report.csv": io.BytesIO(b"a,b\n1,2\n")},
                fields={"note": b"quarterly"},
                boundary="END_OF_PART",
            )

            body, response = service.request_body(
                "PUT", RequestSpec(url="/upload", multipart=multipart)
            )

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.headers["Content-Type"] == (
                "multipart/form-data; boundary=END_OF_PART"
            )
            assert sent_request.content == multipart.buffer
            assert body == b""
            assert response.status_code == 200

        def test_configuration_error_sends_nothing(
            self, httpx_mock: HTTPXMock, service: RequestService
        ) -> None:
            with pytest.raises(ConfigurationError):
                service.post(RequestSpec(url="/items", text="a", json={"b": 1}))

            assert httpx_mock.get_requests() == []

        def test_transport_error(
            self, httpx_mock: HTTPXMock, service: RequestService
        ) -> None:
            httpx_mock.add_exception(httpx.ConnectTimeout("timed out"))

            with pytest.raises(TransportError):
                service.get(RequestSpec(url="/items"))
