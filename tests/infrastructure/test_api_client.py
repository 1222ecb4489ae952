"""Unit tests for the REST envelope client."""

import pytest
import requests

from procurement.domain.exceptions import BackendError
from procurement.infrastructure.http.api_client import ApiClient
from tests.fakes import FakeSession, envelope, json_response


def _client(*responses) -> tuple[ApiClient, FakeSession]:
    session = FakeSession(*responses)
    return ApiClient("http://backend/api/", timeout=3.0, session=session), session


class TestApiClient:

    def test_unwraps_data(self):
        client, session = _client(json_response(body=envelope([{"id": 1}])))
        assert client.get("proveedores") == [{"id": 1}]
        call = session.calls[0]
        assert call["method"] == "GET"
        assert call["url"] == "http://backend/api/proveedores"
        assert call["timeout"] == 3.0

    def test_sends_json_payload(self):
        client, session = _client(json_response(body=envelope({"id": 9})))
        assert client.post("/ordenes-compra", {"numeroOrden": "OC-1"}) == {"id": 9}
        assert session.calls[0]["json"] == {"numeroOrden": "OC-1"}

    def test_empty_body_returns_none(self):
        client, _ = _client(json_response(status=204))
        assert client.delete("ordenes-compra/1") is None

    def test_transport_error_becomes_backend_error(self):
        client, _ = _client(requests.ConnectionError("connection refused"))
        with pytest.raises(BackendError, match="Could not reach the backend"):
            client.get("productos")

    def test_http_error_carries_status(self):
        client, _ = _client(
            json_response(status=404, body=envelope(None, success=False, error="No existe"))
        )
        with pytest.raises(BackendError, match="404: No existe") as exc_info:
            client.get("productos/3")
        assert exc_info.value.status_code == 404

    def test_http_error_with_plain_text_body(self):
        client, _ = _client(json_response(status=500, raw=b"Internal failure"))
        with pytest.raises(BackendError, match="Internal failure"):
            client.get("productos")

    def test_unsuccessful_envelope(self):
        client, _ = _client(json_response(body=envelope(None, success=False, error="RUC duplicado")))
        with pytest.raises(BackendError, match="RUC duplicado"):
            client.post("proveedores", {})

    def test_malformed_json(self):
        client, _ = _client(json_response(raw=b"<html>oops</html>"))
        with pytest.raises(BackendError, match="malformed"):
            client.get("productos")

    def test_requests_json_accept_header(self):
        _, session = _client()
        assert session.headers["Accept"] == "application/json"
