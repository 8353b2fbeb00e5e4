import httpx
import pytest

from directus_commons.services.http_service import HttpService
from directus_commons.utils.errors import ApiRequestError


def test_unwraps_data_envelope(http, transport):
    transport.reply(200, {"data": [{"id": 1}]})
    assert http.send_request("GET", "https://cms.test/items/a", {"Authorization": "Bearer t"}) == [{"id": 1}]
    assert transport.last.headers["Authorization"] == "Bearer t"
    assert transport.last.method == "GET"

def test_sends_json_body(http, transport):
    transport.reply(200, {"data": {"id": 2, "title": "x"}})
    result = http.send_request("POST", "https://cms.test/items/a", {}, json={"title": "x"})
    assert result == {"id": 2, "title": "x"}
    assert transport.last_json() == {"title": "x"}

def test_no_content_returns_none(http, transport):
    transport.reply(204)
    assert http.send_request("DELETE", "https://cms.test/items/a/1", {}) is None

def test_error_status_raises_with_errors(http, transport):
    transport.reply(403, {"errors": [{"message": "You don't have permission"}]})
    with pytest.raises(ApiRequestError) as excinfo:
        http.send_request("GET", "https://cms.test/items/secret", {})
    assert excinfo.value.status_code == 403
    assert excinfo.value.errors == [{"message": "You don't have permission"}]
    assert "403" in str(excinfo.value)

def test_error_with_plain_text_body(http, transport):
    transport.reply(502, "Bad Gateway")
    with pytest.raises(ApiRequestError) as excinfo:
        http.send_request("GET", "https://cms.test/items/a", {})
    assert excinfo.value.status_code == 502
    assert excinfo.value.errors == ["Bad Gateway"]

def test_network_failure_raises():
    def fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = HttpService(transport=httpx.MockTransport(fail))
    with pytest.raises(ApiRequestError) as excinfo:
        http.send_request("GET", "https://cms.test/items/a", {})
    assert excinfo.value.status_code is None
    assert "connection refused" in str(excinfo.value)

def test_success_with_non_json_body_raises(http, transport):
    transport.reply(200, "<html>ok</html>")
    with pytest.raises(ApiRequestError) as excinfo:
        http.send_request("GET", "https://cms.test/items/a", {})
    assert excinfo.value.status_code == 200
    assert excinfo.value.errors == ["<html>ok</html>"]
    assert "not JSON" in str(excinfo.value)
