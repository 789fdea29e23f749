import json

import httpx
import pytest

from bankid.responses import ApiError, BankIDError
from bankid.transport import parse_response, send_request


def _client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_send_request_posts_json():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers["Content-Type"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"orderRef": "ref-1"})

    payload = {"endUserIp": "192.0.2.1", "returnRisk": True}
    with _client(handler) as client:
        response = send_request(client, "https://bankid.example.com/rp/v6.0/auth", payload)

    assert response.status_code == 200
    assert seen["method"] == "POST"
    assert seen["url"] == "https://bankid.example.com/rp/v6.0/auth"
    assert seen["content_type"] == "application/json"
    assert seen["body"] == payload


def test_send_request_connection_failure():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with _client(handler) as client:
        with pytest.raises(BankIDError, match="^sending request: "):
            send_request(client, "https://bankid.example.com/x", {"orderRef": "r"})


def test_send_request_unserialisable_payload():
    def handler(request):
        return httpx.Response(200)

    with _client(handler) as client:
        with pytest.raises(BankIDError, match="^marshalling request body: "):
            send_request(client, "https://bankid.example.com/x", {"bad": object()})


def test_round_trip_through_mock_service():
    def handler(request):
        return httpx.Response(200, json={"echo": json.loads(request.content)})

    payload = {"orderRef": "ref-9"}
    with _client(handler) as client:
        result = parse_response(send_request(client, "https://bankid.example.com/x", payload))
    assert result == {"echo": payload}


def test_parse_success_returns_json():
    response = httpx.Response(200, json={"orderRef": "ref-1", "status": "pending"})
    assert parse_response(response) == {"orderRef": "ref-1", "status": "pending"}


def test_parse_empty_body_returns_none():
    assert parse_response(httpx.Response(200)) is None


def test_parse_400_raises_api_error():
    response = httpx.Response(
        400, json={"errorCode": "invalidParameters", "details": "Invalid orderRef"}
    )
    with pytest.raises(ApiError) as info:
        parse_response(response)
    assert info.value.error_code == "invalidParameters"
    assert info.value.details == "Invalid orderRef"


def test_parse_400_with_bad_json():
    with pytest.raises(BankIDError, match="^unmarshalling response body: ") as info:
        parse_response(httpx.Response(400, content=b"not json"))
    assert not isinstance(info.value, ApiError)


def test_parse_higher_status_uses_body_as_message():
    with pytest.raises(BankIDError) as info:
        parse_response(httpx.Response(503, text="service unavailable"))
    assert str(info.value) == "service unavailable"
    assert not isinstance(info.value, ApiError)


def test_parse_success_with_bad_json():
    with pytest.raises(BankIDError, match="^unmarshalling response body: "):
        parse_response(httpx.Response(200, content=b"{broken"))