import pytest
import requests

from zenopay.exceptions import DecodeError, TransportError
from zenopay.utils.http_client import HTTPClient, decode_json


def test_post_form_sends_form_body(session):
    session.respond({"ok": True})
    client = HTTPClient(timeout=7, session=session)

    body = client.post_form("https://api.example.com/x", data={"a": "1"})

    assert body == b'{"ok": true}'
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["data"] == {"a": "1"}
    assert call["headers"]["Content-Type"] == "application/x-www-form-urlencoded"
    assert call["timeout"] == 7


def test_post_json_sends_json_body_and_keeps_caller_headers(session):
    session.respond("{}")
    client = HTTPClient(session=session)
    headers = {"x-api-key": "k"}

    client.post_json("https://api.example.com/x", data={"amount": 10}, headers=headers)

    call = session.calls[0]
    assert call["json"] == {"amount": 10}
    assert call["headers"] == {"x-api-key": "k", "Content-Type": "application/json"}
    assert headers == {"x-api-key": "k"}


def test_get_sends_query_params(session):
    session.respond("{}")
    HTTPClient(session=session).get("https://api.example.com/s", params={"order_id": "A1"})

    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["params"] == {"order_id": "A1"}


def test_error_status_still_returns_body(session):
    session.respond({"message": "bad request"}, status_code=400)
    body = HTTPClient(session=session).post_json("https://api.example.com/x", data={})
    assert decode_json(body) == {"message": "bad request"}


def test_connection_failure_becomes_transport_error(session):
    session.error = requests.ConnectionError("connection refused")
    with pytest.raises(TransportError) as exc:
        HTTPClient(session=session).post_json("https://api.example.com/x", data={})
    assert "connection refused" in exc.value.message
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_close_closes_session(session):
    HTTPClient(session=session).close()
    assert session.closed


@pytest.mark.parametrize("body", [b"{not json", b"", b"[1, 2]", b'"text"', b"\xff\xfe"])
def test_decode_json_rejects_non_objects(body):
    with pytest.raises(DecodeError):
        decode_json(body)


def test_decode_json_chains_parse_error():
    with pytest.raises(DecodeError) as exc:
        decode_json(b"{not json")
    assert isinstance(exc.value.__cause__, ValueError)
    assert exc.value.response_data == b"{not json"
