from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs

import pytest
import requests

from common.errors import CarrierRejectionError, DecodeError, PickupValidationError, TransportError
from conftest import REJECTION_BODY, SUCCESS_BODY, make_items, make_request
from models.pickup import MAX_COMMODITIES, PickupMode
from services.abf.client import AbfPickupClient

URL = "https://abf.example/xml/pickupxml.asp"


def mock_http_response(body: bytes, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.content = body
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error", response=response)
    return response


@pytest.fixture
def client():
    return AbfPickupClient(api_key="client-key-9876", mode=PickupMode.TEST, timeout=5.0, url=URL)


@pytest.fixture
def mock_post():
    with patch("services.abf.client.requests.post") as post:
        post.return_value = mock_http_response(SUCCESS_BODY)
        yield post


def sent_form(mock_post) -> dict[str, list[str]]:
    return parse_qs(mock_post.call_args.kwargs["data"], keep_blank_values=True)


# --- Configuration ---


def test_client_defaults_to_test_mode():
    assert AbfPickupClient(api_key="k").mode is PickupMode.TEST


def test_with_mode_returns_new_client(client):
    live = client.with_mode("live")
    assert live.mode is PickupMode.LIVE
    assert client.mode is PickupMode.TEST
    assert live.api_key == client.api_key
    assert live.url == client.url


def test_with_timeout_returns_new_client(client):
    slow = client.with_timeout(30)
    assert slow.timeout == 30
    assert client.timeout == 5.0


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        AbfPickupClient(api_key="k", mode="production")


# --- Request ---


def test_request_pickup_success(client, mock_post, pickup_request):
    response = client.request_pickup(pickup_request)

    assert response.confirmation_number == "ABC123"
    mock_post.assert_called_once()
    assert mock_post.call_args.args[0] == URL
    assert mock_post.call_args.kwargs["headers"] == {"Content-Type": "application/x-www-form-urlencoded"}
    assert mock_post.call_args.kwargs["timeout"] == 5.0


def test_request_pickup_sends_encoded_form(client, mock_post, pickup_request):
    client.request_pickup(pickup_request)

    form = sent_form(mock_post)
    assert form["ID"] == ["abf-test-key-1234"]
    assert form["ShipName"] == ["Acme Widgets"]
    assert form["Test"] == ["Y"]
    assert form["HN2"] == ["1"]
    assert form["WT2"] == ["200"]
    assert form["TPBName"] == [""]


def test_request_pickup_uses_client_key_when_request_has_none(client, mock_post):
    request = make_request(items=make_items(1))
    client.request_pickup(request)

    assert sent_form(mock_post)["ID"] == ["client-key-9876"]
    assert request.api_key == ""


def test_live_client_sends_live_flag(client, mock_post, pickup_request):
    client.with_mode(PickupMode.LIVE).request_pickup(pickup_request)
    assert sent_form(mock_post)["Test"] == ["N"]


def test_too_many_commodities_never_hit_network(client, mock_post):
    request = make_request(items=make_items(MAX_COMMODITIES + 1))
    with pytest.raises(PickupValidationError):
        client.request_pickup(request)
    mock_post.assert_not_called()


# --- Failures ---


def test_carrier_rejection(client, mock_post, pickup_request):
    mock_post.return_value = mock_http_response(REJECTION_BODY)
    with pytest.raises(CarrierRejectionError) as exc_info:
        client.request_pickup(pickup_request)
    assert exc_info.value.message == "Missing zip"


def test_timeout_is_transport_error(client, mock_post, pickup_request):
    mock_post.side_effect = requests.Timeout("read timed out")
    with pytest.raises(TransportError) as exc_info:
        client.request_pickup(pickup_request)
    assert exc_info.value.operation == "RequestPickup"
    assert isinstance(exc_info.value.__cause__, requests.Timeout)


def test_connection_error_is_transport_error(client, mock_post, pickup_request):
    mock_post.side_effect = requests.ConnectionError("connection refused")
    with pytest.raises(TransportError, match="ConnectionError"):
        client.request_pickup(pickup_request)


def test_http_error_status_is_transport_error(client, mock_post, pickup_request):
    mock_post.return_value = mock_http_response(b"Service Unavailable", status_code=503)
    with pytest.raises(TransportError) as exc_info:
        client.request_pickup(pickup_request)
    assert exc_info.value.status_code == 503


def test_unreadable_body_is_decode_error(client, mock_post, pickup_request):
    mock_post.return_value = mock_http_response(b"<html>maintenance</html>")
    with pytest.raises(DecodeError):
        client.request_pickup(pickup_request)


def test_failures_are_not_retried(client, mock_post, pickup_request):
    mock_post.side_effect = requests.Timeout("read timed out")
    with pytest.raises(TransportError):
        client.request_pickup(pickup_request)
    assert mock_post.call_count == 1
