import pytest
import requests

from skytap_builder.models.enums import ErrorCode, HttpMethod
from skytap_builder.schemas.api import ApiRequest
from skytap_builder.services.errors import TransportError
from skytap_builder.services.http_service_client import SkytapClient

URL = "https://cloud.skytap.com/configurations/555"


def _request(method=HttpMethod.DELETE):
    return ApiRequest(method=method, url=URL, auth_header="Basic abc")


def test_execute_returns_body_and_status(requests_mock):
    requests_mock.delete(URL, text='{"id":"555"}', status_code=200)
    resp = SkytapClient().execute(_request())
    assert resp.status_code == 200
    assert resp.body == '{"id":"555"}'

    sent = requests_mock.last_request
    assert sent.method == "DELETE"
    assert sent.headers["Authorization"] == "Basic abc"
    assert sent.headers["Accept"] == "application/json"


def test_http_error_status_is_not_transport_error(requests_mock):
    requests_mock.delete(URL, text='{"error":{"message":"not found"}}', status_code=404)
    resp = SkytapClient().execute(_request())
    assert resp.status_code == 404
    assert "not found" in resp.body


def test_timeout_maps_to_transport_timeout(requests_mock):
    requests_mock.delete(URL, exc=requests.exceptions.ConnectTimeout)
    with pytest.raises(TransportError) as exc:
        SkytapClient().execute(_request())
    assert exc.value.code == ErrorCode.TRANSPORT_TIMEOUT


def test_connection_failure_maps_to_transport_error(requests_mock):
    requests_mock.delete(URL, exc=requests.exceptions.ConnectionError("refused"))
    with pytest.raises(TransportError) as exc:
        SkytapClient().execute(_request())
    assert exc.value.code == ErrorCode.TRANSPORT_ERROR


def test_timeouts_passed_to_requests(mocker):
    fake = mocker.patch("skytap_builder.services.http_service_client.requests.request")
    fake.return_value.status_code = 200
    fake.return_value.text = ""
    SkytapClient(connect_timeout_s=1.5, read_timeout_s=9.0).execute(_request(HttpMethod.POST))
    assert fake.call_args.kwargs["timeout"] == (1.5, 9.0)
    assert fake.call_args.args == ("POST", URL)
