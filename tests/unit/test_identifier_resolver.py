import json
import pytest
from unittest.mock import MagicMock

from skytap_builder.schemas.api import ApiResponse
from skytap_builder.services.errors import ApiError, ReferenceFileNotFound, ReferenceParseError, UnknownResource
from skytap_builder.services.identifier_resolver import resolve, resolve_project_by_name


def test_direct_id_returned_without_file_io(mocker):
    reader = mocker.patch("skytap_builder.services.identifier_resolver._read_reference")
    assert resolve("555", "/does/not/matter.json") == "555"
    reader.assert_not_called()


def test_id_read_from_reference_file(reference_file):
    path = reference_file("conf.json", {"id": "12345", "name": "env1", "runstate": "stopped"})
    assert resolve("", path) == "12345"


def test_numeric_id_in_reference_file_is_stringified(reference_file):
    path = reference_file("conf.json", {"id": 777})
    assert resolve("", path) == "777"


def test_missing_reference_file(tmp_path):
    with pytest.raises(ReferenceFileNotFound):
        resolve("", str(tmp_path / "nope.json"))


def test_directory_is_not_a_reference_file(tmp_path):
    with pytest.raises(ReferenceFileNotFound):
        resolve("", str(tmp_path))


@pytest.mark.parametrize("content", ["not json", "[1, 2]", json.dumps({"name": "env1"}), json.dumps({"id": ""})])
def test_bad_reference_content(reference_file, content):
    path = reference_file("bad.json", content)
    with pytest.raises(ReferenceParseError):
        resolve("", path)


def _client_returning(body: str, status: int = 200):
    client = MagicMock()
    client.execute.return_value = ApiResponse(status_code=status, body=body)
    return client


def test_project_lookup_by_name():
    client = _client_returning(json.dumps([{"id": "7", "name": "staging"}, {"id": "42", "name": "qa"}]))
    assert resolve_project_by_name("qa", client, "Basic abc") == "42"

    request = client.execute.call_args[0][0]
    assert request.url == "https://cloud.skytap.com/projects"
    assert request.method.value == "GET"
    assert request.auth_header == "Basic abc"


def test_project_lookup_no_match():
    client = _client_returning(json.dumps([{"id": "7", "name": "staging"}]))
    with pytest.raises(UnknownResource):
        resolve_project_by_name("QA", client, "Basic abc")


def test_project_lookup_api_error():
    client = _client_returning(json.dumps({"error": {"message": "unauthorized"}}), status=401)
    with pytest.raises(ApiError) as exc:
        resolve_project_by_name("qa", client, "Basic abc")
    assert exc.value.message == "unauthorized"


def test_project_lookup_non_list():
    client = _client_returning(json.dumps({"id": "1"}))
    with pytest.raises(ReferenceParseError):
        resolve_project_by_name("qa", client, "Basic abc")


def test_reference_file_with_invalid_utf8(tmp_path):
    path = tmp_path / "conf.json"
    path.write_bytes(b'{"id": "1\xff\xfe"}')
    with pytest.raises(ReferenceParseError):
        resolve("", str(path))


def test_deeply_nested_reference_file(reference_file):
    path = reference_file("deep.json", "[" * 100000 + "]" * 100000)
    with pytest.raises(ReferenceParseError):
        resolve("", path)


@pytest.mark.parametrize("value", [{"x": 1}, [1, 2], True, 1.5])
def test_non_scalar_reference_id_rejected(reference_file, value):
    path = reference_file("conf.json", {"id": value})
    with pytest.raises(ReferenceParseError):
        resolve("", path)


def test_project_with_non_scalar_id_rejected():
    client = _client_returning(json.dumps([{"id": {"x": 1}, "name": "qa"}]))
    with pytest.raises(ReferenceParseError):
        resolve_project_by_name("qa", client, "Basic abc")


def test_deeply_nested_project_list():
    client = _client_returning("[" * 100000 + "]" * 100000)
    with pytest.raises(ReferenceParseError):
        resolve_project_by_name("qa", client, "Basic abc")
