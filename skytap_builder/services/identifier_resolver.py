import json
from typing import Any, Dict

from skytap_builder.config import REFERENCE_ID_FIELD
from skytap_builder.models.enums import HttpMethod
from skytap_builder.services.errors import ReferenceFileNotFound, ReferenceParseError, UnknownResource
from skytap_builder.services.request_builder import build as build_request
from skytap_builder.services.response_classifier import classify


def _read_reference(file_path: str) -> Dict[str, Any]:
    try:
        with open(file_path, "r", encoding="utf-8") as fh:
            raw = fh.read()
    except UnicodeDecodeError as e:
        raise ReferenceParseError(f"Reference file {file_path} is not valid UTF-8: {e}") from e
    except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
        raise ReferenceFileNotFound(f"Reference file not found or unreadable: {file_path}") from e
    except OSError as e:
        raise ReferenceFileNotFound(f"Could not read reference file {file_path}: {e}") from e

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise ReferenceParseError(f"Reference file {file_path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ReferenceParseError(f"Reference file {file_path} does not contain a JSON object")
    return data


def _scalar_id(value: Any) -> str:
    # only strings and integers address a Skytap resource
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return ""
    return str(value).strip()


def resolve(direct_id: str, file_path: str) -> str:
    """
    Produce the runtime id of a resource.

    A direct id wins and is returned untouched. Otherwise the reference file
    (already expanded and made absolute) is read and its root ``id`` used.
    """
    if direct_id:
        return direct_id

    data = _read_reference(file_path)
    value = _scalar_id(data.get(REFERENCE_ID_FIELD))
    if not value:
        raise ReferenceParseError(
            f"Reference file {file_path} has no usable '{REFERENCE_ID_FIELD}' field"
        )
    return value


def resolve_project_by_name(name: str, client, credentials: str, strict: bool = False) -> str:
    """Look up a project id by its exact name using the project list endpoint."""
    request = build_request(HttpMethod.GET, ["projects"], credentials)
    response = client.execute(request)
    classify(response.body, response.status_code, strict=strict)

    try:
        projects = json.loads(response.body) if response.body else []
    except (ValueError, RecursionError) as e:
        raise ReferenceParseError(f"Project list response is not valid JSON: {e}") from e
    if not isinstance(projects, list):
        raise ReferenceParseError("Project list response is not a JSON array")

    for project in projects:
        if not isinstance(project, dict) or project.get("name") != name:
            continue
        project_id = _scalar_id(project.get("id"))
        if not project_id:
            raise ReferenceParseError(f"Project '{name}' has no usable id in the project list")
        return project_id
    raise UnknownResource(f"No Skytap project named '{name}' was found")
