import json
from typing import Any, Optional

from skytap_builder.models.enums import ErrorCode
from skytap_builder.services.errors import ApiError


def _parse(body: str) -> Optional[Any]:
    if not body or not body.strip():
        return None
    try:
        return json.loads(body)
    except (ValueError, RecursionError):
        return None


def _error_message(err: Any) -> str:
    if isinstance(err, dict):
        for key in ("message", "description"):
            if err.get(key):
                return str(err[key])
        return json.dumps(err)
    return str(err)


def extract_error(body: str) -> Optional[str]:
    """Return the embedded Skytap error message, or None when the body carries none."""
    data = _parse(body)
    if not isinstance(data, dict):
        return None

    if data.get("error"):
        return _error_message(data["error"])

    errors = data.get("errors")
    if isinstance(errors, list) and errors:
        return "; ".join(_error_message(e) for e in errors)
    return None


def classify(body: str, status_code: Optional[int] = None, strict: bool = False) -> None:
    """
    Raise ApiError when the response body reports a Skytap error.

    A body without an error marker is success, including empty or non-JSON
    bodies. With strict=True a non-2xx status or a non-JSON body is rejected too.
    """
    message = extract_error(body)
    if message is not None:
        raise ApiError(message, details={"status_code": status_code})

    if not strict:
        return

    if status_code is not None and (status_code < 200 or status_code >= 300):
        raise ApiError(f"Skytap returned HTTP {status_code}", code=ErrorCode.MALFORMED_RESPONSE,
                       details={"status_code": status_code})
    if body and body.strip() and _parse(body) is None:
        raise ApiError("Skytap returned a non-JSON response body", code=ErrorCode.MALFORMED_RESPONSE,
                       details={"status_code": status_code})
