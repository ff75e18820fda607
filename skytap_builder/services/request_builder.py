from typing import Dict, Iterable

from skytap_builder.config import SKYTAP_BASE_URL
from skytap_builder.models.enums import HttpMethod
from skytap_builder.schemas.api import ApiRequest


def build_url(segments: Iterable[str], base_url: str = SKYTAP_BASE_URL) -> str:
    parts = [base_url.rstrip("/")]
    for seg in segments:
        seg = str(seg).strip("/")
        if seg:
            parts.append(seg)
    return "/".join(parts)


def build(method: HttpMethod, segments: Iterable[str], credentials: str,
          base_url: str = SKYTAP_BASE_URL) -> ApiRequest:
    return ApiRequest(method=method, url=build_url(segments, base_url), auth_header=credentials)


def build_from_template(method: HttpMethod, template: str, identifiers: Dict[str, str],
                        credentials: str, base_url: str = SKYTAP_BASE_URL) -> ApiRequest:
    """Fill a descriptor path template such as 'configurations/{configuration}'."""
    path = template.format(**identifiers)
    return build(method, path.split("/"), credentials, base_url)
