import requests
from typing import Dict, Optional

from skytap_builder.config import HTTP_CONNECT_TIMEOUT_S, HTTP_READ_TIMEOUT_S
from skytap_builder.models.enums import ErrorCode
from skytap_builder.schemas.api import ApiRequest, ApiResponse
from skytap_builder.services.errors import TransportError

class SkytapClient:
    def __init__(self, connect_timeout_s: Optional[float] = None, read_timeout_s: Optional[float] = None):
        self.connect_timeout_s = HTTP_CONNECT_TIMEOUT_S if connect_timeout_s is None else connect_timeout_s
        self.read_timeout_s = HTTP_READ_TIMEOUT_S if read_timeout_s is None else read_timeout_s

    def _headers(self, request: ApiRequest) -> Dict[str, str]:
        return {
            "Authorization": request.auth_header,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def execute(self, request: ApiRequest) -> ApiResponse:
        """
        Send one request and hand back whatever Skytap answered.
        Only failures to complete the exchange raise; HTTP error statuses do not.
        """
        timeout = (self.connect_timeout_s, self.read_timeout_s)
        try:
            resp = requests.request(
                request.method.value,
                request.url,
                headers=self._headers(request),
                timeout=timeout,
            )
        except requests.Timeout as e:
            raise TransportError(str(e), code=ErrorCode.TRANSPORT_TIMEOUT)
        except requests.RequestException as e:
            raise TransportError(str(e))

        return ApiResponse(status_code=resp.status_code, body=resp.text or "")
