import base64

from skytap_builder.config import SKYTAP_API_KEY_VAR, SKYTAP_USER_VAR
from skytap_builder.schemas.build import BuildContext
from skytap_builder.services.errors import MissingCredentials


def get_auth_credentials(build: BuildContext) -> str:
    """
    Build the Authorization header value for the Skytap API from the
    login carried by the build environment.
    """
    user = (build.env.get(SKYTAP_USER_VAR) or "").strip()
    api_key = (build.env.get(SKYTAP_API_KEY_VAR) or "").strip()
    if not user or not api_key:
        raise MissingCredentials(
            f"Skytap credentials are not available to this build. "
            f"Set {SKYTAP_USER_VAR} and {SKYTAP_API_KEY_VAR}."
        )
    token = base64.b64encode(f"{user}:{api_key}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"
