import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


SKYTAP_BASE_URL = os.getenv("SKYTAP_BASE_URL", "https://cloud.skytap.com")

HTTP_CONNECT_TIMEOUT_S = float(os.getenv("HTTP_CONNECT_TIMEOUT_S", "3.0"))
HTTP_READ_TIMEOUT_S = float(os.getenv("HTTP_READ_TIMEOUT_S", "60.0"))

# Plugin-wide toggles, handed to the engine through GlobalOptions
SKYTAP_LOGGING_ENABLED = _flag("SKYTAP_LOGGING_ENABLED", "true")
SKYTAP_STRICT_RESPONSES = _flag("SKYTAP_STRICT_RESPONSES", "false")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Build environment variables that carry the Skytap login
SKYTAP_USER_VAR = "SKYTAP_USER"
SKYTAP_API_KEY_VAR = "SKYTAP_API_KEY"

# Root field of a reference file that holds the resource id
REFERENCE_ID_FIELD = "id"
