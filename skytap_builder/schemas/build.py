from pydantic import BaseModel, Field
from typing import Dict

from skytap_builder.config import SKYTAP_LOGGING_ENABLED, SKYTAP_STRICT_RESPONSES

class BuildContext(BaseModel):
    """What the host build hands to a step: its environment and workspace dir."""
    build_id: str = ""
    workspace: str = "."
    env: Dict[str, str] = Field(default_factory=dict)

class GlobalOptions(BaseModel):
    logging_enabled: bool = True
    strict_responses: bool = False

    @classmethod
    def from_config(cls) -> "GlobalOptions":
        return cls(
            logging_enabled=SKYTAP_LOGGING_ENABLED,
            strict_responses=SKYTAP_STRICT_RESPONSES,
        )
