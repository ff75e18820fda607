from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from skytap_builder.models.enums import ErrorCode, HttpMethod, LogLevel, StepStage
from skytap_builder.schemas.build import BuildContext

class ApiRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    url: str
    auth_header: str

class ApiResponse(BaseModel):
    status_code: int
    body: str = ""

class LogLine(BaseModel):
    level: LogLevel
    message: str

class StepOutcome(BaseModel):
    action: str
    success: bool
    stage: StepStage
    error_code: Optional[ErrorCode] = None
    lines: List[LogLine] = Field(default_factory=list)

class StepRunRequest(BaseModel):
    inputs: Dict[str, str] = Field(default_factory=dict)
    build: BuildContext = Field(default_factory=BuildContext)

class FormCheck(BaseModel):
    ok: bool
    message: str = ""
