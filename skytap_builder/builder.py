from typing import Dict, Optional

from skytap_builder.actions.descriptor import ActionDescriptor
from skytap_builder.actions.registry import get_action
from skytap_builder.schemas.api import StepOutcome
from skytap_builder.schemas.build import BuildContext, GlobalOptions
from skytap_builder.services.http_service_client import SkytapClient
from skytap_builder.services.orchestrator_service import OrchestratorService


class UnknownActionError(LookupError):
    pass


class SkytapBuilder:
    """Build step that performs one Skytap action with the inputs entered for it."""

    def __init__(self, action: str, inputs: Optional[Dict[str, str]] = None, client: Optional[SkytapClient] = None):
        descriptor = get_action(action)
        if descriptor is None:
            raise UnknownActionError(f"Unknown Skytap action: {action}")
        self.descriptor: ActionDescriptor = descriptor
        self.inputs = dict(inputs or {})
        self.client = client

    def run(self, build: BuildContext, options: GlobalOptions) -> StepOutcome:
        engine = OrchestratorService(client=self.client, options=options)
        return engine.run(self.descriptor, self.inputs, build)

    def execute_step(self, build: BuildContext, options: GlobalOptions) -> bool:
        return self.run(build, options).success

    def perform(self, build: BuildContext) -> bool:
        # plugin-wide toggles are read once per build and passed down explicitly
        return self.execute_step(build, GlobalOptions.from_config())
