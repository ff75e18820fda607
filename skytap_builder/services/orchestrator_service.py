from typing import Dict, Optional

from skytap_builder.actions.descriptor import ActionDescriptor, IdentifierSlot
from skytap_builder.models.enums import SlotKind, StepStage
from skytap_builder.schemas.api import StepOutcome
from skytap_builder.schemas.build import BuildContext, GlobalOptions
from skytap_builder.services.credentials import get_auth_credentials
from skytap_builder.services.errors import ApiError, StepError, TransportError
from skytap_builder.services.http_service_client import SkytapClient
from skytap_builder.services.identifier_resolver import resolve, resolve_project_by_name
from skytap_builder.services.request_builder import build_from_template
from skytap_builder.services.response_classifier import classify
from skytap_builder.services.step_logger import BANNER, StepLogger
from skytap_builder.services.validation import validate_inputs
from skytap_builder.services.workspace import expand_env_vars, to_absolute_path

class OrchestratorService:
    """
    Runs one action step end to end:
    VALIDATE -> RESOLVE_CREDENTIALS -> RESOLVE_IDENTIFIERS -> BUILD_REQUEST -> EXECUTE -> CLASSIFY.
    The first failing stage ends the step; nothing is retried or rolled back.
    """

    def __init__(self, client: Optional[SkytapClient] = None, options: Optional[GlobalOptions] = None):
        self.client = client or SkytapClient()
        self.options = options or GlobalOptions()

    def run(self, descriptor: ActionDescriptor, inputs: Dict[str, str], build: BuildContext) -> StepOutcome:
        log = StepLogger(descriptor.name, self.options.logging_enabled)
        log.banner(descriptor.display_name)

        stage = StepStage.START
        try:
            stage = StepStage.VALIDATE
            validate_inputs(descriptor, inputs)

            stage = StepStage.RESOLVE_CREDENTIALS
            credentials = get_auth_credentials(build)

            stage = StepStage.RESOLVE_IDENTIFIERS
            identifiers = {
                slot.name: self._resolve_slot(slot, inputs, build, credentials, log)
                for slot in descriptor.slots
            }

            stage = StepStage.BUILD_REQUEST
            log.info("Building request url ...")
            request = build_from_template(descriptor.method, descriptor.path_template, identifiers, credentials)
            log.info(f"Request URL: {request.url}")

            stage = StepStage.EXECUTE
            log.info(f"Sending {request.method.value} request")
            response = self.client.execute(request)

            stage = StepStage.CLASSIFY
            classify(response.body, response.status_code, strict=self.options.strict_responses)

        except ApiError as e:
            log.error(f"Request returned an error: {e.message}")
            log.error("Failing build step.")
            return self._failed(descriptor, log, stage, e)

        except TransportError as e:
            log.error(f"Skytap Exception: {e.message}")
            return self._failed(descriptor, log, stage, e)

        except StepError as e:
            if stage == StepStage.RESOLVE_IDENTIFIERS:
                log.error(f"Error obtaining runtime id: {e.message}")
            else:
                log.error(e.message)
            return self._failed(descriptor, log, stage, e)

        log.info("")
        log.info(response.body)
        log.info("")
        log.always(descriptor.success_message.format(**identifiers))
        log.always(BANNER)

        return StepOutcome(action=descriptor.name, success=True, stage=StepStage.DONE, lines=log.lines)

    def _resolve_slot(self, slot: IdentifierSlot, inputs: Dict[str, str], build: BuildContext,
                      credentials: str, log: StepLogger) -> str:
        direct, alt = slot.values(inputs)

        if slot.kind == SlotKind.PROJECT_NAME:
            if direct:
                value = direct
            else:
                value = resolve_project_by_name(expand_env_vars(build, alt), self.client, credentials,
                                                strict=self.options.strict_responses)
        else:
            path = expand_env_vars(build, alt)
            if path:
                path = to_absolute_path(build, path)
            value = resolve(direct, path)

        log.info(f"{slot.label.capitalize()} ID: {value}")
        if alt:
            log.info(f"{slot.label.capitalize()} {slot.alt_label.capitalize()}: {alt}")
        return value

    def _failed(self, descriptor: ActionDescriptor, log: StepLogger, stage: StepStage, e: StepError) -> StepOutcome:
        return StepOutcome(
            action=descriptor.name,
            success=False,
            stage=stage,
            error_code=e.code,
            lines=log.lines,
        )
