from fastapi import APIRouter, HTTPException

from skytap_builder.actions.registry import get_action, list_actions
from skytap_builder.builder import SkytapBuilder
from skytap_builder.schemas.api import StepOutcome, StepRunRequest
from skytap_builder.schemas.build import GlobalOptions
from skytap_builder.services.validation import check_id_pair

router = APIRouter()

@router.get("/actions")
def actions():
    return list_actions()

@router.post("/steps/{action_name}", response_model=StepOutcome)
def run_step(action_name: str, req: StepRunRequest):
    if get_action(action_name) is None:
        raise HTTPException(404, "Unknown Skytap action")

    step = SkytapBuilder(action_name, req.inputs)
    return step.run(req.build, GlobalOptions.from_config())

@router.post("/steps/{action_name}/check")
def check_step_inputs(action_name: str, req: StepRunRequest):
    descriptor = get_action(action_name)
    if descriptor is None:
        raise HTTPException(404, "Unknown Skytap action")

    out = {}
    for slot in descriptor.slots:
        direct, alt = slot.values(req.inputs)
        check = check_id_pair(direct, alt, slot.label, slot.alt_label)
        out[slot.id_field] = check.model_dump()
    return out
