from typing import Dict

from skytap_builder.actions.descriptor import ActionDescriptor, IdentifierSlot
from skytap_builder.schemas.api import FormCheck
from skytap_builder.services.errors import InvalidInputCombination, MissingInput


def _filled(value) -> bool:
    return bool(value and str(value).strip())


def exactly_one_of(first, second) -> bool:
    return _filled(first) != _filled(second)


def check_slot(slot: IdentifierSlot, inputs: Dict[str, str]) -> None:
    direct, alt = slot.values(inputs)
    if _filled(direct) and _filled(alt):
        raise InvalidInputCombination(
            f"Values were provided for both {slot.label} ID and {slot.alt_label}. "
            "Please provide just one or the other."
        )
    if not _filled(direct) and not _filled(alt):
        raise MissingInput(
            f"No value was provided for {slot.label} ID or {slot.alt_label}. "
            f"{slot.missing_hint}".strip()
        )


def validate_inputs(descriptor: ActionDescriptor, inputs: Dict[str, str]) -> None:
    """
    Final check that the either/or inputs of every slot are legitimate.
    Raises on the first pair where both values are entered or both are blank.
    """
    for slot in descriptor.slots:
        check_slot(slot, inputs)


def check_numeric_id(value: str, label: str) -> FormCheck:
    if not _filled(value):
        return FormCheck(ok=True)
    try:
        int(value.strip())
    except ValueError:
        return FormCheck(ok=False, message=f"Please enter a valid integer for the {label} ID.")
    return FormCheck(ok=True)


def check_id_pair(id_value: str, alt_value: str, label: str, alt_label: str) -> FormCheck:
    numeric = check_numeric_id(id_value, label)
    if not numeric.ok:
        return numeric
    if _filled(id_value) and _filled(alt_value):
        return FormCheck(
            ok=False,
            message=(
                f"Please enter either a valid {label} ID or a valid {label} {alt_label}. "
                "Build step will fail if both values are entered."
            ),
        )
    return FormCheck(ok=True)
