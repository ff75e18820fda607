"""
Data-driven action definition.

One descriptor per Skytap operation: which identifier slots it needs, how
each slot may be supplied, and the request it sends once they are resolved.
The engine in services/orchestrator_service.py runs every descriptor the same way.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from skytap_builder.models.enums import HttpMethod, SlotKind


@dataclass(frozen=True)
class IdentifierSlot:
    """
    One either/or input pair.
    - id_field: form field holding a direct numeric id
    - alt_field: form field holding a reference file path or a resource name
    """
    name: str
    id_field: str
    alt_field: str
    kind: SlotKind
    label: str
    alt_label: str
    missing_hint: str = ""

    def values(self, inputs: Dict[str, str]) -> Tuple[str, str]:
        return (inputs.get(self.id_field) or "").strip(), (inputs.get(self.alt_field) or "").strip()


@dataclass(frozen=True)
class ActionDescriptor:
    name: str
    display_name: str
    method: HttpMethod
    path_template: str
    slots: Tuple[IdentifierSlot, ...]
    success_message: str
