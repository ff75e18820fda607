"""
Registry of Skytap actions. Hosts look an action up by name and hand its
descriptor to the engine.
init_actions() is idempotent: repeated calls do not duplicate registrations.
"""
from typing import Dict, Optional

from skytap_builder.actions.add_configuration_to_project import ADD_CONFIGURATION_TO_PROJECT
from skytap_builder.actions.delete_configuration import DELETE_CONFIGURATION
from skytap_builder.actions.descriptor import ActionDescriptor

ACTIONS: Dict[str, ActionDescriptor] = {}
_INIT_DONE = False


def register(descriptor: ActionDescriptor) -> None:
    if descriptor.name:
        ACTIONS[descriptor.name.lower()] = descriptor


def get_action(name: str) -> Optional[ActionDescriptor]:
    if not name:
        return None
    init_actions()
    return ACTIONS.get(name.strip().lower())


def list_actions() -> Dict[str, str]:
    init_actions()
    return {name: d.display_name for name, d in ACTIONS.items()}


def init_actions() -> None:
    global _INIT_DONE
    if _INIT_DONE:
        return
    register(ADD_CONFIGURATION_TO_PROJECT)
    register(DELETE_CONFIGURATION)
    _INIT_DONE = True
