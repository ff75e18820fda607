from skytap_builder.actions.add_configuration_to_project import CONFIGURATION_SLOT
from skytap_builder.actions.descriptor import ActionDescriptor
from skytap_builder.models.enums import HttpMethod

DELETE_CONFIGURATION = ActionDescriptor(
    name="delete_configuration",
    display_name="Delete Configuration",
    method=HttpMethod.DELETE,
    path_template="configurations/{configuration}",
    slots=(CONFIGURATION_SLOT,),
    success_message="Configuration {configuration} was successfully deleted.",
)
