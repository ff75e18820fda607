from skytap_builder.actions.descriptor import ActionDescriptor, IdentifierSlot
from skytap_builder.models.enums import HttpMethod, SlotKind

CONFIGURATION_SLOT = IdentifierSlot(
    name="configuration",
    id_field="configuration_id",
    alt_field="configuration_file",
    kind=SlotKind.FILE_REFERENCE,
    label="configuration",
    alt_label="file",
    missing_hint="Please provide either a valid Skytap configuration ID, or a valid configuration file.",
)

PROJECT_SLOT = IdentifierSlot(
    name="project",
    id_field="project_id",
    alt_field="project_name",
    kind=SlotKind.PROJECT_NAME,
    label="project",
    alt_label="name",
    missing_hint="Please provide either the name or ID of a valid Skytap project.",
)

ADD_CONFIGURATION_TO_PROJECT = ActionDescriptor(
    name="add_configuration_to_project",
    display_name="Add Configuration to Project",
    method=HttpMethod.POST,
    path_template="projects/{project}/configurations/{configuration}",
    slots=(CONFIGURATION_SLOT, PROJECT_SLOT),
    success_message="Configuration {configuration} was successfully added to project {project}",
)
