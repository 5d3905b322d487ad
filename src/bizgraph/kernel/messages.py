"""Message templates for report messages, pipeline errors and log lines.

Templates use ``str.format`` named fields.
"""

# Pipeline errors
UNABLE_TO_FIND_ASSOCIATED_RESOURCE = (
    "Unable to find the resource associated with {entity_type} '{name}' using resource key '{key}'."
)
SOURCE_OBJECT_NOT_FOUND = (
    "The source object associated with resource '{name}' of type '{resource_type}' could not be found."
)
SOURCE_OBJECT_INVALID = (
    "The source object associated with resource '{name}' of type '{resource_type}' "
    "is not a {expected} (key '{key}')."
)
MESSAGE_DECLARATION_TYPE_MISSING = (
    "Message declaration '{name}' ({key}) has no Type property, so its schema cannot be resolved."
)
NO_APPLICATION_DEFINITION = "No application definition was parsed for resource definition '{key}'."

# Resource warnings
AMBIGUOUS_DEPENDENCY = "Dependency cannot be accurately resolved."
CONTEXT_PROPERTY_REFERENCED_BY_SCHEMA_IS_MISSING = (
    "Context property '{property_type}' promoted by schema '{schema}' could not be found."
)
CONTEXT_PROPERTY_MULTIPLE_MATCHES = (
    "Context property '{property_type}' promoted by schema '{schema}' matches {count} context properties. "
    + AMBIGUOUS_DEPENDENCY
)
SCHEMA_REFERENCED_BY_TRANSFORM_IS_MISSING = (
    "{direction} schema '{schema}' referenced by map '{key}' could not be found."
)
SCHEMA_REFERENCED_BY_TRANSFORM_MULTIPLE_MATCHES = (
    "{direction} schema '{schema}' referenced by map '{key}' matches {count} schemas. " + AMBIGUOUS_DEPENDENCY
)
SCHEMA_REFERENCED_BY_MESSAGE_DECLARATION_IS_MISSING = (
    "Schema '{schema}' referenced by message declaration '{key}' could not be found."
)
SCHEMA_REFERENCE_MULTIPLE_MATCHES = (
    "Schema '{schema}' referenced by message declaration '{key}' matches {count} message types. "
    + AMBIGUOUS_DEPENDENCY
)
TRANSFORM_REFERENCED_BY_SERVICE_DECLARATION_IS_MISSING = (
    "Map '{transform}' referenced by service declaration '{key}' could not be found."
)
TRANSFORM_REFERENCE_MULTIPLE_MATCHES = (
    "Map '{transform}' referenced by service declaration '{key}' matches {count} maps. " + AMBIGUOUS_DEPENDENCY
)
APPLICATION_REFERENCED_BY_APPLICATION_IS_MISSING = (
    "Application '{reference}' referenced by application '{application}' could not be found."
)
APPLICATION_REFERENCE_MULTIPLE_MATCHES = (
    "Application '{reference}' referenced by application '{application}' matches {count} applications. "
    + AMBIGUOUS_DEPENDENCY
)
DISTRIBUTION_LIST_SEND_PORT_NOT_FOUND = (
    "Send port '{send_port}' referenced by distribution list '{name}' ({key}) could not be found."
)
DISTRIBUTION_LIST_SEND_PORT_MULTIPLE_MATCHES = (
    "Send port '{send_port}' referenced by distribution list '{name}' ({key}) matches {count} send ports. "
    + AMBIGUOUS_DEPENDENCY
)

# Resource information
SYSTEM_SCHEMA_DEPENDENCY_FOUND = (
    "Message declaration '{key}' uses the built-in type '{schema}', which has no schema to migrate."
)

# Log lines
RUNNING_ANALYZER = "Running %s analyzer"
RUNNING_RULE = "%s: running rule %s"
RULE_COMPLETED = "%s: rule %s completed"
RULE_CANCELLED = "%s: rule %s cancelled"
SKIPPING_RULE_SOURCE_MODEL_MISSING = "%s: skipping rule %s as the source model is missing"
SKIPPING_RULE_NO_RESOURCES = "%s: skipping rule %s as the model has no resources"
RELATIONSHIP_CREATED = "%s: created %s relationship from '%s' to '%s'"
