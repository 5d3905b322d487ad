"""DP003: resolve references inside orchestrations.

Message declarations are linked to the message type (and its schema) named
by their Type property; service declarations are linked to the maps their
Transform shapes name.
"""

import threading
from typing import Optional

from bizgraph.codes import MessageSeverity, ResourceRelationshipType
from bizgraph.kernel import graph, messages
from bizgraph.kernel.graph import ResourceItem
from bizgraph.kernel.resolve import check_resolution, link, record_error, report, resolve
from bizgraph.kernel.source import (
    PROPERTY_KEY_CLASS_NAME,
    PROPERTY_KEY_TYPE,
    Element,
    MessageDefinition,
    Transform,
    is_system_type,
)
from .base import Analyzer


class OrchestrationDependencyAnalyzer(Analyzer):

    rule_name = "DP003"

    def _analyze(self, token: Optional[threading.Event]) -> None:
        # Only an absent source model skips; an empty one still runs the loops
        if self.model.migration_source.source_model is None:
            self.logger.info(messages.SKIPPING_RULE_SOURCE_MODEL_MISSING, self.rule_name, self.name)
            return

        self.logger.debug(messages.RUNNING_RULE, self.rule_name, self.name)

        if not self._resolve_message_schemas(token):
            return
        if not self._resolve_transforms(token):
            return

        self.logger.debug(messages.RULE_COMPLETED, self.rule_name, self.name)

    def _resolve_message_schemas(self, token: Optional[threading.Event]) -> bool:
        declarations = self.model.find_resources_by_type(graph.RESOURCE_MESSAGE_DECLARATION)
        message_types = [
            r for r in self.model.find_resources_by_type(graph.RESOURCE_MESSAGE_TYPE)
            if isinstance(r.source_object, MessageDefinition)
        ]

        for declaration in declarations:
            if self._cancelled(token):
                return False
            if not isinstance(declaration.source_object, Element):
                self._source_object_missing(declaration)
                continue

            schema_type = declaration.source_object.find_property_value(PROPERTY_KEY_TYPE)
            if not schema_type:
                record_error(
                    self.context,
                    messages.MESSAGE_DECLARATION_TYPE_MISSING.format(name=declaration.name, key=declaration.key),
                    self.logger,
                )
                continue
            if is_system_type(schema_type):
                report(
                    declaration,
                    MessageSeverity.INFORMATION,
                    messages.SYSTEM_SCHEMA_DEPENDENCY_FOUND.format(key=declaration.key, schema=schema_type),
                )
                continue

            resolution = resolve(schema_type, message_types, lambda r: r.source_object.full_name)
            message_type = check_resolution(
                resolution,
                declaration,
                unresolved=messages.SCHEMA_REFERENCED_BY_MESSAGE_DECLARATION_IS_MISSING.format(
                    schema=schema_type, key=declaration.key
                ),
                ambiguous=messages.SCHEMA_REFERENCE_MULTIPLE_MATCHES.format(
                    schema=schema_type, key=declaration.key, count=len(resolution.matches)
                ),
                logger=self.logger,
            )
            if message_type is None:
                continue

            link(declaration, message_type, ResourceRelationshipType.REFERENCES_TO, self.logger, self.rule_name)

            # The message type's parent is the schema itself
            schema = self.model.find_resource_by_ref_id(message_type.parent_ref_id)
            if isinstance(schema, ResourceItem):
                link(declaration, schema, ResourceRelationshipType.REFERENCES_TO, self.logger, self.rule_name)

        return True

    def _resolve_transforms(self, token: Optional[threading.Event]) -> bool:
        services = self.model.find_resources_by_type(graph.RESOURCE_SERVICE_DECLARATION)
        transforms = [
            r for r in self.model.find_resources_by_type(graph.RESOURCE_MAP)
            if isinstance(r.source_object, Transform)
        ]

        for service in services:
            if self._cancelled(token):
                return False
            if not isinstance(service.source_object, Element):
                self._source_object_missing(service)
                continue

            for shape in service.source_object.find_transforms():
                class_name = shape.find_property_value(PROPERTY_KEY_CLASS_NAME) or ""
                resolution = resolve(class_name, transforms, lambda r: r.source_object.full_name)
                transform = check_resolution(
                    resolution,
                    service,
                    unresolved=messages.TRANSFORM_REFERENCED_BY_SERVICE_DECLARATION_IS_MISSING.format(
                        transform=class_name, key=service.key
                    ),
                    ambiguous=messages.TRANSFORM_REFERENCE_MULTIPLE_MATCHES.format(
                        transform=class_name, key=service.key, count=len(resolution.matches)
                    ),
                    logger=self.logger,
                )
                if transform is not None:
                    link(service, transform, ResourceRelationshipType.REFERENCES_TO, self.logger, self.rule_name)

        return True

    def _source_object_missing(self, resource: ResourceItem) -> None:
        message = messages.SOURCE_OBJECT_NOT_FOUND.format(name=resource.name, resource_type=resource.type)
        resource.add_message(MessageSeverity.ERROR, message)
        record_error(self.context, message, self.logger)
