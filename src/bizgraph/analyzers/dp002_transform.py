"""DP002: link maps to their source/target schemas and to the ports that run them."""

import threading
from typing import List, Optional

from bizgraph.codes import ResourceRelationshipType, SchemaType
from bizgraph.kernel import messages
from bizgraph.kernel.resolve import check_resolution, link, record_error, resolve
from bizgraph.kernel.source import ApplicationGroup, Schema, Transform
from .base import Analyzer


class TransformDependencyAnalyzer(Analyzer):
    """Resolve map schema type names against document schemas, then find ports using each map.

    A source schema is consumed by the map, so the map is the ReferencedBy
    side; a target schema is produced by it, so the map is the ReferencesTo
    side. Ports always reference the map.
    """

    rule_name = "DP002"

    def _analyze(self, token: Optional[threading.Event]) -> None:
        group = self._source_model()
        if group is None:
            return

        self.logger.debug(messages.RUNNING_RULE, self.rule_name, self.name)

        schemas = group.schemas(SchemaType.DOCUMENT)
        for transform in group.transforms():
            if self._cancelled(token):
                return
            if transform.resource is None:
                self._missing_resource("map", transform.name, transform.resource_key)
                continue

            self._resolve_schemas(transform, schemas, is_source=True)
            self._resolve_schemas(transform, schemas, is_source=False)
            self._resolve_ports(group, transform)

        self.logger.debug(messages.RULE_COMPLETED, self.rule_name, self.name)

    def _resolve_schemas(self, transform: Transform, schemas: List[Schema], is_source: bool) -> None:
        type_names = transform.source_schema_type_names if is_source else transform.target_schema_type_names
        direction = "Source" if is_source else "Target"
        relationship = ResourceRelationshipType.REFERENCED_BY if is_source else ResourceRelationshipType.REFERENCES_TO

        for type_name in type_names:
            resolution = resolve(type_name, schemas, lambda s: s.full_name)
            schema = check_resolution(
                resolution,
                transform.resource,
                unresolved=messages.SCHEMA_REFERENCED_BY_TRANSFORM_IS_MISSING.format(
                    direction=direction, schema=type_name, key=transform.resource_key
                ),
                ambiguous=messages.SCHEMA_REFERENCED_BY_TRANSFORM_MULTIPLE_MATCHES.format(
                    direction=direction, schema=type_name, key=transform.resource_key,
                    count=len(resolution.matches),
                ),
                logger=self.logger,
            )
            if schema is None:
                continue
            if schema.resource is None:
                self._missing_resource("schema", schema.name, schema.resource_key)
                continue

            link(transform.resource, schema.resource, relationship, self.logger, self.rule_name)

    def _resolve_ports(self, group: ApplicationGroup, transform: Transform) -> None:
        ports = [p for p in group.receive_ports() if p.uses_transform(transform.full_name)]
        ports.extend(p for p in group.send_ports() if p.uses_transform(transform.full_name))

        for port in ports:
            if port.resource is None:
                self._missing_resource("port", port.name, port.resource_key)
                continue
            link(port.resource, transform.resource, ResourceRelationshipType.REFERENCES_TO,
                 self.logger, self.rule_name)

    def _missing_resource(self, entity_type: str, name: str, key: str) -> None:
        record_error(
            self.context,
            messages.UNABLE_TO_FIND_ASSOCIATED_RESOURCE.format(entity_type=entity_type, name=name, key=key),
            self.logger,
        )
