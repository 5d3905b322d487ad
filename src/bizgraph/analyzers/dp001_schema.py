"""DP001: link document schemas to the context properties they promote."""

import threading
from typing import List, Optional

from bizgraph.codes import ResourceRelationshipType, SchemaType
from bizgraph.kernel import messages
from bizgraph.kernel.resolve import check_resolution, link, record_error, resolve
from bizgraph.kernel.source import ContextProperty, Schema
from .base import Analyzer


class SchemaDependencyAnalyzer(Analyzer):
    """Resolve each promoted property's type against context properties by full name."""

    rule_name = "DP001"

    def _analyze(self, token: Optional[threading.Event]) -> None:
        group = self._source_model()
        if group is None:
            return

        self.logger.debug(messages.RUNNING_RULE, self.rule_name, self.name)

        property_schemas = [
            s for s in group.schemas(SchemaType.PROPERTY) if self._has_resource(s, s.name, s.resource_key)
        ]
        # Context properties paired with their owning property schema
        candidates = [
            (cp, ps) for ps in property_schemas for cp in ps.context_properties
        ]

        for schema in group.schemas(SchemaType.DOCUMENT):
            if self._cancelled(token):
                return
            if not self._has_resource(schema, schema.name, schema.resource_key):
                continue
            self._resolve_promoted_properties(schema, candidates)

        self.logger.debug(messages.RULE_COMPLETED, self.rule_name, self.name)

    def _resolve_promoted_properties(self, schema: Schema, candidates: List[tuple]) -> None:
        for promoted in schema.promoted_properties:
            resolution = resolve(promoted.property_type, candidates, lambda c: c[0].full_name)
            matched = check_resolution(
                resolution,
                schema.resource,
                unresolved=messages.CONTEXT_PROPERTY_REFERENCED_BY_SCHEMA_IS_MISSING.format(
                    property_type=promoted.property_type, schema=schema.full_name
                ),
                ambiguous=messages.CONTEXT_PROPERTY_MULTIPLE_MATCHES.format(
                    property_type=promoted.property_type,
                    schema=schema.full_name,
                    count=len(resolution.matches),
                ),
                logger=self.logger,
            )
            if matched is None:
                continue

            context_property, property_schema = matched
            if not self._has_resource(context_property, context_property.full_name, context_property.resource_key):
                continue

            link(schema.resource, context_property.resource, ResourceRelationshipType.REFERENCES_TO,
                 self.logger, self.rule_name)

            # One edge per property schema, however many of its properties are promoted
            if not schema.resource.has_relationship(property_schema.resource.ref_id,
                                                    ResourceRelationshipType.REFERENCES_TO):
                link(schema.resource, property_schema.resource, ResourceRelationshipType.REFERENCES_TO,
                     self.logger, self.rule_name)

    def _has_resource(self, entity, name: str, key: str) -> bool:
        if entity.resource is not None:
            return True
        entity_type = "context property" if isinstance(entity, ContextProperty) else "schema"
        record_error(
            self.context,
            messages.UNABLE_TO_FIND_ASSOCIATED_RESOURCE.format(entity_type=entity_type, name=name, key=key),
            self.logger,
        )
        return False
