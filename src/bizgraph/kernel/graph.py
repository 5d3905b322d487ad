"""Resource graph: container/definition/item tree plus relationship edges."""

from __future__ import annotations

import uuid
from typing import Annotated, Any, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from bizgraph.codes import MessageSeverity, ResourceRelationshipType
from bizgraph.contracts import ReportMessage


# Resource type vocabulary
APPLICATION_PREFIX = "biztalkapplication."

RESOURCE_CONTAINER_PREFIX = APPLICATION_PREFIX + "resourcecontainer."
RESOURCE_CONTAINER_MSI = RESOURCE_CONTAINER_PREFIX + "msi"
RESOURCE_CONTAINER_CAB = RESOURCE_CONTAINER_PREFIX + "cab"

RESOURCE_DEFINITION_PREFIX = APPLICATION_PREFIX + "resourcedefinition."
RESOURCE_DEFINITION_APPLICATION_DEFINITION = RESOURCE_DEFINITION_PREFIX + "applicationdefinition"
RESOURCE_DEFINITION_BINDINGS = RESOURCE_DEFINITION_PREFIX + "bindings"
RESOURCE_DEFINITION_MAP = RESOURCE_DEFINITION_PREFIX + "map"
RESOURCE_DEFINITION_ORCHESTRATION = RESOURCE_DEFINITION_PREFIX + "orchestration"
RESOURCE_DEFINITION_SCHEMA = RESOURCE_DEFINITION_PREFIX + "schema"

RESOURCE_PREFIX = APPLICATION_PREFIX + "resource."
RESOURCE_APPLICATION = RESOURCE_PREFIX + "application"
RESOURCE_CONTEXT_PROPERTY = RESOURCE_PREFIX + "contextproperty"
RESOURCE_DISTRIBUTION_LIST = RESOURCE_PREFIX + "distributionlist"
RESOURCE_DOCUMENT_SCHEMA = RESOURCE_PREFIX + "documentschema"
RESOURCE_MAP = RESOURCE_PREFIX + "map"
RESOURCE_MESSAGE_DECLARATION = RESOURCE_PREFIX + "messagedeclaration"
RESOURCE_MESSAGE_TYPE = RESOURCE_PREFIX + "messagetype"
RESOURCE_MODULE = RESOURCE_PREFIX + "module"
RESOURCE_PROPERTY_SCHEMA = RESOURCE_PREFIX + "propertyschema"
RESOURCE_RECEIVE_PORT = RESOURCE_PREFIX + "receiveport"
RESOURCE_SEND_PORT = RESOURCE_PREFIX + "sendport"
RESOURCE_SERVICE_DECLARATION = RESOURCE_PREFIX + "servicedeclaration"


def _new_ref_id() -> str:
    return str(uuid.uuid4())


class ResourceRelationship(BaseModel):
    """A directed, typed edge pointing at another node's ref_id."""
    resource_ref_id: str
    resource_relationship_type: ResourceRelationshipType

    model_config = ConfigDict(extra="forbid")


class _ResourceNode(BaseModel):
    """Fields shared by every node kind.

    ``ref_id`` is minted per node and is the only valid relationship target;
    ``key`` is assigned at parse time and may collide across applications.
    ``source_object`` is a weak back-reference to the parsed entity the node
    stands for and is never serialized.
    """
    key: str = ""
    type: str = ""
    name: str = ""
    description: str = ""
    ref_id: str = Field(default_factory=_new_ref_id)
    parent_ref_id: Optional[str] = None
    resource_relationships: List[ResourceRelationship] = Field(default_factory=list)
    report_messages: List[ReportMessage] = Field(default_factory=list)
    source_object: Any = Field(default=None, exclude=True, repr=False)

    model_config = ConfigDict(extra="forbid")

    def add_relationship(self, ref_id: str, relationship_type: ResourceRelationshipType) -> ResourceRelationship:
        """Append an edge (append-only, duplicates are kept)."""
        relationship = ResourceRelationship(
            resource_ref_id=ref_id,
            resource_relationship_type=relationship_type,
        )
        self.resource_relationships.append(relationship)
        return relationship

    def add_message(self, severity: MessageSeverity, message: str) -> ReportMessage:
        """Append a report message."""
        report_message = ReportMessage(severity=severity, message=message)
        self.report_messages.append(report_message)
        return report_message

    def relationships_of_type(self, relationship_type: ResourceRelationshipType) -> List[ResourceRelationship]:
        """Get edges of a single type, in insertion order."""
        return [r for r in self.resource_relationships if r.resource_relationship_type == relationship_type]

    def has_relationship(self, ref_id: str, relationship_type: ResourceRelationshipType) -> bool:
        """Check whether an edge of this type to ref_id already exists."""
        return any(
            r.resource_ref_id == ref_id and r.resource_relationship_type == relationship_type
            for r in self.resource_relationships
        )


class ResourceItem(_ResourceNode):
    """One logical artifact or sub-artifact (schema, port, property, ...)."""
    kind: Literal["item"] = "item"
    resources: List[ResourceItem] = Field(default_factory=list)

    def add_resource(self, resource: ResourceItem) -> ResourceItem:
        resource.parent_ref_id = self.ref_id
        self.resources.append(resource)
        return resource

    def iter_resources(self) -> Iterator[ResourceItem]:
        """Yield this item and all descendant items, depth first."""
        yield self
        for child in self.resources:
            yield from child.iter_resources()


class ResourceDefinition(_ResourceNode):
    """A single source file's worth of content."""
    kind: Literal["definition"] = "definition"
    resources: List[ResourceItem] = Field(default_factory=list)

    def add_resource(self, resource: ResourceItem) -> ResourceItem:
        resource.parent_ref_id = self.ref_id
        self.resources.append(resource)
        return resource

    def iter_resources(self) -> Iterator[ResourceItem]:
        for item in self.resources:
            yield from item.iter_resources()


class ResourceContainer(_ResourceNode):
    """A packaging unit (installer, cabinet, assembly)."""
    kind: Literal["container"] = "container"
    resource_containers: List[ResourceContainer] = Field(default_factory=list)
    resource_definitions: List[ResourceDefinition] = Field(default_factory=list)

    def add_container(self, container: ResourceContainer) -> ResourceContainer:
        container.parent_ref_id = self.ref_id
        self.resource_containers.append(container)
        return container

    def add_definition(self, definition: ResourceDefinition) -> ResourceDefinition:
        definition.parent_ref_id = self.ref_id
        self.resource_definitions.append(definition)
        return definition

    def iter_resources(self) -> Iterator[ResourceItem]:
        for container in self.resource_containers:
            yield from container.iter_resources()
        for definition in self.resource_definitions:
            yield from definition.iter_resources()


ResourceNode = Annotated[Union[ResourceContainer, ResourceDefinition, ResourceItem], Field(discriminator="kind")]


def iter_children(node: ResourceNode) -> Iterator[ResourceNode]:
    """Yield the direct children of any node kind."""
    if isinstance(node, ResourceContainer):
        yield from node.resource_containers
        yield from node.resource_definitions
    elif isinstance(node, (ResourceDefinition, ResourceItem)):
        yield from node.resources


class MigrationSource(BaseModel):
    """Source side of the model: the resource tree and the parsed source model.

    ``source_model`` is ``None`` when the parse stage produced nothing.
    """
    resource_containers: List[ResourceContainer] = Field(default_factory=list)
    source_model: Any = Field(default=None, exclude=True, repr=False)


class ApplicationModel(BaseModel):
    """The graph handed from the parse stage to the analyzers."""
    migration_source: MigrationSource = Field(default_factory=MigrationSource)

    def iter_nodes(self) -> Iterator[ResourceNode]:
        """Yield every node (containers, definitions, items), depth first."""
        stack: List[ResourceNode] = list(reversed(self.migration_source.resource_containers))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(iter_children(node))))

    def find_all_resources(self) -> List[ResourceItem]:
        """Get every resource item in document order."""
        results: List[ResourceItem] = []
        for container in self.migration_source.resource_containers:
            results.extend(container.iter_resources())
        return results

    def find_resources_by_type(self, resource_type: str) -> List[ResourceItem]:
        """Get every resource item whose type equals resource_type."""
        return [r for r in self.find_all_resources() if r.type == resource_type]

    def find_resource_by_ref_id(self, ref_id: str) -> Optional[ResourceNode]:
        """Get the node (any kind) with this ref_id, or None."""
        for node in self.iter_nodes():
            if node.ref_id == ref_id:
                return node
        return None


ResourceItem.model_rebuild()
ResourceContainer.model_rebuild()
