"""Parsed source model: the entities behind the resource graph's nodes.

Entities that stand for a graph node carry a ``resource_key`` assigned at
parse time and a ``resource`` pointer to the node itself. A pointer that is
``None`` means the graph is inconsistent with the source model.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from bizgraph.codes import SchemaType
from .graph import ResourceItem


SYSTEM_APPLICATION_NAME = "BizTalk.System"
SYSTEM_TYPE_PREFIX = "System."

# Orchestration element types and property keys
ELEMENT_TYPE_MESSAGE_DECLARATION = "MessageDeclaration"
ELEMENT_TYPE_MODULE = "Module"
ELEMENT_TYPE_SERVICE_BODY = "ServiceBody"
ELEMENT_TYPE_SERVICE_DECLARATION = "ServiceDeclaration"
ELEMENT_TYPE_TRANSFORM = "Transform"
PROPERTY_KEY_CLASS_NAME = "ClassName"
PROPERTY_KEY_TYPE = "Type"


def is_system_type(type_name: str) -> bool:
    """Check whether a fully-qualified type name is a built-in primitive."""
    return type_name.lower().startswith(SYSTEM_TYPE_PREFIX.lower())


@dataclass
class PromotedProperty:
    """A context property promoted from a message body."""
    property_type: str  # Fully-qualified context property name
    xpath: str = ""


@dataclass
class ContextProperty:
    """A context property declared by a property schema."""
    full_name: str
    property_name: str = ""
    namespace: str = ""
    data_type: str = ""
    resource_key: str = ""
    resource: Optional[ResourceItem] = field(default=None, repr=False)


@dataclass
class MessageDefinition:
    """A root element of a document schema."""
    full_name: str
    root_element_name: str = ""
    xml_namespace: str = ""
    local_name: str = ""
    promoted_properties: List[PromotedProperty] = field(default_factory=list)
    resource_key: str = ""
    resource: Optional[ResourceItem] = field(default=None, repr=False)



@dataclass
class Schema:
    """A document or property schema."""
    name: str
    full_name: str
    schema_type: SchemaType = SchemaType.UNKNOWN
    context_properties: List[ContextProperty] = field(default_factory=list)
    message_definitions: List[MessageDefinition] = field(default_factory=list)
    resource_key: str = ""
    resource: Optional[ResourceItem] = field(default=None, repr=False)

    @property
    def promoted_properties(self) -> List[PromotedProperty]:
        """Promoted properties across all message definitions."""
        return [p for m in self.message_definitions for p in m.promoted_properties]


@dataclass
class Transform:
    """A map between source and target schemas."""
    name: str
    full_name: str
    source_schema_type_names: List[str] = field(default_factory=list)
    target_schema_type_names: List[str] = field(default_factory=list)
    resource_key: str = ""
    resource: Optional[ResourceItem] = field(default=None, repr=False)


@dataclass
class ReceivePort:
    name: str
    inbound_transforms: List[str] = field(default_factory=list)  # Map full names
    outbound_transforms: List[str] = field(default_factory=list)
    resource_key: str = ""
    resource: Optional[ResourceItem] = field(default=None, repr=False)

    def uses_transform(self, full_name: str) -> bool:
        return full_name in self.inbound_transforms or full_name in self.outbound_transforms


@dataclass
class SendPort:
    name: str
    outbound_transforms: List[str] = field(default_factory=list)  # Map full names
    inbound_transforms: List[str] = field(default_factory=list)
    resource_key: str = ""
    resource: Optional[ResourceItem] = field(default=None, repr=False)

    def uses_transform(self, full_name: str) -> bool:
        return full_name in self.outbound_transforms or full_name in self.inbound_transforms


@dataclass
class DistributionList:
    """A send port group."""
    name: str
    send_ports: List[str] = field(default_factory=list)  # Member send port names
    resource_key: str = ""
    resource: Optional[ResourceItem] = field(default=None, repr=False)


@dataclass
class BindingInfo:
    receive_ports: List[ReceivePort] = field(default_factory=list)
    send_ports: List[SendPort] = field(default_factory=list)
    distribution_lists: List[DistributionList] = field(default_factory=list)


@dataclass
class BindingFile:
    binding_info: Optional[BindingInfo] = None
    resource_container_key: str = ""
    resource_definition_key: str = ""


@dataclass
class ApplicationDefinition:
    """Display name of an application plus the names of applications it references."""
    name: str
    references: List[str] = field(default_factory=list)


@dataclass
class ApplicationDefinitionFile:
    application_definition: Optional[ApplicationDefinition] = None
    resource_container_key: str = ""
    resource_definition_key: str = ""
    resource_key: str = ""
    resource: Optional[ResourceItem] = field(default=None, repr=False)


@dataclass
class Element:
    """A node of an orchestration's labelled declaration tree."""
    type: str
    name: str = ""
    properties: Dict[str, str] = field(default_factory=dict)
    elements: List["Element"] = field(default_factory=list)

    def find_property_value(self, key: str) -> Optional[str]:
        return self.properties.get(key)

    def iter_elements(self) -> Iterator["Element"]:
        """Yield this element and all descendants, depth first."""
        yield self
        for child in self.elements:
            yield from child.iter_elements()

    def find_elements(self, element_type: str) -> List["Element"]:
        return [e for e in self.iter_elements() if e.type == element_type]

    def find_transforms(self) -> List["Element"]:
        """Transform shapes nested anywhere within this element."""
        return self.find_elements(ELEMENT_TYPE_TRANSFORM)


@dataclass
class Orchestration:
    name: str
    full_name: str = ""
    model: Optional[Element] = None
    resource_container_key: str = ""
    resource_definition_key: str = ""


@dataclass
class Application:
    """A parsed application and everything it deploys."""
    name: str
    schemas: List[Schema] = field(default_factory=list)
    transforms: List[Transform] = field(default_factory=list)
    orchestrations: List[Orchestration] = field(default_factory=list)
    bindings: Optional[BindingFile] = None
    application_definition: Optional[ApplicationDefinitionFile] = None
    resource_container_key: str = ""

    def receive_ports(self) -> List[ReceivePort]:
        if self.bindings is None or self.bindings.binding_info is None:
            return []
        return self.bindings.binding_info.receive_ports

    def send_ports(self) -> List[SendPort]:
        if self.bindings is None or self.bindings.binding_info is None:
            return []
        return self.bindings.binding_info.send_ports


@dataclass
class ApplicationGroup:
    """All applications parsed in one migration run."""
    applications: List[Application] = field(default_factory=list)

    def schemas(self, schema_type: Optional[SchemaType] = None) -> List[Schema]:
        """All schemas across applications, optionally of one type."""
        return [
            s for a in self.applications for s in a.schemas
            if schema_type is None or s.schema_type == schema_type
        ]

    def transforms(self) -> List[Transform]:
        return [t for a in self.applications for t in a.transforms]

    def receive_ports(self) -> List[ReceivePort]:
        return [p for a in self.applications for p in a.receive_ports()]

    def send_ports(self) -> List[SendPort]:
        return [p for a in self.applications for p in a.send_ports()]

    def application_definitions(self) -> List[ApplicationDefinitionFile]:
        return [a.application_definition for a in self.applications if a.application_definition is not None]
