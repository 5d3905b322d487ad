"""Enumerated codes shared by the resource graph and the analyzers.

These constants prevent stringly-typed relationship and severity values
and ensure client code uses the correct vocabulary.
"""

from enum import Enum


class ResourceRelationshipType(str, Enum):
    """Type of a directed edge between two resource nodes."""

    PARENT = "Parent"
    CHILD = "Child"
    REFERENCES_TO = "ReferencesTo"
    REFERENCED_BY = "ReferencedBy"
    CALLS_TO = "CallsTo"
    CALLED_BY = "CalledBy"


_REVERSE_RELATIONSHIPS = {
    ResourceRelationshipType.PARENT: ResourceRelationshipType.CHILD,
    ResourceRelationshipType.CHILD: ResourceRelationshipType.PARENT,
    ResourceRelationshipType.REFERENCES_TO: ResourceRelationshipType.REFERENCED_BY,
    ResourceRelationshipType.REFERENCED_BY: ResourceRelationshipType.REFERENCES_TO,
    ResourceRelationshipType.CALLS_TO: ResourceRelationshipType.CALLED_BY,
    ResourceRelationshipType.CALLED_BY: ResourceRelationshipType.CALLS_TO,
}


def reverse_relationship(relationship: ResourceRelationshipType) -> ResourceRelationshipType:
    """Return the mirror of a relationship type (ReferencesTo <-> ReferencedBy, etc.)."""
    return _REVERSE_RELATIONSHIPS[relationship]


class MessageSeverity(str, Enum):
    """Severity of a report message attached to a resource."""

    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"


class ErrorSeverity(str, Enum):
    """Severity of a pipeline-level error on the migration context."""

    WARNING = "Warning"
    ERROR = "Error"


class SchemaType(str, Enum):
    """Kind of a parsed schema."""

    UNKNOWN = "Unknown"
    DOCUMENT = "Document"
    PROPERTY = "Property"
