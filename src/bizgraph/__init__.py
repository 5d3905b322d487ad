"""bizgraph: dependency resolution over a migration resource graph."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("bizgraph")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from bizgraph.api import run_dependency_analysis, DEPENDENCY_ANALYZERS
from bizgraph.codes import MessageSeverity, ResourceRelationshipType
from bizgraph.contracts import ErrorMessage, MigrationContext, ReportMessage

__all__ = [
    "__version__",
    "run_dependency_analysis",
    "DEPENDENCY_ANALYZERS",
    "MessageSeverity",
    "ResourceRelationshipType",
    "ErrorMessage",
    "MigrationContext",
    "ReportMessage",
]
