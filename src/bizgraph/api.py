"""Public API for bizgraph.

High-level entry point that runs every dependency analyzer, in rule order,
against one resource graph.
"""

import logging
import threading
from typing import List, Optional, Type

from bizgraph.analyzers import (
    Analyzer,
    ApplicationDependencyAnalyzer,
    DistributionListDependencyAnalyzer,
    OrchestrationDependencyAnalyzer,
    ParentChildDependencyAnalyzer,
    SchemaDependencyAnalyzer,
    TransformDependencyAnalyzer,
)
from bizgraph.analyzers.base import is_cancelled, require
from bizgraph.contracts import MigrationContext
from bizgraph.kernel.graph import ApplicationModel


# Later rules may read relationships written by earlier ones
DEPENDENCY_ANALYZERS: List[Type[Analyzer]] = [
    SchemaDependencyAnalyzer,
    TransformDependencyAnalyzer,
    OrchestrationDependencyAnalyzer,
    ApplicationDependencyAnalyzer,
    DistributionListDependencyAnalyzer,
    ParentChildDependencyAnalyzer,
]


def run_dependency_analysis(
    model: ApplicationModel,
    context: MigrationContext,
    logger: Optional[logging.Logger] = None,
    token: Optional[threading.Event] = None,
) -> MigrationContext:
    """Run each dependency analyzer once, in order, against the same model.

    Args:
        model: Fully populated resource graph
        context: Run state; pipeline errors are appended to context.errors
        logger: Logger handed to every analyzer (defaults to the "bizgraph" logger)
        token: Optional cancellation signal; once set, remaining analyzers are skipped

    Returns:
        The same context, for convenience
    """
    require(model, "model")
    require(context, "context")
    logger = logger or logging.getLogger("bizgraph")

    logger.debug("Running %d dependency analyzers", len(DEPENDENCY_ANALYZERS))
    for analyzer_type in DEPENDENCY_ANALYZERS:
        if is_cancelled(token):
            break
        analyzer_type(model, context, logger).analyze(token)

    return context
