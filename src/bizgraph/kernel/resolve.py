"""Resolve-and-link primitives shared by every dependency analyzer.

A resolution matches a key against a candidate set by exact, case-sensitive
equality. Zero matches and more than one match are reported on the source
resource and never produce an edge; a unique match is linked with a
symmetric relationship pair.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from bizgraph.codes import MessageSeverity, ResourceRelationshipType, reverse_relationship
from bizgraph.contracts import ErrorMessage, MigrationContext
from . import messages
from .graph import ResourceItem


T = TypeVar("T")


class MatchOutcome(str, Enum):
    NO_MATCH = "NO_MATCH"
    EXACT_MATCH = "EXACT_MATCH"
    AMBIGUOUS_MATCH = "AMBIGUOUS_MATCH"


@dataclass
class Resolution(Generic[T]):
    """Candidates whose key equals the requested key, in candidate order."""
    key: str
    matches: List[T] = field(default_factory=list)

    @property
    def outcome(self) -> MatchOutcome:
        if not self.matches:
            return MatchOutcome.NO_MATCH
        if len(self.matches) > 1:
            return MatchOutcome.AMBIGUOUS_MATCH
        return MatchOutcome.EXACT_MATCH

    @property
    def match(self) -> T:
        """The single match; only valid for an exact match."""
        if self.outcome != MatchOutcome.EXACT_MATCH:
            raise ValueError(f"Resolution of '{self.key}' has {len(self.matches)} matches, expected exactly one")
        return self.matches[0]


def resolve(key: str, candidates: Iterable[T], key_of: Callable[[T], Optional[str]]) -> Resolution[T]:
    """Match key against candidates by exact equality on key_of(candidate)."""
    return Resolution(key=key, matches=[c for c in candidates if key_of(c) == key])


def link(
    source: ResourceItem,
    target: ResourceItem,
    relationship: ResourceRelationshipType,
    logger: Optional[logging.Logger] = None,
    rule_name: str = "",
) -> None:
    """Add relationship(target) on source and its mirror(source) on target."""
    source.add_relationship(target.ref_id, relationship)
    target.add_relationship(source.ref_id, reverse_relationship(relationship))
    if logger is not None:
        logger.debug(messages.RELATIONSHIP_CREATED, rule_name, relationship.value, source.key, target.key)


def report(
    resource: ResourceItem,
    severity: MessageSeverity,
    message: str,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Attach a report message to a resource, mirroring warnings and errors to the log."""
    resource.add_message(severity, message)
    if logger is None:
        return
    if severity == MessageSeverity.ERROR:
        logger.error(message)
    elif severity == MessageSeverity.WARNING:
        logger.warning(message)
    else:
        logger.info(message)


def record_error(context: MigrationContext, message: str, logger: Optional[logging.Logger] = None) -> ErrorMessage:
    """Record a graph-integrity violation on the migration context."""
    error = ErrorMessage(message=message)
    context.errors.append(error)
    if logger is not None:
        logger.error(message)
    return error


def check_resolution(
    resolution: Resolution[T],
    source: ResourceItem,
    unresolved: str,
    ambiguous: str,
    logger: Optional[logging.Logger] = None,
    unresolved_severity: MessageSeverity = MessageSeverity.WARNING,
) -> Optional[T]:
    """Report a missing or ambiguous resolution on source, or return the unique match.

    Ambiguous messages must carry "Dependency cannot be accurately resolved."
    so that readers can tell them apart from a plain miss.
    """
    outcome = resolution.outcome
    if outcome == MatchOutcome.NO_MATCH:
        report(source, unresolved_severity, unresolved, logger)
        return None
    if outcome == MatchOutcome.AMBIGUOUS_MATCH:
        report(source, MessageSeverity.WARNING, ambiguous, logger)
        return None
    return resolution.match
