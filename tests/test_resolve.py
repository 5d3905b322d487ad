"""Tests for the resolve-and-link primitives."""

import logging

import pytest

from bizgraph.codes import MessageSeverity, ResourceRelationshipType, reverse_relationship
from bizgraph.contracts import MigrationContext
from bizgraph.kernel.graph import ResourceItem
from bizgraph.kernel.resolve import (
    MatchOutcome,
    check_resolution,
    link,
    record_error,
    report,
    resolve,
)


NAMES = ["Alpha", "Beta", "Beta", "alpha"]


@pytest.mark.parametrize(
    "key,outcome,count",
    [
        ("Gamma", MatchOutcome.NO_MATCH, 0),
        ("Alpha", MatchOutcome.EXACT_MATCH, 1),
        ("Beta", MatchOutcome.AMBIGUOUS_MATCH, 2),
        ("ALPHA", MatchOutcome.NO_MATCH, 0),
    ],
)
def test_resolve_outcomes(key, outcome, count):
    resolution = resolve(key, NAMES, lambda n: n)

    assert resolution.outcome == outcome
    assert len(resolution.matches) == count


def test_match_requires_exactly_one():
    assert resolve("Alpha", NAMES, lambda n: n).match == "Alpha"
    with pytest.raises(ValueError):
        resolve("Beta", NAMES, lambda n: n).match
    with pytest.raises(ValueError):
        resolve("Gamma", NAMES, lambda n: n).match


@pytest.mark.parametrize("relationship", list(ResourceRelationshipType))
def test_link_adds_mirrored_pair(relationship):
    source = ResourceItem(name="source")
    target = ResourceItem(name="target")

    link(source, target, relationship)

    assert [(r.resource_ref_id, r.resource_relationship_type) for r in source.resource_relationships] == [
        (target.ref_id, relationship)
    ]
    assert [(r.resource_ref_id, r.resource_relationship_type) for r in target.resource_relationships] == [
        (source.ref_id, reverse_relationship(relationship))
    ]


def test_link_is_append_only():
    source = ResourceItem(name="source")
    target = ResourceItem(name="target")

    link(source, target, ResourceRelationshipType.REFERENCES_TO)
    link(source, target, ResourceRelationshipType.REFERENCES_TO)

    assert len(source.resource_relationships) == 2
    assert len(target.resource_relationships) == 2


def test_check_resolution_reports_miss_and_ambiguity():
    source = ResourceItem(name="source")

    missing = check_resolution(resolve("Gamma", NAMES, lambda n: n), source, "missing", "ambiguous")
    ambiguous = check_resolution(resolve("Beta", NAMES, lambda n: n), source, "missing", "ambiguous")
    found = check_resolution(resolve("Alpha", NAMES, lambda n: n), source, "missing", "ambiguous")

    assert missing is None
    assert ambiguous is None
    assert found == "Alpha"
    assert [(m.severity, m.message) for m in source.report_messages] == [
        (MessageSeverity.WARNING, "missing"),
        (MessageSeverity.WARNING, "ambiguous"),
    ]


def test_check_resolution_unresolved_severity():
    source = ResourceItem(name="source")

    check_resolution(resolve("Gamma", NAMES, lambda n: n), source, "missing", "ambiguous",
                     unresolved_severity=MessageSeverity.ERROR)

    assert source.report_messages[0].severity == MessageSeverity.ERROR


def test_report_mirrors_to_log(caplog):
    logger = logging.getLogger("bizgraph.tests.resolve")
    source = ResourceItem(name="source")
    with caplog.at_level(logging.INFO, logger=logger.name):
        report(source, MessageSeverity.WARNING, "a warning", logger)
        report(source, MessageSeverity.INFORMATION, "some information", logger)

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.WARNING, "a warning"),
        (logging.INFO, "some information"),
    ]
    assert len(source.report_messages) == 2


def test_record_error_appends_to_context():
    context = MigrationContext()

    error = record_error(context, "graph is broken")

    assert context.errors == [error]
    assert str(error) == "Error: graph is broken"
