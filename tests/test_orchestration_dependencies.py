"""Tests for DP003 orchestration dependency analysis."""

import logging
import threading

from bizgraph.analyzers import OrchestrationDependencyAnalyzer
from bizgraph.codes import MessageSeverity, ResourceRelationshipType
from bizgraph.kernel.graph import ApplicationModel

from builders import messages_containing, relationships


REFERENCES_TO = ResourceRelationshipType.REFERENCES_TO
REFERENCED_BY = ResourceRelationshipType.REFERENCED_BY


def test_message_declaration_links_message_type_and_schema(builder, context, logger):
    app = builder.application("App1")
    schema = builder.document_schema(app, "Schema1", "Test.Schemas.Schema1")
    message_type = schema.message_definitions[0]
    _, (declaration,) = builder.orchestration(app, "Orchestration1", message_types=["Test.Schemas.Schema1"])

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert relationships(declaration) == [
        (message_type.resource.ref_id, REFERENCES_TO),
        (schema.resource.ref_id, REFERENCES_TO),
    ]
    assert relationships(message_type.resource) == [(declaration.ref_id, REFERENCED_BY)]
    assert relationships(schema.resource) == [(declaration.ref_id, REFERENCED_BY)]
    assert declaration.report_messages == []
    assert context.errors == []


def test_system_type_is_informational_only(builder, context, logger):
    """A built-in System.* type gets one information message and no edges."""
    app = builder.application("App1")
    builder.document_schema(app, "Schema1", "Test.Schemas.Schema1")
    _, (declaration,) = builder.orchestration(app, "Orchestration1", message_types=["System.Xml.XmlDocument"])

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert len(declaration.report_messages) == 1
    assert declaration.report_messages[0].severity == MessageSeverity.INFORMATION
    assert "System.Xml.XmlDocument" in declaration.report_messages[0].message
    assert relationships(declaration) == []
    assert context.errors == []


def test_unknown_message_type_warns(builder, context, logger):
    app = builder.application("App1")
    _, (declaration,) = builder.orchestration(app, "Orchestration1", message_types=["Test.Schemas.Missing"])

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert relationships(declaration) == []
    assert len(messages_containing(declaration, "Test.Schemas.Missing", MessageSeverity.WARNING)) == 1


def test_duplicate_message_type_is_ambiguous(builder, context, logger):
    app1 = builder.application("App1")
    app2 = builder.application("App2")
    builder.document_schema(app1, "Schema1", "Test.Schemas.Schema1")
    builder.document_schema(app2, "Schema1", "Test.Schemas.Schema1")
    _, (declaration,) = builder.orchestration(app1, "Orchestration1", message_types=["Test.Schemas.Schema1"])

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert relationships(declaration) == []
    assert len(messages_containing(declaration, "Dependency cannot be accurately resolved.")) == 1


def test_missing_source_object_is_error(builder, context, logger):
    """A declaration without its parsed element is reported on the node and the context."""
    app = builder.application("App1")
    builder.document_schema(app, "Schema1", "Test.Schemas.Schema1")
    _, (declaration,) = builder.orchestration(app, "Orchestration1", message_types=["Test.Schemas.Schema1"])
    declaration.source_object = None

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert relationships(declaration) == []
    assert len(messages_containing(declaration, "The source object associated", MessageSeverity.ERROR)) == 1
    assert len(context.errors) == 1
    assert "The source object associated" in context.errors[0].message


def test_transform_shape_links_service_to_map(builder, context, logger):
    app = builder.application("App1")
    transform = builder.transform(app, "Map1", "Test.Maps.Map1")
    service, _ = builder.orchestration(app, "Orchestration1", transforms=["Test.Maps.Map1"])

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert relationships(service) == [(transform.resource.ref_id, REFERENCES_TO)]
    assert relationships(transform.resource) == [(service.ref_id, REFERENCED_BY)]


def test_unknown_transform_shape_warns(builder, context, logger):
    app = builder.application("App1")
    service, _ = builder.orchestration(app, "Orchestration1", transforms=["Test.Maps.Missing"])

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert relationships(service) == []
    assert len(messages_containing(service, "Test.Maps.Missing", MessageSeverity.WARNING)) == 1


def test_duplicate_transform_is_ambiguous(builder, context, logger):
    app1 = builder.application("App1")
    app2 = builder.application("App2")
    builder.transform(app1, "Map1", "Test.Maps.Map1")
    builder.transform(app2, "Map1", "Test.Maps.Map1")
    service, _ = builder.orchestration(app1, "Orchestration1", transforms=["Test.Maps.Map1"])

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert relationships(service) == []
    assert len(messages_containing(service, "Dependency cannot be accurately resolved.")) == 1


def test_absent_source_model_is_skipped(context, logger, caplog):
    with caplog.at_level(logging.INFO, logger=logger.name):
        OrchestrationDependencyAnalyzer(ApplicationModel(), context, logger).analyze()

    assert context.errors == []
    assert any("skipping rule OrchestrationDependencyAnalyzer" in m for m in caplog.messages)


def test_empty_source_model_still_runs(builder, context, logger, caplog):
    """An empty application group is not a reason to skip this rule."""
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert context.errors == []
    assert not any("skipping rule" in m for m in caplog.messages)
    assert "DP003: rule OrchestrationDependencyAnalyzer completed" in caplog.messages


def test_cancelled_token_leaves_graph_untouched(builder, context, logger):
    app = builder.application("App1")
    builder.document_schema(app, "Schema1", "Test.Schemas.Schema1")
    builder.transform(app, "Map1", "Test.Maps.Map1")
    service, (declaration,) = builder.orchestration(
        app, "Orchestration1", message_types=["Test.Schemas.Schema1"], transforms=["Test.Maps.Map1"]
    )
    token = threading.Event()
    token.set()

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze(token)

    assert relationships(declaration) == []
    assert relationships(service) == []


def test_service_declaration_missing_source_object_is_error(builder, context, logger):
    """A service declaration without its parsed element cannot resolve its maps."""
    app = builder.application("App1")
    transform = builder.transform(app, "Map1", "Test.Maps.Map1")
    service, _ = builder.orchestration(app, "Orchestration1", transforms=["Test.Maps.Map1"])
    service.source_object = None

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert len(context.errors) == 1
    assert "The source object associated" in context.errors[0].message
    assert len(messages_containing(service, "The source object associated", MessageSeverity.ERROR)) == 1
    assert relationships(service) == []
    assert relationships(transform.resource) == []


def test_message_declaration_without_type_is_pipeline_error(builder, context, logger):
    """No Type property means there is nothing to resolve against."""
    app = builder.application("App1")
    builder.document_schema(app, "Schema1", "Test.Schemas.Schema1")
    _, (declaration,) = builder.orchestration(app, "Orchestration1", message_types=["Test.Schemas.Schema1"])
    declaration.source_object.properties.clear()

    OrchestrationDependencyAnalyzer(builder.model, context, logger).analyze()

    assert len(context.errors) == 1
    assert declaration.key in context.errors[0].message
    assert relationships(declaration) == []
    assert declaration.report_messages == []
