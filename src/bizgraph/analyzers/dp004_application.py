"""DP004: link applications to the applications they reference by name."""

import threading
from typing import List, Optional

from bizgraph.codes import ResourceRelationshipType
from bizgraph.kernel import messages
from bizgraph.kernel.resolve import check_resolution, link, record_error, resolve
from bizgraph.kernel.source import SYSTEM_APPLICATION_NAME, ApplicationDefinitionFile
from .base import Analyzer


class ApplicationDependencyAnalyzer(Analyzer):

    rule_name = "DP004"

    def _analyze(self, token: Optional[threading.Event]) -> None:
        group = self._source_model()
        if group is None:
            return

        self.logger.debug(messages.RUNNING_RULE, self.rule_name, self.name)

        files = group.application_definitions()
        # Only files with a parsed definition can be the target of a reference
        candidates = [f for f in files if f.application_definition is not None]

        for definition_file in files:
            if self._cancelled(token):
                return
            if definition_file.application_definition is None:
                record_error(
                    self.context,
                    messages.NO_APPLICATION_DEFINITION.format(key=definition_file.resource_definition_key),
                    self.logger,
                )
                continue
            if definition_file.resource is None:
                self._missing_resource(definition_file)
                continue
            self._resolve_references(definition_file, candidates)

        self.logger.debug(messages.RULE_COMPLETED, self.rule_name, self.name)

    def _resolve_references(self, definition_file: ApplicationDefinitionFile,
                            candidates: List[ApplicationDefinitionFile]) -> None:
        application_name = definition_file.application_definition.name
        references = [r for r in definition_file.application_definition.references if r != SYSTEM_APPLICATION_NAME]

        for reference in references:
            resolution = resolve(reference, candidates, lambda f: f.application_definition.name)
            referee = check_resolution(
                resolution,
                definition_file.resource,
                unresolved=messages.APPLICATION_REFERENCED_BY_APPLICATION_IS_MISSING.format(
                    reference=reference, application=application_name
                ),
                ambiguous=messages.APPLICATION_REFERENCE_MULTIPLE_MATCHES.format(
                    reference=reference, application=application_name, count=len(resolution.matches)
                ),
                logger=self.logger,
            )
            if referee is None:
                continue
            if referee.resource is None:
                self._missing_resource(referee)
                continue

            link(definition_file.resource, referee.resource, ResourceRelationshipType.REFERENCES_TO,
                 self.logger, self.rule_name)

    def _missing_resource(self, definition_file: ApplicationDefinitionFile) -> None:
        record_error(
            self.context,
            messages.UNABLE_TO_FIND_ASSOCIATED_RESOURCE.format(
                entity_type="application definition",
                name=definition_file.application_definition.name,
                key=definition_file.resource_key,
            ),
            self.logger,
        )
