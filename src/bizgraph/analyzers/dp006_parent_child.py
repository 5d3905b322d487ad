"""DP006: make the item tree explicit as Parent/Child relationships."""

import threading
from typing import Optional

from bizgraph.codes import ResourceRelationshipType
from bizgraph.kernel import messages
from bizgraph.kernel.resolve import link
from .base import Analyzer


class ParentChildDependencyAnalyzer(Analyzer):

    rule_name = "DP006"

    def _analyze(self, token: Optional[threading.Event]) -> None:
        resources = self.model.find_all_resources()
        if not resources:
            self.logger.info(messages.SKIPPING_RULE_NO_RESOURCES, self.rule_name, self.name)
            return

        for parent in resources:
            if self._cancelled(token):
                return
            for child in parent.resources:
                link(parent, child, ResourceRelationshipType.CHILD, self.logger, self.rule_name)

        self.logger.debug(messages.RULE_COMPLETED, self.rule_name, self.name)
