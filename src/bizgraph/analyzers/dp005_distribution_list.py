"""DP005: link distribution lists to their member send ports."""

import threading
from typing import Optional

from bizgraph.codes import MessageSeverity, ResourceRelationshipType
from bizgraph.kernel import graph, messages
from bizgraph.kernel.resolve import check_resolution, link, report, resolve
from bizgraph.kernel.source import DistributionList, SendPort
from .base import Analyzer


class DistributionListDependencyAnalyzer(Analyzer):
    """Resolve member names against send port resources by source object name.

    Ports are matched by name rather than key because the same port may be
    bound more than once. The pair is CallsTo/CalledBy: a list invokes its
    members.
    """

    rule_name = "DP005"

    def _analyze(self, token: Optional[threading.Event]) -> None:
        resources = self.model.find_all_resources()
        if not resources:
            self.logger.info(messages.SKIPPING_RULE_NO_RESOURCES, self.rule_name, self.name)
            return

        self.logger.debug(messages.RUNNING_RULE, self.rule_name, self.name)

        send_ports = [
            r for r in self.model.find_resources_by_type(graph.RESOURCE_SEND_PORT)
            if isinstance(r.source_object, SendPort)
        ]

        for distribution_list in self.model.find_resources_by_type(graph.RESOURCE_DISTRIBUTION_LIST):
            if self._cancelled(token):
                return

            source = distribution_list.source_object
            if not isinstance(source, DistributionList):
                # A broken list is unusable, but the graph around it is still consistent
                report(
                    distribution_list,
                    MessageSeverity.ERROR,
                    messages.SOURCE_OBJECT_INVALID.format(
                        name=distribution_list.name,
                        resource_type=distribution_list.type,
                        expected="distribution list",
                        key=distribution_list.key,
                    ),
                    self.logger,
                )
                continue

            for send_port_name in source.send_ports:
                resolution = resolve(send_port_name, send_ports, lambda r: r.source_object.name)
                send_port = check_resolution(
                    resolution,
                    distribution_list,
                    unresolved=messages.DISTRIBUTION_LIST_SEND_PORT_NOT_FOUND.format(
                        send_port=send_port_name, name=distribution_list.name, key=distribution_list.key
                    ),
                    ambiguous=messages.DISTRIBUTION_LIST_SEND_PORT_MULTIPLE_MATCHES.format(
                        send_port=send_port_name, name=distribution_list.name, key=distribution_list.key,
                        count=len(resolution.matches),
                    ),
                    logger=self.logger,
                )
                if send_port is not None:
                    link(distribution_list, send_port, ResourceRelationshipType.CALLS_TO,
                         self.logger, self.rule_name)

        self.logger.debug(messages.RULE_COMPLETED, self.rule_name, self.name)
