"""Shared behaviour for analyzers: argument validation, start log, cancellation."""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional

from bizgraph.contracts import MigrationContext
from bizgraph.kernel import messages
from bizgraph.kernel.graph import ApplicationModel
from bizgraph.kernel.source import ApplicationGroup


class MissingArgumentError(ValueError):
    """Raised when a required constructor argument is None."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Argument '{name}' must not be None")


def require(value, name: str):
    """Return value, or raise MissingArgumentError naming the parameter."""
    if value is None:
        raise MissingArgumentError(name)
    return value


def is_cancelled(token: Optional[threading.Event]) -> bool:
    return token is not None and token.is_set()


class Analyzer(ABC):
    """Base analyzer constructed with (model, context, logger).

    Arguments are validated in declared order before anything else happens.
    """

    rule_name: str = ""

    def __init__(self, model: ApplicationModel, context: MigrationContext, logger: logging.Logger):
        self.model = require(model, "model")
        self.context = require(context, "context")
        self.logger = require(logger, "logger")

    @property
    def name(self) -> str:
        return type(self).__name__

    def analyze(self, token: Optional[threading.Event] = None) -> None:
        """Run the analyzer once against the model.

        Faults are recorded on the context or on graph nodes; an exception
        escaping from here is a defect.
        """
        self.logger.info(messages.RUNNING_ANALYZER, self.name)
        self._analyze(token)

    @abstractmethod
    def _analyze(self, token: Optional[threading.Event]) -> None:
        ...

    def _source_model(self) -> Optional[ApplicationGroup]:
        """The parsed application group, or None when it is absent or empty."""
        group = self.model.migration_source.source_model
        if not isinstance(group, ApplicationGroup) or not group.applications:
            self.logger.info(messages.SKIPPING_RULE_SOURCE_MODEL_MISSING, self.rule_name, self.name)
            return None
        return group

    def _cancelled(self, token: Optional[threading.Event]) -> bool:
        if is_cancelled(token):
            self.logger.info(messages.RULE_CANCELLED, self.rule_name, self.name)
            return True
        return False
