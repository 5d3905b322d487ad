"""Hand the resolved graph to the resource generation stage."""

import logging
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from bizgraph.contracts import MigrationContext
from bizgraph.kernel.graph import ApplicationModel
from .base import Analyzer, require


TEMP_CONFIG_FOLDER_NAME = "aim-config"


class ConfigurationRepository(Protocol):
    """Renders template configuration for a model and reads it back."""

    def render_configuration(self, model: ApplicationModel, config_folder: Optional[str], target_folder: Path) -> None:
        ...

    def get_configuration(self, folder: Path) -> List[Dict[str, Any]]:
        ...


class ResourceGenerator(Protocol):
    """Generates target resource templates from the finished graph."""

    def generate_resources(self, model: ApplicationModel, templates: List[Dict[str, Any]],
                           token: Optional[threading.Event]) -> None:
        ...


class ResourceGeneratorAnalyzer(Analyzer):
    """Runs once after dependency resolution; performs no resolution itself."""

    def __init__(self, repository: ConfigurationRepository, generator: ResourceGenerator,
                 model: ApplicationModel, context: MigrationContext, logger: logging.Logger):
        self.repository = require(repository, "repository")
        self.generator = require(generator, "generator")
        super().__init__(model, context, logger)

    def _analyze(self, token: Optional[threading.Event]) -> None:
        target_folder = Path(tempfile.gettempdir()) / TEMP_CONFIG_FOLDER_NAME
        self.repository.render_configuration(self.model, self.context.template_config_folder, target_folder)

        self.logger.debug("Retrieving rendered configuration from %s", target_folder)
        templates = self.repository.get_configuration(target_folder)

        self.generator.generate_resources(self.model, templates, token)
