"""Dependency analyzers, run once each in rule order."""

from .base import Analyzer, MissingArgumentError
from .dp001_schema import SchemaDependencyAnalyzer
from .dp002_transform import TransformDependencyAnalyzer
from .dp003_orchestration import OrchestrationDependencyAnalyzer
from .dp004_application import ApplicationDependencyAnalyzer
from .dp005_distribution_list import DistributionListDependencyAnalyzer
from .dp006_parent_child import ParentChildDependencyAnalyzer
from .resource_generator import ResourceGeneratorAnalyzer

__all__ = [
    "Analyzer",
    "MissingArgumentError",
    "SchemaDependencyAnalyzer",
    "TransformDependencyAnalyzer",
    "OrchestrationDependencyAnalyzer",
    "ApplicationDependencyAnalyzer",
    "DistributionListDependencyAnalyzer",
    "ParentChildDependencyAnalyzer",
    "ResourceGeneratorAnalyzer",
]
