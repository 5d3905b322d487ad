"""Public diagnostic and run-state models for bizgraph."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from bizgraph.codes import ErrorSeverity, MessageSeverity


class ReportMessage(BaseModel):
    """A diagnostic attached to the resource whose resolution produced it."""
    severity: MessageSeverity
    message: str


class ErrorMessage(BaseModel):
    """A pipeline-level error: the resource graph itself is inconsistent."""
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    stack_trace: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.message}"


class MigrationContext(BaseModel):
    """Mutable state and configuration shared by every analyzer in one run.

    Errors are appended in place by analyzers; nothing here is global, so two
    contexts never observe each other's errors.
    """
    working_folder: Optional[str] = None
    report_file_path: Optional[str] = None
    conversion_folder: Optional[str] = None
    generation_folder: Optional[str] = None
    template_config_folder: Optional[str] = None
    template_folders: List[str] = Field(default_factory=list)
    errors: List[ErrorMessage] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
