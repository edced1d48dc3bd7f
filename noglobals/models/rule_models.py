"""
Rule Data Models — Allow-list rows and diagnostics.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AllowRule(BaseModel):
    """A `namespace.member` initializer that may back a global variable."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., description="Package identifier, e.g. 'regexp'")
    member: str = Field(..., description="Selected name, e.g. 'MustCompile'")
    requires_error_name: bool = Field(
        default=False,
        description="The bound name must also look like an error (Err.../err...)",
    )


class Diagnostic(BaseModel):
    """A single global variable that is not allowed."""

    model_config = ConfigDict(frozen=True)

    file: str = Field(..., description="File path as built while walking")
    line: int = Field(..., description="Line of the bound name")
    name: str = Field(..., description="Name of the global variable")

    @property
    def message(self) -> str:
        return f"{self.file}:{self.line} {self.name} is a global variable"

    def __str__(self) -> str:
        return self.message


class ScanResult(BaseModel):
    """Result of walking one root path."""

    diagnostics: list[Diagnostic] = Field(default_factory=list)
    files_scanned: int = 0
    scan_duration_ms: float = 0.0

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics]
