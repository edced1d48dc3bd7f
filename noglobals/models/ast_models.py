"""
AST Data Models — Structured representations of parsed Go declarations.

These models are the output of the declaration extractor and the input to
the global variable rule. Only the shapes the rule looks at are kept:
top-level `var` specs, their names, and the kind of each initializer.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class CallExpression(BaseModel):
    """`pkg.Member(...)`, or any other call when the callee is not a selector."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["call"] = "call"
    namespace: str | None = Field(
        default=None, description="Package identifier of the callee, e.g. 'errors'"
    )
    member: str | None = Field(
        default=None, description="Selected name of the callee, e.g. 'New'"
    )


class CompositeExpression(BaseModel):
    """`pkg.Type{...}` composite literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["composite"] = "composite"
    namespace: str | None = None
    member: str | None = None


class LiteralExpression(BaseModel):
    """Basic literal: number, string, rune, true/false, nil or iota."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    text: str = ""


class OtherExpression(BaseModel):
    """Every other expression shape (binary, unary, func literal, ...)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["other"] = "other"
    node_type: str = Field(default="", description="tree-sitter node type")


InitializerExpression = Annotated[
    Union[CallExpression, CompositeExpression, LiteralExpression, OtherExpression],
    Field(discriminator="kind"),
]


class Identifier(BaseModel):
    """A bound name and the line it appears on."""

    model_config = ConfigDict(frozen=True)

    name: str
    line: int


class Binding(BaseModel):
    """One name paired with its initializer."""

    model_config = ConfigDict(frozen=True)

    name: str
    line: int
    value: InitializerExpression


class DeclarationGroup(BaseModel):
    """A single `var` spec: `var a, b = x, y` or one line of a `var (...)` block."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    line: int = Field(..., description="Line of the first bound name")
    names: list[Identifier] = Field(default_factory=list)
    values: list[InitializerExpression] = Field(default_factory=list)

    @property
    def is_malformed(self) -> bool:
        """True when names and initializers cannot be paired one to one."""
        return len(self.names) != len(self.values)

    def bindings(self) -> list[Binding]:
        if self.is_malformed:
            raise ValueError(
                f"{self.file_path}:{self.line}: {len(self.names)} names "
                f"but {len(self.values)} values"
            )
        return [
            Binding(name=ident.name, line=ident.line, value=value)
            for ident, value in zip(self.names, self.values)
        ]


class SourceFile(BaseModel):
    """All top-level `var` declarations of one parsed Go file."""

    model_config = ConfigDict(frozen=True)

    path: str
    package: str = Field(default="", description="Name from the package clause")
    groups: list[DeclarationGroup] = Field(default_factory=list)
