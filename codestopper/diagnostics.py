"""Scan results — diagnostics and validation verdicts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from . import constants


class DiagnosticKind(str, Enum):
    UNBALANCED_DELIMITER = "unbalanced_delimiter"
    UNTERMINATED_STRING = "unterminated_string"
    MISSING_STATEMENT_TERMINATOR = "missing_statement_terminator"


class Diagnostic(BaseModel):
    """The first syntax problem found in a buffer.

    ``line_number`` is 1-based; it is ``None`` for whole-buffer deficits
    such as unclosed delimiters reported after the last line.
    """

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    message: str
    line_number: int | None = None

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return constants.LINE_PREFIX_TEMPLATE.format(
            line=self.line_number, message=self.message
        )


class ValidationVerdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    diagnostic: Diagnostic | None = None

    @classmethod
    def valid(cls) -> ValidationVerdict:
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, diagnostic: Diagnostic) -> ValidationVerdict:
        return cls(is_valid=False, diagnostic=diagnostic)

    def __str__(self) -> str:
        if self.diagnostic is None:
            return constants.STATUS_VALID
        return str(self.diagnostic)
