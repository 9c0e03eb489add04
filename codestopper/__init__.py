"""Lightweight syntax gate for a python / java / cpp code editor."""

from .api import (  # noqa: F401
    check_source,
    check_file,
    format_verdict,
    run_source,
    generate_source,
)
from .diagnostics import Diagnostic, DiagnosticKind, ValidationVerdict  # noqa: F401
from .gate import Gate  # noqa: F401
from .language import Language  # noqa: F401
from .scanner import scan  # noqa: F401
