"""Lightweight syntax scanner — the "code stopper".

Checks a whole buffer for gross well-formedness in a single top-to-bottom,
left-to-right pass:

- ``()``, ``[]`` and ``{}`` nesting, outside string literals
- single-line ``"``/``'`` string literals
- a trailing ``;`` on statement-like lines (java / cpp only)

The first violation wins and scanning stops there. This is a heuristic, not a
parser: block comments are only recognised when a line *starts* with ``/*``,
and multi-line statements, macros and lambdas can trip the semicolon check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from . import constants
from .diagnostics import Diagnostic, DiagnosticKind, ValidationVerdict
from .language import Language, LanguageRules, parse_language, rules_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Delimiter:
    name: str
    plural: str
    opener: str
    closer: str


PARENTHESIS = Delimiter("parenthesis", "parentheses", "(", ")")
BRACKET = Delimiter("bracket", "brackets", "[", "]")
BRACE = Delimiter("brace", "braces", "{", "}")

DELIMITERS: tuple[Delimiter, ...] = (PARENTHESIS, BRACKET, BRACE)

_BY_OPENER: dict[str, Delimiter] = {d.opener: d for d in DELIMITERS}
_BY_CLOSER: dict[str, Delimiter] = {d.closer: d for d in DELIMITERS}


@dataclass
class ScanState:
    """Mutable state threaded through a single scan."""

    depths: dict[Delimiter, int] = field(
        default_factory=lambda: {d: 0 for d in DELIMITERS}
    )
    open_quote: str | None = None
    open_line: int = 0

    @property
    def in_string(self) -> bool:
        return self.open_quote is not None


def is_skipped_line(stripped: str, rules: LanguageRules) -> bool:
    """Blank lines and lines opening with a comment marker are not checked."""
    return not stripped or stripped.startswith(rules.skip_prefixes)


def needs_terminator(stripped: str, rules: LanguageRules) -> bool:
    """Return True if *stripped* looks like a statement missing its ``;``."""
    if not rules.requires_terminators:
        return False
    if stripped.endswith(constants.TERMINATOR_EXEMPT_ENDINGS):
        return False
    if any(pattern.search(stripped) for pattern in rules.header_patterns):
        return False
    return any(pattern.search(stripped) for pattern in rules.statement_markers)


def _scan_line(line: str, line_number: int, state: ScanState) -> Diagnostic | None:
    previous = ""
    for char in line:
        if state.in_string:
            if char == state.open_quote and previous != constants.ESCAPE_CHAR:
                state.open_quote = None
        elif char in constants.QUOTE_CHARS and previous != constants.ESCAPE_CHAR:
            state.open_quote = char
            state.open_line = line_number
        elif char in _BY_OPENER:
            state.depths[_BY_OPENER[char]] += 1
        elif char in _BY_CLOSER:
            delimiter = _BY_CLOSER[char]
            if state.depths[delimiter] == 0:
                return Diagnostic(
                    kind=DiagnosticKind.UNBALANCED_DELIMITER,
                    message=constants.MSG_UNMATCHED_CLOSER_TEMPLATE.format(
                        name=delimiter.name, closer=delimiter.closer
                    ),
                    line_number=line_number,
                )
            state.depths[delimiter] -= 1
        previous = char

    if state.in_string:
        return Diagnostic(
            kind=DiagnosticKind.UNTERMINATED_STRING,
            message=constants.MSG_UNCLOSED_STRING,
            line_number=state.open_line,
        )
    return None


def _check_terminator(
    stripped: str, line_number: int, rules: LanguageRules, state: ScanState
) -> Diagnostic | None:
    # An open ( or [ at end of line means the statement continues below.
    if state.depths[PARENTHESIS] or state.depths[BRACKET]:
        return None
    if not needs_terminator(stripped, rules):
        return None
    return Diagnostic(
        kind=DiagnosticKind.MISSING_STATEMENT_TERMINATOR,
        message=constants.MSG_MISSING_SEMICOLON,
        line_number=line_number,
    )


def _check_residual(state: ScanState) -> Diagnostic | None:
    for delimiter in DELIMITERS:
        missing = state.depths[delimiter]
        if missing > 0:
            name = delimiter.name if missing == 1 else delimiter.plural
            return Diagnostic(
                kind=DiagnosticKind.UNBALANCED_DELIMITER,
                message=constants.MSG_MISSING_CLOSERS_TEMPLATE.format(
                    count=missing, name=name
                ),
            )
    return None


def find_first_problem(buffer: str, language: Language) -> Diagnostic | None:
    """Scan *buffer* and return the first diagnostic, or None if well-formed."""
    rules = rules_for(language)
    state = ScanState()
    for line_number, line in enumerate(buffer.split("\n"), start=1):
        stripped = line.strip()
        if is_skipped_line(stripped, rules):
            continue
        diagnostic = _scan_line(line, line_number, state) or _check_terminator(
            stripped, line_number, rules, state
        )
        if diagnostic is not None:
            return diagnostic
    return _check_residual(state)


def scan(buffer: str, language: Language | str) -> ValidationVerdict:
    """Check *buffer* under *language* and return a fresh verdict.

    Pure and deterministic: the same buffer and language always produce an
    equal verdict, and no input text makes it raise.
    """
    language = parse_language(language)
    diagnostic = find_first_problem(buffer, language)
    if diagnostic is None:
        logger.debug("scan(%s): valid (%d chars)", language.value, len(buffer))
        return ValidationVerdict.valid()
    logger.debug("scan(%s): %s", language.value, diagnostic)
    return ValidationVerdict.invalid(diagnostic)
