"""Composable API functions.

Each function corresponds to a CLI workflow (check, run, generate) but is
callable programmatically without argparse.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .codegen import CodeGenerator
from .diagnostics import ValidationVerdict
from .execution import ExecutionResult, Executor, PistonExecutor
from .language import Language, language_for_path, parse_language
from .scanner import scan
from . import constants

logger = logging.getLogger(__name__)


def check_source(source: str, language: Language | str = Language.PYTHON) -> ValidationVerdict:
    """Scan source text and return its verdict.

    Args:
        source: The source code text.
        language: Language tag ("python", "java" or "cpp").

    Returns:
        A ValidationVerdict; invalid verdicts carry the first diagnostic.
    """
    return scan(source, parse_language(language))


def check_file(
    path: str | Path, language: Language | str | None = None
) -> ValidationVerdict:
    """Read a file and scan it.

    Args:
        path: Path to the source file.
        language: Language tag; inferred from the file extension when None.

    Returns:
        The file's ValidationVerdict.
    """
    path = Path(path)
    resolved = parse_language(language) if language else language_for_path(path)
    logger.info("Checking %s as %s", path, resolved.value)
    return scan(path.read_text(encoding="utf-8"), resolved)


def format_verdict(verdict: ValidationVerdict) -> str:
    """Render a verdict as a single status line ("Syntax Valid" or "Line N: ...")."""
    return str(verdict)


def run_source(
    source: str,
    language: Language | str = Language.PYTHON,
    executor: Executor | None = None,
) -> ExecutionResult:
    """Execute source on the remote execution service.

    The scan verdict is logged as advice only; malformed code is still sent.

    Args:
        source: The source code text.
        language: Language tag.
        executor: Execution collaborator; defaults to the public Piston API.

    Returns:
        The ExecutionResult.
    """
    language = parse_language(language)
    verdict = scan(source, language)
    if not verdict.is_valid:
        logger.warning("Running %s code with a syntax problem: %s", language.value, verdict)
    return (executor or PistonExecutor()).execute(source, language)


def generate_source(
    prompt: str,
    language: Language | str = Language.PYTHON,
    generator: CodeGenerator | None = None,
    backend: str = constants.LLM_PROVIDER_CLAUDE,
) -> tuple[str, ValidationVerdict]:
    """Generate code for a natural-language prompt and scan the result.

    Args:
        prompt: Description of the program to write.
        language: Language tag.
        generator: Code generator; built from *backend* when None.
        backend: LLM provider name when no generator is given.

    Returns:
        Tuple of (generated code, its ValidationVerdict).
    """
    language = parse_language(language)
    generator = generator or CodeGenerator.for_provider(backend)
    code = generator.generate(prompt, language)
    return code, scan(code, language)
