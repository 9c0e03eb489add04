"""Command-line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .api import check_file, format_verdict, generate_source
from .codegen import CodeGenerationError, CodeGenerator
from .config import StopperConfig
from .execution import ExecutionError, PistonExecutor
from .language import (
    SUPPORTED_LANGUAGES,
    Language,
    UnsupportedLanguageError,
    language_for_path,
    parse_language,
    rules_for,
)
from .scanner import scan
from .templates import template_for
from . import constants

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codestopper",
        description="Lightweight syntax gate for python, java and cpp sources",
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Scan a file and report the first problem")
    check.add_argument("file", help="Source file to check")
    check.add_argument("--language", "-l", choices=SUPPORTED_LANGUAGES,
                       help="Source language (default: inferred from extension)")
    check.add_argument("--json", action="store_true",
                       help="Print the verdict as JSON")

    template = sub.add_parser("template", help="Print a language's starting template")
    template.add_argument("language", choices=SUPPORTED_LANGUAGES)

    run = sub.add_parser("run", help="Execute a file on the remote execution service")
    run.add_argument("file", help="Source file to run")
    run.add_argument("--language", "-l", choices=SUPPORTED_LANGUAGES,
                     help="Source language (default: inferred from extension)")

    generate = sub.add_parser("generate", help="Generate code from a description")
    generate.add_argument("prompt", help="Natural-language description")
    generate.add_argument("--language", "-l", choices=SUPPORTED_LANGUAGES,
                          help="Target language (default: from config)")
    generate.add_argument("--backend", "-b", choices=constants.SUPPORTED_LLM_PROVIDERS,
                          help="LLM backend (default: from config)")
    return parser


def _language_for(args: argparse.Namespace, path: Path) -> Language:
    return parse_language(args.language) if args.language else language_for_path(path)


def _cmd_check(args: argparse.Namespace) -> int:
    path = Path(args.file)
    language = _language_for(args, path)
    verdict = check_file(path, language)
    if args.json:
        print(json.dumps(verdict.model_dump(mode="json"), indent=2))
    else:
        label = rules_for(language).display_name
        print(f"{args.file} ({label}): {format_verdict(verdict)}")
    return EXIT_OK if verdict.is_valid else EXIT_INVALID


def _cmd_template(args: argparse.Namespace) -> int:
    print(template_for(parse_language(args.language)))
    return EXIT_OK


def _cmd_run(args: argparse.Namespace, config: StopperConfig) -> int:
    path = Path(args.file)
    language = _language_for(args, path)
    source = path.read_text(encoding="utf-8")
    verdict = scan(source, language)
    if not verdict.is_valid:
        print(f"warning: {format_verdict(verdict)}", file=sys.stderr)
    executor = PistonExecutor(url=config.execution_url, timeout=config.execution_timeout)
    result = executor.execute(source, language)
    print(result.render())
    return result.exit_code


def _cmd_generate(args: argparse.Namespace, config: StopperConfig) -> int:
    language = parse_language(args.language) if args.language else config.language
    generator = CodeGenerator.for_provider(
        args.backend or config.llm_provider, model=config.llm_model
    )
    code, verdict = generate_source(args.prompt, language, generator=generator)
    print(code)
    print(f"\n# {format_verdict(verdict)}", file=sys.stderr)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if args.command == "check":
            return _cmd_check(args)
        if args.command == "template":
            return _cmd_template(args)
        # Only run and generate read CODESTOPPER_* settings.
        config = StopperConfig.from_env()
        if args.command == "run":
            return _cmd_run(args, config)
        return _cmd_generate(args, config)
    except (
        UnsupportedLanguageError,
        ExecutionError,
        CodeGenerationError,
        OSError,
        ValueError,
    ) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
