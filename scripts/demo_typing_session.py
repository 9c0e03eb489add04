#!/usr/bin/env python3
"""Demo: replay a keystroke script through the editing gate.

Types a few lines one at a time, pressing Enter after each line,
and shows where the gate refuses the newline until the line is fixed.

Usage:
    python scripts/demo_typing_session.py
    python scripts/demo_typing_session.py --language java
    python scripts/demo_typing_session.py --verbose
"""

from __future__ import annotations

import argparse
import logging

from codestopper.language import (
    SUPPORTED_LANGUAGES,
    Language,
    parse_language,
    rules_for,
)
from codestopper.session import EditorSession

SCRIPTS: dict[Language, list[str]] = {
    Language.CPP: [
        "#include <iostream>",
        "using namespace std;",
        "int answer = 42",
        ";",
        "int twice(int x) { return x * 2; }",
    ],
    Language.JAVA: [
        "import java.util.List;",
        "int x = 5",
        ";",
        'String s = "x = " + x;',
    ],
    Language.PYTHON: [
        "def main():",
        '    print("Hello"',
        ")",
        "main()",
    ],
}


def _print_header(title: str):
    width = 60
    print(f"\n{'=' * width}")
    print(f"  {title}")
    print(f"{'=' * width}\n")


def replay(language: Language):
    """Type each scripted line, then press Enter and report the gate's answer."""
    session = EditorSession(language)
    session.set_text("")
    for keystrokes in SCRIPTS[language]:
        session.type_text(keystrokes)
        inserted = session.press_enter()
        marker = "ok     " if inserted else "BLOCKED"
        print(f"  [{marker}] {keystrokes!r:50} -> {session.status_text}")

    _print_header("Final buffer")
    for i, line in enumerate(session.buffer.text.splitlines(), 1):
        print(f"  {i:3d} | {line}")


def main():
    parser = argparse.ArgumentParser(description="Editing gate typing demo")
    parser.add_argument(
        "--language",
        "-l",
        default="cpp",
        choices=SUPPORTED_LANGUAGES,
        help="Language to replay (default: cpp)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    language = parse_language(args.language)
    _print_header(f"Typing session ({rules_for(language).display_name})")
    replay(language)


if __name__ == "__main__":
    main()
