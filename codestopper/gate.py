"""Editing gate — blocks newline insertion while the buffer is malformed.

State machine::

    IDLE  --scan-->  VALID | ERROR
    VALID --scan-->  VALID | ERROR
    ERROR --scan-->  VALID | ERROR
    any   --set_language / clear-->  IDLE

Nothing leaves VALID or ERROR except a new scan or an explicit reset.
"""

from __future__ import annotations

import logging

from .buffer import EditingSurface
from .diagnostics import Diagnostic, ValidationVerdict
from .language import Language, parse_language
from .presentation import GateStatus, Presenter
from .scanner import scan
from .templates import template_for

logger = logging.getLogger(__name__)


class Gate:
    """Holds the single current verdict for one editing surface."""

    def __init__(
        self,
        surface: EditingSurface,
        language: Language | str = Language.PYTHON,
        presenter: Presenter | None = None,
    ):
        self._surface = surface
        self._language = parse_language(language)
        self._presenter = presenter
        self._verdict: ValidationVerdict | None = None

    @property
    def language(self) -> Language:
        return self._language

    @property
    def verdict(self) -> ValidationVerdict | None:
        """The latest verdict, or None while idle."""
        return self._verdict

    @property
    def status(self) -> GateStatus:
        if self._verdict is None:
            return GateStatus.IDLE
        return GateStatus.VALID if self._verdict.is_valid else GateStatus.ERROR

    @property
    def diagnostic(self) -> Diagnostic | None:
        return self._verdict.diagnostic if self._verdict else None

    @property
    def is_safe_to_run(self) -> bool:
        """Advisory only: True unless the last scan found a problem."""
        return self.status != GateStatus.ERROR

    def _record(self, verdict: ValidationVerdict) -> ValidationVerdict:
        previous = self.status
        self._verdict = verdict
        if self.status != previous:
            logger.debug("Gate %s -> %s", previous.value, self.status.value)
        if self._presenter is not None:
            self._presenter.present(verdict.is_valid, verdict.diagnostic)
        return verdict

    def on_change(self, text: str | None = None) -> ValidationVerdict:
        """Rescan after a buffer mutation.

        *text* is the full new buffer; when omitted it is read from the surface.
        """
        if text is None:
            text = self._surface.text
        return self._record(scan(text, self._language))

    def on_enter(self) -> bool:
        """Handle an Enter key-press. Returns True if the newline was inserted."""
        verdict = scan(self._surface.text, self._language)
        if not verdict.is_valid:
            logger.info("Newline blocked: %s", verdict.diagnostic)
            self._record(verdict)
            return False
        self._surface.insert_newline()
        self._record(verdict)
        return True

    def set_language(self, language: Language | str) -> None:
        """Switch language, load its starting template and go idle."""
        self._language = parse_language(language)
        logger.info("Language switched to %s", self._language.value)
        self._reset()

    def clear(self) -> None:
        """Restore the current language's template and go idle."""
        self._reset()

    def _reset(self) -> None:
        self._surface.replace(template_for(self._language))
        self._verdict = None
        if self._presenter is not None:
            self._presenter.reset()
