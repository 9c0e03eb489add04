"""Presentation adapters — turn gate verdicts into status text."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

from . import constants
from .diagnostics import Diagnostic

logger = logging.getLogger(__name__)


class GateStatus(str, Enum):
    IDLE = "idle"
    VALID = "valid"
    ERROR = "error"


class Presenter(ABC):
    """Receives the gate's verdict after every scan."""

    @abstractmethod
    def present(self, is_valid: bool, diagnostic: Diagnostic | None = None) -> None:
        ...

    def reset(self) -> None:
        """Called when the gate returns to idle (language switch or clear)."""


def format_status(status: GateStatus, diagnostic: Diagnostic | None = None) -> str:
    """Render the one-line status indicator text for *status*."""
    if status == GateStatus.IDLE:
        return constants.STATUS_READY
    if status == GateStatus.VALID:
        return constants.STATUS_VALID
    if diagnostic is None:
        return constants.STATUS_ERROR
    return str(diagnostic)


class LoggingPresenter(Presenter):
    """Writes status changes to the log; errors go out as warnings."""

    def __init__(self, log: logging.Logger = logger):
        self._log = log

    def present(self, is_valid: bool, diagnostic: Diagnostic | None = None) -> None:
        if is_valid:
            self._log.info(format_status(GateStatus.VALID))
        else:
            self._log.warning(
                "%s: %s",
                constants.STATUS_ERROR,
                format_status(GateStatus.ERROR, diagnostic),
            )

    def reset(self) -> None:
        self._log.info(format_status(GateStatus.IDLE))
