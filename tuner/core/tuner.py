"""
Tuner

This module implements the tune-then-report request flow: sanitize the
requested station, tune the radio if anything is left, then always read
back the radio's status text.
"""

from dataclasses import dataclass, field
from typing import Optional, List
from loguru import logger

from ..radio import (
    RadioController,
    CommandResult,
    sanitize_station,
    format_status,
)


@dataclass
class TuneOutcome:
    """Result of one tune/status request"""
    station: str                            # Sanitized identifier, may be empty
    status_result: CommandResult
    tune_result: Optional[CommandResult] = None
    lines: List[str] = field(default_factory=list)

    @property
    def tuned(self) -> bool:
        """Whether a tune invocation was attempted"""
        return self.tune_result is not None

    @property
    def tune_ok(self) -> Optional[bool]:
        """Tune invocation success, None when no tune was attempted"""
        if self.tune_result is None:
            return None
        return self.tune_result.ok

    @property
    def body(self) -> str:
        """Plain-text response body"""
        return format_status(self.lines)


class Tuner:
    """
    Handles tune/status requests against a radio controller.

    Holds no per-request state; concurrent requests simply race on the
    radio itself and the last tune wins.
    """

    def __init__(self, radio: RadioController, strict: bool = False):
        """
        Initialize tuner.

        Args:
            radio: Controller used for both invocations
            strict: Raise when the status call cannot run instead of
                returning an empty status
        """
        self.radio = radio
        self.strict = strict

    def handle(self, station: Optional[str] = None) -> TuneOutcome:
        """
        Tune to `station` (if it survives sanitization) and read status.

        The tune result is logged but never fails the request. A status
        call that could not run yields an empty status unless strict.

        Args:
            station: Raw station parameter, or None when absent

        Returns:
            TuneOutcome with the cleaned status lines

        Raises:
            RadioError: In strict mode, if the status call failed to run
        """
        sanitized = sanitize_station(station)
        if station is not None and sanitized != station:
            logger.debug(f"Station '{station}' sanitized to '{sanitized}'")

        tune_result = None
        if sanitized:
            logger.info(f"Tuning radio to station '{sanitized}'")
            tune_result = self.radio.tune(sanitized)
            if not tune_result.ok:
                logger.warning(
                    f"Tune to '{sanitized}' failed: "
                    f"{tune_result.error or f'exit status {tune_result.returncode}'}"
                )

        status_result = self.radio.status()
        if not status_result.spawned:
            logger.error(f"Radio status unavailable: {status_result.error}")
            if self.strict:
                status_result.raise_for_status()
        elif status_result.returncode != 0:
            logger.warning(f"Radio status exited with status {status_result.returncode}")

        return TuneOutcome(
            station=sanitized,
            status_result=status_result,
            tune_result=tune_result,
            lines=status_result.lines,
        )

    def status(self) -> TuneOutcome:
        """Read status without tuning"""
        return self.handle(None)
