"""
Mock Radio Implementation

This module provides a simulated radio program for testing and development
without the real executable or hardware. It answers tune and status
invocations the way piradio does and records every call.
"""

import threading
from typing import Optional, List, Dict, Sequence
from dataclasses import dataclass
from loguru import logger

from .base import RadioController, RadioBackend, CommandResult


@dataclass
class MockStation:
    """A simulated station preset"""
    station_id: str             # Identifier accepted by the tune call
    name: str                   # Human readable station name
    frequency: float            # Frequency in Hz


# Predefined presets, loosely modelled on a UK FM/DAB preset list
STATIONS: Dict[str, MockStation] = {
    'r1': MockStation('r1', "Radio 1", 98.8e6),
    'r2': MockStation('r2', "Radio 2", 89.1e6),
    'r3': MockStation('r3', "Radio 3", 91.3e6),
    'r4': MockStation('r4', "Radio 4", 93.5e6),
    'jazz': MockStation('jazz', "Jazz FM", 102.2e6),
    'classic': MockStation('classic', "Classic FM", 100.9e6),
}

# Status output mimics the real program, including padding and blank lines
STATUS_TEMPLATE = """
  Station: {name}
Frequency: {frequency_mhz:.1f} MHz

  Signal: {signal}%

"""

IDLE_STATUS = """
Station: none

"""


class MockRadio(RadioController):
    """
    Mock radio controller for testing without the radio executable.

    Tuning to a known preset changes the station reported by status;
    unknown identifiers exit with status 1 like the real program.
    Failure modes can be forced to exercise error handling.
    """

    backend = RadioBackend.MOCK

    def __init__(
        self,
        stations: Optional[Dict[str, MockStation]] = None,
        current: Optional[str] = None,
        signal: int = 87,
        status_output: Optional[str] = None,
        fail_tune: bool = False,
        fail_status: bool = False,
        tune_timeout: float = 10.0,
        status_timeout: float = 5.0,
    ):
        """
        Initialize mock radio.

        Args:
            stations: Presets keyed by station identifier
            current: Identifier of the station tuned at start
            signal: Simulated signal strength in percent
            status_output: Fixed status text overriding the rendered one
            fail_tune: Make tune calls fail as if the program was missing
            fail_status: Make status calls fail as if the program was missing
            tune_timeout: Accepted for interface parity
            status_timeout: Accepted for interface parity
        """
        super().__init__(tune_timeout=tune_timeout, status_timeout=status_timeout)
        self.stations = dict(STATIONS if stations is None else stations)
        self.current = current
        self.signal = signal
        self.status_output = status_output
        self.fail_tune = fail_tune
        self.fail_status = fail_status
        self.calls: List[List[str]] = []
        self._lock = threading.Lock()

        logger.info(f"Mock radio initialized with {len(self.stations)} presets")

    @property
    def tune_calls(self) -> List[List[str]]:
        """Recorded invocations that carried a station"""
        return [c for c in self.calls if c]

    @property
    def status_calls(self) -> List[List[str]]:
        """Recorded invocations without arguments"""
        return [c for c in self.calls if not c]

    def check(self) -> bool:
        return True

    def run(self, args: Sequence[str], timeout: Optional[float] = None) -> CommandResult:
        args = list(args)
        with self._lock:
            self.calls.append(args)

        if args:
            return self._tune(args[0], args)
        return self._status(args)

    def _tune(self, station_id: str, args: List[str]) -> CommandResult:
        if self.fail_tune:
            return CommandResult(args=args, error="Mock radio tune failure", not_found=True)

        station = self.stations.get(station_id)
        if station is None:
            logger.debug(f"Mock radio: unknown station '{station_id}'")
            return CommandResult(
                args=args,
                returncode=1,
                stderr=f"Unknown station: {station_id}\n",
            )

        self.current = station_id
        logger.debug(f"Mock radio tuned to {station.name}")
        return CommandResult(args=args, returncode=0, stdout=f"Tuned to {station.name}\n")

    def _status(self, args: List[str]) -> CommandResult:
        if self.fail_status:
            return CommandResult(args=args, error="Mock radio status failure", not_found=True)

        return CommandResult(args=args, returncode=0, stdout=self.render_status())

    def render_status(self) -> str:
        """Render the status text the program would print right now"""
        if self.status_output is not None:
            return self.status_output

        station = self.stations.get(self.current) if self.current else None
        if station is None:
            return IDLE_STATUS
        return STATUS_TEMPLATE.format(
            name=station.name,
            frequency_mhz=station.frequency / 1e6,
            signal=self.signal,
        )

    def reset(self) -> None:
        """Forget recorded calls"""
        with self._lock:
            self.calls.clear()
