"""
Radio Abstraction Layer - Base Classes

This module provides the abstract interface for radio controllers.
A controller runs the external radio program either to tune to a
station or to fetch its status text. Every invocation yields a
CommandResult so callers can decide how strictly to treat failures.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, List, Sequence
from enum import Enum

from .station import clean_status_lines


class RadioBackend(Enum):
    """Supported radio backends"""
    EXECUTABLE = "executable"
    MOCK = "mock"


@dataclass
class CommandResult:
    """Outcome of a single radio program invocation"""
    args: List[str]                 # Arguments passed after the executable
    returncode: Optional[int] = None  # None when the process never ran or timed out
    stdout: str = ""
    stderr: str = ""
    error: Optional[str] = None     # Spawn failure or timeout message
    timed_out: bool = False
    not_found: bool = False         # Executable missing at spawn time
    duration: float = 0.0           # Wall time in seconds

    @property
    def ok(self) -> bool:
        """True when the process ran and exited with status 0"""
        return self.error is None and self.returncode == 0

    @property
    def spawned(self) -> bool:
        """True when the process started and ran to completion"""
        return self.returncode is not None

    @property
    def lines(self) -> List[str]:
        """Trimmed, non-empty stdout lines"""
        return clean_status_lines(self.stdout)

    def raise_for_status(self) -> "CommandResult":
        """
        Raise the matching RadioError if the invocation failed.

        Returns:
            self, so calls can be chained

        Raises:
            RadioNotFoundError: Executable could not be found
            RadioTimeoutError: Process exceeded its timeout
            RadioCommandError: Any other spawn failure or non-zero exit
        """
        if self.not_found:
            raise RadioNotFoundError(self.error or "Radio executable not found")
        if self.timed_out:
            raise RadioTimeoutError(self.error or "Radio command timed out")
        if self.error is not None:
            raise RadioCommandError(self.error)
        if self.returncode != 0:
            raise RadioCommandError(
                f"Radio command {self.args} exited with status {self.returncode}"
                + (f": {self.stderr.strip()}" if self.stderr.strip() else "")
            )
        return self


class RadioController(ABC):
    """
    Abstract base class for radio controllers.

    Subclasses implement run(); tune() and status() are the two
    invocation shapes the web surface needs.
    """

    backend: RadioBackend

    def __init__(self, tune_timeout: float = 10.0, status_timeout: float = 5.0):
        """
        Initialize radio controller.

        Args:
            tune_timeout: Seconds allowed for a tune invocation
            status_timeout: Seconds allowed for a status invocation
        """
        self.tune_timeout = tune_timeout
        self.status_timeout = status_timeout

    @abstractmethod
    def run(self, args: Sequence[str], timeout: Optional[float] = None) -> CommandResult:
        """
        Run the radio program with the given arguments.

        Must not raise for process failures; those are reported
        through the returned CommandResult.

        Args:
            args: Arguments passed to the program
            timeout: Seconds before the process is killed

        Returns:
            CommandResult describing the invocation
        """
        pass

    @abstractmethod
    def check(self) -> bool:
        """Return True if the backend looks usable"""
        pass

    def tune(self, station: str) -> CommandResult:
        """Tune to an already sanitized station identifier"""
        if not station:
            raise ValueError("station must not be empty")
        return self.run([station], timeout=self.tune_timeout)

    def status(self) -> CommandResult:
        """Fetch the radio's current status text"""
        return self.run([], timeout=self.status_timeout)

    def status_lines(self) -> List[str]:
        """Fetch status and return its cleaned lines"""
        return self.status().lines

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"tune_timeout={self.tune_timeout}, "
                f"status_timeout={self.status_timeout})")


class RadioError(Exception):
    """Base exception for radio-related errors"""
    pass


class RadioNotFoundError(RadioError):
    """Raised when the radio executable cannot be found"""
    pass


class RadioCommandError(RadioError):
    """Raised when the radio executable fails to run or exits non-zero"""
    pass


class RadioTimeoutError(RadioError):
    """Raised when the radio executable does not finish in time"""
    pass


class ConfigurationError(RadioError):
    """Raised when the radio backend configuration is invalid"""
    pass
