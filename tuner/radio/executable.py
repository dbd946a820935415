"""
Executable Radio Implementation

Drives the radio through its command-line program (piradio by default).
The program is invoked as `<executable> <station>` to tune and as
`<executable>` with no arguments to print its status.
"""

import os
import subprocess
import time
from typing import Optional, Sequence

from loguru import logger

from .base import RadioController, RadioBackend, CommandResult


class ExecutableRadio(RadioController):
    """
    Radio controller backed by an external executable.

    No shell is involved: the station is passed as a single argv entry.
    Process failures never raise; they are returned as CommandResults
    with `error` set so the caller chooses the policy.
    """

    backend = RadioBackend.EXECUTABLE

    def __init__(
        self,
        executable: str,
        tune_timeout: float = 10.0,
        status_timeout: float = 5.0,
    ):
        """
        Initialize executable radio.

        Args:
            executable: Path to the radio program
            tune_timeout: Seconds allowed for a tune invocation
            status_timeout: Seconds allowed for a status invocation
        """
        super().__init__(tune_timeout=tune_timeout, status_timeout=status_timeout)
        self.executable = executable

    def check(self) -> bool:
        """Check that the executable exists and may be run"""
        return os.path.isfile(self.executable) and os.access(self.executable, os.X_OK)

    def run(self, args: Sequence[str], timeout: Optional[float] = None) -> CommandResult:
        args = list(args)
        command = [self.executable, *args]
        logger.debug(f"Running radio command: {command} (timeout={timeout})")

        start = time.monotonic()
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=timeout,
                check=False,
            )
        except FileNotFoundError as e:
            logger.error(f"Radio executable not found: {self.executable}")
            return CommandResult(
                args=args,
                error=f"Radio executable not found: {e.filename or self.executable}",
                not_found=True,
                duration=time.monotonic() - start,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning(f"Radio command {command} timed out after {timeout}s")
            return CommandResult(
                args=args,
                stdout=_decode(e.stdout),
                stderr=_decode(e.stderr),
                error=f"Radio command timed out after {timeout}s",
                timed_out=True,
                duration=time.monotonic() - start,
            )
        except OSError as e:
            # PermissionError, exec format errors and the like
            logger.error(f"Failed to run radio command {command}: {e}")
            return CommandResult(
                args=args,
                error=f"Failed to run radio executable: {e}",
                duration=time.monotonic() - start,
            )

        duration = time.monotonic() - start
        if completed.returncode != 0:
            logger.warning(
                f"Radio command {command} exited with status {completed.returncode}"
                f"{': ' + completed.stderr.strip() if completed.stderr.strip() else ''}"
            )
        else:
            logger.debug(f"Radio command {command} finished in {duration:.3f}s")

        return CommandResult(
            args=args,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            duration=duration,
        )

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"executable={self.executable}, "
                f"tune_timeout={self.tune_timeout}, "
                f"status_timeout={self.status_timeout})")


def _decode(output) -> str:
    """TimeoutExpired may carry bytes even in text mode"""
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode(errors='replace')
    return output
