"""
Radio API Models

Pydantic models for radio-related API responses.
"""

from typing import Optional, List
from pydantic import BaseModel, Field

from ...radio import CommandResult


class CommandSummary(BaseModel):
    """Summary of one radio program invocation"""
    ok: bool = Field(..., description="Process ran and exited with status 0")
    returncode: Optional[int] = Field(None, description="Exit status, null if the process did not finish")
    error: Optional[str] = Field(None, description="Spawn failure or timeout message")
    duration: float = Field(0.0, ge=0, description="Wall time in seconds")

    @classmethod
    def from_result(cls, result: CommandResult) -> "CommandSummary":
        return cls(
            ok=result.ok,
            returncode=result.returncode,
            error=result.error,
            duration=result.duration,
        )


class StatusResponse(BaseModel):
    """Current radio status"""
    lines: List[str] = Field(default_factory=list, description="Trimmed, non-empty status lines")
    command: CommandSummary


class TuneResponse(BaseModel):
    """Result of a tune request"""
    station: str = Field(..., max_length=7, description="Sanitized station identifier (may be empty)")
    tuned: bool = Field(..., description="Whether a tune invocation was made")
    tune: Optional[CommandSummary] = Field(None, description="Tune invocation, if any")
    status: StatusResponse


class HealthResponse(BaseModel):
    """Service health"""
    status: str
    version: str
    backend: str
    radio_available: bool
