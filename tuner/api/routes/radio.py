"""
Radio API Routes

JSON endpoints describing tune requests and radio status, including
the outcome of each radio program invocation.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from ..models import CommandSummary, StatusResponse, TuneResponse
from ..dependencies import get_tuner
from ...core.tuner import Tuner, TuneOutcome

router = APIRouter()


def _status_response(outcome: TuneOutcome) -> StatusResponse:
    return StatusResponse(
        lines=outcome.lines,
        command=CommandSummary.from_result(outcome.status_result),
    )


@router.get("", response_model=TuneResponse)
def tune_station(
    station: Optional[str] = Query(None, description="Station identifier"),
    tuner: Tuner = Depends(get_tuner)
):
    """
    Tune to a station and report both invocations.

    Same flow as /tune, with invocation details in JSON.
    """
    outcome = tuner.handle(station)
    return TuneResponse(
        station=outcome.station,
        tuned=outcome.tuned,
        tune=CommandSummary.from_result(outcome.tune_result) if outcome.tuned else None,
        status=_status_response(outcome),
    )


@router.get("/status", response_model=StatusResponse)
def get_status(tuner: Tuner = Depends(get_tuner)):
    """
    Get the radio's current status without tuning.
    """
    return _status_response(tuner.status())
