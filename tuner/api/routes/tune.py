"""
Tune API Routes

Plain-text tune endpoint: optionally tune to a station, then return the
radio's status text, one line per non-empty status line.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from ..dependencies import get_tuner
from ...core.tuner import Tuner

router = APIRouter()


def _tune(station: Optional[str], tuner: Tuner) -> PlainTextResponse:
    outcome = tuner.handle(station)
    return PlainTextResponse(outcome.body)


@router.get("/tune", response_class=PlainTextResponse)
def tune(
    station: Optional[str] = Query(
        None,
        description="Station identifier; reduced to [a-z0-9], at most 7 characters"
    ),
    tuner: Tuner = Depends(get_tuner)
):
    """
    Tune to a station and return the radio status as plain text.

    - **station**: Optional station identifier. Characters outside
      lowercase letters and digits are dropped; an identifier left
      empty means no tuning is done.

    The status is always returned, whether or not tuning happened.
    """
    return _tune(station, tuner)


@router.get("/tune.php", response_class=PlainTextResponse, include_in_schema=False)
def tune_legacy(
    station: Optional[str] = Query(None),
    tuner: Tuner = Depends(get_tuner)
):
    """Same as /tune, at the path older clients use"""
    return _tune(station, tuner)
