"""
Schedule endpoints: calendar view, move/swap and skip.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError
from sqlmodel import Session

from cadence.db.session import get_db
from cadence.schemas.workout_session import (AthleteSchedule, MoveSessionRequest, RelocationResult, ScheduleQuery,
                                             SkipSessionRequest, SkipSessionResponse, )
from cadence.services.schedule_service import ScheduleService

router = APIRouter()


@router.get("", summary="Scheduled sessions per athlete for a date range.", response_model=list[AthleteSchedule], )
def get_schedule(start_date: datetime.date = Query(..., alias="startDate"),
                 end_date: datetime.date = Query(..., alias="endDate"),
                 athlete_id: Optional[int] = Query(None, alias="athleteId"),
                 coach_id: Optional[int] = Query(None, alias="coachId"), db: Session = Depends(get_db), ):
    try:
        query = ScheduleQuery(start_date=start_date, end_date=end_date, athlete_id=athlete_id, coach_id=coach_id)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.errors()[0]["msg"])
    return ScheduleService(db).list_schedule(query)


@router.patch("/{session_id}/move", summary="Move a session to a new date (swaps if the date is taken).",
              response_model=RelocationResult, )
def move_session(session_id: int, data: MoveSessionRequest, db: Session = Depends(get_db), ):
    return ScheduleService(db).move(session_id, data.new_date)


@router.patch("/{session_id}/skip", summary="Mark or unmark a session as skipped.",
              response_model=SkipSessionResponse, )
def skip_session(session_id: int, data: SkipSessionRequest, db: Session = Depends(get_db), ):
    return ScheduleService(db).set_skipped(session_id, data.skip)
