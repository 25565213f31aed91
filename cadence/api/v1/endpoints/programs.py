"""
Program assignment endpoints.

Assigning schedules sessions for every athlete; removing an assignment
cleans up its future, not-yet-started sessions.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlmodel import Session

from cadence.api.dependencies import get_dispatcher
from cadence.db.session import get_db
from cadence.notifications.dispatch import NotificationDispatcher
from cadence.schemas.assignment import (AssignmentConflictResponse, AssignProgramRequest, AssignProgramResponse,
                                        RemoveAssignmentRequest, RemoveAssignmentResponse, )
from cadence.services.assignment_service import AssignmentService

router = APIRouter()


@router.post("/{program_id}/assign", summary="Assign a program and schedule its sessions.",
             response_model=AssignProgramResponse, status_code=status.HTTP_201_CREATED,
             responses={status.HTTP_409_CONFLICT: {"model": AssignmentConflictResponse}}, )
def assign_program(program_id: int, data: AssignProgramRequest, db: Session = Depends(get_db),
                   dispatcher: NotificationDispatcher = Depends(get_dispatcher), ):
    service = AssignmentService(db, dispatcher)
    outcome = service.assign(program_id, data)
    if isinstance(outcome, AssignmentConflictResponse):
        # Nothing was written; the caller must resubmit with force=true
        return JSONResponse(status_code=status.HTTP_409_CONFLICT,
                            content=outcome.model_dump(mode="json", by_alias=True))
    return outcome


@router.post("/{program_id}/unassign", summary="Deactivate or delete an assignment.",
             response_model=RemoveAssignmentResponse, )
def unassign_program(program_id: int, data: RemoveAssignmentRequest, db: Session = Depends(get_db), ):
    service = AssignmentService(db)
    return service.remove(program_id, data)
