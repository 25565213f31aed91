"""
Logged set endpoints.

Each write recomputes the owning session's completion state.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from cadence.api.dependencies import get_dispatcher
from cadence.db.session import get_db
from cadence.notifications.dispatch import NotificationDispatcher
from cadence.schemas.set_log import SetLogCreate, SetLogResponse, SetLogUpdate
from cadence.services.set_log_service import SetLogService

router = APIRouter()


@router.post("", summary="Log a set.", response_model=SetLogResponse, status_code=status.HTTP_201_CREATED, )
def create_set(data: SetLogCreate, db: Session = Depends(get_db),
               dispatcher: NotificationDispatcher = Depends(get_dispatcher), ):
    return SetLogService(db, dispatcher).create(data)


@router.put("/{set_log_id}", summary="Update a logged set.", response_model=SetLogResponse, )
def update_set(set_log_id: int, data: SetLogUpdate, db: Session = Depends(get_db),
               dispatcher: NotificationDispatcher = Depends(get_dispatcher), ):
    return SetLogService(db, dispatcher).update(set_log_id, data)


@router.delete("/{set_log_id}", summary="Delete a logged set.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_set(set_log_id: int, db: Session = Depends(get_db),
               dispatcher: NotificationDispatcher = Depends(get_dispatcher), ):
    SetLogService(db, dispatcher).delete(set_log_id)
