"""Program assignment repository."""

from typing import Optional

from sqlmodel import Session, select

from cadence.models.assignment import ProgramAssignment


class AssignmentRepository:
    """Repository for ProgramAssignment database operations.

    Mutations only flush; the calling service owns the transaction.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, assignment_id: int) -> Optional[ProgramAssignment]:
        return self.session.get(ProgramAssignment, assignment_id)

    def get_by_program_and_athlete(self, program_id: int, athlete_id: int) -> Optional[ProgramAssignment]:
        statement = select(ProgramAssignment).where(ProgramAssignment.program_id == program_id,
                                                    ProgramAssignment.athlete_id == athlete_id)
        return self.session.exec(statement).first()

    def save(self, assignment: ProgramAssignment) -> ProgramAssignment:
        self.session.add(assignment)
        self.session.flush()
        return assignment

    def delete(self, assignment: ProgramAssignment) -> None:
        self.session.delete(assignment)
        self.session.flush()
