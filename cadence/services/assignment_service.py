"""
Program assignment service.

Assigning a program runs, per athlete: calendar walker -> conflict
detector -> schedule persister.

Conflicts are reported, not raised.  Unless the caller passes ``force``,
any conflict for any athlete aborts the whole request before anything is
written.  With ``force``, conflicting sessions that were never started
are deleted so the new schedule can take their dates; sessions with
progress are never deleted, and the persister skips their dates.
"""

import datetime
from dataclasses import dataclass, field
from typing import Optional, Union

from sqlmodel import Session

from cadence.core.config import settings
from cadence.core.exceptions import NotFoundError, ValidationError
from cadence.core.logging import get_logger
from cadence.core.transactions import transaction
from cadence.db.repositories.assignment import AssignmentRepository
from cadence.db.repositories.athlete import AthleteRepository
from cadence.db.repositories.program import ProgramRepository
from cadence.db.repositories.workout_session import WorkoutSessionRepository
from cadence.models.assignment import ProgramAssignment
from cadence.models.coach import Athlete
from cadence.models.program import Program
from cadence.models.workout_session import SessionStatus
from cadence.notifications.dispatch import NotificationDispatcher, NullDispatcher
from cadence.notifications.messages import ProgramAssignedNotification
from cadence.scheduling.calendar_walker import (generate_schedule, local_today, order_templates,
                                                validate_training_days, )
from cadence.scheduling.cleanup import AssignmentCleanupService
from cadence.scheduling.conflicts import detect_conflicts
from cadence.scheduling.persister import persist_schedule
from cadence.schemas.assignment import (AssignmentConflictResponse, AssignmentResponse, AssignProgramRequest,
                                        AssignProgramResponse, AthleteConflictReport, AthleteScheduleResult,
                                        ConflictDate, RemovalMode, RemoveAssignmentRequest,
                                        RemoveAssignmentResponse, )
from cadence.schemas.schedule import ConflictReport, ScheduledWorkout, WorkoutTemplate

logger = get_logger(__name__)


@dataclass
class _AthletePlan:
    athlete: Athlete
    existing: Optional[ProgramAssignment]
    schedule: list[ScheduledWorkout]
    start_date: datetime.date
    report: ConflictReport = field(default_factory=ConflictReport)


class AssignmentService:
    """Service for assigning programs to athletes and removing assignments."""

    def __init__(self, session: Session, dispatcher: Optional[NotificationDispatcher] = None):
        self.session = session
        self.dispatcher = dispatcher or NullDispatcher()
        self.programs = ProgramRepository(session)
        self.athletes = AthleteRepository(session)
        self.assignments = AssignmentRepository(session)
        self.sessions = WorkoutSessionRepository(session)

    # ------------------------------------------------------------------
    # Assign
    # ------------------------------------------------------------------

    def assign(self, program_id: int,
               data: AssignProgramRequest) -> Union[AssignProgramResponse, AssignmentConflictResponse]:
        program = self._get_program(program_id)
        athletes = self._get_athletes(data.athlete_ids)
        templates = self._load_templates(program)
        training_days = data.training_days or validate_training_days(settings.DEFAULT_TRAINING_DAYS)

        plans = []
        for athlete in athletes:
            existing = self.assignments.get_by_program_and_athlete(program.id, athlete.id)
            start_date = data.start_date or self._today_for(athlete)
            schedule = generate_schedule(templates, start_date, training_days)
            report = detect_conflicts(self.session, athlete.id, schedule,
                                      assignment_id=existing.id if existing else None)
            plans.append(_AthletePlan(athlete=athlete, existing=existing, schedule=schedule,
                                      start_date=start_date, report=report))

        conflicted = [plan for plan in plans if plan.report.has_conflicts]
        if conflicted and not data.force:
            logger.info("assignment_blocked_by_conflicts", program_id=program.id,
                        athletes=[plan.athlete.id for plan in conflicted],
                        conflict_count=sum(plan.report.conflict_count for plan in conflicted))
            return AssignmentConflictResponse(program_id=program.id,
                                              conflicts=[self._conflict_entry(plan) for plan in conflicted])

        results = []
        with transaction(self.session):
            for plan in plans:
                assignment = self._upsert_assignment(program, plan, data, training_days)
                replaced = self._clear_overwritten(plan.report) if plan.report.has_conflicts else 0
                persisted = persist_schedule(self.session, plan.athlete.id, program.id, assignment.id,
                                             plan.schedule)
                results.append(AthleteScheduleResult(athlete_id=plan.athlete.id, assignment_id=assignment.id,
                                                     replaced=replaced, **persisted.model_dump()))

        logger.info("program_assigned", program_id=program.id, athletes=len(results), forced=data.force,
                    created=sum(r.created for r in results), skipped=sum(r.skipped for r in results))

        self.dispatcher.submit_all(
            ProgramAssignedNotification(athlete_id=plan.athlete.id, athlete_name=plan.athlete.name,
                                        athlete_email=plan.athlete.email, program_id=program.id,
                                        program_name=program.name, start_date=plan.start_date,
                                        sessions_created=result.created)
            for plan, result in zip(plans, results))

        return AssignProgramResponse(program_id=program.id, results=results, count=len(results))

    # ------------------------------------------------------------------
    # Remove
    # ------------------------------------------------------------------

    def remove(self, program_id: int, data: RemoveAssignmentRequest) -> RemoveAssignmentResponse:
        assignment = self.assignments.get_by_program_and_athlete(program_id, data.athlete_id)
        if assignment is None:
            raise NotFoundError("assignment", details={"program_id": program_id, "athlete_id": data.athlete_id})

        cleanup = AssignmentCleanupService(self.session)
        if data.mode is RemovalMode.DEACTIVATE:
            updated, result = cleanup.deactivate(assignment.id, as_of=data.as_of)
            return RemoveAssignmentResponse(mode=data.mode, deleted=result.deleted, preserved=result.preserved,
                                            assignment=AssignmentResponse.model_validate(updated))

        result = cleanup.delete(assignment.id, as_of=data.as_of)
        return RemoveAssignmentResponse(mode=data.mode, deleted=result.deleted, preserved=result.preserved)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_program(self, program_id: int) -> Program:
        program = self.programs.get_by_id(program_id)
        if program is None:
            raise NotFoundError("program", details={"program_id": program_id})
        return program

    def _get_athletes(self, athlete_ids: list[int]) -> list[Athlete]:
        found = self.athletes.get_many(athlete_ids)
        missing = [athlete_id for athlete_id in athlete_ids if athlete_id not in found]
        if missing:
            raise NotFoundError("athlete", f"Athletes not found: {', '.join(map(str, missing))}",
                                details={"missing_ids": missing})
        return [found[athlete_id] for athlete_id in athlete_ids]

    def _load_templates(self, program: Program) -> list[WorkoutTemplate]:
        workouts = self.programs.get_workouts(program.id)
        if len(workouts) > settings.MAX_PROGRAM_WORKOUTS:
            raise ValidationError("program", f"Program has {len(workouts)} workouts; at most "
                                             f"{settings.MAX_PROGRAM_WORKOUTS} can be scheduled at once")
        exercise_counts = self.programs.count_exercises_by_workout([w.id for w in workouts])
        return order_templates(WorkoutTemplate(workout_id=w.id, title=w.name, week_number=w.week_number,
                                               day_number=w.day_number, exercise_count=exercise_counts[w.id])
                               for w in workouts)

    def _today_for(self, athlete: Athlete) -> datetime.date:
        coach = self.athletes.get_coach(athlete.coach_id)
        return local_today(coach.timezone if coach else None)

    def _upsert_assignment(self, program: Program, plan: _AthletePlan, data: AssignProgramRequest,
                           training_days: list[int]) -> ProgramAssignment:
        assignment = plan.existing or ProgramAssignment(program_id=program.id, athlete_id=plan.athlete.id)
        assignment.start_date = plan.start_date
        if data.end_date is not None or plan.existing is None:
            assignment.end_date = data.end_date
        assignment.training_days = list(training_days)
        assignment.is_active = True
        assignment.updated_at = datetime.datetime.utcnow()
        return self.assignments.save(assignment)

    def _clear_overwritten(self, report: ConflictReport) -> int:
        """Delete the conflicting sessions a forced assignment may replace."""
        replaceable = []
        for conflict in report.conflicts:
            occupant = self.sessions.get_by_id(conflict.existing_session_id)
            if occupant is not None and occupant.status == SessionStatus.NOT_STARTED:
                replaceable.append(occupant)
        return self.sessions.delete_all(replaceable)

    @staticmethod
    def _conflict_entry(plan: _AthletePlan) -> AthleteConflictReport:
        return AthleteConflictReport(athlete_id=plan.athlete.id, athlete_name=plan.athlete.name,
                                     conflict_count=plan.report.conflict_count,
                                     dates=[ConflictDate(date=c.date, existing_title=c.existing_title,
                                                         existing_status=c.existing_status.value,
                                                         new_title=c.new_title)
                                            for c in plan.report.conflicts])
