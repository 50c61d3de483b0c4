"""Admin GraphQL Schema — queries, mutations and the candidateUnavailable subscription.

Invariants:
    - adminLogin never raises on bad credentials; it returns success=false
    - Lecturer assignment mutations report failures as CourseAssignmentResult,
      not as GraphQL errors
    - candidateUnavailable yields events published after the subscriber connected
    - Every operation except adminLogin and adminLogout requires an admin session,
      including the candidateUnavailable subscription

Design Decisions:
    - Unexpected (non-TeachTeamError) exceptions are masked so internals never
      reach the client; domain errors keep their message
"""

import logging
from typing import AsyncGenerator

import strawberry
from strawberry.extensions import MaskErrors
from strawberry.types import Info
from graphql import GraphQLError

from teachteam.api.dependencies import end_session, start_session
from teachteam.config import get_settings
from teachteam.core.errors import (
    AccountBlockedError, CourseAlreadyAssignedError, InvalidCredentialsError,
    ResourceNotFoundError, TeachTeamError,
)
from teachteam.graphql.inputs import (
    CourseInput, CourseUpdateInput, LecturerCourseAssignmentInput,
    LecturerMultipleCoursesInput, MarkCandidateUnavailableInput, to_model,
)
from teachteam.graphql.permissions import IsAdmin
from teachteam.graphql.types import (
    AuthPayload, CandidateReport, CandidateType, CandidateUnavailableNotification,
    CourseApplicationReport, CourseAssignmentResult, CourseType, LecturerType,
    MarkCandidateUnavailableResponse, UnselectedCandidate, UserType,
)
from teachteam.infrastructure.notifier import get_notifier
from teachteam.schemas.course import CourseCreate, CourseUpdate
from teachteam.services.accounts import AccountService
from teachteam.services.candidates import CandidateAdminService
from teachteam.services.courses import CourseService
from teachteam.services.lecturers import LecturerService
from teachteam.services.reports import ReportService

logger = logging.getLogger(__name__)

def _report_service(info: Info) -> ReportService:
    return ReportService(
        info.context.db, get_settings().multiple_course_report_threshold,
    )


@strawberry.type
class Query:
    @strawberry.field(permission_classes=[IsAdmin])
    async def get_all_courses(self, info: Info) -> list[CourseType]:
        courses = await CourseService(info.context.db).list_all()
        return [CourseType.from_model(c) for c in courses]

    @strawberry.field(permission_classes=[IsAdmin])
    async def get_all_lecturers(self, info: Info) -> list[LecturerType]:
        lecturers = await LecturerService(info.context.db).list_all()
        return [LecturerType.from_model(lec) for lec in lecturers]

    @strawberry.field(permission_classes=[IsAdmin])
    async def get_all_candidates(self, info: Info) -> list[CandidateType]:
        candidates = await CandidateAdminService(info.context.db).list_all()
        return [CandidateType.from_model(c) for c in candidates]

    @strawberry.field(permission_classes=[IsAdmin])
    async def get_course_application_reports(
        self, info: Info,
    ) -> list[CourseApplicationReport]:
        report = await _report_service(info).course_application_reports()
        return [CourseApplicationReport.from_dict(entry) for entry in report]

    @strawberry.field(permission_classes=[IsAdmin])
    async def get_candidates_with_multiple_courses(
        self, info: Info,
    ) -> list[CandidateReport]:
        report = await _report_service(info).candidates_with_multiple_courses()
        return [CandidateReport.from_dict(entry) for entry in report]

    @strawberry.field(permission_classes=[IsAdmin])
    async def get_unselected_candidates(self, info: Info) -> list[UnselectedCandidate]:
        report = await _report_service(info).unselected_candidates()
        return [UnselectedCandidate.from_dict(entry) for entry in report]


@strawberry.type
class Mutation:
    # ─── Session ────────────────────────────────────────────────

    @strawberry.mutation
    async def admin_login(self, info: Info, username: str, password: str) -> AuthPayload:
        try:
            user = await AccountService(info.context.db).admin_login(
                username, password, get_settings(),
            )
        except (InvalidCredentialsError, AccountBlockedError) as exc:
            return AuthPayload(success=False, message=exc.message)
        start_session(info.context.request, user)
        logger.info("Admin signed in", extra={"user_id": user.id, "role": user.role})
        return AuthPayload(
            success=True, message="Login successful", user=UserType.from_model(user),
        )

    @strawberry.mutation
    def admin_logout(self, info: Info) -> bool:
        end_session(info.context.request)
        return True

    # ─── Courses ────────────────────────────────────────────────

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def add_course(self, info: Info, course_data: CourseInput) -> CourseType:
        course = await CourseService(info.context.db).create(
            to_model(CourseCreate, course_data),
        )
        return CourseType.from_model(course)

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def edit_course(
        self, info: Info, id: strawberry.ID, course_data: CourseUpdateInput,
    ) -> CourseType:
        course = await CourseService(info.context.db).update(
            id, to_model(CourseUpdate, course_data, partial=True),
        )
        return CourseType.from_model(course)

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def delete_course(self, info: Info, id: strawberry.ID) -> bool:
        await CourseService(info.context.db).soft_delete(id)
        return True

    # ─── Lecturers ──────────────────────────────────────────────

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def assign_lecturer_to_course(
        self, info: Info, assignment_data: LecturerCourseAssignmentInput,
    ) -> CourseAssignmentResult:
        service = LecturerService(info.context.db)
        try:
            lecturer = await service.get(assignment_data.lecturer_id)
            await service.assign_course(lecturer, assignment_data.course_id)
        except (ResourceNotFoundError, CourseAlreadyAssignedError) as exc:
            return CourseAssignmentResult(success=False, message=exc.message)
        return CourseAssignmentResult(
            success=True, message="Lecturer assigned to course successfully",
        )

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def assign_lecturer_to_courses(
        self, info: Info, input: LecturerMultipleCoursesInput,
    ) -> CourseAssignmentResult:
        service = LecturerService(info.context.db)
        try:
            lecturer = await service.get(input.lecturer_id)
            added = await service.assign_courses(lecturer, list(input.course_ids))
        except ResourceNotFoundError as exc:
            return CourseAssignmentResult(success=False, message=exc.message)
        return CourseAssignmentResult(
            success=True, message=f"Lecturer assigned to {added} new course(s)",
        )

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def remove_lecturer_from_course(
        self, info: Info, assignment_data: LecturerCourseAssignmentInput,
    ) -> CourseAssignmentResult:
        service = LecturerService(info.context.db)
        try:
            lecturer = await service.get(assignment_data.lecturer_id)
            await service.remove_course(lecturer, assignment_data.course_id)
        except ResourceNotFoundError as exc:
            return CourseAssignmentResult(success=False, message=exc.message)
        return CourseAssignmentResult(
            success=True, message="Lecturer removed from course successfully",
        )

    # ─── Candidates ─────────────────────────────────────────────

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def block_candidate(
        self, info: Info, candidate_id: strawberry.ID, reason: str | None = None,
    ) -> bool:
        await CandidateAdminService(info.context.db).block(candidate_id, reason)
        return True

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def unblock_candidate(self, info: Info, candidate_id: strawberry.ID) -> bool:
        await CandidateAdminService(info.context.db).unblock(candidate_id)
        return True

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def toggle_candidate_status(self, info: Info, id: strawberry.ID) -> bool:
        return await CandidateAdminService(info.context.db).toggle_status(id)

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def mark_candidate_unavailable(
        self, info: Info, input: MarkCandidateUnavailableInput,
    ) -> MarkCandidateUnavailableResponse:
        event = await CandidateAdminService(
            info.context.db, get_notifier(),
        ).mark_unavailable(input.candidate_id, input.reason)
        return MarkCandidateUnavailableResponse(
            success=True,
            message=(
                f"Candidate {event.candidate_name} marked as unavailable. "
                "Real-time notifications sent."
            ),
            affected_courses=list(event.affected_courses),
        )


@strawberry.type
class Subscription:
    @strawberry.subscription(permission_classes=[IsAdmin])
    async def candidate_unavailable(
        self,
    ) -> AsyncGenerator[CandidateUnavailableNotification, None]:
        async with get_notifier().subscribe() as events:
            async for event in events:
                yield CandidateUnavailableNotification.from_event(event)


def _should_mask(error: GraphQLError) -> bool:
    original = error.original_error
    return original is not None and not isinstance(
        original, (TeachTeamError, GraphQLError),
    )


class TeachTeamSchema(strawberry.Schema):
    def process_errors(self, errors, execution_context=None) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, TeachTeamError):
                logger.warning(
                    f"GraphQL TeachTeamError: {original.message}",
                    extra={"error_code": original.code},
                )
            elif original is None or isinstance(original, GraphQLError):
                logger.warning(f"GraphQL request error: {error.message}")
            else:
                logger.error(f"GraphQL error: {error.message}", exc_info=original)


schema = TeachTeamSchema(
    query=Query,
    mutation=Mutation,
    subscription=Subscription,
    extensions=[lambda: MaskErrors(should_mask_error=_should_mask)],
)
