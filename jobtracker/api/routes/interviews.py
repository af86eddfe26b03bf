"""
Interview endpoints.
"""

from typing import List

from fastapi import APIRouter, Response, status

from jobtracker.api.deps import CurrentUserDep, SessionDep
from jobtracker.models.schemas import InterviewRequest, InterviewResponse, InterviewSummary
from jobtracker.services.interview_service import InterviewService

router = APIRouter()


@router.get("/application/{application_id}", response_model=List[InterviewResponse])
async def list_interviews_for_application(
    application_id: int,
    session: SessionDep,
    current_user: CurrentUserDep,
):
    """Interviews of one application, soonest first."""
    interviews = await InterviewService(session).list_for_application(application_id, current_user)
    return [InterviewResponse.from_model(i) for i in interviews]


@router.get("/upcoming", response_model=List[InterviewResponse])
async def list_upcoming_interviews(session: SessionDep, current_user: CurrentUserDep):
    """Scheduled interviews that haven't happened yet."""
    interviews = await InterviewService(session).get_upcoming(current_user)
    return [InterviewResponse.from_model(i) for i in interviews]


@router.get("/past", response_model=List[InterviewResponse])
async def list_past_interviews(session: SessionDep, current_user: CurrentUserDep):
    interviews = await InterviewService(session).get_past(current_user)
    return [InterviewResponse.from_model(i) for i in interviews]


@router.get("/summary", response_model=InterviewSummary)
async def get_interview_summary(session: SessionDep, current_user: CurrentUserDep):
    """
    Counts per status plus the next 5 upcoming and 5 most recent interviews.
    Used by the dashboard.
    """
    return await InterviewService(session).get_summary(current_user)


@router.get("/{interview_id}", response_model=InterviewResponse)
async def get_interview(interview_id: int, session: SessionDep, current_user: CurrentUserDep):
    interview = await InterviewService(session).get_interview(interview_id, current_user)
    return InterviewResponse.from_model(interview)


@router.post("", response_model=InterviewResponse, status_code=status.HTTP_201_CREATED)
async def create_interview(
    request: InterviewRequest,
    session: SessionDep,
    current_user: CurrentUserDep,
):
    interview = await InterviewService(session).create_interview(current_user, request)
    return InterviewResponse.from_model(interview)


@router.put("/{interview_id}", response_model=InterviewResponse)
async def update_interview(
    interview_id: int,
    request: InterviewRequest,
    session: SessionDep,
    current_user: CurrentUserDep,
):
    interview = await InterviewService(session).update_interview(interview_id, current_user, request)
    return InterviewResponse.from_model(interview)


@router.delete("/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_interview(interview_id: int, session: SessionDep, current_user: CurrentUserDep):
    await InterviewService(session).delete_interview(interview_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
