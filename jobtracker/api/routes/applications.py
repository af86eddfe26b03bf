"""
Job application endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from jobtracker.api.deps import CurrentUserDep, FileStorageDep, SessionDep
from jobtracker.db.models import ApplicationStatus
from jobtracker.models.schemas import (
    ApplicationRequest,
    ApplicationResponse,
    ApplicationStatistics,
)
from jobtracker.services.application_service import ApplicationService

router = APIRouter()


@router.get("", response_model=List[ApplicationResponse])
async def list_applications(
    session: SessionDep,
    current_user: CurrentUserDep,
    status_filter: Optional[ApplicationStatus] = Query(None, alias="status"),
):
    """List the caller's applications, newest first, optionally by status."""
    applications = await ApplicationService(session).list_applications(current_user, status_filter)
    return [ApplicationResponse.from_model(a) for a in applications]


@router.get("/search", response_model=List[ApplicationResponse])
async def search_applications(
    session: SessionDep,
    current_user: CurrentUserDep,
    company: str = Query(..., min_length=1),
):
    """Case-insensitive search on company name."""
    applications = await ApplicationService(session).search_by_company(current_user, company)
    return [ApplicationResponse.from_model(a) for a in applications]


@router.get("/statistics", response_model=ApplicationStatistics)
async def get_statistics(session: SessionDep, current_user: CurrentUserDep):
    """Total number of applications and count per status."""
    return await ApplicationService(session).get_statistics(current_user)


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: int,
    session: SessionDep,
    current_user: CurrentUserDep,
):
    application = await ApplicationService(session).get_owned(application_id, current_user)
    return ApplicationResponse.from_model(application)


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    request: ApplicationRequest,
    session: SessionDep,
    current_user: CurrentUserDep,
):
    application = await ApplicationService(session).create_application(current_user, request)
    return ApplicationResponse.from_model(application)


@router.put("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: int,
    request: ApplicationRequest,
    session: SessionDep,
    current_user: CurrentUserDep,
):
    application = await ApplicationService(session).update_application(
        application_id, current_user, request
    )
    return ApplicationResponse.from_model(application)


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(
    application_id: int,
    session: SessionDep,
    current_user: CurrentUserDep,
    storage: FileStorageDep,
):
    """Delete an application together with its interviews and documents."""
    await ApplicationService(session).delete_application(application_id, current_user, storage)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
