"""
Authentication endpoints for user registration and login.
"""

from fastapi import APIRouter, status

from jobtracker.api.deps import CurrentUserDep, SessionDep, TokenServiceDep
from jobtracker.models.schemas import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
)
from jobtracker.core.identity import role_name
from jobtracker.services.auth_service import AuthResult, AuthService


router = APIRouter()


def format_auth_result(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        token=result.token,
        id=result.id,
        email=result.email,
        fullName=result.full_name,
        role=result.role,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(request: RegisterRequest, session: SessionDep, tokens: TokenServiceDep):
    """
    Register a new user account.

    Registration logs the user in: the response already carries a token.
    """
    auth = AuthService(session, tokens)
    result = await auth.register(
        full_name=request.fullName,
        email=request.email,
        password=request.password,
    )
    return format_auth_result(result)


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, session: SessionDep, tokens: TokenServiceDep):
    """
    Login with email and password.

    Returns a bearer token valid for the configured lifetime.
    """
    auth = AuthService(session, tokens)
    result = await auth.login(request.email, request.password)
    return format_auth_result(result)


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_profile(current_user: CurrentUserDep):
    """Display info for the authenticated caller."""
    return CurrentUserResponse(
        message=f"Logged in as: {current_user.full_name}",
        id=current_user.id,
        email=current_user.email,
        fullName=current_user.full_name,
        role=role_name(current_user.role),
        authorities=[current_user.authority],
    )
