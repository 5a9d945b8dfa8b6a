"""
Authentication endpoints: sign-in, sign-up, sign-out and session lookup.
Credentials are verified by the hosted auth service; the response carries an
opaque Bearer token that names the server-side session context.
"""

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from typing import Optional

from rentease.schemas.auth import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SessionResponse,
    SignupRequest
)
from rentease.schemas.common import Notice
from rentease.schemas.error import get_error_responses
from rentease.services.navigation import build_navigation
from rentease.services.session import SessionManager, SessionState
from rentease.utils.dependencies import get_session_manager, get_session_state, security

router = APIRouter(prefix="/auth", tags=["Authentication"])


def session_response(state: SessionState) -> SessionResponse:
    return SessionResponse(
        is_authenticated=state.is_authenticated,
        identity=state.identity,
        roles=sorted(state.roles, key=lambda role: role.value),
        is_owner=state.is_owner,
        is_admin=state.is_admin
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Sign in",
    responses=get_error_responses(401, 422, 502)
)
async def login(
    credentials: LoginRequest,
    manager: SessionManager = Depends(get_session_manager)
) -> LoginResponse:
    """
    Sign in with email and password.

    Raises:
        InvalidCredentialsError: If the credentials are rejected
        RemoteServiceError: If the auth service is unreachable
    """
    token, context = await manager.sign_in(credentials.email, credentials.password)
    state = context.state

    return LoginResponse(
        access_token=token,
        session=session_response(state),
        notice=Notice.success("Signed in successfully"),
        redirect_to="/",
        navigation=build_navigation(state)
    )


@router.post(
    "/signup",
    response_model=LoginResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create account",
    responses=get_error_responses(422, 502)
)
async def signup(
    account: SignupRequest,
    manager: SessionManager = Depends(get_session_manager)
) -> LoginResponse:
    """
    Create an account. When the auth service requires email confirmation no
    session is opened and no token is returned.
    """
    token, context = await manager.sign_up(account.name, account.email, account.password)

    if context is None:
        state = SessionState.anonymous()
        notice = Notice.success("Account created. Check your email to confirm your account.")
        redirect_to = "/auth"
    else:
        state = context.state
        notice = Notice.success("Account created successfully")
        redirect_to = "/"

    return LoginResponse(
        access_token=token,
        session=session_response(state),
        notice=notice,
        redirect_to=redirect_to,
        navigation=build_navigation(state)
    )


@router.post(
    "/logout",
    response_model=LogoutResponse,
    status_code=status.HTTP_200_OK,
    summary="Sign out"
)
async def logout(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    manager: SessionManager = Depends(get_session_manager)
) -> LogoutResponse:
    """Sign out and tear down the caller's session context."""
    if credentials:
        await manager.sign_out(credentials.credentials)

    return LogoutResponse(
        notice=Notice.success("Logged out successfully"),
        navigation=build_navigation(SessionState.anonymous())
    )


@router.get(
    "/session",
    response_model=SessionResponse,
    summary="Current session"
)
async def get_session(state: SessionState = Depends(get_session_state)) -> SessionResponse:
    return session_response(state)
