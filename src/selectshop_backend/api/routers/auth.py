"""Authentication endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from selectshop_backend.api.dependencies import AuthServiceDep
from selectshop_backend.api.models import (
    AuthTokenResponse,
    UserLoginRequest,
    UserLoginResponse,
    UserResponse,
    UserSignupRequest,
    UserSignupResponse,
)
from selectshop_backend.api.services import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from selectshop_backend.database import SessionDep

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=UserSignupResponse,
    status_code=status.HTTP_201_CREATED,
)
def signup_user(
    payload: UserSignupRequest,
    session: SessionDep,
    auth_service: AuthServiceDep,
) -> UserSignupResponse:
    """Register a new user and issue an access token."""

    try:
        user, token = auth_service.register_user(
            session=session,
            username=payload.username,
            email=payload.email,
            password=payload.password,
        )
    except UserAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="User already exists"
        ) from exc

    user_model = UserResponse.model_validate(user, from_attributes=True)
    token_model = AuthTokenResponse(access_token=token)
    return UserSignupResponse(user=user_model, token=token_model)


@router.post("/login", response_model=UserLoginResponse)
def login_user(
    payload: UserLoginRequest,
    session: SessionDep,
    auth_service: AuthServiceDep,
) -> UserLoginResponse:
    """Authenticate an existing user using username and password."""

    try:
        user, token = auth_service.authenticate_user(
            session=session, username=payload.username, password=payload.password
        )
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        ) from exc

    user_model = UserResponse.model_validate(user, from_attributes=True)
    token_model = AuthTokenResponse(access_token=token)
    return UserLoginResponse(user=user_model, token=token_model)
