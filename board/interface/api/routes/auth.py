"""Registration and login routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from board.application.usecase.auth import (
    AuthResponse,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for creating an account."""

    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and return an access token.

    Raises:
        AlreadyExistsError: Username or email taken (400)
        ValidationError: Malformed username or email (400)
    """
    return await register_use_case.execute(
        RegisterRequest(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange credentials for an access token.

    Raises:
        UnauthenticatedError: Unknown user or wrong password (401)
    """
    return await login_use_case.execute(
        LoginRequest(username=request.username, password=request.password)
    )
