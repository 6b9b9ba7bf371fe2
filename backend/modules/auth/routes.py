"""
Auth API endpoints.

Registration, email verification and login. These routes are public;
every other route sits behind the auth guard.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    VerifyEmailRequest,
)

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """
    Register a new account.

    The account starts unverified; a verification link is emailed to the
    given address. Returns 409 if the email is already registered.
    """
    user = await service.register(request)
    return RegisterResponse(user=user.to_summary())


@router.post("/verify-email", response_model=MessageResponse)
async def verify_email(
    request: VerifyEmailRequest,
    service: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """
    Confirm an email address with the token from the verification link.

    Each token works once. Returns 400 for an unknown or used token.
    """
    await service.confirm_email(request.token)
    return MessageResponse(message="Email verified successfully! You can now log in.")


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Log in with email and password and receive a bearer token.
    """
    return await service.login(request.email, request.password)
