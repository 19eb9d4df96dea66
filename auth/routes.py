"""
Auth API routes — register, login, me.

Route prefix: /api/auth
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from auth.dependencies import get_auth_service, require_claims
from auth.service import AuthService
from utils.schemas import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Register a new user."""
    user = await service.register(
        req.name,
        req.email,
        req.phone,
        req.password,
        profile_picture=req.profile_picture,
    )
    return {"message": "User registered successfully", "user": user}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Login with email + password."""
    return await service.login(req.email, req.password)


@router.get("/me")
async def me(claims: Dict[str, Any] = Depends(require_claims)) -> Dict[str, Any]:
    """Return the decoded claims of the presented token."""
    return claims
