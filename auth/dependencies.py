"""
FastAPI dependencies for authentication.

Provides ``get_auth_service`` and ``require_claims``, the latter used by
every protected route.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.service import AuthService, authorize
from auth.tokens import TokenIssuer
from database.session import get_db_session
from database.users import UserStore


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


async def get_auth_service(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
) -> AuthService:
    return AuthService.from_settings(UserStore(session), request.app.state.settings)


async def require_claims(
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> Dict[str, Any]:
    """
    Extract and verify the Bearer token, returning the decoded claims
    (``sub`` is the authenticated user id).
    """
    return authorize(authorization, tokens)
