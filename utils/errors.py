"""
Domain error taxonomy.

Services raise these; ``api.errors`` turns them into JSON responses at the
request boundary.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, Optional


class AppError(Exception):
    status: HTTPStatus = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        message: str,
        *,
        status: Optional[HTTPStatus] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": self.message}
        if self.detail:
            payload["error"] = self.detail
        return payload


class ValidationError(AppError):
    status = HTTPStatus.BAD_REQUEST


class ConflictError(AppError):
    status = HTTPStatus.BAD_REQUEST


class AuthError(AppError):
    """Bad credentials (400) or a missing/invalid bearer token (401)."""

    status = HTTPStatus.BAD_REQUEST


class NotFoundError(AppError):
    status = HTTPStatus.NOT_FOUND


class UnexpectedError(AppError):
    status = HTTPStatus.INTERNAL_SERVER_ERROR
