"""This module re-exports the User model and its public view for use in authentication-related code.
"""

from database.models import User  # noqa: F401
from utils.schemas import PublicUser  # noqa: F401

__all__ = ["PublicUser", "User"]
