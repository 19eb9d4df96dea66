"""
Pydantic schemas for the auth and catalog HTTP surfaces.

Request fields are optional at the schema level so that presence checks
happen in the services and come back as ``ValidationError`` (400) with the
API's own messages.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ═══════════════════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(_CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    profile_picture: Optional[str] = Field(default=None, alias="profilePicture")


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class PublicUser(_CamelModel):
    """User view safe to return to clients — never carries the hash."""

    id: str
    name: str
    email: str
    phone: str
    profile_picture: str = Field(default="", alias="profilePicture")


class RegisterResponse(BaseModel):
    message: str
    user: PublicUser


class LoginResponse(BaseModel):
    token: str
    user: PublicUser


class MessageResponse(BaseModel):
    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# Catalog
# ═══════════════════════════════════════════════════════════════════════════════


class ProductRequest(_CamelModel):
    name: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    description: Optional[str] = None
    img_url: Optional[str] = Field(default=None, alias="imgUrl")
    hotel: Optional[str] = None
    is_featured: Optional[bool] = Field(default=None, alias="isFeatured")
    is_best_deal: Optional[bool] = Field(default=None, alias="isBestDeal")


class Rating(_CamelModel):
    average_rating: float = Field(default=0.0, alias="averageRating")
    number_of_ratings: int = Field(default=0, alias="numberOfRatings")


class ProductOut(_CamelModel):
    id: str
    name: str
    price: float
    category: str
    description: str = ""
    img_url: str = Field(default="", alias="imgUrl")
    hotel: str = ""
    is_featured: bool = Field(default=False, alias="isFeatured")
    is_best_deal: bool = Field(default=False, alias="isBestDeal")
    rating: Rating = Field(default_factory=Rating)


class ProductList(BaseModel):
    products: List[ProductOut] = Field(default_factory=list)
    count: int = 0


class RateRequest(_CamelModel):
    new_rating: Optional[float] = Field(default=None, alias="newRating")

