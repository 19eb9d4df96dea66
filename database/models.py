"""
SQLAlchemy ORM models for users and the product catalog.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(Text, unique=True, nullable=False)
    phone = Column(Text, nullable=False)
    password_hash = Column(String(255), nullable=False)
    profile_picture = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))


class Product(Base):
    __tablename__ = "products"

    product_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    category = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    img_url = Column(Text, nullable=False, default="")
    hotel = Column(Text, nullable=False, default="")
    is_featured = Column(Boolean, nullable=False, default=False)
    is_best_deal = Column(Boolean, nullable=False, default=False)
    average_rating = Column(Float, nullable=False, default=0.0)
    number_of_ratings = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index("ix_products_category", "category"),
        Index("ix_products_hotel", "hotel"),
    )
