"""Supplier and custom category models."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from stockpos.utils.clock import now


class Supplier(BaseModel):
    """Supplier contact."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    contact: str | None = None
    email: str | None = None
    created_at: datetime = Field(default_factory=now)


class Category(BaseModel):
    """User-defined product category."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    created_at: datetime = Field(default_factory=now)
