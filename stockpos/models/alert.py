"""Notification models."""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from stockpos.utils.clock import now


class AlertLevel(str, Enum):
    """Alert severity."""

    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


class Alert(BaseModel):
    """Notification entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    message: str
    level: AlertLevel = AlertLevel.INFO
    item_id: str | None = None
    read: bool = False
    created_at: datetime = Field(default_factory=now)
