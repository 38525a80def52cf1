from datetime import datetime
from typing import Optional

from pydantic import Field

from hackadmin.models.base import Document


class EventSettings(Document):
    """Singleton document holding the event's registration dates."""

    registration_opening_date: Optional[datetime] = None
    registration_closing_date: Optional[datetime] = None
    confirmation_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = Field(default=None, alias="timestamp")
