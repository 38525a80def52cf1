from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hackadmin.models.base import Document, PyObjectId

MealType = Literal["breakfast", "lunch", "snacks", "dinner"]


class User(Document):
    """Registered hacker account. Created by the public registration site."""

    first_name: str
    last_name: str
    email: str
    password: str = Field(repr=False)
    salt: str = Field(repr=False)
    age: Optional[str] = None
    team_id: Optional[str] = None
    gender: Optional[str] = None
    pronouns: Optional[str] = None
    processed_by: str = "Not processed"
    verification_token: Optional[str] = None
    verification_sent_at: Optional[datetime] = None
    reset_password_token: Optional[str] = None
    reset_password_expires: Optional[datetime] = None
    is_oauth_user: bool = Field(default=False, alias="isOAuthUser")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __repr__(self):
        return f"<User {self.first_name} {self.last_name} ({self.email})>"


class CheckIn(Document):
    email: str
    is_checked_in: bool = False


class MealEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: datetime
    type: MealType
    taken: bool


class Meal(Document):
    name: str
    email: str
    meals: List[MealEntry] = Field(default_factory=list)

    def taken_count(self) -> int:
        return sum(1 for entry in self.meals if entry.taken)


class QrCodeMapping(Document):
    qr_code_number: int
    application_id: PyObjectId
    event_id: PyObjectId
    checked_in_at: Optional[datetime] = None
    checked_in_by: str = "system"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
