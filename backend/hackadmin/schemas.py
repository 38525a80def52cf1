from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from email_validator import validate_email


class CamelModel(BaseModel):
    """Request body with camelCase keys; blank strings count as missing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


# Fields are optional so missing ones can be reported with the API's own message
class CreateAdminRequest(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, value: Optional[str]) -> Optional[str]:
        # Validated only; the address is stored as typed
        if value is not None:
            validate_email(value, check_deliverability=False)
        return value


class ChangePasswordRequest(CamelModel):
    new_password: Optional[str] = None


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None
    remember: Optional[bool] = False


class SettingsUpdateRequest(CamelModel):
    registration_opening_date: Optional[datetime] = None
    registration_closing_date: Optional[datetime] = None
    confirmation_date: Optional[datetime] = None


class AssignApplicationsRequest(CamelModel):
    selected_admin_email: Optional[str] = None
    selected_applicants: Optional[List[str]] = None
