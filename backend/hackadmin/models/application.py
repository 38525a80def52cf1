from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from hackadmin.models.base import Document

NOT_PROCESSED = "Not processed"


class ApplicationStatus(str, Enum):
    UNVERIFIED = "Unverified"
    INCOMPLETE = "Incomplete"
    SUBMITTED = "Submitted"
    ADMITTED = "Admitted"
    WAITLISTED = "Waitlisted"
    CONFIRMED = "Confirmed"
    DECLINED = "Declined"
    CHECKED_IN = "CheckedIn"
    REFUSED = "Refused"


class Application(Document):
    """Hacker application as submitted through the registration form."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    school: Optional[str] = None
    faculty: Optional[str] = None
    level_of_study: Optional[str] = None
    program: Optional[str] = None
    graduation_semester: Optional[str] = None
    graduation_year: Optional[str] = None
    shirt_size: Optional[str] = None
    dietary_restrictions: List[str] = Field(default_factory=list)
    gender: Optional[str] = None
    pronouns: Optional[str] = None
    travel_reimbursement: bool = False
    status: ApplicationStatus = ApplicationStatus.UNVERIFIED
    team_id: Optional[str] = None
    processed_by: str = NOT_PROCESSED
    processed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_unassigned(self) -> bool:
        return self.processed_by == NOT_PROCESSED
