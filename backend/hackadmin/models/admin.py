from typing import List

from pydantic import Field

from hackadmin.models.base import Document


class Admin(Document):
    first_name: str
    last_name: str
    email: str
    password: str = Field(repr=False)
    assigned_applications: List[str] = Field(default_factory=list)
    is_super_admin: bool = False

    def public(self) -> dict:
        """Full document minus the password."""
        return self.to_json(exclude={"password"})

    def profile(self) -> dict:
        """Projection returned for the signed-in admin."""
        return {
            "_id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "isSuperAdmin": self.is_super_admin,
            "assignedApplications": list(self.assigned_applications),
        }

    def __repr__(self):
        return f"<Admin {self.first_name} {self.last_name} ({self.email})>"
