from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hackadmin.models.base import Document


class TeamMember(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str = ""
    is_admitted: bool = False


class Team(Document):
    team_name: str = ""
    team_code: str = ""
    team_owner: str = ""
    members: List[TeamMember] = Field(default_factory=list)

    def member_ids(self) -> List[str]:
        return [member.user_id for member in self.members if member.user_id]
