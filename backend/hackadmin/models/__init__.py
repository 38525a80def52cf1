from hackadmin.models.admin import Admin
from hackadmin.models.application import Application, ApplicationStatus, NOT_PROCESSED
from hackadmin.models.attendee import CheckIn, Meal, MealEntry, QrCodeMapping, User
from hackadmin.models.base import Document, parse_object_id
from hackadmin.models.settings import EventSettings
from hackadmin.models.team import Team, TeamMember
