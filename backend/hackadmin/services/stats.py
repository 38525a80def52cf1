import json
import logging
import re
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from hackadmin.db.store import DocumentStore
from hackadmin.models import NOT_PROCESSED
from hackadmin.utils.lookups import STATUSES

logger = logging.getLogger(__name__)

TSHIRT_SIZES = ("S", "M", "L", "XL", "XXL")
DIETARY_KEYS = ("vegetarian", "vegan", "glutenFree", "halal", "kosher", "nutAllergy", "dairyFree", "other")
TOP_UNIVERSITIES = 5

APPLICATION_FIELDS = {"status": 1, "school": 1, "shirtSize": 1, "createdAt": 1,
                      "dietaryRestrictions": 1, "processedBy": 1}


def format_display_name(key: str) -> str:
    """'glutenFree' -> 'Gluten Free'"""
    spaced = re.sub(r"([A-Z])", r" \1", key)
    return spaced[:1].upper() + spaced[1:]


def parse_restrictions(raw) -> List[str]:
    """Dietary restrictions are stored either as a list or as a JSON array in the first item."""
    if not raw or not isinstance(raw, list):
        return []
    first = raw[0]
    if isinstance(first, str) and first.startswith("["):
        try:
            parsed = json.loads(first)
        except ValueError:
            return []
        return [str(item) for item in parsed] if isinstance(parsed, list) else []
    return [str(item) for item in raw if item and item not in ("undefined", "none")]


def _aware(value) -> Optional[datetime]:
    if not isinstance(value, datetime):
        return None
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def count_between(dates: Iterable[datetime], start: datetime, end: datetime) -> int:
    return sum(1 for created in dates if start < created <= end)


class StatsService:
    def __init__(self, store: DocumentStore):
        self.store = store

    def dashboard(self, now: Optional[datetime] = None) -> dict:
        now = _aware(now) or datetime.now(timezone.utc)
        applications = list(self.store.applications.find({}, APPLICATION_FIELDS))

        status_counts = {status["name"]: 0 for status in STATUSES}
        status_counts.update(Counter(app.get("status") for app in applications if app.get("status")))

        created = [c for c in (_aware(app.get("createdAt")) for app in applications) if c]
        day = timedelta(days=1)
        last_24 = count_between(created, now - day, now)
        from_24_to_48 = count_between(created, now - 2 * day, now - day)

        last_7_days = [0] * 7
        for i in range(7):
            last_7_days[6 - i] = sum(
                1 for c in created if now - (i + 1) * day <= c < now - i * day
            )

        schools = Counter(app["school"] for app in applications if app.get("school"))
        shirts = {size: 0 for size in TSHIRT_SIZES}
        shirts.update(Counter(app["shirtSize"] for app in applications if app.get("shirtSize")))

        no_restrictions = 0
        restriction_counts = Counter()
        for app in applications:
            restrictions = parse_restrictions(app.get("dietaryRestrictions"))
            if not restrictions:
                no_restrictions += 1
            restriction_counts.update(restrictions)

        total_users = self.store.users.count_documents({})
        oauth_users = self.store.users.count_documents({"isOAuthUser": True})

        return {
            "totalApplicants": len(applications),
            "statusCounts": status_counts,
            "newApplicantsLast24Hours": last_24,
            "newApplicants24To48Hours": from_24_to_48,
            "applicantsChange": last_24 - from_24_to_48,
            "weeklyApplicants": count_between(created, now - 7 * day, now),
            "last7DaysApplicants": last_7_days,
            "topUniversities": [
                {"university": school, "count": count}
                for school, count in schools.most_common(TOP_UNIVERSITIES)
            ],
            "tshirtCounts": shirts,
            "totalTeams": self.store.teams.count_documents({}),
            "totalUsers": total_users,
            "oauthUsersPercentage": (oauth_users / total_users) * 100 if total_users else 0,
            "dietaryRestrictionsData": [{"restriction": "None", "count": no_restrictions}] + [
                {"restriction": format_display_name(key), "count": restriction_counts.get(key, 0)}
                for key in DIETARY_KEYS
            ],
            "unassignedApplications": sum(
                1 for app in applications if app.get("processedBy", NOT_PROCESSED) == NOT_PROCESSED
            ),
        }
