"""
Distribution of submitted applications among reviewers.

Reviewers are admins without the super admin flag. Applications that belong
to the same team always go to the same reviewer.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from pymongo.errors import PyMongoError

from hackadmin.db.store import DocumentStore
from hackadmin.models import NOT_PROCESSED, ApplicationStatus, Team, parse_object_id

logger = logging.getLogger(__name__)

INDIVIDUAL_PREFIX = "individual_"
REVIEWER_QUERY = {"isSuperAdmin": {"$ne": True}}
UNASSIGNED_QUERY = {"status": ApplicationStatus.SUBMITTED.value, "processedBy": NOT_PROCESSED}


class AssignmentError(Exception):
    pass


class AdminNotFoundError(AssignmentError):
    pass


class ApplicantNotFoundError(AssignmentError):
    pass


class NoReviewersError(AssignmentError):
    pass


@dataclass
class ReviewerLoad:
    email: str
    existing: List[str] = field(default_factory=list)
    new: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.existing) + len(self.new)


def group_by_team(applications: Iterable[dict]) -> List[Tuple[str, List[str]]]:
    """Group application ids by teamId, largest group first.

    Applications without a team form a group of one. Groups of equal size
    keep the order in which they were first seen.
    """
    groups: Dict[str, List[str]] = {}
    for application in applications:
        app_id = str(application["_id"])
        key = application.get("teamId") or f"{INDIVIDUAL_PREFIX}{app_id}"
        groups.setdefault(key, []).append(app_id)

    return sorted(groups.items(), key=lambda item: len(item[1]), reverse=True)


def distribute(groups: List[Tuple[str, List[str]]], reviewers: List[ReviewerLoad]) -> int:
    """Hand each group to the reviewer with the fewest new assignments.

    Returns the number of real teams (not individuals) assigned.
    """
    teams_assigned = 0
    for key, app_ids in groups:
        reviewer = min(reviewers, key=lambda load: len(load.new))
        reviewer.new.extend(app_ids)
        if not key.startswith(INDIVIDUAL_PREFIX):
            teams_assigned += 1
        logger.debug(f"Assigned {len(app_ids)} applications ({key}) to {reviewer.email}")
    return teams_assigned


class AssignmentService:
    def __init__(self, store: DocumentStore):
        self.store = store

    def unassigned_stats(self) -> dict:
        return {
            "unassignedCount": self.store.applications.count_documents(UNASSIGNED_QUERY),
            "reviewerCount": self.store.admins.count_documents(REVIEWER_QUERY),
        }

    def auto_assign(self) -> dict:
        """Assign every unassigned submitted application to a reviewer."""
        applications = list(self.store.applications.find(UNASSIGNED_QUERY, {"_id": 1, "teamId": 1}))
        if not applications:
            return {"totalAssigned": 0, "reviewerStats": [], "teamsAssigned": 0}

        reviewers = [
            ReviewerLoad(email=doc["email"], existing=list(doc.get("assignedApplications") or []))
            for doc in self.store.admins.find(REVIEWER_QUERY, {"email": 1, "assignedApplications": 1})
        ]
        if not reviewers:
            raise NoReviewersError("No reviewers available. Cannot auto-assign applications.")

        groups = group_by_team(applications)
        logger.info(f"Grouped {len(applications)} applications into {len(groups)} groups "
                    f"for {len(reviewers)} reviewers")
        teams_assigned = distribute(groups, reviewers)

        for reviewer in reviewers:
            if not reviewer.new:
                continue
            self.store.applications.update_many(
                {"_id": {"$in": [parse_object_id(app_id) for app_id in reviewer.new]}},
                {"$set": {"processedBy": reviewer.email}},
            )
            self.store.admins.update_one(
                {"email": reviewer.email},
                {"$set": {"assignedApplications": reviewer.existing + reviewer.new}},
            )

        logger.info(f"✅ Auto-assigned {len(applications)} applications")
        return {
            "totalAssigned": len(applications),
            "reviewerStats": [
                {
                    "reviewer": reviewer.email,
                    "newAssignments": len(reviewer.new),
                    "totalAssignments": reviewer.total,
                }
                for reviewer in reviewers if reviewer.new
            ],
            "teamsAssigned": teams_assigned,
        }

    def _team_member_ids(self, application_id: str) -> List[str]:
        application = self.store.applications.find_one(
            {"_id": parse_object_id(application_id)}, {"teamId": 1}
        )
        if not application or not application.get("teamId"):
            return []

        team = Team.from_doc(self.store.teams.find_one({"_id": parse_object_id(application["teamId"])}))
        return team.member_ids() if team else []

    def assign(self, admin_email: str, application_ids: List[str]) -> dict:
        """Assign applications, plus their teammates, to one admin."""
        admin = self.store.admins.find_one({"email": admin_email})
        if not admin:
            raise AdminNotFoundError("Admin not found")

        all_ids = list(dict.fromkeys(application_ids))
        team_members_added = 0
        for application_id in application_ids:
            try:
                member_ids = self._team_member_ids(application_id)
            except PyMongoError as e:
                logger.warning(f"Could not load team for application {application_id}: {e}")
                continue
            for member_id in member_ids:
                if member_id not in all_ids:
                    all_ids.append(member_id)
                    team_members_added += 1

        applicants = {}
        for application_id in all_ids:
            oid = parse_object_id(application_id)
            applicant = self.store.applications.find_one({"_id": oid}, {"processedBy": 1}) if oid else None
            if not applicant:
                raise ApplicantNotFoundError(f"Applicant not found: {application_id}")
            applicants[application_id] = applicant

        for application_id, applicant in applicants.items():
            previous = applicant.get("processedBy", NOT_PROCESSED)
            if previous not in (admin_email, NOT_PROCESSED):
                self.store.admins.update_one(
                    {"email": previous},
                    {"$pull": {"assignedApplications": application_id}},
                )
            self.store.applications.update_one(
                {"_id": applicant["_id"]},
                {"$set": {"processedBy": admin_email}},
            )

        assigned = list(dict.fromkeys(list(admin.get("assignedApplications") or []) + all_ids))
        self.store.admins.update_one({"_id": admin["_id"]}, {"$set": {"assignedApplications": assigned}})

        logger.info(f"✅ Assigned {len(all_ids)} applications to {admin_email} "
                    f"({team_members_added} teammates added)")
        return {
            "assignedApplications": assigned,
            "totalAssigned": len(all_ids),
            "teamMembersAdded": team_members_added,
        }
