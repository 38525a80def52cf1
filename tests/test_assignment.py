import pytest
from bson import ObjectId

from hackadmin.models import NOT_PROCESSED
from hackadmin.services.assignment import (
    AdminNotFoundError,
    ApplicantNotFoundError,
    AssignmentService,
    NoReviewersError,
    ReviewerLoad,
    distribute,
    group_by_team,
)


@pytest.fixture
def make_application(store):
    def _make_application(email, team_id=None, status="Submitted", processed_by=NOT_PROCESSED):
        doc = {"email": email, "status": status, "processedBy": processed_by}
        if team_id:
            doc["teamId"] = team_id
        return str(store.applications.insert_one(doc).inserted_id)
    return _make_application


@pytest.fixture
def super_admin(make_admin, sign_in):
    admin = make_admin(email="boss@conuhacks.io", isSuperAdmin=True)
    sign_in(admin)
    return admin


class TestGrouping:
    def test_largest_team_first_and_individuals_alone(self):
        applications = [
            {"_id": "a1"},
            {"_id": "b1", "teamId": "t-small"},
            {"_id": "c1", "teamId": "t-big"},
            {"_id": "c2", "teamId": "t-big"},
            {"_id": "c3", "teamId": "t-big"},
            {"_id": "b2", "teamId": "t-small"},
        ]

        groups = group_by_team(applications)

        assert groups[0] == ("t-big", ["c1", "c2", "c3"])
        assert groups[1] == ("t-small", ["b1", "b2"])
        assert groups[2] == ("individual_a1", ["a1"])

    def test_distribute_balances_new_assignments(self):
        reviewers = [ReviewerLoad("one@x.io"), ReviewerLoad("two@x.io")]
        groups = [("t1", ["a", "b", "c"]), ("individual_d", ["d"]), ("individual_e", ["e"])]

        teams_assigned = distribute(groups, reviewers)

        assert teams_assigned == 1
        assert reviewers[0].new == ["a", "b", "c"]
        assert reviewers[1].new == ["d", "e"]

    def test_ties_go_to_first_reviewer(self):
        reviewers = [ReviewerLoad("one@x.io", existing=["old"]), ReviewerLoad("two@x.io")]

        distribute([("individual_a", ["a"])], reviewers)

        assert reviewers[0].new == ["a"]
        assert reviewers[0].total == 2


class TestAutoAssign:
    def test_nothing_to_assign(self, store):
        assert AssignmentService(store).auto_assign() == {
            "totalAssigned": 0, "reviewerStats": [], "teamsAssigned": 0,
        }

    def test_requires_reviewers(self, store, make_application):
        make_application("solo@x.io")

        with pytest.raises(NoReviewersError):
            AssignmentService(store).auto_assign()

    def test_team_stays_together(self, store, make_admin, make_application):
        make_admin(email="one@conuhacks.io")
        make_admin(email="two@conuhacks.io", assignedApplications=["older"])
        make_admin(email="boss@conuhacks.io", isSuperAdmin=True)
        team = [make_application(f"t{i}@x.io", team_id="team-1") for i in range(2)]
        solo = make_application("solo@x.io")
        make_application("done@x.io", processed_by="one@conuhacks.io")

        result = AssignmentService(store).auto_assign()

        assert result["totalAssigned"] == 3
        assert result["teamsAssigned"] == 1
        owners = {
            str(doc["_id"]): doc["processedBy"]
            for doc in store.applications.find({"_id": {"$in": [ObjectId(i) for i in team + [solo]]}})
        }
        assert owners[team[0]] == owners[team[1]] == "one@conuhacks.io"
        assert owners[solo] == "two@conuhacks.io"
        assert store.admins.find_one({"email": "two@conuhacks.io"})["assignedApplications"] == ["older", solo]
        assert {"reviewer": "two@conuhacks.io", "newAssignments": 1, "totalAssignments": 2} in result["reviewerStats"]
        assert store.admins.find_one({"email": "boss@conuhacks.io"})["assignedApplications"] == []


class TestManualAssign:
    def test_unknown_admin(self, store, make_application):
        with pytest.raises(AdminNotFoundError):
            AssignmentService(store).assign("ghost@x.io", [make_application("a@x.io")])

    def test_unknown_applicant_changes_nothing(self, store, make_admin, make_application):
        make_admin(email="one@conuhacks.io")
        real = make_application("a@x.io")

        with pytest.raises(ApplicantNotFoundError):
            AssignmentService(store).assign("one@conuhacks.io", [real, str(ObjectId())])

        assert store.applications.find_one({"_id": ObjectId(real)})["processedBy"] == NOT_PROCESSED

    def test_teammates_follow_and_previous_reviewer_loses_them(self, store, make_admin, make_application):
        make_admin(email="one@conuhacks.io")
        team_id = str(ObjectId())
        first = make_application("a@x.io", team_id=team_id, processed_by="two@conuhacks.io")
        second = make_application("b@x.io", team_id=team_id)
        make_admin(email="two@conuhacks.io", assignedApplications=[first])
        store.teams.insert_one({
            "_id": ObjectId(team_id),
            "teamName": "Byte Me",
            "teamCode": "ABC123",
            "teamOwner": "owner-1",
            "members": [{"userId": first, "isAdmitted": False}, {"userId": second, "isAdmitted": False}],
        })

        result = AssignmentService(store).assign("one@conuhacks.io", [first])

        assert result == {"assignedApplications": [first, second], "totalAssigned": 2, "teamMembersAdded": 1}
        assert store.admins.find_one({"email": "two@conuhacks.io"})["assignedApplications"] == []
        assert store.applications.find_one({"_id": ObjectId(second)})["processedBy"] == "one@conuhacks.io"


class TestAssignmentRoutes:
    def test_requires_session(self, client):
        response = client.get("/admin/auto-assign-applications")

        assert response.status_code == 401

    def test_reviewers_are_forbidden(self, client, make_admin, sign_in):
        sign_in(make_admin())

        response = client.post("/admin/auto-assign-applications")

        assert response.status_code == 403

    def test_preview(self, client, super_admin, make_admin, make_application):
        make_admin(email="one@conuhacks.io")
        make_application("a@x.io")
        make_application("b@x.io", status="Admitted")

        response = client.get("/admin/auto-assign-applications")

        assert response.json()["data"] == {"unassignedCount": 1, "reviewerCount": 1}

    def test_auto_assign_without_work(self, client, super_admin):
        response = client.post("/admin/auto-assign-applications")

        assert response.status_code == 200
        assert response.json()["message"] == "No unassigned applications found"

    def test_auto_assign_without_reviewers(self, client, super_admin, make_application):
        make_application("a@x.io")

        response = client.post("/admin/auto-assign-applications")

        assert response.status_code == 400

    def test_manual_assign(self, client, super_admin, make_admin, make_application):
        make_admin(email="one@conuhacks.io")
        app_id = make_application("a@x.io")

        response = client.post("/admin/assign-applications", json={
            "selectedAdminEmail": "one@conuhacks.io",
            "selectedApplicants": [app_id],
        })

        assert response.status_code == 200
        assert response.json()["data"]["assignedApplications"] == [app_id]

    def test_manual_assign_needs_body(self, client, super_admin):
        response = client.post("/admin/assign-applications", json={"selectedApplicants": []})

        assert response.status_code == 400
