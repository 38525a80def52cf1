from bson import ObjectId

from hackadmin.core.security import verify_password

NEW_ADMIN = {"firstName": "A", "lastName": "B", "email": "a@b.com", "password": "x"}


class TestCreateAdmin:
    def test_creates_admin_and_returns_envelope(self, client, store):
        response = client.post("/admin/create-admin", json=NEW_ADMIN)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "Admin created successfully"
        assert body["data"]["email"] == "a@b.com"
        assert body["data"]["isSuperAdmin"] is False
        assert body["data"]["assignedApplications"] == []
        assert "password" not in body["data"]

        stored = store.admins.find_one({"email": "a@b.com"})
        assert stored is not None
        assert stored["password"] != "x"
        assert verify_password("x", stored["password"])

    def test_created_admin_can_be_fetched_by_id(self, client):
        created = client.post("/admin/create-admin", json=NEW_ADMIN).json()["data"]

        response = client.get(f"/get-adminInfo/{created['_id']}")

        assert response.status_code == 200
        assert response.json()["data"] == created

    def test_missing_field_is_rejected(self, client, store):
        for field in NEW_ADMIN:
            payload = {k: v for k, v in NEW_ADMIN.items() if k != field}
            response = client.post("/admin/create-admin", json=payload)

            assert response.status_code == 400
            assert response.json()["status"] == "error"

        assert store.admins.count_documents({}) == 0

    def test_empty_field_is_rejected(self, client):
        response = client.post("/admin/create-admin", json={**NEW_ADMIN, "lastName": ""})

        assert response.status_code == 400

    def test_duplicate_email_conflicts(self, client, store):
        client.post("/admin/create-admin", json=NEW_ADMIN)
        response = client.post("/admin/create-admin", json=NEW_ADMIN)

        assert response.status_code == 409
        assert response.json()["message"] == "An admin with this email already exists"
        assert store.admins.count_documents({}) == 1

    def test_email_is_kept_as_typed(self, client, store):
        response = client.post("/admin/create-admin", json={**NEW_ADMIN, "email": "Jane.Doe@Example.COM"})

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "Jane.Doe@Example.COM"
        assert store.admins.find_one({"email": "Jane.Doe@Example.COM"}) is not None

        login = client.post("/auth-token/login", json={"email": "Jane.Doe@Example.COM", "password": "x"})
        assert login.status_code == 200

    def test_invalid_email_is_rejected(self, client, store):
        response = client.post("/admin/create-admin", json={**NEW_ADMIN, "email": "not-an-email"})

        assert response.status_code == 400
        assert store.admins.count_documents({}) == 0

    def test_password_over_72_bytes_is_rejected(self, client, store):
        response = client.post("/admin/create-admin", json={**NEW_ADMIN, "password": "p" * 80})

        assert response.status_code == 400
        assert response.json()["message"] == "Password cannot be longer than 72 bytes"
        assert store.admins.count_documents({}) == 0


class TestDeleteAdmin:
    def test_deletes_and_returns_admin(self, client, store, make_admin):
        admin = make_admin()

        response = client.delete(f"/admin/delete-admin/{admin['_id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Admin deleted successfully"
        assert body["data"]["email"] == admin["email"]
        assert "password" not in body["data"]
        assert store.admins.count_documents({}) == 0

    def test_unknown_id_is_not_found_and_changes_nothing(self, client, store, make_admin):
        make_admin()

        response = client.delete(f"/admin/delete-admin/{ObjectId()}")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": "Admin not found", "error": None}
        assert store.admins.count_documents({}) == 1

    def test_malformed_id_is_not_found(self, client):
        response = client.delete("/admin/delete-admin/not-an-id")

        assert response.status_code == 404

    def test_missing_id_is_bad_request(self, client):
        response = client.delete("/admin/delete-admin/")

        assert response.status_code == 400
        assert response.json()["status"] == "error"


class TestChangePassword:
    def test_unknown_admin_is_not_found(self, client):
        response = client.patch(f"/admin/change-password/{ObjectId()}", json={"newPassword": "new-one"})

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == "error"
        assert body["message"] == "Admin not found"

    def test_same_password_is_rejected_and_kept(self, client, store, make_admin):
        admin = make_admin(password="hunter22")

        response = client.patch(f"/admin/change-password/{admin['_id']}", json={"newPassword": "hunter22"})

        assert response.status_code == 400
        assert response.json()["message"] == "New password cannot be the same as the old password"
        assert store.admins.find_one({"_id": admin["_id"]})["password"] == admin["password"]

    def test_same_as_legacy_plaintext_is_rejected(self, client, make_admin):
        admin = make_admin(password="plain", hashed=False)

        response = client.patch(f"/admin/change-password/{admin['_id']}", json={"newPassword": "plain"})

        assert response.status_code == 400

    def test_updates_password(self, client, store, make_admin):
        admin = make_admin(password="hunter22")

        response = client.patch(f"/admin/change-password/{admin['_id']}", json={"newPassword": "correct-horse"})

        assert response.status_code == 200
        assert response.json()["message"] == "Password updated successfully"
        stored = store.admins.find_one({"_id": admin["_id"]})
        assert verify_password("correct-horse", stored["password"])
        assert not verify_password("hunter22", stored["password"])

    def test_missing_new_password_is_bad_request(self, client, make_admin):
        admin = make_admin()

        response = client.patch(f"/admin/change-password/{admin['_id']}", json={})

        assert response.status_code == 400

    def test_missing_id_is_bad_request(self, client):
        response = client.patch("/admin/change-password/", json={"newPassword": "x"})

        assert response.status_code == 400

    def test_password_over_72_bytes_is_rejected_and_kept(self, client, store, make_admin):
        admin = make_admin(password="hunter22")

        response = client.patch(f"/admin/change-password/{admin['_id']}", json={"newPassword": "q" * 80})

        assert response.status_code == 400
        assert response.json()["message"] == "Password cannot be longer than 72 bytes"
        assert store.admins.find_one({"_id": admin["_id"]})["password"] == admin["password"]


class TestGetEmails:
    def test_returns_reviewer_emails_only(self, client, make_admin):
        make_admin(email="one@conuhacks.io")
        make_admin(email="two@conuhacks.io")
        make_admin(email="boss@conuhacks.io", isSuperAdmin=True)

        response = client.get("/admin/get-emails")

        assert response.status_code == 200
        assert response.headers["cache-control"] == "no-store"
        assert sorted(response.json()["data"]) == ["one@conuhacks.io", "two@conuhacks.io"]

    def test_no_reviewers_is_not_found(self, client, make_admin):
        make_admin(email="boss@conuhacks.io", isSuperAdmin=True)

        response = client.get("/admin/get-emails")

        assert response.status_code == 404
        assert response.json()["message"] == "No admins were found"


class TestListAdmins:
    def test_paginates_reviewers(self, client, make_admin):
        for i in range(5):
            make_admin(email=f"reviewer{i}@conuhacks.io")
        make_admin(email="boss@conuhacks.io", isSuperAdmin=True)

        response = client.get("/admin", params={"page": 2, "pageSize": 2})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["pagination"] == {"page": 2, "pageSize": 2, "totalRecords": 5, "totalPages": 3}
        assert len(data["data"]) == 2
        assert all("password" not in admin for admin in data["data"])

    def test_search_matches_name_and_email(self, client, make_admin):
        make_admin(email="alice@conuhacks.io", firstName="Alice")
        make_admin(email="bob@conuhacks.io", firstName="Bob")

        response = client.get("/admin", params={"search": "ALI"})

        emails = [admin["email"] for admin in response.json()["data"]["data"]]
        assert emails == ["alice@conuhacks.io"]


class TestGetAdminInfo:
    def test_unknown_admin_is_not_found(self, client):
        response = client.get(f"/get-adminInfo/{ObjectId()}")

        assert response.status_code == 404
        assert response.json()["message"] == "No admin was found with the provided id."

    def test_missing_id_is_bad_request(self, client):
        response = client.get("/get-adminInfo/")

        assert response.status_code == 400
