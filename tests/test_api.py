"""HTTP tests for the three routers: status mapping, message bodies, and routing."""

import unittest

from fastapi.testclient import TestClient

from main import create_app

USER = {
    "id": 1,
    "username": "alice",
    "email": "alice@example.com",
    "phone_no": "555-0100",
    "password": "secret",
}

APPOINTMENT = {
    "name": "Bob",
    "email": "bob@example.com",
    "phone": "555-0101",
    "date": "2026-10-20",
    "time": "09:30",
    "reason": "Checkup",
}


class ApiTestCase(unittest.TestCase):
    """Each test gets a fresh app, so stores start empty."""

    def setUp(self) -> None:
        self.client = TestClient(create_app())


class TestUsersApi(ApiTestCase):

    def test_create_then_conflict(self) -> None:
        response = self.client.post("/api/users", json=USER)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), "User created successfully!")

        response = self.client.post("/api/users", json=USER)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), "User with ID 1 already exists.")

    def test_partial_update(self) -> None:
        self.client.post("/api/users", json=USER)
        response = self.client.put("/api/users/1", json={"email": "a@new.example", "phone_no": None})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), "User with ID 1 updated successfully.")

        users = self.client.get("/api/users").json()
        self.assertEqual(users, [dict(USER, email="a@new.example")])

    def test_update_missing_user(self) -> None:
        response = self.client.put("/api/users/9", json={"username": "ghost"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), "User with ID 9 not found.")

    def test_get_user(self) -> None:
        self.client.post("/api/users", json=USER)
        self.assertEqual(self.client.get("/api/users/1").json(), USER)
        response = self.client.get("/api/users/2")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "User with ID 2 not found.")

    def test_missing_field_is_rejected(self) -> None:
        body = {k: v for k, v in USER.items() if k != "email"}
        self.assertEqual(self.client.post("/api/users", json=body).status_code, 422)

    def test_id_out_of_uint32_range_is_rejected(self) -> None:
        self.assertEqual(self.client.post("/api/users", json=dict(USER, id=-1)).status_code, 422)
        self.assertEqual(self.client.get("/api/users/4294967296").status_code, 422)


class TestStaffApi(ApiTestCase):

    def test_role_and_grant_flow(self) -> None:
        response = self.client.post(
            "/api/rbac/users",
            json={"id": 1, "username": "alice", "role": "Doctor", "permissions": []},
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), "User 'alice' created successfully!")
        self.assertEqual(
            self.client.get("/api/rbac/users/1").json()["permissions"],
            ["ViewPatient", "AddPatient", "EditPatient", "ViewDoctor"],
        )

        response = self.client.put("/api/rbac/users/1/permissions", json=["DeletePatient"])
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), "Permissions assigned to user 1.")
        self.assertEqual(
            self.client.get("/api/rbac/users/1/permissions/DeletePatient").json(),
            {"user_id": 1, "permission": "DeletePatient", "granted": True},
        )

        response = self.client.put("/api/rbac/users/1/role", json="Nurse")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), "User 1 role updated to Nurse")
        user = self.client.get("/api/rbac/users/1").json()
        self.assertEqual(user, {"id": 1, "username": "alice", "role": "Nurse", "permissions": ["ViewPatient"]})

    def test_permissions_optional_on_create(self) -> None:
        response = self.client.post(
            "/api/rbac/users", json={"id": 5, "username": "root", "role": "Admin"}
        )
        self.assertEqual(response.status_code, 201)
        users = self.client.get("/api/rbac/users").json()
        self.assertEqual(len(users), 1)
        self.assertEqual(len(users[0]["permissions"]), 6)

    def test_unknown_role_is_rejected(self) -> None:
        response = self.client.post(
            "/api/rbac/users", json={"id": 1, "username": "x", "role": "Janitor"}
        )
        self.assertEqual(response.status_code, 422)

    def test_missing_user(self) -> None:
        self.assertEqual(self.client.put("/api/rbac/users/3/role", json="Admin").status_code, 404)
        self.assertEqual(
            self.client.put("/api/rbac/users/3/permissions", json=["ViewPatient"]).status_code,
            404,
        )
        self.assertEqual(self.client.get("/api/rbac/users/3").status_code, 404)
        self.assertEqual(
            self.client.get("/api/rbac/users/3/permissions/ViewPatient").status_code, 404
        )

    def test_staff_and_plain_users_are_separate(self) -> None:
        self.client.post("/api/users", json=USER)
        self.assertEqual(self.client.get("/api/rbac/users").json(), [])


class TestAppointmentsApi(ApiTestCase):

    def test_create_get_delete(self) -> None:
        response = self.client.post("/api/appointments", json=APPOINTMENT)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), "Appointment created successfully with ID 0.")
        self.client.post("/api/appointments", json=APPOINTMENT)

        self.assertEqual(self.client.get("/api/appointments/0").json(), dict(APPOINTMENT, id=0))
        self.assertEqual(len(self.client.get("/api/appointments").json()), 2)

        response = self.client.delete("/api/appointments/0")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), "Appointment with ID 0 deleted successfully.")
        self.assertEqual(self.client.get("/api/appointments/0").status_code, 404)

        response = self.client.delete("/api/appointments/0")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), "Appointment with ID 0 not found.")

        response = self.client.post("/api/appointments", json=APPOINTMENT)
        self.assertEqual(response.json(), "Appointment created successfully with ID 2.")

    def test_update_appointment(self) -> None:
        self.client.post("/api/appointments", json=APPOINTMENT)
        response = self.client.put("/api/appointments/0", json={"reason": "Follow-up"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get("/api/appointments/0").json()["reason"], "Follow-up")
        self.assertEqual(
            self.client.put("/api/appointments/4", json={"reason": "x"}).status_code, 404
        )


class TestRoot(ApiTestCase):

    def test_root_lists_endpoints(self) -> None:
        body = self.client.get("/").json()
        self.assertEqual(body["endpoints"]["update_role"], "PUT /api/rbac/users/{id}/role")


if __name__ == "__main__":
    unittest.main()
