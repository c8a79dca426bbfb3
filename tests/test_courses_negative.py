"""Negative & edge case tests for the Courses API."""

import pytest
from fastapi.testclient import TestClient

from conftest import assert_response_error


def create_course(client: TestClient, name: str = "Temp Name", status: str = "scheduled"):
    return client.post("/courses", json={"name": name, "status": status})


class TestCourseNegative:
    def test_empty_name(self, test_client: TestClient):
        resp = create_course(test_client, name="")
        assert_response_error(resp, 400)
        assert "Course name is required." in resp.json()["error"]

    def test_missing_name(self, test_client: TestClient):
        resp = test_client.post("/courses", json={"status": "scheduled"})
        assert_response_error(resp, 400)
        assert resp.json()["error"] == "Creation failed. Course name is required."

    def test_invalid_status(self, test_client: TestClient):
        resp = create_course(test_client, name="X", status="bogus")
        assert_response_error(resp, 400)
        assert "bogus is not a valid status" in resp.json()["error"]

    @pytest.mark.parametrize("payload", [
        {"name": "", "status": "available"},
        {"name": None, "status": "available"},
        {"name": "X", "status": "archived"},
        {"name": "X"},
    ])
    def test_invalid_replace(self, test_client: TestClient, payload):
        cid = create_course(test_client, "Replace me").json()["id"]
        upd = test_client.put(f"/courses/{cid}", json=payload)
        assert_response_error(upd, 400)
        assert upd.json()["error"].startswith(f"Update of Course ({cid}) failed.")

        # Nothing changed
        assert test_client.get(f"/courses/{cid}").json()["name"] == "Replace me"

    def test_get_missing_course(self, test_client: TestClient):
        resp = test_client.get("/courses/999999")
        assert_response_error(resp, 404)
        assert "999999" in resp.json()["error"]

    def test_put_missing_course(self, test_client: TestClient):
        resp = test_client.put(
            "/courses/999999", json={"name": "X", "status": "available"}
        )
        assert_response_error(resp, 404)

    def test_delete_missing_course(self, test_client: TestClient):
        resp = test_client.delete("/courses/999999")
        assert_response_error(resp, 404)

    def test_non_integer_id(self, test_client: TestClient):
        resp = test_client.get("/courses/not-a-number")
        assert resp.status_code == 422

    def test_wrong_type_name(self, test_client: TestClient):
        resp = test_client.post("/courses", json={"name": ["a"], "status": "scheduled"})
        assert resp.status_code == 422

    def test_delete_twice(self, test_client: TestClient):
        cid = create_course(test_client, "Double delete").json()["id"]
        assert test_client.delete(f"/courses/{cid}").status_code == 204
        assert_response_error(test_client.delete(f"/courses/{cid}"), 410)
