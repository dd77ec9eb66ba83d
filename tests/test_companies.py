"""
Test suite for company endpoints.

Tests cover:
- Admin-only writes
- Listing with filters
- Validation and error status codes
"""

import pytest


NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "logoUrl": "http://new.img",
    "description": "DescNew",
    "numEmployees": 10,
}


class TestCompanyCreation:
    """Tests for POST /companies"""

    def test_create_as_admin(self, client, admin_headers):
        response = client.post("/api/v1/companies/", json=NEW_COMPANY, headers=admin_headers)

        assert response.status_code == 201
        assert response.json() == {"company": NEW_COMPANY}

    def test_create_as_non_admin(self, client, user_headers):
        response = client.post("/api/v1/companies/", json=NEW_COMPANY, headers=user_headers)

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Unauthorized"

    def test_create_anonymous(self, client):
        response = client.post("/api/v1/companies/", json=NEW_COMPANY)
        assert response.status_code == 401

    def test_create_missing_data(self, client, admin_headers):
        response = client.post("/api/v1/companies/", json={"handle": "new", "numEmployees": 10}, headers=admin_headers)
        assert response.status_code == 400

    def test_create_invalid_data(self, client, admin_headers):
        response = client.post(
            "/api/v1/companies/",
            json={**NEW_COMPANY, "numEmployees": "not-a-number"},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_create_duplicate(self, client, admin_headers):
        response = client.post("/api/v1/companies/", json={**NEW_COMPANY, "handle": "c1"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Duplicate company: c1"

    def test_create_duplicate_name(self, client, admin_headers):
        response = client.post("/api/v1/companies/", json={**NEW_COMPANY, "name": "C1"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Duplicate company name: C1"

    def test_create_snake_case_key_rejected(self, client, admin_headers):
        body = {k: v for k, v in NEW_COMPANY.items() if k != "logoUrl"}
        response = client.post(
            "/api/v1/companies/",
            json={**body, "logo_url": "http://new.img"},
            headers=admin_headers,
        )
        assert response.status_code == 400


class TestCompanyListing:
    """Tests for GET /companies"""

    def test_list_anonymous(self, client):
        response = client.get("/api/v1/companies/")

        assert response.status_code == 200
        assert [c["handle"] for c in response.json()["companies"]] == ["c1", "c2", "c3"]
        assert response.json()["companies"][0] == {
            "handle": "c1",
            "name": "C1",
            "description": "Desc1",
            "numEmployees": 1,
            "logoUrl": "http://c1.img",
        }

    def test_filter_name_like(self, client):
        response = client.get("/api/v1/companies/", params={"nameLike": "3"})
        assert [c["handle"] for c in response.json()["companies"]] == ["c3"]

    def test_filter_employee_range(self, client):
        response = client.get("/api/v1/companies/", params={"minEmployees": "2", "maxEmployees": "2"})
        assert [c["handle"] for c in response.json()["companies"]] == ["c2"]

    def test_invalid_range(self, client):
        response = client.get("/api/v1/companies/", params={"nameLike": "an", "minEmployees": 10, "maxEmployees": 5})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Minimum employees cannot exceed maximum employees"

    @pytest.mark.parametrize("params", [
        {"handle": "c1"},
        {"minEmployees": "many"},
        {"maxEmployees": "-1"},
        {"name_like": "c3"},
        {"min_employees": "2"},
    ])
    def test_invalid_filters(self, client, params):
        response = client.get("/api/v1/companies/", params=params)

        assert response.status_code == 400
        assert isinstance(response.json()["error"]["message"], list)


class TestCompanyRetrieval:
    """Tests for GET /companies/{handle}"""

    def test_get(self, client):
        response = client.get("/api/v1/companies/c1")
        assert response.json()["company"]["name"] == "C1"

    def test_get_not_found(self, client):
        response = client.get("/api/v1/companies/nope")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "No company: nope", "status": 404}}


class TestCompanyUpdate:
    """Tests for PATCH /companies/{handle}"""

    def test_update_as_admin(self, client, admin_headers):
        response = client.patch("/api/v1/companies/c1", json={"name": "C1-new"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["company"]["name"] == "C1-new"
        assert response.json()["company"]["handle"] == "c1"

    def test_update_as_non_admin(self, client, user_headers):
        response = client.patch("/api/v1/companies/c1", json={"name": "C1-new"}, headers=user_headers)
        assert response.status_code == 401

    def test_update_not_found(self, client, admin_headers):
        response = client.patch("/api/v1/companies/nope", json={"name": "new nope"}, headers=admin_headers)
        assert response.status_code == 404

    def test_update_handle_rejected(self, client, admin_headers):
        response = client.patch("/api/v1/companies/c1", json={"handle": "c1-new"}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_empty(self, client, admin_headers):
        response = client.patch("/api/v1/companies/c1", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "No data"

    def test_update_snake_case_key_rejected(self, client, admin_headers):
        response = client.patch("/api/v1/companies/c1", json={"num_employees": 99}, headers=admin_headers)

        assert response.status_code == 400
        assert client.get("/api/v1/companies/c1").json()["company"]["numEmployees"] == 1

    def test_update_null_name_rejected(self, client, admin_headers):
        response = client.patch("/api/v1/companies/c1", json={"name": None}, headers=admin_headers)
        assert response.status_code == 400


class TestCompanyDeletion:
    """Tests for DELETE /companies/{handle}"""

    def test_delete_as_admin(self, client, admin_headers):
        response = client.delete("/api/v1/companies/c1", headers=admin_headers)

        assert response.json() == {"deleted": "c1"}
        assert client.get("/api/v1/companies/c1").status_code == 404

    def test_delete_as_non_admin(self, client, user_headers):
        response = client.delete("/api/v1/companies/c1", headers=user_headers)
        assert response.status_code == 401

    def test_delete_not_found(self, client, admin_headers):
        response = client.delete("/api/v1/companies/nope", headers=admin_headers)
        assert response.status_code == 404
