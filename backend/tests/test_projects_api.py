"""
Color Picker API - Project Endpoint Tests
===========================================

What:  End-to-end tests for /api/v1/projects against a seeded SQLite database.
"""

import json

import pytest
from sqlalchemy import select

from colorpicker.models.project import Project


async def _find_project(factory, name):
    async with factory() as session:
        result = await session.execute(select(Project).where(Project.name == name))
        return result.scalar_one_or_none()


class TestRoot:

    @pytest.mark.asyncio
    async def test_welcome_text(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.text == "Welcome to Color Picker API"

    @pytest.mark.asyncio
    async def test_request_id_header(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "abc12345"})

        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/")

        assert len(response.headers["X-Request-ID"]) == 8


class TestGetProjects:

    @pytest.mark.asyncio
    async def test_all_projects_in_insertion_order(self, test_client):
        response = await test_client.get("/api/v1/projects")

        assert response.status_code == 200
        body = response.json()
        assert [p["name"] for p in body] == ["Super dope project", "Another project"]
        assert [p["id"] for p in body] == [1, 2]
        assert {"created_at", "updated_at"} <= set(body[0])

    @pytest.mark.asyncio
    async def test_project_by_name(self, test_client):
        response = await test_client.get("/api/v1/projects/Super dope project")

        assert response.status_code == 200
        assert response.json()["name"] == "Super dope project"

    @pytest.mark.asyncio
    async def test_unknown_project_is_404(self, test_client):
        response = await test_client.get("/api/v1/projects/invalid project")

        assert response.status_code == 404
        assert response.json() == {"error": "Could not find project named invalid project!"}
        # Raw body matches a compact JSON.stringify of the same object
        assert response.text == json.dumps(
            {"error": "Could not find project named invalid project!"}, separators=(",", ":")
        )


class TestCreateProject:

    @pytest.mark.asyncio
    async def test_create(self, test_client, db_session_factory):
        response = await test_client.post("/api/v1/projects", json={"name": "Cool new project"})

        assert response.status_code == 201
        assert response.json()["name"] == "Cool new project"
        assert response.json()["id"] == 3
        project = await _find_project(db_session_factory, "Cool new project")
        assert project is not None

    @pytest.mark.asyncio
    async def test_missing_name(self, test_client):
        response = await test_client.post("/api/v1/projects", json={"color": "red"})

        assert response.status_code == 422
        assert response.json() == {"error": "Expected format { name: <string> }, missing name!"}

    @pytest.mark.asyncio
    async def test_no_body(self, test_client):
        response = await test_client.post("/api/v1/projects")

        assert response.status_code == 422
        assert response.json() == {"error": "Expected format { name: <string> }, missing name!"}

    @pytest.mark.asyncio
    async def test_body_not_an_object(self, test_client):
        response = await test_client.post("/api/v1/projects", json=["Cool new project"])

        assert response.status_code == 422
        assert response.json() == {"error": "Request body must be a JSON object"}

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts_at_store(self, test_client, db_session_factory):
        response = await test_client.post("/api/v1/projects", json={"name": "Super dope project"})

        assert response.status_code == 500
        assert "error" in response.json()
        async with db_session_factory() as session:
            result = await session.execute(select(Project))
            assert len(result.scalars().all()) == 2


class TestUpdateProject:

    @pytest.mark.asyncio
    async def test_rename(self, test_client, db_session_factory):
        response = await test_client.patch(
            "/api/v1/projects/Super dope project", json={"name": "hi"}
        )

        assert response.status_code == 202
        assert response.json() == {"message": "Project name changed to hi"}
        assert (await _find_project(db_session_factory, "hi")).id == 1

        old = await test_client.get("/api/v1/projects/Super dope project")
        new = await test_client.get("/api/v1/projects/hi")
        assert old.status_code == 404
        assert new.status_code == 200

    @pytest.mark.asyncio
    async def test_unknown_project_is_404_even_without_body(self, test_client):
        response = await test_client.patch("/api/v1/projects/invalid")

        assert response.status_code == 404
        assert response.json()["error"] == "No existing project with name of invalid"

    @pytest.mark.asyncio
    async def test_missing_new_name(self, test_client):
        response = await test_client.patch("/api/v1/projects/Super dope project", json={})

        assert response.status_code == 422
        assert response.json() == {"error": "Expected format { name: <string> }, missing name!"}

    @pytest.mark.asyncio
    async def test_unknown_project_with_malformed_body_is_404(self, test_client):
        response = await test_client.patch("/api/v1/projects/invalid", json="x")

        assert response.status_code == 404
        assert response.json()["error"] == "No existing project with name of invalid"

    @pytest.mark.asyncio
    async def test_malformed_body(self, test_client):
        response = await test_client.patch("/api/v1/projects/Super dope project", json="x")

        assert response.status_code == 422
        assert response.json() == {"error": "Request body must be a JSON object"}

    @pytest.mark.asyncio
    async def test_null_name_is_missing(self, test_client, db_session_factory):
        response = await test_client.patch(
            "/api/v1/projects/Super dope project", json={"name": None}
        )

        assert response.status_code == 422
        assert await _find_project(db_session_factory, "Super dope project") is not None


class TestDeleteProject:

    @pytest.mark.asyncio
    async def test_delete(self, test_client, db_session_factory):
        response = await test_client.delete("/api/v1/projects/Another project")

        assert response.status_code == 202
        assert response.json() == {"message": "Successfully deleted Another project"}
        assert await _find_project(db_session_factory, "Another project") is None

    @pytest.mark.asyncio
    async def test_delete_missing_still_202(self, test_client):
        response = await test_client.delete("/api/v1/projects/Cool new project")

        assert response.status_code == 202
        assert response.json() == {"message": "Successfully deleted Cool new project"}
