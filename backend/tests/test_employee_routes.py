"""
Employee App Backend: Employee Endpoint Tests
================================================

What:  End-to-end HTTP tests for /employees against a real SQLite database.
How:   HTTPX AsyncClient over ASGITransport (no server process).

What we test:
    ✅ Create → read → delete → read scenario
    ✅ Generated ids are positive, unique and never reused
    ✅ Read returns exactly the inserted rows
    ✅ Delete of a missing id is a silent success
    ✅ Database failures become a generic 500 body
    ✅ Request IDs are echoed on responses
    ✅ Access log names the route and employee id
"""

import logging

import pytest
from httpx import AsyncClient, ASGITransport

from employee_app.database import Database
from employee_app.main import create_app


class TestEmployeeScenario:

    @pytest.mark.asyncio
    async def test_create_read_delete_round(self, test_client):
        """POST Alice, list her, delete her, list nothing."""
        response = await test_client.post(
            "/employees", json={"name": "Alice", "role": "Engineer"}
        )
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Alice", "role": "Engineer"}

        response = await test_client.get("/employees")
        assert response.status_code == 200
        assert response.json() == [{"id": 1, "name": "Alice", "role": "Engineer"}]

        response = await test_client.delete("/employees/1")
        assert response.status_code == 200
        assert response.text == "Deleted"
        assert response.headers["content-type"].startswith("text/plain")

        response = await test_client.get("/employees")
        assert response.json() == []


class TestCreateEmployee:

    @pytest.mark.asyncio
    async def test_create_echoes_input_and_assigns_new_ids(self, test_client):
        seen_ids = set()
        for name, role in [("Alice", "Engineer"), ("Bob", "Designer"), ("Alice", "Engineer")]:
            response = await test_client.post("/employees", json={"name": name, "role": role})
            body = response.json()
            assert body["name"] == name
            assert body["role"] == role
            assert body["id"] > 0
            assert body["id"] not in seen_ids
            seen_ids.add(body["id"])

    @pytest.mark.asyncio
    async def test_create_with_missing_fields_stores_null(self, test_client):
        """No validation: an empty body still inserts a row."""
        response = await test_client.post("/employees", json={})

        assert response.status_code == 200
        body = response.json()
        assert body["name"] is None
        assert body["role"] is None

    @pytest.mark.asyncio
    async def test_create_without_body_stores_null(self, test_client):
        response = await test_client.post("/employees")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] > 0
        assert body["name"] is None
        assert body["role"] is None

    @pytest.mark.asyncio
    async def test_create_coerces_numbers_to_text(self, test_client):
        response = await test_client.post("/employees", json={"name": 123, "role": "Engineer"})

        assert response.status_code == 200
        assert response.json()["name"] == "123"
        assert (await test_client.get("/employees")).json()[0]["name"] == "123"

    @pytest.mark.asyncio
    async def test_create_accepts_empty_strings(self, test_client):
        response = await test_client.post("/employees", json={"name": "", "role": ""})

        assert response.status_code == 200
        assert response.json()["name"] == ""

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, test_client):
        first = (await test_client.post("/employees", json={"name": "A", "role": "x"})).json()
        await test_client.delete(f"/employees/{first['id']}")

        second = (await test_client.post("/employees", json={"name": "B", "role": "y"})).json()

        assert second["id"] > first["id"]


class TestListEmployees:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/employees")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_returns_every_inserted_row(self, test_client):
        created = []
        for i in range(5):
            response = await test_client.post(
                "/employees", json={"name": f"Employee {i}", "role": "Staff"}
            )
            created.append(response.json())

        listed = (await test_client.get("/employees")).json()

        assert len(listed) == 5
        assert listed == created


class TestDeleteEmployee:

    @pytest.mark.asyncio
    async def test_delete_removes_only_that_row(self, test_client):
        ids = []
        for name in ("Alice", "Bob", "Carol"):
            ids.append((await test_client.post("/employees", json={"name": name, "role": "r"})).json()["id"])

        await test_client.delete(f"/employees/{ids[1]}")

        listed = (await test_client.get("/employees")).json()
        assert len(listed) == 2
        assert [e["name"] for e in listed] == ["Alice", "Carol"]

    @pytest.mark.asyncio
    async def test_delete_missing_id_is_silent(self, test_client):
        await test_client.post("/employees", json={"name": "Alice", "role": "Engineer"})
        before = (await test_client.get("/employees")).json()

        response = await test_client.delete("/employees/424242")

        assert response.status_code == 200
        assert response.text == "Deleted"
        assert (await test_client.get("/employees")).json() == before

    @pytest.mark.asyncio
    async def test_delete_non_numeric_id_is_a_generic_server_error(self, test_client):
        """A non-integer id fails like a database rejection, not a 422."""
        await test_client.post("/employees", json={"name": "Alice", "role": "Engineer"})

        response = await test_client.delete("/employees/abc", headers={"X-Request-ID": "bad-id"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "server_error",
            "message": "An internal error occurred. Please try again later.",
            "request_id": "bad-id",
        }
        assert len((await test_client.get("/employees")).json()) == 1


class TestErrorHandling:

    @pytest.mark.asyncio
    async def test_database_failure_returns_generic_500(self, database_url):
        """A database without the employees table makes every query fail."""
        database = Database(database_url)
        app = create_app(database=database)
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/employees", headers={"X-Request-ID": "req-500"})
        finally:
            await database.dispose()

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert body["request_id"] == "req-500"
        assert "employees" not in body["message"]

    @pytest.mark.asyncio
    async def test_unexpected_error_logged_once_without_traceback(self, caplog):
        """The catch-all answers 500 and leaves the traceback to the server."""
        class ExplodingDatabase:
            def session_factory(self):
                raise RuntimeError("pool exploded")

        app = create_app(database=ExplodingDatabase())
        caplog.set_level(logging.ERROR, logger="employee_app.main")
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/employees")

        assert response.status_code == 500
        assert response.json()["error"] == "internal_server_error"
        assert "pool exploded" not in response.text
        records = [r for r in caplog.records if r.name == "employee_app.main"]
        assert len(records) == 1
        assert "RuntimeError: pool exploded" in records[0].getMessage()
        assert records[0].exc_info is None


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_request_id_header(self, test_client):
        response = await test_client.get("/employees")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client):
        response = await test_client.get("/employees", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_delete_logs_route_and_employee_id(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="employee_app.access")

        await test_client.delete("/employees/42", headers={"X-Request-ID": "log-1"})

        lines = [r.getMessage() for r in caplog.records if r.name == "employee_app.access"]
        assert len(lines) == 1
        assert lines[0].startswith("DELETE /employees/{employee_id} employee_id=42 -> 200")
        assert lines[0].endswith("rid=log-1")

    @pytest.mark.asyncio
    async def test_server_errors_logged_at_error_level(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="employee_app.access")

        await test_client.delete("/employees/abc")

        access = [r for r in caplog.records if r.name == "employee_app.access"]
        assert len(access) == 1
        assert access[0].levelno == logging.ERROR

    @pytest.mark.asyncio
    async def test_health_is_not_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="employee_app.access")

        await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "employee_app.access"]
