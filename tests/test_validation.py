"""Request validation: every failure is a 400 with field-level details"""
import pytest
from fastapi import status


def assert_validation_error(response, field, message=None):
    assert response.status_code == status.HTTP_400_BAD_REQUEST, response.text
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Validation failed"
    fields = {detail["field"]: detail["message"] for detail in body["details"]}
    assert field in fields, body["details"]
    if message is not None:
        assert fields[field] == message


def test_create_requires_name(client):
    response = client.post("/api/resources", json={"description": "no name"})
    assert_validation_error(response, "name")


def test_create_rejects_blank_name(client):
    response = client.post("/api/resources", json={"name": "   "})
    assert_validation_error(response, "name", "Name is required")


def test_create_rejects_long_name(client):
    response = client.post("/api/resources", json={"name": "x" * 256})
    assert_validation_error(response, "name", "Name must be less than 255 characters")


def test_create_accepts_name_at_limit(client):
    response = client.post("/api/resources", json={"name": "x" * 255})
    assert response.status_code == status.HTTP_201_CREATED


def test_create_rejects_long_description(client):
    response = client.post("/api/resources", json={"name": "ok", "description": "d" * 1001})
    assert_validation_error(response, "description", "Description must be less than 1000 characters")


def test_create_rejects_unknown_status(client):
    response = client.post("/api/resources", json={"name": "ok", "status": "archived"})
    assert_validation_error(response, "status")


def test_create_rejects_non_string_name(client):
    response = client.post("/api/resources", json={"name": 42})
    assert_validation_error(response, "name")


def test_create_rejects_malformed_json(client):
    response = client.post(
        "/api/resources",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Validation failed"


def test_update_requires_at_least_one_field(client, create_resource):
    created = create_resource()
    response = client.put(f"/api/resources/{created['id']}", json={})
    assert_validation_error(response, "", "At least one field must be provided for update")


def test_update_rejects_empty_name(client, create_resource):
    created = create_resource()
    response = client.put(f"/api/resources/{created['id']}", json={"name": ""})
    assert_validation_error(response, "name", "Name cannot be empty")


def test_update_rejects_null_name(client, create_resource):
    created = create_resource()
    response = client.put(f"/api/resources/{created['id']}", json={"name": None})
    assert_validation_error(response, "name", "Name cannot be empty")


def test_failed_update_leaves_resource_unchanged(client, create_resource):
    created = create_resource(name="stable")
    client.put(f"/api/resources/{created['id']}", json={"status": "deleted"})

    fetched = client.get(f"/api/resources/{created['id']}").json()["data"]
    assert fetched == created


@pytest.mark.parametrize("resource_id", ["0", "-3", "abc", "1.5"])
def test_id_must_be_positive_integer(client, resource_id):
    response = client.get(f"/api/resources/{resource_id}")
    assert_validation_error(response, "id")


@pytest.mark.parametrize(
    "params, field",
    [
        ({"limit": 0}, "limit"),
        ({"limit": 101}, "limit"),
        ({"limit": "ten"}, "limit"),
        ({"offset": -1}, "offset"),
        ({"status": "archived"}, "status"),
    ],
)
def test_list_filters_are_validated(client, params, field):
    response = client.get("/api/resources", params=params)
    assert_validation_error(response, field)


def test_list_accepts_limit_bounds(client):
    assert client.get("/api/resources", params={"limit": 1}).status_code == status.HTTP_200_OK
    assert client.get("/api/resources", params={"limit": 100}).status_code == status.HTTP_200_OK


def test_list_rejects_offset_beyond_integer_range(client):
    response = client.get("/api/resources", params={"offset": 10 ** 20})
    assert_validation_error(response, "offset")


def test_update_rejects_long_name(client, create_resource):
    created = create_resource()
    response = client.put(f"/api/resources/{created['id']}", json={"name": "x" * 256})
    assert_validation_error(response, "name", "Name must be less than 255 characters")


def test_update_rejects_long_description(client, create_resource):
    created = create_resource()
    response = client.put(f"/api/resources/{created['id']}", json={"description": "d" * 1001})
    assert_validation_error(response, "description", "Description must be less than 1000 characters")
