"""Test error handling functionality.

Verifies that custom exceptions carry the right attributes and that the
error envelope is built consistently.
"""
import asyncio
import json
import pytest
from fastapi import Request
from sqlalchemy.exc import IntegrityError
from core.error_handlers import create_error_response, generic_exception_handler, sqlalchemy_exception_handler
from core.exceptions import AppException, NotFoundError, DatabaseError


def test_exception_classes_have_proper_attributes():
    """Test that custom exception classes have expected attributes."""
    exc = NotFoundError("Recipe", 123)
    assert exc.status_code == 404
    assert "Recipe" in exc.message
    assert "123" in exc.message
    assert exc.details == {"resource": "Recipe", "id": 123}

    exc = NotFoundError("HealthProfile", "u-1", field="userId")
    assert exc.details == {"resource": "HealthProfile", "userId": "u-1"}
    assert "userId 'u-1'" in exc.message

    exc = DatabaseError("Write failed", operation="upsert")
    assert exc.status_code == 500
    assert exc.details == {"operation": "upsert"}

    assert isinstance(exc, AppException)


def test_error_response_envelope():
    res = create_error_response("Recipe with id '1' not found", status_code=404, details={"id": 1})
    assert res.status_code == 404
    body = json.loads(res.body)
    assert body == {"error": {"message": "Recipe with id '1' not found", "status_code": 404, "details": {"id": 1}}}


def test_error_response_omits_empty_details():
    body = json.loads(create_error_response("boom").body)
    assert body == {"error": {"message": "boom", "status_code": 500}}


def _request(path="/api/recipes"):
    return Request({"type": "http", "method": "POST", "path": path, "headers": [], "query_string": b""})


def test_server_errors_hide_internal_details():
    exc = IntegrityError("INSERT INTO recipes", {}, Exception("NOT NULL constraint failed: recipes.name"))
    res = asyncio.run(sqlalchemy_exception_handler(_request(), exc))
    assert res.status_code == 500
    body = json.loads(res.body)
    assert body["error"]["details"] == {"type": "database_error"}
    assert "recipes.name" not in res.body.decode()

    res = asyncio.run(generic_exception_handler(_request(), RuntimeError("secret")))
    assert res.status_code == 500
    assert json.loads(res.body)["error"] == {
        "message": "An internal server error occurred",
        "status_code": 500,
        "details": {"type": "internal_error"},
    }


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
