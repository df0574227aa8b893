"""The exported OpenAPI document is valid and covers every route."""
from openapi_spec_validator import validate


def test_openapi_document_is_valid(app):
    spec = app.openapi()

    validate(spec)


def test_openapi_lists_space_routes(app):
    paths = app.openapi()["paths"]

    assert set(paths["/api/spaces"]) == {"get", "post"}
    assert set(paths["/api/spaces/{id}"]) == {"get", "patch", "delete"}
    assert "/api/health" in paths
    assert set(paths["/api/users"]) == {"get", "post"}
