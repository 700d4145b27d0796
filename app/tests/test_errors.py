import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from main import app
from routes.dependencies import get_catalog_repository
from services.exceptions import NotFoundError, ValidationError


class BrokenRepository:
    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        return fail


@pytest.fixture(name="broken_client")
def broken_client_fixture():
    app.dependency_overrides[get_catalog_repository] = lambda: BrokenRepository()
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.mark.parametrize("path", ["/departments", "/categories", "/products", "/products/inCategory/1"])
def test_database_error_returns_500(broken_client: TestClient, path: str):
    response = broken_client.get(path)
    assert response.status_code == 500
    assert response.json() == {"error": {"status": 500, "message": "Internal Server Error"}}


def test_error_body_omits_empty_fields():
    assert NotFoundError("Department with id 3 does not exist").to_dict() == {
        "status": 404,
        "message": "Department with id 3 does not exist"
    }
    assert ValidationError("param is not a number", code="PARAM_01", field="product_id").to_dict() == {
        "status": 400,
        "code": "PARAM_01",
        "message": "param is not a number",
        "field": "product_id"
    }
