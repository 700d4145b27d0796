from fastapi.testclient import TestClient


def test_get_departments(client: TestClient):
    """Тест получения списка отделов"""
    response = client.get("/departments")
    assert response.status_code == 200

    departments = response.json()
    assert isinstance(departments, list)
    assert len(departments) == 3
    assert any(d["name"] == "Regional" for d in departments)


def test_get_department(client: TestClient):
    response = client.get("/departments/2")
    assert response.status_code == 200

    department = response.json()
    assert department["department_id"] == 2
    assert department["name"] == "Nature"
    assert department["description"] == "Animals and flowers"


def test_get_nonexistent_department(client: TestClient):
    response = client.get("/departments/999999")
    assert response.status_code == 404

    error = response.json()["error"]
    assert error["status"] == 404
    assert "999999" in error["message"]


def test_get_department_with_invalid_id(client: TestClient):
    response = client.get("/departments/two")
    assert response.status_code == 400
    assert response.json()["error"]["field"] == "department_id"


def test_get_department_with_huge_id(client: TestClient):
    """id вне диапазона INTEGER - обычный 404, а не ошибка БД"""
    response = client.get("/departments/99999999999999999999")
    assert response.status_code == 404

    error = response.json()["error"]
    assert error["status"] == 404
    assert "99999999999999999999" in error["message"]


def test_department_errors_documented(client: TestClient):
    responses = client.get("/openapi.json").json()["paths"]["/departments/{department_id}"]["get"]["responses"]
    assert responses["404"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
    assert "400" in responses
