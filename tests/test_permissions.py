from inventory_api.services.auth import Permission, UserRole, role_allows
from inventory_api.services.user import UserService


def test_role_permission_table():
    assert role_allows(UserRole.EMPLOYEE, Permission.READ)
    assert not role_allows(UserRole.EMPLOYEE, Permission.WRITE)
    assert role_allows(UserRole.TEACHER, Permission.WRITE)
    assert not role_allows(UserRole.TEACHER, Permission.ADMIN)
    assert role_allows(UserRole.ADMINISTRATOR, Permission.ADMIN)
    assert not role_allows("guest", Permission.READ)


def test_missing_token_is_rejected(client):
    response = client.get("/api/direction")

    assert response.status_code == 401
    assert response.json()["detail"] == "Недостаточно прав для выполнения операции"


def test_employee_can_read_but_not_write(client, employee_token):
    assert client.get("/api/direction", params={"token": employee_token}).status_code == 200

    response = client.post("/api/direction", params={"token": employee_token}, json={"name": "ИТ"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Недостаточно прав для выполнения операции"


def test_teacher_can_write(client, teacher_token):
    response = client.post("/api/direction", params={"token": teacher_token}, json={"name": "ИТ"})

    assert response.status_code == 201


def test_audit_endpoints_are_for_administrators_only(client, teacher_token, admin_token):
    assert client.get("/api/audit/stats", params={"token": teacher_token}).status_code == 401
    assert client.get("/api/audit/stats", params={"token": admin_token}).status_code == 200


def test_health_needs_no_token(client):
    assert client.get("/health").status_code == 200


def test_token_resolution_helpers(db, tokens):
    users = UserService(db)

    assert users.resolve_role(tokens[UserRole.TEACHER]) == UserRole.TEACHER
    assert users.can_read(tokens[UserRole.EMPLOYEE])
    assert not users.can_write(tokens[UserRole.EMPLOYEE])
    assert users.can_write(tokens[UserRole.ADMINISTRATOR])
    assert users.resolve_role("garbage") is None
    assert not users.can_read(None)
