import os

# settings are read at import time, so the environment has to be ready first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["AUTO_CREATE_SCHEMA"] = "true"
os.environ["AUDIT_ENABLED"] = "true"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402

from inventory_api.core.db import SessionLocal, engine  # noqa: E402
from inventory_api.factory import create_app  # noqa: E402
from inventory_api.models import User  # noqa: E402
from inventory_api.services.auth import AuthService, UserRole  # noqa: E402
from shared import PASSWORD, login  # noqa: E402


@pytest.fixture
def client():
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db(client):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def create_user(db):
    def _create_user(username, role=UserRole.EMPLOYEE, password=PASSWORD, **fields):
        fields.setdefault("last_name", "Иванов")
        fields.setdefault("first_name", "Иван")
        user = User(
            username=username,
            password=AuthService().hash_password(password),
            role=role,
            **fields,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _create_user


@pytest.fixture
def tokens(client, create_user):
    create_user("admin", UserRole.ADMINISTRATOR, last_name="Петров", first_name="Пётр", middle_name="Сергеевич")
    create_user("teacher", UserRole.TEACHER, last_name="Смирнова", first_name="Анна")
    create_user("employee", UserRole.EMPLOYEE, last_name="Кузнецов", first_name="Олег")
    return {
        UserRole.ADMINISTRATOR: login(client, "admin"),
        UserRole.TEACHER: login(client, "teacher"),
        UserRole.EMPLOYEE: login(client, "employee"),
    }


@pytest.fixture
def admin_token(tokens):
    return tokens[UserRole.ADMINISTRATOR]


@pytest.fixture
def teacher_token(tokens):
    return tokens[UserRole.TEACHER]


@pytest.fixture
def employee_token(tokens):
    return tokens[UserRole.EMPLOYEE]


@pytest.fixture
def api(client, teacher_token):
    """Shortcut for calls made with write permission."""

    class Api:
        def __init__(self, token):
            self.token = token

        def get(self, path, **params):
            return client.get(path, params={"token": self.token, **params})

        def post(self, path, body):
            return client.post(path, params={"token": self.token}, json=body)

        def put(self, path, body):
            return client.put(path, params={"token": self.token}, json=body)

        def delete(self, path):
            return client.delete(path, params={"token": self.token})

        def create(self, route, body):
            response = self.post(f"/api/{route}", body)
            assert response.status_code == 201, response.text
            return response.json()

    return Api(teacher_token)
