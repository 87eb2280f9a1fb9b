from inventory_api.models import User
from inventory_api.services.auth import AuthService

from shared import login


def user_body(username, **fields):
    body = {
        "username": username,
        "password": "Pa55word",
        "role": "employee",
        "last_name": "Сидоров",
        "first_name": "Алексей",
    }
    body.update(fields)
    return body


def test_password_is_never_returned(api):
    created = api.create("users", user_body("sidorov"))

    assert "password" not in created
    assert "token" not in created
    assert all("password" not in user for user in api.get("/api/users").json())


def test_created_user_can_sign_in(client, api):
    api.create("users", user_body("sidorov"))

    assert login(client, "sidorov", "Pa55word")


def test_password_required_on_create(api):
    response = api.post("/api/users", user_body("sidorov", password=""))

    assert response.status_code == 400
    assert response.json()["detail"] == "Пароль обязателен для заполнения"


def test_blank_password_on_update_keeps_the_old_one(client, api, db):
    created = api.create("users", user_body("sidorov"))

    body = user_body("sidorov", id=created["id"], password="", last_name="Петров")
    assert api.put(f"/api/users/{created['id']}", body).status_code == 204

    db.expire_all()
    user = db.get(User, created["id"])
    assert user.last_name == "Петров"
    assert AuthService().verify_password("Pa55word", user.password)


def test_new_password_on_update_is_hashed(api, db):
    created = api.create("users", user_body("sidorov"))

    body = user_body("sidorov", id=created["id"], password="Another1")
    assert api.put(f"/api/users/{created['id']}", body).status_code == 204

    db.expire_all()
    stored = db.get(User, created["id"]).password
    assert stored != "Another1"
    assert AuthService().verify_password("Another1", stored)


def test_role_must_be_known(api):
    response = api.post("/api/users", user_body("sidorov", role="guest"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Роль должна быть: employee, teacher или administrator"


def test_username_characters(api):
    response = api.post("/api/users", user_body("sidorov a"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Логин может содержать только буквы, цифры и символ подчеркивания"


def test_email_and_phone_format(api):
    bad_email = api.post("/api/users", user_body("sidorov", email="sidorov.example.com"))
    bad_phone = api.post("/api/users", user_body("sidorov", phone="call me"))

    assert bad_email.json()["detail"] == "Некорректный формат email"
    assert bad_phone.json()["detail"] == "Некорректный формат телефона"


def test_username_unique(api):
    api.create("users", user_body("sidorov"))

    response = api.post("/api/users", user_body("sidorov"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Пользователь с таким логином уже существует"


def test_email_unique_unless_empty(api):
    api.create("users", user_body("first", email=""))
    api.create("users", user_body("second", email=""))
    api.create("users", user_body("third", email="a@b.ru"))

    response = api.post("/api/users", user_body("fourth", email="a@b.ru"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Пользователь с таким email уже существует"


def test_role_filter(api):
    api.create("users", user_body("sidorov", role="teacher"))

    teachers = api.get("/api/users", roleFilter="teacher").json()

    assert {user["username"] for user in teachers} == {"teacher", "sidorov"}


def test_search_users_by_last_name(api):
    api.create("users", user_body("sidorov"))

    found = api.get("/api/users", search="Сидор").json()

    assert [user["username"] for user in found] == ["sidorov"]


def test_user_responsible_for_room_cannot_be_deleted(api):
    user = api.create("users", user_body("sidorov"))
    api.create("room", {"name": "Аудитория 1", "responsible_user_id": user["id"]})

    response = api.delete(f"/api/users/{user['id']}")

    assert response.status_code == 400
    assert response.json()["detail"] == (
        "Невозможно удалить пользователя, так как он связан с другими записями в системе"
    )


def test_user_without_relations_is_deleted(api):
    user = api.create("users", user_body("sidorov"))

    assert api.delete(f"/api/users/{user['id']}").status_code == 204
