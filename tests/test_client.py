import httpx
import pytest

from inventory_client.api_client import ApiClient, ApiError
from inventory_client.services import DropdownsService, LoginService, ResourceClient
from inventory_client.session import UserSession

from shared import PASSWORD


@pytest.fixture
def session():
    return UserSession()


@pytest.fixture
def api_client(client, tokens):
    return ApiClient(http_client=client)


@pytest.fixture
def signed_in(api_client, session):
    LoginService(api_client, session).login("teacher", PASSWORD)
    return session


def test_login_fills_session(api_client, session):
    LoginService(api_client, session).login("admin", PASSWORD)

    assert session.is_authenticated
    assert session.role == "administrator"
    assert session.full_name == "Петров Пётр Сергеевич"
    assert session.can_write


def test_login_error_carries_server_message(api_client, session):
    with pytest.raises(ApiError) as error:
        LoginService(api_client, session).login("admin", "wrong")

    assert error.value.status_code == 401
    assert error.value.message == "Неверный логин или пароль"
    assert not session.is_authenticated


def test_employee_session_cannot_write(api_client, session):
    LoginService(api_client, session).login("employee", PASSWORD)

    assert session.is_authenticated
    assert not session.can_write


def test_logout_clears_session(api_client, signed_in):
    token = signed_in.token

    LoginService(api_client, signed_in).logout()

    assert not signed_in.is_authenticated
    with pytest.raises(ApiError) as error:
        api_client.get("status", token=token)
    assert error.value.status_code == 401


def test_resource_client_crud(api_client, signed_in):
    directions = ResourceClient(api_client, signed_in, "direction")

    created = directions.create({"name": "ИТ"})
    directions.update(created["id"], {"name": "Информатика"})

    assert directions.get(created["id"])["name"] == "Информатика"
    assert [item["name"] for item in directions.list(search="Инф")] == ["Информатика"]
    assert directions.check_relations(created["id"]) is False

    directions.delete(created["id"])
    with pytest.raises(ApiError) as error:
        directions.get(created["id"])
    assert error.value.status_code == 404


def test_resource_client_list_by_parent(api_client, signed_in):
    equipment = ResourceClient(api_client, signed_in, "equipment").create({"name": "Сервер", "inventory_number": 9})
    settings = ResourceClient(api_client, signed_in, "networksettings")
    settings.create({"equipment_id": equipment["id"], "ip_address": "10.1.1.1", "subnet_mask": "255.0.0.0"})

    assert [item["ip_address"] for item in settings.list_by("by-equipment", equipment["id"])] == ["10.1.1.1"]


def test_load_all_dropdowns(api_client, signed_in):
    ResourceClient(api_client, signed_in, "status").create({"name": "Списано"})

    data = DropdownsService(api_client, signed_in).load_all()

    assert [item.display_text for item in data.statuses] == ["Списано"]
    assert len(data.users) == 3
    assert signed_in.dropdowns is data


def test_connection_failure_is_reported():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    api_client = ApiClient(http_client=httpx.Client(
        base_url="http://inventory.test", transport=httpx.MockTransport(refuse),
    ))

    with pytest.raises(ApiError) as error:
        api_client.get("status")

    assert error.value.status_code == 0
    assert error.value.message.startswith("Ошибка подключения")
