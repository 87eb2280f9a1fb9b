import pytest


@pytest.fixture
def equipment(api):
    return api.create("equipment", {"name": "Коммутатор", "inventory_number": 10})


def settings_body(equipment_id, **fields):
    body = {"equipment_id": equipment_id, "ip_address": "10.0.0.1", "subnet_mask": "255.255.255.0"}
    body.update(fields)
    return body


def test_valid_settings_are_saved(api, equipment):
    created = api.create("networksettings", settings_body(
        equipment["id"], default_gateway="10.0.0.254", dns_primary="8.8.8.8", mac_address="00-1A-2B-3C-4D-5E",
    ))

    assert created["mac_address"] == "00-1A-2B-3C-4D-5E"
    assert api.get(f"/api/networksettings/by-equipment/{equipment['id']}").json()[0]["id"] == created["id"]


@pytest.mark.parametrize("field, value, message", [
    ("ip_address", "256.1.1.1", "Неверный формат IP адреса. Используйте формат: XXX.XXX.XXX.XXX, где XXX от 0 до 255"),
    ("ip_address", "", "Неверный формат IP адреса. Используйте формат: XXX.XXX.XXX.XXX, где XXX от 0 до 255"),
    ("subnet_mask", "255.255.0", "Неверный формат маски подсети. Используйте формат: XXX.XXX.XXX.XXX, где XXX от 0 до 255"),
    ("dns_secondary", "1.1.1.1.1", "Неверный формат вторичного DNS. Используйте формат: XXX.XXX.XXX.XXX, где XXX от 0 до 255"),
    ("mac_address", "00:1A:2B:3C:4D", "Неверный формат MAC адреса. Используйте формат: XX:XX:XX:XX:XX:XX или XX-XX-XX-XX-XX-XX"),
])
def test_invalid_addresses_are_rejected(api, equipment, field, value, message):
    response = api.post("/api/networksettings", settings_body(equipment["id"], **{field: value}))

    assert response.status_code == 400
    assert response.json()["detail"] == message


def test_ip_address_is_unique(api, equipment):
    api.create("networksettings", settings_body(equipment["id"]))

    response = api.post("/api/networksettings", settings_body(equipment["id"]))

    assert response.status_code == 400
    assert response.json()["detail"] == "IP адрес должен быть уникальным"


def test_search_by_ip_address(api, equipment):
    api.create("networksettings", settings_body(equipment["id"], ip_address="10.0.0.1"))
    api.create("networksettings", settings_body(equipment["id"], ip_address="192.168.0.1"))

    found = api.get("/api/networksettings", search="192.").json()

    assert [item["ip_address"] for item in found] == ["192.168.0.1"]
