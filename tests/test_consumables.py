import pytest


@pytest.fixture
def consumable_type(api):
    return api.create("consumabletype", {"name": "Картридж", "description": "Для лазерных принтеров"})


@pytest.fixture
def consumable(api, consumable_type):
    return api.create("consumable", {
        "name": "HP 85A",
        "arrival_date": "15.03.2024",
        "quantity": 3,
        "consumable_type_id": consumable_type["id"],
    })


@pytest.fixture
def equipment(api):
    return api.create("equipment", {"name": "Принтер", "inventory_number": 300})


def test_arrival_date_uses_day_month_year(api, consumable):
    assert consumable["arrival_date"] == "15.03.2024"
    assert api.get(f"/api/consumable/{consumable['id']}").json()["arrival_date"] == "15.03.2024"


def test_invalid_arrival_date_is_rejected(api, consumable_type):
    response = api.post("/api/consumable", {
        "name": "HP 85A",
        "arrival_date": "31.02.2024",
        "quantity": 1,
        "consumable_type_id": consumable_type["id"],
    })

    assert response.status_code == 400
    assert response.json()["detail"] == "Дата должна быть в формате ДД.ММ.ГГГГ"


def test_negative_quantity_is_rejected(api, consumable_type):
    response = api.post("/api/consumable", {
        "name": "HP 85A",
        "arrival_date": "15.03.2024",
        "quantity": -1,
        "consumable_type_id": consumable_type["id"],
    })

    assert response.status_code == 400
    assert response.json()["detail"] == "Количество не может быть отрицательным"


def test_attach_within_stock(api, consumable, equipment):
    attached = api.create("consumableequipment", {
        "consumable_id": consumable["id"],
        "equipment_id": equipment["id"],
        "quantity_used": 2,
    })

    assert attached["attached_at"]
    assert api.get(f"/api/consumable/{consumable['id']}").json()["quantity"] == 3


def test_attach_over_stock_is_rejected(api, consumable, equipment):
    response = api.post("/api/consumableequipment", {
        "consumable_id": consumable["id"],
        "equipment_id": equipment["id"],
        "quantity_used": 5,
    })

    assert response.status_code == 400
    assert response.json()["detail"] == "Недостаточно расходного материала. Доступно: 3, требуется: 5"


def test_attach_twice_is_rejected(api, consumable, equipment):
    link = {"consumable_id": consumable["id"], "equipment_id": equipment["id"], "quantity_used": 1}
    api.create("consumableequipment", link)

    response = api.post("/api/consumableequipment", link)

    assert response.status_code == 400
    assert response.json()["detail"] == "Этот расходный материал уже прикреплен к данному оборудованию"


def test_attachments_listed_by_both_parents(api, consumable, equipment):
    attached = api.create("consumableequipment", {"consumable_id": consumable["id"], "equipment_id": equipment["id"]})

    by_equipment = api.get(f"/api/consumableequipment/equipment/{equipment['id']}").json()
    by_consumable = api.get(f"/api/consumableequipment/by-consumable/{consumable['id']}").json()

    assert [item["id"] for item in by_equipment] == [attached["id"]]
    assert [item["id"] for item in by_consumable] == [attached["id"]]


def test_characteristic_values(api, consumable_type, consumable):
    characteristic = api.create("consumablecharacteristic", {
        "consumable_type_id": consumable_type["id"],
        "name": "Цвет",
    })
    duplicate = api.post("/api/consumablecharacteristic", {"consumable_type_id": consumable_type["id"], "name": "Цвет"})
    value = api.create("consumablecharacteristicvalue", {
        "consumable_id": consumable["id"],
        "characteristic_id": characteristic["id"],
        "value": "Черный",
    })

    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == (
        "Характеристика с таким названием уже существует для данного типа расходного материала"
    )
    by_type = api.get(f"/api/consumablecharacteristic/by-consumable-type/{consumable_type['id']}").json()
    assert [item["name"] for item in by_type] == ["Цвет"]
    by_consumable = api.get(f"/api/consumablecharacteristicvalue/by-consumable/{consumable['id']}").json()
    assert [item["id"] for item in by_consumable] == [value["id"]]


def test_consumable_type_in_use_cannot_be_deleted(api, consumable_type, consumable):
    assert api.delete(f"/api/consumabletype/{consumable_type['id']}").status_code == 400


def test_responsible_history_requires_existing_user(api, consumable):
    response = api.post("/api/consumableresponsiblehistory", {
        "consumable_id": consumable["id"],
        "responsible_user_id": 999,
    })

    assert response.status_code == 400
    assert response.json()["detail"] == "Пользователь с ID 999 не найден"
