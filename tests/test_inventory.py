def test_inventory_dates_round_trip(api):
    created = api.create("inventory", {"name": "Годовая", "start_date": "01.12.2024", "end_date": "20.12.2024"})

    assert created["start_date"] == "01.12.2024"
    assert created["end_date"] == "20.12.2024"


def test_start_after_end_is_rejected(api):
    response = api.post("/api/inventory", {"name": "Годовая", "start_date": "21.12.2024", "end_date": "20.12.2024"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Дата начала не может быть позже даты окончания"


def test_equipment_checked_once_per_inventory(api):
    inventory = api.create("inventory", {"name": "Годовая", "start_date": "01.12.2024", "end_date": "20.12.2024"})
    equipment = api.create("equipment", {"name": "Ноутбук", "inventory_number": 77})
    check = {"inventory_id": inventory["id"], "equipment_id": equipment["id"], "comment": "На месте"}

    first = api.create("inventorycheck", check)
    second = api.post("/api/inventorycheck", check)

    assert first["checked_at"]
    assert second.status_code == 400
    assert second.json()["detail"] == "Данное оборудование уже прикреплено к этой инвентаризации"
    listed = api.get(f"/api/inventorycheck/by-inventory/{inventory['id']}").json()
    assert [item["id"] for item in listed] == [first["id"]]
    assert api.delete(f"/api/inventory/{inventory['id']}").status_code == 400
