from inventory_api.core.db import SessionLocal
from inventory_api.models import Direction
from inventory_api.services.resource import ResourceService


def test_create_returns_item_and_location(api):
    response = api.post("/api/equipmenttype", {"name": "Принтер"})

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Принтер"
    assert body["id"] > 0
    assert response.headers["location"].endswith(f"/api/equipmenttype/{body['id']}")


def test_get_missing_item_returns_404(api):
    response = api.get("/api/equipmenttype/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Тип оборудования с ID 999 не найден"


def test_blank_name_is_rejected(api):
    response = api.post("/api/status", {"name": "   "})

    assert response.status_code == 400
    assert response.json()["detail"] == "Наименование статуса обязательно для заполнения"


def test_name_length_is_limited(api):
    response = api.post("/api/direction", {"name": "x" * 101})

    assert response.status_code == 400
    assert response.json()["detail"] == "Наименование не может превышать 100 символов"


def test_duplicate_name_is_rejected(api):
    api.create("status", {"name": "В ремонте"})

    response = api.post("/api/status", {"name": "В ремонте"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Статус с таким наименованием уже существует"


def test_developer_uniqueness_ignores_case(api):
    api.create("developer", {"name": "Microsoft"})

    response = api.post("/api/developer", {"name": "MICROSOFT"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Разработчик с таким наименованием уже существует"


def test_update_replaces_fields(api):
    created = api.create("direction", {"name": "ИТ"})

    response = api.put(f"/api/direction/{created['id']}", {"id": created["id"], "name": "Администрация"})

    assert response.status_code == 204
    assert api.get(f"/api/direction/{created['id']}").json()["name"] == "Администрация"


def test_update_keeps_own_name_unique(api):
    created = api.create("direction", {"name": "ИТ"})

    response = api.put(f"/api/direction/{created['id']}", {"id": created["id"], "name": "ИТ"})

    assert response.status_code == 204


def test_update_with_mismatched_id_is_rejected(api):
    created = api.create("direction", {"name": "ИТ"})

    response = api.put(f"/api/direction/{created['id']}", {"id": created["id"] + 1, "name": "Другое"})

    assert response.status_code == 400
    assert response.json()["detail"] == "ID в пути и в теле запроса не совпадают"


def test_update_missing_item_returns_404(api):
    response = api.put("/api/direction/42", {"id": 42, "name": "ИТ"})

    assert response.status_code == 404


def test_delete_removes_item(api):
    created = api.create("direction", {"name": "ИТ"})

    assert api.delete(f"/api/direction/{created['id']}").status_code == 204
    assert api.get(f"/api/direction/{created['id']}").status_code == 404


def test_delete_missing_item_returns_404(api):
    assert api.delete("/api/direction/7").status_code == 404


def test_delete_is_refused_while_related_rows_exist(api):
    equipment_type = api.create("equipmenttype", {"name": "Монитор"})
    api.create("model", {"name": "Dell P2419H", "equipment_type_id": equipment_type["id"]})

    assert api.get(f"/api/equipmenttype/{equipment_type['id']}/check-relations").json() is True
    response = api.delete(f"/api/equipmenttype/{equipment_type['id']}")

    assert response.status_code == 400
    assert response.json()["detail"] == "Невозможно удалить запись, так как она связана с другими записями в системе"


def test_check_relations_false_without_dependents(api):
    equipment_type = api.create("equipmenttype", {"name": "Монитор"})

    assert api.get(f"/api/equipmenttype/{equipment_type['id']}/check-relations").json() is False


def test_check_relations_of_missing_item_returns_404(api):
    assert api.get("/api/equipmenttype/5/check-relations").status_code == 404


def test_unknown_foreign_key_is_rejected(api):
    response = api.post("/api/model", {"name": "Dell P2419H", "equipment_type_id": 77})

    assert response.status_code == 400
    assert response.json()["detail"] == "Указанный тип оборудования не существует"


def test_list_sorts_by_field_in_both_directions(api):
    for name in ("Бета", "Альфа", "Гамма"):
        api.create("direction", {"name": name})

    ascending = [item["name"] for item in api.get("/api/direction", sortBy="name").json()]
    descending = [item["name"] for item in api.get("/api/direction", sortBy="Name", sortOrder="desc").json()]

    assert ascending == ["Альфа", "Бета", "Гамма"]
    assert descending == ["Гамма", "Бета", "Альфа"]


def test_list_without_sort_is_ordered_by_id(api):
    for name in ("Бета", "Альфа"):
        api.create("direction", {"name": name})

    assert [item["name"] for item in api.get("/api/direction").json()] == ["Бета", "Альфа"]


def test_list_search_is_case_sensitive(api):
    api.create("direction", {"name": "Информатика"})
    api.create("direction", {"name": "Физика"})

    assert [item["name"] for item in api.get("/api/direction", search="ика").json()] == ["Информатика", "Физика"]
    assert [item["name"] for item in api.get("/api/direction", search="Физ").json()] == ["Физика"]
    assert api.get("/api/direction", search="физ").json() == []


def test_search_treats_wildcards_literally(api):
    api.create("direction", {"name": "100% готово"})
    api.create("direction", {"name": "1000 готово"})

    assert [item["name"] for item in api.get("/api/direction", search="0%").json()] == ["100% готово"]


def test_malformed_body_is_a_bad_request(api):
    response = api.post("/api/direction", {"name": ["not", "a", "string"]})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Некорректные данные запроса")


def test_update_into_another_rows_name_is_rejected(api):
    api.create("direction", {"name": "A"})
    second = api.create("direction", {"name": "B"})

    response = api.put(f"/api/direction/{second['id']}", {"id": second["id"], "name": "A"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Направление с таким наименованием уже существует"
    assert api.get(f"/api/direction/{second['id']}").json()["name"] == "B"


def test_update_into_another_rows_pair_is_rejected(api):
    developer = api.create("developer", {"name": "JetBrains"})
    first = api.create("software", {"name": "PyCharm", "developer_id": developer["id"]})
    second = api.create("software", {"name": "DataGrip", "developer_id": developer["id"]})
    equipment = api.create("equipment", {"name": "Сервер", "inventory_number": 1})
    api.create("equipmentsoftware", {"equipment_id": equipment["id"], "software_id": first["id"]})
    link = api.create("equipmentsoftware", {"equipment_id": equipment["id"], "software_id": second["id"]})

    response = api.put(f"/api/equipmentsoftware/{link['id']}", {
        "id": link["id"],
        "equipment_id": equipment["id"],
        "software_id": first["id"],
    })

    assert response.status_code == 400
    assert response.json()["detail"] == "Данное программное обеспечение уже прикреплено к этому оборудованию"


def test_row_deleted_during_update_is_reported_missing(api, monkeypatch):
    created = api.create("direction", {"name": "ИТ"})
    validate = ResourceService.validate

    def validate_then_delete(self, payload, existing_id=None):
        validate(self, payload, existing_id)
        with SessionLocal() as other:
            other.query(Direction).filter(Direction.id == created["id"]).delete()
            other.commit()

    monkeypatch.setattr(ResourceService, "validate", validate_then_delete)

    response = api.put(f"/api/direction/{created['id']}", {"id": created["id"], "name": "Информатика"})

    assert response.status_code == 404
    assert response.json()["detail"] == f"Направление с ID {created['id']} не найдено"


def test_rejected_foreign_key_writes_nothing(api):
    response = api.post("/api/model", {"name": "Dell P2419H", "equipment_type_id": 77})

    assert response.status_code == 400
    assert api.get("/api/model").json() == []


def test_unknown_foreign_key_on_update_is_rejected(api):
    equipment_type = api.create("equipmenttype", {"name": "Монитор"})
    model = api.create("model", {"name": "Dell P2419H", "equipment_type_id": equipment_type["id"]})

    response = api.put(f"/api/model/{model['id']}", {
        "id": model["id"],
        "name": "Dell P2419H",
        "equipment_type_id": 77,
    })

    assert response.status_code == 400
    assert response.json()["detail"] == "Указанный тип оборудования не существует"
    assert api.get(f"/api/model/{model['id']}").json()["equipment_type_id"] == equipment_type["id"]


def test_room_search_uses_name_only(api):
    api.create("room", {"name": "Лаборатория", "short_name": "Лаб-1"})

    assert [room["name"] for room in api.get("/api/room", search="Лаборатория").json()] == ["Лаборатория"]
    assert api.get("/api/room", search="Лаб-1").json() == []
