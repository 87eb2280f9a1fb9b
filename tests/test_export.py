import io

from openpyxl import load_workbook


def test_export_contains_filtered_rows_with_names(api):
    room = api.create("room", {"name": "Аудитория 101", "short_name": "101"})
    api.create("equipment", {"name": "Ноутбук Lenovo", "inventory_number": 1, "room_id": room["id"], "cost": 1200})
    api.create("equipment", {"name": "Монитор", "inventory_number": 2})

    response = api.get("/api/equipment/export", search="Ноутбук")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert "attachment; filename=equipment_" in response.headers["content-disposition"]

    sheet = load_workbook(io.BytesIO(response.content))["Оборудование"]
    rows = list(sheet.iter_rows(values_only=True))
    assert rows[0][:4] == ("ID", "Наименование", "Инвентарный номер", "Аудитория")
    assert len(rows) == 2
    assert rows[1][1:4] == ("Ноутбук Lenovo", 1, "Аудитория 101")
    assert len(sheet.tables) == 1


def test_export_of_empty_list_has_only_headers(api):
    response = api.get("/api/equipment/export")

    sheet = load_workbook(io.BytesIO(response.content))["Оборудование"]
    assert sheet.max_row == 1
    assert len(sheet.tables) == 0


def test_export_requires_a_token(client):
    assert client.get("/api/equipment/export").status_code == 401
