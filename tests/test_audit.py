from inventory_api.models import AuditLog


def test_entity_changes_are_recorded(client, api, admin_token):
    created = api.create("direction", {"name": "ИТ"})
    api.put(f"/api/direction/{created['id']}", {"id": created["id"], "name": "Информатика"})
    api.delete(f"/api/direction/{created['id']}")

    response = client.get(f"/api/audit/history/Direction/{created['id']}", params={"token": admin_token})

    assert response.status_code == 200
    history = response.json()
    assert history["total"] == 3
    assert [log["action"] for log in history["logs"]] == ["DELETE", "UPDATE", "CREATE"]
    update = history["logs"][1]
    assert update["changes"]["name"] == {"old": "ИТ", "new": "Информатика"}
    assert update["username"] == "teacher"


def test_passwords_are_masked_in_history(api, db):
    api.create("users", {
        "username": "sidorov",
        "password": "Pa55word",
        "role": "employee",
        "last_name": "Сидоров",
        "first_name": "Алексей",
    })

    db.expire_all()
    log = db.query(AuditLog).filter(AuditLog.entity_name == "User", AuditLog.action == "CREATE").all()[-1]
    assert log.changes["new_values"]["password"] == "***"
    assert log.changes["new_values"]["username"] == "sidorov"


def test_requests_are_logged_without_token(client, api, db):
    api.get("/api/direction", search="x")

    db.expire_all()
    log = (
        db.query(AuditLog)
        .filter(AuditLog.path == "/api/direction", AuditLog.action.is_(None))
        .order_by(AuditLog.id.desc())
        .first()
    )
    assert log is not None
    assert log.status_code == 200
    assert log.username == "teacher"
    assert "token=***" in log.query_params
    assert api.token not in log.query_params
    assert "search=x" in log.query_params


def test_recent_errors_lists_failed_requests(client, admin_token):
    client.get("/api/direction/404", params={"token": admin_token})

    errors = client.get("/api/audit/errors", params={"token": admin_token}).json()

    assert any(error["path"] == "/api/direction/404" and error["status_code"] == 404 for error in errors)


def test_invalidated_token_is_not_attributed(client, api, db):
    stale = api.token
    client.post("/api/auth/logout", params={"token": stale})

    client.get("/api/direction", params={"token": stale})

    db.expire_all()
    log = (
        db.query(AuditLog)
        .filter(AuditLog.path == "/api/direction", AuditLog.action.is_(None))
        .order_by(AuditLog.id.desc())
        .first()
    )
    assert log.status_code == 401
    assert log.username is None
    assert log.user_id is None
