import os
import sys
from typing import Dict

from sqlmodel import Session

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from inventory_api.core.db import engine, create_db_and_tables  # noqa: E402
from inventory_api.models import (  # noqa: E402
    ConsumableType, Developer, Direction, EquipmentType, Status, User,
)
from inventory_api.services.auth import AuthService, UserRole  # noqa: E402


EQUIPMENT_TYPES = ["Компьютер", "Ноутбук", "Монитор", "Принтер", "Проектор", "Сетевое оборудование"]

DIRECTIONS = ["Информационные технологии", "Администрация", "Учебный процесс"]

STATUSES = ["В эксплуатации", "На складе", "В ремонте", "Списано"]

DEVELOPERS = ["Microsoft", "JetBrains", "Adobe", "1С", "Mozilla Foundation"]

CONSUMABLE_TYPES = ["Картридж", "Кабель", "Клавиатура", "Мышь"]


def _ensure_named(session: Session, model, names) -> int:
    existing = {row.name for row in session.query(model.name).all()}
    created = 0
    for name in names:
        if name not in existing:
            session.add(model(name=name))
            created += 1
    return created


def seed(session: Session, admin_username: str = "admin", admin_password: str = None) -> Dict[str, int]:
    """Insert reference data and a first administrator; existing rows are kept."""
    counts = {
        "equipment_types": _ensure_named(session, EquipmentType, EQUIPMENT_TYPES),
        "directions": _ensure_named(session, Direction, DIRECTIONS),
        "statuses": _ensure_named(session, Status, STATUSES),
        "developers": _ensure_named(session, Developer, DEVELOPERS),
        "consumable_types": _ensure_named(session, ConsumableType, CONSUMABLE_TYPES),
        "users": 0,
    }

    if admin_password and not session.query(User).filter(User.username == admin_username).first():
        session.add(User(
            username=admin_username,
            password=AuthService().hash_password(admin_password),
            role=UserRole.ADMINISTRATOR,
            last_name="Администратор",
            first_name="Системный",
        ))
        counts["users"] = 1

    session.commit()
    return counts


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed reference data and the first administrator")
    parser.add_argument("--admin-username", default=os.getenv("SEED_ADMIN_USERNAME", "admin"))
    parser.add_argument(
        "--admin-password",
        default=os.getenv("SEED_ADMIN_PASSWORD"),
        help="Password of the first administrator (default: SEED_ADMIN_PASSWORD)",
    )
    args = parser.parse_args()

    create_db_and_tables()
    with Session(engine) as session:
        counts = seed(session, args.admin_username, args.admin_password)
    print("Seeded: " + ", ".join(f"{name}={count}" for name, count in counts.items()))
