import logging
from typing import Callable, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from inventory_api.models import (
    Consumable, ConsumableCharacteristic, ConsumableType, Developer, Direction, Equipment,
    EquipmentType, Inventory, Model, Room, Software, Status, User, DropdownItem,
)
from inventory_api.models.types import format_date

logger = logging.getLogger(__name__)


def _initial(value: Optional[str]) -> str:
    return value.strip()[0] if value and value.strip() else ""


def user_display_text(user: User) -> str:
    initials = "".join(f"{_initial(part)}." for part in (user.first_name, user.middle_name) if _initial(part))
    return f"{initials} {user.last_name}".strip()


class DropdownService:
    """Id/label pairs for every pick list the client shows."""

    def __init__(self, db: Session):
        self.db = db

    def _by_name(self, model) -> List[DropdownItem]:
        rows = self.db.query(model.id, model.name).all()
        return self._sorted([DropdownItem(id=row.id, display_text=row.name) for row in rows])

    @staticmethod
    def _sorted(items: List[DropdownItem]) -> List[DropdownItem]:
        return sorted(items, key=lambda item: (item.display_text, item.id))

    def consumable_types(self) -> List[DropdownItem]:
        return self._by_name(ConsumableType)

    def users(self) -> List[DropdownItem]:
        users = self.db.query(User).all()
        return self._sorted([DropdownItem(id=u.id, display_text=user_display_text(u)) for u in users])

    def consumables(self) -> List[DropdownItem]:
        return self._by_name(Consumable)

    def consumable_characteristics(self) -> List[DropdownItem]:
        return self._by_name(ConsumableCharacteristic)

    def equipment(self) -> List[DropdownItem]:
        rows = self.db.query(Equipment.id, Equipment.name, Equipment.inventory_number).all()
        return self._sorted([
            DropdownItem(id=row.id, display_text=f"{row.name} ({row.inventory_number})") for row in rows
        ])

    def rooms(self) -> List[DropdownItem]:
        rows = self.db.query(Room.id, Room.short_name).filter(Room.short_name.isnot(None)).all()
        return self._sorted([
            DropdownItem(id=row.id, display_text=row.short_name) for row in rows if row.short_name.strip()
        ])

    def software(self) -> List[DropdownItem]:
        return self._by_name(Software)

    def inventories(self) -> List[DropdownItem]:
        rows = self.db.query(Inventory.id, Inventory.name, Inventory.start_date).order_by(Inventory.id.desc()).all()
        return [
            DropdownItem(id=row.id, display_text=f"{row.name} ({format_date(row.start_date)})") for row in rows
        ]

    def equipment_types(self) -> List[DropdownItem]:
        return self._by_name(EquipmentType)

    def developers(self) -> List[DropdownItem]:
        return self._by_name(Developer)

    def statuses(self) -> List[DropdownItem]:
        return self._by_name(Status)

    def directions(self) -> List[DropdownItem]:
        return self._by_name(Direction)

    def models(self) -> List[DropdownItem]:
        return self._by_name(Model)


# path -> (service method, failure message)
DROPDOWNS: Dict[str, Tuple[Callable[[DropdownService], List[DropdownItem]], str]] = {
    "consumable-types": (DropdownService.consumable_types, "Ошибка при получении списка типов расходных материалов"),
    "users": (DropdownService.users, "Ошибка при получении списка пользователей"),
    "consumables": (DropdownService.consumables, "Ошибка при получении списка расходных материалов"),
    "consumable-characteristics": (
        DropdownService.consumable_characteristics,
        "Ошибка при получении списка характеристик расходных материалов",
    ),
    "equipment": (DropdownService.equipment, "Ошибка при получении списка оборудования"),
    "rooms": (DropdownService.rooms, "Ошибка при получении списка аудиторий"),
    "software": (DropdownService.software, "Ошибка при получении списка программного обеспечения"),
    "inventories": (DropdownService.inventories, "Ошибка при получении списка инвентаризаций"),
    "equipment-types": (DropdownService.equipment_types, "Ошибка при получении списка типов оборудования"),
    "developers": (DropdownService.developers, "Ошибка при получении списка разработчиков"),
    "statuses": (DropdownService.statuses, "Ошибка при получении списка статусов"),
    "directions": (DropdownService.directions, "Ошибка при получении списка направлений"),
    "models": (DropdownService.models, "Ошибка при получении списка моделей"),
}
