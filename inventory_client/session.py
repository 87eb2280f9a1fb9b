from dataclasses import dataclass, field, fields
from typing import List, Optional

WRITE_ROLES = ("teacher", "administrator")


@dataclass
class DropdownItem:
    id: int
    display_text: str


@dataclass
class DropdownData:
    consumable_types: List[DropdownItem] = field(default_factory=list)
    users: List[DropdownItem] = field(default_factory=list)
    consumables: List[DropdownItem] = field(default_factory=list)
    consumable_characteristics: List[DropdownItem] = field(default_factory=list)
    equipment: List[DropdownItem] = field(default_factory=list)
    rooms: List[DropdownItem] = field(default_factory=list)
    software: List[DropdownItem] = field(default_factory=list)
    inventories: List[DropdownItem] = field(default_factory=list)
    equipment_types: List[DropdownItem] = field(default_factory=list)
    developers: List[DropdownItem] = field(default_factory=list)
    statuses: List[DropdownItem] = field(default_factory=list)
    directions: List[DropdownItem] = field(default_factory=list)
    models: List[DropdownItem] = field(default_factory=list)

    @classmethod
    def endpoints(cls) -> List[str]:
        """Server path of every list, in field order."""
        return [f.name.replace("_", "-") for f in fields(cls)]


@dataclass
class UserSession:
    """State of the signed-in user, passed explicitly to every client service."""
    token: Optional[str] = None
    role: Optional[str] = None
    full_name: Optional[str] = None
    dropdowns: DropdownData = field(default_factory=DropdownData)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def can_write(self) -> bool:
        return self.is_authenticated and self.role in WRITE_ROLES

    def clear(self) -> None:
        self.token = None
        self.role = None
        self.full_name = None
        self.dropdowns = DropdownData()
