from .reference import (
    EquipmentType, EquipmentTypeBase, Direction, DirectionBase, Status, StatusBase,
    Developer, DeveloperBase, ConsumableType, ConsumableTypeBase, Room, RoomBase,
)
from .equipment import (
    Model, ModelBase, Software, SoftwareBase, Equipment, EquipmentBase,
    NetworkSettings, NetworkSettingsBase, EquipmentSoftware, EquipmentSoftwareBase,
    EquipmentRoomHistory, EquipmentRoomHistoryBase,
    EquipmentResponsibleHistory, EquipmentResponsibleHistoryBase,
)
from .consumable import (
    Consumable, ConsumableBase, ConsumableCharacteristic, ConsumableCharacteristicBase,
    ConsumableCharacteristicValue, ConsumableCharacteristicValueBase,
    ConsumableEquipment, ConsumableEquipmentBase,
    ConsumableResponsibleHistory, ConsumableResponsibleHistoryBase,
)
from .inventory import Inventory, InventoryBase, InventoryCheck, InventoryCheckBase
from .user import User, UserBase, UserPayload, UserRead
from .audit_log import AuditLog
from .schemas import DropdownItem, LoginRequest, LoginResponse

__all__ = [
    "EquipmentType", "EquipmentTypeBase", "Direction", "DirectionBase", "Status", "StatusBase",
    "Developer", "DeveloperBase", "ConsumableType", "ConsumableTypeBase", "Room", "RoomBase",
    "Model", "ModelBase", "Software", "SoftwareBase", "Equipment", "EquipmentBase",
    "NetworkSettings", "NetworkSettingsBase", "EquipmentSoftware", "EquipmentSoftwareBase",
    "EquipmentRoomHistory", "EquipmentRoomHistoryBase",
    "EquipmentResponsibleHistory", "EquipmentResponsibleHistoryBase",
    "Consumable", "ConsumableBase", "ConsumableCharacteristic", "ConsumableCharacteristicBase",
    "ConsumableCharacteristicValue", "ConsumableCharacteristicValueBase",
    "ConsumableEquipment", "ConsumableEquipmentBase",
    "ConsumableResponsibleHistory", "ConsumableResponsibleHistoryBase",
    "Inventory", "InventoryBase", "InventoryCheck", "InventoryCheckBase",
    "User", "UserBase", "UserPayload", "UserRead",
    "AuditLog",
    "DropdownItem", "LoginRequest", "LoginResponse",
]
