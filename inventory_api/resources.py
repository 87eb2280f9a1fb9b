"""Declarations of every REST resource served by the generic handler."""
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from inventory_api.core.exceptions import ValidationFailed
from inventory_api.models import (
    Consumable, ConsumableBase, ConsumableCharacteristic, ConsumableCharacteristicBase,
    ConsumableCharacteristicValue, ConsumableCharacteristicValueBase,
    ConsumableEquipment, ConsumableEquipmentBase,
    ConsumableResponsibleHistory, ConsumableResponsibleHistoryBase,
    ConsumableType, ConsumableTypeBase, Developer, DeveloperBase, Direction, DirectionBase,
    Equipment, EquipmentBase, EquipmentResponsibleHistory, EquipmentResponsibleHistoryBase,
    EquipmentRoomHistory, EquipmentRoomHistoryBase, EquipmentSoftware, EquipmentSoftwareBase,
    EquipmentType, EquipmentTypeBase, Inventory, InventoryBase, InventoryCheck, InventoryCheckBase,
    Model, ModelBase, NetworkSettings, NetworkSettingsBase, Room, RoomBase,
    Software, SoftwareBase, Status, StatusBase, User, UserPayload, UserRead,
)
from inventory_api.services import validation
from inventory_api.services.auth import AuthService
from inventory_api.services.resource import (
    ForeignKeyRule, ParentListing, RelationRule, ResourceDefinition, UniqueRule,
)

USER_NOT_FOUND = "Пользователь с ID {id} не найден"
EQUIPMENT_NOT_FOUND = "Оборудование с ID {id} не найдено"
CONSUMABLE_NOT_FOUND = "Расходный материал с ID {id} не найден"


def _user_fk(field: str) -> ForeignKeyRule:
    return ForeignKeyRule(field, User, USER_NOT_FOUND)


def check_consumable_stock(db: Session, payload: Any) -> None:
    consumable = db.query(Consumable).filter(Consumable.id == payload.consumable_id).first()
    if consumable is not None and (consumable.quantity or 0) < payload.quantity_used:
        raise ValidationFailed(
            f"Недостаточно расходного материала. Доступно: {consumable.quantity}, "
            f"требуется: {payload.quantity_used}"
        )


def prepare_user(data: Dict[str, Any], existing: Optional[User]) -> Dict[str, Any]:
    password = data.get("password")
    if password is None or not password.strip():
        if existing is None:
            raise ValidationFailed("Пароль обязателен для заполнения")
        data["password"] = existing.password
    else:
        data["password"] = AuthService().hash_password(password)
    return data


equipment_type = ResourceDefinition(
    route="equipmenttype",
    model=EquipmentType,
    schema=EquipmentTypeBase,
    not_found="Тип оборудования с ID {id} не найден",
    validate=validation.validate_named("типа оборудования"),
    sort_fields=("name",),
    unique=[UniqueRule(("name",), "Наименование типа оборудования должно быть уникальным")],
    relations=[RelationRule(Model, ("equipment_type_id",))],
)

direction = ResourceDefinition(
    route="direction",
    model=Direction,
    schema=DirectionBase,
    not_found="Направление с ID {id} не найдено",
    validate=validation.validate_named("направления"),
    sort_fields=("name",),
    unique=[UniqueRule(("name",), "Направление с таким наименованием уже существует")],
    relations=[RelationRule(Equipment, ("direction_id",))],
)

status = ResourceDefinition(
    route="status",
    model=Status,
    schema=StatusBase,
    not_found="Статус с ID {id} не найден",
    validate=validation.validate_named("статуса"),
    sort_fields=("name",),
    unique=[UniqueRule(("name",), "Статус с таким наименованием уже существует")],
    relations=[RelationRule(Equipment, ("status_id",))],
)

developer = ResourceDefinition(
    route="developer",
    model=Developer,
    schema=DeveloperBase,
    not_found="Разработчик с ID {id} не найден",
    validate=validation.validate_developer,
    sort_fields=("name",),
    unique=[UniqueRule(("name",), "Разработчик с таким наименованием уже существует", case_insensitive=True)],
    relations=[RelationRule(Software, ("developer_id",))],
)

consumable_type = ResourceDefinition(
    route="consumabletype",
    model=ConsumableType,
    schema=ConsumableTypeBase,
    not_found="Тип расходников с ID {id} не найден",
    validate=validation.validate_consumable_type,
    sort_fields=("name",),
    unique=[UniqueRule(("name",), "Наименование типа расходников должно быть уникальным")],
    relations=[
        RelationRule(Consumable, ("consumable_type_id",)),
        RelationRule(ConsumableCharacteristic, ("consumable_type_id",)),
    ],
)

room = ResourceDefinition(
    route="room",
    model=Room,
    schema=RoomBase,
    not_found="Аудитория с ID {id} не найдена",
    validate=validation.validate_room,
    sort_fields=("name", "short_name"),
    foreign_keys=[_user_fk("responsible_user_id"), _user_fk("temp_responsible_user_id")],
    unique=[UniqueRule(("name",), "Аудитория с таким наименованием уже существует")],
    relations=[
        RelationRule(Equipment, ("room_id",)),
        RelationRule(EquipmentRoomHistory, ("room_id",)),
    ],
)

model = ResourceDefinition(
    route="model",
    model=Model,
    schema=ModelBase,
    not_found="Модель с ID {id} не найдена",
    validate=validation.validate_model,
    sort_fields=("name", "equipment_type_id"),
    foreign_keys=[ForeignKeyRule("equipment_type_id", EquipmentType, "Указанный тип оборудования не существует")],
    unique=[UniqueRule(("name",), "Модель с таким наименованием уже существует")],
    relations=[RelationRule(Equipment, ("model_id",))],
)

software = ResourceDefinition(
    route="software",
    model=Software,
    schema=SoftwareBase,
    not_found="Программное обеспечение с ID {id} не найдено",
    validate=validation.validate_software,
    sort_fields=("name", "developer_id", "version"),
    foreign_keys=[ForeignKeyRule("developer_id", Developer, "Разработчик с ID {id} не найден")],
    relations=[RelationRule(EquipmentSoftware, ("software_id",))],
)

users = ResourceDefinition(
    route="users",
    model=User,
    schema=UserPayload,
    read_schema=UserRead,
    not_found=USER_NOT_FOUND,
    validate=validation.validate_user,
    validate_create=validation.validate_new_user,
    search_fields=("last_name", "first_name", "username", "email"),
    sort_fields=("username", "last_name", "first_name", "role"),
    unique=[
        UniqueRule(("username",), "Пользователь с таким логином уже существует"),
        UniqueRule(("email",), "Пользователь с таким email уже существует", skip_empty=True),
    ],
    relations=[
        RelationRule(Room, ("responsible_user_id", "temp_responsible_user_id")),
        RelationRule(InventoryCheck, ("checked_by_user_id",)),
        RelationRule(Inventory, ("created_by_user_id",)),
        RelationRule(EquipmentRoomHistory, ("moved_by_user_id",)),
        RelationRule(EquipmentResponsibleHistory, ("responsible_user_id", "assigned_by_user_id")),
        RelationRule(Equipment, ("responsible_user_id", "temp_responsible_user_id")),
        RelationRule(ConsumableResponsibleHistory, ("responsible_user_id", "assigned_by_user_id")),
        RelationRule(ConsumableEquipment, ("attached_by_user_id",)),
        RelationRule(Consumable, ("responsible_user_id", "temp_responsible_user_id")),
    ],
    filters={"roleFilter": "role"},
    prepare=prepare_user,
    delete_blocked="Невозможно удалить пользователя, так как он связан с другими записями в системе",
)

equipment = ResourceDefinition(
    route="equipment",
    model=Equipment,
    schema=EquipmentBase,
    not_found=EQUIPMENT_NOT_FOUND,
    validate=validation.validate_equipment,
    search_fields=("name",),
    sort_fields=("name", "inventory_number", "cost"),
    foreign_keys=[
        ForeignKeyRule("room_id", Room, "Аудитория с ID {id} не существует"),
        _user_fk("responsible_user_id"),
        _user_fk("temp_responsible_user_id"),
        ForeignKeyRule("direction_id", Direction, "Направление с ID {id} не найдено"),
        ForeignKeyRule("status_id", Status, "Статус с ID {id} не найден"),
        ForeignKeyRule("model_id", Model, "Модель с ID {id} не найдена"),
    ],
    unique=[UniqueRule(("inventory_number",), "Инвентарный номер должен быть уникальным")],
    relations=[
        RelationRule(EquipmentSoftware, ("equipment_id",)),
        RelationRule(ConsumableEquipment, ("equipment_id",)),
        RelationRule(EquipmentResponsibleHistory, ("equipment_id",)),
        RelationRule(EquipmentRoomHistory, ("equipment_id",)),
        RelationRule(InventoryCheck, ("equipment_id",)),
        RelationRule(NetworkSettings, ("equipment_id",)),
    ],
)

network_settings = ResourceDefinition(
    route="networksettings",
    model=NetworkSettings,
    schema=NetworkSettingsBase,
    not_found="Сетевая настройка с ID {id} не найдена",
    validate=validation.validate_network_settings,
    search_fields=("ip_address",),
    sort_fields=("ip_address", "mac_address", "equipment_id"),
    foreign_keys=[ForeignKeyRule("equipment_id", Equipment, EQUIPMENT_NOT_FOUND)],
    unique=[UniqueRule(("ip_address",), "IP адрес должен быть уникальным")],
    parents=[ParentListing("by-equipment", "equipment_id", Equipment, EQUIPMENT_NOT_FOUND)],
)

equipment_software = ResourceDefinition(
    route="equipmentsoftware",
    model=EquipmentSoftware,
    schema=EquipmentSoftwareBase,
    not_found="Запись о прикреплении ПО с ID {id} не найдена",
    validate=validation.validate_equipment_software,
    search_fields=(),
    sort_fields=("equipment_id", "software_id"),
    foreign_keys=[
        ForeignKeyRule("equipment_id", Equipment, "Оборудование с ID {id} не существует"),
        ForeignKeyRule("software_id", Software, "Программное обеспечение с ID {id} не существует"),
    ],
    unique=[UniqueRule(
        ("equipment_id", "software_id"),
        "Данное программное обеспечение уже прикреплено к этому оборудованию",
    )],
    parents=[ParentListing("by-equipment", "equipment_id", Equipment, EQUIPMENT_NOT_FOUND)],
)

equipment_room_history = ResourceDefinition(
    route="equipmentroomhistory",
    model=EquipmentRoomHistory,
    schema=EquipmentRoomHistoryBase,
    not_found="Запись истории перемещения с ID {id} не найдена",
    validate=validation.validate_equipment_room_history,
    search_fields=("comment",),
    sort_fields=("moved_at", "equipment_id", "room_id"),
    foreign_keys=[
        ForeignKeyRule("equipment_id", Equipment, "Оборудование с ID {id} не существует"),
        ForeignKeyRule("room_id", Room, "Аудитория с ID {id} не существует"),
        ForeignKeyRule("moved_by_user_id", User, "Пользователь с ID {id} не существует"),
    ],
    timestamps=("moved_at",),
    parents=[ParentListing("by-equipment", "equipment_id", Equipment, EQUIPMENT_NOT_FOUND)],
)

equipment_responsible_history = ResourceDefinition(
    route="equipmentresponsiblehistory",
    model=EquipmentResponsibleHistory,
    schema=EquipmentResponsibleHistoryBase,
    not_found="Запись истории с ID {id} не найдена",
    validate=validation.validate_equipment_responsible_history,
    search_fields=("comment",),
    sort_fields=("assigned_at", "equipment_id", "responsible_user_id"),
    foreign_keys=[
        ForeignKeyRule("equipment_id", Equipment, EQUIPMENT_NOT_FOUND),
        _user_fk("responsible_user_id"),
        ForeignKeyRule(
            "assigned_by_user_id", User, "Пользователь, назначающий ответственного, с ID {id} не найден"
        ),
    ],
    timestamps=("assigned_at",),
    parents=[ParentListing("by-equipment", "equipment_id", Equipment, EQUIPMENT_NOT_FOUND)],
)

consumable = ResourceDefinition(
    route="consumable",
    model=Consumable,
    schema=ConsumableBase,
    not_found=CONSUMABLE_NOT_FOUND,
    validate=validation.validate_consumable,
    sort_fields=("name", "arrival_date", "quantity", "consumable_type_id"),
    foreign_keys=[
        ForeignKeyRule("consumable_type_id", ConsumableType, "Тип расходного материала с ID {id} не существует"),
        _user_fk("responsible_user_id"),
        _user_fk("temp_responsible_user_id"),
    ],
    relations=[
        RelationRule(ConsumableCharacteristicValue, ("consumable_id",)),
        RelationRule(ConsumableEquipment, ("consumable_id",)),
        RelationRule(ConsumableResponsibleHistory, ("consumable_id",)),
    ],
)

consumable_characteristic = ResourceDefinition(
    route="consumablecharacteristic",
    model=ConsumableCharacteristic,
    schema=ConsumableCharacteristicBase,
    not_found="Характеристика с ID {id} не найдена",
    validate=validation.validate_consumable_characteristic,
    sort_fields=("name", "consumable_type_id"),
    foreign_keys=[
        ForeignKeyRule("consumable_type_id", ConsumableType, "Тип расходного материала с ID {id} не существует"),
    ],
    unique=[UniqueRule(
        ("consumable_type_id", "name"),
        "Характеристика с таким названием уже существует для данного типа расходного материала",
    )],
    relations=[RelationRule(ConsumableCharacteristicValue, ("characteristic_id",))],
    parents=[ParentListing(
        "by-consumable-type", "consumable_type_id", ConsumableType, "Тип расходников с ID {id} не найден"
    )],
)

consumable_characteristic_value = ResourceDefinition(
    route="consumablecharacteristicvalue",
    model=ConsumableCharacteristicValue,
    schema=ConsumableCharacteristicValueBase,
    not_found="Значение характеристики с ID {id} не найдено",
    validate=validation.validate_consumable_characteristic_value,
    search_fields=("value",),
    sort_fields=("consumable_id", "characteristic_id", "value"),
    foreign_keys=[
        ForeignKeyRule("consumable_id", Consumable, CONSUMABLE_NOT_FOUND),
        ForeignKeyRule("characteristic_id", ConsumableCharacteristic, "Характеристика с ID {id} не найдена"),
    ],
    unique=[UniqueRule(
        ("consumable_id", "characteristic_id"),
        "Характеристика уже прикреплена к данному расходному материалу",
    )],
    parents=[ParentListing("by-consumable", "consumable_id", Consumable, CONSUMABLE_NOT_FOUND)],
)

consumable_equipment = ResourceDefinition(
    route="consumableequipment",
    model=ConsumableEquipment,
    schema=ConsumableEquipmentBase,
    not_found="Прикрепление расходника к оборудованию с ID {id} не найдено",
    validate=validation.validate_consumable_equipment,
    search_fields=(),
    sort_fields=("attached_at", "consumable_id", "equipment_id", "quantity_used"),
    foreign_keys=[
        ForeignKeyRule("consumable_id", Consumable, CONSUMABLE_NOT_FOUND),
        ForeignKeyRule("equipment_id", Equipment, EQUIPMENT_NOT_FOUND),
        _user_fk("attached_by_user_id"),
    ],
    unique=[UniqueRule(
        ("consumable_id", "equipment_id"),
        "Этот расходный материал уже прикреплен к данному оборудованию",
    )],
    timestamps=("attached_at",),
    checks=[check_consumable_stock],
    parents=[
        ParentListing("equipment", "equipment_id", Equipment, EQUIPMENT_NOT_FOUND),
        ParentListing("by-consumable", "consumable_id", Consumable, CONSUMABLE_NOT_FOUND),
    ],
)

consumable_responsible_history = ResourceDefinition(
    route="consumableresponsiblehistory",
    model=ConsumableResponsibleHistory,
    schema=ConsumableResponsibleHistoryBase,
    not_found="Запись истории с ID {id} не найдена",
    validate=validation.validate_consumable_responsible_history,
    search_fields=("comment",),
    sort_fields=("assigned_at", "consumable_id", "responsible_user_id"),
    foreign_keys=[
        ForeignKeyRule("consumable_id", Consumable, CONSUMABLE_NOT_FOUND),
        _user_fk("responsible_user_id"),
        ForeignKeyRule(
            "assigned_by_user_id", User, "Пользователь, назначающий ответственного, с ID {id} не найден"
        ),
    ],
    timestamps=("assigned_at",),
    parents=[ParentListing("by-consumable", "consumable_id", Consumable, CONSUMABLE_NOT_FOUND)],
)

inventory = ResourceDefinition(
    route="inventory",
    model=Inventory,
    schema=InventoryBase,
    not_found="Инвентаризация с ID {id} не найдена",
    validate=validation.validate_inventory,
    sort_fields=("name", "start_date", "end_date"),
    foreign_keys=[_user_fk("created_by_user_id")],
    relations=[RelationRule(InventoryCheck, ("inventory_id",))],
)

inventory_check = ResourceDefinition(
    route="inventorycheck",
    model=InventoryCheck,
    schema=InventoryCheckBase,
    not_found="Проверка инвентаризации с ID {id} не найдена",
    validate=validation.validate_inventory_check,
    search_fields=("comment",),
    sort_fields=("checked_at", "inventory_id", "equipment_id"),
    foreign_keys=[
        ForeignKeyRule("inventory_id", Inventory, "Инвентаризация с ID {id} не найдена"),
        ForeignKeyRule("equipment_id", Equipment, EQUIPMENT_NOT_FOUND),
        _user_fk("checked_by_user_id"),
    ],
    unique=[UniqueRule(
        ("inventory_id", "equipment_id"),
        "Данное оборудование уже прикреплено к этой инвентаризации",
    )],
    timestamps=("checked_at",),
    parents=[ParentListing("by-inventory", "inventory_id", Inventory, "Инвентаризация с ID {id} не найдена")],
)

RESOURCES = [
    equipment_type, direction, status, developer, consumable_type, room, model, software, users,
    equipment, network_settings, equipment_software, equipment_room_history, equipment_responsible_history,
    consumable, consumable_characteristic, consumable_characteristic_value, consumable_equipment,
    consumable_responsible_history, inventory, inventory_check,
]

RESOURCES_BY_ROUTE = {definition.route: definition for definition in RESOURCES}
