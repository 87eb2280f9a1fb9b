from typing import Optional

from sqlmodel import Field, SQLModel, String, Text, DateTime, LargeBinary, Numeric, UniqueConstraint

from inventory_api.models.types import Money, Photo, UtcDateTime


class ModelBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(200), nullable=False)
    equipment_type_id: Optional[int] = Field(default=None, index=True, nullable=False)


class Model(ModelBase, table=True):
    __tablename__ = "models"
    __table_args__ = (UniqueConstraint("name", name="uq_models_name"),)

    id: Optional[int] = Field(default=None, primary_key=True)


class SoftwareBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(200), nullable=False)
    developer_id: Optional[int] = Field(default=None, index=True, nullable=False)
    version: Optional[str] = Field(default=None, sa_type=String(50))


class Software(SoftwareBase, table=True):
    __tablename__ = "software"

    id: Optional[int] = Field(default=None, primary_key=True)


class EquipmentBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(200), nullable=False)
    photo: Optional[Photo] = Field(default=None, sa_type=LargeBinary)
    inventory_number: Optional[int] = Field(default=None, nullable=False)
    room_id: Optional[int] = Field(default=None, index=True)
    responsible_user_id: Optional[int] = Field(default=None, index=True)
    temp_responsible_user_id: Optional[int] = Field(default=None, index=True)
    cost: Optional[Money] = Field(default=None, sa_type=Numeric(10, 2))
    direction_id: Optional[int] = Field(default=None, index=True)
    status_id: Optional[int] = Field(default=None, index=True)
    model_id: Optional[int] = Field(default=None, index=True)
    comment: Optional[str] = Field(default=None, sa_type=Text)


class Equipment(EquipmentBase, table=True):
    __tablename__ = "equipment"
    __table_args__ = (UniqueConstraint("inventory_number", name="uq_equipment_inventory_number"),)

    id: Optional[int] = Field(default=None, primary_key=True)


class NetworkSettingsBase(SQLModel):
    id: Optional[int] = None
    equipment_id: Optional[int] = Field(default=None, index=True, nullable=False)
    ip_address: Optional[str] = Field(default=None, sa_type=String(15), nullable=False)
    subnet_mask: Optional[str] = Field(default=None, sa_type=String(15), nullable=False)
    default_gateway: Optional[str] = Field(default=None, sa_type=String(15))
    dns_primary: Optional[str] = Field(default=None, sa_type=String(15))
    dns_secondary: Optional[str] = Field(default=None, sa_type=String(15))
    mac_address: Optional[str] = Field(default=None, sa_type=String(17))


class NetworkSettings(NetworkSettingsBase, table=True):
    __tablename__ = "network_settings"
    __table_args__ = (UniqueConstraint("ip_address", name="uq_network_settings_ip_address"),)

    id: Optional[int] = Field(default=None, primary_key=True)


class EquipmentSoftwareBase(SQLModel):
    id: Optional[int] = None
    equipment_id: Optional[int] = Field(default=None, index=True, nullable=False)
    software_id: Optional[int] = Field(default=None, index=True, nullable=False)


class EquipmentSoftware(EquipmentSoftwareBase, table=True):
    __tablename__ = "equipment_software"
    __table_args__ = (
        UniqueConstraint("equipment_id", "software_id", name="uq_equipment_software_pair"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)


class EquipmentRoomHistoryBase(SQLModel):
    id: Optional[int] = None
    equipment_id: Optional[int] = Field(default=None, index=True, nullable=False)
    room_id: Optional[int] = Field(default=None, index=True, nullable=False)
    moved_at: Optional[UtcDateTime] = Field(default=None, sa_type=DateTime(timezone=True))
    moved_by_user_id: Optional[int] = Field(default=None, index=True)
    comment: Optional[str] = Field(default=None, sa_type=String(1000))


class EquipmentRoomHistory(EquipmentRoomHistoryBase, table=True):
    __tablename__ = "equipment_room_history"

    id: Optional[int] = Field(default=None, primary_key=True)


class EquipmentResponsibleHistoryBase(SQLModel):
    id: Optional[int] = None
    equipment_id: Optional[int] = Field(default=None, index=True, nullable=False)
    responsible_user_id: Optional[int] = Field(default=None, index=True, nullable=False)
    assigned_at: Optional[UtcDateTime] = Field(default=None, sa_type=DateTime(timezone=True))
    assigned_by_user_id: Optional[int] = Field(default=None, index=True)
    comment: Optional[str] = Field(default=None, sa_type=String(500))


class EquipmentResponsibleHistory(EquipmentResponsibleHistoryBase, table=True):
    __tablename__ = "equipment_responsible_history"

    id: Optional[int] = Field(default=None, primary_key=True)
