from typing import Optional

from sqlmodel import Field, SQLModel, String, Text, Date, DateTime, LargeBinary, UniqueConstraint

from inventory_api.models.types import Photo, RuDate, UtcDateTime


class ConsumableBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(200), nullable=False)
    description: Optional[str] = Field(default=None, sa_type=Text)
    arrival_date: Optional[RuDate] = Field(default=None, sa_type=Date, nullable=False)
    photo: Optional[Photo] = Field(default=None, sa_type=LargeBinary)
    quantity: Optional[int] = Field(default=0, nullable=False)
    consumable_type_id: Optional[int] = Field(default=None, index=True, nullable=False)
    responsible_user_id: Optional[int] = Field(default=None, index=True)
    temp_responsible_user_id: Optional[int] = Field(default=None, index=True)


class Consumable(ConsumableBase, table=True):
    __tablename__ = "consumables"

    id: Optional[int] = Field(default=None, primary_key=True)


class ConsumableCharacteristicBase(SQLModel):
    id: Optional[int] = None
    consumable_type_id: Optional[int] = Field(default=None, index=True, nullable=False)
    name: Optional[str] = Field(default=None, sa_type=String(100), nullable=False)


class ConsumableCharacteristic(ConsumableCharacteristicBase, table=True):
    __tablename__ = "consumable_characteristics"
    __table_args__ = (
        UniqueConstraint("consumable_type_id", "name", name="uq_consumable_characteristics_type_name"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)


class ConsumableCharacteristicValueBase(SQLModel):
    id: Optional[int] = None
    consumable_id: Optional[int] = Field(default=None, index=True, nullable=False)
    characteristic_id: Optional[int] = Field(default=None, index=True, nullable=False)
    value: Optional[str] = Field(default=None, sa_type=String(500))


class ConsumableCharacteristicValue(ConsumableCharacteristicValueBase, table=True):
    __tablename__ = "consumable_characteristic_values"
    __table_args__ = (
        UniqueConstraint("consumable_id", "characteristic_id", name="uq_consumable_characteristic_values_pair"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)


class ConsumableEquipmentBase(SQLModel):
    id: Optional[int] = None
    consumable_id: Optional[int] = Field(default=None, index=True, nullable=False)
    equipment_id: Optional[int] = Field(default=None, index=True, nullable=False)
    quantity_used: Optional[int] = Field(default=1, nullable=False)
    attached_at: Optional[UtcDateTime] = Field(default=None, sa_type=DateTime(timezone=True))
    attached_by_user_id: Optional[int] = Field(default=None, index=True)


class ConsumableEquipment(ConsumableEquipmentBase, table=True):
    __tablename__ = "consumable_equipment"
    __table_args__ = (
        UniqueConstraint("consumable_id", "equipment_id", name="uq_consumable_equipment_pair"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)


class ConsumableResponsibleHistoryBase(SQLModel):
    id: Optional[int] = None
    consumable_id: Optional[int] = Field(default=None, index=True, nullable=False)
    responsible_user_id: Optional[int] = Field(default=None, index=True, nullable=False)
    assigned_at: Optional[UtcDateTime] = Field(default=None, sa_type=DateTime(timezone=True))
    assigned_by_user_id: Optional[int] = Field(default=None, index=True)
    comment: Optional[str] = Field(default=None, sa_type=String(500))


class ConsumableResponsibleHistory(ConsumableResponsibleHistoryBase, table=True):
    __tablename__ = "consumable_responsible_history"

    id: Optional[int] = Field(default=None, primary_key=True)
