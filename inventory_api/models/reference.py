from typing import Optional

from sqlmodel import Field, SQLModel, String, Text, UniqueConstraint


class EquipmentTypeBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(100), nullable=False)


class EquipmentType(EquipmentTypeBase, table=True):
    __tablename__ = "equipment_types"
    __table_args__ = (UniqueConstraint("name", name="uq_equipment_types_name"),)

    id: Optional[int] = Field(default=None, primary_key=True)


class DirectionBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(100), nullable=False)


class Direction(DirectionBase, table=True):
    __tablename__ = "directions"
    __table_args__ = (UniqueConstraint("name", name="uq_directions_name"),)

    id: Optional[int] = Field(default=None, primary_key=True)


class StatusBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(100), nullable=False)


class Status(StatusBase, table=True):
    __tablename__ = "statuses"
    __table_args__ = (UniqueConstraint("name", name="uq_statuses_name"),)

    id: Optional[int] = Field(default=None, primary_key=True)


class DeveloperBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(100), nullable=False)


class Developer(DeveloperBase, table=True):
    __tablename__ = "developers"
    __table_args__ = (UniqueConstraint("name", name="uq_developers_name"),)

    id: Optional[int] = Field(default=None, primary_key=True)


class ConsumableTypeBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(100), nullable=False)
    description: Optional[str] = Field(default=None, sa_type=Text)


class ConsumableType(ConsumableTypeBase, table=True):
    __tablename__ = "consumable_types"
    __table_args__ = (UniqueConstraint("name", name="uq_consumable_types_name"),)

    id: Optional[int] = Field(default=None, primary_key=True)


class RoomBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(100), nullable=False)
    short_name: Optional[str] = Field(default=None, sa_type=String(20))
    responsible_user_id: Optional[int] = Field(default=None, index=True)
    temp_responsible_user_id: Optional[int] = Field(default=None, index=True)


class Room(RoomBase, table=True):
    __tablename__ = "rooms"
    __table_args__ = (UniqueConstraint("name", name="uq_rooms_name"),)

    id: Optional[int] = Field(default=None, primary_key=True)
