from typing import Optional

from sqlmodel import Field, SQLModel, String, Date, DateTime, UniqueConstraint

from inventory_api.models.types import RuDate, UtcDateTime


class InventoryBase(SQLModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, sa_type=String(200), nullable=False)
    start_date: Optional[RuDate] = Field(default=None, sa_type=Date, nullable=False)
    end_date: Optional[RuDate] = Field(default=None, sa_type=Date, nullable=False)
    created_by_user_id: Optional[int] = Field(default=None, index=True)


class Inventory(InventoryBase, table=True):
    __tablename__ = "inventories"

    id: Optional[int] = Field(default=None, primary_key=True)


class InventoryCheckBase(SQLModel):
    id: Optional[int] = None
    inventory_id: Optional[int] = Field(default=None, index=True, nullable=False)
    equipment_id: Optional[int] = Field(default=None, index=True, nullable=False)
    checked_by_user_id: Optional[int] = Field(default=None, index=True)
    checked_at: Optional[UtcDateTime] = Field(default=None, sa_type=DateTime(timezone=True))
    comment: Optional[str] = Field(default=None, sa_type=String(500))


class InventoryCheck(InventoryCheckBase, table=True):
    __tablename__ = "inventory_checks"
    __table_args__ = (
        UniqueConstraint("inventory_id", "equipment_id", name="uq_inventory_checks_pair"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
