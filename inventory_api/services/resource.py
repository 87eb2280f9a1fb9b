import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import SQLModel

from inventory_api.core.exceptions import NotFoundError, ValidationFailed

logger = logging.getLogger(__name__)

DEFAULT_DELETE_BLOCKED = "Невозможно удалить запись, так как она связана с другими записями в системе"


@dataclass
class ForeignKeyRule:
    field: str
    target: Type[SQLModel]
    message: str


@dataclass
class UniqueRule:
    fields: Tuple[str, ...]
    message: str
    case_insensitive: bool = False
    skip_empty: bool = False


@dataclass
class RelationRule:
    model: Type[SQLModel]
    fields: Tuple[str, ...]


@dataclass
class ParentListing:
    path: str
    field: str
    parent: Type[SQLModel]
    not_found: str


@dataclass
class ResourceDefinition:
    """Everything the generic handler needs to know about one entity."""
    route: str
    model: Type[SQLModel]
    schema: Type[SQLModel]
    not_found: str
    validate: Callable[[Any], None]
    read_schema: Optional[Type[SQLModel]] = None
    validate_create: Optional[Callable[[Any], None]] = None
    search_fields: Sequence[str] = ("name",)
    sort_fields: Sequence[str] = ()
    foreign_keys: List[ForeignKeyRule] = field(default_factory=list)
    unique: List[UniqueRule] = field(default_factory=list)
    relations: List[RelationRule] = field(default_factory=list)
    timestamps: Sequence[str] = ()
    parents: List[ParentListing] = field(default_factory=list)
    filters: Dict[str, str] = field(default_factory=dict)
    checks: List[Callable[[Session, Any], None]] = field(default_factory=list)
    prepare: Optional[Callable[[Dict[str, Any], Optional[SQLModel]], Dict[str, Any]]] = None
    delete_blocked: str = DEFAULT_DELETE_BLOCKED

    @property
    def output_schema(self) -> Type[SQLModel]:
        return self.read_schema or self.schema

    def sort_column(self, sort_by: Optional[str]) -> Optional[str]:
        if not sort_by:
            return None
        key = normalize_sort_key(sort_by)
        for name in self.sort_fields:
            if normalize_sort_key(name) == key:
                return name
        return None


def normalize_sort_key(value: str) -> str:
    return value.replace("_", "").lower()


class ResourceService:
    def __init__(self, db: Session, definition: ResourceDefinition):
        self.db = db
        self.definition = definition
        self.model = definition.model

    def not_found(self, item_id: int) -> NotFoundError:
        return NotFoundError(self.definition.not_found.format(id=item_id))

    def get_by_id(self, item_id: int) -> Optional[SQLModel]:
        return self.db.query(self.model).filter(self.model.id == item_id).first()

    def get(self, item_id: int) -> SQLModel:
        item = self.get_by_id(item_id)
        if item is None:
            raise self.not_found(item_id)
        return item

    def list(self,
             search: Optional[str] = None,
             sort_by: Optional[str] = None,
             sort_order: Optional[str] = None,
             filters: Optional[Dict[str, Any]] = None) -> List[SQLModel]:
        query = self.db.query(self.model)

        for param, column in self.definition.filters.items():
            value = (filters or {}).get(param)
            if value:
                query = query.filter(getattr(self.model, column) == value)

        if search and self.definition.search_fields:
            # LIKE narrows the rows; the exact case-sensitive match is applied below
            query = query.filter(or_(*[
                getattr(self.model, name).contains(search, autoescape=True)
                for name in self.definition.search_fields
            ]))

        sort_column = self.definition.sort_column(sort_by)
        if sort_column:
            column = getattr(self.model, sort_column)
            if (sort_order or "asc").lower() == "desc":
                query = query.order_by(column.desc(), self.model.id.desc())
            else:
                query = query.order_by(column.asc(), self.model.id.asc())
        else:
            query = query.order_by(self.model.id.asc())

        items = query.all()
        if search and self.definition.search_fields:
            items = [item for item in items if self._matches(item, search)]
        return items

    def _matches(self, item: SQLModel, search: str) -> bool:
        for name in self.definition.search_fields:
            value = getattr(item, name, None)
            if value is not None and search in str(value):
                return True
        return False

    def list_by_parent(self, listing: ParentListing, parent_id: int) -> List[SQLModel]:
        parent = self.db.query(listing.parent).filter(listing.parent.id == parent_id).first()
        if parent is None:
            raise NotFoundError(listing.not_found.format(id=parent_id))
        column = getattr(self.model, listing.field)
        return self.db.query(self.model).filter(column == parent_id).order_by(self.model.id.asc()).all()

    def validate(self, payload: SQLModel, existing_id: Optional[int] = None) -> None:
        definition = self.definition
        if existing_id is None and definition.validate_create:
            definition.validate_create(payload)
        else:
            definition.validate(payload)

        for rule in definition.foreign_keys:
            value = getattr(payload, rule.field)
            if value is None:
                continue
            exists = self.db.query(rule.target.id).filter(rule.target.id == value).first()
            if exists is None:
                raise ValidationFailed(rule.message.format(id=value))

        for rule in definition.unique:
            self._check_unique(rule, payload, existing_id)

        for check in definition.checks:
            check(self.db, payload)

    def _check_unique(self, rule: UniqueRule, payload: SQLModel, existing_id: Optional[int]) -> None:
        query = self.db.query(self.model.id)
        for name in rule.fields:
            value = getattr(payload, name)
            if rule.skip_empty and (value is None or str(value).strip() == ""):
                return
            column = getattr(self.model, name)
            if rule.case_insensitive and isinstance(value, str):
                query = query.filter(func.lower(column) == value.lower())
            else:
                query = query.filter(column == value)
        if existing_id is not None:
            query = query.filter(self.model.id != existing_id)
        if query.first() is not None:
            raise ValidationFailed(rule.message)

    def _values(self, payload: SQLModel, existing: Optional[SQLModel] = None) -> Dict[str, Any]:
        data = payload.model_dump(exclude={"id"})
        now = datetime.now(timezone.utc)
        for name in self.definition.timestamps:
            if data.get(name) is None:
                data[name] = now
        for name, value in data.items():
            if isinstance(value, datetime) and value.tzinfo is not None:
                data[name] = value.astimezone(timezone.utc)
        if self.definition.prepare:
            data = self.definition.prepare(data, existing)
        return data

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Integrity error on {self.definition.route}: {e}")
            raise ValidationFailed("Нарушена целостность данных: запись конфликтует с существующими данными")

    def create(self, payload: SQLModel) -> SQLModel:
        self.validate(payload)

        item = self.model(**self._values(payload))
        self.db.add(item)
        self._commit()
        self.db.refresh(item)

        logger.info(f"Created {self.definition.route} with ID: {item.id}")
        return item

    def update(self, item_id: int, payload: SQLModel) -> SQLModel:
        if payload.id != item_id:
            raise ValidationFailed("ID в пути и в теле запроса не совпадают")

        item = self.get(item_id)
        self.validate(payload, existing_id=item_id)

        for key, value in self._values(payload, item).items():
            setattr(item, key, value)

        try:
            self._commit()
        except StaleDataError:
            self.db.rollback()
            if self.get_by_id(item_id) is None:
                raise self.not_found(item_id)
            raise

        logger.info(f"Updated {self.definition.route} with ID: {item_id}")
        return item

    def has_relations(self, item_id: int) -> bool:
        self.get(item_id)
        for rule in self.definition.relations:
            conditions = [getattr(rule.model, name) == item_id for name in rule.fields]
            if self.db.query(rule.model.id).filter(or_(*conditions)).first() is not None:
                return True
        return False

    def delete(self, item_id: int) -> None:
        item = self.get(item_id)
        if self.has_relations(item_id):
            raise ValidationFailed(self.definition.delete_blocked)

        self.db.delete(item)
        try:
            self._commit()
        except StaleDataError:
            self.db.rollback()
            raise self.not_found(item_id)

        logger.info(f"Deleted {self.definition.route} with ID: {item_id}")
