"""Field rules for every resource payload.

Each validator receives the parsed payload and raises ``ValidationFailed``
with the first broken rule. Only syntactic and range checks live here;
references and uniqueness are checked by ``ResourceService`` against the
database.
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from inventory_api.core.exceptions import ValidationFailed
from inventory_api.services.auth import UserRole

DEVELOPER_NAME_RE = re.compile(r"^[a-zA-Zа-яА-ЯёЁ0-9\s\.,\-]+$")
SOFTWARE_VERSION_RE = re.compile(r"^[a-zA-Z0-9.\-\s]+$")
USERNAME_RE = re.compile(r"^[a-zA-Z0-9_]+$")
PHONE_RE = re.compile(r"^[\d\s\-\+\(\)]+$")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
IPV4_RE = re.compile(r"^(25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)(\.(25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)){3}$")
MAC_RE = re.compile(r"^([0-9A-Fa-f]{2}:){5}[0-9A-Fa-f]{2}$|^([0-9A-Fa-f]{2}-){5}[0-9A-Fa-f]{2}$")
COST_RE = re.compile(r"^\d+(\.\d{1,2})?$")

IP_FORMAT_HINT = "Используйте формат: XXX.XXX.XXX.XXX, где XXX от 0 до 255"


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def require_text(value: Optional[str], message: str) -> None:
    if _blank(value):
        raise ValidationFailed(message)


def max_length(value: Optional[str], limit: int, message: Optional[str] = None) -> None:
    if value is not None and len(value) > limit:
        raise ValidationFailed(message or f"Наименование не может превышать {limit} символов")


def positive_id(value: Optional[int], message: str) -> None:
    if value is None or value <= 0:
        raise ValidationFailed(message)


def validate_ipv4(value: Optional[str], label: str, required: bool = False) -> None:
    if _blank(value):
        if required:
            raise ValidationFailed(f"Неверный формат {label}. {IP_FORMAT_HINT}")
        return
    if not IPV4_RE.match(value.strip()):
        raise ValidationFailed(f"Неверный формат {label}. {IP_FORMAT_HINT}")


def validate_mac(value: Optional[str]) -> None:
    if _blank(value):
        return
    if not MAC_RE.match(value.strip()):
        raise ValidationFailed(
            "Неверный формат MAC адреса. Используйте формат: XX:XX:XX:XX:XX:XX или XX-XX-XX-XX-XX-XX"
        )


def validate_cost(value) -> None:
    if value is None:
        return
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationFailed("Стоимость должна содержать только цифры и точку (например: 1000.00)")
    if not amount.is_finite():
        raise ValidationFailed("Стоимость должна содержать только цифры и точку (например: 1000.00)")
    if amount < 0:
        raise ValidationFailed("Стоимость не может быть отрицательной")
    if not COST_RE.match(format(amount, "f")):
        raise ValidationFailed("Стоимость должна содержать только цифры и точку (например: 1000.00)")


def validate_named(label: str, limit: int = 100):
    """Build the validator shared by the simple name-only references."""

    def validator(payload) -> None:
        require_text(payload.name, f"Наименование {label} обязательно для заполнения")
        max_length(payload.name, limit)

    return validator


def validate_developer(payload) -> None:
    require_text(payload.name, "Наименование разработчика обязательно для заполнения")
    max_length(payload.name, 100)
    if not DEVELOPER_NAME_RE.match(payload.name):
        raise ValidationFailed("Наименование содержит недопустимые символы")


def validate_consumable_type(payload) -> None:
    require_text(payload.name, "Наименование типа расходников обязательно для заполнения")
    max_length(payload.name, 100)


def validate_room(payload) -> None:
    require_text(payload.name, "Наименование аудитории обязательно для заполнения")
    max_length(payload.name, 100)
    max_length(payload.short_name, 20, "Сокращенное наименование не может превышать 20 символов")


def validate_model(payload) -> None:
    require_text(payload.name, "Наименование модели обязательно для заполнения")
    max_length(payload.name, 200)
    positive_id(payload.equipment_type_id, "Тип оборудования обязателен для заполнения")


def validate_software(payload) -> None:
    require_text(payload.name, "Наименование программного обеспечения обязательно для заполнения")
    max_length(payload.name, 200)
    positive_id(payload.developer_id, "Разработчик обязателен для заполнения")
    if not _blank(payload.version):
        max_length(payload.version, 50, "Версия не может превышать 50 символов")
        if not SOFTWARE_VERSION_RE.match(payload.version):
            raise ValidationFailed("Версия может содержать только буквы, цифры, точки, дефисы и пробелы")


def validate_user(payload) -> None:
    require_text(payload.username, "Логин обязателен для заполнения")
    max_length(payload.username, 50, "Логин не может превышать 50 символов")
    if not USERNAME_RE.match(payload.username):
        raise ValidationFailed("Логин может содержать только буквы, цифры и символ подчеркивания")
    if payload.role not in UserRole.ALL:
        raise ValidationFailed("Роль должна быть: employee, teacher или administrator")
    require_text(payload.last_name, "Фамилия обязательна для заполнения")
    max_length(payload.last_name, 50, "Фамилия не может превышать 50 символов")
    require_text(payload.first_name, "Имя обязательно для заполнения")
    max_length(payload.first_name, 50, "Имя не может превышать 50 символов")
    max_length(payload.middle_name, 50, "Отчество не может превышать 50 символов")
    if not _blank(payload.email):
        max_length(payload.email, 100, "Email не может превышать 100 символов")
        if not EMAIL_RE.match(payload.email):
            raise ValidationFailed("Некорректный формат email")
    if not _blank(payload.phone):
        max_length(payload.phone, 20, "Телефон не может превышать 20 символов")
        if not PHONE_RE.match(payload.phone):
            raise ValidationFailed("Некорректный формат телефона")
    max_length(payload.address, 255, "Адрес не может превышать 255 символов")


def validate_new_user(payload) -> None:
    validate_user(payload)
    require_text(payload.password, "Пароль обязателен для заполнения")


def validate_equipment(payload) -> None:
    require_text(payload.name, "Наименование оборудования обязательно для заполнения")
    max_length(payload.name, 200)
    if payload.inventory_number is None or payload.inventory_number <= 0:
        raise ValidationFailed("Инвентарный номер должен быть положительным числом")
    validate_cost(payload.cost)


def validate_network_settings(payload) -> None:
    positive_id(payload.equipment_id, "ID оборудования должен быть положительным числом")
    validate_ipv4(payload.ip_address, "IP адреса", required=True)
    validate_ipv4(payload.subnet_mask, "маски подсети", required=True)
    validate_ipv4(payload.default_gateway, "шлюза по умолчанию")
    validate_ipv4(payload.dns_primary, "основного DNS")
    validate_ipv4(payload.dns_secondary, "вторичного DNS")
    validate_mac(payload.mac_address)


def validate_equipment_software(payload) -> None:
    positive_id(payload.equipment_id, "ID оборудования должен быть положительным числом")
    positive_id(payload.software_id, "ID программного обеспечения должен быть положительным числом")


def validate_equipment_room_history(payload) -> None:
    positive_id(payload.equipment_id, "ID оборудования должен быть положительным числом")
    positive_id(payload.room_id, "ID аудитории должен быть положительным числом")
    max_length(payload.comment, 1000, "Комментарий не может превышать 1000 символов")


def validate_equipment_responsible_history(payload) -> None:
    positive_id(payload.equipment_id, "ID оборудования должен быть положительным числом")
    positive_id(payload.responsible_user_id, "ID ответственного пользователя должно быть положительным числом")
    max_length(payload.comment, 500, "Комментарий не может превышать 500 символов")


def validate_consumable(payload) -> None:
    require_text(payload.name, "Наименование расходного материала обязательно для заполнения")
    max_length(payload.name, 200)
    if payload.arrival_date is None:
        raise ValidationFailed("Дата поступления обязательна для заполнения")
    if payload.quantity is None or payload.quantity < 0:
        raise ValidationFailed("Количество не может быть отрицательным")
    positive_id(payload.consumable_type_id, "Необходимо выбрать тип расходного материала")


def validate_consumable_characteristic(payload) -> None:
    positive_id(payload.consumable_type_id, "Необходимо выбрать тип расходного материала")
    require_text(payload.name, "Наименование характеристики обязательно для заполнения")
    max_length(payload.name, 100)


def validate_consumable_characteristic_value(payload) -> None:
    positive_id(payload.consumable_id, "ID расходного материала должен быть положительным числом")
    positive_id(payload.characteristic_id, "ID характеристики должен быть положительным числом")
    max_length(payload.value, 500, "Значение не может превышать 500 символов")


def validate_consumable_equipment(payload) -> None:
    positive_id(payload.consumable_id, "ID расходного материала должен быть положительным числом")
    positive_id(payload.equipment_id, "ID оборудования должен быть положительным числом")
    if payload.quantity_used is None or payload.quantity_used < 1:
        raise ValidationFailed("Количество использованных единиц должно быть положительным числом")


def validate_consumable_responsible_history(payload) -> None:
    positive_id(payload.consumable_id, "ID расходного материала должен быть положительным числом")
    positive_id(payload.responsible_user_id, "ID ответственного пользователя должно быть положительным числом")
    max_length(payload.comment, 500, "Комментарий не может превышать 500 символов")


def validate_inventory(payload) -> None:
    require_text(payload.name, "Наименование инвентаризации обязательно для заполнения")
    max_length(payload.name, 200)
    if payload.start_date is None:
        raise ValidationFailed("Дата начала обязательна для заполнения")
    if payload.end_date is None:
        raise ValidationFailed("Дата окончания обязательна для заполнения")
    if payload.start_date > payload.end_date:
        raise ValidationFailed("Дата начала не может быть позже даты окончания")


def validate_inventory_check(payload) -> None:
    positive_id(payload.inventory_id, "ID инвентаризации должен быть положительным числом")
    positive_id(payload.equipment_id, "ID оборудования должен быть положительным числом")
    max_length(payload.comment, 500, "Комментарий не может превышать 500 символов")
