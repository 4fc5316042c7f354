"""Table definitions: element types, column layouts, field descriptions and validators."""

from __future__ import annotations

import enum

import regex

__all__ = [
    "ElementType",
    "columns_of",
    "table_name_of",
    "describe_field",
    "validate_field",
]


class ElementType(enum.Enum):
    """Kinds of records the application can show and edit."""

    WARDS = enum.auto()
    EMPLOYEES = enum.auto()
    EMPLOYEE_QUALIFICATIONS = enum.auto()
    EMPLOYEE_EXPERIENCE = enum.auto()
    WORK_SCHEDULES = enum.auto()
    PATIENTS = enum.auto()
    PATIENT_RELATIVES = enum.auto()
    DISTRICT_DOCTORS = enum.auto()
    APPOINTMENTS = enum.auto()
    OUTPATIENT_PATIENTS = enum.auto()
    INPATIENT_PATIENTS = enum.auto()
    MEDICATIONS = enum.auto()
    PRESCRIBED_MEDICATIONS = enum.auto()
    SUPPLIES = enum.auto()
    SUPPLIERS = enum.auto()
    SUPPLY_REQUESTS = enum.auto()
    SEARCHING_RESULT = enum.auto()
    UNKNOWN = enum.auto()


_PERSON_ADDRESS = (
    "address_city",
    "address_street",
    "address_house",
    "address_apartment",
)

_EMPLOYEE_COLUMNS = (
    "id",
    "personnel_number",
    "last_name",
    "first_name",
    "middle_name",
    *_PERSON_ADDRESS,
    "phone",
    "birth_date",
    "gender",
    "passport_series",
    "passport_number",
    "position",
    "current_salary",
    "pay_rate",
    "hours_per_week",
    "payment_frequency",
    "contract_type",
    "ward_id",
)

_TABLE_COLUMNS: dict[ElementType, tuple[str, ...]] = {
    ElementType.WARDS: ("id", "number", "name", "location", "total_beds", "phone_extension"),
    ElementType.EMPLOYEES: _EMPLOYEE_COLUMNS,
    ElementType.EMPLOYEE_QUALIFICATIONS: (
        "id", "employee_id", "qualification_type", "qualification_date", "institution_name",
    ),
    ElementType.EMPLOYEE_EXPERIENCE: (
        "id", "employee_id", "organization_name", "position", "start_date", "end_date",
    ),
    ElementType.WORK_SCHEDULES: ("id", "employee_id", "ward_id", "shift_date", "shift_type"),
    ElementType.PATIENTS: (
        "id", "patient_number", "last_name", "first_name", "middle_name",
        *_PERSON_ADDRESS, "phone", "birth_date", "gender", "marital_status",
        "registration_date",
    ),
    ElementType.PATIENT_RELATIVES: (
        "id", "patient_id", "last_name", "first_name", "middle_name", "relationship",
        *_PERSON_ADDRESS, "phone",
    ),
    ElementType.DISTRICT_DOCTORS: (
        "id", "last_name", "first_name", "middle_name", "clinic_name",
        *_PERSON_ADDRESS, "phone",
    ),
    ElementType.APPOINTMENTS: (
        "id", "patient_id", "district_doctor_id", "consultant_last_name",
        "consultant_first_name", "consultant_middle_name", "consultant_personnel_number",
        "appointment_date", "room_number", "recommendation",
    ),
    ElementType.OUTPATIENT_PATIENTS: ("id", "patient_id", "appointment_date"),
    ElementType.INPATIENT_PATIENTS: (
        "id", "patient_id", "ward_id", "bed_number", "queue_registration_date",
        "assigned_ward_id", "expected_treatment_days", "placement_date",
        "expected_discharge_date", "actual_discharge_date",
    ),
    ElementType.MEDICATIONS: (
        "id", "medication_code", "name", "description", "dosage", "administration_method",
        "stock_quantity", "reorder_level", "unit_cost",
    ),
    ElementType.PRESCRIBED_MEDICATIONS: (
        "id", "patient_id", "medication_id", "ward_id", "daily_dosage",
        "administration_method", "start_date", "end_date",
    ),
    ElementType.SUPPLIES: (
        "id", "item_code", "purpose", "description", "item_type", "stock_quantity",
        "reorder_level", "unit_cost",
    ),
    ElementType.SUPPLIERS: (
        "id", "supplier_number", "name", *_PERSON_ADDRESS, "phone", "fax",
    ),
    ElementType.SUPPLY_REQUESTS: (
        "id", "request_number", "employee_id", "ward_id", "item_id", "medication_id",
        "quantity", "order_date", "delivery_date", "status",
    ),
    ElementType.SEARCHING_RESULT: (*_EMPLOYEE_COLUMNS, "created_at", "updated_at"),
    ElementType.UNKNOWN: (),
}

_TABLE_NAMES: dict[ElementType, str] = {
    ElementType.WARDS: "wards",
    ElementType.EMPLOYEES: "employees",
    ElementType.EMPLOYEE_QUALIFICATIONS: "employee_qualifications",
    ElementType.EMPLOYEE_EXPERIENCE: "employee_experience",
    ElementType.WORK_SCHEDULES: "work_schedules",
    ElementType.PATIENTS: "patients",
    ElementType.PATIENT_RELATIVES: "patient_relatives",
    ElementType.DISTRICT_DOCTORS: "district_doctors",
    ElementType.APPOINTMENTS: "appointments",
    ElementType.OUTPATIENT_PATIENTS: "outpatient_patients",
    ElementType.INPATIENT_PATIENTS: "inpatient_patients",
    ElementType.MEDICATIONS: "medications",
    ElementType.PRESCRIBED_MEDICATIONS: "prescribed_medications",
    ElementType.SUPPLIES: "supplies",
    ElementType.SUPPLIERS: "suppliers",
    ElementType.SUPPLY_REQUESTS: "supply_requests",
    ElementType.SEARCHING_RESULT: (
        "(SELECT e.* FROM employees e JOIN employee_qualifications eq ON e.id = eq.employee_id)"
    ),
}

_DESCRIPTIONS: dict[str, str] = {
    "id": "Уникальный идентификатор",
    "number": "Номер",
    "name": "Наименование",
    "phone": "Телефон",
    "address_city": "Город",
    "address_street": "Улица",
    "address_house": "Дом",
    "address_apartment": "Квартира",
    "description": "Описание",
    "location": "Расположение (блок)",
    "total_beds": "Общее количество коек",
    "phone_extension": "Добавочный номер",
    "personnel_number": "Табельный номер",
    "last_name": "Фамилия",
    "first_name": "Имя",
    "middle_name": "Отчество",
    "birth_date": "Дата рождения",
    "gender": "Пол (М/Ж)",
    "passport_series": "Серия паспорта",
    "passport_number": "Номер паспорта",
    "position": "Должность",
    "current_salary": "Текущая зарплата",
    "pay_rate": "Ставка",
    "hours_per_week": "Часов в неделю",
    "payment_frequency": "Частота выплат (еженедельно/ежемесячно)",
    "contract_type": "Тип контракта (постоянный/временный)",
    "ward_id": "ID палаты",
    "employee_id": "ID сотрудника",
    "qualification_type": "Тип квалификации",
    "qualification_date": "Дата получения квалификации",
    "institution_name": "Учебное заведение",
    "organization_name": "Организация",
    "start_date": "Дата начала",
    "end_date": "Дата окончания",
    "shift_date": "Дата смены",
    "shift_type": "Тип смены (утро/день/ночь)",
    "patient_number": "Номер пациента",
    "marital_status": "Семейное положение",
    "registration_date": "Дата регистрации",
    "relationship": "Родственная связь",
    "clinic_name": "Название клиники",
    "district_doctor_id": "ID участкового врача",
    "consultant_last_name": "Фамилия консультанта",
    "consultant_first_name": "Имя консультанта",
    "consultant_middle_name": "Отчество консультанта",
    "consultant_personnel_number": "Табельный номер консультанта",
    "appointment_date": "Дата и время приема",
    "room_number": "Номер кабинета",
    "recommendation": "Рекомендации",
    "bed_number": "Номер койки",
    "queue_registration_date": "Дата постановки в очередь",
    "assigned_ward_id": "ID назначенной палаты",
    "expected_treatment_days": "Предполагаемый срок лечения (дней)",
    "placement_date": "Дата размещения",
    "expected_discharge_date": "Предполагаемая дата выписки",
    "actual_discharge_date": "Фактическая дата выписки",
    "medication_code": "Код препарата",
    "dosage": "Дозировка",
    "administration_method": "Способ приема",
    "stock_quantity": "Количество на складе",
    "reorder_level": "Уровень повторного заказа",
    "unit_cost": "Стоимость единицы",
    "medication_id": "ID медикамента",
    "daily_dosage": "Дозировка в день",
    "item_code": "Код предмета",
    "purpose": "Назначение",
    "item_type": "Тип (хирургический/нехирургический/фармацевтический)",
    "supplier_number": "Номер поставщика",
    "fax": "Факс",
    "request_number": "Номер заявки",
    "quantity": "Количество",
    "order_date": "Дата заказа",
    "delivery_date": "Дата доставки",
    "status": "Статус (ожидает/доставлено/отменено)",
}

_DATE = r"^(0[1-9]|[12][0-9]|3[01])\.(0[1-9]|1[012])\.(19|20)\d\d$"
_OPTIONAL_DATE = _DATE + r"|^$"
_DIGITS = r"^\d+$"
_CODE = r"^[A-Za-z0-9-]{5,20}$"
_PHONE = r"^\+?[0-9\s()-]{7,20}$"
_HOUSE = r"^[0-9]+[A-Za-z]?$"
_SHORT_CODE = r"^[A-Za-z0-9-]{1,10}$"
_QUANTITY = r"^\d{1,6}$"
_MONEY = r"^\d{1,6}(\.\d{1,2})?$"

# Patterns that use Unicode letter classes; the rest are matched with ASCII
# semantics for \d and \s.
_U_NAME = r"^[\p{L}-]+$"
_U_OPTIONAL_NAME = r"^[\p{L}-]*$"
_U_WORDS = r"^[\p{L}\s-]+$"
_U_TITLE = r"^[\p{L}0-9\s\.-]+$"
_U_QUOTED_TITLE = r"^[\p{L}0-9\s\.\"'-]+$"
_U_TEXT = r"^[\p{L}0-9\s\.\,\!\?-]+$"

_ASCII_PATTERNS: dict[str, str] = {
    "id": _DIGITS,
    "number": r"^[A-Za-z0-9-]+$",
    "phone": _PHONE,
    "address_house": _HOUSE,
    "address_apartment": _HOUSE,
    "location": r"^[A-Za-z0-9\s-]+$",
    "total_beds": r"^\d{1,3}$",
    "phone_extension": r"^\d{2,5}$",
    "personnel_number": _CODE,
    "birth_date": _DATE,
    "gender": r"^[МЖ]$",
    "passport_series": r"^\d{4}$",
    "passport_number": r"^\d{6}$",
    "current_salary": _MONEY,
    "pay_rate": r"^\d{1,4}(\.\d{1,2})?$",
    "hours_per_week": r"^\d{1,2}(\.\d{1,1})?$",
    "payment_frequency": r"^(еженедельно|ежемесячно)$",
    "contract_type": r"^(постоянный|временный)$",
    "ward_id": _DIGITS,
    "employee_id": _DIGITS,
    "qualification_date": _DATE,
    "start_date": _DATE,
    "end_date": _OPTIONAL_DATE,
    "shift_date": _DATE,
    "shift_type": r"^(утро|день|ночь)$",
    "patient_number": _CODE,
    "registration_date": _DATE,
    "district_doctor_id": _DIGITS,
    "consultant_personnel_number": _CODE,
    "appointment_date": (
        r"^(0[1-9]|[12][0-9]|3[01])\.(0[1-9]|1[012])\.(19|20)\d\d\s([01][0-9]|2[0-3]):[0-5][0-9]$"
    ),
    "room_number": _SHORT_CODE,
    "bed_number": _SHORT_CODE,
    "queue_registration_date": _DATE,
    "assigned_ward_id": _DIGITS,
    "expected_treatment_days": r"^\d{1,3}$",
    "placement_date": _DATE,
    "expected_discharge_date": _DATE,
    "actual_discharge_date": _OPTIONAL_DATE,
    "medication_code": _CODE,
    "dosage": r"^\d{1,5}(\.\d{1,3})?\s?[a-zA-Z]{0,5}$",
    "stock_quantity": _QUANTITY,
    "reorder_level": _QUANTITY,
    "unit_cost": _MONEY,
    "medication_id": _DIGITS,
    "daily_dosage": r"^\d{1,2}$",
    "item_code": _CODE,
    "item_type": r"^(хирургический|нехирургический|фармацевтический)$",
    "supplier_number": _CODE,
    "fax": _PHONE,
    "request_number": _CODE,
    "quantity": _QUANTITY,
    "order_date": _DATE,
    "delivery_date": _OPTIONAL_DATE,
    "status": r"^(ожидает|доставлено|отменено)$",
}

_UNICODE_PATTERNS: dict[str, str] = {
    "name": _U_TITLE,
    "address_city": _U_WORDS,
    "address_street": _U_TITLE,
    "description": _U_TEXT,
    "last_name": _U_NAME,
    "first_name": _U_NAME,
    "middle_name": _U_OPTIONAL_NAME,
    "position": _U_WORDS,
    "qualification_type": _U_WORDS,
    "institution_name": _U_QUOTED_TITLE,
    "organization_name": _U_QUOTED_TITLE,
    "marital_status": _U_WORDS,
    "relationship": _U_WORDS,
    "clinic_name": _U_QUOTED_TITLE,
    "consultant_last_name": _U_NAME,
    "consultant_first_name": _U_NAME,
    "consultant_middle_name": _U_OPTIONAL_NAME,
    "recommendation": _U_TEXT,
    "administration_method": _U_WORDS,
    "purpose": _U_WORDS,
}

_VALIDATORS: dict[str, regex.Pattern[str]] = {
    **{field: regex.compile(p, regex.ASCII) for field, p in _ASCII_PATTERNS.items()},
    **{field: regex.compile(p) for field, p in _UNICODE_PATTERNS.items()},
}


def columns_of(element_type: ElementType) -> list[str]:
    """Return the column names of a table, the id column first."""
    return list(_TABLE_COLUMNS.get(element_type, ()))


def table_name_of(element_type: ElementType) -> str:
    """Return the SQL table name (or subquery) for an element type; empty if none."""
    return _TABLE_NAMES.get(element_type, "")


def describe_field(field: str) -> str:
    """Return the human-readable description of a field; empty if unknown."""
    return _DESCRIPTIONS.get(field, "")


def validate_field(field: str, value: str) -> bool:
    """Tell whether a value is acceptable for a field.

    Fields without a validator accept any value.
    """
    pattern = _VALIDATORS.get(field)
    if pattern is None:
        return True
    return pattern.fullmatch(value) is not None