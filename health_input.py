# health_input.py
"""
Typed health record and the boundary that builds it from form values.

Form values arrive as text. parse_health_input turns them into a validated
HealthInput or raises HealthInputError listing every field that is wrong,
so the scorers only ever see whole numbers and known options.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from logger import warn

DISEASE_TYPES = ("diabetes", "heart", "stroke")

Gender = Literal["male", "female"]
SmokingStatus = Literal["never", "former", "current"]
ActivityLevel = Literal["low", "moderate", "high"]
FamilyHistory = Literal["none", "some", "strong"]
DiabetesStatus = Literal["none", "prediabetes", "diabetes"]

# Accepted (min, max) for whole-number fields, same limits the form shows
NUMERIC_RANGES = {
    "age": (18, 120),
    "height": (100, 250),
    "weight": (30, 300),
    "blood_pressure_systolic": (80, 200),
    "blood_pressure_diastolic": (40, 120),
    "cholesterol": (100, 400),
    "heart_rate": (40, 120),
}

ENUM_FIELDS = ("gender", "smoking_status", "physical_activity", "family_history", "diabetes_status")

# camelCase form keys -> field names
FORM_ALIASES = {
    "bloodPressureSystolic": "blood_pressure_systolic",
    "bloodPressureDiastolic": "blood_pressure_diastolic",
    "smokingStatus": "smoking_status",
    "physicalActivity": "physical_activity",
    "familyHistory": "family_history",
    "diabetes": "diabetes_status",
    "heartRate": "heart_rate",
}

_BASE_FIELDS = [
    "age",
    "gender",
    "height",
    "weight",
    "blood_pressure_systolic",
    "blood_pressure_diastolic",
    "family_history",
]

REQUIRED_FIELDS = {
    "diabetes": _BASE_FIELDS + ["physical_activity"],
    "heart": _BASE_FIELDS + ["cholesterol", "smoking_status", "physical_activity"],
    "stroke": _BASE_FIELDS + ["smoking_status", "diabetes_status"],
}


class UnknownDiseaseError(ValueError):
    """Raised for a disease identifier other than diabetes, heart or stroke."""

    def __init__(self, disease_type):
        self.disease_type = disease_type
        super().__init__(f"Unknown disease type: {disease_type!r}")


class HealthInputError(ValueError):
    """Raised when form values cannot become a HealthInput."""

    def __init__(self, errors):
        # list of (field, message)
        self.errors = list(errors)
        super().__init__("; ".join(f"{name}: {message}" for name, message in self.errors))

    @property
    def fields(self):
        return [name for name, _ in self.errors]


class HealthInput(BaseModel):
    """
    One person's health metrics.

    height is in cm, weight in kg, blood pressure in mmHg, cholesterol in
    mg/dL and heart_rate in bpm. Fields a given disease does not use may
    be None.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    age: int
    gender: Gender
    height: int
    weight: int
    blood_pressure_systolic: int
    blood_pressure_diastolic: int
    family_history: FamilyHistory
    cholesterol: Optional[int] = None
    smoking_status: Optional[SmokingStatus] = None
    physical_activity: Optional[ActivityLevel] = None
    diabetes_status: Optional[DiabetesStatus] = None
    heart_rate: Optional[int] = None

    @field_validator(*NUMERIC_RANGES)
    @classmethod
    def _within_range(cls, value, info):
        if value is None:
            return value
        low, high = NUMERIC_RANGES[info.field_name]
        if not low <= value <= high:
            raise ValueError(f"must be between {low} and {high}")
        return value


def check_disease_type(disease_type):
    if disease_type not in DISEASE_TYPES:
        raise UnknownDiseaseError(disease_type)


def missing_fields(data: HealthInput, disease_type: str) -> list:
    """Fields the disease needs that are None on data."""
    check_disease_type(disease_type)
    return [name for name in REQUIRED_FIELDS[disease_type] if getattr(data, name) is None]


def require_fields(data: HealthInput, disease_type: str):
    missing = missing_fields(data, disease_type)
    if missing:
        raise HealthInputError(
            (name, f"is required for {disease_type} assessment") for name in missing
        )


def _is_number(text):
    try:
        float(text)
    except ValueError:
        return False
    return True


def _normalise(raw):
    """Map form keys to field names, strip text, drop blanks, lower-case options."""
    values = {}
    for key, value in raw.items():
        name = FORM_ALIASES.get(key, key)
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
            if name in ENUM_FIELDS:
                value = value.lower()
        values[name] = value

    # Resting heart rate is optional; non-numeric text falls back to the default.
    # Decimal text stays in place so it is rejected like any other fraction.
    heart_rate = values.get("heart_rate")
    if isinstance(heart_rate, str) and not _is_number(heart_rate):
        warn(f"[input] unreadable heart rate {heart_rate!r}, using default")
        del values["heart_rate"]

    return values


def _describe(exc: ValidationError):
    errors = []
    for err in exc.errors():
        name = str(err["loc"][0]) if err["loc"] else "input"
        message = "is required" if err["type"] == "missing" else err["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append((name, message))
    return errors


def parse_health_input(raw, disease_type=None) -> HealthInput:
    """
    Build a HealthInput from a mapping of form values.

    Keys may be snake_case field names or the form's camelCase names.
    When disease_type is given, the fields that disease needs must be
    present as well. Raises HealthInputError with every problem found.
    """
    if disease_type is not None:
        check_disease_type(disease_type)

    values = _normalise(raw)
    errors = []
    data = None
    try:
        data = HealthInput.model_validate(values)
    except ValidationError as exc:
        errors.extend(_describe(exc))

    if disease_type is not None:
        reported = {name for name, _ in errors}
        errors.extend(
            (name, f"is required for {disease_type} assessment")
            for name in REQUIRED_FIELDS[disease_type]
            if name not in values and name not in reported
        )

    if errors:
        raise HealthInputError(errors)
    return data
