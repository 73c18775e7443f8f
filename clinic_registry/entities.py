"""
Entity models using Pydantic
Raw records are coerced field by field; every failing field is reported at once
"""

import logging
from datetime import date, datetime, time
from typing import Any, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    ValidationError,
    computed_field,
    field_validator,
)
from pydantic.alias_generators import to_camel

from clinic_registry.config import (
    TIME_OF_DAY_PATTERN,
    RegistryConfig,
    get_config,
    time_to_minutes,
)
from clinic_registry.exceptions import CoercionError

logger = logging.getLogger(__name__)

ENTITY_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    alias_generator=to_camel,
    populate_by_name=True,
)


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _number_to_text(v: Any) -> Any:
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


def _coercion_error(entity: str, exc: ValidationError) -> CoercionError:
    fields = [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "__root__",
            "input": error.get("input"),
            "reason": error["msg"],
        }
        for error in exc.errors()
    ]
    return CoercionError(entity, fields)


class Service(BaseModel):
    """
    Clinical service offering.

    Every field is optional: ``None`` means absent, zero is a present value.
    A service is complete only when nothing is absent.
    """

    model_config = ENTITY_CONFIG

    id: Optional[NonNegativeInt] = None
    name: Optional[str] = None
    doctor: Optional[str] = None
    users_month1: Optional[NonNegativeInt] = None
    users_month2: Optional[NonNegativeInt] = None
    cost: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    duration_minutes: Optional[NonNegativeInt] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_absent(cls, v: Any) -> Any:
        """Empty strings count as missing input"""
        return _blank_to_none(v)

    @field_validator("name", "doctor", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return _number_to_text(v)

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Service":
        """
        Build a service from a loosely-typed record.

        Raises:
            CoercionError: If any present field has the wrong type
        """
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as e:
            error = _coercion_error(cls.__name__, e)
            logger.warning(f"Rejected service record: {error.details['fields']}")
            raise error from e

    def has_complete_info(self) -> bool:
        """True if no field is absent (zero counts as present)"""
        return all(getattr(self, name) is not None for name in SERVICE_FIELDS)


SERVICE_FIELDS = tuple(Service.model_fields)


class UserAccount(BaseModel):
    """Feedback or consultation request left by a user"""

    model_config = ENTITY_CONFIG

    last_name: str
    first_name: str
    age: NonNegativeInt
    education: Optional[str] = None
    feedback_goal: Optional[str] = None
    request_date: date
    request_time: str

    @field_validator("education", "feedback_goal", mode="before")
    @classmethod
    def blank_is_absent(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("last_name", "first_name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        """Names are required, so blank text is rejected rather than stored"""
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("request_time")
    @classmethod
    def validate_request_time(cls, v: str) -> str:
        """Keep the raw HH:MM string, but only if it is a real time of day"""
        if not TIME_OF_DAY_PATTERN.match(v):
            raise ValueError(f"'{v}' is not a valid HH:MM time of day")
        return v

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "UserAccount":
        """
        Build a user account from a loosely-typed record.

        Raises:
            CoercionError: If a required field is missing or malformed
        """
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as e:
            error = _coercion_error(cls.__name__, e)
            logger.warning(f"Rejected user record: {error.details['fields']}")
            raise error from e

    @computed_field
    @property
    def requested_at(self) -> datetime:
        """Request date and time combined, seconds set to zero"""
        return datetime.combine(self.request_date, time.fromisoformat(self.request_time))

    @computed_field
    @property
    def month(self) -> int:
        return self.requested_at.month

    @property
    def full_name(self) -> str:
        return f"{self.last_name} {self.first_name}"

    def is_within_working_hours(self, config: Optional[RegistryConfig] = None) -> bool:
        """Check if the request time falls inside the working day, both ends included"""
        config = config or get_config()
        minutes = time_to_minutes(self.request_time)
        return config.working_hours_start_minutes <= minutes <= config.working_hours_end_minutes

    def occurs_at(self, time_string: str) -> bool:
        """Literal comparison with the raw request time ("9:15" != "09:15")"""
        return self.request_time == time_string
