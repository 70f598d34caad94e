"""
Payload validation for create and update operations.

Payloads arrive either as raw mappings (decoded JSON) or as already parsed
schema objects. Both pass through here before any repository is touched, so
a rejected payload never leaves a partial mutation behind.
"""
from datetime import timezone, tzinfo
from typing import Any, Dict, Mapping, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from zooco.core.errors import ValidationError
from zooco.core.logging import logger
from zooco.core.timeslots import to_local
from zooco.schemas.pet import PetCreate, PetUpdate
from zooco.schemas.reminder import ReminderCreate, ReminderUpdate

ModelT = TypeVar("ModelT", bound=BaseModel)
Payload = Union[Mapping[str, Any], BaseModel]

# Fields a patch may omit but must not null out
REMINDER_REQUIRED_FIELDS = ("title", "pet_id", "category", "start_date_time", "frequency")
PET_REQUIRED_FIELDS = ("name", "type", "owner")


def describe_errors(exc) -> str:
    """One-line summary of a pydantic or FastAPI request validation error."""
    missing = []
    invalid = []
    for error in exc.errors():
        loc = list(error["loc"])
        # Request-body errors from FastAPI are prefixed with "body"
        if len(loc) > 1 and loc[0] == "body":
            loc = loc[1:]
        location = ".".join(str(part) for part in loc) or "body"
        if error["type"] == "missing":
            missing.append(location)
        else:
            invalid.append(f"{location}: {error['msg']}")

    parts = []
    if missing:
        parts.append("Missing required fields: " + ", ".join(missing))
    parts.extend(invalid)
    return "; ".join(parts)


def _parse(model_cls: Type[ModelT], payload: Payload) -> ModelT:
    if payload is None:
        raise ValidationError("Request body is required")
    if isinstance(payload, model_cls):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    try:
        return model_cls.model_validate(payload)
    except PydanticValidationError as e:
        message = describe_errors(e)
        logger.warning("Rejected %s payload: %s", model_cls.__name__, message)
        raise ValidationError(message) from e


def _reject_nulls(model: BaseModel, required: tuple) -> None:
    nulled = [f for f in required if f in model.model_fields_set and getattr(model, f) is None]
    if nulled:
        logger.warning("Rejected %s payload nulling %s", type(model).__name__, nulled)
        raise ValidationError("Required fields cannot be null: " + ", ".join(nulled))


def _normalize_start(data: Dict[str, Any], tz: tzinfo) -> Dict[str, Any]:
    # Instants are stored as aware UTC; naive input is read as local time
    start = data.get("start_date_time")
    if start is not None:
        data["start_date_time"] = to_local(start, tz).astimezone(timezone.utc)
    return data


def validate_reminder_create(payload: Payload, tz: tzinfo = timezone.utc) -> Dict[str, Any]:
    """Validate a new reminder, returning the normalised field values."""
    model = _parse(ReminderCreate, payload)
    return _normalize_start(model.model_dump(), tz)


def validate_reminder_update(payload: Payload, tz: tzinfo = timezone.utc) -> Dict[str, Any]:
    """Validate a partial reminder patch, returning only the fields it sets."""
    model = _parse(ReminderUpdate, payload)
    _reject_nulls(model, REMINDER_REQUIRED_FIELDS)
    return _normalize_start(model.model_dump(exclude_unset=True), tz)


def validate_pet_create(payload: Payload) -> Dict[str, Any]:
    return _parse(PetCreate, payload).model_dump()


def validate_pet_update(payload: Payload) -> Dict[str, Any]:
    model = _parse(PetUpdate, payload)
    _reject_nulls(model, PET_REQUIRED_FIELDS)
    return model.model_dump(exclude_unset=True)
