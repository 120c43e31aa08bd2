"""Validation of asset and liability form submissions."""

import re
from collections.abc import Mapping
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.domain.constants import (
    CATEGORY_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    MONEY_PRECISION,
    MONEY_SCALE,
    NAME_MAX_LENGTH,
)
from src.domain.errors import EntryValidationError
from src.domain.models import EntryDraft, EntryKind
from src.utils.decimal_utils import coerce_decimal


INVALID_VALUE_MESSAGE = "Please enter a valid positive number"
MAX_VALUE = Decimal(10) ** (MONEY_PRECISION - MONEY_SCALE) - Decimal("0.01")
PLAIN_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


class EntryForm(BaseModel):
    """Raw form contract shared by asset and liability forms."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    category: str = Field(min_length=1, max_length=CATEGORY_MAX_LENGTH)
    value: str
    description: str | None = Field(
        default=None,
        max_length=DESCRIPTION_MAX_LENGTH,
    )

    @field_validator("value", mode="before")
    @classmethod
    def _stringify_value(cls, raw):
        if isinstance(raw, (int, float, Decimal)) and not isinstance(raw, bool):
            return str(raw)
        return raw

    @field_validator("value")
    @classmethod
    def _check_value(cls, raw: str) -> str:
        if not PLAIN_NUMBER.fullmatch(raw):
            raise ValueError(INVALID_VALUE_MESSAGE)
        try:
            amount = coerce_decimal(raw)
        except ValueError:
            raise ValueError(INVALID_VALUE_MESSAGE) from None
        if not raw or amount < 0:
            raise ValueError(INVALID_VALUE_MESSAGE)
        if amount > MAX_VALUE:
            raise ValueError("Value too large")
        return raw

    @field_validator("description")
    @classmethod
    def _blank_description_to_none(cls, raw: str | None) -> str | None:
        return raw or None


def _field_messages(kind: EntryKind) -> dict[tuple[str, str], str]:
    return {
        ("name", "missing"): f"{kind.label} name is required",
        ("name", "string_too_short"): f"{kind.label} name is required",
        ("name", "string_too_long"): "Name too long",
        ("category", "missing"): "Category is required",
        ("category", "string_too_short"): "Category is required",
        ("category", "string_too_long"): "Category too long",
        ("value", "missing"): INVALID_VALUE_MESSAGE,
        ("value", "string_type"): INVALID_VALUE_MESSAGE,
        ("description", "string_too_long"): "Description too long",
    }


def _collect_field_errors(
    exc: ValidationError,
    kind: EntryKind,
) -> dict[str, str]:
    messages = _field_messages(kind)
    field_errors: dict[str, str] = {}
    for error in exc.errors():
        field_name = str(error["loc"][0]) if error["loc"] else "form"
        if field_name in field_errors:
            continue
        message = messages.get((field_name, error["type"]))
        if message is None:
            message = error["msg"].removeprefix("Value error, ")
        field_errors[field_name] = message
    return field_errors


def validate_entry_form(
    data: Mapping,
    kind: EntryKind = EntryKind.ASSET,
) -> EntryDraft:
    """Validate raw form input and convert it into an entry draft.

    Args:
        data: Submitted fields (name, category, value, description).
        kind: Entry kind, used to word error messages.

    Returns:
        EntryDraft: Stripped text fields and a Decimal value.

    Raises:
        EntryValidationError: With one message per invalid field.
    """
    try:
        form = EntryForm.model_validate(dict(data))
    except ValidationError as exc:
        raise EntryValidationError(_collect_field_errors(exc, kind)) from exc
    return EntryDraft(
        name=form.name,
        category=form.category,
        value=coerce_decimal(form.value),
        description=form.description,
    )


__all__ = [
    "EntryForm",
    "INVALID_VALUE_MESSAGE",
    "validate_entry_form",
]
