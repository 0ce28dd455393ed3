# backend/core/schemas.py
from datetime import datetime
from typing import Annotated, ClassVar, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every request/response schema.

    Columns stay snake_case in Python and in the database; JSON on the wire
    is camelCase. Incoming bodies may use either spelling.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PatchModel(CamelModel):
    """
    Base for partial-update bodies. Every field is optional, but the fields
    named in `not_null` map to NOT NULL columns: they may be left out, never
    sent as null.
    """
    not_null: ClassVar[Tuple[str, ...]] = ()

    @field_validator("*")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name in cls.not_null:
            raise ValueError("may not be null")
        return value


def _date_only_to_datetime(value):
    # the web forms send "YYYY-MM-DD" for date-time columns
    if isinstance(value, str) and len(value) == 10:
        return datetime.fromisoformat(value)
    return value


FlexibleDateTime = Annotated[datetime, BeforeValidator(_date_only_to_datetime)]
