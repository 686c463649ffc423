"""
Person models — the create payload and the stored record.

Field names are English in Python and Portuguese on the wire
(``nome``, ``apelido``, ``nascimento``). Length limits are enforced here,
once, when a request body is parsed; stored records are frozen and never
re-validated.
"""

import re
import uuid
from datetime import date
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Annotated

NAME_MAX_LENGTH = 100
NICKNAME_MAX_LENGTH = 32
STACK_ITEM_MAX_LENGTH = 32

_BIRTH_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

StackItem = Annotated[str, Field(max_length=STACK_ITEM_MAX_LENGTH)]


class NewPerson(BaseModel):
    """Body of ``POST /pessoas``. The id is generated by the server.

    Only the Portuguese keys are accepted, and ``nascimento`` must be a
    plain ``YYYY-MM-DD`` string.
    """

    name: str = Field(..., alias="nome", max_length=NAME_MAX_LENGTH)
    nickname: str = Field(..., alias="apelido", max_length=NICKNAME_MAX_LENGTH)
    birth_date: date = Field(..., alias="nascimento")
    stack: Optional[List[StackItem]] = None

    @field_validator("birth_date", mode="before")
    @classmethod
    def require_calendar_date(cls, value: Any) -> Any:
        if type(value) is date:
            return value
        if isinstance(value, str) and _BIRTH_DATE_PATTERN.fullmatch(value):
            return value
        raise ValueError("nascimento must be a date formatted as YYYY-MM-DD")


class Person(BaseModel):
    """A stored person record."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: uuid.UUID
    name: str = Field(..., alias="nome")
    nickname: str = Field(..., alias="apelido")
    birth_date: date = Field(..., alias="nascimento")
    stack: Optional[List[str]] = None

    @classmethod
    def from_new(cls, person_id: uuid.UUID, new_person: NewPerson) -> "Person":
        return cls(
            id=person_id,
            name=new_person.name,
            nickname=new_person.nickname,
            birth_date=new_person.birth_date,
            stack=list(new_person.stack) if new_person.stack is not None else None,
        )
