# api/models/person.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

AGE_MIN = 0
AGE_MAX = 140

# SQLite INTEGER columns are signed 64-bit
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class PersonCreate(BaseModel):
    name: str
    age: int


class PersonOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str
    age: int


class PersonPayload(BaseModel):
    """Body of an AJAX create request; types are not coerced."""

    name: StrictStr
    age: StrictInt = Field(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)

    def to_create(self) -> PersonCreate:
        return PersonCreate(name=self.name, age=self.age)


class PersonForm(BaseModel):
    id: Optional[int] = Field(default=None, ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)
    name: str = Field(min_length=1)
    age: int = Field(ge=AGE_MIN, le=AGE_MAX)

    @classmethod
    def from_person(cls, person: PersonOut) -> "PersonForm":
        return cls(id=person.id, name=person.name, age=person.age)

    def to_create(self) -> PersonCreate:
        return PersonCreate(name=self.name, age=self.age)
