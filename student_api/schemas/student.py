from typing import Optional
from pydantic import BaseModel, ConfigDict


class StudentBase(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class StudentCreate(StudentBase):
    # An "id" sent by the client is dropped; the store assigns one
    model_config = ConfigDict(extra="ignore")


class StudentUpdate(StudentBase):
    """Fields left out of the request body keep their stored value."""
    model_config = ConfigDict(extra="ignore")


class Student(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
