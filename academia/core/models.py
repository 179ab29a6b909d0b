"""
Input records used to construct people and courses.
"""

from datetime import date

from pydantic import BaseModel, Field, PositiveInt

from .enums import Discipline, Gender


class ContactInfo(BaseModel):
    """Contact details of a person. No format checks are applied."""
    model_config = {"frozen": True}

    email: str
    phone: str


DEFAULT_CONTACT = ContactInfo(email="info@university.com", phone="+380955555555")


class PersonInfo(BaseModel):
    """Profile shared by students and teachers."""
    model_config = {"frozen": True}

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    birth_date: date
    gender: Gender
    contact_info: ContactInfo


class CourseInfo(BaseModel):
    model_config = {"frozen": True}

    name: str = Field(..., min_length=1)
    discipline: Discipline
    credits: PositiveInt
