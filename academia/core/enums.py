"""
Enumerations and constants for the academia domain model.
"""

from enum import Enum


class Role(str, Enum):
    """Roles a person can hold at the university."""
    STUDENT = "student"
    TEACHER = "teacher"


class Gender(str, Enum):
    """Gender of a person."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Discipline(str, Enum):
    """Academic disciplines a course or a teacher can belong to."""
    COMPUTER_SCIENCE = "Computer Science"
    MATHEMATICS = "Mathematics"
    PHYSICS = "Physics"
    LINGUISTICS = "Linguistics"
    CHEMISTRY = "Chemistry"


class AcademicStatus(str, Enum):
    """Academic status of a student."""
    ACTIVE = "active"
    GRADUATED = "graduated"
    ACADEMIC_LEAVE = "academic leave"
    EXPELLED = "expelled"


class ReportFormat(str, Enum):
    """Supported report formats."""
    JSON = "json"
    CSV = "csv"
