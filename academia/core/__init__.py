"""
Core module containing the domain model and its error taxonomy.
"""

from .entities import *
from .enums import *
from .exceptions import *
from .identity import *
from .interfaces import *
from .models import *
from .university import *

__all__ = [
    # Entities
    "AbstractEntity",
    "AcademicPerformance",
    "Person",
    "PersonVariant",
    "Student",
    "Teacher",
    "Course",
    "Group",
    "University",

    # Records
    "ContactInfo",
    "PersonInfo",
    "CourseInfo",
    "DEFAULT_CONTACT",

    # Identity
    "IdentityAllocator",
    "default_person_allocator",
    "default_course_allocator",

    # Interfaces
    "Reportable",

    # Enums
    "Role",
    "Gender",
    "Discipline",
    "AcademicStatus",
    "ReportFormat",

    # Exceptions
    "UniversityError",
    "DuplicateEntityError",
    "ResourceNotFoundError",
    "EnrollmentError",
    "ValidationError",
    "ConfigurationError",
]
