"""
Core entities for the academia domain model.
"""

import csv
import io
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict, replace
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Union, overload

from .enums import AcademicStatus, Discipline, Gender, ReportFormat, Role
from .exceptions import (
    DuplicateEntityError, EnrollmentError, ResourceNotFoundError, ValidationError
)
from .identity import IdentityAllocator, default_course_allocator, default_person_allocator
from .interfaces import Reportable
from .models import ContactInfo, CourseInfo, PersonInfo

logger = logging.getLogger(__name__)


class AbstractEntity(ABC):
    """Base abstract entity with integer ID, lifecycle timestamps, and versioning."""

    def __init__(self, entity_id: int):
        self._id = entity_id
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> int:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def version(self) -> int:
        return self._version

    def touch(self) -> None:
        """Record a successful mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, version={self._version})"


class Course(AbstractEntity):
    """Catalog entry for a course. Immutable once constructed.

    Courses compare by identity: two courses with the same name, discipline
    and credits are still different courses.
    """

    def __init__(self, name: str, discipline: Union[Discipline, str], credits: int,
                 allocator: Optional[IdentityAllocator] = None):
        if isinstance(credits, bool) or not isinstance(credits, int) or credits < 1:
            raise ValidationError("Course credits must be a positive integer", details={'credits': credits})
        super().__init__((allocator or default_course_allocator).next_id())
        self._name = name
        self._discipline = Discipline(discipline)
        self._credits = credits

    @classmethod
    def from_info(cls, info: CourseInfo, allocator: Optional[IdentityAllocator] = None) -> "Course":
        return cls(info.name, info.discipline, info.credits, allocator=allocator)

    @property
    def name(self) -> str:
        return self._name

    @property
    def discipline(self) -> Discipline:
        return self._discipline

    @property
    def credits(self) -> int:
        return self._credits

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'name': self._name,
            'discipline': self._discipline.value,
            'credits': self._credits,
        })
        return base_dict


class Person(AbstractEntity):
    """Abstract base class for everyone registered at the university.

    Only ``Student`` and ``Teacher`` derive from it; the role is fixed by the
    concrete class and never changes.
    """

    def __init__(self, info: PersonInfo, allocator: Optional[IdentityAllocator] = None):
        super().__init__((allocator or default_person_allocator).next_id())
        self._first_name = info.first_name
        self._last_name = info.last_name
        self._birth_date = info.birth_date
        self._gender = Gender(info.gender)
        self._contact_info = info.contact_info.model_copy()

    @property
    @abstractmethod
    def role(self) -> Role:
        """Role tag fixed by the concrete class."""

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def birth_date(self) -> date:
        return self._birth_date

    @property
    def gender(self) -> Gender:
        return self._gender

    @property
    def contact_info(self) -> ContactInfo:
        return self._contact_info

    @property
    def full_name(self) -> str:
        return f"{self._last_name} {self._first_name}"

    @property
    def age(self) -> int:
        """Age in whole years as of today."""
        return self.age_on(date.today())

    def age_on(self, today: date) -> int:
        """Age in whole years as of ``today``."""
        age = today.year - self._birth_date.year
        if (today.month, today.day) < (self._birth_date.month, self._birth_date.day):
            age -= 1
        return age

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'role': self.role.value,
            'first_name': self._first_name,
            'last_name': self._last_name,
            'full_name': self.full_name,
            'birth_date': self._birth_date.isoformat(),
            'gender': self._gender.value,
            'contact_info': self._contact_info.model_dump(),
        })
        return base_dict


@dataclass
class AcademicPerformance:
    """Credit total and grade point average of a student."""
    total_credits: int = 0
    gpa: float = 0.0


class Student(Person):
    """Student entity with enrollment and academic status."""

    role = Role.STUDENT

    def __init__(self, info: PersonInfo, allocator: Optional[IdentityAllocator] = None):
        super().__init__(info, allocator=allocator)
        self._academic_performance = AcademicPerformance()
        self._enrolled_courses: List[Course] = []
        self._status = AcademicStatus.ACTIVE

    @property
    def status(self) -> AcademicStatus:
        return self._status

    @property
    def academic_performance(self) -> AcademicPerformance:
        return replace(self._academic_performance)

    @property
    def total_credits(self) -> int:
        return self._academic_performance.total_credits

    @property
    def gpa(self) -> float:
        return self._academic_performance.gpa

    def enroll_course(self, course: Course) -> None:
        """Enroll in a course.

        Only active students may enroll. Enrolling in the same course again is
        allowed and counts its credits again.
        """
        if self._status is not AcademicStatus.ACTIVE:
            logger.warning("Rejected enrollment of student %s in %s: status is %s",
                           self.id, course.name, self._status.value)
            raise EnrollmentError(
                "Cannot enroll: Student is not in active status",
                details={'student_id': self.id, 'status': self._status.value},
            )
        self._enrolled_courses.append(course)
        self._academic_performance.total_credits += course.credits
        self.touch()
        logger.debug("Student %s enrolled in %s (+%d credits)", self.id, course.name, course.credits)

    def get_enrolled_courses(self) -> List[Course]:
        """Get enrolled courses in enrollment order."""
        return self._enrolled_courses.copy()

    def get_average_score(self) -> float:
        return self._academic_performance.gpa

    def update_gpa(self, gpa: float) -> None:
        """Update GPA."""
        if not 0.0 <= gpa <= 4.0:
            raise ValidationError("GPA must be between 0.0 and 4.0", details={'gpa': gpa})
        self._academic_performance.gpa = gpa
        self.touch()

    def update_academic_status(self, new_status: Union[AcademicStatus, str]) -> None:
        """Set the academic status. Any status may follow any other."""
        self._status = AcademicStatus(new_status)
        self.touch()
        logger.debug("Student %s status set to %s", self.id, self._status.value)

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'status': self._status.value,
            'academic_performance': asdict(self._academic_performance),
            'enrolled_courses': [course.id for course in self._enrolled_courses],
        })
        return base_dict


class Teacher(Person):
    """Teacher entity with specializations and assigned courses."""

    role = Role.TEACHER

    def __init__(self, info: PersonInfo, specializations: Iterable[Union[Discipline, str]] = (),
                 allocator: Optional[IdentityAllocator] = None):
        super().__init__(info, allocator=allocator)
        self._specializations: List[Discipline] = []
        for discipline in specializations:
            self.add_specialization(discipline)
        self._courses: List[Course] = []

    @property
    def specializations(self) -> List[Discipline]:
        return self._specializations.copy()

    def add_specialization(self, discipline: Union[Discipline, str]) -> None:
        discipline = Discipline(discipline)
        if discipline not in self._specializations:
            self._specializations.append(discipline)

    def assign_course(self, course: Course) -> None:
        """Assign a course to teach."""
        self._courses.append(course)
        self.touch()

    def remove_course(self, course_name: str) -> None:
        """Remove every assigned course with this name. Unknown names are ignored."""
        remaining = [course for course in self._courses if course.name != course_name]
        if len(remaining) != len(self._courses):
            self._courses = remaining
            self.touch()

    def get_courses(self) -> List[Course]:
        return self._courses.copy()

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'specializations': [discipline.value for discipline in self._specializations],
            'courses': [course.id for course in self._courses],
        })
        return base_dict


PersonVariant = Union[Student, Teacher]


class Group(Reportable):
    """A roster of students taking one course with one teacher.

    A student appears at most once in the roster; membership is by identity.
    """

    def __init__(self, name: str, course: Course, teacher: Teacher):
        self._name = name
        self._course = course
        self._teacher = teacher
        self._students: List[Student] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def course(self) -> Course:
        return self._course

    @property
    def teacher(self) -> Teacher:
        return self._teacher

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student: object) -> bool:
        return any(member is student for member in self._students)

    def add_student(self, student: Student) -> None:
        if student in self:
            logger.warning("Student %s is already in group %s", student.id, self._name)
            raise DuplicateEntityError(
                "Student is already in the group",
                details={'group': self._name, 'student_id': student.id},
            )
        self._students.append(student)
        logger.debug("Added student %s to group %s", student.id, self._name)

    def remove_student_by_id(self, student_id: int) -> None:
        for index, student in enumerate(self._students):
            if student.id == student_id:
                del self._students[index]
                logger.debug("Removed student %s from group %s", student_id, self._name)
                return
        logger.warning("Student %s is not in group %s", student_id, self._name)
        raise ResourceNotFoundError(
            "Student not found in group",
            details={'group': self._name, 'student_id': student_id},
        )

    def get_average_group_score(self) -> float:
        """Mean of the members' average scores, or 0 for an empty roster."""
        if not self._students:
            return 0
        total_score = sum(student.get_average_score() for student in self._students)
        return total_score / len(self._students)

    def get_students(self) -> List[Student]:
        return self._students.copy()

    @overload
    def get_student_by_id(self, student_ids: int) -> Student: ...

    @overload
    def get_student_by_id(self, student_ids: Iterable[int]) -> List[Student]: ...

    def get_student_by_id(self, student_ids):
        """Look up members by identifier.

        A single id returns that student and raises if it is absent. A
        collection of ids returns every member whose id is in it, in roster
        order; it only raises when none of the ids match.
        """
        if isinstance(student_ids, int):
            for student in self._students:
                if student.id == student_ids:
                    return student
            raise ResourceNotFoundError(
                "Student not found for the provided ID",
                details={'group': self._name, 'student_id': student_ids},
            )

        if isinstance(student_ids, str):
            raise TypeError("Student ids must be an int or an iterable of ints, not str")
        wanted = set(student_ids)
        students = [student for student in self._students if student.id in wanted]
        if not students:
            raise ResourceNotFoundError(
                "No students found for the provided IDs",
                details={'group': self._name, 'student_ids': sorted(wanted)},
            )
        return students

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self._name,
            'course': self._course.id,
            'teacher': self._teacher.id,
            'students': [student.id for student in self._students],
        }

    def generate_report(self, format: ReportFormat, scope: Optional[Dict[str, Any]] = None) -> str:
        """Report the roster and the average score.

        ``scope`` may set ``include_contact`` to add email and phone columns.
        """
        format = ReportFormat(format)
        include_contact = bool((scope or {}).get('include_contact', False))
        rows = []
        for student in self._students:
            row = {
                'id': student.id,
                'full_name': student.full_name,
                'status': student.status.value,
                'total_credits': student.total_credits,
                'gpa': student.gpa,
            }
            if include_contact:
                row['email'] = student.contact_info.email
                row['phone'] = student.contact_info.phone
            rows.append(row)

        if format is ReportFormat.JSON:
            return json.dumps({
                'group': self._name,
                'course': self._course.name,
                'teacher': self._teacher.full_name,
                'average_score': self.get_average_group_score(),
                'students': rows,
            }, indent=2)

        fieldnames = ['id', 'full_name', 'status', 'total_credits', 'gpa']
        if include_contact:
            fieldnames += ['email', 'phone']
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=fieldnames, lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
        return buffer.getvalue()
