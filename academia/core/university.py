"""
University registry of courses, groups, and people.
"""

import csv
import io
import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Union, assert_never

from .entities import Course, Group, PersonVariant, Student, Teacher
from .enums import Discipline, ReportFormat, Role
from .identity import IdentityAllocator, default_person_allocator
from .interfaces import Reportable
from .models import PersonInfo

logger = logging.getLogger(__name__)


class University(Reportable):
    """Top-level registry.

    The registries are append-only and do not check for duplicates; rules are
    enforced by the entities themselves.
    """

    def __init__(self, name: str, allocator: Optional[IdentityAllocator] = None):
        self._name = name
        self._allocator = allocator or default_person_allocator
        self._courses: List[Course] = []
        self._groups: List[Group] = []
        self._people: List[PersonVariant] = []

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "University":
        """Build a university with its own allocator from a loaded config."""
        return cls(config['university_name'], allocator=IdentityAllocator(config['id_start']))

    @property
    def name(self) -> str:
        return self._name

    @property
    def allocator(self) -> IdentityAllocator:
        return self._allocator

    def add_course(self, course: Course) -> None:
        self._courses.append(course)
        logger.debug("Registered course %s at %s", course.name, self._name)

    def add_group(self, group: Group) -> None:
        self._groups.append(group)
        logger.debug("Registered group %s at %s", group.name, self._name)

    def add_person(self, person: PersonVariant) -> None:
        self._people.append(person)
        logger.debug("Registered %s %s at %s", person.role.value, person.id, self._name)

    def create_student(self, info: PersonInfo) -> Student:
        """Construct a student with this university's allocator and register it."""
        student = Student(info, allocator=self._allocator)
        self.add_person(student)
        return student

    def create_teacher(self, info: PersonInfo,
                       specializations: Iterable[Union[Discipline, str]] = ()) -> Teacher:
        """Construct a teacher with this university's allocator and register it."""
        teacher = Teacher(info, specializations, allocator=self._allocator)
        self.add_person(teacher)
        return teacher

    def get_courses(self) -> List[Course]:
        return self._courses.copy()

    def get_groups(self) -> List[Group]:
        return self._groups.copy()

    def get_people(self) -> List[PersonVariant]:
        return self._people.copy()

    def find_group_by_course(self, course: Course) -> Optional[Group]:
        """First group teaching this exact course object, or ``None``."""
        for group in self._groups:
            if group.course is course:
                return group
        return None

    def get_all_people_by_role(self, role: Role) -> List[PersonVariant]:
        """People with the given role, in registration order."""
        match role:
            case Role.STUDENT:
                return [person for person in self._people if isinstance(person, Student)]
            case Role.TEACHER:
                return [person for person in self._people if isinstance(person, Teacher)]
            case _:
                assert_never(role)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self._name,
            'courses': [course.to_dict() for course in self._courses],
            'groups': [group.to_dict() for group in self._groups],
            'people': [person.to_dict() for person in self._people],
        }

    def generate_report(self, format: ReportFormat, scope: Optional[Dict[str, Any]] = None) -> str:
        """Summarize registry sizes and group averages.

        ``scope`` may set ``groups`` to a group name or a list of names to restrict the
        per-group section.
        """
        format = ReportFormat(format)
        wanted = (scope or {}).get('groups')
        if isinstance(wanted, str):
            wanted = [wanted]
        groups = [group for group in self._groups if wanted is None or group.name in wanted]
        group_rows = [
            {
                'group': group.name,
                'course': group.course.name,
                'teacher': group.teacher.full_name,
                'students': len(group),
                'average_score': group.get_average_group_score(),
            }
            for group in groups
        ]

        if format is ReportFormat.JSON:
            return json.dumps({
                'university': self._name,
                'courses': len(self._courses),
                'groups': len(self._groups),
                'people': {role.value: len(self.get_all_people_by_role(role)) for role in Role},
                'group_summary': group_rows,
            }, indent=2)

        buffer = io.StringIO()
        writer = csv.DictWriter(
            buffer,
            fieldnames=['group', 'course', 'teacher', 'students', 'average_score'],
            lineterminator="\n",
        )
        writer.writeheader()
        writer.writerows(group_rows)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(name={self._name!r}, courses={len(self._courses)}, "
                f"groups={len(self._groups)}, people={len(self._people)})")
