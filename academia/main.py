"""
Main entry point for the academia runner.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from .config import configure_logging, default_contact, load_config, validate_config
from .core.entities import Course, Group
from .core.enums import AcademicStatus, Discipline, Gender, ReportFormat, Role
from .core.exceptions import UniversityError
from .core.identity import IdentityAllocator
from .core.models import PersonInfo
from .core.university import University

logger = logging.getLogger(__name__)


def build_demo_university(config: Dict[str, Any]) -> University:
    """Seed a university with a course catalog, a teacher, and one group."""
    university = University.from_config(config)
    contact = default_contact(config)
    course_ids = IdentityAllocator()

    algorithms = Course("Algorithms", Discipline.COMPUTER_SCIENCE, 6, allocator=course_ids)
    calculus = Course("Calculus", Discipline.MATHEMATICS, 5, allocator=course_ids)
    for course in (algorithms, calculus):
        university.add_course(course)
    print(f"✓ Registered {len(university.get_courses())} courses")

    teacher = university.create_teacher(
        PersonInfo(first_name="Ada", last_name="Lovelace", birth_date=date(1980, 12, 10),
                   gender=Gender.FEMALE, contact_info=contact),
        specializations=[Discipline.COMPUTER_SCIENCE, Discipline.MATHEMATICS],
    )
    teacher.assign_course(algorithms)

    group = Group("CS-101", algorithms, teacher)
    university.add_group(group)

    roster = [
        ("Alan", "Turing", date(2003, 6, 23), Gender.MALE, 3.9),
        ("Grace", "Hopper", date(2004, 12, 9), Gender.FEMALE, 3.4),
        ("Edsger", "Dijkstra", date(2002, 5, 11), Gender.MALE, 2.8),
    ]
    for first_name, last_name, birth_date, gender, gpa in roster:
        student = university.create_student(
            PersonInfo(first_name=first_name, last_name=last_name, birth_date=birth_date,
                       gender=gender, contact_info=contact)
        )
        student.update_gpa(gpa)
        student.enroll_course(algorithms)
        group.add_student(student)
    print(f"✓ Group {group.name} has {len(group)} students")

    on_leave = group.get_students()[-1]
    on_leave.update_academic_status(AcademicStatus.ACADEMIC_LEAVE)
    try:
        on_leave.enroll_course(calculus)
    except UniversityError as e:
        print(f"✗ {on_leave.full_name}: {e.message} [{e.error_code}]")

    return university


def run(config: Dict[str, Any], demo: bool = False, report_format: ReportFormat = ReportFormat.JSON) -> str:
    """Build the university and return its report."""
    if demo:
        print("Seeding demo university...")
        university = build_demo_university(config)
    else:
        university = University.from_config(config)
    logger.info("%s: %d students, %d teachers", university.name,
                len(university.get_all_people_by_role(Role.STUDENT)),
                len(university.get_all_people_by_role(Role.TEACHER)))
    return university.generate_report(report_format)


def main(argv: Optional[list] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Academia university records")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--demo", action="store_true", help="Seed and report a demo university")
    parser.add_argument("--log-level", type=str, help="Override the configured log level")
    parser.add_argument("--format", choices=[f.value for f in ReportFormat], default=ReportFormat.JSON.value,
                        help="Report format")

    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.log_level:
        config['log_level'] = args.log_level
        validate_config(config)
    configure_logging(config)

    print(run(config, demo=args.demo, report_format=ReportFormat(args.format)))


if __name__ == "__main__":
    main()
