"""Pytest configuration and shared fixtures."""

import logging
from datetime import date

import pytest

from academia.core import (
    ContactInfo, Course, Discipline, Gender, Group, IdentityAllocator, PersonInfo,
    Student, Teacher,
)

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture
def allocator():
    """Fresh person identifier allocator starting at 1."""
    return IdentityAllocator()


@pytest.fixture
def course_allocator():
    return IdentityAllocator()


@pytest.fixture
def contact():
    return ContactInfo(email="student@example.edu", phone="+10000000000")


@pytest.fixture
def make_info(contact):
    """Factory for PersonInfo records.

    Returns:
        callable: (first_name, last_name, **overrides) -> PersonInfo
    """
    def _make(first_name="Jane", last_name="Doe", **overrides):
        fields = {
            'first_name': first_name,
            'last_name': last_name,
            'birth_date': date(2000, 1, 15),
            'gender': Gender.FEMALE,
            'contact_info': contact,
        }
        fields.update(overrides)
        return PersonInfo(**fields)
    return _make


@pytest.fixture
def make_student(make_info, allocator):
    def _make(first_name="Jane", last_name="Doe", gpa=None, **overrides):
        student = Student(make_info(first_name, last_name, **overrides), allocator=allocator)
        if gpa is not None:
            student.update_gpa(gpa)
        return student
    return _make


@pytest.fixture
def course(course_allocator):
    return Course("Algorithms", Discipline.COMPUTER_SCIENCE, 6, allocator=course_allocator)


@pytest.fixture
def teacher(make_info, allocator):
    return Teacher(make_info("Ada", "Lovelace"), [Discipline.COMPUTER_SCIENCE], allocator=allocator)


@pytest.fixture
def group(course, teacher):
    return Group("CS-101", course, teacher)
