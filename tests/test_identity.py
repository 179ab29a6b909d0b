"""Tests for identifier allocation."""

import pytest

from academia.core import Course, Discipline, IdentityAllocator, Student, Teacher
from academia.core.identity import default_person_allocator


def test_allocator_starts_at_one():
    allocator = IdentityAllocator()

    assert allocator.next_id() == 1
    assert allocator.next_id() == 2
    assert allocator.next_id() == 3


def test_allocator_custom_start_and_peek():
    allocator = IdentityAllocator(start=100)

    assert allocator.peek() == 100
    assert allocator.peek() == 100
    assert allocator.next_id() == 100
    assert allocator.peek() == 101


def test_allocator_iterator_protocol():
    allocator = IdentityAllocator()

    assert next(allocator) == 1
    assert [next(allocator) for _ in range(3)] == [2, 3, 4]


def test_allocator_rejects_non_positive_start():
    with pytest.raises(ValueError):
        IdentityAllocator(start=0)


def test_people_get_distinct_increasing_ids(make_info, allocator):
    """Students and teachers share one sequence, one id per construction."""
    people = [
        Student(make_info("A", "One"), allocator=allocator),
        Teacher(make_info("B", "Two"), allocator=allocator),
        Student(make_info("C", "Three"), allocator=allocator),
        Teacher(make_info("D", "Four"), allocator=allocator),
    ]

    ids = [person.id for person in people]
    assert ids == [1, 2, 3, 4]
    assert len(set(ids)) == len(ids)


def test_default_allocator_is_used_when_none_injected(make_info):
    expected = default_person_allocator.peek()

    first = Student(make_info())
    second = Teacher(make_info())

    assert first.id == expected
    assert second.id == expected + 1


def test_course_construction_does_not_consume_person_ids(make_info):
    expected = default_person_allocator.peek()

    Course("Physics I", Discipline.PHYSICS, 4)
    Course("Physics II", Discipline.PHYSICS, 4)
    student = Student(make_info())

    assert student.id == expected
    assert default_person_allocator.peek() == expected + 1
