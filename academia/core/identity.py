"""
Monotonic integer identifiers for domain entities.
"""

import threading


class IdentityAllocator:
    """Hands out strictly increasing integer identifiers.

    Identifiers are never reused or reset. An allocator is usually shared by
    everything constructed within one context; the module-level defaults give
    the process-wide behaviour when nothing is injected.
    """

    def __init__(self, start: int = 1):
        if start < 1:
            raise ValueError("Identifiers start at 1 or above")
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Allocate the next identifier."""
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        """Return the identifier the next call will allocate."""
        with self._lock:
            return self._next

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next_id()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(next={self._next})"


default_person_allocator = IdentityAllocator()
default_course_allocator = IdentityAllocator()
