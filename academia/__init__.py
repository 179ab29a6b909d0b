"""
Academia: an in-memory model of a university's academic records.

Students, teachers, courses, and teaching groups, with enrollment rules
gated by academic status and roster-level score aggregation.
"""

__version__ = "1.0.0"
__author__ = "Academia Development Team"
__description__ = "In-memory university academic records model"
