"""
Custom exceptions for the academia domain model.
"""

from typing import Optional, Any, Dict


class UniversityError(Exception):
    """Base exception for all domain rule violations."""

    default_code = "UNIVERSITY_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}


class DuplicateEntityError(UniversityError):
    """Raised when a student is added to a group twice."""
    default_code = "ALREADY_IN_GROUP"


class ResourceNotFoundError(UniversityError):
    """Raised when a requested student is not found."""
    default_code = "NOT_FOUND"


class EnrollmentError(UniversityError):
    """Raised when enrollment operations fail."""
    default_code = "NOT_ACTIVE"


class ValidationError(UniversityError):
    """Raised when data validation fails."""
    default_code = "INVALID_VALUE"


class ConfigurationError(UniversityError):
    """Raised when configuration is invalid."""
    default_code = "INVALID_CONFIG"
