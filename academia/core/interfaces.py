"""
Core interfaces for the academia domain model.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .enums import ReportFormat


class Reportable(ABC):
    """Interface for entities that can generate reports."""

    @abstractmethod
    def generate_report(self, format: ReportFormat, scope: Optional[Dict[str, Any]] = None) -> str:
        """Generate a report in the specified format."""
        pass
