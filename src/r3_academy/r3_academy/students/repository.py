from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note: services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        """All students in seed order."""

        raise NotImplementedError
