import logging
from typing import List, Optional

from student_api.core.exceptions import StudentNotFoundError
from student_api.models.student import Student
from student_api.repositories.student import StudentRepository
from student_api.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


class StudentService:
    """
    The five student operations, each one a call into the store.

    A miss on get/update returns None unless ``strict_not_found`` is set,
    in which case StudentNotFoundError is raised instead.
    """

    def __init__(self, store: StudentRepository, strict_not_found: bool = False):
        self.store = store
        self.strict_not_found = strict_not_found

    def _missing(self, student_id: int) -> None:
        logger.info(f"Student {student_id} not found")
        if self.strict_not_found:
            raise StudentNotFoundError(student_id)
        return None

    def list_students(self, search: Optional[str] = None) -> List[Student]:
        """All students, optionally filtered by name/email"""
        return self.store.find_all(search=search)

    def get_student(self, student_id: int) -> Optional[Student]:
        student = self.store.find_by_id(student_id)
        if student is None:
            return self._missing(student_id)
        return student

    def create_student(self, payload: StudentCreate) -> Student:
        student = self.store.save(Student(name=payload.name, email=payload.email))
        logger.info(f"Created student {student.id}")
        return student

    def update_student(self, student_id: int, payload: StudentUpdate) -> Optional[Student]:
        """Overwrite the name/email fields present in the payload; the id never changes."""
        student = self.store.find_by_id(student_id)
        if student is None:
            return self._missing(student_id)

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(student, field, value)

        student = self.store.save(student)
        logger.info(f"Updated student {student_id}")
        return student

    def delete_student(self, student_id: int) -> None:
        self.store.delete_by_id(student_id)
        logger.info(f"Deleted student {student_id}")
