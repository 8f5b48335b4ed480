"""Data access for the ``students`` table.

``StudentRepository`` is the store behind the students endpoints. It
knows nothing about HTTP; it loads, saves and deletes ``Student`` rows
through the session it was constructed with.
"""

import logging
from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from student_api.models.student import Student

logger = logging.getLogger(__name__)


class StudentRepository:
    """Find / save / delete operations for ``Student`` rows."""

    def __init__(self, session: Session):
        self.session = session

    def find_all(self, search: Optional[str] = None) -> List[Student]:
        """Return every student ordered by id.

        ``search`` keeps only students whose name or email contains the
        term, ignoring case.
        """
        stmt = select(Student).order_by(Student.id)
        if search:
            term = search.lower()
            # % and _ in the term are matched literally
            stmt = stmt.where(
                or_(
                    func.lower(Student.name).contains(term, autoescape=True),
                    func.lower(Student.email).contains(term, autoescape=True),
                )
            )
        return list(self.session.scalars(stmt).all())

    def find_by_id(self, student_id: int) -> Optional[Student]:
        """Return the student with this id or ``None``."""
        return self.session.get(Student, student_id)

    def save(self, student: Student) -> Student:
        """Insert a new student or update an existing one by id.

        The returned instance carries the id assigned by the database.
        """
        try:
            if student.id is None:
                self.session.add(student)
            else:
                student = self.session.merge(student)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        self.session.refresh(student)
        return student

    def delete_by_id(self, student_id: int) -> None:
        """Delete the student with this id. A missing id is a no-op."""
        student = self.find_by_id(student_id)
        if student is None:
            logger.debug(f"delete_by_id: no student {student_id}")
            return
        try:
            self.session.delete(student)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
