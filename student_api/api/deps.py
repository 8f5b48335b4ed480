from fastapi import Depends
from sqlalchemy.orm import Session
from student_api.core.config import settings
from student_api.core.database import get_db
from student_api.repositories.student import StudentRepository
from student_api.services.student.student import StudentService


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    """Store bound to the request's database session."""
    return StudentRepository(db)


def get_student_service(
    store: StudentRepository = Depends(get_student_repository),
) -> StudentService:
    return StudentService(store, strict_not_found=settings.STRICT_NOT_FOUND)
