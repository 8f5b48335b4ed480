from typing import List, Optional
from fastapi import APIRouter, Depends, Response, status
from student_api.api.deps import get_student_service
from student_api.schemas.student import Student, StudentCreate, StudentUpdate
from student_api.services.student.student import StudentService

router = APIRouter()


@router.get("", response_model=List[Student])
def get_students(
    search: Optional[str] = None,
    service: StudentService = Depends(get_student_service)
):
    """
    List all students

    - **search**: only students whose name or email contains this text (case-insensitive)
    """
    return service.list_students(search=search)


@router.get("/{student_id}", response_model=Optional[Student])
def get_student(
    student_id: int,
    service: StudentService = Depends(get_student_service)
):
    """
    Get one student by ID. Answers `null` when there is no such student.
    """
    return service.get_student(student_id)


@router.post("", response_model=Student)
def create_student(
    student: StudentCreate,
    service: StudentService = Depends(get_student_service)
):
    """
    Create a student

    - **name**: student name
    - **email**: student email

    Any `id` in the body is ignored.
    """
    return service.create_student(student)


@router.put("/{student_id}", response_model=Optional[Student])
def update_student(
    student_id: int,
    student: StudentUpdate,
    service: StudentService = Depends(get_student_service)
):
    """
    Update a student's name and/or email. Answers `null` when there is no such student.
    """
    return service.update_student(student_id, student)


@router.delete("/{student_id}", status_code=status.HTTP_200_OK, response_class=Response)
def delete_student(
    student_id: int,
    service: StudentService = Depends(get_student_service)
):
    """
    Delete a student. Deleting an unknown ID succeeds as well.
    """
    service.delete_student(student_id)
    return Response(status_code=status.HTTP_200_OK)
