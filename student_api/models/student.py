from sqlalchemy import Column, Integer, String
from student_api.core.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, nullable=True)

    def __repr__(self) -> str:
        return f"<Student id={self.id} name={self.name!r} email={self.email!r}>"
