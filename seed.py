import logging
from student_api.core.database import SessionLocal, create_database_tables
from student_api.models.student import Student

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    ("Ada Lovelace", "ada@example.com"),
    ("Grace Hopper", "grace@example.com"),
    ("Alan Turing", "alan@example.com"),
]


def seed_data(session_factory=SessionLocal) -> int:
    """
    Insert sample students into an empty database.

    Returns the number of students inserted (0 if data already exists).
    """
    db = session_factory()
    try:
        # Never duplicate an existing data set
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return 0

        logger.info("Seeding data...")
        db.add_all([Student(name=name, email=email) for name, email in SAMPLE_STUDENTS])
        db.commit()

        logger.info(f"Seeded {len(SAMPLE_STUDENTS)} students")
        return len(SAMPLE_STUDENTS)

    except Exception as e:
        logger.error(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    create_database_tables()
    seed_data()
