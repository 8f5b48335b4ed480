# student_api/core/logging.py
import logging
import sys

from student_api.core.config import settings


# Configure standard Python logging
def setup_logging(level: str = settings.LOG_LEVEL) -> logging.Logger:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)  # Print logs to console
        ]
    )
    return logging.getLogger("student_api")


logger = setup_logging()
