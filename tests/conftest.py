import pytest

from roomtable.config.time_config import get_active_config
from roomtable.models.course import LAB, THEORY, CourseRequest
from roomtable.scheduler.timetable_scheduler import TimetableScheduler


@pytest.fixture
def config():
    return get_active_config()


@pytest.fixture
def scheduler(config):
    return TimetableScheduler(config)


def theory(code="CS101", sessions=1, consistent=False, floor=None, room=None):
    return CourseRequest(f"Course {code}", code, "Dr. Rao", THEORY, sessions, consistent, floor, room)


def lab(code="CS201", sessions=1, consistent=False, floor=None, room=None):
    return CourseRequest(f"Course {code}", code, "Dr. Rao", LAB, sessions, consistent, floor, room)
