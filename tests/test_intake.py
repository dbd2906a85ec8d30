import pandas as pd
import pytest

from roomtable.errors import IntakeError
from roomtable.intake import build_course_request, load_course_requests


def test_build_normalises_fields():
    course = build_course_request("  Physics ", "PH110", "Dr. Iyer", kind="lab",
                                  sessions_per_week="2", consistent_room="yes", floor="3", room=5.0)
    assert course.name == "Physics"
    assert course.kind == "Lab"
    assert course.sessions_per_week == 2
    assert course.consistent_room is True
    assert course.preferred_location == (3, 5)


def test_build_defaults():
    course = build_course_request("Maths", "MA101", "Dr. Rao")
    assert course.kind == "Theory"
    assert course.sessions_per_week == 1
    assert not course.consistent_room
    assert course.preferred_floor is None and course.preferred_room is None


@pytest.mark.parametrize("room", [14, 15, "14"])
def test_teacher_rooms_are_rejected(room):
    with pytest.raises(IntakeError, match="reserved for teachers"):
        build_course_request("Maths", "MA101", "Dr. Rao", floor=3, room=room)


@pytest.mark.parametrize("kwargs, message", [
    (dict(name=""), "required fields"),
    (dict(instructor="   "), "required fields"),
    (dict(kind="seminar"), "Theory or Lab"),
    (dict(sessions_per_week=0), "between 1 and 5"),
    (dict(sessions_per_week=6), "between 1 and 5"),
    (dict(sessions_per_week="two"), "must be a number"),
    (dict(sessions_per_week="1e400"), "must be a number"),
    (dict(floor="inf"), "must be a number"),
    (dict(floor=8), "Floor"),
    (dict(floor=1, room=0), "Room must be between"),
    (dict(room=4), "floor"),
    (dict(consistent_room="maybe"), "yes/no"),
])
def test_invalid_fields_are_rejected(kwargs, message):
    fields = dict(name="Maths", code="MA101", instructor="Dr. Rao")
    fields.update(kwargs)
    with pytest.raises(IntakeError, match=message):
        build_course_request(**fields)


def test_intake_error_is_a_value_error():
    with pytest.raises(ValueError):
        build_course_request("", "MA101", "Dr. Rao")


def test_load_from_dataframe_with_column_variants():
    df = pd.DataFrame([
        {"Title": "Maths", "code": "MA101", "Faculty": "Dr. Rao", "type": "theory",
         "sessions per week": 3, "consistent_room": True, "floor": None, "room": None},
        {"Title": "Physics Lab", "code": "PH110", "Faculty": "Dr. Iyer", "type": "Lab",
         "sessions per week": 1, "consistent_room": False, "floor": 2, "room": 7},
    ])
    maths, physics = load_course_requests(df)
    assert (maths.code, maths.sessions_per_week, maths.consistent_room) == ("MA101", 3, True)
    assert maths.preferred_location is None
    assert physics.is_lab
    assert physics.preferred_location == (2, 7)


def test_load_from_csv(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text(
        "Course Name,Course Code,Instructor,Type,Sessions,Consistent Room,Floor,Room\n"
        "Maths,MA101,Dr. Rao,Theory,2,no,,\n"
        "Chemistry Lab,CH120,Dr. Sen,Lab,,yes,4,\n"
    )
    maths, chem = load_course_requests(str(path))
    assert maths.sessions_per_week == 2 and not maths.consistent_room
    assert chem.sessions_per_week == 1 and chem.consistent_room
    assert chem.preferred_floor == 4 and chem.preferred_room is None


def test_load_names_the_bad_row(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text(
        "Course Name,Course Code,Instructor,Floor,Room\n"
        "Maths,MA101,Dr. Rao,,\n"
        "Physics,PH101,Dr. Iyer,3,14\n"
    )
    with pytest.raises(IntakeError, match="Row 2: Rooms 14 and 15"):
        load_course_requests(str(path))


def test_load_rejects_other_inputs():
    with pytest.raises(ValueError):
        load_course_requests(42)
