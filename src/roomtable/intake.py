"""
src/roomtable/intake.py
=======================
Builds validated CourseRequest records from user input, either field by field
or from a courses table (DataFrame or CSV path).

Invalid input never reaches the scheduler: it is rejected here with an
IntakeError.
"""

import math

import pandas as pd

from roomtable.config.time_config import get_active_config
from roomtable.errors import IntakeError
from roomtable.models.course import LAB, THEORY, CourseRequest

COLUMNS = ["Course Name", "Course Code", "Instructor", "Type",
           "Sessions", "Consistent Room", "Floor", "Room"]

_TRUE = {"1", "true", "yes", "y", "x"}
_FALSE = {"", "0", "false", "no", "n", "nan", "none"}


def _missing(v):
    return v is None or (not isinstance(v, str) and pd.isna(v))


def _text(v):
    return "" if _missing(v) else str(v).strip()


def _to_optional_int(v, field_name):
    if _missing(v):
        return None
    s = str(v).strip()
    if s == "" or s.lower() in ("auto", "none", "nan"):
        return None
    try:
        f = float(s)
    except ValueError:
        raise IntakeError(f"{field_name} must be a number, got {v!r}") from None
    if not math.isfinite(f):
        raise IntakeError(f"{field_name} must be a number, got {v!r}")
    if f != int(f):
        raise IntakeError(f"{field_name} must be a whole number, got {v!r}")
    return int(f)


def _to_bool(v):
    if isinstance(v, bool):
        return v
    if _missing(v):
        return False
    s = str(v).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise IntakeError(f"Consistent room must be yes/no, got {v!r}")


def _normalize_kind(kind, config):
    s = _text(kind).lower() or THEORY.lower()
    for k in config.get("durations", {THEORY: 1, LAB: 2}):
        if s == k.lower():
            return k
    raise IntakeError(f"Class type must be Theory or Lab, got {kind!r}")


def build_course_request(name, code, instructor, kind=THEORY, sessions_per_week=1,
                         consistent_room=False, floor=None, room=None, config=None):
    config = config or get_active_config()
    name = _text(name)
    code = _text(code)
    instructor = _text(instructor)
    if not name or not code or not instructor:
        raise IntakeError("Please fill in all required fields!")

    kind = _normalize_kind(kind, config)

    sessions = _to_optional_int(sessions_per_week, "Sessions per week")
    sessions = 1 if sessions is None else sessions
    max_sessions = config.get("max_sessions_per_week", 5)
    if not 1 <= sessions <= max_sessions:
        raise IntakeError(f"Sessions per week must be between 1 and {max_sessions}, got {sessions}")

    floor = _to_optional_int(floor, "Floor")
    room = _to_optional_int(room, "Room")
    floors = config.get("floors", range(1, 8))
    if floor is not None and floor not in floors:
        raise IntakeError(f"Floor must be between {min(floors)} and {max(floors)}, got {floor}")
    if room is not None:
        if room in config.get("reserved_rooms", (14, 15)):
            raise IntakeError("Rooms 14 and 15 are reserved for teachers only!")
        rooms_per_floor = config.get("rooms_per_floor", 13)
        if not 1 <= room <= rooms_per_floor:
            raise IntakeError(f"Room must be between 1 and {rooms_per_floor}, got {room}")
        if floor is None:
            raise IntakeError("Choose a floor before choosing a room")

    return CourseRequest(
        name=name,
        code=code,
        instructor=instructor,
        kind=kind,
        sessions_per_week=sessions,
        consistent_room=_to_bool(consistent_room),
        preferred_floor=floor,
        preferred_room=room,
    )


def _canonical_columns(df):
    df.columns = [str(c).strip() for c in df.columns]
    rename_map = {}
    for c in df.columns:
        low = c.lower()
        if low in ("course name", "course title", "title", "name"):
            rename_map[c] = "Course Name"
        if low in ("course code", "code"):
            rename_map[c] = "Course Code"
        if low in ("instructor", "faculty", "teacher", "lecturer"):
            rename_map[c] = "Instructor"
        if low in ("type", "class type", "kind"):
            rename_map[c] = "Type"
        if low in ("sessions", "sessions per week", "sessions_per_week", "frequency"):
            rename_map[c] = "Sessions"
        if low in ("consistent room", "consistent_room", "same room"):
            rename_map[c] = "Consistent Room"
        if low in ("floor", "preferred floor", "preferred_floor"):
            rename_map[c] = "Floor"
        if low in ("room", "preferred room", "preferred_room"):
            rename_map[c] = "Room"
    if rename_map:
        df = df.rename(columns=rename_map)
    for col in COLUMNS:
        if col not in df.columns:
            df[col] = None
    return df


def load_course_requests(courses_df_or_path, config=None):
    """Read a courses table and return one CourseRequest per row, in row order."""
    if isinstance(courses_df_or_path, str):
        df = pd.read_csv(courses_df_or_path, dtype=str, keep_default_na=False)
    elif isinstance(courses_df_or_path, pd.DataFrame):
        df = courses_df_or_path.copy()
    else:
        raise ValueError("courses_df_or_path must be DataFrame or CSV path")

    df = _canonical_columns(df)
    requests = []
    for pos, (_, row) in enumerate(df.iterrows(), start=1):
        try:
            requests.append(build_course_request(
                row["Course Name"], row["Course Code"], row["Instructor"],
                kind=row["Type"],
                sessions_per_week=row["Sessions"],
                consistent_room=row["Consistent Room"],
                floor=row["Floor"],
                room=row["Room"],
                config=config,
            ))
        except IntakeError as e:
            raise IntakeError(f"Row {pos}: {e}") from e
    return requests
