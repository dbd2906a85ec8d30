import os

import pandas as pd

import run
from roomtable.export import course_status_frame, export_csv, timetable_frame
from roomtable.scheduler.timetable_scheduler import TimetableScheduler

from conftest import lab, theory


def test_timetable_frame_layout(scheduler):
    scheduler.add_course(lab("CS201"))
    scheduler.add_course(theory("MA101", sessions=2))
    scheduler.generate_optimal_schedule()

    df = timetable_frame(scheduler)
    assert df.shape == (13, 5)
    assert list(df.columns) == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert (df.loc["1:20 - 2:00"] == "Extra-mural Hour").all()
    assert df.loc["8:00 - 8:50", "Monday"] == "CS201 | Dr. Rao | 1-01"
    assert df.loc["8:55 - 9:45", "Monday"] == "CS201 (cont.)"
    assert df.loc["9:50 - 10:40", "Monday"] == "MA101 | Dr. Rao | 1-02"
    assert df.loc["8:00 - 8:50", "Wednesday"] == "MA101 | Dr. Rao | 1-03"
    assert df.loc["8:00 - 8:50", "Tuesday"] == ""


def test_course_status_frame(config):
    config["floors"] = [1]
    config["rooms_per_floor"] = 1
    small = TimetableScheduler(config)
    small.add_course(theory("MA101"))
    small.add_course(theory("MA102"))
    small.generate_optimal_schedule()

    df = course_status_frame(small)
    assert list(df["Code"]) == ["MA101", "MA102"]
    assert list(df["Room"]) == ["1-01", "Not scheduled"]
    assert df.loc[0, "Slots"] == "Monday 8:00 AM"
    assert df.loc[1, "Slots"] == ""


def test_export_csv_writes_both_tables(scheduler, tmp_path):
    scheduler.add_course(lab())
    scheduler.generate_optimal_schedule()
    timetable_path, courses_path = export_csv(scheduler, str(tmp_path / "out"))

    assert os.path.exists(timetable_path) and os.path.exists(courses_path)
    courses = pd.read_csv(courses_path)
    assert list(courses["Code"]) == ["CS201"]


def test_run_script(tmp_path):
    csv = tmp_path / "courses.csv"
    csv.write_text(
        "Course Name,Course Code,Instructor,Type,Sessions\n"
        "Maths,MA101,Dr. Rao,Theory,3\n"
        "Physics Lab,PH110,Dr. Iyer,Lab,1\n"
    )
    out = tmp_path / "out"
    assert run.main([str(csv), "--output-dir", str(out)]) == 0
    assert (out / "timetable.csv").exists()

    csv.write_text("Course Name,Course Code,Instructor,Floor,Room\nMaths,MA101,Dr. Rao,2,15\n")
    assert run.main([str(csv), "--output-dir", str(out)]) == 1


def test_back_to_back_sessions_each_show_their_room(config):
    config["working_days"] = ["Monday"]
    scheduler = TimetableScheduler(config)
    scheduler.add_course(theory("MA101", sessions=2))
    scheduler.add_course(lab("PH110", sessions=2))
    scheduler.generate_optimal_schedule()

    df = timetable_frame(scheduler)
    assert list(df["Monday"].iloc[:6]) == [
        "PH110 | Dr. Rao | 1-01",
        "PH110 (cont.)",
        "PH110 | Dr. Rao | 1-02",
        "PH110 (cont.)",
        "MA101 | Dr. Rao | 1-03",
        "MA101 | Dr. Rao | 1-04",
    ]
