"""
src/roomtable/export.py
=======================
Read-only views of a finished run as pandas DataFrames, plus CSV export.

Called only after a scheduler call has returned; nothing here mutates the
scheduler.
"""

import logging
import os

import pandas as pd

from roomtable.models.course import format_room

logger = logging.getLogger("roomtable.export")


def _cell_text(course, occupant):
    return f"{course.code} | {course.instructor} | {format_room(occupant.floor, occupant.room)}"


def timetable_frame(scheduler):
    """Rows are the display time ranges, columns the weekdays."""
    tg = scheduler.time_grid
    index = [tg.display_label(i) for i in range(tg.slot_count)]
    df = pd.DataFrame("", index=index, columns=tg.days)
    df.index.name = "Time / Day"

    for i in range(tg.slot_count):
        label = index[i]
        if i == tg.blocked:
            for day in tg.days:
                df.loc[label, day] = tg.blocked_label
            continue
        for day in tg.days:
            occ = scheduler.grid.occupant(day, i)
            if occ is None:
                continue
            course = scheduler.course(occ.handle)
            starts = {(s.day, s.start_slot) for s in scheduler.result(occ.handle).sessions}
            if (day, i) in starts:
                df.loc[label, day] = _cell_text(course, occ)
            else:
                # second row of a lab
                df.loc[label, day] = f"{course.code} (cont.)"
    return df


def course_status_frame(scheduler):
    tg = scheduler.time_grid
    rows = []
    for handle, course in scheduler.courses.items():
        result = scheduler.result(handle)
        rows.append({
            "Course": course.name,
            "Code": course.code,
            "Instructor": course.instructor,
            "Type": course.kind,
            "Sessions": course.sessions_per_week,
            "Room": result.room_display if result.scheduled else "Not scheduled",
            "Slots": "; ".join(f"{d} {tg.slot_label(i)}" for d, i in result.slots),
        })
    return pd.DataFrame(rows, columns=["Course", "Code", "Instructor", "Type", "Sessions", "Room", "Slots"])


def export_csv(scheduler, output_dir="timetable_outputs"):
    os.makedirs(output_dir, exist_ok=True)
    timetable_path = os.path.join(output_dir, "timetable.csv")
    courses_path = os.path.join(output_dir, "courses.csv")
    timetable_frame(scheduler).to_csv(timetable_path, encoding="utf-8")
    course_status_frame(scheduler).to_csv(courses_path, index=False, encoding="utf-8")
    logger.info("Saved %s", timetable_path)
    logger.info("Saved %s", courses_path)
    return timetable_path, courses_path
