"""
src/roomtable/scheduler/timetable_scheduler.py

Greedy allocator for the weekly floor/room timetable.
- full reset at the start of every run (grid, rooms, results)
- stable priority order: labs, then more sessions per week, then consistent-room courses
- one session-group transaction per course: all sessions commit or none do
- a course that cannot be fully placed is left unscheduled; the run never aborts
- no backtracking: a placed course is never moved for a later one
"""

import itertools
import logging
from dataclasses import dataclass, field
from typing import List

from roomtable.errors import TimetableError, UnknownCourseError
from roomtable.models.course import SchedulingResult, Session
from roomtable.models.room import RoomInventory
from roomtable.models.timetable import GridLedger, TimeGrid
from roomtable.scheduler.placement import PlacementEngine

logger = logging.getLogger("roomtable.scheduler")

SUCCESS = "success"
PARTIAL = "partial"
EMPTY = "empty"


@dataclass
class ScheduleReport:
    scheduled: int
    total: int
    unscheduled: List[int] = field(default_factory=list)

    @property
    def status(self):
        if self.total == 0:
            return EMPTY
        return SUCCESS if self.scheduled == self.total else PARTIAL

    @property
    def message(self):
        if self.status == EMPTY:
            return "Please add courses before generating a schedule!"
        if self.status == SUCCESS:
            return f"All {self.total} courses scheduled successfully!"
        return (f"Scheduled {self.scheduled} of {self.total} courses. "
                "Some could not be scheduled due to constraints.")


class TimetableScheduler:
    def __init__(self, config):
        self.config = config
        self.time_grid = TimeGrid(config)
        self.grid = GridLedger(self.time_grid)
        self.rooms = RoomInventory(config)
        self.engine = PlacementEngine(self.time_grid, self.grid, self.rooms)

        self._courses = {}   # handle -> CourseRequest, insertion order
        self._results = {}   # handle -> SchedulingResult
        self._handles = itertools.count(1)
        self.state = "idle"

    # ---------- course collection ----------
    @property
    def courses(self):
        return dict(self._courses)

    def course(self, handle):
        try:
            return self._courses[handle]
        except KeyError:
            raise UnknownCourseError(f"No course with handle {handle}") from None

    def result(self, handle):
        self.course(handle)
        return self._results[handle]

    def add_course(self, course):
        """Register a course request; returns its handle. Nothing is placed yet."""
        handle = next(self._handles)
        self._courses[handle] = course
        self._results[handle] = SchedulingResult()
        logger.info("Added course %s (%s, %s x%d)", course.code, course.name,
                    course.kind, course.sessions_per_week)
        return handle

    def remove_course(self, handle):
        course = self.course(handle)
        if self._results[handle].scheduled:
            self._undo(handle)
        del self._courses[handle]
        del self._results[handle]
        logger.info("Removed course %s", course.code)

    def clear_all(self):
        self._courses.clear()
        self._results.clear()
        self.grid.clear()
        self.rooms.reset()
        logger.info("Schedule cleared")

    def sorted_handles(self):
        """Handles in scheduling order; ties keep insertion order."""
        return sorted(self._courses, key=lambda h: self._courses[h].priority_key())

    # ---------- main algorithm ----------
    def generate_optimal_schedule(self):
        if self.state != "idle":
            raise TimetableError("An allocation run is already in progress")
        if not self._courses:
            logger.warning("No courses to schedule")
            return ScheduleReport(scheduled=0, total=0)

        try:
            self.state = "resetting"
            self.grid.clear()
            self.rooms.reset()
            for result in self._results.values():
                result.clear()

            self.state = "sorting"
            order = self.sorted_handles()

            self.state = "scheduling"
            logger.info("Scheduling %d courses", len(order))
            for handle in order:
                self._place(handle)

            self.state = "reporting"
            unscheduled = [h for h in self._courses if not self._results[h].scheduled]
            report = ScheduleReport(
                scheduled=len(self._courses) - len(unscheduled),
                total=len(self._courses),
                unscheduled=unscheduled,
            )
        finally:
            self.state = "idle"

        if report.status == SUCCESS:
            logger.info(report.message)
        else:
            logger.warning(report.message)
        return report

    def schedule_course(self, handle):
        """Place one course against the current grid without resetting it."""
        self.course(handle)
        if self._results[handle].scheduled:
            return True
        return self._place(handle)

    # ---------- session-group transaction ----------
    def _place(self, handle):
        course = self._courses[handle]
        result = self._results[handle]
        wanted = course.sessions_per_week

        if wanted == 1:
            found = self.engine.find_single_slot(course)
            slots = [found] if found else []
        else:
            slots = self.engine.find_multiple_slots(course, wanted)

        if len(slots) < wanted:
            logger.warning("Course %s not scheduled: found %d of %d free slots",
                           course.code, len(slots), wanted)
            return False

        for day, start in slots:
            room = self._choose_room(handle, day, start)
            if room is None:
                logger.warning("Course %s not scheduled: no room for %s %s",
                               course.code, day, self.time_grid.slot_label(start))
                self._undo(handle)
                return False
            self._commit_session(handle, day, start, *room)

        result.scheduled = True
        logger.info("Scheduled %s: %s", course.code,
                    ", ".join(f"{d} {self.time_grid.slot_label(i)}" for d, i in result.slots))
        return True

    def _choose_room(self, handle, day, start):
        course = self._courses[handle]
        result = self._results[handle]

        if result.sessions and course.consistent_room and result.pinned_room:
            if self.rooms.is_free(*result.pinned_room, holder=handle):
                return result.pinned_room

        preferred = course.preferred_location
        if preferred and self.rooms.is_free(*preferred, holder=handle):
            if not self.engine.is_room_occupied(*preferred, day, start, course.duration):
                return preferred

        return self.engine.find_room(course.preferred_floor, course, day, result, handle)

    def _commit_session(self, handle, day, start, floor, room):
        course = self._courses[handle]
        result = self._results[handle]

        self.grid.occupy(day, start, course.duration, handle, floor, room)
        if self.rooms.holder_of(floor, room) != handle:
            self.rooms.reserve(floor, room, handle)
        result.sessions.append(Session(day, start, floor, room))
        if len(result.sessions) == 1 and course.consistent_room:
            result.pinned_room = (floor, room)
        logger.debug("Committed %s on %s slot %d in room %d-%02d",
                     course.code, day, start, floor, room)

    def _undo(self, handle):
        result = self._results[handle]
        freed = self.grid.vacate(handle)
        for floor, room in result.held_rooms():
            if self.rooms.holder_of(floor, room) == handle:
                self.rooms.release(floor, room)
        result.clear()
        logger.debug("Rolled back course %s (%d cells freed)", self._courses[handle].code, freed)
