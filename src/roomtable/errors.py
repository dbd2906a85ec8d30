"""
src/roomtable/errors.py
=======================
Exception types raised by intake and by misuse of the ledgers.

An infeasible course is not an error: it is simply left unscheduled and
shows up in the run report.
"""


class TimetableError(Exception):
    """Base class for every error raised by roomtable."""


class IntakeError(TimetableError, ValueError):
    """Course fields rejected before a CourseRequest is built."""


class UnknownCourseError(TimetableError, KeyError):
    """No course is registered under the given handle."""

    def __str__(self):
        return str(self.args[0]) if self.args else "unknown course"


class RoomLedgerError(TimetableError, RuntimeError):
    """Room reserved twice, released while free, or not assignable."""


class GridConflictError(TimetableError, RuntimeError):
    """A grid cell was written while another course still occupies it."""
