"""
src/roomtable/models/course.py
==============================
Dataclass models for a course request and its scheduling result.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

THEORY = "Theory"
LAB = "Lab"

_DURATIONS = {THEORY: 1, LAB: 2}


@dataclass(frozen=True)
class CourseRequest:
    name: str
    code: str
    instructor: str
    kind: str = THEORY  # Theory or Lab
    sessions_per_week: int = 1
    consistent_room: bool = False
    preferred_floor: Optional[int] = None
    preferred_room: Optional[int] = None

    @property
    def duration(self) -> int:
        """Slots taken by one session: Theory=1, Lab=2 contiguous."""
        return _DURATIONS[self.kind]

    @property
    def is_lab(self) -> bool:
        return self.kind == LAB

    @property
    def preferred_location(self) -> Optional[Tuple[int, int]]:
        if self.preferred_floor and self.preferred_room:
            return self.preferred_floor, self.preferred_room
        return None

    def priority_key(self):
        """Sort key: labs, then more sessions, then consistent-room courses first."""
        return (not self.is_lab, -self.sessions_per_week, not self.consistent_room)


@dataclass(frozen=True)
class Session:
    day: str
    start_slot: int
    floor: int
    room: int


def format_room(floor, room):
    return f"{floor}-{room:02d}"


@dataclass
class SchedulingResult:
    scheduled: bool = False
    sessions: List[Session] = field(default_factory=list)
    pinned_room: Optional[Tuple[int, int]] = None

    @property
    def slots(self) -> List[Tuple[str, int]]:
        return [(s.day, s.start_slot) for s in self.sessions]

    @property
    def rooms_by_day(self) -> Dict[str, Tuple[int, int]]:
        rooms = {}
        for s in self.sessions:
            rooms.setdefault(s.day, (s.floor, s.room))
        return rooms

    @property
    def room_display(self) -> str:
        if not self.sessions:
            return "Not assigned"
        first = self.sessions[0]
        return format_room(first.floor, first.room)

    def held_rooms(self) -> List[Tuple[int, int]]:
        """Distinct rooms in commit order."""
        seen = []
        for s in self.sessions:
            if (s.floor, s.room) not in seen:
                seen.append((s.floor, s.room))
        return seen

    def clear(self):
        self.scheduled = False
        self.sessions.clear()
        self.pinned_room = None
