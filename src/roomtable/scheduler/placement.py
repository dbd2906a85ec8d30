"""
src/roomtable/scheduler/placement.py

Non-committing search for session slots and rooms.
- days scanned Monday -> Friday, slots ascending (earliest day, then earliest slot)
- multi-session courses spread over strided weekdays first
- room search: pinned consistent room, then preferred floor only, then whole building
Nothing here writes to the grid ledger or the room inventory.
"""


class PlacementEngine:
    def __init__(self, time_grid, grid, rooms):
        self.time_grid = time_grid
        self.grid = grid
        self.rooms = rooms

    # ---------- slots ----------
    def _slot_fits(self, day, slot_index, duration):
        if self.time_grid.is_blocked(slot_index, duration):
            return False
        return self.grid.span_is_empty(day, slot_index, duration)

    def _first_slot_on_day(self, day, duration, start=0):
        for i in range(start, self.time_grid.slot_count):
            if self._slot_fits(day, i, duration):
                return i
        return None

    def find_single_slot(self, course):
        """First free (day, slot) for one session of `course`, or None."""
        for day in self.time_grid.days:
            i = self._first_slot_on_day(day, course.duration)
            if i is not None:
                return day, i
        return None

    def find_multiple_slots(self, course, count):
        """
        Up to `count` distinct (day, slot) pairs for `course`, in pick order.
        Preferred days are the weekdays strided by 5 // count; then the other
        weekdays; then days already used, scanning past the span picked there.
        Fewer than `count` pairs means the course cannot be placed.
        """
        days = self.time_grid.days
        duration = course.duration
        stride = max(1, len(days) // count)
        preferred = days[::stride][:count]

        picks = []
        next_free = {}  # day -> first slot index after the last pick on that day

        def pick(day, start=0):
            i = self._first_slot_on_day(day, duration, start)
            if i is None:
                return False
            picks.append((day, i))
            next_free[day] = i + duration
            return True

        for day in preferred:
            if len(picks) >= count:
                break
            pick(day)

        for day in days:
            if len(picks) >= count:
                break
            if day in preferred:
                continue
            pick(day)

        progress = True
        while len(picks) < count and progress:
            progress = False
            for day in days:
                if len(picks) >= count:
                    break
                if day in next_free and pick(day, next_free[day]):
                    progress = True

        return picks

    # ---------- rooms ----------
    def find_room(self, preferred_floor, course, day, result=None, handle=None):
        """
        Room for one session of `course` on `day`, or None.
        A consistent-room course reuses its pinned room while the inventory
        still lets it; a preferred floor is searched alone, without fallback.
        """
        if course.consistent_room and result is not None and result.pinned_room:
            floor, room = result.pinned_room
            if self.rooms.is_free(floor, room, handle):
                return floor, room
        floors = [preferred_floor] if preferred_floor else None
        for floor, room in self.rooms.iter_free(floors):
            return floor, room
        return None

    def is_room_occupied(self, floor, room, day, slot_index, duration):
        for i in self.time_grid.span(slot_index, duration):
            occ = self.grid.occupant(day, i)
            if occ is not None and occ.floor == floor and occ.room == room:
                return True
        return False
