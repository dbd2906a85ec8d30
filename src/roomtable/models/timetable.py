"""
src/roomtable/models/timetable.py
Weekly time grid (13 slots x 5 weekdays, extra-mural hour blocked) and the
grid ledger recording which course holds each (day, slot) cell.
"""

from collections import namedtuple

from roomtable.errors import GridConflictError

# one cell of the grid ledger; handle is the course's stable integer id
Occupant = namedtuple("Occupant", ["handle", "floor", "room"])


class TimeGrid:
    def __init__(self, config):
        self.days = list(config.get("working_days", ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]))
        self.time_slots = list(config.get("time_slots", []))
        self.display_time_slots = list(config.get("display_time_slots", self.time_slots))
        self.blocked = config.get("extramural_slot", 6)
        self.blocked_label = config.get("extramural_label", "Extra-mural Hour")
        self.day_index = {d: i for i, d in enumerate(self.days)}

    @property
    def slot_count(self):
        return len(self.time_slots)

    def is_blocked(self, slot_index, duration):
        """True if a session of `duration` slots cannot start at `slot_index`.

        That is the case when it starts on the extra-mural slot, when it would
        run into it from below, or when it would run past the last slot.
        """
        if slot_index == self.blocked:
            return True
        if slot_index < self.blocked and slot_index + duration > self.blocked:
            return True
        return slot_index < 0 or slot_index + duration > self.slot_count

    def span(self, slot_index, duration):
        return range(slot_index, slot_index + duration)

    def slot_label(self, slot_index):
        return self.time_slots[slot_index]

    def display_label(self, slot_index):
        return self.display_time_slots[slot_index]


class GridLedger:
    def __init__(self, time_grid):
        self.time_grid = time_grid
        self._cells = {}
        self.clear()

    def clear(self):
        self._cells = {
            (day, i): None
            for day in self.time_grid.days
            for i in range(self.time_grid.slot_count)
        }

    def occupant(self, day, slot_index):
        return self._cells.get((day, slot_index))

    def is_empty(self, day, slot_index):
        return self._cells.get((day, slot_index)) is None

    def span_is_empty(self, day, slot_index, duration):
        return all(
            (day, i) in self._cells and self._cells[(day, i)] is None
            for i in self.time_grid.span(slot_index, duration)
        )

    def occupy(self, day, slot_index, duration, handle, floor, room):
        cells = [(day, i) for i in self.time_grid.span(slot_index, duration)]
        for cell in cells:
            if cell not in self._cells:
                raise GridConflictError(f"{cell[0]} slot {cell[1]} is outside the grid")
            if self._cells[cell] is not None:
                raise GridConflictError(
                    f"{cell[0]} slot {cell[1]} is already held by course {self._cells[cell].handle}"
                )
        for cell in cells:
            self._cells[cell] = Occupant(handle, floor, room)

    def vacate(self, handle):
        """Clear every cell held by `handle`; returns the number of cells freed."""
        freed = 0
        for cell, occ in self._cells.items():
            if occ is not None and occ.handle == handle:
                self._cells[cell] = None
                freed += 1
        return freed

    def cells_of(self, handle):
        return sorted(
            (cell for cell, occ in self._cells.items() if occ is not None and occ.handle == handle),
            key=lambda c: (self.time_grid.day_index[c[0]], c[1])
        )

    def occupied_cells(self):
        return {cell: occ for cell, occ in self._cells.items() if occ is not None}
