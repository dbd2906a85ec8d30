"""
src/roomtable/models/room.py
============================
Room inventory: a per-(floor, room) reservation ledger for one allocation run.

The ledger is coarse. Once a course reserves a room, no other course can use
it on any day until it is released, even though the owning course only sits
in it on specific days.
"""

import logging

from roomtable.errors import RoomLedgerError

logger = logging.getLogger("roomtable.rooms")

# holder value for teacher-only rooms
RESERVED = "reserved"


class RoomInventory:
    def __init__(self, config):
        self.floors = list(config.get("floors", range(1, 8)))
        self.rooms_per_floor = config.get("rooms_per_floor", 13)
        self.reserved_rooms = tuple(config.get("reserved_rooms", (14, 15)))
        self._holders = {}
        self.reset()

    def reset(self):
        """Every assignable room free, teacher-only rooms permanently held."""
        self._holders = {}
        for floor in self.floors:
            for room in self.assignable_rooms():
                self._holders[(floor, room)] = None
            for room in self.reserved_rooms:
                self._holders[(floor, room)] = RESERVED

    def assignable_rooms(self):
        return range(1, self.rooms_per_floor + 1)

    def is_assignable(self, floor, room):
        return self._holders.get((floor, room), RESERVED) != RESERVED

    def is_free(self, floor, room, holder=None):
        """True if nobody holds the room, or if `holder` itself holds it."""
        current = self._holders.get((floor, room), RESERVED)
        if current == RESERVED:
            return False
        return current is None or (holder is not None and current == holder)

    def holder_of(self, floor, room):
        return self._holders.get((floor, room))

    def reserve(self, floor, room, holder):
        if not self.is_assignable(floor, room):
            raise RoomLedgerError(f"Room {floor}-{room:02d} is not assignable")
        current = self._holders[(floor, room)]
        if current is not None:
            raise RoomLedgerError(f"Room {floor}-{room:02d} is already held by course {current}")
        self._holders[(floor, room)] = holder
        logger.debug("Reserved room %d-%02d for course %s", floor, room, holder)

    def release(self, floor, room):
        if not self.is_assignable(floor, room):
            raise RoomLedgerError(f"Room {floor}-{room:02d} is not assignable")
        if self._holders[(floor, room)] is None:
            raise RoomLedgerError(f"Room {floor}-{room:02d} is already free")
        self._holders[(floor, room)] = None
        logger.debug("Released room %d-%02d", floor, room)

    def free_count(self):
        return sum(1 for h in self._holders.values() if h is None)

    def iter_free(self, floors=None, holder=None):
        """Free rooms in scan order: floors ascending, then rooms 1..13."""
        for floor in (floors if floors is not None else self.floors):
            for room in self.assignable_rooms():
                if self.is_free(floor, room, holder):
                    yield floor, room
