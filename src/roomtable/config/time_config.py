"""
src/roomtable/config/time_config.py
===================================
Defines the weekly slot grid, the extra-mural hour, and the building layout
(floors, assignable rooms, teacher-only rooms).
"""

def get_active_config():
    config = {
        "working_days": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],

        # Slot start times (50 minute periods, identical every weekday)
        "time_slots": [
            "8:00 AM", "8:55 AM", "9:50 AM", "10:45 AM", "11:40 AM",
            "12:35 PM", "1:20 PM", "2:00 PM", "2:55 PM", "3:50 PM",
            "4:45 PM", "5:40 PM", "6:35 PM"
        ],

        # Ranges shown on the rendered timetable, one per slot
        "display_time_slots": [
            "8:00 - 8:50", "8:55 - 9:45", "9:50 - 10:40", "10:45 - 11:35", "11:40 - 12:30",
            "12:35 - 1:15", "1:20 - 2:00", "2:00 - 2:50", "2:55 - 3:45", "3:50 - 4:40",
            "4:45 - 5:35", "5:40 - 6:30", "6:35 - 7:20"
        ],

        # Extra-mural hour (1:20 PM - 2:00 PM) can never host a session
        "extramural_slot": 6,
        "extramural_label": "Extra-mural Hour",

        # Building
        "floors": list(range(1, 8)),
        "rooms_per_floor": 13,
        "reserved_rooms": (14, 15),  # teacher-only

        # durations (slots)
        "durations": {"Theory": 1, "Lab": 2},
        "max_sessions_per_week": 5,
    }
    return config
