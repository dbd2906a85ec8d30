"""
run.py — Entry point for the floor/room timetable allocator
===========================================================
Loads course requests from a CSV, runs the greedy allocator once and writes
the timetable grid and the course status table as CSVs.

    python run.py courses.csv --output-dir timetable_outputs
"""

import argparse
import logging
import sys

from roomtable.config.time_config import get_active_config
from roomtable.errors import IntakeError
from roomtable.export import export_csv
from roomtable.intake import load_course_requests
from roomtable.scheduler.timetable_scheduler import TimetableScheduler

logger = logging.getLogger("roomtable")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Weekly floor/room timetable allocator")
    parser.add_argument("courses", help="CSV with one course request per row")
    parser.add_argument("--output-dir", default="timetable_outputs")
    parser.add_argument("--verbose", action="store_true", help="log every placement")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    config = get_active_config()
    try:
        requests = load_course_requests(args.courses, config)
    except IntakeError as e:
        logger.error("Invalid course data: %s", e)
        return 1

    scheduler = TimetableScheduler(config)
    for course in requests:
        scheduler.add_course(course)

    report = scheduler.generate_optimal_schedule()
    logger.info("%s (%d/%d)", report.message, report.scheduled, report.total)
    export_csv(scheduler, args.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
