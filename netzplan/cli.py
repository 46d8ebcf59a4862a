from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from netzplan.grid import render_gantt, render_grid
from netzplan.io import (
    read_tasks_json,
    write_schedule_csv,
    write_schedule_json,
    write_summary_json,
    write_tasks_json,
)
from netzplan.layout import update_task_positions
from netzplan.metrics import summarize_schedule
from netzplan.ordering import CycleError, FallbackTopoOrdering, StrictTopoOrdering
from netzplan.plan import DEFAULT_TASKS, hydrate
from netzplan.schedule import calculate_schedule
from netzplan.validate import TaskValidationError, validate_tasks

logger = logging.getLogger("netzplan")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="netzplan", description="Critical path schedule and grid layout"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sched = sub.add_parser("schedule", help="Compute the CPM schedule")
    sched.add_argument("--tasks", required=True, type=Path)
    sched.add_argument("--out-schedule", required=False, type=Path)
    sched.add_argument("--out-csv", required=False, type=Path)
    sched.add_argument("--out-summary", required=False, type=Path)
    sched.add_argument(
        "--strict-cycles",
        action="store_true",
        help="Fail on dependency cycles instead of best-effort ordering",
    )
    sched.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip input validation (unknown ids and cycles are tolerated)",
    )
    sched.add_argument("--gantt", action="store_true", help="Print a Gantt chart")

    lay = sub.add_parser("layout", help="Assign grid positions to tasks")
    lay.add_argument("--tasks", required=True, type=Path)
    lay.add_argument("--out", required=False, type=Path)
    lay.add_argument("--print", action="store_true", help="Print the grid")

    val = sub.add_parser("validate", help="Check a task file")
    val.add_argument("--tasks", required=True, type=Path)

    sample = sub.add_parser("sample", help="Write the sample plan")
    sample.add_argument("--out", required=True, type=Path)
    return p


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    if args.cmd == "schedule":
        tasks = read_tasks_json(args.tasks)
        if not args.no_validate:
            try:
                validate_tasks(tasks)
            except TaskValidationError as e:
                logger.error("invalid task file %s: %s", args.tasks, e)
                return 2

        ordering = StrictTopoOrdering() if args.strict_cycles else FallbackTopoOrdering()
        try:
            scheduled = calculate_schedule(tasks, ordering=ordering)
        except CycleError as e:
            logger.error("%s", e)
            return 2

        summary = summarize_schedule(scheduled)
        if args.out_schedule:
            write_schedule_json(args.out_schedule, scheduled)
        if args.out_csv:
            write_schedule_csv(args.out_csv, scheduled)
        if args.out_summary:
            write_summary_json(args.out_summary, summary)
        logger.info(
            "scheduled %d tasks, project duration %d",
            summary["task_count"],
            summary["project_duration"],
        )
        if not (args.out_schedule or args.out_csv or args.out_summary):
            sys.stdout.write(
                f"project duration: {summary['project_duration']}\n"
                f"critical path: {summary['critical_path_tasks']}\n"
            )
        if args.gantt:
            sys.stdout.write(render_gantt(scheduled) + "\n")
        return 0

    if args.cmd == "layout":
        placed = update_task_positions(read_tasks_json(args.tasks))
        if args.out:
            write_tasks_json(args.out, placed)
        if args.print or not args.out:
            crit = [t.id for t in calculate_schedule(placed) if t.is_critical]
            sys.stdout.write(render_grid(placed, critical=crit) + "\n")
        return 0

    if args.cmd == "validate":
        try:
            validate_tasks(read_tasks_json(args.tasks))
        except TaskValidationError as e:
            logger.error("invalid task file %s: %s", args.tasks, e)
            return 2
        sys.stdout.write("ok\n")
        return 0

    if args.cmd == "sample":
        write_tasks_json(args.out, hydrate(DEFAULT_TASKS))
        return 0

    raise AssertionError(f"Unhandled command: {args.cmd}")
