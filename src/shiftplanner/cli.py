"""Command-line interface for the shift planner."""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional

from shiftplanner.domain.errors import SchedulingError
from shiftplanner.domain.models import (
    DAYS,
    MAX_RANK,
    MIN_RANK,
    SHIFTS,
    Day,
    Employee,
    Shift,
)
from shiftplanner.domain.policies import DefaultStaffingPolicy
from shiftplanner.domain.roster import EmployeeRoster
from shiftplanner.output.csv_exporter import CSVExporter
from shiftplanner.output.pdf_generator import PDFGenerator
from shiftplanner.output.text_generator import TextGenerator
from shiftplanner.scheduling.scheduler import ScheduleOrchestrator
from shiftplanner.validation.validator import ScheduleValidator

DEFAULT_ROSTER = "employees.json"

logger = logging.getLogger(__name__)


def create_sample_employees(count: int = 8, seed: Optional[int] = None) -> list[Employee]:
    """Create sample employees with varied preferences.

    Args:
        count: Number of employees to create.
        seed: Seed for the preference pattern.
    """
    rng = random.Random(seed)
    names = [
        "Alice", "Bob", "Carol", "David", "Eve", "Frank", "Grace", "Henry",
        "Ivy", "Jack", "Kate", "Leo", "Mia", "Noah", "Olivia", "Paul",
    ]

    employees = []
    for i in range(count):
        name = names[i % len(names)]
        if i >= len(names):
            name = f"{name}{i // len(names) + 1}"

        preferences = {}
        for day in DAYS:
            ranks = list(range(MIN_RANK, MAX_RANK + 1))
            if i % 3 == 0:
                # Morning people
                ranks.sort()
            elif i % 3 == 1:
                # Evening people
                ranks.sort(reverse=True)
            else:
                rng.shuffle(ranks)
            preferences[day] = dict(zip(SHIFTS, ranks))

        employees.append(Employee(name=name, preferences=preferences))

    return employees


def parse_ranks(values: Optional[list[str]]) -> dict:
    """Parse ``Day:Shift=rank`` overrides into a preference patch."""
    overrides: dict = {}
    for value in values or []:
        try:
            slot, rank = value.split("=", 1)
            day_label, shift_label = slot.split(":", 1)
        except ValueError:
            raise argparse.ArgumentTypeError(
                f"Expected Day:Shift=rank, got {value!r}"
            )
        day = Day.from_label(day_label)
        shift = Shift.from_label(shift_label)
        overrides.setdefault(day, {})[shift] = int(rank)
    return overrides


def print_result(employees: list[Employee], orchestrator: ScheduleOrchestrator, result) -> None:
    """Print the schedule table, validation outcome and status."""
    names = [e.name for e in employees]
    print(TextGenerator().generate_to_string(result, employee_order=names))

    validator = ScheduleValidator(policy=orchestrator.policy)
    validation = validator.validate(result, employees)
    if validation.is_valid:
        print("Validation: PASSED")
    else:
        print(f"Validation: FAILED ({len(validation.errors)} errors)")
        for error in validation.errors[:5]:
            print(f"    - {error}")
        if len(validation.errors) > 5:
            print(f"    ... and {len(validation.errors) - 5} more errors")
    for warning in validation.warnings:
        print(f"Warning: {warning}")


def write_outputs(result, employees: list[Employee], csv_path: Optional[str], pdf_path: Optional[str]) -> None:
    if csv_path:
        CSVExporter().export(result.grid, csv_path)
        print(f"Schedule exported to {csv_path}")
    if pdf_path:
        PDFGenerator().generate(result, pdf_path, employee_order=[e.name for e in employees])
        print(f"PDF created: {pdf_path}")


def exit_code(result) -> int:
    """0 for a complete schedule, 2 when some employees are unresolved."""
    return 0 if result.is_complete else 2


def build_orchestrator(args) -> ScheduleOrchestrator:
    policy = DefaultStaffingPolicy(
        shift_capacity=args.max_per_shift,
        weekly_days=args.max_days,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    return ScheduleOrchestrator(policy=policy, rng=rng)


def run_generate(args) -> int:
    """Generate a schedule for the stored roster."""
    roster = EmployeeRoster.load(args.roster)
    employees = roster.snapshot()

    orchestrator = build_orchestrator(args)
    result = orchestrator.run(employees)

    print_result(employees, orchestrator, result)
    write_outputs(result, employees, args.csv, args.pdf)
    return exit_code(result)


def run_demo(args) -> int:
    """Generate a schedule for sample employees."""
    employees = create_sample_employees(args.count, seed=args.seed)
    print(f"Generating demo schedule for {len(employees)} employees...\n")

    orchestrator = build_orchestrator(args)
    result = orchestrator.run(employees)

    print_result(employees, orchestrator, result)
    write_outputs(result, employees, args.csv, args.pdf)
    return exit_code(result)


def run_roster(args) -> int:
    """Manage the stored roster."""
    roster = EmployeeRoster.load(args.roster)

    if args.roster_command == "list":
        if not len(roster):
            print("No employees have been added yet.")
        for employee in roster:
            best = ", ".join(
                f"{day.value[:3]}:{employee.shifts_by_preference(day)[0].value}"
                for day in DAYS
            )
            print(f"  {employee.name:<20} {best}")
        return 0

    if args.roster_command == "add":
        employee = Employee.with_default_preferences(args.name, rank=args.default_rank)
        for day, ranks in parse_ranks(args.rank).items():
            employee.preferences[day].update(ranks)
        roster.add(employee)
        print(f"Employee '{employee.name}' added successfully.")
    elif args.roster_command == "rename":
        old_name = roster.get(args.old_name).name
        employee = roster.rename(args.old_name, args.new_name)
        print(f"Employee name updated from '{old_name}' to '{employee.name}'.")
    elif args.roster_command == "remove":
        employee = roster.remove(args.name)
        print(f"Employee '{employee.name}' has been removed.")

    roster.save(args.roster)
    return 0


def add_schedule_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for random slot filling (default: unseeded)",
    )
    parser.add_argument(
        "--max-per-shift",
        type=int,
        default=2,
        help="Maximum employees per shift (default: 2)",
    )
    parser.add_argument(
        "--max-days",
        type=int,
        default=5,
        help="Maximum working days per employee per week (default: 5)",
    )
    parser.add_argument("--csv", type=str, help="Write the schedule to a CSV file")
    parser.add_argument("--pdf", type=str, help="Write the schedule to a PDF file")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Shift Planner - Weekly Shift Scheduling Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s roster add Alice --rank Monday:Morning=1 --default-rank 2
  %(prog)s roster rename Alice Alicia
  %(prog)s roster list
  %(prog)s generate --csv employee_schedule.csv
  %(prog)s generate --seed 7 --pdf schedule.pdf
  %(prog)s demo --count 12
        """,
    )
    parser.add_argument(
        "--roster", "-r",
        type=str,
        default=DEFAULT_ROSTER,
        help=f"Roster JSON file (default: {DEFAULT_ROSTER})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    generate_parser = subparsers.add_parser("generate", help="Generate a schedule for the roster")
    add_schedule_options(generate_parser)

    demo_parser = subparsers.add_parser("demo", help="Generate a schedule for sample employees")
    demo_parser.add_argument(
        "--count", "-c",
        type=int,
        default=8,
        help="Number of employees to generate (default: 8)",
    )
    add_schedule_options(demo_parser)

    roster_parser = subparsers.add_parser("roster", help="Manage employees")
    roster_sub = roster_parser.add_subparsers(dest="roster_command", required=True)

    roster_sub.add_parser("list", help="List employees")

    add_parser = roster_sub.add_parser("add", help="Add an employee")
    add_parser.add_argument("name", type=str)
    add_parser.add_argument(
        "--default-rank",
        type=int,
        default=MIN_RANK,
        choices=range(MIN_RANK, MAX_RANK + 1),
        help="Rank for every shift not set with --rank (default: 1)",
    )
    add_parser.add_argument(
        "--rank",
        action="append",
        metavar="DAY:SHIFT=RANK",
        help="Preference override, may be repeated",
    )

    rename_parser = roster_sub.add_parser("rename", help="Rename an employee")
    rename_parser.add_argument("old_name", type=str)
    rename_parser.add_argument("new_name", type=str)

    remove_parser = roster_sub.add_parser("remove", help="Remove an employee")
    remove_parser.add_argument("name", type=str)

    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")

    handlers = {
        "generate": run_generate,
        "demo": run_demo,
        "roster": run_roster,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (SchedulingError, argparse.ArgumentTypeError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
