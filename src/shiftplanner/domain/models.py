"""Domain models for the scheduling system.

This module contains the core data structures used throughout the scheduling
system: days, shifts, employees with ranked preferences, the weekly schedule
grid, the per-employee workday counter, and the result of a scheduling run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from shiftplanner.domain.errors import IncompletePreferencesError, RosterFormatError

MIN_RANK = 1  # Most preferred
MAX_RANK = 3  # Least preferred


class Day(Enum):
    """Days of the scheduling week, in fixed week order."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def from_label(cls, label: str) -> "Day":
        """Look up a day by its label, ignoring case and surrounding space."""
        wanted = label.strip().lower()
        for day in cls:
            if day.value.lower() == wanted:
                return day
        raise ValueError(f"Unknown day: {label!r}")


class Shift(Enum):
    """Daily work periods, in fixed order."""

    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"

    @classmethod
    def from_label(cls, label: str) -> "Shift":
        """Look up a shift by its label, ignoring case and surrounding space."""
        wanted = label.strip().lower()
        for shift in cls:
            if shift.value.lower() == wanted:
                return shift
        raise ValueError(f"Unknown shift: {label!r}")


DAYS: tuple[Day, ...] = tuple(Day)
SHIFTS: tuple[Shift, ...] = tuple(Shift)


def name_key(name: str) -> str:
    """Normalized form used for case-insensitive name comparison."""
    return name.strip().casefold()


@dataclass
class Employee:
    """An employee who can be scheduled.

    Attributes:
        name: Display name, unique within a roster (case-insensitive).
        preferences: Rank per day and shift, 1 = most preferred.
    """

    name: str
    preferences: dict[Day, dict[Shift, int]] = field(default_factory=dict)

    @classmethod
    def with_default_preferences(cls, name: str, rank: int = MIN_RANK) -> "Employee":
        """Create an employee with the same rank for every day and shift.

        New employees start with every shift at the highest priority.
        """
        return cls(
            name=name,
            preferences={day: {shift: rank for shift in SHIFTS} for day in DAYS},
        )

    @property
    def key(self) -> str:
        """Case-insensitive identity of the employee."""
        return name_key(self.name)

    def get_rank(self, day: Day, shift: Shift) -> int:
        """Get the preference rank for a day and shift."""
        return self.preferences[day][shift]

    def best_rank(self, day: Day) -> int:
        """Smallest (most preferred) rank across the day's shifts."""
        return min(self.get_rank(day, shift) for shift in SHIFTS)

    def shifts_by_preference(self, day: Day) -> list[Shift]:
        """Shifts for a day ordered best rank first.

        Returns a fresh list on every call. Equal ranks keep the fixed
        Morning, Afternoon, Evening order.
        """
        return sorted(SHIFTS, key=lambda shift: self.get_rank(day, shift))

    def missing_preferences(self) -> list[tuple[Day, Shift]]:
        """List (day, shift) pairs with no valid rank."""
        missing = []
        for day in DAYS:
            day_prefs = self.preferences.get(day, {})
            for shift in SHIFTS:
                rank = day_prefs.get(shift)
                if (
                    isinstance(rank, bool)
                    or not isinstance(rank, int)
                    or not MIN_RANK <= rank <= MAX_RANK
                ):
                    missing.append((day, shift))
        return missing

    def is_complete(self) -> bool:
        """Check that all 21 ranks are present and in range."""
        return not self.missing_preferences()

    def ensure_complete(self) -> None:
        """Raise if any rank is missing or out of range."""
        missing = self.missing_preferences()
        if missing:
            slots = ", ".join(f"{d.value} {s.value}" for d, s in missing[:3])
            if len(missing) > 3:
                slots += f", +{len(missing) - 3} more"
            raise IncompletePreferencesError(
                f"Employee '{self.name}' has missing or invalid ranks: {slots}"
            )

    def copy(self) -> "Employee":
        """Deep copy of this employee's record."""
        return Employee(
            name=self.name,
            preferences={
                day: dict(shift_ranks) for day, shift_ranks in self.preferences.items()
            },
        )

    def to_dict(self) -> dict:
        """Serialize using day and shift labels as keys."""
        return {
            "name": self.name,
            "preferences": {
                day.value: {
                    shift.value: rank for shift, rank in shift_ranks.items()
                }
                for day, shift_ranks in self.preferences.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        """Build an employee from serialized data.

        Ranks may be given as integers or digit strings ("1").

        Raises:
            RosterFormatError: If a rank is a bool, a float or a
                non-numeric string.
        """
        preferences: dict[Day, dict[Shift, int]] = {}
        for day_label, shift_ranks in data.get("preferences", {}).items():
            day = Day.from_label(day_label)
            preferences[day] = {
                Shift.from_label(shift_label): _parse_rank(rank)
                for shift_label, rank in shift_ranks.items()
            }
        return cls(name=str(data["name"]).strip(), preferences=preferences)


def _parse_rank(value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise RosterFormatError(f"Rank must be a whole number, got {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if not text.isdecimal():
            raise RosterFormatError(f"Rank must be a whole number, got {value!r}")
        return int(text)
    return value

class ScheduleGrid:
    """The weekly day-by-shift table of assigned employee names.

    Each cell is an ordered list of names bounded by ``max_per_shift``.
    The grid only enforces capacity; callers are responsible for keeping
    an employee to one shift per day.
    """

    def __init__(self, max_per_shift: int = 2):
        self.max_per_shift = max_per_shift
        self.cells: dict[Day, dict[Shift, list[str]]] = {}
        self.initialize()

    def initialize(self) -> None:
        """Reset every cell to an empty list."""
        self.cells = {day: {shift: [] for shift in SHIFTS} for day in DAYS}

    def cell(self, day: Day, shift: Shift) -> list[str]:
        """Names assigned to a cell (the live list)."""
        return self.cells[day][shift]

    def has_capacity(self, day: Day, shift: Shift) -> bool:
        return len(self.cells[day][shift]) < self.max_per_shift

    def open_slots(self, day: Day, shift: Shift) -> int:
        return self.max_per_shift - len(self.cells[day][shift])

    def try_place(self, day: Day, shift: Shift, name: str) -> bool:
        """Append a name to a cell if it has room.

        Returns:
            True if the name was placed, False if the cell is full.
        """
        if not self.has_capacity(day, shift):
            return False
        self.cells[day][shift].append(name)
        return True

    def is_working_day(self, day: Day, name: str) -> bool:
        """Check if a name appears in any shift on a day."""
        return any(name in names for names in self.cells[day].values())

    def shift_for(self, day: Day, name: str) -> Optional[Shift]:
        """Get the first shift a name is assigned to on a day, if any."""
        for shift in SHIFTS:
            if name in self.cells[day][shift]:
                return shift
        return None

    def days_worked(self, name: str) -> int:
        """Number of days on which a name appears anywhere."""
        return sum(1 for day in DAYS if self.is_working_day(day, name))

    def iter_cells(self) -> Iterator[tuple[Day, Shift, list[str]]]:
        """Iterate cells in week order, then shift order."""
        for day in DAYS:
            for shift in SHIFTS:
                yield day, shift, self.cells[day][shift]

    @property
    def total_slots(self) -> int:
        return len(DAYS) * len(SHIFTS) * self.max_per_shift

    @property
    def filled_slots(self) -> int:
        return sum(len(names) for _, _, names in self.iter_cells())

    def is_empty(self) -> bool:
        return self.filled_slots == 0

    def to_dict(self) -> dict[str, dict[str, list[str]]]:
        """Plain-label copy of the grid for rendering or serialization."""
        return {
            day.value: {shift.value: list(self.cells[day][shift]) for shift in SHIFTS}
            for day in DAYS
        }


class WorkdayCounter:
    """Counts distinct days assigned per employee during one run."""

    def __init__(self, names: Optional[list[str]] = None, max_days: int = 5):
        self.max_days = max_days
        self.counts: dict[str, int] = {name: 0 for name in names or []}

    def get(self, name: str) -> int:
        return self.counts.get(name, 0)

    def increment(self, name: str) -> int:
        """Record one more workday and return the new count."""
        self.counts[name] = self.counts.get(name, 0) + 1
        return self.counts[name]

    def is_at_quota(self, name: str) -> bool:
        return self.get(name) >= self.max_days

    def under_quota(self) -> list[str]:
        """Names still below the weekly day limit, in insertion order."""
        return [name for name, count in self.counts.items() if count < self.max_days]

    def as_dict(self) -> dict[str, int]:
        return dict(self.counts)


@dataclass
class ScheduleResult:
    """Output of one scheduling run.

    Attributes:
        grid: The filled weekly grid.
        unresolved: Employees below the weekly day limit with no legal slot left.
        workdays: Final day count per employee.
        backfill_unresolved: Employees the backfill pass gave up on.
    """

    grid: ScheduleGrid
    unresolved: set[str] = field(default_factory=set)
    workdays: dict[str, int] = field(default_factory=dict)
    backfill_unresolved: set[str] = field(default_factory=set)

    @property
    def is_complete(self) -> bool:
        """True when every employee reached the weekly day limit."""
        return not self.unresolved

    def status_message(self) -> str:
        """One-line summary of the run outcome."""
        if not self.unresolved:
            return "The weekly schedule has been generated successfully!"
        names = ", ".join(sorted(self.unresolved))
        return (
            "Partial Schedule Generated: The following employees could not be "
            f"fully scheduled due to conflicts or work limit: {names}"
        )
