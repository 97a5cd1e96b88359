"""Employee roster management and JSON persistence.

The roster owns employee records between scheduling runs. Names are unique
when compared case-insensitively; records handed to the scheduler are copies.
"""

import json
import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from shiftplanner.domain.errors import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    InvalidEmployeeError,
    RosterFormatError,
)
from shiftplanner.domain.models import Employee, name_key

logger = logging.getLogger(__name__)


class EmployeeRoster:
    """Ordered collection of employees with unique names.

    Example:
        >>> roster = EmployeeRoster()
        >>> roster.add(Employee.with_default_preferences("Alice"))
        >>> roster.rename("Alice", "Alicia")
        >>> roster.save("roster.json")
    """

    def __init__(self, employees: Optional[list[Employee]] = None):
        self._employees: list[Employee] = []
        for employee in employees or []:
            self.add(employee)

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def __contains__(self, name: str) -> bool:
        return self._find(name) is not None

    @property
    def names(self) -> list[str]:
        return [e.name for e in self._employees]

    def _find(self, name: str) -> Optional[Employee]:
        key = name_key(name)
        for employee in self._employees:
            if employee.key == key:
                return employee
        return None

    def get(self, name: str) -> Employee:
        """Get an employee by name (case-insensitive)."""
        employee = self._find(name)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee '{name}' not found")
        return employee

    def add(self, employee: Employee) -> Employee:
        """Add an employee after checking name and preferences.

        Raises:
            InvalidEmployeeError: If the name is empty.
            DuplicateEmployeeError: If the name is already taken.
            IncompletePreferencesError: If any rank is missing or invalid.
        """
        name = employee.name.strip()
        if not name:
            raise InvalidEmployeeError("Employee name is required.")
        if name in self:
            raise DuplicateEmployeeError(
                f"Employee '{name}' already exists. Please use a unique name."
            )
        employee.ensure_complete()

        employee.name = name
        self._employees.append(employee)
        logger.debug("Added employee %s", name)
        return employee

    def rename(self, old_name: str, new_name: str) -> Employee:
        """Rename an employee, keeping their preferences and position."""
        employee = self.get(old_name)
        new_name = new_name.strip()
        if not new_name:
            raise InvalidEmployeeError("Employee name cannot be empty.")

        clash = self._find(new_name)
        if clash is not None and clash is not employee:
            raise DuplicateEmployeeError(
                f"The name '{new_name}' already exists. Please choose a unique name."
            )

        logger.debug("Renamed employee %s to %s", employee.name, new_name)
        employee.name = new_name
        return employee

    def remove(self, name: str) -> Employee:
        """Remove and return an employee."""
        employee = self.get(name)
        self._employees.remove(employee)
        logger.debug("Removed employee %s", employee.name)
        return employee

    def snapshot(self) -> list[Employee]:
        """Independent copies of all employees, in roster order."""
        return [e.copy() for e in self._employees]

    def to_dict(self) -> dict:
        return {"employees": [e.to_dict() for e in self._employees]}

    @classmethod
    def from_dict(cls, data: dict) -> "EmployeeRoster":
        """Build a roster from serialized data.

        Raises:
            RosterFormatError: If the data does not describe a roster.
        """
        if isinstance(data, list):
            records = data
        elif isinstance(data, dict):
            records = data.get("employees", [])
        else:
            raise RosterFormatError("Roster data must be an object or a list")

        try:
            employees = [Employee.from_dict(record) for record in records]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RosterFormatError(f"Invalid employee record: {e}") from e

        return cls(employees)

    def save(self, path: Union[str, Path]) -> None:
        """Write the roster to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Saved %d employees to %s", len(self), path)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "EmployeeRoster":
        """Load a roster from a JSON file.

        A missing file yields an empty roster.
        """
        path = Path(path)
        if not path.exists():
            logger.info("No roster at %s, starting with an empty list", path)
            return cls()

        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise RosterFormatError(f"Could not parse {path}: {e}") from e

        roster = cls.from_dict(data)
        logger.info("Loaded %d employees from %s", len(roster), path)
        return roster
