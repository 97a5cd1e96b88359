"""Exceptions raised when scheduling inputs break a precondition."""


class SchedulingError(Exception):
    """Base class for rejected scheduling inputs."""


class EmptyRosterError(SchedulingError):
    """No employees were supplied to a scheduling run."""


class IncompletePreferencesError(SchedulingError):
    """An employee is missing a rank or has one outside the allowed range."""


class InvalidEmployeeError(SchedulingError):
    """An employee record is unusable (e.g. empty name)."""


class DuplicateEmployeeError(SchedulingError):
    """Two employees share a name, compared case-insensitively."""


class EmployeeNotFoundError(SchedulingError):
    """No employee with the given name exists in the roster."""


class RosterFormatError(SchedulingError):
    """A stored roster file could not be parsed."""


class EmptyScheduleError(SchedulingError):
    """A schedule with no assignments was handed to an exporter."""
