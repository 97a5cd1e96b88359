"""Policy definitions for staffing rules.

Staffing limits are kept separate from the scheduling engine so they can be
tested independently and changed without touching the passes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class StaffingPolicy(ABC):
    """Abstract base class for shift capacity and weekly workload limits."""

    @abstractmethod
    def max_per_shift(self) -> int:
        """Maximum employees assigned to a single day/shift cell."""
        pass

    @abstractmethod
    def max_days_per_week(self) -> int:
        """Maximum distinct days an employee may work in the week."""
        pass


@dataclass
class DefaultStaffingPolicy(StaffingPolicy):
    """Default staffing policy implementation.

    - At most 2 employees per shift
    - At most 5 working days per employee per week
    """

    shift_capacity: int = 2
    weekly_days: int = 5

    def __post_init__(self):
        if self.shift_capacity < 1:
            raise ValueError("shift_capacity must be at least 1")
        if not 1 <= self.weekly_days <= 7:
            raise ValueError("weekly_days must be between 1 and 7")

    def max_per_shift(self) -> int:
        return self.shift_capacity

    def max_days_per_week(self) -> int:
        return self.weekly_days
