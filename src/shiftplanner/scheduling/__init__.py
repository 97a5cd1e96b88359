"""Scheduling engine for generating weekly shift grids."""

from shiftplanner.scheduling.priority_assigner import PriorityAssigner
from shiftplanner.scheduling.scheduler import ScheduleOrchestrator
from shiftplanner.scheduling.slot_filler import SlotFiller

__all__ = [
    "ScheduleOrchestrator",
    # Passes
    "PriorityAssigner",
    "SlotFiller",
]
