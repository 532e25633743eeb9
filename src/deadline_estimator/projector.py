from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from fractions import Fraction
from typing import Iterable

from .models.scenario import RestrictionDirection

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def _days_at_rate(work_hours: int | Fraction, weekly_hours: int) -> int:
    return math.ceil(Fraction(work_hours) * DAYS_PER_WEEK / weekly_hours)


class ScenarioProjector:
    """Projects the completion date of a block of work hours.

    Days are counted inclusively: the start date is itself a working day, so
    work that needs exactly one week at the base rate finishes six days after
    it starts. Hour and day arithmetic is exact.
    """

    def __init__(self, *, base_hours_per_week: int) -> None:
        if base_hours_per_week <= 0:
            raise ValueError(f"base_hours_per_week must be positive, got {base_hours_per_week}")
        self._base_hours_per_week = base_hours_per_week

    @property
    def base_hours_per_week(self) -> int:
        return self._base_hours_per_week

    def project(
        self,
        work_hours: int,
        start_date: date,
        breakpoints: Iterable[tuple[date, int]] = (),
        direction: RestrictionDirection | str = RestrictionDirection.start,
    ) -> date | None:
        """Return the completion date, or None if the work never completes.

        ``breakpoints`` are ``(date, hours_per_week)`` pairs in increasing date
        order. Work of zero hours or less completes on ``start_date``.
        """
        if work_hours <= 0:
            return start_date
        direction = RestrictionDirection(direction)
        breakpoints = list(breakpoints)
        if not breakpoints:
            deadline = self._finish_from(start_date, work_hours, self._base_hours_per_week)
        elif direction is RestrictionDirection.start:
            deadline = self._project_with_start_restriction(work_hours, start_date, breakpoints)
        else:
            deadline = self._project_with_end_restriction(work_hours, start_date, breakpoints)

        logger.debug(
            "Projected deadline",
            extra={
                "work_hours": work_hours,
                "start_date": start_date.isoformat(),
                "direction": direction.value if breakpoints else None,
                "breakpoints": len(breakpoints),
                "deadline": deadline.isoformat() if deadline else None,
            },
        )
        return deadline

    def _finish_from(
        self,
        date_index: date,
        remaining_hours: int | Fraction,
        weekly_hours: int,
    ) -> date | None:
        if weekly_hours <= 0:
            return None
        return date_index + timedelta(days=_days_at_rate(remaining_hours, weekly_hours) - 1)

    def _project_with_start_restriction(
        self,
        work_hours: int,
        start_date: date,
        breakpoints: list[tuple[date, int]],
    ) -> date | None:
        total_worked_hours = 0
        date_index = start_date
        last_weekly_hours = self._base_hours_per_week
        for restriction_start, restricted_weekly_hours in breakpoints:
            if restriction_start > date_index:
                # the breakpoint day itself belongs to the new rate
                days = (restriction_start - date_index).days - 1
                total_worked_hours += days * last_weekly_hours // DAYS_PER_WEEK
            else:
                total_worked_hours = 0
            if total_worked_hours >= work_hours:
                # surplus is counted back at the base rate, never past the span start
                surplus_weeks = (total_worked_hours - work_hours) // self._base_hours_per_week
                deadline = restriction_start - timedelta(days=surplus_weeks * DAYS_PER_WEEK)
                return max(deadline, date_index)
            date_index = max(date_index, restriction_start)
            last_weekly_hours = restricted_weekly_hours
        return self._finish_from(date_index, work_hours - total_worked_hours, last_weekly_hours)

    def _project_with_end_restriction(
        self,
        work_hours: int,
        start_date: date,
        breakpoints: list[tuple[date, int]],
    ) -> date | None:
        total_worked_hours = Fraction(0)
        date_index = start_date
        days = 0
        for restriction_end, restricted_weekly_hours in breakpoints:
            if restriction_end > date_index:
                # days accumulates across spans
                days += (restriction_end - date_index).days + 1
                total_worked_hours += Fraction(days, DAYS_PER_WEEK) * restricted_weekly_hours
                date_index = restriction_end
            if total_worked_hours >= work_hours:
                return restriction_end
        return self._finish_from(
            date_index, work_hours - total_worked_hours, self._base_hours_per_week
        )


def project_deadline(
    work_hours: int,
    base_hours_per_week: int,
    start_date: date,
    breakpoints: Iterable[tuple[date, int]] = (),
    direction: RestrictionDirection = RestrictionDirection.start,
) -> date | None:
    projector = ScenarioProjector(base_hours_per_week=base_hours_per_week)
    return projector.project(work_hours, start_date, breakpoints, direction)


__all__ = ["DAYS_PER_WEEK", "ScenarioProjector", "project_deadline"]
