from __future__ import annotations

import logging
import math
from datetime import date
from fractions import Fraction
from typing import Callable, Mapping

from .errors import MissingScenarioDataError, UnsupportedScenarioError
from .models.estimate import Estimate, WorkHours
from .models.project import EstimateRequest, ProjectSetup
from .models.scenario import Scenario
from .projector import ScenarioProjector

logger = logging.getLogger(__name__)


def derive_work_hours(
    estimated_work_hours: int,
    input_scenario: Scenario | str,
    safety_margin: float,
) -> WorkHours:
    """Spread one hour estimate into best, realistic and worst case hours.

    The realistic case adds one safety margin to the best case and the worst
    case adds two. Fractional hours are dropped; the margin is taken at its
    decimal value so 10 hours less 90% leaves 1 hour, not 0.
    """
    if not 0 <= safety_margin <= 1:
        raise ValueError(f"safety_margin must be within [0, 1], got {safety_margin}")
    input_scenario = Scenario(input_scenario)
    margin = Fraction(str(safety_margin))
    if input_scenario is Scenario.best_case:
        best_case = estimated_work_hours
        realistic = math.floor(best_case * (1 + margin))
        worst_case = math.floor(best_case * (1 + 2 * margin))
    elif input_scenario is Scenario.realistic:
        realistic = estimated_work_hours
        best_case = math.floor(realistic * (1 - margin))
        worst_case = math.floor(realistic * (1 + 2 * margin))
    else:
        raise UnsupportedScenarioError(
            f"Estimates cannot be derived from a {input_scenario.value} input scenario"
        )
    return WorkHours(best_case=best_case, worst_case=worst_case, realistic=realistic)


def _midpoint(first: date | None, second: date | None) -> date | None:
    if first is None or second is None:
        return None
    return date.fromordinal(-(-(first.toordinal() + second.toordinal()) // 2))


def _require(work_hours: Mapping[Scenario, int], scenario: Scenario) -> int:
    try:
        return work_hours[scenario]
    except KeyError:
        raise MissingScenarioDataError(
            f"{scenario.value} scenario missing from work hours"
        ) from None


class EstimateCalculator:
    def __init__(
        self,
        *,
        projector_factory: Callable[..., ScenarioProjector] = ScenarioProjector,
    ) -> None:
        self._projector_factory = projector_factory

    def estimate(self, request: EstimateRequest) -> dict[Scenario, Estimate]:
        return self.compute(
            request.estimated_work_hours,
            request.input_scenario,
            request.safety_margin,
            request.setup,
            request.start_date,
        )

    def compute(
        self,
        estimated_work_hours: int,
        input_scenario: Scenario | str,
        safety_margin: float,
        setup: ProjectSetup,
        start_date: date | None = None,
    ) -> dict[Scenario, Estimate]:
        start_date = start_date or date.today()
        work_hours = derive_work_hours(estimated_work_hours, input_scenario, safety_margin)
        estimates = self.estimates_from_hours(work_hours.as_mapping(), setup, start_date)
        logger.info(
            "Computed estimates",
            extra={
                "input_scenario": Scenario(input_scenario).value,
                "start_date": start_date.isoformat(),
                "work_hours": work_hours.model_dump(),
                "scheduled": setup.availability_schedule is not None,
            },
        )
        return estimates

    def estimates_from_hours(
        self,
        work_hours: Mapping[Scenario, int],
        setup: ProjectSetup,
        start_date: date,
    ) -> dict[Scenario, Estimate]:
        best_case = _require(work_hours, Scenario.best_case)
        worst_case = _require(work_hours, Scenario.worst_case)
        realistic = _require(work_hours, Scenario.realistic)
        fee_margin = (worst_case - realistic) * setup.hourly_fee
        deadlines = self.deadlines(best_case, worst_case, start_date, setup)

        return {
            scenario: Estimate(
                work_hours=hours,
                deadline=deadlines[scenario],
                fee=hours * setup.hourly_fee,
                fee_margin=fee_margin,
                currency=setup.currency,
            )
            for scenario, hours in (
                (Scenario.best_case, best_case),
                (Scenario.worst_case, worst_case),
                (Scenario.realistic, realistic),
            )
        }

    def deadlines(
        self,
        best_case_hours: int,
        worst_case_hours: int,
        start_date: date,
        setup: ProjectSetup,
    ) -> dict[Scenario, date | None]:
        """Project best and worst case deadlines and derive the realistic one.

        With a schedule the realistic deadline is the midpoint of the other
        two, rounded up to the later day. Without one it is projected from
        the mean of best and worst case hours, rounded up.
        """
        projector = self._projector_factory(base_hours_per_week=setup.weekly_available_hours)
        schedule = setup.availability_schedule
        if schedule is None:
            realistic_hours = -(-(best_case_hours + worst_case_hours) // 2)
            return {
                Scenario.best_case: projector.project(best_case_hours, start_date),
                Scenario.worst_case: projector.project(worst_case_hours, start_date),
                Scenario.realistic: projector.project(realistic_hours, start_date),
            }

        best_case_deadline = projector.project(
            best_case_hours,
            start_date,
            schedule.iter_breakpoints(Scenario.best_case),
            schedule.direction,
        )
        worst_case_deadline = projector.project(
            worst_case_hours,
            start_date,
            schedule.iter_breakpoints(Scenario.worst_case),
            schedule.direction,
        )
        return {
            Scenario.best_case: best_case_deadline,
            Scenario.worst_case: worst_case_deadline,
            Scenario.realistic: _midpoint(best_case_deadline, worst_case_deadline),
        }


__all__ = ["EstimateCalculator", "derive_work_hours"]
