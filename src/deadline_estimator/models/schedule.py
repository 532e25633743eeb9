from __future__ import annotations

from datetime import date
from typing import Any, Iterator, Mapping, Sequence, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..errors import InvalidScheduleError, MissingScenarioDataError
from .scenario import RestrictionDirection, Scenario


class Breakpoint(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    on: date
    hours_per_week: int = Field(ge=0, description="Weekly hours available at this breakpoint")


BreakpointsInput = Union[Mapping[Any, int], Sequence[Union[Breakpoint, Mapping[str, Any]]]]


class AvailabilitySchedule(BaseModel):
    """Weekly availability restrictions for the best and worst case.

    Each sequence must be strictly increasing by date. A JSON object of
    ``{"YYYY-MM-DD": hours}`` is accepted in place of a list and keeps its
    key order, so an unordered object is rejected rather than sorted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    direction: RestrictionDirection = Field(validation_alias=AliasChoices("direction", "type"))
    best_case: tuple[Breakpoint, ...] = ()
    worst_case: tuple[Breakpoint, ...] = ()

    @field_validator("best_case", "worst_case", mode="before")
    @classmethod
    def coerce_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return [{"on": on, "hours_per_week": hours} for on, hours in value.items()]
        return value

    @model_validator(mode="after")
    def check_ordering(self) -> "AvailabilitySchedule":
        for scenario, breakpoints in (
            (Scenario.best_case, self.best_case),
            (Scenario.worst_case, self.worst_case),
        ):
            for previous, current in zip(breakpoints, breakpoints[1:]):
                if current.on <= previous.on:
                    raise InvalidScheduleError(
                        f"{scenario.value} breakpoint dates must be strictly increasing: "
                        f"{current.on.isoformat()} follows {previous.on.isoformat()}"
                    )
        return self

    @classmethod
    def build(
        cls,
        direction: RestrictionDirection | str,
        *,
        best_case: BreakpointsInput = (),
        worst_case: BreakpointsInput = (),
    ) -> "AvailabilitySchedule":
        return cls.model_validate(
            {"direction": direction, "best_case": best_case, "worst_case": worst_case}
        )

    def breakpoints_for(self, scenario: Scenario) -> tuple[Breakpoint, ...]:
        if scenario is Scenario.best_case:
            return self.best_case
        if scenario is Scenario.worst_case:
            return self.worst_case
        raise MissingScenarioDataError(f"Availability schedules have no {scenario.value} breakpoints")

    def iter_breakpoints(self, scenario: Scenario) -> Iterator[tuple[date, int]]:
        for point in self.breakpoints_for(scenario):
            yield point.on, point.hours_per_week


__all__ = ["AvailabilitySchedule", "Breakpoint", "BreakpointsInput"]
