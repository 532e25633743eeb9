from __future__ import annotations

from datetime import date
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from .scenario import Scenario
from .schedule import AvailabilitySchedule


def _upper(value: Any) -> Any:
    return value.upper() if isinstance(value, str) else value


CurrencyCode = Annotated[str, StringConstraints(pattern=r"^[A-Z]{3}$"), BeforeValidator(_upper)]


class ProjectSetup(BaseModel):
    model_config = ConfigDict(frozen=True)

    weekly_available_hours: int = Field(gt=0, description="Base weekly hours when unrestricted")
    hourly_fee: float = Field(ge=0)
    currency: CurrencyCode
    availability_schedule: AvailabilitySchedule | None = None


class EstimateRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    estimated_work_hours: int = Field(ge=0)
    input_scenario: Scenario = Field(
        default=Scenario.best_case,
        validation_alias=AliasChoices("inputScenario", "inputEstimateScenario", "input_scenario"),
    )
    safety_margin: float = Field(ge=0, le=1)
    start_date: date = Field(default_factory=date.today)
    currency: CurrencyCode
    hourly_fee: float = Field(ge=0)
    weekly_available_hours: int = Field(gt=0)
    availability_schedule: AvailabilitySchedule | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "availabilitySchedule", "availabilityRestrictions", "availability_schedule"
        ),
    )

    @property
    def setup(self) -> ProjectSetup:
        return ProjectSetup(
            weekly_available_hours=self.weekly_available_hours,
            hourly_fee=self.hourly_fee,
            currency=self.currency,
            availability_schedule=self.availability_schedule,
        )


__all__ = ["CurrencyCode", "EstimateRequest", "ProjectSetup"]
