from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from .scenario import Scenario


class WorkHours(BaseModel):
    model_config = ConfigDict(frozen=True)

    best_case: int
    worst_case: int
    realistic: int

    def as_mapping(self) -> dict[Scenario, int]:
        return {
            Scenario.best_case: self.best_case,
            Scenario.worst_case: self.worst_case,
            Scenario.realistic: self.realistic,
        }


class Estimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    work_hours: int = Field(description="Uninterrupted hours the work would take")
    deadline: date | None = Field(default=None, description="Completion date, None when never reached")
    fee: float
    fee_margin: float = Field(
        description="Worst case minus realistic fee; the realistic fee reads as fee ± fee_margin"
    )
    currency: str


__all__ = ["Estimate", "WorkHours"]
