from __future__ import annotations

from datetime import date
from typing import Any, Mapping

from .formatting import format_money
from .models.estimate import Estimate
from .models.scenario import Scenario

SCENARIO_LABELS: Mapping[Scenario, str] = {
    Scenario.best_case: "Best case:",
    Scenario.worst_case: "Worst case:",
    Scenario.realistic: "Realistic:",
}


def render_report(start_date: date, estimates: Mapping[Scenario, Estimate]) -> str:
    lines = [
        "Start date:",
        f"\t\t{start_date.isoformat()}",
        "Estimates:",
    ]
    for scenario, label in SCENARIO_LABELS.items():
        estimate = estimates.get(scenario)
        if estimate is None:
            continue
        deadline = estimate.deadline.isoformat() if estimate.deadline else "not reachable"
        lines.append(f"\t\t{label:<12}{estimate.work_hours}hr, done by {deadline}")

    realistic = estimates.get(Scenario.realistic)
    if realistic is not None:
        fee = format_money(realistic.fee, realistic.currency)
        margin = format_money(realistic.fee_margin, realistic.currency)
        lines.extend(["Fee:", f"\t\t{fee} ±{margin}"])
    return "\n".join(lines)


def estimates_to_dict(estimates: Mapping[Scenario, Estimate]) -> dict[str, dict[str, Any]]:
    return {scenario.value: estimate.model_dump(mode="json") for scenario, estimate in estimates.items()}


__all__ = ["SCENARIO_LABELS", "estimates_to_dict", "render_report"]
