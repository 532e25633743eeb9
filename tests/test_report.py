import json
from datetime import date

import pytest

from deadline_estimator.calculator import EstimateCalculator
from deadline_estimator.formatting import format_money
from deadline_estimator.models.estimate import Estimate
from deadline_estimator.models.project import ProjectSetup
from deadline_estimator.models.scenario import RestrictionDirection, Scenario
from deadline_estimator.models.schedule import AvailabilitySchedule
from deadline_estimator.report import estimates_to_dict, render_report


@pytest.mark.parametrize(
    "amount,currency,expected",
    [
        (1365.0, "GBP", "£1,365"),
        (12.5, "GBP", "£12.5"),
        (1234.567, "USD", "$1,234.57"),
        (0.005, "EUR", "€0.01"),
        (420, "jpy", "¥420"),
        (10, "CHF", "CHF 10"),
        (-5, "GBP", "-£5"),
    ],
)
def test_format_money(amount, currency, expected):
    assert format_money(amount, currency) == expected


def compute_end_restricted():
    setup = ProjectSetup(
        weekly_available_hours=30,
        hourly_fee=35.0,
        currency="GBP",
        availability_schedule=AvailabilitySchedule.build(
            RestrictionDirection.end,
            best_case={date(2020, 3, 29): 10},
            worst_case={date(2020, 4, 5): 10},
        ),
    )
    return EstimateCalculator().compute(39, Scenario.best_case, 0.3, setup, date(2020, 3, 16))


def test_render_report():
    report = render_report(date(2020, 3, 16), compute_end_restricted())

    assert report.splitlines() == [
        "Start date:",
        "\t\t2020-03-16",
        "Estimates:",
        "\t\tBest case:  39hr, done by 2020-04-02",
        "\t\tWorst case: 62hr, done by 2020-04-12",
        "\t\tRealistic:  50hr, done by 2020-04-07",
        "Fee:",
        "\t\t£1,750 ±£420",
    ]


def test_render_report_with_unreachable_deadline():
    estimates = {
        Scenario.best_case: Estimate(work_hours=10, deadline=None, fee=100, fee_margin=0, currency="GBP"),
    }
    report = render_report(date(2020, 3, 16), estimates)

    assert "\t\tBest case:  10hr, done by not reachable" in report
    assert "Fee:" not in report


def test_estimates_to_dict_is_json_ready():
    payload = estimates_to_dict(compute_end_restricted())

    assert set(payload) == {"BEST_CASE", "WORST_CASE", "REALISTIC"}
    assert payload["REALISTIC"]["deadline"] == "2020-04-07"
    assert payload["WORST_CASE"]["fee_margin"] == 420.0
    json.dumps(payload)
