import json
from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from deadline_estimator.errors import InvalidScheduleError
from deadline_estimator.models.scenario import RestrictionDirection, Scenario
from deadline_estimator.project_repository import LocalProjectRepository

DATA_DIR = Path(__file__).resolve().parent.parent / "data" / "projects"


def test_loads_project_with_schedule():
    request = LocalProjectRepository(base_path=DATA_DIR).get("end-restricted.json")

    assert request.estimated_work_hours == 39
    assert request.input_scenario is Scenario.best_case
    assert request.start_date == date(2020, 3, 16)
    assert request.setup.weekly_available_hours == 30
    assert request.setup.availability_schedule.direction is RestrictionDirection.end


def test_legacy_input_format_is_equivalent():
    repository = LocalProjectRepository(base_path=DATA_DIR)
    assert repository.get("legacy-restrictions.json") == repository.get("end-restricted.json")


def test_project_without_schedule():
    request = LocalProjectRepository(base_path=DATA_DIR).get(DATA_DIR / "unrestricted.json")
    assert request.availability_schedule is None
    assert request.setup.currency == "USD"


def test_unordered_schedule_is_rejected():
    with pytest.raises(InvalidScheduleError):
        LocalProjectRepository(base_path=DATA_DIR).get("unordered-schedule.json")


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        LocalProjectRepository(base_path=DATA_DIR).get("does-not-exist.json")


def test_invalid_fields_fail_validation(tmp_path):
    payload = json.loads((DATA_DIR / "unrestricted.json").read_text(encoding="utf-8"))
    payload["safetyMargin"] = 1.5
    (tmp_path / "project.json").write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ValidationError):
        LocalProjectRepository(base_path=tmp_path).get("project.json")
