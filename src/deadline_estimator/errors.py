from __future__ import annotations


class EstimationError(Exception):
    """Base class for failures of a single estimate calculation."""


class InvalidScheduleError(EstimationError):
    """Breakpoint dates are not strictly increasing."""


class UnsupportedScenarioError(EstimationError, NotImplementedError):
    """The requested input scenario cannot be used to derive estimates."""


class MissingScenarioDataError(EstimationError, LookupError):
    """A scenario required by the calculation has no data."""


__all__ = [
    "EstimationError",
    "InvalidScheduleError",
    "MissingScenarioDataError",
    "UnsupportedScenarioError",
]
