from __future__ import annotations

from enum import Enum


class Scenario(str, Enum):
    best_case = "BEST_CASE"
    worst_case = "WORST_CASE"
    realistic = "REALISTIC"


class RestrictionDirection(str, Enum):
    """How breakpoint dates relate to the base weekly rate.

    START: the base rate applies until the first breakpoint, each breakpoint's
    rate applies from its date onwards.
    END: each breakpoint's rate applies up to and including its date, the base
    rate resumes after the last breakpoint.
    """

    start = "START"
    end = "END"


__all__ = ["RestrictionDirection", "Scenario"]
