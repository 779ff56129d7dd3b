from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import GOOD_PERCENTAGE, WARNING_PERCENTAGE
from ..core.enums import RecapGrade
from ..dashboard.model import AttendancePunch
from ..directory.model import Person
from ..directory.roster import operational_roster
from .calculator.base import RecapCalculator
from .calculator.standard_calculator import StandardRecapCalculator
from .model import MonthlyRecap


def grade_for(percentage: float) -> RecapGrade:
    if percentage >= GOOD_PERCENTAGE:
        return RecapGrade.GOOD
    if percentage >= WARNING_PERCENTAGE:
        return RecapGrade.WARNING
    return RecapGrade.LOW


class MonthlyRecapService:
    def __init__(self, *, calculator: Optional[RecapCalculator] = None):
        self._calculator = calculator or StandardRecapCalculator()

    def build(self, roster: Sequence[Person], attendance: Sequence[AttendancePunch]) -> list[MonthlyRecap]:
        recaps: list[MonthlyRecap] = []
        for person in operational_roster(roster):
            punches = [p for p in attendance if p.nip == person.nip]
            count = self._calculator.present_days(punches)
            pct = self._calculator.percentage(count)
            recaps.append(
                MonthlyRecap(
                    nip=person.nip,
                    name=person.name,
                    present_count=count,
                    percentage=pct,
                    grade=grade_for(pct),
                )
            )
        return recaps
