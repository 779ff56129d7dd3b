from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..core.enums import DailyStatusKind
from .strategies.absent_rule import AbsentRule
from .strategies.base import StatusContext, StatusRule
from .strategies.leave_rules import ExcusedLeaveRule, SickLeaveRule
from .strategies.present_rule import PresentRule


def default_rules() -> tuple[StatusRule, ...]:
    # Order is the precedence.
    return (PresentRule(), SickLeaveRule(), ExcusedLeaveRule(), AbsentRule())


@dataclass
class StatusDecisionTable:
    """Ordered rule list: the first matching rule decides the status."""

    rules: Sequence[StatusRule] = field(default_factory=default_rules)

    def decide(self, ctx: StatusContext) -> DailyStatusKind:
        for rule in self.rules:
            if rule.matches(ctx):
                return rule.status
        return DailyStatusKind.ABSENT
