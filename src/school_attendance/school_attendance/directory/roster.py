from __future__ import annotations

from typing import Iterable

from ..core.constants import ADMIN_ROLES
from .model import Person


def operational_roster(people: Iterable[Person]) -> list[Person]:
    """Staff whose attendance is tracked (administrative accounts excluded)."""
    return [p for p in people if p.role not in ADMIN_ROLES]
