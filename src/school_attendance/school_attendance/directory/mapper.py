from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from .model import Person

logger = logging.getLogger(__name__)

# Served whenever the roster spreadsheet cannot be fetched.
FALLBACK_ROSTER: tuple[Person, ...] = (
    Person(
        nip="198506122010011005",
        name="Ahmad Suherman, S.Pd",
        role="Guru",
        school="SMPN 1 Padarincang",
        employment_status="PNS / ASN",
        username="guru1",
    ),
    Person(
        nip="197005121995012001",
        name="Hj. Siti Aminah, M.Pd",
        role="Admin",
        school="SMPN 1 Padarincang",
        employment_status="Kepala Sekolah",
        username="admin1",
    ),
)


def _text(row: Mapping[str, object], key: str) -> str:
    value = row.get(key)
    return str(value).strip() if value is not None else ""


def person_from_row(row: Mapping[str, object]) -> Optional[Person]:
    """Adapt one parsed roster row; rows without a NIP are not people."""
    nip = _text(row, "NIP")
    if not nip:
        return None

    username = _text(row, "Username")
    return Person(
        nip=nip,
        name=_text(row, "Nama") or username,
        role=_text(row, "Role"),
        school=_text(row, "Sekolah"),
        employment_status=_text(row, "Status"),
        username=username,
        avatar=_text(row, "Avatar") or None,
    )


def roster_from_rows(rows: Iterable[Mapping[str, object]]) -> list[Person]:
    people: list[Person] = []
    skipped = 0
    for row in rows:
        person = person_from_row(row)
        if person is None:
            skipped += 1
            continue
        people.append(person)
    if skipped:
        logger.warning("Skipped %d roster rows without NIP", skipped)
    return people
