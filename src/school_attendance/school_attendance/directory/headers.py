"""Map spreadsheet column labels to canonical roster field names."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]")

# Keys are compared after lowercasing and stripping non-alphanumerics.
HEADER_SYNONYMS: tuple[tuple[str, frozenset[str]], ...] = (
    ("Username", frozenset({"username", "user", "id", "user_name"})),
    ("Password", frozenset({"password", "pass", "sandi", "katasandi", "pin"})),
    ("Nama", frozenset({"nama", "name", "namalengkap", "fullname", "nama_lengkap"})),
    ("NIP", frozenset({"nip", "nomorinduk", "idpegawai"})),
    ("Role", frozenset({"role", "peran", "jabatan", "level", "akses"})),
    ("Sekolah", frozenset({"sekolah", "school", "unitkerja", "instansi"})),
    ("Status", frozenset({"status", "statuspegawai", "kepegawaian"})),
    ("Avatar", frozenset({"avatar", "foto", "photo", "gambar", "urlfoto"})),
)


def normalize_header(label: str) -> str:
    key = _NON_ALNUM.sub("", label.lower())
    for canonical, synonyms in HEADER_SYNONYMS:
        if key in synonyms:
            return canonical
    return label
