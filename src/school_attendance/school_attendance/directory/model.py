from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Person:
    """Thực thể miền (domain): nhân sự trong danh bạ.

    Lưu ý: NIP là khoá nối duy nhất giữa danh bạ và mọi bản ghi khác.
    """

    nip: str
    name: str
    role: str
    school: str = ""
    employment_status: str = ""
    username: str = ""
    avatar: Optional[str] = None
