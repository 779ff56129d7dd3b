from __future__ import annotations

from typing import Protocol, Sequence


class DirectoryRepository(Protocol):
    """Giao diện nguồn danh bạ (bảng tính đã xuất bản).

    Lưu ý: trả về các dòng thô đã parse; lỗi truyền tải được ném ra dưới dạng SourceError.
    """

    def fetch_rows(self) -> Sequence[dict[str, str]]:
        raise NotImplementedError
