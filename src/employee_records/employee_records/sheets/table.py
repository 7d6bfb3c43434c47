from __future__ import annotations

from typing import Any, Protocol, Sequence


class TabularStore(Protocol):
    """Giao diện cho bảng dữ liệu dạng bảng tính (spreadsheet-like).

    Rows and columns are 1-based; row 1 holds the headers. Implementations
    raise ``BackingStoreError`` on I/O failures.
    """

    def get_values(self, row: int, col: int, num_rows: int, num_cols: int) -> list[list[Any]]:
        """Return a ``num_rows`` x ``num_cols`` block; short or missing cells may be omitted."""
        raise NotImplementedError

    def set_values(self, row: int, col: int, values: Sequence[Sequence[Any]]) -> None:
        raise NotImplementedError

    def clear(self, row: int, col: int, num_rows: int, num_cols: int) -> None:
        raise NotImplementedError

    def append_row(self, values: Sequence[Any]) -> None:
        """Write ``values`` into the row after the last populated one."""
        raise NotImplementedError

    def delete_row(self, row: int) -> None:
        """Remove ``row`` and shift every following row up by one."""
        raise NotImplementedError

    def last_row(self) -> int:
        """Index of the last populated row, 0 for an empty table."""
        raise NotImplementedError

    def format_header(self, num_cols: int) -> None:
        """Apply bold/border/background to the header row. Cosmetic only."""
        raise NotImplementedError
