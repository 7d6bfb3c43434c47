from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..core.constants import HEADER_BACKGROUND, HEADER_ROW
from ..google.services import execute
from .table import TabularStore

logger = logging.getLogger(__name__)


def column_letter(col: int) -> str:
    """1 -> A, 26 -> Z, 27 -> AA."""
    if col < 1:
        raise ValueError(f"Invalid column index: {col}")
    letters = ""
    while col:
        col, rem = divmod(col - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def _hex_to_rgb(color: str) -> dict:
    color = color.lstrip("#")
    r, g, b = (int(color[i : i + 2], 16) / 255 for i in (0, 2, 4))
    return {"red": r, "green": g, "blue": b}


class GoogleSheetsTabularStore(TabularStore):
    """One worksheet of a Google spreadsheet, through the Sheets v4 API.

    The worksheet is created on first use when the spreadsheet has no tab
    named ``sheet_name``.
    """

    def __init__(self, service, *, spreadsheet_id: str, sheet_name: str, num_cols: int):
        self._service = service
        self._spreadsheet_id = spreadsheet_id
        self._sheet_name = sheet_name
        self._num_cols = int(num_cols)
        self._sheet_id: Optional[int] = None

    def _quoted_name(self) -> str:
        # A1 notation escapes a quote inside a quoted sheet name by doubling it.
        return "'" + self._sheet_name.replace("'", "''") + "'"

    def _a1(self, row: int, col: int, num_rows: int, num_cols: int) -> str:
        start = f"{column_letter(col)}{row}"
        end = f"{column_letter(col + num_cols - 1)}{row + num_rows - 1}"
        return f"{self._quoted_name()}!{start}:{end}"

    def _values(self):
        return self._service.spreadsheets().values()

    def _ensure_sheet_id(self) -> int:
        if self._sheet_id is not None:
            return self._sheet_id

        meta = execute(
            self._service.spreadsheets().get(spreadsheetId=self._spreadsheet_id, fields="sheets.properties"),
            action="Read spreadsheet metadata",
        )
        for sheet in meta.get("sheets", []):
            props = sheet.get("properties", {})
            if props.get("title") == self._sheet_name:
                self._sheet_id = int(props.get("sheetId", 0))
                return self._sheet_id

        reply = execute(
            self._service.spreadsheets().batchUpdate(
                spreadsheetId=self._spreadsheet_id,
                body={"requests": [{"addSheet": {"properties": {"title": self._sheet_name}}}]},
            ),
            action="Create worksheet",
        )
        self._sheet_id = int(reply["replies"][0]["addSheet"]["properties"]["sheetId"])
        logger.info("created worksheet %r in spreadsheet %s", self._sheet_name, self._spreadsheet_id)
        return self._sheet_id

    def get_values(self, row: int, col: int, num_rows: int, num_cols: int) -> list[list[Any]]:
        if num_rows <= 0:
            return []
        self._ensure_sheet_id()
        result = execute(
            self._values().get(
                spreadsheetId=self._spreadsheet_id,
                range=self._a1(row, col, num_rows, num_cols),
            ),
            action="Read cells",
        )
        values = result.get("values", [])
        # The API trims trailing empty rows and cells.
        values += [[] for _ in range(num_rows - len(values))]
        return [list(r) + [""] * (num_cols - len(r)) for r in values]

    def set_values(self, row: int, col: int, values: Sequence[Sequence[Any]]) -> None:
        if not values:
            return
        self._ensure_sheet_id()
        num_cols = max(len(v) for v in values)
        execute(
            self._values().update(
                spreadsheetId=self._spreadsheet_id,
                range=self._a1(row, col, len(values), num_cols),
                valueInputOption="RAW",
                body={"values": [list(v) for v in values]},
            ),
            action="Write cells",
        )

    def clear(self, row: int, col: int, num_rows: int, num_cols: int) -> None:
        if num_rows <= 0:
            return
        self._ensure_sheet_id()
        execute(
            self._values().clear(
                spreadsheetId=self._spreadsheet_id,
                range=self._a1(row, col, num_rows, num_cols),
                body={},
            ),
            action="Clear cells",
        )

    def append_row(self, values: Sequence[Any]) -> None:
        self.set_values(self.last_row() + 1, 1, [list(values)])

    def delete_row(self, row: int) -> None:
        sheet_id = self._ensure_sheet_id()
        execute(
            self._service.spreadsheets().batchUpdate(
                spreadsheetId=self._spreadsheet_id,
                body={
                    "requests": [
                        {
                            "deleteDimension": {
                                "range": {
                                    "sheetId": sheet_id,
                                    "dimension": "ROWS",
                                    "startIndex": row - 1,
                                    "endIndex": row,
                                }
                            }
                        }
                    ]
                },
            ),
            action="Delete row",
        )

    def last_row(self) -> int:
        self._ensure_sheet_id()
        result = execute(
            self._values().get(
                spreadsheetId=self._spreadsheet_id,
                range=f"{self._quoted_name()}!A:{column_letter(self._num_cols)}",
            ),
            action="Read used range",
        )
        return len(result.get("values", []))

    def format_header(self, num_cols: int) -> None:
        sheet_id = self._ensure_sheet_id()
        grid = {
            "sheetId": sheet_id,
            "startRowIndex": HEADER_ROW - 1,
            "endRowIndex": HEADER_ROW,
            "startColumnIndex": 0,
            "endColumnIndex": num_cols,
        }
        border = {"style": "SOLID"}
        execute(
            self._service.spreadsheets().batchUpdate(
                spreadsheetId=self._spreadsheet_id,
                body={
                    "requests": [
                        {
                            "repeatCell": {
                                "range": grid,
                                "cell": {
                                    "userEnteredFormat": {
                                        "backgroundColor": _hex_to_rgb(HEADER_BACKGROUND),
                                        "textFormat": {"bold": True},
                                    }
                                },
                                "fields": "userEnteredFormat(backgroundColor,textFormat)",
                            }
                        },
                        {
                            "updateBorders": {
                                "range": grid,
                                "top": border,
                                "bottom": border,
                                "left": border,
                                "right": border,
                                "innerVertical": border,
                            }
                        },
                    ]
                },
            ),
            action="Format header",
        )
