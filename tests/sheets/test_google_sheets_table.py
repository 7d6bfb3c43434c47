from __future__ import annotations

import pytest
from googleapiclient.errors import HttpError
from httplib2 import Response

from employee_records.core.exceptions import BackingStoreError
from employee_records.sheets.google_sheets_table import GoogleSheetsTabularStore, column_letter


class FakeRequest:
    def __init__(self, response=None, error=None):
        self._response = response if response is not None else {}
        self._error = error

    def execute(self):
        if self._error is not None:
            raise self._error
        return self._response


class FakeSheetsService:
    """Records every call; responses are looked up by method name."""

    def __init__(self, responses=None, sheets=("Employees",)):
        self.calls = []
        self.responses = dict(responses or {})
        self.sheets = [{"properties": {"title": t, "sheetId": 100 + i}} for i, t in enumerate(sheets)]

    def _request(self, name, kwargs):
        self.calls.append((name, kwargs))
        response = self.responses.get(name, {})
        if isinstance(response, Exception):
            return FakeRequest(error=response)
        return FakeRequest(response)

    def spreadsheets(self):
        return self

    def values(self):
        return FakeValues(self)

    def get(self, **kwargs):
        self.calls.append(("spreadsheets.get", kwargs))
        return FakeRequest({"sheets": self.sheets})

    def batchUpdate(self, **kwargs):
        return self._request("batchUpdate", kwargs)


class FakeValues:
    def __init__(self, service):
        self._service = service

    def get(self, **kwargs):
        return self._service._request("values.get", kwargs)

    def update(self, **kwargs):
        return self._service._request("values.update", kwargs)

    def clear(self, **kwargs):
        return self._service._request("values.clear", kwargs)


def _store(service):
    return GoogleSheetsTabularStore(service, spreadsheet_id="sheet-1", sheet_name="Employees", num_cols=8)


def _calls(service, name):
    return [kw for n, kw in service.calls if n == name]


@pytest.mark.parametrize("col, letters", [(1, "A"), (8, "H"), (26, "Z"), (27, "AA"), (52, "AZ"), (53, "BA")])
def test_column_letter(col, letters):
    assert column_letter(col) == letters


def test_get_values_pads_trimmed_rows():
    service = FakeSheetsService(responses={"values.get": {"values": [["E1", "Ann"]]}})

    values = _store(service).get_values(2, 1, 2, 3)

    assert values == [["E1", "Ann", ""], ["", "", ""]]
    assert _calls(service, "values.get")[0]["range"] == "'Employees'!A2:C3"


def test_set_values_writes_raw_block():
    service = FakeSheetsService()

    _store(service).set_values(1, 1, [["a", "b"]])

    call = _calls(service, "values.update")[0]
    assert call["range"] == "'Employees'!A1:B1"
    assert call["valueInputOption"] == "RAW"
    assert call["body"] == {"values": [["a", "b"]]}


def test_last_row_counts_returned_rows():
    service = FakeSheetsService(responses={"values.get": {"values": [["h"], ["E1"], ["E2"]]}})

    assert _store(service).last_row() == 3
    assert _calls(service, "values.get")[0]["range"] == "'Employees'!A:H"


def test_append_row_writes_after_last_row():
    service = FakeSheetsService(responses={"values.get": {"values": [["h"], ["E1"]]}})

    _store(service).append_row(["E2", "Bob"])

    assert _calls(service, "values.update")[0]["range"] == "'Employees'!A3:B3"


def test_delete_row_uses_zero_based_dimension_range():
    service = FakeSheetsService()

    _store(service).delete_row(5)

    request = _calls(service, "batchUpdate")[0]["body"]["requests"][0]["deleteDimension"]["range"]
    assert request == {"sheetId": 100, "dimension": "ROWS", "startIndex": 4, "endIndex": 5}


def test_missing_worksheet_is_created():
    service = FakeSheetsService(
        sheets=("Other",),
        responses={"batchUpdate": {"replies": [{"addSheet": {"properties": {"sheetId": 7}}}]}},
    )

    _store(service).clear(2, 1, 1, 8)

    add = _calls(service, "batchUpdate")[0]["body"]["requests"][0]["addSheet"]
    assert add == {"properties": {"title": "Employees"}}
    assert _calls(service, "values.clear")[0]["range"] == "'Employees'!A2:H2"


def test_format_header_styles_first_row():
    service = FakeSheetsService()

    _store(service).format_header(8)

    requests = _calls(service, "batchUpdate")[0]["body"]["requests"]
    repeat = requests[0]["repeatCell"]
    assert repeat["range"]["endRowIndex"] == 1
    assert repeat["range"]["endColumnIndex"] == 8
    assert repeat["cell"]["userEnteredFormat"]["textFormat"] == {"bold": True}
    assert "updateBorders" in requests[1]


def test_http_errors_become_backing_store_errors():
    error = HttpError(Response({"status": "403"}), b'{"error": {"message": "forbidden"}}')
    service = FakeSheetsService(responses={"values.get": error})

    with pytest.raises(BackingStoreError):
        _store(service).last_row()


def test_sheet_name_quotes_are_doubled_in_ranges():
    service = FakeSheetsService(
        sheets=("Bob's",),
        responses={"values.get": {"values": [["h"], ["E1"]]}},
    )
    store = GoogleSheetsTabularStore(service, spreadsheet_id="sheet-1", sheet_name="Bob's", num_cols=8)

    assert store.last_row() == 2
    store.get_values(2, 1, 1, 8)

    ranges = [kw["range"] for kw in _calls(service, "values.get")]
    assert ranges == ["'Bob''s'!A:H", "'Bob''s'!A2:H2"]
