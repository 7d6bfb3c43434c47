from __future__ import annotations

import pytest

from employee_records.core.constants import EMPLOYEE_HEADERS
from employee_records.employees.schema import ensure_headers, headers_match

from conftest import FakeTable


def test_correct_headers_cause_no_writes():
    table = FakeTable([list(EMPLOYEE_HEADERS), ["E1", "Ann"]])

    assert ensure_headers(table) is False
    assert table.writes == []
    assert table.formatted == 0


def test_enforcement_is_idempotent():
    table = FakeTable([["ID", "Name"], ["E1", "Ann", "Lee"]])

    assert ensure_headers(table) is True
    first = list(table.rows[0])
    writes_after_first = len(table.writes)

    assert ensure_headers(table) is False
    assert table.rows[0] == first == list(EMPLOYEE_HEADERS)
    assert len(table.writes) == writes_after_first
    assert table.rows[1] == ["E1", "Ann", "Lee"]


def test_empty_table_gets_headers():
    table = FakeTable()

    assert ensure_headers(table) is True
    assert table.rows == [list(EMPLOYEE_HEADERS)]
    assert table.formatted == 1


@pytest.mark.parametrize(
    "current",
    [
        list(EMPLOYEE_HEADERS[:7]),
        ["Employee ID", "First", "Last Name", "Phone", "Email", "Position", "Note", "Photo ID"],
        [],
    ],
)
def test_mismatches_are_detected(current):
    assert headers_match(current) is False


def test_extra_columns_beyond_schema_are_ignored():
    assert headers_match(list(EMPLOYEE_HEADERS) + ["Extra"]) is True
