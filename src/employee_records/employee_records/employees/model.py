from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Sequence

from ..core.constants import NUM_COLUMNS

_JSON_KEYS = {
    "emp_id": "empId",
    "first_name": "firstName",
    "last_name": "lastName",
    "phone": "phone",
    "email": "email",
    "position": "position",
    "note": "note",
    "photo_id": "photoId",
}


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Employee.

    Field order is the column order of the backing table.
    """

    emp_id: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    email: str = ""
    position: str = ""
    note: str = ""
    photo_id: str = ""

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Employee":
        cells = [_cell(v) for v in list(row)[:NUM_COLUMNS]]
        cells += [""] * (NUM_COLUMNS - len(cells))
        return cls(*cells)

    def to_row(self) -> list[str]:
        return [_cell(getattr(self, f.name)) for f in fields(self)]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        """Build from a camelCase dict as sent by the UI (snake_case also accepted)."""
        values = {}
        for attr, key in _JSON_KEYS.items():
            value = data.get(key, data.get(attr))
            values[attr] = _cell(value)
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return {key: getattr(self, attr) for attr, key in _JSON_KEYS.items()}
