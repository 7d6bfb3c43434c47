from __future__ import annotations

from flask import jsonify

from ..core.enums import ErrorKind
from ..core.result import OperationResult

STATUS_BY_KIND = {
    ErrorKind.DUPLICATE_KEY: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_FORMAT: 400,
    ErrorKind.MISSING_INPUT: 400,
    ErrorKind.BACKING_STORE_FAILURE: 500,
}


def json_result(result: OperationResult):
    status = 200 if result.success else STATUS_BY_KIND.get(result.error_kind, 500)
    return jsonify(result.to_dict()), status


def json_error(kind: ErrorKind, message: str):
    return json_result(OperationResult.fail(kind, message))
